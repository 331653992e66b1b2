"""Learning progress and learning resource schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProgressCreate(BaseModel):
    """Schema for creating a learning progress plan."""

    skill_title: str | None = None
    description: str | None = None
    field: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    level: str | None = None
    post_owner_id: str | None = Field(None, alias="postOwnerID")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProgressUpdate(BaseModel):
    """Partial update of a learning progress plan; ownership cannot change."""

    skill_title: str | None = None
    description: str | None = None
    field: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    level: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResourceCreate(BaseModel):
    """Schema for sharing a learning resource."""

    title: str | None = None
    description: str | None = None
    content_url: str | None = Field(None, alias="contentURL")
    tags: list[str] | None = None
    post_owner_id: str | None = Field(None, alias="postOwnerID")

    model_config = ConfigDict(populate_by_name=True)


class ResourceUpdate(BaseModel):
    """Partial update of a learning resource."""

    title: str | None = None
    description: str | None = None
    content_url: str | None = Field(None, alias="contentURL")
    tags: list[str] | None = None

    model_config = ConfigDict(populate_by_name=True)
