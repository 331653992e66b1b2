"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from skillhub.models import User


class UserCreate(BaseModel):
    """Schema for account registration.

    Required fields are checked by the service so a missing field yields the
    same 400 body as the rest of the API.
    """

    fullname: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    skills: list[str] | None = None


class UserUpdate(BaseModel):
    """Schema for partial profile updates; unset fields stay untouched."""

    fullname: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    skills: list[str] | None = None


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    email: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    """Minimal identity returned after a successful login.

    No session token is issued; clients keep the id.
    """

    id: str
    fullname: str
    email: str


class FollowRequest(BaseModel):
    """Body of a follow request."""

    follow_user_id: str | None = Field(None, alias="followUserID")

    model_config = ConfigDict(populate_by_name=True)


class UnfollowRequest(BaseModel):
    """Body of an unfollow request."""

    unfollow_user_id: str | None = Field(None, alias="unfollowUserID")

    model_config = ConfigDict(populate_by_name=True)


class FollowingResponse(BaseModel):
    """The actor's following list after a follow-graph change."""

    following: list[str]


class UserResponse(BaseModel):
    """Sanitized user record: everything except the password hash."""

    id: str
    fullname: str
    email: str
    phone: str
    skills: list[str]
    following: list[str]
    followers: list[str]
    created_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls.model_validate(user.model_dump(exclude={"password"}))


class UserProfileResponse(UserResponse):
    """Profile view; carries an empty ``password`` placeholder for older clients."""

    password: str = ""
