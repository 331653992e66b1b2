"""CRUD helpers for learning progress plans and learning resources."""
from __future__ import annotations

import logging
from datetime import date

from skillhub.db.ids import new_id
from skillhub.db.store import JsonStore
from skillhub.db.time import newest_first, utcnow
from skillhub.models import LearningProgress, LearningResource
from skillhub.schemas.learning import (
    ProgressCreate,
    ProgressUpdate,
    ResourceCreate,
    ResourceUpdate,
)

from .errors import BadRequestError, NotFoundError, require
from .user_service import get_user_or_404

__all__ = [
    "list_progress",
    "get_progress",
    "create_progress",
    "update_progress",
    "delete_progress",
    "list_resources",
    "get_resource",
    "create_resource",
    "update_resource",
    "delete_resource",
]

logger = logging.getLogger(__name__)

PROGRESS_NOT_FOUND = "Learning progress not found"
RESOURCE_NOT_FOUND = "Learning resource not found"


def _check_date_order(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise BadRequestError("End date cannot be before start date")


# --- Learning progress ----------------------------------------------------------


def list_progress(store: JsonStore, owner_id: str | None = None) -> list[LearningProgress]:
    """Return progress plans newest first, optionally for one owner."""
    with store.snapshot() as doc:
        records = [r for r in doc.learning_progress if owner_id is None or r.post_owner_id == owner_id]
    return newest_first(records, key=lambda r: r.created_at)


def get_progress(store: JsonStore, progress_id: str) -> LearningProgress:
    with store.snapshot() as doc:
        record = doc.find_progress(progress_id)
    if record is None:
        raise NotFoundError(PROGRESS_NOT_FOUND)
    return record


def create_progress(store: JsonStore, data: ProgressCreate) -> LearningProgress:
    """Create a progress plan for an existing user.

    The owner's current name is copied onto the record.

    Raises:
        BadRequestError: If a required field is missing or the dates are reversed
        NotFoundError: If the owner does not exist
    """
    require(
        data.skill_title,
        data.description,
        data.field,
        data.start_date,
        data.end_date,
        data.post_owner_id,
    )
    _check_date_order(data.start_date, data.end_date)
    with store.transaction() as doc:
        owner = get_user_or_404(doc, data.post_owner_id)
        record = LearningProgress(
            id=new_id(),
            skill_title=data.skill_title,
            description=data.description,
            field=data.field,
            start_date=data.start_date,
            end_date=data.end_date,
            level=data.level or "",
            post_owner_id=owner.id,
            post_owner_name=owner.fullname,
        )
        doc.learning_progress.append(record)
    return record


def update_progress(store: JsonStore, progress_id: str, data: ProgressUpdate) -> LearningProgress:
    """Apply a partial update; the merged dates must stay in order.

    Raises:
        NotFoundError: If the record does not exist
        BadRequestError: If the update would put the end date before the start date
    """
    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    with store.transaction() as doc:
        record = doc.find_progress(progress_id)
        if record is None:
            raise NotFoundError(PROGRESS_NOT_FOUND)
        _check_date_order(
            changes.get("start_date", record.start_date),
            changes.get("end_date", record.end_date),
        )
        for key, value in changes.items():
            setattr(record, key, value)
        record.updated_at = utcnow()
    return record


def delete_progress(store: JsonStore, progress_id: str) -> LearningProgress:
    with store.transaction() as doc:
        record = doc.find_progress(progress_id)
        if record is None:
            raise NotFoundError(PROGRESS_NOT_FOUND)
        doc.learning_progress = [r for r in doc.learning_progress if r.id != progress_id]
    return record


# --- Learning resources ---------------------------------------------------------


def list_resources(store: JsonStore, tag: str | None = None) -> list[LearningResource]:
    """Return resources newest first, optionally only those carrying ``tag``."""
    with store.snapshot() as doc:
        records = [r for r in doc.learning_resources if tag is None or tag in r.tags]
    return newest_first(records, key=lambda r: r.created_at)


def get_resource(store: JsonStore, resource_id: str) -> LearningResource:
    with store.snapshot() as doc:
        record = doc.find_resource(resource_id)
    if record is None:
        raise NotFoundError(RESOURCE_NOT_FOUND)
    return record


def create_resource(store: JsonStore, data: ResourceCreate) -> LearningResource:
    """Share a learning resource owned by an existing user.

    Raises:
        BadRequestError: If a required field is missing
        NotFoundError: If the owner does not exist
    """
    require(data.title, data.description, data.content_url, data.post_owner_id)
    with store.transaction() as doc:
        owner = get_user_or_404(doc, data.post_owner_id)
        record = LearningResource(
            id=new_id(),
            title=data.title,
            description=data.description,
            content_url=data.content_url,
            tags=list(data.tags or []),
            post_owner_id=owner.id,
            post_owner_name=owner.fullname,
        )
        doc.learning_resources.append(record)
    logger.info("User %s shared learning resource %s", owner.id, record.id)
    return record


def update_resource(store: JsonStore, resource_id: str, data: ResourceUpdate) -> LearningResource:
    """Overwrite provided fields; empty strings leave a field unchanged."""
    with store.transaction() as doc:
        record = doc.find_resource(resource_id)
        if record is None:
            raise NotFoundError(RESOURCE_NOT_FOUND)
        if data.title:
            record.title = data.title
        if data.description:
            record.description = data.description
        if data.content_url:
            record.content_url = data.content_url
        if data.tags is not None:
            record.tags = list(data.tags)
        record.updated_at = utcnow()
    return record


def delete_resource(store: JsonStore, resource_id: str) -> LearningResource:
    with store.transaction() as doc:
        record = doc.find_resource(resource_id)
        if record is None:
            raise NotFoundError(RESOURCE_NOT_FOUND)
        doc.learning_resources = [r for r in doc.learning_resources if r.id != resource_id]
    return record
