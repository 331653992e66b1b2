"""Learning progress endpoints for the SkillHub API."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from skillhub.models import LearningProgress
from skillhub.schemas.learning import ProgressCreate, ProgressUpdate
from skillhub.services import learning_service

from ..dependencies import StoreDep

router = APIRouter(prefix="/learningProgress", tags=["learning progress"])


@router.get("", response_model=list[LearningProgress])
async def list_progress(
    store: StoreDep,
    owner_id: Annotated[str | None, Query(alias="postOwnerID")] = None,
) -> list[LearningProgress]:
    """List progress plans newest first, optionally for a single owner."""
    return learning_service.list_progress(store, owner_id)


@router.get("/{progress_id}", response_model=LearningProgress)
async def get_progress(progress_id: str, store: StoreDep) -> LearningProgress:
    return learning_service.get_progress(store, progress_id)


@router.post("", response_model=LearningProgress, status_code=status.HTTP_201_CREATED)
async def create_progress(data: ProgressCreate, store: StoreDep) -> LearningProgress:
    """Create a learning progress plan.

    Raises:
        BadRequestError: If a required field is missing or the end date precedes the start date
        NotFoundError: If the owner does not exist
    """
    return learning_service.create_progress(store, data)


@router.put("/{progress_id}", response_model=LearningProgress)
async def update_progress(progress_id: str, data: ProgressUpdate, store: StoreDep) -> LearningProgress:
    return learning_service.update_progress(store, progress_id, data)


@router.delete("/{progress_id}", response_model=LearningProgress)
async def delete_progress(progress_id: str, store: StoreDep) -> LearningProgress:
    return learning_service.delete_progress(store, progress_id)
