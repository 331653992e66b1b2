"""Learning resource feed endpoints for the SkillHub API."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from skillhub.models import LearningResource
from skillhub.schemas.learning import ResourceCreate, ResourceUpdate
from skillhub.schemas.post import LikesResponse
from skillhub.services import engagement, learning_service

from ..dependencies import StoreDep

router = APIRouter(prefix="/learningSystem", tags=["learning resources"])


@router.get("", response_model=list[LearningResource])
async def list_resources(
    store: StoreDep,
    tag: Annotated[str | None, Query(description="Only resources carrying this tag")] = None,
) -> list[LearningResource]:
    """List shared learning resources newest first."""
    return learning_service.list_resources(store, tag)


@router.get("/{resource_id}", response_model=LearningResource)
async def get_resource(resource_id: str, store: StoreDep) -> LearningResource:
    return learning_service.get_resource(store, resource_id)


@router.post("", response_model=LearningResource, status_code=status.HTTP_201_CREATED)
async def create_resource(data: ResourceCreate, store: StoreDep) -> LearningResource:
    """Share a learning resource.

    Raises:
        BadRequestError: If title, description, contentURL or postOwnerID is missing
        NotFoundError: If the owner does not exist
    """
    return learning_service.create_resource(store, data)


@router.put("/{resource_id}", response_model=LearningResource)
async def update_resource(resource_id: str, data: ResourceUpdate, store: StoreDep) -> LearningResource:
    return learning_service.update_resource(store, resource_id, data)


@router.delete("/{resource_id}", response_model=LearningResource)
async def delete_resource(resource_id: str, store: StoreDep) -> LearningResource:
    return learning_service.delete_resource(store, resource_id)


@router.put("/{resource_id}/like", response_model=LikesResponse)
async def toggle_like(
    resource_id: str,
    store: StoreDep,
    user_id: Annotated[str | None, Query(alias="userID")] = None,
) -> LikesResponse:
    """Like the resource, or unlike it if the user already does."""
    likes = engagement.toggle_resource_like(store, resource_id, user_id)
    return LikesResponse(likes=likes)
