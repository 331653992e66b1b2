"""User profile and follow-graph endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from skillhub.schemas.user import (
    FollowingResponse,
    FollowRequest,
    UnfollowRequest,
    UserProfileResponse,
    UserResponse,
    UserUpdate,
)
from skillhub.services import social_graph, user_service
from skillhub.services.errors import NotFoundError

from ..dependencies import MediaDep, StoreDep

router = APIRouter(prefix="/user", tags=["users"])


@router.get("/{user_id}", response_model=UserProfileResponse)
def get_profile(user_id: str, store: StoreDep) -> UserProfileResponse:
    """Return a user's profile with the password blanked out."""
    user = user_service.get_user(store, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserProfileResponse.from_user(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_profile(user_id: str, update_data: UserUpdate, store: StoreDep) -> UserResponse:
    """Apply a partial profile update."""
    user = user_service.update_user(store, user_id, update_data)
    return UserResponse.from_user(user)


@router.delete("/{user_id}", response_model=UserResponse)
def delete_account(user_id: str, store: StoreDep, media: MediaDep) -> UserResponse:
    """Delete a user and cascade the removal to everything they own."""
    user = user_service.delete_user(store, user_id, media)
    return UserResponse.from_user(user)


@router.put("/{user_id}/follow", response_model=FollowingResponse)
def follow_user(user_id: str, body: FollowRequest, store: StoreDep) -> FollowingResponse:
    """Follow another user."""
    following = social_graph.follow(store, user_id, body.follow_user_id)
    return FollowingResponse(following=following)


@router.put("/{user_id}/unfollow", response_model=FollowingResponse)
def unfollow_user(user_id: str, body: UnfollowRequest, store: StoreDep) -> FollowingResponse:
    """Stop following another user."""
    following = social_graph.unfollow(store, user_id, body.unfollow_user_id)
    return FollowingResponse(following=following)


@router.get("/{user_id}/followedUsers", response_model=list[str])
def get_followed_users(user_id: str, store: StoreDep) -> list[str]:
    """List the ids a user follows."""
    return social_graph.list_following(store, user_id)


@router.get("/{user_id}/followers", response_model=list[str])
def get_followers(user_id: str, store: StoreDep) -> list[str]:
    """List the ids following a user."""
    return social_graph.list_followers(store, user_id)
