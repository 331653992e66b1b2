# src/skillhub/api/v1/endpoints/auth.py
"""Registration and login endpoints for the SkillHub API."""

from fastapi import APIRouter, status

from skillhub.schemas.user import LoginRequest, LoginResponse, UserCreate, UserResponse
from skillhub.services import user_service

from ..dependencies import StoreDep

router = APIRouter(tags=["auth"])


@router.post("/user", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, store: StoreDep) -> UserResponse:
    """Register a new account.

    Args:
        user_data: Name, email, password and optional phone/skills
        store: Document store

    Returns:
        The sanitized user record

    Raises:
        BadRequestError: If a required field is missing
        ConflictError: If the email is already registered
    """
    user = user_service.register_user(store, user_data)
    return UserResponse.from_user(user)


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, store: StoreDep) -> LoginResponse:
    """Check credentials and return the caller's minimal identity.

    No session token is issued; clients keep the returned id.
    """
    user = user_service.authenticate(store, credentials.email, credentials.password)
    return LoginResponse(id=user.id, fullname=user.fullname, email=user.email)
