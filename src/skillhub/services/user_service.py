"""CRUD-style helpers for managing user accounts and credentials."""
from __future__ import annotations

import logging

from skillhub.core import security
from skillhub.db.ids import new_id
from skillhub.db.store import Document, JsonStore
from skillhub.models import User
from skillhub.schemas.user import UserCreate, UserUpdate

from .errors import ConflictError, NotFoundError, UnauthorizedError, require
from .media import MediaStorage

__all__ = [
    "get_user",
    "get_user_or_404",
    "register_user",
    "authenticate",
    "update_user",
    "delete_user",
]

logger = logging.getLogger(__name__)


def get_user(store: JsonStore, user_id: str) -> User | None:
    """Return a single user by id."""
    with store.snapshot() as doc:
        return doc.find_user(user_id)


def get_user_or_404(doc: Document, user_id: str | None) -> User:
    """Resolve a user inside an open transaction or raise `NotFoundError`."""
    user = doc.find_user(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def register_user(store: JsonStore, data: UserCreate) -> User:
    """Persist a new user with a hashed password.

    Raises:
        BadRequestError: If fullname, email or password is missing
        ConflictError: If the email is already registered
    """
    require(data.fullname, data.email, data.password)
    # Hash outside the store lock.
    hashed = security.hash_password(data.password)
    with store.transaction() as doc:
        if doc.find_user_by_email(data.email) is not None:
            raise ConflictError("Email already registered")
        user = User(
            id=new_id(),
            fullname=data.fullname,
            email=data.email,
            password=hashed,
            phone=data.phone or "",
            skills=list(data.skills or []),
        )
        doc.users.append(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate(store: JsonStore, email: str | None, password: str | None) -> User:
    """Check credentials and return the matching user.

    Raises:
        BadRequestError: If email or password is missing
        UnauthorizedError: If the email is unknown or the password does not match
    """
    require(email, password, message="Email and password are required")
    with store.snapshot() as doc:
        user = doc.find_user_by_email(email)
    if user is None or not security.verify_password(user.password, password):
        raise UnauthorizedError()
    return user


def update_user(store: JsonStore, user_id: str, update_data: UserUpdate) -> User:
    """Apply partial updates to an existing user.

    Empty strings for name, email and password count as "not provided"; phone
    may be cleared explicitly.

    Raises:
        NotFoundError: If the user does not exist
        ConflictError: If the new email belongs to another user
    """
    update_dict = update_data.model_dump(exclude_unset=True)
    password = update_dict.pop("password", None)
    hashed = security.hash_password(password) if password else None

    with store.transaction() as doc:
        user = get_user_or_404(doc, user_id)
        email = update_dict.get("email")
        if email and email != user.email:
            owner = doc.find_user_by_email(email)
            if owner is not None and owner.id != user.id:
                raise ConflictError("Email already registered")
            user.email = email
        if update_dict.get("fullname"):
            user.fullname = update_dict["fullname"]
        if "phone" in update_dict:
            user.phone = update_dict["phone"] or ""
        if update_dict.get("skills") is not None:
            user.skills = list(update_dict["skills"])
        if hashed is not None:
            user.password = hashed
    return user


def delete_user(store: JsonStore, user_id: str, media: MediaStorage) -> User:
    """Remove a user and everything that references them.

    Their posts (with media), learning progress, learning resources and
    inbox go away; their comments and likes are stripped from other users'
    content, and follow edges in both directions are dropped.

    Raises:
        NotFoundError: If the user does not exist
    """
    with store.transaction() as doc:
        user = get_user_or_404(doc, user_id)
        doc.users.remove(user)

        owned_posts = [p for p in doc.posts if p.user_id == user_id]
        doc.posts = [p for p in doc.posts if p.user_id != user_id]
        doc.learning_progress = [r for r in doc.learning_progress if r.post_owner_id != user_id]
        doc.learning_resources = [r for r in doc.learning_resources if r.post_owner_id != user_id]
        doc.notifications = [n for n in doc.notifications if n.user_id != user_id]

        for post in doc.posts:
            post.likes.discard(user_id)
            post.comments = [c for c in post.comments if c.user_id != user_id]
        for resource in doc.learning_resources:
            resource.likes.discard(user_id)
        for other in doc.users:
            other.remove_following(user_id)
            other.remove_follower(user_id)

    for post in owned_posts:
        media.release_all(post.media)
    logger.info("Deleted user %s with %d posts", user_id, len(owned_posts))
    return user
