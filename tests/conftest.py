# tests/conftest.py
from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

_RUNTIME_DIR = Path(tempfile.mkdtemp(prefix="skillhub-tests-"))

os.environ.setdefault("DATA_FILE", str(_RUNTIME_DIR / "db.json"))
os.environ.setdefault("UPLOADS_DIR", str(_RUNTIME_DIR / "uploads"))
# Cheapest Argon2id parameters libsodium accepts; keeps hashing fast in tests.
os.environ.setdefault("PASSWORD_HASH_OPSLIMIT", "1")
os.environ.setdefault("PASSWORD_HASH_MEMLIMIT", "8192")

from skillhub.db.session import get_store  # noqa: E402
from skillhub.db.store import JsonStore  # noqa: E402
from skillhub.main import app as fastapi_app  # noqa: E402
from skillhub.models import Post, User  # noqa: E402
from skillhub.schemas.user import UserCreate  # noqa: E402
from skillhub.services import post_service, user_service  # noqa: E402
from skillhub.services.media import MediaStorage, get_media_storage  # noqa: E402

PASSWORD = "s3cret-pass"


@pytest.fixture()
def store(tmp_path: Path) -> JsonStore:
    """Fresh, empty document store backed by a file under ``tmp_path``."""
    store = JsonStore(tmp_path / "data" / "db.json")
    store.load()
    return store


@pytest.fixture()
def media_storage(tmp_path: Path) -> MediaStorage:
    return MediaStorage(tmp_path / "uploads", max_bytes=1024, max_files=5)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_dependencies(app: FastAPI, store: JsonStore, media_storage: MediaStorage) -> Iterator[None]:
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_media_storage] = lambda: media_storage
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_store, None)
        app.dependency_overrides.pop(get_media_storage, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def password() -> str:
    """Plaintext password shared by the user fixtures."""
    return PASSWORD


def make_user(store: JsonStore, fullname: str, email: str) -> User:
    return user_service.register_user(
        store,
        UserCreate(fullname=fullname, email=email, password=PASSWORD, skills=["python"]),
    )


@pytest.fixture()
def test_user(store: JsonStore) -> User:
    """Primary persisted user (a@x.com)."""
    return make_user(store, "Ada Lovelace", "a@x.com")


@pytest.fixture()
def other_user(store: JsonStore) -> User:
    """Secondary persisted user (b@x.com)."""
    return make_user(store, "Bob Builder", "b@x.com")


@pytest.fixture()
def test_post(store: JsonStore, test_user: User) -> Post:
    """Post owned by ``test_user`` titled "T"."""
    return post_service.create_post(
        store,
        user_id=test_user.id,
        title="T",
        description="First post",
    )
