# src/skillhub/db/store.py
"""Single-document JSON store backing every table.

The whole document lives in memory; each committed transaction overwrites
the backing file with a full snapshot. A store-wide lock serializes
mutations so a request's read-modify-write is one logical step.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pydantic import Field, ValidationError

from skillhub.models import (
    LearningProgress,
    LearningResource,
    Notification,
    Post,
    StoreModel,
    User,
)

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when the backing document cannot be loaded."""


class Document(StoreModel):
    """Root of the persisted JSON document: one array per table."""

    users: list[User] = Field(default_factory=list)
    posts: list[Post] = Field(default_factory=list)
    learning_progress: list[LearningProgress] = Field(default_factory=list)
    learning_resources: list[LearningResource] = Field(default_factory=list)
    notifications: list[Notification] = Field(default_factory=list)

    def find_user(self, user_id: str | None) -> User | None:
        if not user_id:
            return None
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> User | None:
        return next((u for u in self.users if u.email == email), None)

    def find_post(self, post_id: str) -> Post | None:
        return next((p for p in self.posts if p.id == post_id), None)

    def find_progress(self, progress_id: str) -> LearningProgress | None:
        return next((r for r in self.learning_progress if r.id == progress_id), None)

    def find_resource(self, resource_id: str) -> LearningResource | None:
        return next((r for r in self.learning_resources if r.id == resource_id), None)

    def find_notification(self, notification_id: str) -> Notification | None:
        return next((n for n in self.notifications if n.id == notification_id), None)


class JsonStore:
    """In-memory document mirrored to one JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._document = Document()
        self._lock = threading.RLock()

    @property
    def document(self) -> Document:
        return self._document

    def load(self) -> None:
        """Read the backing file once; create an empty document if absent.

        Raises:
            StoreError: If the file exists but is unreadable or not a valid document
        """
        with self._lock:
            if not self.path.exists():
                logger.info("No document at %s, starting empty", self.path)
                self._document = Document()
                self.persist()
                return
            try:
                raw = self.path.read_text(encoding="utf-8")
                self._document = Document.model_validate_json(raw) if raw.strip() else Document()
            except (OSError, ValidationError) as exc:
                raise StoreError(f"Failed to load document from {self.path}: {exc}") from exc
            logger.info(
                "Loaded document from %s (%d users, %d posts)",
                self.path,
                len(self._document.users),
                len(self._document.posts),
            )

    def persist(self) -> bool:
        """Overwrite the backing file with a full snapshot of the document.

        The snapshot is written to a temporary sibling file and renamed into
        place, so readers never observe a partial document. Write failures are
        logged and swallowed.

        Returns:
            True if the snapshot reached disk, False otherwise
        """
        with self._lock:
            payload = self._document.model_dump_json(by_alias=True, indent=2)
            tmp_name: str | None = None
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
                )
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_name, self.path)
                return True
            except OSError:
                logger.exception("Failed to persist document to %s", self.path)
                if tmp_name is not None:
                    try:
                        os.unlink(tmp_name)
                    except OSError:
                        pass
                return False

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Hold the store lock for a mutation and persist when it completes.

        If the body raises, the in-memory document is restored to its state
        before the transaction, nothing is written and the error propagates.
        """
        with self._lock:
            backup = self._document.model_copy(deep=True)
            try:
                yield self._document
            except BaseException:
                self._document = backup
                raise
            self.persist()

    @contextmanager
    def snapshot(self) -> Iterator[Document]:
        """Hold the store lock for a read-only view of the document."""
        with self._lock:
            yield self._document
