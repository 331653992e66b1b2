"""Storage for media attached to posts."""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from fastapi import UploadFile

from skillhub.core.settings import settings

from .errors import BadRequestError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024


class MediaStorage:
    """Saves uploads to a directory and hands back stable relative paths.

    Paths look like ``/uploads/<epoch-ms>-<random><ext>``; the prefix is served
    as static files by the application.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        url_prefix: str = "/uploads",
        allowed_types: Sequence[str] = ("image/jpeg", "image/png", "image/jpg", "video/mp4"),
        max_bytes: int = 50 * 1024 * 1024,
        max_files: int = 5,
    ) -> None:
        self.root = Path(root)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.allowed_types = frozenset(allowed_types)
        self.max_bytes = max_bytes
        self.max_files = max_files

    def _new_name(self, original: str | None) -> str:
        suffix = PurePosixPath(original or "").suffix
        return f"{int(time.time() * 1000)}-{secrets.token_urlsafe(6)}{suffix}"

    def validate(self, files: Sequence[UploadFile]) -> None:
        """Check count and MIME types before anything touches the disk.

        Raises:
            BadRequestError: If there are too many files or a type is not allowed
        """
        if len(files) > self.max_files:
            raise BadRequestError(f"At most {self.max_files} files may be uploaded at once")
        for upload in files:
            if upload.content_type not in self.allowed_types:
                raise BadRequestError("Unsupported file type")

    async def save_all(self, files: Sequence[UploadFile] | None) -> list[str]:
        """Validate and store uploads, returning their relative paths in order.

        If any file fails (for example by exceeding the size limit), files
        already written by this call are released before the error propagates.
        """
        uploads = [f for f in files or [] if f.filename]
        if not uploads:
            return []
        self.validate(uploads)
        self.root.mkdir(parents=True, exist_ok=True)

        saved: list[str] = []
        try:
            for upload in uploads:
                saved.append(await self._save(upload))
        except Exception:
            self.release_all(saved)
            raise
        return saved

    async def _save(self, upload: UploadFile) -> str:
        name = self._new_name(upload.filename)
        target = self.root / name
        written = 0
        try:
            with target.open("wb") as handle:
                while chunk := await upload.read(_CHUNK_SIZE):
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise BadRequestError("File too large")
                    handle.write(chunk)
        except Exception:
            self._unlink(target)
            raise
        finally:
            await upload.close()
        logger.debug("Stored upload %s as %s (%d bytes)", upload.filename, name, written)
        return f"{self.url_prefix}/{name}"

    def path_for(self, media_path: str) -> Path | None:
        """Map a relative media path back to a file inside the storage root.

        Only the final path component is used, so a reference can never
        escape the storage directory.
        """
        name = PurePosixPath(media_path).name
        if not name or name in {".", ".."}:
            return None
        return self.root / name

    def release(self, media_path: str | None) -> None:
        """Delete the file behind a media reference; failures are logged only."""
        if not media_path:
            return
        target = self.path_for(media_path)
        if target is not None:
            self._unlink(target)

    def release_all(self, media_paths: Sequence[str]) -> None:
        for media_path in media_paths:
            self.release(media_path)

    def _unlink(self, target: Path) -> None:
        try:
            target.unlink()
        except FileNotFoundError:
            logger.debug("Media file %s already gone", target)
        except OSError as exc:
            logger.warning("Failed to release media file %s: %s", target, exc)


def get_media_storage() -> MediaStorage:
    """Return a media storage configured from settings."""
    return MediaStorage(
        settings.uploads_dir,
        url_prefix=settings.media_url_prefix,
        allowed_types=settings.allowed_media_types,
        max_bytes=settings.max_upload_bytes,
        max_files=settings.max_upload_files,
    )
