"""Process-wide store instance and its request dependency."""

from __future__ import annotations

from pathlib import Path

from skillhub.core.settings import settings

from .store import JsonStore

_store: JsonStore | None = None


def init_store(path: Path | str | None = None) -> JsonStore:
    """Create and load the shared store, replacing any previous instance."""
    global _store
    store = JsonStore(path or settings.data_file)
    store.load()
    _store = store
    return store


def get_store() -> JsonStore:
    """Return the shared store for dependency injection, loading it on first use."""
    if _store is None:
        return init_store()
    return _store
