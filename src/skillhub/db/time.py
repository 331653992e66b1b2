# src/skillhub/db/time.py
"""Time utilities for stored records."""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import TypeVar

T = TypeVar("T")


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def newest_first(items: Iterable[T], key: Callable[[T], datetime]) -> list[T]:
    """Return items ordered by descending timestamp.

    Records sharing a timestamp keep reverse insertion order, so the most
    recently appended one still comes first.
    """
    return sorted(reversed(list(items)), key=key, reverse=True)
