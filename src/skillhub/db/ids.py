# src/skillhub/db/ids.py
"""Identifier generation for stored records."""

import secrets

_ID_BYTES = 16


def new_id() -> str:
    """Return an opaque URL-safe identifier that is never reused."""
    return secrets.token_urlsafe(_ID_BYTES)
