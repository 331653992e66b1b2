"""Password hashing built on libsodium's Argon2id primitives."""
from __future__ import annotations

from nacl import pwhash
from nacl.exceptions import InvalidkeyError

from skillhub.core.settings import settings


def hash_password(password: str) -> str:
    """Return a salted Argon2id hash of the provided password.

    The salt and cost parameters are encoded in the returned modular-crypt
    string, so verification needs nothing but the stored value.
    """
    hashed = pwhash.argon2id.str(
        password.encode("utf-8"),
        opslimit=settings.password_hash_opslimit,
        memlimit=settings.password_hash_memlimit,
    )
    return hashed.decode("ascii")


def verify_password(password_hash: str, password: str) -> bool:
    """Check a plaintext password against a stored hash.

    Args:
        password_hash: Modular-crypt string produced by `hash_password`.
        password: Candidate plaintext password.

    Returns:
        True if the password matches; False otherwise, including when the
        stored hash is empty or malformed.
    """
    if not password_hash:
        return False
    try:
        return pwhash.verify(password_hash.encode("ascii"), password.encode("utf-8"))
    except (InvalidkeyError, UnicodeEncodeError):
        return False
