"""Password hashing built on bcrypt."""
from __future__ import annotations

import base64
import hashlib
import secrets
from functools import lru_cache

import bcrypt

DEFAULT_ROUNDS = 12


def _prehash(password: str) -> bytes:
    # bcrypt only reads 72 bytes; a fixed-size digest keeps long passwords intact.
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return a salted bcrypt digest for ``password``.

    Args:
        password: Plain text password, already validated by the caller.
        rounds: bcrypt cost factor (log2 of the iteration count).

    Returns:
        Modular-crypt digest string suitable for storage.
    """
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def verify_password(digest: str, password: str) -> bool:
    """Check ``password`` against a stored digest.

    A malformed digest is reported exactly like a wrong password.
    """
    try:
        return bcrypt.checkpw(_prehash(password), digest.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False


@lru_cache(maxsize=8)
def dummy_digest(rounds: int = DEFAULT_ROUNDS) -> str:
    """Return a throwaway digest to compare against when an email is unknown."""
    return hash_password(secrets.token_urlsafe(16), rounds=rounds)
