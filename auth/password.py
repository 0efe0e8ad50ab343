"""
Password hashing.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import bcrypt

_BCRYPT_ROUNDS = 10
_BCRYPT_MAX_BYTES = 72  # bcrypt only reads the first 72 bytes of a password


def hash_password(password: str, rounds: int = _BCRYPT_ROUNDS) -> str:
    """Hash a password with bcrypt (auto-salted), truncated to 72 UTF-8 bytes."""
    secret = password.encode()[:_BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds)).decode()
