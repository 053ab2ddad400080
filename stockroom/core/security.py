"""Credential helpers: bcrypt for stored passwords, signed JWTs for API sessions."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from stockroom.core.config import get_settings

BCRYPT_ROUNDS = 12
# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Return the bcrypt hash stored in users.password when PASSWORD_HASHING is on."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, stored_hash: str) -> bool:
    # A plaintext value left over from before hashing was enabled is not a valid hash.
    try:
        return bcrypt.checkpw(_password_bytes(password), stored_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(sub: str | int, role: str) -> str:
    """
    Sign a token for the user with id sub.

    The role is carried for clients; get_current_user re-reads the user on every request, so
    a role change or deleted account takes effect before the token expires.
    """
    settings = get_settings()
    issued_at = datetime.now(UTC)
    claims: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    }
    return jwt.encode(claims, settings.JWT_SECRET.get_secret_value(), algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """Return the verified claims of token. Raises jwt.PyJWTError if it is invalid or expired."""
    settings = get_settings()
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )
