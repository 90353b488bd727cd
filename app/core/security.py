"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

# Claims every accepted token must carry.
REQUIRED_CLAIMS = ["sub", "role", "exp"]


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    sub: str | int,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with sub (user id), role, iat and exp."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, role, exp, iat).
    Raises jwt.PyJWTError on invalid, expired or incomplete token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )


def verify_access_token(token: str) -> TokenClaims | None:
    """
    Return the token's claims, or None when the signature, expiry or payload is bad.

    There is no partial result: a token is either fully trusted or rejected.
    """
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.debug("Token rejected: %s", e)
        return None
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        logger.debug("Token rejected: non-integer subject")
        return None
    role = payload["role"]
    if not isinstance(role, str):
        return None
    iat = payload.get("iat")
    return TokenClaims(
        id=user_id,
        role=role,
        issued_at=datetime.fromtimestamp(iat, UTC) if iat is not None else None,
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )
