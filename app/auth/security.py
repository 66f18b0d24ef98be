"""Password hashing (bcrypt) and JWT access tokens."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional

import bcrypt
from jose import JWTError, jwt

from app.config import get_settings
from app.utils.clock import utcnow


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed access token whose `sub` is the user id."""
    settings = get_settings()
    now = utcnow()
    expire = now + (
        expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
    )
    to_encode = {"sub": subject, "exp": expire, "iat": now, "type": "access"}
    return jwt.encode(
        to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str) -> Optional[dict[str, Any]]:
    """Return the token payload, or None when the token is invalid or expired."""
    settings = get_settings()
    try:
        return jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None
