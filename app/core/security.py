"""Password hashing and JWT access tokens."""

import uuid
from datetime import timedelta

import bcrypt
from jose import JWTError, jwt

from app.config.settings import settings
from app.core.exceptions import UnauthenticatedError
from app.core.utils.time_utils import utcnow


def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a password against a stored hash. Accounts without a hash never match."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user_id: uuid.UUID, expires_delta: timedelta | None = None) -> str:
    """Create a signed access token whose subject is the user id."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(user_id),
        "exp": utcnow() + expires_delta,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> uuid.UUID:
    """Verify a token and return the user id it was issued for."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise UnauthenticatedError("Invalid or expired token") from e

    subject = payload.get("sub")
    if not subject:
        raise UnauthenticatedError("Invalid token")
    try:
        return uuid.UUID(subject)
    except ValueError as e:
        raise UnauthenticatedError("Invalid token") from e
