"""Admin session tokens."""

import hmac
from datetime import datetime, timedelta, timezone

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from videoboard.app.core.config import settings
from videoboard.app.core.exceptions import AdminAuthenticationError

ADMIN_SUBJECT = "admin"

bearer_scheme = HTTPBearer(auto_error=False)


def verify_admin_password(password: str) -> bool:
    """Constant-time comparison against the configured admin password."""
    return hmac.compare_digest(password.encode(), settings.admin_password.encode())


def create_admin_token() -> tuple[str, datetime]:
    """Create a signed admin session token with an expiry claim."""
    expires_at = datetime.now(timezone.utc) + timedelta(hours=settings.jwt_expiration_hours)
    token = jwt.encode(
        {"sub": ADMIN_SUBJECT, "exp": expires_at},
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return token, expires_at


def is_admin_token(token: str | None) -> bool:
    """Whether ``token`` is a valid, unexpired admin session."""
    if not token:
        return False
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return False
    return payload.get("sub") == ADMIN_SUBJECT


async def get_admin_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> bool:
    """Session check: True when the request carries a valid admin token."""
    return credentials is not None and is_admin_token(credentials.credentials)


async def require_admin(authenticated: bool = Depends(get_admin_session)) -> None:
    """
    Dependency for admin-only endpoints.

    Raises:
        AdminAuthenticationError: If no valid admin session is present
    """
    if not authenticated:
        raise AdminAuthenticationError(login_url=settings.admin_login_path)
