"""Authentication endpoints for admin access."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from videoboard.app.core.config import settings
from videoboard.app.core.security import create_admin_token, get_admin_session, verify_admin_password
from videoboard.app.services.admin_reveal import AdminRevealTrigger

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


class AdminLoginRequest(BaseModel):
    """Admin login request."""

    password: str


class AdminVerifyResponse(BaseModel):
    """Admin password check response."""

    success: bool
    message: str


class AdminTokenResponse(BaseModel):
    """Admin session token."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


class AdminSessionResponse(BaseModel):
    """Current admin session state."""

    authenticated: bool
    login_url: str


class AdminRevealConfig(BaseModel):
    """Settings for the hidden admin link in the public header."""

    required_clicks: int
    window_seconds: float


@router.post("/admin/verify", response_model=AdminVerifyResponse)
async def verify_admin(request: AdminLoginRequest):
    """Verify admin password.

    Args:
        request: Admin login request with password

    Returns:
        AdminVerifyResponse with success status
    """
    if verify_admin_password(request.password):
        return AdminVerifyResponse(
            success=True,
            message="Authentication successful"
        )

    return AdminVerifyResponse(
        success=False,
        message="Incorrect password"
    )


@router.post("/admin/login", response_model=AdminTokenResponse)
async def admin_login(request: AdminLoginRequest):
    """Exchange the admin password for a session token."""
    if not verify_admin_password(request.password):
        logger.warning("[AUTH] Rejected admin login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token, expires_at = create_admin_token()
    logger.info("[AUTH] Admin session started")
    return AdminTokenResponse(access_token=token, expires_at=expires_at)


@router.get("/admin/session", response_model=AdminSessionResponse)
async def admin_session(authenticated: bool = Depends(get_admin_session)):
    """Report whether the caller holds a valid admin session."""
    return AdminSessionResponse(authenticated=authenticated, login_url=settings.admin_login_path)


@router.get("/admin/reveal-config", response_model=AdminRevealConfig)
async def admin_reveal_config():
    """Click pattern that reveals the admin link (cosmetic, not a security check)."""
    trigger = AdminRevealTrigger.from_settings()
    return AdminRevealConfig(
        required_clicks=trigger.required_clicks,
        window_seconds=trigger.window_seconds,
    )
