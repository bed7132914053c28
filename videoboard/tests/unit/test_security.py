"""Unit tests for admin session tokens."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from videoboard.app.core.config import settings
from videoboard.app.core.exceptions import AdminAuthenticationError
from videoboard.app.core.security import (
    create_admin_token,
    is_admin_token,
    require_admin,
    verify_admin_password,
)


class TestAdminPassword:
    """Test password verification."""

    def test_correct_password(self):
        """Test the configured password is accepted."""
        assert verify_admin_password(settings.admin_password)

    def test_wrong_password(self):
        """Test anything else is refused."""
        assert not verify_admin_password(settings.admin_password + "x")
        assert not verify_admin_password("")


class TestAdminToken:
    """Test token issue and validation."""

    def test_issued_token_is_valid(self):
        """Test a fresh token passes validation and expires in the future."""
        token, expires_at = create_admin_token()

        assert is_admin_token(token)
        assert expires_at > datetime.now(timezone.utc)

    def test_expired_token(self):
        """Test expired tokens are refused."""
        token = jwt.encode(
            {"sub": "admin", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )
        assert not is_admin_token(token)

    def test_foreign_signature(self):
        """Test tokens signed with another key are refused."""
        token = jwt.encode(
            {"sub": "admin", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "some-other-secret",
            algorithm=settings.jwt_algorithm,
        )
        assert not is_admin_token(token)

    def test_wrong_subject(self):
        """Test non-admin subjects are refused."""
        token = jwt.encode(
            {"sub": "visitor", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )
        assert not is_admin_token(token)

    def test_garbage(self):
        """Test malformed tokens are refused."""
        assert not is_admin_token("not-a-token")
        assert not is_admin_token(None)


class TestRequireAdmin:
    """Test the admin dependency."""

    async def test_allows_authenticated(self):
        """Test an authenticated session passes."""
        assert await require_admin(authenticated=True) is None

    async def test_rejects_with_login_url(self):
        """Test missing sessions point to the login page."""
        with pytest.raises(AdminAuthenticationError) as exc_info:
            await require_admin(authenticated=False)

        assert exc_info.value.login_url == settings.admin_login_path
