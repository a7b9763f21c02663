"""
Admin authentication: a single configured account exchanging its
credentials for a fixed bearer token.
"""

from __future__ import annotations

from dataclasses import dataclass

from xuelong.core.config import Settings
from xuelong.core.security import bearer_token, check_admin_credentials, token_matches


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class InvalidCredentialsError(AuthError):
    pass


class TokenInvalidError(AuthError):
    pass


@dataclass
class LoginSuccess:
    token: str
    user: dict


@dataclass
class AuthService:
    settings: Settings

    def login(self, username: str | None, password: str | None) -> LoginSuccess:
        if not check_admin_credentials(self.settings, username, password):
            raise InvalidCredentialsError("Invalid credentials")
        return LoginSuccess(
            token=self.settings.admin_token,
            user={"id": 1, "username": self.settings.admin_username, "email": self.settings.admin_email},
        )

    def authorize(self, authorization: str | None) -> None:
        """Check an ``Authorization`` header when token enforcement is enabled."""
        if not self.settings.auth_required:
            return
        if not token_matches(self.settings, bearer_token(authorization)):
            raise TokenInvalidError("Authentication required")
