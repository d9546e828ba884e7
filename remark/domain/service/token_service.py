"""Bearer token domain service."""

import time

import logfire

from remark.config import AuthSettings
from remark.domain.error import AuthError
from remark.domain.value import Username
from remark.util.token import TokenError, TokenPayload, create_token, verify_token

from .base import Service

MS_PER_DAY = 24 * 60 * 60 * 1000


class TokenService(Service):
    """Domain service for issuing and verifying bearer tokens.

    Tokens are stateless: nothing is stored, and rotating the secret is the
    only way to revoke them (unless ``max_age_days`` is configured).
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, username: Username) -> str:
        """Issue a token for a user.

        Args:
            username: Normalized username

        Returns:
            Signed token string

        Raises:
            ConfigError: If no signing secret is configured
        """
        with logfire.span("token_service.issue", username=username.root):
            token = create_token(username.root, self.auth_settings.secret)
            logfire.info("Token issued", username=username.root)
            return token

    def verify(self, token: str) -> TokenPayload:
        """Verify a token and return its payload.

        The username claim is normalized and validated again, so a correctly
        signed token naming an impossible user is still rejected.

        Args:
            token: Token string

        Returns:
            Token payload with a normalized username

        Raises:
            AuthError: If the token is malformed, forged, expired or names an invalid user
            ConfigError: If no signing secret is configured
        """
        with logfire.span("token_service.verify"):
            try:
                payload = verify_token(token, self.auth_settings.secret)
            except TokenError as e:
                logfire.warn("Token verification failed", error=str(e))
                raise AuthError("invalid_token")

            try:
                username = Username(payload.username)
            except ValueError:
                logfire.warn("Token names an invalid username")
                raise AuthError("invalid_token")

            max_age_days = self.auth_settings.max_age_days
            if max_age_days is not None:
                age_ms = time.time_ns() // 1_000_000 - payload.issued_at
                if age_ms > max_age_days * MS_PER_DAY:
                    logfire.info("Token expired", username=username.root)
                    raise AuthError("token_expired")

            return payload.model_copy(update={"username": username.root})

    def authenticate(self, token: str) -> Username:
        """Verify a token and return the authenticated username."""
        return Username(self.verify(token).username)
