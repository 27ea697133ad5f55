"""JWT token domain service."""

import logfire

from portal.config import AuthSettings
from portal.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Verifies identity-provider tokens and extracts the account they carry."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account_id: str, admission_number: str) -> str:
        """Create a JWT token for an account.

        Args:
            account_id: Account ID
            admission_number: Account admission number

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", account_id=account_id):
            return create_token(account_id, admission_number, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            payload = verify_token(token, self.auth_settings)
            logfire.info("JWT token verified", account_id=payload.account_id)
            return payload

    def get_account_id_from_token(self, token: str | None) -> str | None:
        """Extract the account ID from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Account ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).account_id
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
