"""JWT token utilities."""

from datetime import datetime, timedelta

import jwt
from pydantic import BaseModel

from portal.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    account_id: str
    admission_number: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(account_id: str, admission_number: str, settings: AuthSettings) -> str:
    """Create a JWT token for an account.

    The portal's identity provider issues the real tokens; this exists so
    tests and local tooling can mint tokens with the same shape.

    Args:
        account_id: Account ID
        admission_number: Account admission number
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now() + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "account_id": account_id,
        "admission_number": admission_number,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
