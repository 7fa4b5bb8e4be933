"""Encoding and decoding of the portal session JWT."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from campus.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by the ``auth_token`` cookie."""

    user_id: str
    is_admin: bool = False
    exp: datetime


class JWTError(Exception):
    """Token missing claims, badly signed or expired."""


def create_token(user_id: str, is_admin: bool, settings: AuthSettings) -> str:
    """Sign a session token.

    The portal's auth service issues real sessions; this is used by tests
    and local tooling to mint compatible ones.
    """
    claims = {
        "user_id": user_id,
        "is_admin": is_admin,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry and return the claims.

    Raises:
        JWTError: If the token is expired or invalid
    """
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    return TokenPayload(**claims)
