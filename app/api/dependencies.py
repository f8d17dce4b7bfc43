"""API Dependencies — bearer token verification into an explicit AuthContext.

Invariants:
    - Handlers needing a caller receive AuthContext; request.state is never mutated
    - Token subject (`sub`) must be a UUID: the users.id of the caller
    - Every verification failure raises AuthenticationError (401 in both modes)

Design Decisions:
    - PyJWT with a shared secret: tokens are minted by the identity service,
      this API only verifies signature, expiry and subject
    - HTTPBearer(auto_error=False): missing header goes through the same error
      envelope as a bad token instead of FastAPI's default 403
"""

import logging
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import get_settings
from app.core.domain_types import AuthContext, UserId
from app.core.errors import AuthenticationError

logger = logging.getLogger(__name__)
bearer_scheme = HTTPBearer(auto_error=False)


def decode_subject(token: str) -> UserId:
    """Verify a token and return its subject as a UserId."""
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": ["sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("token expired")
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise AuthenticationError("invalid token")

    try:
        return UserId(UUID(str(claims["sub"])))
    except ValueError:
        raise AuthenticationError("token subject is not a user id")


async def get_auth_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthContext:
    """FastAPI dependency — verified identity of the caller."""
    if credentials is None:
        raise AuthenticationError("missing bearer token")
    return AuthContext(user_id=decode_subject(credentials.credentials))
