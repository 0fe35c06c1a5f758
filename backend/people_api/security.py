"""
People API - JWT Bearer Authentication
======================================

What:  Validates bearer tokens and enforces role requirements on routes.
How:   FastAPI's HTTPBearer extracts the token; PyJWT verifies signature,
       expiry, issuer and audience against settings. Roles are read from the
       `role` or `roles` claim, each either a string or a list of strings.
Who:   Route dependencies: `Depends(require_role(settings.admin_role))`.
When:  On every request to a protected endpoint.

Token Shape:
    {
        "sub": "alice",
        "role": ["admin"],
        "iss": "<JWT_ISSUER>",
        "aud": "<JWT_AUDIENCE>",
        "exp": 1735689600
    }
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from people_api.config import settings
from people_api.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

# auto_error=False: missing credentials are reported through AuthenticationError
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller."""

    subject: str
    roles: FrozenSet[str] = field(default_factory=frozenset)

    def has_role(self, role: str) -> bool:
        return role in self.roles


def _roles_from_claims(claims: Dict[str, Any]) -> FrozenSet[str]:
    roles = set()
    for key in ("role", "roles"):
        value = claims.get(key)
        if isinstance(value, str):
            roles.add(value)
        elif isinstance(value, (list, tuple)):
            roles.update(str(item) for item in value)
    return frozenset(roles)


def create_access_token(
    subject: str,
    roles: Iterable[str] = (),
    expires_in: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Issue a signed token for the configured issuer and audience.

    Args:
        subject: Value of the `sub` claim
        roles: Written to the `role` claim as a list
        expires_in: Lifetime; defaults to settings.jwt_expire_minutes
        now: Issue time; defaults to the current UTC time
    """
    issued_at = now or datetime.now(timezone.utc)
    lifetime = expires_in or timedelta(minutes=settings.jwt_expire_minutes)
    claims = {
        "sub": subject,
        "role": list(roles),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Principal:
    """
    Verify a token and return its principal.

    Raises:
        AuthenticationError: Bad signature, expired, wrong issuer/audience,
            missing `sub`, or no secret configured.
    """
    if not settings.jwt_secret:
        raise AuthenticationError(message="Token authentication is not configured")
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError(message="Token has expired")
    except jwt.InvalidTokenError as e:
        logger.info("Rejected bearer token: %s", str(e))
        raise AuthenticationError(message="Token is invalid")

    return Principal(subject=str(claims["sub"]), roles=_roles_from_claims(claims))


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """FastAPI dependency: the caller identified by the Authorization header."""
    if credentials is None:
        raise AuthenticationError(message="Missing bearer token")
    return decode_access_token(credentials.credentials)


def require_role(role: str) -> Callable[..., Any]:
    """Build a dependency that admits only principals holding `role`."""

    async def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_role(role):
            logger.warning("Principal %s denied: missing role '%s'", principal.subject, role)
            raise AuthorizationError(required_role=role)
        return principal

    return dependency
