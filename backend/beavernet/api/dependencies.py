"""API Dependencies - storage injection, the Basic auth gate, and access guards.

Invariants:
    - Storage is read from app.state (set once in lifespan); tests override
      get_storage through app.dependency_overrides
    - current_identity runs before any /api handler and stores the Identity
      on request.state.identity
    - Every authentication failure is a 401 carrying the Basic challenge
    - require_access_level() checks exact membership; no hierarchy
"""

import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from beavernet.config import get_settings
from beavernet.core.access_policy import SERVICE_ACCESS, is_allowed
from beavernet.core.errors import AccessDeniedError, AuthenticationError, ErrorContext
from beavernet.core.identity import Identity, build_identity, credentials_match
from beavernet.storage.base import Storage

logger = logging.getLogger(__name__)

# auto_error=False: a missing header must produce our 401 envelope, not FastAPI's
basic_scheme = HTTPBasic(realm=get_settings().auth_realm, auto_error=False)


async def basic_credentials(request: Request) -> HTTPBasicCredentials | None:
    """Parsed Basic credentials, None when absent or not Basic.

    HTTPBasic raises its own 401 for an undecodable header or one without a
    colon; that becomes the same AuthenticationError as a wrong password.
    """
    try:
        return await basic_scheme(request)
    except HTTPException as e:
        logger.warning("Malformed Basic authorization header", extra={"path": request.url.path})
        raise AuthenticationError("Invalid credentials", get_settings().auth_realm) from e


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


async def current_identity(
    request: Request,
    credentials: HTTPBasicCredentials | None = Depends(basic_credentials),
    storage: Storage = Depends(get_storage),
) -> Identity:
    """Resolve Basic credentials to an Identity or raise 401."""
    realm = get_settings().auth_realm
    if credentials is None:
        raise AuthenticationError("Authentication required", realm)

    user = await storage.get_user_by_username(credentials.username)
    if not credentials_match(user, credentials.password):
        logger.warning(
            "Rejected credentials",
            extra={"username": credentials.username, "path": request.url.path},
        )
        raise AuthenticationError(
            "Invalid credentials", realm,
            context=ErrorContext(username=credentials.username),
        )

    identity = build_identity(user)
    request.state.identity = identity
    return identity


def require_access_level(*allowed_levels: str):
    """Dependency factory: 403 unless the identity's level is allow-listed."""
    allowed = list(allowed_levels)

    async def guard(identity: Identity = Depends(current_identity)) -> Identity:
        if not is_allowed(identity.access_level, allowed):
            logger.warning(
                "Access level rejected",
                extra={"username": identity.username},
            )
            raise AccessDeniedError(
                allowed, identity.access_level,
                context=ErrorContext(username=identity.username),
            )
        return identity

    return guard


def require_service(service: str):
    """Guard for a service area from the SERVICE_ACCESS table."""
    return require_access_level(*SERVICE_ACCESS[service])
