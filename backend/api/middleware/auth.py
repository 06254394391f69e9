"""
Bearer authentication and role gates.

``get_current_user`` resolves the request's principal; ``require_admin``
and ``require_roles`` build on it, so authentication is always checked
before authorization.
"""

import logging
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.models import Role
from modules.auth.exceptions import InsufficientPermissionsError, UnauthenticatedError
from modules.auth.interfaces import IAuthService
from modules.users.models import User

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

# Bearer token extractor. Returns None for a missing header or a non-Bearer scheme.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> User:
    """
    Dependency that requires authentication.

    Verifies the bearer token, loads the user fresh from the store and binds
    it to ``request.state.user``. Nothing is cached between requests.

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = credentials.credentials if credentials is not None else None
    try:
        user = await auth.authenticate(token)
    except UnauthenticatedError as e:
        logger.info(f"Rejected request to {request.url.path}: {e.cause}")
        raise

    request.state.user = user
    return user


def _principal(request: Request) -> User:
    user = getattr(request.state, "user", None)
    if user is None:
        raise UnauthenticatedError("no principal bound to request")
    return user


async def require_admin(
    request: Request,
    _: User = Depends(get_current_user),
) -> User:
    """
    Exact-role gate: the principal must be an admin.

    Usage:
        @router.get("/stats")
        async def stats(admin: User = Depends(require_admin)): ...
    """
    user = _principal(request)
    if user.role != Role.ADMIN:
        raise InsufficientPermissionsError(
            [Role.ADMIN.value], user.role.value, "Forbidden: admin access required"
        )
    return user


def require_roles(*roles: Role | str):
    """
    Allow-list gate: the principal's role must be one of ``roles``.

    Role names are matched case-insensitively.

    Usage:
        @router.post("", dependencies=[Depends(require_roles(Role.ADMIN))])
    """
    allowed = frozenset(Role(role) for role in roles)

    async def role_gate(
        request: Request,
        _: User = Depends(get_current_user),
    ) -> User:
        user = _principal(request)
        if user.role not in allowed:
            raise InsufficientPermissionsError(
                [role.value for role in allowed], user.role.value
            )
        return user

    return role_gate


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireAdmin = Depends(require_admin)
