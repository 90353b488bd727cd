"""JWT login and the auth gates (authenticate, require_roles, require_admin)."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import ApiError, GateRejection
from app.core.security import create_access_token, verify_access_token
from app.core.store import get_user_store
from app.schemas.auth import LoginRequest, LoginResponse, TokenClaims
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    store: Annotated[UserStore, Depends(get_user_store)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = store.verify_credentials(body.username, body.password)
    if user is None:
        logger.warning("Login failed", extra={"username": body.username})
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")
    token = create_access_token(sub=user.id, role=user.role)
    logger.info("Login succeeded", extra={"user_id": user.id, "role": user.role})
    return LoginResponse(message="Login successful", token=token)


def authenticate(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """
    Gate: require a valid Bearer JWT and return its claims.

    Missing credential -> 401. Any verification failure (bad signature, expired,
    malformed) -> 403, the same code as a role mismatch. Bodies are empty.
    """
    if credentials is None:
        raise GateRejection(status.HTTP_401_UNAUTHORIZED)
    claims = verify_access_token(credentials.credentials)
    if claims is None:
        raise GateRejection(status.HTTP_403_FORBIDDEN)
    return claims


def require_roles(*roles: str) -> Callable[[TokenClaims], TokenClaims]:
    """Build a gate that admits only authenticated callers whose role is in `roles`."""
    allowed = frozenset(roles)

    def check_role(
        claims: Annotated[TokenClaims, Depends(authenticate)],
    ) -> TokenClaims:
        if claims.role not in allowed:
            raise GateRejection(status.HTTP_403_FORBIDDEN)
        return claims

    return check_role


require_admin = require_roles("admin")
