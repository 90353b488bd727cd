"""User management endpoints (admin only): list, create, update, delete, CSV export."""

import csv
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from app.api.v1.auth import require_admin
from app.core.errors import ApiError
from app.core.store import get_user_store
from app.schemas.auth import TokenClaims
from app.schemas.user import (
    MessageResponse,
    UserCreate,
    UserMutationResponse,
    UserOut,
    UserUpdate,
)
from app.services.csv_export import EXPORT_FILENAME, users_to_csv
from app.services.user_store import UserConflictError, UserNotFoundError, UserStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[UserOut])
def list_users(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
    role: Annotated[str | None, Query(description="Only users with this role")] = None,
) -> list[UserOut]:
    """List users, optionally filtered by exact role. Password hashes are never returned."""
    return [UserOut.model_validate(u) for u in store.list(role=role)]


@router.post("", response_model=UserMutationResponse)
def create_user(
    body: UserCreate,
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UserMutationResponse:
    try:
        user = store.create(
            name=body.name,
            username=body.username,
            password=body.password,
            role=body.role,
        )
    except UserConflictError as e:
        raise ApiError(status.HTTP_400_BAD_REQUEST, e.message) from e
    return UserMutationResponse(message="User added", user=UserOut.model_validate(user))


# Declared before the /{user_id} routes so "export" is never read as an id.
@router.get("/export", response_class=Response)
def export_users(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> Response:
    """Download all users as a CSV attachment (id, name, username, role)."""
    try:
        content = users_to_csv(store.list())
    except csv.Error as e:
        logger.exception("User export failed: %s", e)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Export error") from e
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.put("/{user_id}", response_model=UserMutationResponse)
def update_user(
    user_id: int,
    body: UserUpdate,
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UserMutationResponse:
    """Change a user's name and/or role. Username and password cannot be changed."""
    try:
        user = store.update(user_id, name=body.name, role=body.role)
    except UserNotFoundError as e:
        raise ApiError(status.HTTP_404_NOT_FOUND, e.message) from e
    return UserMutationResponse(message="User updated", user=UserOut.model_validate(user))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> MessageResponse:
    """Delete a user. Succeeds whether or not the id exists."""
    store.delete(user_id)
    return MessageResponse(message="User deleted")
