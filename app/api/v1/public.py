"""Unauthenticated endpoints for the public dashboard."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.store import get_user_store
from app.schemas.user import PublicUser
from app.services.user_store import UserStore

router = APIRouter()


@router.get("/users", response_model=list[PublicUser])
def list_public_users(
    store: Annotated[UserStore, Depends(get_user_store)],
) -> list[PublicUser]:
    """Names and roles only; no ids, usernames or hashes."""
    return [PublicUser.model_validate(u) for u in store.list()]
