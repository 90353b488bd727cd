"""Health check endpoint."""

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.store import get_user_store
from app.schemas.health import HealthResponse
from app.services.user_store import UserStore

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(store: UserStore = Depends(get_user_store)) -> HealthResponse:
    """
    Return service health status and the size of the user store.
    Used by load balancers and monitoring.
    """
    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        users=store.count(),
    )
