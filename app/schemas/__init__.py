"""Pydantic request/response schemas."""

from app.schemas.auth import LoginRequest, LoginResponse, TokenClaims
from app.schemas.dashboard import (
    CalendarEvent,
    ChatMessage,
    Payment,
    ReportResponse,
    SocialPost,
    StatsResponse,
    WeatherResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.user import (
    MessageResponse,
    PublicUser,
    UserCreate,
    UserMutationResponse,
    UserOut,
    UserUpdate,
)

__all__ = [
    "CalendarEvent",
    "ChatMessage",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "Payment",
    "PublicUser",
    "ReportResponse",
    "SocialPost",
    "StatsResponse",
    "TokenClaims",
    "UserCreate",
    "UserMutationResponse",
    "UserOut",
    "UserUpdate",
    "WeatherResponse",
]
