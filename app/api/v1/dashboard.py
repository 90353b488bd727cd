"""Informational dashboard endpoints: stats, reports, calendar, chat, payments, feeds."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.auth import authenticate, require_admin
from app.core.store import get_user_store
from app.schemas.auth import TokenClaims
from app.schemas.dashboard import (
    CalendarEvent,
    ChatMessage,
    Payment,
    ReportResponse,
    SocialPost,
    StatsResponse,
    WeatherResponse,
)
from app.services import dashboard
from app.services.user_store import UserStore

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    _user: Annotated[TokenClaims, Depends(authenticate)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> StatsResponse:
    """Real user count plus simulated session and sales figures. Any role."""
    return dashboard.build_stats(store.count())


@router.get("/reports", response_model=ReportResponse)
def get_report(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> ReportResponse:
    return dashboard.build_report(store.count())


@router.get("/calendar", response_model=list[CalendarEvent])
def get_calendar(
    _user: Annotated[TokenClaims, Depends(authenticate)],
) -> list[CalendarEvent]:
    return dashboard.calendar_events()


@router.get("/chat", response_model=list[ChatMessage])
def get_chat(
    _user: Annotated[TokenClaims, Depends(authenticate)],
) -> list[ChatMessage]:
    return dashboard.chat_messages()


@router.get("/payments", response_model=list[Payment])
def get_payments(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
) -> list[Payment]:
    return dashboard.payments()


@router.get("/weather", response_model=WeatherResponse)
def get_weather() -> WeatherResponse:
    """Public; static placeholder until a weather provider is configured."""
    return dashboard.current_weather()


@router.get("/social", response_model=list[SocialPost])
def get_social_feed() -> list[SocialPost]:
    """Public social media feed (placeholder posts)."""
    return dashboard.social_posts()
