"""Payload builders for the informational endpoints (stats, reports, feeds).

Only the user counts are real; everything else is placeholder data standing in
for integrations that are not wired up.
"""

import random
from datetime import UTC, datetime

from app.schemas.dashboard import (
    CalendarEvent,
    ChatMessage,
    Payment,
    ReportData,
    ReportResponse,
    SocialPost,
    StatsResponse,
    WeatherResponse,
)

# Upper bounds (exclusive) of the simulated stats figures.
MAX_ACTIVE_SESSIONS = 100
MAX_SALES = 1000

REPORT_SUMMARY = "Ini adalah laporan dummy."
REPORT_SALES = 500
REPORT_NOTIFICATIONS = 5

CALENDAR_EVENTS = (
    (1, "Meeting", "2025-04-01"),
    (2, "Maintenance", "2025-04-05"),
)

CHAT_MESSAGES = (
    (1, "Support", "Halo, ada yang bisa dibantu?"),
    (2, "User", "Saya butuh bantuan dengan akun saya."),
)

PAYMENTS = (
    (1, "User", 100, "Completed"),
    (2, "Alice", 250, "Pending"),
)

SOCIAL_POSTS = (
    (1, "Twitter", "Ini adalah tweet contoh", "2025-03-14"),
    (2, "Instagram", "Post terbaru telah diupload", "2025-03-15"),
)


def build_stats(total_users: int, rng: random.Random | None = None) -> StatsResponse:
    rng = rng or random.Random()
    return StatsResponse(
        total_users=total_users,
        active_sessions=rng.randrange(MAX_ACTIVE_SESSIONS),
        sales=rng.randrange(MAX_SALES),
    )


def build_report(total_users: int, now: datetime | None = None) -> ReportResponse:
    return ReportResponse(
        report_date=now or datetime.now(UTC),
        summary=REPORT_SUMMARY,
        data=ReportData(
            users=total_users,
            sales=REPORT_SALES,
            notifications=REPORT_NOTIFICATIONS,
        ),
    )


def current_weather() -> WeatherResponse:
    return WeatherResponse(location="Jakarta", temperature="32°C", condition="Sunny")


def calendar_events() -> list[CalendarEvent]:
    return [CalendarEvent(id=i, title=title, date=date) for i, title, date in CALENDAR_EVENTS]


def chat_messages() -> list[ChatMessage]:
    return [ChatMessage(id=i, sender=sender, message=msg) for i, sender, msg in CHAT_MESSAGES]


def payments() -> list[Payment]:
    return [
        Payment(id=i, user=user, amount=amount, status=status)
        for i, user, amount, status in PAYMENTS
    ]


def social_posts() -> list[SocialPost]:
    return [
        SocialPost(id=i, platform=platform, content=content, date=date)
        for i, platform, content, date in SOCIAL_POSTS
    ]
