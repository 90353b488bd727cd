"""Pydantic schemas for the informational dashboard endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields with the camelCase keys clients expect."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatsResponse(CamelModel):
    """Response for GET /stats. Session and sales figures are simulated."""

    total_users: int = Field(..., ge=0)
    active_sessions: int = Field(..., ge=0)
    sales: int = Field(..., ge=0)


class ReportData(BaseModel):
    users: int
    sales: int
    notifications: int


class ReportResponse(CamelModel):
    """Response for GET /reports."""

    report_date: datetime
    summary: str
    data: ReportData


class WeatherResponse(BaseModel):
    location: str
    temperature: str
    condition: str


class CalendarEvent(BaseModel):
    id: int
    title: str
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")


class ChatMessage(BaseModel):
    id: int
    sender: str
    message: str


class Payment(BaseModel):
    id: int
    user: str
    amount: int
    status: str


class SocialPost(BaseModel):
    id: int
    platform: str
    content: str
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
