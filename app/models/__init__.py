"""Domain records held by the in-memory store."""

from app.models.user import UserRecord

__all__ = ["UserRecord"]
