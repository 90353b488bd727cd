"""Core app configuration, security and the shared user store."""

from app.core.config import get_settings, settings
from app.core.store import get_user_store

__all__ = ["get_settings", "settings", "get_user_store"]
