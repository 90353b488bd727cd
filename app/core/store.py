"""Process-wide user store and its FastAPI dependency."""

from functools import lru_cache

from app.core.config import settings
from app.services.user_store import UserStore, seed_default_users


@lru_cache
def _process_store() -> UserStore:
    store = UserStore()
    if settings.SEED_DEFAULT_USERS:
        seed_default_users(store)
    return store


def get_user_store() -> UserStore:
    """Dependency: return the store shared by every request in this process."""
    return _process_store()
