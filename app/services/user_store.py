"""In-memory credential store: user records, password hashes, credential checks."""

import logging
import threading

from app.core.security import hash_password, verify_password
from app.models import UserRecord

logger = logging.getLogger(__name__)

# Records present at process start: (name, username, password, role).
DEFAULT_USERS = (
    ("Admin", "admin", "admin123", "admin"),
    ("User", "user", "user123", "user"),
)


class UserConflictError(Exception):
    """Raised when creating a user whose username is already taken."""

    def __init__(self, message: str = "Username already exists") -> None:
        self.message = message
        super().__init__(message)


class UserNotFoundError(Exception):
    """Raised when updating a user id that is not in the store."""

    def __init__(self, message: str = "User not found") -> None:
        self.message = message
        super().__init__(message)


class UserStore:
    """
    Owns the process-lifetime list of user records.

    Handlers run on FastAPI's thread pool, so every access goes through one lock.
    New ids are len(records) + 1, not max(id) + 1: after a delete, a new record
    can reuse an id that is still held by another record.
    """

    def __init__(self) -> None:
        self._users: list[UserRecord] = []
        self._lock = threading.Lock()

    def list(self, role: str | None = None) -> list[UserRecord]:
        """Return all records, or only those whose role equals `role`."""
        with self._lock:
            if role:
                return [u for u in self._users if u.role == role]
            return list(self._users)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def get_by_username(self, username: str) -> UserRecord | None:
        with self._lock:
            return self._find_by_username(username)

    def create(self, name: str, username: str, password: str, role: str) -> UserRecord:
        """Add a user. Raises UserConflictError if the username exists (store unchanged)."""
        password_hash = hash_password(password)
        with self._lock:
            if self._find_by_username(username) is not None:
                raise UserConflictError()
            user = UserRecord(
                id=len(self._users) + 1,
                name=name,
                username=username,
                role=role,
                password_hash=password_hash,
            )
            self._users.append(user)
        logger.info("User created", extra={"user_id": user.id, "role": role})
        return user

    def update(
        self,
        user_id: int,
        name: str | None = None,
        role: str | None = None,
    ) -> UserRecord:
        """Change name and/or role in place; empty values keep the current one."""
        with self._lock:
            user = next((u for u in self._users if u.id == user_id), None)
            if user is None:
                raise UserNotFoundError()
            user.name = name or user.name
            user.role = role or user.role
        logger.info("User updated", extra={"user_id": user_id})
        return user

    def delete(self, user_id: int) -> None:
        """Remove every record with this id. Missing ids are not an error."""
        with self._lock:
            before = len(self._users)
            self._users = [u for u in self._users if u.id != user_id]
            removed = before - len(self._users)
        logger.info("User delete: user_id=%s removed=%s", user_id, removed)

    def verify_credentials(self, username: str, password: str) -> UserRecord | None:
        """Return the record when username exists and password matches its hash."""
        user = self.get_by_username(username)
        if user is None:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def _find_by_username(self, username: str) -> UserRecord | None:
        return next((u for u in self._users if u.username == username), None)


def seed_default_users(store: UserStore) -> UserStore:
    """Load the Admin (id 1) and User (id 2) records."""
    for name, username, password, role in DEFAULT_USERS:
        store.create(name=name, username=username, password=password, role=role)
    return store
