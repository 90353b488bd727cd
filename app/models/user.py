"""In-memory record for application users (auth and RBAC)."""

from dataclasses import dataclass


@dataclass
class UserRecord:
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user' (not a closed set)
    """

    id: int
    name: str
    username: str
    role: str
    password_hash: str
