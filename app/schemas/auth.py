"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class LoginResponse(BaseModel):
    """JWT access token returned after successful login."""

    message: str = Field(default="Login successful")
    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")


class TokenClaims(BaseModel):
    """Identity resolved from a verified bearer token (id, role, expiry)."""

    id: int
    role: str
    issued_at: datetime | None = None
    expires_at: datetime
