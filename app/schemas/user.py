"""Request/response schemas for user management endpoints."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Body for POST /users. Every field must be present."""

    name: str
    username: str
    password: str
    role: str = Field(..., description="Role tag, e.g. 'admin' or 'user'")


class UserUpdate(BaseModel):
    """Body for PUT /users/{id}. Absent or empty fields keep their current value."""

    name: str | None = None
    role: str | None = None


class UserOut(BaseModel):
    """User entry returned by the API (no password hash)."""

    id: int
    name: str
    username: str
    role: str

    class Config:
        from_attributes = True


class PublicUser(BaseModel):
    """Reduced user entry for the public dashboard."""

    name: str
    role: str

    class Config:
        from_attributes = True


class UserMutationResponse(BaseModel):
    """Response for create and update."""

    message: str
    user: UserOut


class MessageResponse(BaseModel):
    message: str
