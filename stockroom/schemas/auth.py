"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from stockroom.schemas.user import UserRead


class LoginRequest(BaseModel):
    """Credentials for login. Blank values are rejected by the user service (400)."""

    username: str = Field(default="", max_length=255, description="Username")
    password: str = Field(default="", max_length=255, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login, with the authenticated user."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: UserRead


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
