"""Pydantic schemas for users: the domain record and API payloads (which never carry passwords out)."""

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """User as the service layer sees it. Unconstrained so validate_user can reject bad input."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    username: str | None = None
    password: str | None = None
    role: str | None = None


class UserWrite(BaseModel):
    """Request body for creating or replacing a user."""

    model_config = {"extra": "ignore"}

    username: str | None = None
    password: str | None = None
    role: str | None = None

    def to_record(self, user_id: int | None = None) -> UserRecord:
        return UserRecord(id=user_id, **self.model_dump())


class UserRead(BaseModel):
    """User entry returned by the API (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class UsersListResponse(BaseModel):
    """Response for GET /users."""

    users: list[UserRead] = Field(default_factory=list)
