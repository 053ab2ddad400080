"""Pydantic records and request/response schemas."""

from stockroom.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from stockroom.schemas.health import HealthResponse
from stockroom.schemas.product import ProductRecord, ProductWrite, StockUpdate
from stockroom.schemas.user import UserRead, UserRecord, UsersListResponse, UserWrite

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "ProductRecord",
    "ProductWrite",
    "StockUpdate",
    "TokenResponse",
    "UserRead",
    "UserRecord",
    "UserWrite",
    "UsersListResponse",
]
