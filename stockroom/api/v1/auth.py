"""JWT login and auth dependencies (get_current_user, require_capability)."""

from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stockroom.api.v1.deps import get_user_service
from stockroom.core.config import get_settings
from stockroom.core.errors import InvalidArgument
from stockroom.core.security import create_access_token, decode_access_token
from stockroom.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from stockroom.schemas.user import UserRead
from stockroom.services.access import Operation, can_access
from stockroom.services.users import UserService

router = APIRouter()
security = HTTPBearer(auto_error=False)

# Identity used for every request when AUTH_ENABLED is False.
ANONYMOUS_ADMIN = CurrentUser(id=0, username="anonymous", role="admin")


@router.post("", response_model=TokenResponse)
def login(
    body: LoginRequest,
    users: Annotated[UserService, Depends(get_user_service)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token and the user.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    try:
        user = users.authenticate_user(body.username, body.password)
    except InvalidArgument as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        )
    token = create_access_token(sub=user.id, role=user.role)
    return TokenResponse(
        access_token=token,
        token_type="bearer",
        user=UserRead.model_validate(user),
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    users: Annotated[UserService, Depends(get_user_service)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if not get_settings().AUTH_ENABLED:
        return ANONYMOUS_ADMIN
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")
    sub = payload.get("sub")
    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token payload")
    user = users.get_user_by_id(user_id)
    if user is None:
        raise _unauthorized("User not found")
    return CurrentUser(id=user.id, username=user.username, role=user.role)


def require_capability(operation: Operation) -> Callable[..., CurrentUser]:
    """Build a dependency that allows the request only if the current user's role may perform operation."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not can_access(current_user.role, operation):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{current_user.role}' may not {operation.replace('_', ' ')}",
            )
        return current_user

    return dependency
