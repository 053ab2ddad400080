"""User management endpoints (admin only). Responses never include passwords."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from stockroom.api.v1.auth import require_capability
from stockroom.api.v1.deps import get_user_service
from stockroom.core.errors import InvalidArgument
from stockroom.schemas.auth import CurrentUser
from stockroom.schemas.user import UserRead, UsersListResponse, UserWrite
from stockroom.services.users import UserService

router = APIRouter()

Users = Annotated[UserService, Depends(get_user_service)]
Admin = Annotated[CurrentUser, Depends(require_capability("manage_users"))]


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.get("", response_model=UsersListResponse)
def list_users(users: Users, _admin: Admin) -> UsersListResponse:
    return UsersListResponse(
        users=[UserRead.model_validate(u) for u in users.get_all_users()]
    )


@router.get("/username/{username}", response_model=UserRead)
def get_user_by_username(username: str, users: Users, _admin: Admin) -> UserRead:
    user = users.get_user_by_username(username)
    if user is None:
        raise _not_found(f"User '{username}' not found")
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, users: Users, _admin: Admin) -> UserRead:
    user = users.get_user_by_id(user_id)
    if user is None:
        raise _not_found(f"User {user_id} not found")
    return UserRead.model_validate(user)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(body: UserWrite, users: Users, _admin: Admin) -> UserRead:
    user = body.to_record()
    try:
        users.add_user(user)
    except InvalidArgument as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return UserRead.model_validate(user)


@router.put("/{user_id}", response_model=UserRead)
def replace_user(user_id: int, body: UserWrite, users: Users, _admin: Admin) -> UserRead:
    user = body.to_record(user_id)
    try:
        updated = users.update_user(user)
    except InvalidArgument as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    if not updated:
        raise _not_found(f"User {user_id} not found")
    return UserRead.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, users: Users, _admin: Admin) -> Response:
    if not users.delete_user(user_id):
        raise _not_found(f"User {user_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
