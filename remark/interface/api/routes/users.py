"""User registration routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from remark.application.usecase.user import (
    CheckUserRequest,
    CheckUserResponse,
    CheckUserUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from remark.interface.api.request import body_string, read_json_object

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.post("", response_model=RegisterUserResponse)
async def register_user(
    request: Request,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> RegisterUserResponse:
    """Register a username (or sign in as an existing one) and get a token.

    Example:
        POST /users
        {"username": "Alice"}

        Response:
        {"username": "alice", "token": "eyJ1Ijoi...Q"}
    """
    body = await read_json_object(request)
    return await register_user_use_case.execute(
        RegisterUserRequest(username=body_string(body, "username"))
    )


@router.get("/{username}", response_model=CheckUserResponse)
async def check_user(
    username: str,
    check_user_use_case: FromDishka[CheckUserUseCase],
) -> CheckUserResponse:
    """Check whether a username is registered. No authentication required.

    Example:
        GET /users/alice

        Response:
        {"username": "alice", "exists": true}
    """
    return await check_user_use_case.execute(CheckUserRequest(username=username))
