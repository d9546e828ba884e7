"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from remark.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from remark.interface.api.request import bearer_token

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the user the bearer token was issued to."""
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=bearer_token(authorization))
    )
