"""Check user use case."""

from pydantic import BaseModel

from remark.domain.service import UserService
from remark.domain.value import Username


class CheckUserRequest(BaseModel):
    """Check user request."""

    username: str


class CheckUserResponse(BaseModel):
    """Check user response."""

    username: str
    exists: bool


class CheckUserUseCase:
    """Use case for checking whether a username is registered."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize check user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CheckUserRequest) -> CheckUserResponse:
        """Execute check user flow.

        Raises:
            ValidationError: If the username is invalid
        """
        username = Username.parse(request.username)
        exists = await self.user_service.exists(username)
        return CheckUserResponse(username=username.root, exists=exists)
