"""Get current user use case."""

from pydantic import BaseModel

from remark.domain.service import TokenService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # Bearer token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    username: str


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a bearer token.

    Identity comes from the token alone; the user's document is not read.
    """

    def __init__(self, token_service: TokenService) -> None:
        """Initialize get current user use case.

        Args:
            token_service: Token domain service
        """
        self.token_service = token_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Args:
            request: Request with bearer token

        Returns:
            Authenticated username

        Raises:
            AuthError: If the token is invalid
        """
        username = self.token_service.authenticate(request.token)
        return GetCurrentUserResponse(username=username.root)
