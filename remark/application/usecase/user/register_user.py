"""Register user use case."""

from pydantic import BaseModel

from remark.domain.service import TokenService, UserService
from remark.domain.value import Username


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: str  # Raw, not yet normalized


class RegisterUserResponse(BaseModel):
    """Register user response."""

    username: str
    token: str


class RegisterUserUseCase:
    """Use case for registering a username and obtaining a token.

    Registration is idempotent: registering an existing username leaves its
    document untouched and still returns a fresh, valid token. There are no
    passwords; holding a token is the only proof of identity.
    """

    def __init__(self, user_service: UserService, token_service: TokenService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            token_service: Token domain service
        """
        self.user_service = user_service
        self.token_service = token_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration flow.

        Steps:
        1. Normalize and validate the username
        2. Create the user's empty document if absent
        3. Issue a token

        Args:
            request: Register user request

        Returns:
            Normalized username and token

        Raises:
            ValidationError: If the username is invalid
            ConfigError: If no signing secret is configured
        """
        username = Username.parse(request.username)
        await self.user_service.create_if_absent(username)
        token = self.token_service.issue(username)
        return RegisterUserResponse(username=username.root, token=token)
