"""User use cases."""

from .check_user import CheckUserRequest, CheckUserResponse, CheckUserUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)

__all__ = [
    "CheckUserRequest",
    "CheckUserResponse",
    "CheckUserUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
]
