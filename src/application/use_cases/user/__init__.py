"""User Use Cases"""
from .create_user import CreateUserInput, CreateUserUseCase
from .delete_user import DeleteUserInput, DeleteUserUseCase
from .errors import (
    ConflictError,
    DecodeError,
    EncodeError,
    InvalidInputError,
    NotFoundError,
    StoreError,
    UserServiceError,
)
from .fetch_user import FetchUserInput, FetchUserUseCase, ListUsersUseCase
from .update_user import UpdateUserInput, UpdateUserUseCase

__all__ = [
    "CreateUserInput",
    "CreateUserUseCase",
    "DeleteUserInput",
    "DeleteUserUseCase",
    "FetchUserInput",
    "FetchUserUseCase",
    "ListUsersUseCase",
    "UpdateUserInput",
    "UpdateUserUseCase",
    "UserServiceError",
    "InvalidInputError",
    "ConflictError",
    "NotFoundError",
    "StoreError",
    "DecodeError",
    "EncodeError",
]
