"""User use cases."""

from .delete_user import DeleteUserRequest, DeleteUserUseCase
from .rename_user import RenameUserRequest, RenameUserResponse, RenameUserUseCase

__all__ = [
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "RenameUserRequest",
    "RenameUserResponse",
    "RenameUserUseCase",
]
