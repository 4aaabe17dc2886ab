"""Linked user use cases."""

from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .set_auto_cast import SetAutoCastRequest, SetAutoCastUseCase

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "SetAutoCastRequest",
    "SetAutoCastUseCase",
]
