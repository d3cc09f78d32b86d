"""Pydantic schemas for request/response models."""
from todo_api.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    UserIdentity,
    AuthResponse,
    UserResponse,
    TokenPayload,
)
from todo_api.schemas.todo import (
    TodoCreate,
    TodoUpdate,
    TodoResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UserIdentity",
    "AuthResponse",
    "UserResponse",
    "TokenPayload",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
]
