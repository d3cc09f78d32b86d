"""SQLAlchemy models."""
from todo_api.models.user import User
from todo_api.models.todo import Todo

__all__ = ["User", "Todo"]
