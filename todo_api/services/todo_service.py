"""Todo service.

Thin pass-through to the repository; every call is scoped by the owning user.
Text is assumed non-empty here, the HTTP layer rejects empty text.
"""
from typing import List, Optional
from todo_api.models.todo import Todo
from todo_api.repository import Repository


async def list_todos(repo: Repository, user_id: int) -> List[Todo]:
    """List a user's todos, newest first."""
    return await repo.get_all_todos(user_id)


async def get_todo(repo: Repository, todo_id: int, user_id: int) -> Optional[Todo]:
    """Get a todo if it belongs to the user."""
    return await repo.get_todo_by_id(todo_id, user_id)


async def create_todo(
    repo: Repository,
    text: str,
    user_id: int,
    due_date: Optional[str] = None,
) -> Todo:
    """Create a new todo."""
    return await repo.create_todo(text, user_id, due_date)


async def update_todo(
    repo: Repository,
    todo_id: int,
    text: str,
    completed: bool,
    user_id: int,
) -> Optional[Todo]:
    """Overwrite text and completed state of a user's todo."""
    return await repo.update_todo(todo_id, text, completed, user_id)


async def delete_todo(repo: Repository, todo_id: int, user_id: int) -> bool:
    """Delete a user's todo; False if there was nothing to delete."""
    return await repo.delete_todo(todo_id, user_id)
