"""Data access for users and todos.

Every todo query is filtered by the owning user id; a todo owned by someone
else is indistinguishable from one that does not exist. Lookups that match
nothing return None (or False) instead of raising.
"""
import logging
from typing import List, Optional
from sqlalchemy import select, delete, desc, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from todo_api.database import utcnow
from todo_api.models.user import User
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)


class Repository:
    """Wraps one AsyncSession; create one per request."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # Users

    async def create_user(
        self, username: str, email: str, password_hash: str
    ) -> Optional[User]:
        """Insert a user; returns None if the username or email is taken."""
        now = utcnow()
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Insert of user %r rejected by unique constraint", username)
            return None
        await self.db.refresh(user)
        return user

    async def get_user_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def user_exists(self, username: str, email: str) -> bool:
        """True if either the username or the email is already registered."""
        result = await self.db.execute(
            select(User.id)
            .where(or_(User.username == username, User.email == email))
            .limit(1)
        )
        return result.first() is not None

    # Todos

    async def get_all_todos(self, user_id: int) -> List[Todo]:
        """All todos of a user, newest first."""
        result = await self.db.execute(
            select(Todo)
            .where(Todo.user_id == user_id)
            .order_by(desc(Todo.created_at), desc(Todo.id))
        )
        return list(result.scalars().all())

    async def get_todo_by_id(self, todo_id: int, user_id: int) -> Optional[Todo]:
        result = await self.db.execute(
            select(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def create_todo(
        self, text: str, user_id: int, due_date: Optional[str] = None
    ) -> Todo:
        now = utcnow()
        todo = Todo(
            user_id=user_id,
            text=text,
            completed=False,
            created_at=now,
            updated_at=now,
            due_date=due_date or None,
        )
        self.db.add(todo)
        await self.db.commit()
        await self.db.refresh(todo)
        return todo

    async def update_todo(
        self, todo_id: int, text: str, completed: bool, user_id: int
    ) -> Optional[Todo]:
        """Overwrite text and completed; created_at is left alone."""
        todo = await self.get_todo_by_id(todo_id, user_id)
        if not todo:
            return None

        todo.text = text
        todo.completed = completed
        todo.updated_at = utcnow()

        await self.db.commit()
        await self.db.refresh(todo)
        return todo

    async def delete_todo(self, todo_id: int, user_id: int) -> bool:
        """Delete a todo; returns whether a row was removed."""
        result = await self.db.execute(
            delete(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
        )
        await self.db.commit()
        return result.rowcount > 0
