"""Todo model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship, backref
from todo_api.database import Base, utcnow


class Todo(Base):
    """A to-do item, always owned by exactly one user."""

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    due_date = Column(String(64), nullable=True)

    # Relationships
    owner = relationship("User", backref=backref("todos", passive_deletes=True))

    def __repr__(self):
        return f"<Todo(id={self.id}, user_id={self.user_id}, completed={self.completed})>"
