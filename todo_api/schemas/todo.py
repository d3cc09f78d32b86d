"""Todo schemas."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Schema for creating a todo."""
    text: str = ""
    due_date: Optional[str] = Field(default=None, alias="dueDate")

    class Config:
        populate_by_name = True


class TodoUpdate(BaseModel):
    """Schema for updating a todo; both fields are overwritten."""
    text: str = ""
    completed: bool = False


class TodoResponse(BaseModel):
    """Todo response schema."""
    id: int
    user_id: int
    text: str
    completed: bool
    created_at: datetime
    updated_at: datetime
    due_date: Optional[str] = None

    class Config:
        from_attributes = True
