"""Todos API routes."""
from typing import List
from fastapi import APIRouter, Depends, Response, status
from todo_api.api.deps import get_current_user, get_repository
from todo_api.exceptions import NotFoundError, ValidationError
from todo_api.repository import Repository
from todo_api.schemas.auth import UserIdentity
from todo_api.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from todo_api.services import todo_service

router = APIRouter()


@router.get("", response_model=List[TodoResponse])
async def list_todos(
    repo: Repository = Depends(get_repository),
    current_user: UserIdentity = Depends(get_current_user),
):
    """List the current user's todos, newest first."""
    return await todo_service.list_todos(repo, current_user.id)


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
async def create_todo(
    data: TodoCreate,
    repo: Repository = Depends(get_repository),
    current_user: UserIdentity = Depends(get_current_user),
):
    """Create a new todo."""
    if not data.text:
        raise ValidationError("Text field is required")
    return await todo_service.create_todo(repo, data.text, current_user.id, data.due_date)


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: int,
    data: TodoUpdate,
    repo: Repository = Depends(get_repository),
    current_user: UserIdentity = Depends(get_current_user),
):
    """
    Update a todo.

    Overwrites both text and completed.
    """
    if not data.text:
        raise ValidationError("Text field is required")

    todo = await todo_service.update_todo(
        repo, todo_id, data.text, data.completed, current_user.id
    )
    if not todo:
        raise NotFoundError("Todo not found")
    return todo


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: int,
    repo: Repository = Depends(get_repository),
    current_user: UserIdentity = Depends(get_current_user),
):
    """Delete a todo."""
    deleted = await todo_service.delete_todo(repo, todo_id, current_user.id)
    if not deleted:
        raise NotFoundError("Todo not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
