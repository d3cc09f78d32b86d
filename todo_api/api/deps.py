"""Shared API dependencies."""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from todo_api.database import get_db
from todo_api.exceptions import AuthError
from todo_api.repository import Repository
from todo_api.schemas.auth import UserIdentity
from todo_api.services import auth_service

security = HTTPBearer(auto_error=False)


async def get_repository(db: AsyncSession = Depends(get_db)) -> Repository:
    """Repository bound to this request's session."""
    return Repository(db)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    repo: Repository = Depends(get_repository),
) -> UserIdentity:
    """Dependency to get the current authenticated user."""
    if credentials is None:
        raise AuthError("Unauthorized")

    identity = await auth_service.validate_token(repo, credentials.credentials)
    if identity is None:
        raise AuthError("Invalid token")

    return identity
