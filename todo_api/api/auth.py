"""Authentication API routes."""
from fastapi import APIRouter, Depends, status
from todo_api.api.deps import get_current_user, get_repository
from todo_api.exceptions import AuthError, ValidationError
from todo_api.repository import Repository
from todo_api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserIdentity,
    UserResponse,
)
from todo_api.services import auth_service
from todo_api.services.hasher import MAX_PASSWORD_BYTES, password_too_long

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, repo: Repository = Depends(get_repository)):
    """Register a new user and return a token for it."""
    if not request.username or not request.email or not request.password:
        raise ValidationError("Username, email, and password are required")
    if password_too_long(request.password):
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    user = await auth_service.register_user(
        repo, request.username, request.email, request.password
    )
    if not user:
        raise ValidationError("User already exists or registration failed")

    identity = UserIdentity.model_validate(user)
    token = auth_service.create_access_token(identity)
    return AuthResponse(user=identity, token=token)


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, repo: Repository = Depends(get_repository)):
    """User login endpoint."""
    if not request.username or not request.password:
        raise ValidationError("Username and password are required")

    identity = await auth_service.authenticate_user(repo, request.username, request.password)
    if not identity:
        raise AuthError("Invalid username or password")

    token = auth_service.create_access_token(identity)
    return AuthResponse(user=identity, token=token)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: UserIdentity = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
):
    """Get current user information."""
    user = await auth_service.get_user_by_id(repo, current_user.id)
    if not user:
        raise AuthError("User not found")
    return user
