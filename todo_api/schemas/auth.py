"""Authentication schemas."""
from datetime import datetime
from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Registration request schema.

    Fields default to empty so a missing field is reported as a 400 by the
    handler rather than as a schema error.
    """
    username: str = ""
    email: str = ""
    password: str = ""


class LoginRequest(BaseModel):
    """Login request schema."""
    username: str = ""
    password: str = ""


class UserIdentity(BaseModel):
    """Authenticated identity; never carries the password hash."""
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Register/login response with the bearer token."""
    user: UserIdentity
    token: str


class UserResponse(BaseModel):
    """User information response."""
    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TokenPayload(BaseModel):
    """Fields carried by a validated bearer token."""
    user_id: int
    username: str
    issued_at: int
