"""Authentication service."""
import logging
import time
from typing import Optional
from todo_api.config import get_settings
from todo_api.models.user import User
from todo_api.repository import Repository
from todo_api.schemas.auth import UserIdentity
from todo_api.services.hasher import hash_password, verify_password, password_too_long
from todo_api.services.token_codec import TokenCodec

settings = get_settings()
logger = logging.getLogger(__name__)

token_codec = TokenCodec(
    settings.secret_key,
    lifetime_seconds=settings.token_expire_hours * 3600,
    max_clock_skew_seconds=settings.token_max_clock_skew_seconds,
)


def current_timestamp() -> int:
    """Current UTC epoch seconds."""
    return int(time.time())


async def register_user(
    repo: Repository,
    username: str,
    email: str,
    password: str,
) -> Optional[User]:
    """
    Register a new user.

    Returns None if a field is empty, the password exceeds the hashing
    limit, or the username/email is already taken. The unique constraint on
    insert is the final word on duplicates; the existence check only avoids
    hashing for nothing.
    """
    if not username or not email or not password:
        return None
    if password_too_long(password):
        return None

    if await repo.user_exists(username, email):
        logger.info("Registration rejected: %r or its email already exists", username)
        return None

    user = await repo.create_user(username, email, hash_password(password))
    if user:
        logger.info("Registered user id=%s username=%r", user.id, user.username)
    return user


async def authenticate_user(
    repo: Repository,
    username: str,
    password: str,
) -> Optional[UserIdentity]:
    """Authenticate a user by username and password."""
    user = await repo.get_user_by_username(username)

    if not user:
        logger.warning("Login failed: unknown username %r", username)
        return None
    if not verify_password(password, user.password_hash):
        logger.warning("Login failed: bad password for user id=%s", user.id)
        return None

    return UserIdentity.model_validate(user)


def create_access_token(identity: UserIdentity) -> str:
    """Issue a token for the identity, stamped with the current time."""
    return token_codec.issue(identity.id, identity.username, current_timestamp())


async def validate_token(repo: Repository, token: str) -> Optional[UserIdentity]:
    """Validate a bearer token and confirm its user still exists."""
    payload = token_codec.parse_and_validate(token, current_timestamp())
    if payload is None:
        return None

    user = await repo.get_user_by_id(payload.user_id)
    if user is None:
        logger.debug("Token rejected: user id=%s no longer exists", payload.user_id)
        return None

    return UserIdentity.model_validate(user)


async def get_user_by_id(repo: Repository, user_id: int) -> Optional[User]:
    """Get a user by ID."""
    return await repo.get_user_by_id(user_id)
