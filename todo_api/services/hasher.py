"""Password hashing.

Stored hashes have the form ``salt:digest``: the bcrypt salt (``$2b$<cost>$``
plus 22 salt characters) followed by the 31-character bcrypt digest. Neither
half contains a colon, so the value splits unambiguously on the first one.
"""
import hmac
import bcrypt
from todo_api.config import get_settings

settings = get_settings()

# bcrypt ignores input past this many bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = None) -> str:
    """Hash a password with a freshly generated bcrypt salt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    digest = hashed[len(salt):]
    return f"{salt.decode('ascii')}:{digest.decode('ascii')}"


def verify_password(plain_password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:digest`` value."""
    salt, sep, digest = stored_hash.partition(":")
    if not sep or not salt or not digest:
        return False
    try:
        hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt.encode("ascii"))
        expected = digest.encode("ascii")
    except ValueError:
        # malformed salt or over-long password
        return False
    return hmac.compare_digest(hashed[len(salt):], expected)


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES
