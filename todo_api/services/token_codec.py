"""Bearer token encoding and validation.

A token is ``user_id:username:issued_at:signature`` where the signature is the
hex HMAC-SHA256 of the first three fields keyed by the server secret. The
username segment is percent-encoded, so tokens are plain ASCII and survive
transport in an HTTP header whatever characters the username holds.
"""
import hashlib
import hmac
import logging
from typing import Optional
from urllib.parse import quote, unquote
from todo_api.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = ":"
DEFAULT_LIFETIME_SECONDS = 24 * 60 * 60


class TokenCodec:
    """Issues and validates self-contained signed tokens."""

    def __init__(
        self,
        secret: str,
        lifetime_seconds: int = DEFAULT_LIFETIME_SECONDS,
        max_clock_skew_seconds: int = 60,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret.encode("utf-8")
        self.lifetime_seconds = lifetime_seconds
        self.max_clock_skew_seconds = max_clock_skew_seconds

    def _sign(self, message: str) -> str:
        return hmac.new(self._secret, message.encode("utf-8"), hashlib.sha256).hexdigest()

    def issue(self, user_id: int, username: str, issued_at: int) -> str:
        """Build a signed token for the given identity and issue time."""
        message = TOKEN_SEPARATOR.join([str(user_id), quote(username, safe=""), str(issued_at)])
        return f"{message}{TOKEN_SEPARATOR}{self._sign(message)}"

    def parse_and_validate(self, token: str, now: int) -> Optional[TokenPayload]:
        """
        Parse a token and check its freshness and signature.

        Returns None for any rejection: wrong segment count, non-numeric
        fields, older than the lifetime, issued in the future beyond the
        allowed clock skew, or a signature mismatch.
        """
        parts = token.split(TOKEN_SEPARATOR)
        if len(parts) != 4:
            logger.debug("Token rejected: expected 4 segments, got %d", len(parts))
            return None

        raw_user_id, username, raw_issued_at, signature = parts
        try:
            user_id = int(raw_user_id)
            issued_at = int(raw_issued_at)
        except ValueError:
            logger.debug("Token rejected: non-numeric field")
            return None

        if now - issued_at > self.lifetime_seconds:
            logger.debug("Token rejected: expired")
            return None
        if issued_at - now > self.max_clock_skew_seconds:
            logger.debug("Token rejected: issued in the future")
            return None

        expected = self._sign(TOKEN_SEPARATOR.join(parts[:3]))
        if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
            logger.debug("Token rejected: bad signature")
            return None

        return TokenPayload(user_id=user_id, username=unquote(username), issued_at=issued_at)
