from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, TOKEN_ALGORITHM
from ..core.exceptions import InvalidToken

logger = logging.getLogger(__name__)


def bearer_token(header: Optional[str]) -> Optional[str]:
    """Extract the token from an Authorization header value.

    A "Bearer " prefix is stripped when present; a bare token is returned as-is.
    """
    if not header:
        return None
    parts = header.split(None, 1)
    if parts and parts[0].lower() == "bearer":
        return parts[1].strip() if len(parts) > 1 else None
    return header.strip() or None


class TokenService:
    """Issues and verifies stateless HS256 tokens carrying a user id.

    There is no revocation list: a token stays valid until it expires, and
    logging out is up to the client.
    """

    def __init__(
        self,
        secret: str,
        *,
        ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._ttl = timedelta(hours=int(ttl_hours))
        self._clock = clock

    def issue(self, user_id: int) -> str:
        now = self._clock()
        claims = {
            "user_id": int(user_id),
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: Optional[str]) -> int:
        if not token:
            raise InvalidToken("Invalid token")

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.debug("Token has expired")
            raise InvalidToken("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.debug("Invalid token: %s", e)
            raise InvalidToken("Invalid token") from e

        user_id = claims.get("user_id")
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise InvalidToken("Invalid token claims")
        return user_id
