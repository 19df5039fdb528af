from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, TOKEN_ALGORITHM
from ..core.exceptions import AuthorizationError


class TokenService:
    """Issue and verify signed bearer tokens carrying a user id."""

    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = timedelta(hours=DEFAULT_TOKEN_TTL_HOURS),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, user_id: int) -> str:
        now = self._clock()
        payload = {"id": int(user_id), "iat": now, "exp": now + self._ttl}
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> int:
        """Return the user id encoded in ``token``."""
        try:
            data = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": ["exp", "id"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthorizationError("Token has expired.") from e
        except jwt.InvalidTokenError as e:
            raise AuthorizationError("Invalid token.") from e

        user_id = data.get("id")
        if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
            raise AuthorizationError("Invalid token.")
        return user_id

    def verify_header(self, header: Optional[str]) -> int:
        """Verify an ``Authorization: Bearer <token>`` header value."""
        if not header:
            raise AuthorizationError("No token provided.")
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise AuthorizationError("No token provided.")
        return self.verify(parts[1])
