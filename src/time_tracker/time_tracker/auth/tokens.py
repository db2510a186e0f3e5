"""Session tokens (JWT).

Tokens are stateless: they carry ``username`` and ``isAdmin`` and expire after
a fixed window. There is no server-side session table, so a token stays valid
until it expires.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, JWT_ALGORITHM
from ..core.exceptions import InvalidTokenError, MissingTokenError
from ..users.model import User


@dataclass(frozen=True)
class Identity:
    """Verified caller identity. Authoritative for every authorization check."""

    username: str
    is_admin: bool


class TokenService:
    def __init__(self, secret: str, *, ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS, algorithm: str = JWT_ALGORITHM):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl = timedelta(hours=int(ttl_hours))
        self._algorithm = algorithm

    def issue(self, user: User, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "username": user.username,
            "isAdmin": bool(user.is_admin),
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> Identity:
        if not token:
            raise MissingTokenError("Access denied")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.InvalidTokenError as exc:
            # ExpiredSignatureError is a subclass.
            raise InvalidTokenError("Invalid token") from exc

        username = payload.get("username")
        is_admin = payload.get("isAdmin")
        if not isinstance(username, str) or not username or not isinstance(is_admin, bool):
            raise InvalidTokenError("Invalid token")

        return Identity(username=username, is_admin=is_admin)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None
