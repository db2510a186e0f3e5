from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..auth.tokens import TokenService
from ..common.validators import require_fields
from ..core.exceptions import ConflictError, InvalidCredentialsError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

SIGNUP_FIELDS = ("first_name", "last_name", "email", "username")
INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


class AuthService:
    """Use cases: sign up and log in."""

    def __init__(self, users: UserRepository, tokens: TokenService, *, password_method: str | None = None):
        self._users = users
        self._tokens = tokens
        self._password_method = password_method

    def _hash(self, password: str) -> str:
        if self._password_method:
            return generate_password_hash(password, method=self._password_method)
        return generate_password_hash(password)

    def signup(self, *, first_name, last_name, email, username, password) -> User:
        message = "All fields are required"
        fields = require_fields(
            {"first_name": first_name, "last_name": last_name, "email": email, "username": username},
            SIGNUP_FIELDS,
            message,
        )
        if not isinstance(password, str) or not password:
            raise ValidationError(message)

        if self._users.get_by_username_or_email(fields["username"], fields["email"]):
            raise ConflictError("Username or email already exists")

        user = self._users.create_user(
            first_name=fields["first_name"],
            last_name=fields["last_name"],
            email=fields["email"],
            username=fields["username"],
            password_hash=self._hash(password),
            is_admin=False,
        )
        logger.info("Account created for %s", user.username)
        return user

    def login(self, username, password) -> LoginResult:
        if not isinstance(username, str) or not username.strip() or not isinstance(password, str) or not password:
            raise ValidationError("Username and password are required")

        user = self._users.get_by_username(username.strip())
        if not user or not user.password_hash:
            raise InvalidCredentialsError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # unknown or corrupted hash format
            ok = False

        if not ok:
            logger.info("Failed login for %s", user.username)
            raise InvalidCredentialsError(INVALID_CREDENTIALS)

        logger.info("Login for %s", user.username)
        return LoginResult(token=self._tokens.issue(user), user=user)
