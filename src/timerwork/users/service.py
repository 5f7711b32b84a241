from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import DuplicateUser, InvalidCredentials, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """What the login endpoint hands back alongside the token."""

    user_id: int
    username: str


class AuthService:
    """Use cases: register an account and verify credentials."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, username: str, password: str) -> int:
        username = require_non_empty(username, "Username")
        if not isinstance(password, str) or not password:
            raise ValidationError("Password is required")

        if self._users.get_by_username(username):
            raise DuplicateUser("Username already exists")

        user_id = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(password),
        )
        logger.info("Registered user %s (id=%s)", username, user_id)
        return user_id

    def authenticate(self, username: str, password: str) -> AuthenticatedUser:
        if not isinstance(username, str) or not isinstance(password, str):
            raise InvalidCredentials("Invalid credentials")

        user = self._users.get_by_username(username.strip())
        if not user:
            raise InvalidCredentials("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hash values
            ok = False

        if not ok:
            raise InvalidCredentials("Invalid credentials")

        return AuthenticatedUser(user_id=user.user_id, username=user.username)

    def verify(self, username: str, password: str) -> int:
        return self.authenticate(username, password).user_id
