from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for users.

    Services depend on this interface rather than on a concrete database.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, username: str, password_hash: str) -> int:
        """Insert a user; raises DuplicateUser if the username is taken."""

        raise NotImplementedError
