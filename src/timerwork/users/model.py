from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a registered account.

    Plain data object; no database access lives here.
    """

    user_id: int
    username: str
    password_hash: str
