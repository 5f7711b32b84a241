from __future__ import annotations

from typing import Optional

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateUser
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        username=row["username"],
        password_hash=row["password_hash"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, username, password_hash FROM users WHERE username=%s",
                (username,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(self, *, username: str, password_hash: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO users(username, password_hash) VALUES(%s,%s)",
                    (username, password_hash),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateUser("Username already exists") from e
            raise
