from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.tokens import TokenService
from .core.constants import DEFAULT_TOKEN_TTL_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .workweeks.mysql_workweek_repository import MySQLWorkWeekRepository
from .workweeks.repository import WorkWeekRepository
from .workweeks.service import WorkWeekService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    work_weeks_repo: WorkWeekRepository

    auth_service: AuthService
    token_service: TokenService
    work_week_service: WorkWeekService


def wire(
    *,
    users_repo: UserRepository,
    work_weeks_repo: WorkWeekRepository,
    secret_key: str,
    token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS,
    conn: Optional[DatabaseConnection] = None,
    **service_options,
) -> Container:
    """Assemble services over the given repositories."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        work_weeks_repo=work_weeks_repo,
        auth_service=AuthService(users_repo),
        token_service=TokenService(secret_key, ttl_hours=token_ttl_hours),
        work_week_service=WorkWeekService(work_weeks_repo, **service_options),
    )


def build_container(*, db_config: dict, secret_key: str, token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return wire(
        users_repo=MySQLUserRepository(conn),
        work_weeks_repo=MySQLWorkWeekRepository(conn),
        secret_key=secret_key,
        token_ttl_hours=token_ttl_hours,
        conn=conn,
    )
