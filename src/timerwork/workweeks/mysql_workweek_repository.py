from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import WorkWeekStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import WorkWeek
from .repository import WorkWeekRepository

_COLUMNS = """
    id, user_id, week_start, week_end, last_update_time, status,
    pause_start, total_pause_time, week_goal_minutes
"""


def _to_work_week(r: dict) -> WorkWeek:
    return WorkWeek(
        work_week_id=int(r["id"]),
        user_id=int(r["user_id"]),
        week_start=r["week_start"],
        week_end=r.get("week_end"),
        last_update_time=r["last_update_time"],
        status=WorkWeekStatus.parse(r["status"]),
        pause_start=r.get("pause_start"),
        total_pause_time=int(r.get("total_pause_time") or 0),
        week_goal_minutes=int(r["week_goal_minutes"]),
    )


class MySQLWorkWeekRepository(WorkWeekRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_latest(self, user_id: int) -> Optional[WorkWeek]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_weeks
                WHERE user_id=%s
                ORDER BY created_at DESC, id DESC
                LIMIT 1
                """,
                (user_id,),
            )
            r = fetchone(cur)
            return _to_work_week(r) if r else None

    def get_active(self, user_id: int) -> Optional[WorkWeek]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_weeks
                WHERE user_id=%s AND week_end IS NULL
                ORDER BY created_at DESC, id DESC
                LIMIT 1
                """,
                (user_id,),
            )
            r = fetchone(cur)
            return _to_work_week(r) if r else None

    def get_paused(self, user_id: int) -> Optional[WorkWeek]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_weeks
                WHERE user_id=%s AND week_end IS NULL AND status=%s
                LIMIT 1
                """,
                (user_id, WorkWeekStatus.PAUSED.value),
            )
            r = fetchone(cur)
            return _to_work_week(r) if r else None

    def list_recent(self, user_id: int, limit: int) -> Sequence[WorkWeek]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_weeks
                WHERE user_id=%s
                ORDER BY week_start DESC
                LIMIT %s
                """,
                (user_id, int(limit)),
            )
            return [_to_work_week(r) for r in fetchall(cur)]

    def create_running(self, *, user_id: int, started_at: datetime, goal_minutes: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_weeks(user_id, week_start, last_update_time, status, week_goal_minutes)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (user_id, started_at, started_at, WorkWeekStatus.RUNNING.value, int(goal_minutes)),
            )
            return int(cur.lastrowid)

    def end_active(self, *, user_id: int, ended_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_weeks
                SET week_end=%s, last_update_time=%s, status=%s, pause_start=NULL
                WHERE user_id=%s AND week_end IS NULL
                """,
                (ended_at, ended_at, WorkWeekStatus.STOPPED.value, user_id),
            )
            return cur.rowcount > 0

    def pause_running(self, *, user_id: int, paused_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_weeks
                SET status=%s, pause_start=%s, last_update_time=%s
                WHERE user_id=%s AND week_end IS NULL AND status=%s
                """,
                (WorkWeekStatus.PAUSED.value, paused_at, paused_at, user_id, WorkWeekStatus.RUNNING.value),
            )
            return cur.rowcount > 0

    def resume_paused(self, *, user_id: int, resumed_at: datetime, total_pause_time: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_weeks
                SET status=%s, pause_start=NULL, last_update_time=%s, total_pause_time=%s
                WHERE user_id=%s AND week_end IS NULL AND status=%s
                """,
                (
                    WorkWeekStatus.RUNNING.value,
                    resumed_at,
                    int(total_pause_time),
                    user_id,
                    WorkWeekStatus.PAUSED.value,
                ),
            )
            return cur.rowcount > 0

    def touch(self, *, work_week_id: int, at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE work_weeks SET last_update_time=%s WHERE id=%s",
                (at, int(work_week_id)),
            )
            return cur.rowcount > 0
