from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

import pytest

from timerwork.core.enums import WorkWeekStatus
from timerwork.core.exceptions import DuplicateUser
from timerwork.users.model import User
from timerwork.workweeks.model import WorkWeek


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._id = 0

    def get_by_username(self, username: str) -> Optional[User]:
        for u in self._by_id.values():
            if u.username == username:
                return u
        return None

    def create_user(self, *, username: str, password_hash: str) -> int:
        if self.get_by_username(username):
            raise DuplicateUser("Username already exists")
        self._id += 1
        self._by_id[self._id] = User(user_id=self._id, username=username, password_hash=password_hash)
        return self._id


class InMemoryWorkWeeks:
    """Mirrors the guarded single-statement updates of the MySQL repository."""

    def __init__(self):
        self.rows: dict[int, WorkWeek] = {}
        self._id = 0
        self.touched: list[tuple[int, datetime]] = []

    def _for_user(self, user_id: int) -> list[WorkWeek]:
        return [w for w in self.rows.values() if w.user_id == user_id]

    def _active(self, user_id: int, status: Optional[WorkWeekStatus] = None) -> Optional[WorkWeek]:
        for w in sorted(self._for_user(user_id), key=lambda w: w.work_week_id, reverse=True):
            if w.week_end is None and (status is None or w.status == status):
                return w
        return None

    def get_latest(self, user_id: int) -> Optional[WorkWeek]:
        weeks = sorted(self._for_user(user_id), key=lambda w: w.work_week_id, reverse=True)
        return weeks[0] if weeks else None

    def get_active(self, user_id: int) -> Optional[WorkWeek]:
        return self._active(user_id)

    def get_paused(self, user_id: int) -> Optional[WorkWeek]:
        return self._active(user_id, WorkWeekStatus.PAUSED)

    def list_recent(self, user_id: int, limit: int):
        weeks = sorted(self._for_user(user_id), key=lambda w: w.week_start, reverse=True)
        return weeks[:limit]

    def create_running(self, *, user_id: int, started_at: datetime, goal_minutes: int) -> int:
        self._id += 1
        self.rows[self._id] = WorkWeek(
            work_week_id=self._id,
            user_id=user_id,
            week_start=started_at,
            week_end=None,
            last_update_time=started_at,
            status=WorkWeekStatus.RUNNING,
            pause_start=None,
            total_pause_time=0,
            week_goal_minutes=goal_minutes,
        )
        return self._id

    def end_active(self, *, user_id: int, ended_at: datetime) -> bool:
        w = self._active(user_id)
        if not w:
            return False
        self.rows[w.work_week_id] = replace(
            w, week_end=ended_at, last_update_time=ended_at, status=WorkWeekStatus.STOPPED, pause_start=None
        )
        return True

    def pause_running(self, *, user_id: int, paused_at: datetime) -> bool:
        w = self._active(user_id, WorkWeekStatus.RUNNING)
        if not w:
            return False
        self.rows[w.work_week_id] = replace(
            w, status=WorkWeekStatus.PAUSED, pause_start=paused_at, last_update_time=paused_at
        )
        return True

    def resume_paused(self, *, user_id: int, resumed_at: datetime, total_pause_time: int) -> bool:
        w = self._active(user_id, WorkWeekStatus.PAUSED)
        if not w:
            return False
        self.rows[w.work_week_id] = replace(
            w,
            status=WorkWeekStatus.RUNNING,
            pause_start=None,
            last_update_time=resumed_at,
            total_pause_time=total_pause_time,
        )
        return True

    def touch(self, *, work_week_id: int, at: datetime) -> bool:
        w = self.rows.get(work_week_id)
        if not w:
            return False
        self.touched.append((work_week_id, at))
        self.rows[work_week_id] = replace(w, last_update_time=at)
        return True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 3, 3, 9, 0, 0))


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def work_weeks_repo() -> InMemoryWorkWeeks:
    return InMemoryWorkWeeks()
