from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import mysql.connector

from ..common.datetime_utils import now_local, to_iso
from ..core.constants import DEFAULT_GOAL_MINUTES, DEFAULT_HISTORY_LIMIT
from ..core.enums import WorkWeekStatus
from ..core.exceptions import AlreadyActive, NoActiveWeek, NotPaused, NotRunning
from .model import WorkWeek, WorkWeekHistoryItem
from .repository import WorkWeekRepository
from .timer import elapsed_seconds, history_work_minutes, pause_duration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkWeekView:
    """A work week together with its elapsed time at read time."""

    work_week: WorkWeek
    elapsed_time: int

    def to_dict(self) -> Dict[str, Any]:
        data = self.work_week.to_dict()
        data["elapsed_time"] = self.elapsed_time
        return data


class WorkWeekService:
    """Use cases: drive a user's work-week timer.

    Each transition is conditioned on the stored status, so a request that
    does not fit the current state fails without changing anything.
    """

    def __init__(
        self,
        work_weeks: WorkWeekRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        default_goal_minutes: int = DEFAULT_GOAL_MINUTES,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._work_weeks = work_weeks
        self._clock = clock
        self._default_goal_minutes = int(default_goal_minutes)
        self._history_limit = int(history_limit)

    def start(self, user_id: int, goal_minutes: int = 0) -> int:
        if self._work_weeks.get_active(user_id):
            raise AlreadyActive("Week already started")

        goal = int(goal_minutes) if goal_minutes and goal_minutes > 0 else self._default_goal_minutes
        work_week_id = self._work_weeks.create_running(
            user_id=user_id,
            started_at=self._clock(),
            goal_minutes=goal,
        )
        logger.info("User %s started week %s (goal=%s min)", user_id, work_week_id, goal)
        return work_week_id

    def end(self, user_id: int) -> None:
        if not self._work_weeks.end_active(user_id=user_id, ended_at=self._clock()):
            raise NoActiveWeek("No active week found")
        logger.info("User %s ended the active week", user_id)

    def pause(self, user_id: int) -> None:
        if not self._work_weeks.pause_running(user_id=user_id, paused_at=self._clock()):
            raise NotRunning("No running timer found")
        logger.info("User %s paused the timer", user_id)

    def resume(self, user_id: int) -> None:
        week = self._work_weeks.get_paused(user_id)
        if not week:
            raise NotPaused("No paused timer found")

        now = self._clock()
        total = week.total_pause_time + pause_duration(week, now)
        if not self._work_weeks.resume_paused(user_id=user_id, resumed_at=now, total_pause_time=total):
            raise NotPaused("No paused timer found")
        logger.info("User %s resumed the timer (total pause %ss)", user_id, total)

    def current(self, user_id: int) -> Optional[WorkWeekView]:
        week = self._work_weeks.get_latest(user_id)
        if not week:
            return None
        return WorkWeekView(work_week=week, elapsed_time=elapsed_seconds(week, self._clock()))

    def current_time(self, user_id: int) -> Dict[str, Any]:
        week = self._work_weeks.get_active(user_id)
        if not week:
            return {"elapsed_time": 0, "status": WorkWeekStatus.STOPPED.value}

        now = self._clock()
        if week.status == WorkWeekStatus.RUNNING:
            try:
                self._work_weeks.touch(work_week_id=week.work_week_id, at=now)
            except mysql.connector.Error:
                logger.warning("Could not refresh last_update_time of week %s", week.work_week_id, exc_info=True)

        return {
            "elapsed_time": elapsed_seconds(week, now),
            "status": week.status.value,
            "week_start": to_iso(week.week_start),
            "week_end": to_iso(week.week_end),
        }

    def history(self, user_id: int, *, limit: Optional[int] = None) -> List[WorkWeekHistoryItem]:
        limit = min(int(limit), self._history_limit) if limit else self._history_limit
        now = self._clock()
        weeks = self._work_weeks.list_recent(user_id, limit)
        return [
            WorkWeekHistoryItem(
                work_week_id=w.work_week_id,
                week_number=number,
                started_at=w.week_start,
                ended_at=w.week_end,
                total_work_minutes=history_work_minutes(w, now),
                week_goal_minutes=w.week_goal_minutes,
                is_paused=w.status == WorkWeekStatus.PAUSED,
                status=w.status,
            )
            for number, w in enumerate(weeks, start=1)
        ]
