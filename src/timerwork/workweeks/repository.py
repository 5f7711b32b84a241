from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import WorkWeek


class WorkWeekRepository(Protocol):
    """Persistence for work weeks.

    Every mutation is a single statement guarded on the user's active row and
    its expected status; the boolean result tells whether a row matched.
    """

    def get_latest(self, user_id: int) -> Optional[WorkWeek]:
        """Most recently created week of any status."""

        raise NotImplementedError

    def get_active(self, user_id: int) -> Optional[WorkWeek]:
        """The week with no end time, if any."""

        raise NotImplementedError

    def get_paused(self, user_id: int) -> Optional[WorkWeek]:
        raise NotImplementedError

    def list_recent(self, user_id: int, limit: int) -> Sequence[WorkWeek]:
        """Weeks ordered by week_start, newest first."""

        raise NotImplementedError

    def create_running(self, *, user_id: int, started_at: datetime, goal_minutes: int) -> int:
        raise NotImplementedError

    def end_active(self, *, user_id: int, ended_at: datetime) -> bool:
        raise NotImplementedError

    def pause_running(self, *, user_id: int, paused_at: datetime) -> bool:
        raise NotImplementedError

    def resume_paused(self, *, user_id: int, resumed_at: datetime, total_pause_time: int) -> bool:
        raise NotImplementedError

    def touch(self, *, work_week_id: int, at: datetime) -> bool:
        """Refresh last_update_time of a week."""

        raise NotImplementedError
