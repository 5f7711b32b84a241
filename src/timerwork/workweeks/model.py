from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import to_iso
from ..core.enums import WorkWeekStatus


@dataclass(frozen=True)
class WorkWeek:
    """Domain entity: one tracked work week of a user."""

    work_week_id: int
    user_id: int
    week_start: datetime
    week_end: Optional[datetime]
    last_update_time: datetime
    status: WorkWeekStatus
    pause_start: Optional[datetime]
    total_pause_time: int  # seconds
    week_goal_minutes: int

    @property
    def is_active(self) -> bool:
        return self.week_end is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.work_week_id,
            "user_id": self.user_id,
            "week_start": to_iso(self.week_start),
            "week_end": to_iso(self.week_end),
            "last_update_time": to_iso(self.last_update_time),
            "status": self.status.value,
            "pause_start": to_iso(self.pause_start),
            "total_pause_time": self.total_pause_time,
            "week_goal_minutes": self.week_goal_minutes,
        }


@dataclass(frozen=True)
class WorkWeekHistoryItem:
    """Read-model for the history list; week_number is display-only."""

    work_week_id: int
    week_number: int
    started_at: datetime
    ended_at: Optional[datetime]
    total_work_minutes: int
    week_goal_minutes: int
    is_paused: bool
    status: WorkWeekStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.work_week_id,
            "week_number": self.week_number,
            "started_at": to_iso(self.started_at),
            "ended_at": to_iso(self.ended_at),
            "total_work_minutes": self.total_work_minutes,
            "week_goal_minutes": self.week_goal_minutes,
            "is_paused": self.is_paused,
            "status": self.status.value,
        }
