"""Elapsed-time bookkeeping for work weeks.

All durations are whole seconds. Nothing here touches the database or the
clock: callers pass ``now`` explicitly. Results are not clamped, so clock skew
or inconsistent pause data can produce negative values.
"""
from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import seconds_between
from ..core.enums import WorkWeekStatus
from .model import WorkWeek


def elapsed_seconds(week: WorkWeek, now: datetime) -> int:
    """Tracked time of a week, excluding committed pauses and the pause in progress."""
    if week.status == WorkWeekStatus.STOPPED and week.week_end is not None:
        return seconds_between(week.week_end, week.week_start) - week.total_pause_time

    in_progress_pause = 0
    if week.status == WorkWeekStatus.RUNNING:
        current = now
    elif week.status == WorkWeekStatus.PAUSED:
        current = week.last_update_time
        if week.pause_start is not None:
            in_progress_pause = seconds_between(now, week.pause_start)
    else:
        current = week.last_update_time

    return seconds_between(current, week.week_start) - week.total_pause_time - in_progress_pause


def history_work_minutes(week: WorkWeek, now: datetime) -> int:
    """Worked minutes as reported by the history list.

    Paused weeks measure up to ``week_start`` rather than the pause start, so
    they report zero minus whatever pause time is already committed.
    """
    if week.week_end is not None:
        seconds = seconds_between(week.week_end, week.week_start) - week.total_pause_time
    elif week.status == WorkWeekStatus.RUNNING:
        seconds = seconds_between(now, week.week_start) - week.total_pause_time
    elif week.status == WorkWeekStatus.PAUSED:
        seconds = -week.total_pause_time
    else:
        return 0
    return whole_minutes(seconds)


def whole_minutes(seconds: int) -> int:
    # truncates toward zero, also for negative values
    return int(seconds / 60)


def pause_duration(week: WorkWeek, now: datetime) -> int:
    """Length of the pause being closed; 0 when no pause start was recorded."""
    if week.pause_start is None:
        return 0
    return max(0, seconds_between(now, week.pause_start))
