from __future__ import annotations

from enum import Enum


class WorkWeekStatus(str, Enum):
    """Timer state of a work week as stored in the database."""

    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "WorkWeekStatus":
        """Map a stored status to a member; unrecognised values become ``UNKNOWN``."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN
