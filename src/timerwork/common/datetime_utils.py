from __future__ import annotations

from datetime import datetime
from typing import Optional


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().replace(microsecond=0)


def seconds_between(later: datetime, earlier: datetime) -> int:
    """Whole seconds from earlier to later, truncated toward zero."""
    return int((later - earlier).total_seconds())


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
