from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_int(value: Any, field_name: str, default: int = 0, max_value: Optional[int] = None) -> int:
    """Coerce an optional JSON number; bools, fractional and oversized values are rejected."""
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    if max_value is not None and value > max_value:
        raise ValidationError(f"{field_name} must be at most {max_value}")
    return value
