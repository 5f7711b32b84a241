"""timerwork package.

Personal work-week tracker organized by feature modules (users, auth,
workweeks) with a thin Flask controller layer over service/repository layers.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
