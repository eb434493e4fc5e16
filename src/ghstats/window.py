from __future__ import annotations

from datetime import datetime

from .models import OPEN, Window


def is_in_window(timestamp: datetime | None, window: Window) -> bool:
    # Both ends are excluded.
    if timestamp is None:
        return False
    return window.date_from < timestamp < window.date_to


def should_include_pull_request(state: str, created_at: datetime | None, window: Window) -> bool:
    """Open PRs are always kept; closed ones only if created inside the window."""
    return state == OPEN or is_in_window(created_at, window)
