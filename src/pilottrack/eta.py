"""Estimated arrival/departure times."""

from datetime import datetime, timedelta
from typing import Optional


def estimate(anchor: Optional[datetime], offset_minutes: int) -> Optional[datetime]:
    """Return anchor + offset_minutes, or None when there is no anchor."""
    if anchor is None:
        return None
    return anchor + timedelta(minutes=offset_minutes)
