"""Timestamp parsing and display formatting."""

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

import pandas as pd

logger = logging.getLogger(__name__)

# Singapore local time; no DST at this offset
DISPLAY_TIMEZONE = timezone(timedelta(hours=8))

NOT_AVAILABLE = "N/A"

# Fixed English abbreviations so output does not depend on the process locale
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# ISO-8601 date with optional time and zone; keywords such as "now" never match
_ISO_TIMESTAMP = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:[.,]\d+)?)?)?"
    r"(?:Z|[+-]\d{2}(?::?\d{2})?)?$"
)


def normalize(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse a raw API timestamp into an aware UTC datetime.

    Timestamps without a zone suffix are taken to be UTC; an explicit
    suffix ("Z", "+08:00") is honoured.

    Args:
        raw: Timestamp string as received, e.g. "2024-01-01T10:00:00".

    Returns:
        Aware datetime in UTC, or None if the input is empty or not an
        ISO-8601 timestamp.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    if not _ISO_TIMESTAMP.match(text):
        logger.debug(f"Not an ISO-8601 timestamp: {text!r}")
        return None

    try:
        ts = pd.to_datetime(text, utc=True, format="ISO8601")
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Unparsable timestamp {text!r}: {e}")
        return None

    if pd.isna(ts):
        return None
    # datetime holds microseconds only
    return ts.floor("us").to_pydatetime()


def format_time(instant: Optional[datetime], zone: tzinfo = DISPLAY_TIMEZONE) -> str:
    """
    Render an instant as e.g. "1 Jan 2024, 18:00" in the display timezone.

    Returns "N/A" when there is no instant.
    """
    if instant is None:
        return NOT_AVAILABLE
    local = instant.astimezone(zone)
    return f"{local.day} {_MONTHS[local.month - 1]} {local.year:04d}, {local:%H:%M}"


def format_raw(raw: Optional[str], zone: tzinfo = DISPLAY_TIMEZONE) -> str:
    """Normalize and format a raw timestamp in one step."""
    return format_time(normalize(raw), zone)
