"""Per-vessel grouping and recency ranking of pilotage snapshots."""

import logging
from typing import Dict, List, Sequence

from .models import Snapshot
from .timeutils import normalize

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 8


def _capture_key(snapshot: Snapshot) -> float:
    """Sort key for capture time; unparsable times rank as oldest."""
    captured = normalize(snapshot.captured_at)
    if captured is None:
        return float("-inf")
    return captured.timestamp()


def group_by_vessel(snapshots: Sequence[Snapshot]) -> Dict[str, List[Snapshot]]:
    """Group snapshots by IMO, keeping vessels in first-seen order."""
    groups: Dict[str, List[Snapshot]] = {}
    for snapshot in snapshots:
        if snapshot.imo not in groups:
            groups[snapshot.imo] = []
        groups[snapshot.imo].append(snapshot)
    return groups


def recent(snapshots: Sequence[Snapshot], window_size: int = DEFAULT_WINDOW_SIZE) -> List[Snapshot]:
    """
    Keep the most recent snapshots of each vessel.

    Vessels appear in the order they were first seen. Within a vessel,
    snapshots are ordered newest first; snapshots captured at the same
    time keep their input order.

    Args:
        snapshots: Snapshots as returned by the pilotage API.
        window_size: Maximum number of snapshots kept per vessel.

    Returns:
        Flat list of retained snapshots.

    Raises:
        ValueError: If window_size is negative.
    """
    if window_size < 0:
        raise ValueError(f"window_size must be >= 0, got {window_size}")

    result: List[Snapshot] = []
    for imo, group in group_by_vessel(snapshots).items():
        # sorted() stays stable with reverse=True
        ranked = sorted(group, key=_capture_key, reverse=True)
        result.extend(ranked[:window_size])
        if len(ranked) > window_size:
            logger.debug(f"Dropped {len(ranked) - window_size} older snapshots for {imo}")

    return result


def is_most_recent(row: Snapshot, retained: Sequence[Snapshot]) -> bool:
    """True if row carries the latest capture time among retained rows of its vessel."""
    captured = normalize(row.captured_at)
    if captured is None:
        return False

    times = [normalize(s.captured_at) for s in retained if s.imo == row.imo]
    latest = max((t for t in times if t is not None), default=None)
    return latest is not None and captured == latest
