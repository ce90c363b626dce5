"""Main vessel status tracker class."""

import logging
from datetime import tzinfo
from typing import List, Optional, Sequence

import pandas as pd

from .imo import is_valid_imo
from .messages import describe
from .models import DisplayRow, Phase, PhaseResult, Snapshot
from .phase_machine import detect_phase
from .pilotage_client import PilotageClient
from .snapshot_repository import DEFAULT_WINDOW_SIZE, is_most_recent, recent
from .timeutils import DISPLAY_TIMEZONE, format_raw

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["IMO", "Vessel Name", "Status", "Time Updated", "Latest"]


class VesselStatusTracker:
    """
    Tracks the pilotage status of vessels.

    This class provides methods to:
    - Look up a vessel's recent pilotage snapshots by IMO number
    - Classify each snapshot into a journey phase with an ETA
    - Render the result as bilingual status rows or a table
    """

    def __init__(
        self,
        client: Optional[PilotageClient] = None,
        window_size: int = DEFAULT_WINDOW_SIZE,
        zone: tzinfo = DISPLAY_TIMEZONE,
    ):
        """
        Initialize the tracker.

        Args:
            client: Pilotage API client. A default client is created if None.
            window_size: Number of recent snapshots shown per vessel.
            zone: Timezone used for every rendered time.
        """
        self.client = client if client is not None else PilotageClient()
        self.window_size = window_size
        self.zone = zone
        self.unknown_count = 0

    def get_status(self, snapshot: Snapshot) -> PhaseResult:
        """
        Classify one snapshot.

        Unknown outcomes are valid results but are logged and counted, since
        they usually mean the upstream data no longer fits the phase tables.
        """
        result = detect_phase(snapshot, zone=self.zone)
        if result.phase is Phase.UNKNOWN:
            self.unknown_count += 1
            logger.warning(
                f"Unknown status for {snapshot.imo} ({snapshot.from_code} -> {snapshot.to_code}, "
                f"direction={result.direction.value}, presence={snapshot.presence()})"
            )
        return result

    def build_rows(self, snapshots: Sequence[Snapshot]) -> List[DisplayRow]:
        """
        Build display rows for the recent snapshots of every vessel.

        Args:
            snapshots: Snapshots in any order, possibly for several vessels.

        Returns:
            One DisplayRow per retained snapshot, newest first per vessel.
        """
        retained = recent(snapshots, self.window_size)
        rows: List[DisplayRow] = []

        for snapshot in retained:
            english, chinese = describe(self.get_status(snapshot))
            rows.append(DisplayRow(
                imo=snapshot.imo,
                vessel_name=snapshot.vessel_name,
                status_english=english,
                status_chinese=chinese,
                snapshot_time=format_raw(snapshot.captured_at, self.zone),
                is_latest=is_most_recent(snapshot, retained),
            ))

        return rows

    def lookup(self, imo: str) -> List[DisplayRow]:
        """
        Fetch and classify the pilotage snapshots of a vessel.

        Args:
            imo: 7-digit IMO number.

        Returns:
            List of DisplayRow objects.

        Raises:
            ValueError: If the IMO number fails validation.
            PilotageRetrievalError: If the snapshots cannot be retrieved.
        """
        imo = (imo or "").strip()
        if not is_valid_imo(imo):
            raise ValueError("Invalid IMO number")

        snapshots = self.client.get_snapshots(imo)
        logger.info(f"Retrieved {len(snapshots)} snapshots for {imo}")
        return self.build_rows(snapshots)

    @staticmethod
    def to_frame(rows: Sequence[DisplayRow]) -> pd.DataFrame:
        """Tabulate display rows for printing."""
        return pd.DataFrame(
            [
                (row.imo, row.vessel_name, row.status, row.snapshot_time, row.is_latest)
                for row in rows
            ],
            columns=TABLE_COLUMNS,
        )

    def cleanup(self) -> None:
        """Release resources and clear caches."""
        if self.client:
            self.client.clear_cache()
        logger.info("Cleaned up tracker resources")
