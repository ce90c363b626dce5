"""Data models for the pilotage status tracker."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Direction(Enum):
    """Journey direction derived from the origin/destination location codes."""
    ARRIVING_AT_PORT = "arriving_at_port"  # boarding ground -> anchorage
    DEPARTING_PORT = "departing_port"  # anchorage -> boarding ground
    MOVING_BETWEEN_ANCHORAGES = "moving_between_anchorages"
    UNKNOWN = "unknown"


class Phase(Enum):
    """Current stage of a vessel's pilotage journey."""
    ARRIVED_AT_ANCHORAGE = "arrived_at_anchorage"
    AT_PILOT_BOARDING_GROUND = "at_pilot_boarding_ground"
    PILOT_BOARDED = "pilot_boarded"
    PILOTAGE_STARTED = "pilotage_started"
    LEFT_ANCHORAGE = "left_anchorage"
    AT_ANCHORAGE = "at_anchorage"
    MOVING_BETWEEN_ANCHORAGES = "moving_between_anchorages"
    UNKNOWN = "unknown"


class Stage(Enum):
    """Progress label used while a vessel moves between anchorages."""
    ARRIVED = ("Arrived", "已到达")
    PILOT_BOARDED = ("Pilot boarded", "引航员登船")
    PILOTAGE_STARTED = ("Pilotage started", "引航开始")

    @property
    def english(self) -> str:
        return self.value[0]

    @property
    def chinese(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Snapshot:
    """One captured observation of a vessel's pilotage timestamps.

    Timestamps are kept as the raw strings received from the pilotage API.
    """
    imo: str
    vessel_name: str
    from_code: str
    to_code: str
    requested_at: str  # when the vessel requested pilotage
    captured_at: str  # when this snapshot was taken
    arrival_at: Optional[str] = None  # arrival at the pilot boarding location
    onboard_at: Optional[str] = None  # pilot got on board
    start_at: Optional[str] = None  # pilotage service started
    end_at: Optional[str] = None  # pilotage service ended

    @classmethod
    def from_api(cls, record: Dict[str, Any]) -> "Snapshot":
        """Build a Snapshot from one record of the pilotage API response."""
        return cls(
            imo=str(record["pilotage_imo"]),
            vessel_name=record["pilotage_nm"],
            from_code=record["pilotage_loc_from_code"],
            to_code=record["pilotage_loc_to_code"],
            requested_at=record["pilotage_cst_dt_time"],
            captured_at=record["pilotage_snapshot_dt"],
            arrival_at=record.get("pilotage_arrival_dt_time"),
            onboard_at=record.get("pilotage_onboard_dt_time"),
            start_at=record.get("pilotage_start_dt_time"),
            end_at=record.get("pilotage_end_dt_time"),
        )

    def presence(self) -> Tuple[bool, bool, bool, bool]:
        """Return which of (arrival, onboard, start, end) are set."""
        return (
            bool(self.arrival_at),
            bool(self.onboard_at),
            bool(self.start_at),
            bool(self.end_at),
        )


@dataclass(frozen=True)
class PhaseResult:
    """Classified phase plus the values needed to narrate it."""
    direction: Direction
    phase: Phase
    eta: Optional[datetime] = None
    params: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class DisplayRow:
    """One rendered row of the vessel status table."""
    imo: str
    vessel_name: str
    status_english: str
    status_chinese: str
    snapshot_time: str
    is_latest: bool = False

    @property
    def status(self) -> str:
        return f"{self.status_english}\n{self.status_chinese}"
