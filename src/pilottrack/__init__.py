"""PilotTrack - Bilingual pilotage status tracker for vessels calling at Singapore."""

__version__ = "0.1.0"

from .models import Direction, Phase, Stage, Snapshot, PhaseResult, DisplayRow
from .vessel_tracker import VesselStatusTracker
from .pilotage_client import PilotageClient, PilotageRetrievalError
from .imo import is_valid_imo

__all__ = [
    "VesselStatusTracker",
    "PilotageClient",
    "PilotageRetrievalError",
    "is_valid_imo",
    "Direction",
    "Phase",
    "Stage",
    "Snapshot",
    "PhaseResult",
    "DisplayRow",
]
