"""Pilotage phase detection.

Each journey direction has an ordered table of rules. A rule matches on the
presence pattern of the four optional lifecycle timestamps, in the order
(arrival, onboard, start, end), where True means set, False means empty and
None means "don't care". The first matching rule wins; when none matches the
phase is UNKNOWN.

A rule also names the anchor timestamp and the fixed offset used for the
ETA, and the ordered parameters passed to the message template.
"""

import logging
from datetime import tzinfo
from typing import Any, Dict, NamedTuple, Optional, Tuple

from .eta import estimate
from .journey import classify
from .models import Direction, Phase, PhaseResult, Snapshot, Stage
from .timeutils import DISPLAY_TIMEZONE, format_time, normalize

logger = logging.getLogger(__name__)

Pattern = Tuple[Optional[bool], Optional[bool], Optional[bool], Optional[bool]]


class Rule(NamedTuple):
    pattern: Pattern
    phase: Phase
    anchor: Optional[str] = None  # timestamp field the ETA is counted from
    offset_minutes: int = 0
    params: Tuple[str, ...] = ()
    stage: Optional[Stage] = None


#                 arrival onboard start  end
ARRIVING_RULES: Tuple[Rule, ...] = (
    Rule((True, True, True, True), Phase.ARRIVED_AT_ANCHORAGE,
         anchor="end", params=("to", "end")),
    Rule((True, False, False, False), Phase.AT_PILOT_BOARDING_GROUND,
         anchor="request", offset_minutes=120, params=("from", "to", "arrival", "eta")),
    Rule((True, True, False, False), Phase.PILOT_BOARDED,
         anchor="onboard", offset_minutes=120, params=("to", "onboard", "eta")),
    Rule((True, True, True, False), Phase.PILOTAGE_STARTED,
         anchor="start", offset_minutes=90, params=("to", "start", "eta")),
)

DEPARTING_RULES: Tuple[Rule, ...] = (
    Rule((True, None, None, None), Phase.LEFT_ANCHORAGE,
         params=("from", "arrival")),
    Rule((False, False, False, False), Phase.AT_ANCHORAGE,
         anchor="request", params=("from", "eta")),
)

MOVING_RULES: Tuple[Rule, ...] = (
    Rule((True, False, False, False), Phase.MOVING_BETWEEN_ANCHORAGES,
         anchor="arrival", offset_minutes=90,
         params=("from", "to", "arrival", "eta", "stage"), stage=Stage.ARRIVED),
    Rule((True, True, False, False), Phase.MOVING_BETWEEN_ANCHORAGES,
         anchor="onboard", offset_minutes=60,
         params=("from", "to", "onboard", "eta", "stage"), stage=Stage.PILOT_BOARDED),
    Rule((True, True, True, False), Phase.MOVING_BETWEEN_ANCHORAGES,
         anchor="start", offset_minutes=30,
         params=("from", "to", "start", "eta", "stage"), stage=Stage.PILOTAGE_STARTED),
    # Completed moves reuse the arrival-at-anchorage message
    Rule((True, True, True, True), Phase.ARRIVED_AT_ANCHORAGE,
         anchor="end", params=("to", "end")),
)

RULES: Dict[Direction, Tuple[Rule, ...]] = {
    Direction.ARRIVING_AT_PORT: ARRIVING_RULES,
    Direction.DEPARTING_PORT: DEPARTING_RULES,
    Direction.MOVING_BETWEEN_ANCHORAGES: MOVING_RULES,
    Direction.UNKNOWN: (),
}


def _matches(pattern: Pattern, presence: Tuple[bool, bool, bool, bool]) -> bool:
    return all(want is None or want == have for want, have in zip(pattern, presence))


def find_rule(direction: Direction, presence: Tuple[bool, bool, bool, bool]) -> Optional[Rule]:
    """Return the first rule of the direction's table matching presence."""
    for rule in RULES[direction]:
        if _matches(rule.pattern, presence):
            return rule
    return None


def _timestamps(snapshot: Snapshot) -> Dict[str, Optional[str]]:
    return {
        "request": snapshot.requested_at,
        "arrival": snapshot.arrival_at,
        "onboard": snapshot.onboard_at,
        "start": snapshot.start_at,
        "end": snapshot.end_at,
    }


def detect_phase(
    snapshot: Snapshot,
    direction: Optional[Direction] = None,
    zone: tzinfo = DISPLAY_TIMEZONE,
) -> PhaseResult:
    """
    Determine the current pilotage phase of a snapshot.

    Args:
        snapshot: Snapshot to classify.
        direction: Journey direction; classified from the snapshot's
            location codes when omitted.
        zone: Timezone used to render times in the message parameters.

    Returns:
        PhaseResult with the phase, ETA and message parameters. Never raises
        for malformed timestamps; those render as "N/A".
    """
    if direction is None:
        direction = classify(snapshot.from_code, snapshot.to_code)

    rule = find_rule(direction, snapshot.presence())
    if rule is None:
        return PhaseResult(direction=direction, phase=Phase.UNKNOWN)

    raw_times = _timestamps(snapshot)
    eta = None
    if rule.anchor is not None:
        eta = estimate(normalize(raw_times[rule.anchor]), rule.offset_minutes)

    values: Dict[str, Any] = {
        "from": snapshot.from_code,
        "to": snapshot.to_code,
        "eta": format_time(eta, zone),
        "stage": rule.stage,
    }
    for name, raw in raw_times.items():
        values[name] = format_time(normalize(raw), zone)

    return PhaseResult(
        direction=direction,
        phase=rule.phase,
        eta=eta,
        params=tuple(values[name] for name in rule.params),
    )
