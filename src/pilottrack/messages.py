"""Bilingual (English/Chinese) status messages."""

from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence, Tuple

from .models import Phase, PhaseResult

UNKNOWN_ENGLISH = "Unknown status."
UNKNOWN_CHINESE = "未知状态。"

Template = Callable[..., str]

# Phase -> (english, chinese); both take the parameters listed in phase_machine
STATUS_MESSAGES: Mapping[Phase, Tuple[Template, Template]] = MappingProxyType({
    Phase.ARRIVED_AT_ANCHORAGE: (
        lambda loc, time: (
            f"Vessel has arrived at anchor ({loc}) at {time}. "
            f"Will reach the berth in about 30 minutes."
        ),
        lambda loc, time: f"船舶已在 {time} 到达锚地 ({loc}) 。将在约30分钟后到达泊位。",
    ),
    Phase.AT_PILOT_BOARDING_GROUND: (
        lambda loc_from, loc_to, arrival_time, estimated_arrival: (
            f"Vessel is at Pilot Boarding Ground ({loc_from}) since {arrival_time}. "
            f"Estimated arrival at anchor ({loc_to}) by {estimated_arrival}."
        ),
        lambda loc_from, loc_to, arrival_time, estimated_arrival: (
            f"船舶在引航员登船地点 ({loc_from}) 自 {arrival_time}。"
            f"预计到达锚地 ({loc_to}) 在 {estimated_arrival}。"
        ),
    ),
    Phase.PILOT_BOARDED: (
        lambda loc, onboard_time, estimated_arrival: (
            f"Pilot has boarded the vessel at {onboard_time}. "
            f"Estimated arrival at anchor ({loc}) by {estimated_arrival}."
        ),
        lambda loc, onboard_time, estimated_arrival: (
            f"引航员已登船在 {onboard_time}。预计在 {estimated_arrival}到达锚地 ({loc})。"
        ),
    ),
    Phase.PILOTAGE_STARTED: (
        lambda loc, start_time, estimated_arrival: (
            f"Pilotage service started at {start_time}. "
            f"Estimated arrival at anchor ({loc}) by {estimated_arrival}."
        ),
        lambda loc, start_time, estimated_arrival: (
            f"引航服务已在 {start_time}时开始。预计在 {estimated_arrival}到达锚地 ({loc})。"
        ),
    ),
    Phase.LEFT_ANCHORAGE: (
        lambda loc, arrival_time: (
            f"Vessel has left the anchor ({loc}) at {arrival_time}. "
            f"No more loading/unloading is possible."
        ),
        lambda loc, arrival_time: f"船舶已在 {arrival_time}时离开锚地 ({loc})。无法再进行装卸。",
    ),
    Phase.AT_ANCHORAGE: (
        lambda loc, departure_time: (
            f"Vessel is at anchor ({loc}). Estimated departure at {departure_time}."
        ),
        lambda loc, departure_time: f"船舶在锚地 ({loc})。预计在 {departure_time}离港。",
    ),
    Phase.MOVING_BETWEEN_ANCHORAGES: (
        lambda loc_from, loc_to, time, estimated_arrival, stage: (
            f"Vessel is moving between anchors from ({loc_from}) to ({loc_to}). "
            f"{stage.english} at {time}. Estimated arrival at {estimated_arrival}."
        ),
        lambda loc_from, loc_to, time, estimated_arrival, stage: (
            f"船舶正在从锚地 ({loc_from}) 移动到锚地 ({loc_to})。"
            f"{stage.chinese}在 {time}。预计在 {estimated_arrival} 到达。"
        ),
    ),
    Phase.UNKNOWN: (
        lambda: UNKNOWN_ENGLISH,
        lambda: UNKNOWN_CHINESE,
    ),
})


def render(phase: Phase, params: Sequence[Any] = ()) -> Tuple[str, str]:
    """Render the English and Chinese message for a phase."""
    english, chinese = STATUS_MESSAGES[phase]
    return english(*params), chinese(*params)


def describe(result: PhaseResult) -> Tuple[str, str]:
    """Render the messages for a classified snapshot."""
    return render(result.phase, result.params)
