"""
Missions Service

Mission list filtering and per-mission progress, timer and action labels.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from gamelayer_proxy.common.formatting import SECONDS_PER_DAY, calculate_progress, format_time_remaining
from gamelayer_proxy.common.time import parse_timestamp, utc_now

HIDDEN_CATEGORY = "hidden"


@dataclass
class MissionProgress:
    current: int
    total: int

    @property
    def percentage(self) -> float:
        return calculate_progress(self.current, self.total)

    @property
    def text(self) -> str:
        return f"{self.current}/{self.total}"


@dataclass
class MissionView:
    id: str
    name: str
    category: str
    status: str
    progress: MissionProgress
    time_remaining: str
    action: str
    urgent: bool = False
    img_url: Optional[str] = None


def visible_missions(missions: Any) -> list[dict[str, Any]]:
    """Missions minus those in the hidden category"""
    if not isinstance(missions, list):
        return []
    return [
        mission
        for mission in missions
        if isinstance(mission, dict) and str(mission.get("category") or "").lower() != HIDDEN_CATEGORY
    ]


def _first_event(payload: dict[str, Any]) -> Optional[dict[str, Any]]:
    progress = payload.get("progress")
    if isinstance(progress, dict):
        events = progress.get("events")
        if isinstance(events, list) and events:
            return events[0]

    events = payload.get("events")
    if isinstance(events, list) and events:
        return events[0]

    objectives = payload.get("objectives")
    if isinstance(objectives, dict):
        events = objectives.get("events")
        if isinstance(events, list) and events:
            return events[0]

    if isinstance(progress, dict) and ("currentCount" in progress or "count" in progress):
        return progress
    return None


def extract_event_progress(payload: Any) -> Optional[MissionProgress]:
    """
    Progress of a mission's first event objective

    Accepts the mission payload itself or a mission-progress response;
    GameLayer spells the counter either currentCount or currentcount.
    """
    if not isinstance(payload, dict):
        return None
    event = _first_event(payload)
    if not isinstance(event, dict):
        return None
    return MissionProgress(
        current=event.get("currentCount") or event.get("currentcount") or 0,
        total=event.get("count") or 1,
    )


def mission_action(mission: dict[str, Any]) -> str:
    """Label of the mission card button"""
    status = mission.get("status")
    if status == "completed":
        return "Claim"
    if status == "locked":
        return "Locked"
    if status == "upcoming":
        return "Coming Soon"

    progress = extract_event_progress({"objectives": mission.get("objectives")})
    return "Continue" if progress and progress.current > 0 else "Start"


def _expiry_of(mission: dict[str, Any]) -> Any:
    active = mission.get("active")
    return active.get("to") if isinstance(active, dict) else None


def is_urgent(mission: dict[str, Any], now: Optional[datetime] = None) -> bool:
    """Still running but ending within a day"""
    end = parse_timestamp(_expiry_of(mission))
    if end is None:
        return False
    remaining = (end - (now or utc_now())).total_seconds()
    return 0 < remaining < SECONDS_PER_DAY


def build_mission_view(mission: dict[str, Any], now: Optional[datetime] = None) -> MissionView:
    progress = extract_event_progress({"objectives": mission.get("objectives")}) or MissionProgress(0, 1)
    return MissionView(
        id=str(mission.get("id") or ""),
        name=mission.get("name") or "Unknown Mission",
        category=mission.get("category") or "",
        status=mission.get("status") or "",
        progress=progress,
        time_remaining=format_time_remaining(_expiry_of(mission), now=now),
        action=mission_action(mission),
        urgent=is_urgent(mission, now=now),
        img_url=mission.get("imgUrl"),
    )


def build_mission_views(missions: Any, now: Optional[datetime] = None) -> list[MissionView]:
    return [build_mission_view(mission, now=now) for mission in visible_missions(missions)]
