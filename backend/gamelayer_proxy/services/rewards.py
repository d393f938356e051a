"""
Rewards Service

Summarizes the GameLayer prize catalogue for the rewards panel.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from gamelayer_proxy.common.formatting import days_remaining
from gamelayer_proxy.common.time import parse_timestamp

FEATURED_LIMIT = 4
DEFAULT_STOCK = 999
DEFAULT_PRIZE_POINTS = 100
DEFAULT_PRIZE_CREDITS = 10


@dataclass
class PrizeView:
    id: str
    name: str
    description: str
    requirement: str
    points: float
    credits: float
    is_unlocked: bool
    category: str
    stock: int
    img_url: Optional[str] = None
    expiry_date: Optional[datetime] = None
    days_remaining: int = 0


@dataclass
class RewardsView:
    total_rewards: int = 0
    unlocked_rewards: int = 0
    featured: list[PrizeView] = field(default_factory=list)


def extract_prizes(payload: Any) -> list[dict[str, Any]]:
    """Prize list from a bare list or a {prizes|data|results: [...]} wrapper"""
    if isinstance(payload, dict):
        for key in ("prizes", "data", "results"):
            if isinstance(payload.get(key), list):
                payload = payload[key]
                break
    if not isinstance(payload, list):
        return []
    return [prize for prize in payload if isinstance(prize, dict)]


def is_unlocked(prize: dict[str, Any]) -> bool:
    return prize.get("status") == "unlocked" or bool(prize.get("isUnlocked"))


def format_requirement(requirement: Any) -> str:
    if not isinstance(requirement, dict):
        return "Complete requirements"
    if requirement.get("missions"):
        return f"Complete {len(requirement['missions'])} mission(s)"
    if requirement.get("achievements"):
        return f"Unlock {len(requirement['achievements'])} achievement(s)"
    level = requirement.get("level")
    if isinstance(level, dict) and level.get("min"):
        return f"Reach level {level['min']}"
    if requirement.get("category"):
        return f"Complete {requirement['category']} tasks"
    return "Complete requirements"


def build_prize_view(prize: dict[str, Any], index: int, now: Optional[datetime] = None) -> PrizeView:
    active = prize.get("active") if isinstance(prize.get("active"), dict) else {}
    stock = prize.get("stock") if isinstance(prize.get("stock"), dict) else {}
    expiry = active.get("to")

    return PrizeView(
        id=str(prize.get("id") or f"prize-{index + 1}"),
        name=prize.get("name") or "Unknown Prize",
        description=prize.get("description") or "Complete requirements to unlock this prize",
        requirement=format_requirement(prize.get("requirement")),
        points=prize.get("points") or DEFAULT_PRIZE_POINTS,
        credits=prize.get("credits") or DEFAULT_PRIZE_CREDITS,
        is_unlocked=is_unlocked(prize),
        category=prize.get("category") or "General",
        stock=stock.get("available") or prize.get("available") or DEFAULT_STOCK,
        img_url=prize.get("imgURL") or prize.get("imgUrl") or prize.get("image"),
        expiry_date=parse_timestamp(expiry),
        days_remaining=days_remaining(expiry, now=now),
    )


def build_rewards_view(payload: Any, now: Optional[datetime] = None) -> RewardsView:
    prizes = extract_prizes(payload)
    return RewardsView(
        total_rewards=len(prizes),
        unlocked_rewards=sum(1 for prize in prizes if is_unlocked(prize)),
        featured=[build_prize_view(prize, index, now=now) for index, prize in enumerate(prizes[:FEATURED_LIMIT])],
    )
