"""
Profile Service

Level progress and achievement summaries computed from GameLayer payloads.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from gamelayer_proxy.common.formatting import progress_ratio_percent

# Fields checked (after objectives.points) for a level's point requirement
LEVEL_REQUIREMENT_FIELDS = (
    "experienceRequired",
    "experience",
    "points",
    "requiredPoints",
    "requiredExperience",
    "threshold",
    "minPoints",
)

# Points added per level when GameLayer defines no requirement
DEFAULT_LEVEL_STEP = 100

MAX_RECENT_ACHIEVEMENTS = 5


def first_present(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """First truthy value among keys, like a chain of JS || fallbacks"""
    for key in keys:
        value = data.get(key)
        if value:
            return value
    return default


@dataclass
class LevelInfo:
    """Level progress shown on the profile card"""

    current_level: int = 1
    current_experience: float = 0
    experience_to_next: float = DEFAULT_LEVEL_STEP
    experience_percentage: float = 0
    name: str = "Unknown"
    description: str = "Unknown"
    points_for_next_level: float = DEFAULT_LEVEL_STEP
    points_delta: float = DEFAULT_LEVEL_STEP
    next_level_name: str = "Unknown"


@dataclass
class AchievementProgress:
    current: int
    total: int
    percentage: int
    is_completed: bool


@dataclass
class AchievementView:
    id: str
    name: str
    description: str
    status: str
    img_url: Optional[str] = None
    points: float = 0
    credits: float = 0
    category: Optional[str] = None
    progress: Optional[AchievementProgress] = None


@dataclass
class ProfileView:
    name: str
    img_url: Optional[str]
    points: float
    credits: float
    level_info: LevelInfo
    achievements_completed: int = 0
    recent_achievements: list[AchievementView] = field(default_factory=list)


def level_requirement(level: dict[str, Any]) -> float:
    """Points needed to reach a level, 0 when GameLayer does not say"""
    objectives = level.get("objectives")
    if isinstance(objectives, dict) and objectives.get("points") is not None:
        return objectives["points"]
    for key in LEVEL_REQUIREMENT_FIELDS:
        if level.get(key) is not None:
            return level[key]
    return 0


def player_points(profile: dict[str, Any]) -> float:
    return first_present(profile, "points", "totalPoints", "score", default=0)


def player_credits(profile: dict[str, Any]) -> float:
    return first_present(profile, "credits", "totalCredits", "currency", default=0)


def _apply_level_table(info: LevelInfo, levels: list[dict[str, Any]]) -> None:
    ordered = sorted(levels, key=lambda level: level.get("ordinal") or 0)
    experience = info.current_experience

    current = ordered[0]
    current_ordinal = 0
    for level in reversed(ordered):
        if experience >= level_requirement(level):
            current = level
            current_ordinal = level.get("ordinal") or 0
            break

    info.current_level = current_ordinal + 1
    info.name = current.get("name") or info.name
    info.description = current.get("description") or info.description

    # Ordinals are 0-based, so the next level's ordinal equals the current level number
    next_level = next((level for level in ordered if (level.get("ordinal") or 0) == info.current_level), None)
    if next_level is None:
        # Max level reached
        info.experience_to_next = 0
        info.experience_percentage = 100
        info.points_for_next_level = experience
        info.points_delta = 0
        return

    info.next_level_name = next_level.get("name") or f"Level {(next_level.get('ordinal') or 0) + 1}"
    next_requirement = level_requirement(next_level)
    if next_requirement > 0:
        info.experience_to_next = next_requirement - experience
        info.points_for_next_level = next_requirement
        info.points_delta = info.experience_to_next
        info.experience_percentage = max(0, min(100, round(experience / next_requirement * 100)))
    else:
        info.experience_to_next = DEFAULT_LEVEL_STEP
        info.points_for_next_level = experience + DEFAULT_LEVEL_STEP
        info.points_delta = DEFAULT_LEVEL_STEP
        info.experience_percentage = 0


def _apply_player_levels(info: LevelInfo, player_levels: dict[str, Any]) -> None:
    if player_levels.get("currentLevel") is not None:
        info.current_level = player_levels["currentLevel"]
    if player_levels.get("experience") is not None:
        info.current_experience = player_levels["experience"]
    if player_levels.get("experienceToNext") is not None:
        info.experience_to_next = player_levels["experienceToNext"]
        info.points_delta = info.experience_to_next
    if player_levels.get("progress") is not None:
        info.experience_percentage = player_levels["progress"]
    if player_levels.get("levelName"):
        info.name = player_levels["levelName"]
    if player_levels.get("levelDescription"):
        info.description = player_levels["levelDescription"]
    if player_levels.get("pointsForNextLevel") is not None:
        info.points_for_next_level = player_levels["pointsForNextLevel"]


def calculate_level_info(
    levels: Any,
    player_levels: Any,
    profile: Any,
) -> LevelInfo:
    """
    Work out the player's level and progress towards the next one

    The level table decides the level from the player's points; explicit
    values in the player-levels payload override the computed ones.

    Args:
        levels: GameLayer level definitions (list)
        player_levels: Player level payload (dict), may be empty
        profile: Player profile payload (dict)

    Returns:
        LevelInfo: Computed level progress
    """
    if not isinstance(profile, dict):
        return LevelInfo()

    info = LevelInfo(current_experience=player_points(profile))

    if isinstance(levels, list) and levels:
        _apply_level_table(info, levels)
    else:
        info.points_for_next_level = info.current_experience + DEFAULT_LEVEL_STEP

    if isinstance(player_levels, dict):
        _apply_player_levels(info, player_levels)

    return info


def _achievement_view(achievement: dict[str, Any]) -> AchievementView:
    status = first_present(achievement, "status", "state", "completionStatus", default="Completed")

    progress = None
    steps = achievement.get("steps") or 0
    if steps > 0:
        current = achievement.get("count") or 0
        progress = AchievementProgress(
            current=current,
            total=steps,
            percentage=progress_ratio_percent(current, steps),
            is_completed=str(status).lower() == "completed",
        )

    return AchievementView(
        id=first_present(achievement, "id", "achievementId", default="unknown"),
        name=first_present(achievement, "name", "title", "description", default="Unknown Achievement"),
        description=first_present(achievement, "description", "desc", default="No description available"),
        status=status,
        img_url=first_present(achievement, "imgUrl", "image", "icon", "thumbnail"),
        points=first_present(achievement, "points", "pointsReward", default=0),
        credits=first_present(achievement, "credits", "creditsReward", default=0),
        category=first_present(achievement, "category", "type", "categoryName"),
        progress=progress,
    )


def process_achievements(payload: Any, limit: int = MAX_RECENT_ACHIEVEMENTS) -> list[AchievementView]:
    """
    Flatten completed / started / inProgress achievements, first `limit` only
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("achievements"), dict):
        return []

    groups = payload["achievements"]
    collected: list[dict[str, Any]] = []
    for key, status in (("completed", "Completed"), ("started", "Started"), ("inProgress", "In Progress")):
        items = groups.get(key)
        if isinstance(items, list):
            collected.extend({**item, "status": status} for item in items if isinstance(item, dict))

    return [_achievement_view(item) for item in collected[:limit]]


def completed_achievement_count(payload: Any) -> int:
    if not isinstance(payload, dict) or not isinstance(payload.get("achievements"), dict):
        return 0
    completed = payload["achievements"].get("completed")
    return len(completed) if isinstance(completed, list) else 0


def build_profile_view(
    profile: Any,
    levels: Any,
    player_levels: Any,
    achievements: Any,
) -> ProfileView:
    """Assemble the profile panel data from the four GameLayer payloads"""
    profile = profile if isinstance(profile, dict) else {}
    return ProfileView(
        name=first_present(profile, "name", "playerName", "displayName", default="Unknown Player"),
        img_url=first_present(profile, "imgUrl", "avatar", "image"),
        points=player_points(profile),
        credits=player_credits(profile),
        level_info=calculate_level_info(levels, player_levels, profile),
        achievements_completed=completed_achievement_count(achievements),
        recent_achievements=process_achievements(achievements),
    )
