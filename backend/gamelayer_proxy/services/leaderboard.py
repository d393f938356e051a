"""
Leaderboard Service

Merges the main leaderboard's scores with the full player list so players
without a score still appear, then ranks by score.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from gamelayer_proxy.common.pagination import Paginator

DEFAULT_NAME = "Global Leaderboard"
DEFAULT_DESCRIPTION = "Top players this month"
PLAYERS_PER_PAGE = 10


@dataclass
class LeaderboardEntry:
    id: str
    name: str
    points: float
    avatar: Optional[str] = None
    is_current_user: bool = False


@dataclass
class Ranking:
    rank: int = 0
    points: float = 0


@dataclass
class LeaderboardView:
    name: str
    description: str
    entries: list[LeaderboardEntry] = field(default_factory=list)
    your_ranking: Ranking = field(default_factory=Ranking)

    @property
    def total_players(self) -> int:
        return len(self.entries)

    def paginator(self, page: int = 1, per_page: int = PLAYERS_PER_PAGE) -> Paginator[LeaderboardEntry]:
        return Paginator(self.entries, per_page=per_page, page=page)


def _player_id(player: dict[str, Any]) -> Optional[str]:
    return player.get("player") or player.get("id")


def _rows(payload: Any, *path: str) -> list[dict[str, Any]]:
    for key in path:
        if not isinstance(payload, dict):
            return []
        payload = payload.get(key)
    return [row for row in payload if isinstance(row, dict)] if isinstance(payload, list) else []


def collect_player_ids(leaderboard: Any, all_players: Any) -> list[str]:
    """Ids from the player list, then any only on the leaderboard; no duplicates"""
    ids: list[str] = []
    for row in _rows(all_players, "data") + _rows(leaderboard, "scores", "data"):
        player_id = _player_id(row)
        if player_id and player_id not in ids:
            ids.append(player_id)
    return ids


def build_leaderboard_view(
    leaderboard: Any,
    all_players: Any,
    player_details: Optional[list[dict[str, Any]]] = None,
    current_player: Optional[str] = None,
) -> LeaderboardView:
    """
    Build the ranked leaderboard

    Args:
        leaderboard: GET /leaderboards/{id} payload
        all_players: GET /players payload
        player_details: GET /players/{id} payloads, for names and avatars
        current_player: Player highlighted as "you"
    """
    meta = leaderboard.get("leaderboard") if isinstance(leaderboard, dict) else None
    meta = meta if isinstance(meta, dict) else {}

    rows: list[dict[str, Any]] = []
    seen: set[str] = set()
    for row in _rows(leaderboard, "scores", "data"):
        rows.append({**row, "scores": row.get("scores") or 0})
        seen.add(_player_id(row))
    for row in _rows(all_players, "data"):
        if _player_id(row) not in seen:
            rows.append({**row, "scores": 0})

    # Stable sort keeps API order among equal scores
    rows.sort(key=lambda row: row["scores"], reverse=True)

    details = {detail.get("player"): detail for detail in player_details or [] if isinstance(detail, dict)}
    entries = []
    for index, row in enumerate(rows):
        player_id = _player_id(row) or f"player-{index + 1}"
        detail = details.get(player_id) or {}
        entries.append(
            LeaderboardEntry(
                id=player_id,
                name=detail.get("name") or row.get("name") or "Unknown Player",
                points=row["scores"],
                avatar=detail.get("imgUrl"),
                is_current_user=player_id == current_player,
            )
        )

    your_ranking = Ranking()
    for rank, entry in enumerate(entries, start=1):
        if entry.is_current_user:
            your_ranking = Ranking(rank=rank, points=entry.points)
            break

    return LeaderboardView(
        name=meta.get("name") or DEFAULT_NAME,
        description=meta.get("description") or DEFAULT_DESCRIPTION,
        entries=entries,
        your_ranking=your_ranking,
    )
