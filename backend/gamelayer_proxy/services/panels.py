"""
Dashboard Panels

One panel per dashboard section. A panel fetches what it needs through the
API client and returns a view built by the matching service module.
"""

import asyncio
import logging
from typing import Any, Protocol

from gamelayer_proxy.client.gamelayer import GameLayerAPI
from gamelayer_proxy.common.errors import AppError
from gamelayer_proxy.services.leaderboard import (
    LeaderboardView,
    build_leaderboard_view,
    collect_player_ids,
)
from gamelayer_proxy.services.missions import MissionView, build_mission_views
from gamelayer_proxy.services.profile import ProfileView, build_profile_view
from gamelayer_proxy.services.rewards import RewardsView, build_rewards_view

logger = logging.getLogger(__name__)


class Panel(Protocol):
    section: str

    async def load(self) -> Any:
        ...


class ProfilePanel:
    section = "profile"

    def __init__(self, api: GameLayerAPI):
        self.api = api

    async def load(self) -> ProfileView:
        profile = await self.api.get_player_profile()
        levels = await self.api.get_levels()
        player_levels = await self.api.get_player_levels()
        achievements = await self.api.get_player_achievements()
        return build_profile_view(profile, levels, player_levels, achievements)


class MissionsPanel:
    section = "missions"

    def __init__(self, api: GameLayerAPI):
        self.api = api

    async def load(self) -> list[MissionView]:
        return build_mission_views(await self.api.get_player_missions())


class LeaderboardPanel:
    section = "leaderboard"

    def __init__(self, api: GameLayerAPI, leaderboard_id: str = "main-leaderboard"):
        self.api = api
        self.leaderboard_id = leaderboard_id

    async def _player_details(self, player_ids: list[str]) -> list[dict[str, Any]]:
        """Fetch player details concurrently; a player that fails is left out"""
        results = await asyncio.gather(
            *(self.api.get_player(player_id) for player_id in player_ids),
            return_exceptions=True,
        )
        details = []
        for player_id, result in zip(player_ids, results):
            if isinstance(result, AppError):
                logger.warning("Failed to fetch player data for %s: %s", player_id, result.message)
                continue
            if isinstance(result, BaseException):
                raise result
            details.append(result)
        return details

    async def load(self) -> LeaderboardView:
        leaderboard = await self.api.get_leaderboard_with_rankings(self.leaderboard_id)
        all_players = await self.api.get_all_players()
        details = await self._player_details(collect_player_ids(leaderboard, all_players))
        return build_leaderboard_view(
            leaderboard,
            all_players,
            player_details=details,
            current_player=self.api.config.default_player,
        )


class RewardsPanel:
    section = "rewards"

    def __init__(self, api: GameLayerAPI):
        self.api = api

    async def load(self) -> RewardsView:
        return build_rewards_view(await self.api.get_prizes())


def default_panels(api: GameLayerAPI) -> dict[str, Panel]:
    """Panels for every dashboard section, keyed by section name"""
    return {
        panel.section: panel
        for panel in (ProfilePanel(api), MissionsPanel(api), LeaderboardPanel(api), RewardsPanel(api))
    }
