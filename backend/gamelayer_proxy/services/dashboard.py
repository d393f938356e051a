"""
Dashboard Service

Section navigation and the user actions of the demo dashboard. State changes
are announced on the event bus instead of DOM events.
"""

import asyncio
import logging
from typing import Any, Mapping, Optional

from gamelayer_proxy.client.gamelayer import GameLayerAPI
from gamelayer_proxy.common.errors import AppError
from gamelayer_proxy.events import (
    AppReady,
    EventBus,
    EventCompleted,
    PlayerChanged,
    RewardRedeemed,
    SectionChanged,
    SectionLoaded,
    SectionLoadFailed,
)
from gamelayer_proxy.services.panels import Panel, default_panels

logger = logging.getLogger(__name__)

SECTIONS = ("profile", "missions", "leaderboard", "rewards")


class Dashboard:
    """
    Dashboard Controller

    Owns the current section and the panels; every panel load goes through
    load_section so success and failure are always published.
    """

    def __init__(
        self,
        api: GameLayerAPI,
        events: EventBus,
        panels: Optional[Mapping[str, Panel]] = None,
        initial_section: str = "profile",
    ):
        self.api = api
        self.events = events
        self.panels = dict(panels) if panels is not None else default_panels(api)
        self.current_section = initial_section if initial_section in SECTIONS else SECTIONS[0]
        self.data: dict[str, Any] = {}

    def get_panel(self, section: str) -> Optional[Panel]:
        return self.panels.get(section)

    @property
    def current_player(self) -> Optional[str]:
        return self.api.config.default_player

    async def start(self) -> Any:
        """Load the initial section, then announce the app as ready"""
        data = await self.load_section(self.current_section)
        await self.events.publish(AppReady(section=self.current_section))
        return data

    async def navigate_to_section(self, section: str) -> Any:
        """
        Switch to a section and load it

        Unknown sections are ignored with a warning.
        """
        if section not in SECTIONS:
            logger.warning("Invalid section: %s", section)
            return None

        previous = self.current_section
        self.current_section = section
        await self.events.publish(SectionChanged(section=section, previous=previous))
        return await self.load_section(section)

    async def load_section(self, section: str) -> Any:
        """
        Load a section's panel

        Returns:
            Any: The panel view, or None when the load failed (a
            SectionLoadFailed event carries the reason)
        """
        if section not in SECTIONS:
            logger.warning("Invalid section: %s", section)
            return None

        panel = self.get_panel(section)
        if panel is None:
            return None

        try:
            data = await panel.load()
        except AppError as e:
            logger.error("Failed to load %s: %s", section, e.message)
            await self.events.publish(SectionLoadFailed(section=section, message=e.message))
            return None

        self.data[section] = data
        await self.events.publish(SectionLoaded(section=section, data=data))
        return data

    async def refresh_current_section(self) -> Any:
        return await self.load_section(self.current_section)

    async def refresh_all_sections(self) -> dict[str, Any]:
        sections = [section for section in SECTIONS if section in self.panels]
        results = await asyncio.gather(*(self.load_section(section) for section in sections))
        return dict(zip(sections, results))

    async def set_player(self, player_id: Optional[str]) -> Any:
        """Make player_id the default player and reload the current section"""
        self.api.update_default_player(player_id)
        self.data.clear()
        await self.events.publish(PlayerChanged(player_id=player_id))
        return await self.refresh_current_section()

    async def redeem_reward(self, reward_id: str, player_id: Optional[str] = None) -> Any:
        result = await self.api.redeem_reward(reward_id, player_id)
        await self.events.publish(
            RewardRedeemed(reward_id=reward_id, player_id=player_id or self.current_player, result=result)
        )
        return result

    async def complete_event(self, event_id: str, player_id: Optional[str] = None) -> Any:
        result = await self.api.complete_event(event_id, player_id)
        await self.events.publish(
            EventCompleted(event_id=event_id, player_id=player_id or self.current_player, result=result)
        )
        return result
