"""
GameLayer API Client

Asynchronous wrapper around the GameLayer REST surface used by the dashboard:
players, missions, levels, leaderboards, prizes/rewards and events.
"""

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Optional

import httpx

from gamelayer_proxy.common.errors import TransportError, UpstreamError, ValidationError
from gamelayer_proxy.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """
    Client Configuration

    base_url may point at GameLayer directly or at the same-origin proxy
    (e.g. http://localhost:8000/api/v0).
    """

    base_url: str = "https://api.gamelayer.co/api/v0"
    api_key: str = ""
    default_player: Optional[str] = None
    account_id: str = "gl-assets"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        return cls(
            base_url=settings.api_base_url,
            api_key=settings.GAMELAYER_API_KEY or "",
            default_player=settings.GAMELAYER_DEFAULT_PLAYER,
            account_id=settings.GAMELAYER_ACCOUNT_ID,
        )


class GameLayerAPI:
    """
    GameLayer API Client

    Every call sends the configured account; player-scoped calls fall back
    to the default player and fail fast when there is none.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client

        Args:
            config: Client configuration, defaults to one built from settings
            timeout: Request timeout (seconds), defaults to configuration
            transport: Optional httpx transport (used by tests)
        """
        settings = get_settings()
        self.config = config or ClientConfig.from_settings(settings)
        self.timeout = timeout or settings.HTTP_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "api-key": self.config.api_key,
        }

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close HTTP Client"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Generic API request

        Args:
            endpoint: Path below base_url, e.g. "/players/p1"
            method: HTTP method
            params: Query parameters
            json: JSON request body

        Returns:
            Any: Decoded JSON response, None for an empty body

        Raises:
            UpstreamError: GameLayer answered with a non-2xx status or a non-JSON body
            TransportError: GameLayer could not be reached
        """
        url = f"{self.config.base_url.rstrip('/')}{endpoint}"
        try:
            response = await self._get_client().request(
                method=method,
                url=url,
                params=params,
                json=json,
                headers=self.headers,
            )
        except httpx.RequestError as e:
            logger.error("[GameLayer API] Request failed: %s %s: %s", method, url, e)
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error("[GameLayer API] Request failed: %s %s -> %s", method, url, response.status_code)
            raise UpstreamError(
                message=f"API request failed: {response.status_code} {response.reason_phrase}",
                details={"body": response.text},
                status_code=response.status_code,
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("[GameLayer API] Invalid JSON response: %s %s -> %s", method, url, response.status_code)
            raise UpstreamError(
                message="Invalid JSON response",
                details={"body": response.text},
                status_code=response.status_code,
            ) from e

    def _account(self, **extra: Any) -> dict[str, Any]:
        params: dict[str, Any] = {"account": self.config.account_id}
        params.update(extra)
        return params

    def _player(self, player_id: Optional[str]) -> str:
        player = player_id or self.config.default_player
        if not player:
            raise ValidationError("Player ID is required", code="player_required")
        return player

    # === MISSIONS ===

    async def get_mission(self, mission_id: str) -> Any:
        return await self.request(f"/missions/{mission_id}", params=self._account())

    async def get_all_missions(self) -> Any:
        return await self.request("/missions", params=self._account())

    async def get_player_mission(self, player_id: Optional[str], mission_id: str) -> Any:
        player = self._player(player_id)
        return await self.request(f"/missions/{mission_id}", params=self._account(player=player))

    async def get_player_missions(self, player_id: Optional[str] = None) -> Any:
        player = self._player(player_id)
        return await self.request("/missions", params=self._account(player=player))

    # === PROFILE ===

    async def get_player_profile(self, player_id: Optional[str] = None) -> Any:
        player = self._player(player_id)
        return await self.request(f"/players/{player}", params=self._account())

    async def get_player_stats(self, player_id: Optional[str] = None) -> Any:
        player = self._player(player_id)
        return await self.request(f"/players/{player}/stats", params=self._account())

    async def get_player_achievements(self, player_id: Optional[str] = None) -> Any:
        player = self._player(player_id)
        return await self.request(f"/players/{player}/achievements", params=self._account())

    # === LEVELS ===

    async def get_levels(self) -> Any:
        return await self.request("/levels", params=self._account())

    async def get_player_levels(self, player_id: Optional[str] = None) -> Any:
        player = self._player(player_id)
        return await self.request(f"/players/{player}/levels", params=self._account())

    # === LEADERBOARDS & PLAYERS ===

    async def get_leaderboard(self, limit: int = 50) -> Any:
        """Player list used as a leaderboard (GameLayer ranks by points)"""
        return await self.get_players(limit)

    async def get_leaderboards(self) -> Any:
        return await self.request("/leaderboards", params=self._account())

    async def get_leaderboard_with_rankings(self, leaderboard_id: str = "main-leaderboard") -> Any:
        return await self.request(f"/leaderboards/{leaderboard_id}", params=self._account())

    async def get_players(self, limit: int = 50) -> Any:
        return await self.request("/players", params=self._account(limit=limit))

    async def get_all_players(self) -> Any:
        return await self.get_players(limit=100)

    async def get_player_ranking(self, player_id: Optional[str] = None) -> Any:
        return await self.get_player(self._player(player_id))

    async def get_player(self, player_id: str) -> Any:
        return await self.request(f"/players/{player_id}", params=self._account())

    # === REWARDS ===

    async def get_available_rewards(self) -> Any:
        return await self.request("/rewards", params=self._account())

    async def get_prizes(self) -> Any:
        return await self.request("/prizes", params=self._account())

    async def get_player_rewards(self, player_id: Optional[str] = None) -> Any:
        player = self._player(player_id)
        return await self.request(f"/rewards/player/{player}", params=self._account())

    async def redeem_reward(self, reward_id: str, player_id: Optional[str] = None) -> Any:
        player = self._player(player_id)
        return await self.request(
            f"/rewards/{reward_id}/redeem",
            method="POST",
            json={"player": player, "account": self.config.account_id},
        )

    # === EVENTS ===

    async def complete_event(self, event_id: str, player_id: Optional[str] = None) -> Any:
        player = self._player(player_id)
        return await self.request(
            f"/events/{event_id}/complete",
            method="POST",
            json={"player": player, "account": self.config.account_id},
        )

    # === CONFIG ===

    def get_config(self) -> dict[str, Any]:
        """Copy of the current configuration"""
        return asdict(self.config)

    def update_config(self, **changes: Any) -> None:
        """
        Merge configuration changes

        The api-key header follows config.api_key on the next request.
        """
        self.config = replace(self.config, **changes)

    def update_default_player(self, player_id: Optional[str]) -> None:
        self.update_config(default_player=player_id)
