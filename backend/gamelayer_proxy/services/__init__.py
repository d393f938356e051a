"""
Dashboard Services Module Initialization
"""

from gamelayer_proxy.services.dashboard import SECTIONS, Dashboard
from gamelayer_proxy.services.panels import (
    LeaderboardPanel,
    MissionsPanel,
    Panel,
    ProfilePanel,
    RewardsPanel,
    default_panels,
)

__all__ = [
    "SECTIONS",
    "Dashboard",
    "LeaderboardPanel",
    "MissionsPanel",
    "Panel",
    "ProfilePanel",
    "RewardsPanel",
    "default_panels",
]
