"""
API Module Initialization
"""

from gamelayer_proxy.api.proxy import router as proxy_router
from gamelayer_proxy.api.static import DashboardStaticFiles

__all__ = [
    "DashboardStaticFiles",
    "proxy_router",
]
