"""
GameLayer Demo Proxy

Same-origin forwarding proxy, API client and dashboard logic for the GameLayer demo.
"""

__version__ = "0.1.0"
