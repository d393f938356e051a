"""
API Dependency Injection Module

Provides the dependencies FastAPI routes need.
"""

from typing import Annotated

from fastapi import Depends, Request

from gamelayer_proxy.proxy.forwarder import ProxyForwarder


def get_forwarder(request: Request) -> ProxyForwarder:
    """Forwarder owned by the application (created by the app factory)"""
    return request.app.state.forwarder


ForwarderDep = Annotated[ProxyForwarder, Depends(get_forwarder)]
