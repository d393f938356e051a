"""
Test Configuration Module
"""

from typing import Optional

import httpx
import pytest

from gamelayer_proxy.config import Settings
from gamelayer_proxy.proxy.forwarder import ProxyForwarder

TEST_ORIGIN = "https://api.gamelayer.co"


class RecordingUpstream:
    """
    Fake GameLayer upstream

    Records every request the forwarder sends and answers with a fixed
    response, or raises the configured transport error.
    """

    def __init__(
        self,
        status_code: int = 200,
        content: bytes = b"[]",
        headers: Optional[dict[str, str]] = None,
        error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.content = content
        self.headers = headers if headers is not None else {"content-type": "application/json"}
        self.error = error
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "upstream was never called"
        return self.requests[-1]


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with a configured secret and an isolated static root"""
    return Settings(
        GAMELAYER_ORIGIN=TEST_ORIGIN,
        GAMELAYER_API_KEY="SECRET123",
        GAMELAYER_DEFAULT_PLAYER=None,
        STATIC_ROOT=tmp_path,
    )


@pytest.fixture
def upstream() -> RecordingUpstream:
    return RecordingUpstream()


@pytest.fixture
def forwarder(settings, upstream) -> ProxyForwarder:
    return ProxyForwarder(settings, transport=upstream.transport)


@pytest.fixture
def make_upstream():
    """Factory for extra fake upstreams with custom responses"""
    return RecordingUpstream
