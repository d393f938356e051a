"""
Exception handler tests
"""

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport

from gamelayer_proxy.api.handlers import register_exception_handlers
from gamelayer_proxy.common.errors import NotFoundError, TransportError, ValidationError
from gamelayer_proxy.config import Settings


def make_app(debug: bool = False) -> FastAPI:
    app = FastAPI()
    app.state.settings = Settings(DEBUG=debug)
    register_exception_handlers(app)

    @app.get("/validation")
    async def validation():
        raise ValidationError("Player ID is required", code="player_required")

    @app.get("/missing")
    async def missing():
        raise NotFoundError()

    @app.get("/transport")
    async def transport():
        raise TransportError("connection refused")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("boom")

    return app


def client_for(app: FastAPI) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.mark.asyncio
async def test_app_error_envelope():
    async with client_for(make_app()) as client:
        response = await client.get("/validation")

    assert response.status_code == 422
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.json() == {
        "error": {
            "message": "Player ID is required",
            "type": "validation_error",
            "code": "player_required",
        }
    }


@pytest.mark.asyncio
async def test_not_found_is_plain_text():
    async with client_for(make_app()) as client:
        response = await client.get("/missing")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Not found"


@pytest.mark.asyncio
async def test_transport_error_uses_proxy_envelope():
    async with client_for(make_app()) as client:
        response = await client.get("/transport")

    assert response.status_code == 502
    assert response.json() == {"error": "Proxy request failed", "message": "connection refused"}


@pytest.mark.asyncio
async def test_uncaught_exception_hidden():
    async with client_for(make_app()) as client:
        response = await client.get("/crash")

    assert response.status_code == 500
    assert response.json()["error"]["message"] == "Internal server error"


@pytest.mark.asyncio
async def test_uncaught_exception_detail_in_debug():
    async with client_for(make_app(debug=True)) as client:
        response = await client.get("/crash")

    assert response.status_code == 500
    assert response.json()["error"] == {
        "message": "boom",
        "type": "RuntimeError",
        "code": "internal_error",
    }
