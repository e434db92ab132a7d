"""Shared fixtures: fake aiohttp session and sample cloud payloads."""

from __future__ import annotations

import time
from typing import Any

import pytest

from shellycloudmcp.client import ShellyClient
from shellycloudmcp.config import ShellyConfig
from shellycloudmcp.rate_limit import RateGovernor

API_KEY = "test-auth-key"
SERVER_URI = "https://shelly-10-eu.shelly.cloud"


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(self, body: Any = None, status: int = 200, text: str = "") -> None:
        self.status = status
        self._body = body
        self._text = text
        self.url = SERVER_URI

    async def json(self, content_type: str | None = None) -> Any:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        pass


class FakeSession:
    """Records requests and replays queued responses or errors in order."""

    def __init__(self, *responses: FakeResponse | BaseException) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, *responses: FakeResponse | BaseException) -> None:
        self._responses.extend(responses)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, "time": time.monotonic(), **kwargs})
        if not self._responses:
            raise RuntimeError("No more responses")
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


def inventory_body(devices: dict[str, Any]) -> dict[str, Any]:
    return {"isok": True, "data": {"devices_status": devices}}


def status_body(status: dict[str, Any]) -> dict[str, Any]:
    return {"isok": True, "data": {"device_status": status}}


@pytest.fixture
def config() -> ShellyConfig:
    return ShellyConfig.create(API_KEY)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(config: ShellyConfig, session: FakeSession) -> ShellyClient:
    """Client with pacing disabled so tests do not sleep."""
    return ShellyClient(config, session=session, governor=RateGovernor(0))


@pytest.fixture
def switch_status() -> dict[str, Any]:
    return {
        "code": "SPSW-001",
        "cloud": {"connected": True},
        "wifi": {"sta_ip": "192.168.1.20", "ssid": "home", "rssi": -61, "status": "got ip"},
        "eth": {"ip": None},
        "sys": {
            "mac": "AABBCCDDEEFF",
            "uptime": 93600,
            "ram_size": 250000,
            "ram_free": 125000,
            "available_updates": {"stable": {"version": "1.4.2"}},
        },
        "switch:0": {
            "id": 0,
            "output": True,
            "apower": 12.5,
            "voltage": 230.1,
            "current": 0.054,
            "temperature": {"tC": 41.2, "tF": 106.2},
        },
        "mqtt": {"connected": False},
        "ble": [],
        "script:1": {"running": True},
    }
