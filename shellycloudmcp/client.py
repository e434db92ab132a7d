"""Async Python API client for Shelly Cloud."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, List, Mapping, Optional

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout

from .config import ShellyConfig
from .const import (
    ENDPOINT_ALL_STATUS,
    ENDPOINT_LIGHT_CONTROL,
    ENDPOINT_RELAY_CONTROL,
    ENDPOINT_STATUS,
)
from .exceptions import (
    AuthenticationError,
    InvalidResponseError,
    RateLimitError,
    ShellyError,
    ShellyNetworkError,
)
from .helpers import _as_mapping, _category_from_code, _to_str_or_none
from .model import DeviceStatus, InventorySnapshot, ShellyDevice, TemperatureReading
from .rate_limit import RateGovernor
from .status import find_temperature, parse_device_status

__version__ = "0.1.0"

_LOGGER = logging.getLogger(__name__)


class ShellyClient:
    """Asynchronous client for the Shelly Cloud API.

    Usage:
        async with ShellyClient(config) as client:
            devices = await client.list_devices()
    """

    def __init__(
        self,
        config: ShellyConfig,
        *,
        session: Optional[ClientSession] = None,
        governor: Optional[RateGovernor] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self._session = session
        self._owned_session = session is None
        self._timeout = ClientTimeout(total=config.timeout)
        self._governor = governor or RateGovernor(config.min_interval)
        self._logger = logger or _LOGGER
        self._inventory: Optional[InventorySnapshot] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def __aenter__(self) -> ShellyClient:
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the session if it was created by this client."""
        if self._owned_session and self._session is not None and not self._session.closed:
            await self._session.close()
        if self._owned_session:
            self._session = None

    def _ensure_session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=self._timeout)
            self._owned_session = True
        return self._session

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def list_devices(self, use_cache: bool = True) -> List[ShellyDevice]:
        """Return all devices on the account.

        A cached inventory younger than ``config.cache_ttl`` is returned
        without contacting the cloud when ``use_cache`` is true.
        """
        snapshot = self._inventory
        if use_cache and snapshot is not None and snapshot.devices:
            if time.monotonic() - snapshot.fetched_at < self.config.cache_ttl:
                self._logger.debug("Returning cached device list")
                return list(snapshot.devices.values())

        response = await self._post(ENDPOINT_ALL_STATUS)
        data = response.get("data")
        devices_payload = data.get("devices_status") if isinstance(data, Mapping) else None

        parsed: Dict[str, ShellyDevice] = {}
        if isinstance(devices_payload, Mapping):
            self._logger.debug("Found devices_status with %d devices", len(devices_payload))
            for device_id, device in devices_payload.items():
                self._add_device(parsed, str(device_id), device)
        else:
            self._logger.warning(
                "No devices_status found in response. Response structure: %s", response
            )

        self._inventory = InventorySnapshot(devices=parsed, fetched_at=time.monotonic())
        self._logger.info("Listed %d devices", len(parsed))
        return list(parsed.values())

    async def get_device_status(self, device_id: str) -> DeviceStatus:
        """Fetch and normalize the status envelope of one device."""
        response = await self._post(ENDPOINT_STATUS, {"id": device_id})
        data = response.get("data")
        payload = data.get("device_status") if isinstance(data, Mapping) else None
        if not isinstance(payload, Mapping):
            raise InvalidResponseError(
                f"Invalid device status response structure for device {device_id}"
            )
        return parse_device_status(device_id, payload)

    async def control_light(
        self,
        device_id: str,
        channel: int,
        turn: str,
        brightness: Optional[int] = None,
    ) -> None:
        """Switch a light channel and optionally set its brightness (0-100)."""
        params: Dict[str, Any] = {"id": device_id, "channel": channel, "turn": turn}
        if brightness is not None:
            params["brightness"] = brightness
        await self._post(ENDPOINT_LIGHT_CONTROL, params)
        self._logger.info(
            "Light control successful: device=%s, channel=%s, turn=%s, brightness=%s",
            device_id,
            channel,
            turn,
            brightness,
        )

    async def control_relay(self, device_id: str, channel: int, turn: str) -> None:
        """Switch a relay channel on or off."""
        await self._post(
            ENDPOINT_RELAY_CONTROL, {"id": device_id, "channel": channel, "turn": turn}
        )
        self._logger.info(
            "Relay control successful: device=%s, channel=%s, turn=%s",
            device_id,
            channel,
            turn,
        )

    async def get_temperature(self, device_id: str) -> Optional[TemperatureReading]:
        """Return the device temperature, or None when it reports none."""
        status = await self.get_device_status(device_id)
        return find_temperature(status)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _add_device(
        self, parsed: Dict[str, ShellyDevice], device_id: str, device: Any
    ) -> None:
        try:
            parsed[device_id] = self._parse_device(device_id, device)
        except Exception as exc:
            self._logger.warning("Failed to parse device %s: %s", device_id, exc)

    def _parse_device(self, device_id: str, device: Any) -> ShellyDevice:
        if not isinstance(device, Mapping):
            raise InvalidResponseError(f"expected object, got {type(device).__name__}")
        cloud = _as_mapping(device.get("cloud"))
        sys_data = _as_mapping(device.get("sys"))
        dev_info = _as_mapping(device.get("_dev_info"))

        code = _to_str_or_none(device.get("code"))
        return ShellyDevice(
            id=device_id,
            name=f"{code} ({device_id})" if code else device_id,
            category=_category_from_code(code),
            online=cloud.get("connected") is True,
            model=code or _to_str_or_none(device.get("model")),
            gen=_to_str_or_none(dev_info.get("gen") or device.get("gen")),
            mac=_to_str_or_none(sys_data.get("mac") or device.get("mac")),
        )

    # ------------------------------------------------------------------
    # HTTP core
    # ------------------------------------------------------------------
    async def _post(
        self, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        await self._governor.wait()
        form = {k: str(v) for k, v in (params or {}).items()}
        form["auth_key"] = self.config.api_key
        return await self._request("POST", f"{self.config.server_uri}{path}", form)

    async def _request(self, method: str, url: str, form: Mapping[str, str]) -> Dict[str, Any]:
        session = self._ensure_session()
        self._logger.debug("Shelly API request: %s %s", method, url)
        try:
            async with session.request(
                method, url, data=dict(form), timeout=self._timeout
            ) as resp:
                return await self._handle_response(resp)
        except ShellyError as exc:
            self._logger.error("Shelly API error (%s %s): %s", method, url, exc)
            raise
        except asyncio.TimeoutError as exc:
            self._logger.error("Shelly API timeout (%s %s)", method, url)
            raise ShellyNetworkError(
                "Request timeout. Please check your network connection.", timeout=True
            ) from exc
        except ClientError as exc:
            self._logger.error("Shelly API error (%s %s): %s", method, url, exc)
            raise ShellyNetworkError(f"Shelly API error: {exc}") from exc

    async def _handle_response(self, resp: ClientResponse) -> Dict[str, Any]:
        self._logger.debug("Shelly API response: status=%s url=%s", resp.status, resp.url)
        if resp.status == 401:
            raise AuthenticationError("Authentication failed. Please check your API key.")
        if resp.status == 429:
            raise RateLimitError("Rate limit exceeded. Please try again later.")
        if resp.status != 200:
            text = await resp.text()
            raise ShellyNetworkError(f"Shelly API error: HTTP {resp.status}: {text}")

        try:
            body = await resp.json(content_type=None)
        except ValueError as exc:
            raise InvalidResponseError(f"Invalid JSON response: {exc}") from exc
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise InvalidResponseError("Invalid response: expected a JSON object")

        if body.get("isok") is False:
            errors = body.get("errors") or {}
            if "auth" in str(errors).lower():
                raise AuthenticationError(
                    "Authentication failed. Please check your API key."
                )
            raise ShellyNetworkError(f"Shelly API error: {errors}")
        return body
