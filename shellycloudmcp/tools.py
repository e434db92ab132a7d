"""Tool handlers: validate targets against the inventory, call the client, render text."""

from __future__ import annotations

import logging
from typing import Optional

from .client import ShellyClient
from .exceptions import DeviceNotFoundError, DeviceOfflineError
from .formatting import format_device_list, format_device_status, format_temperature
from .model import ShellyDevice

_LOGGER = logging.getLogger(__name__)


class ShellyTools:
    """The operations exposed to the tool host."""

    def __init__(self, client: ShellyClient) -> None:
        self.client = client

    async def _find_device(self, device_id: str) -> ShellyDevice:
        devices = await self.client.list_devices()
        for device in devices:
            if device.id == device_id:
                return device
        raise DeviceNotFoundError(
            f"Device with ID '{device_id}' not found. Use list_devices to see available devices."
        )

    async def _find_online_device(self, device_id: str, action: str) -> ShellyDevice:
        device = await self._find_device(device_id)
        if not device.online:
            raise DeviceOfflineError(f"Device '{device.name}' is offline and {action}.")
        return device

    async def list_devices(self, refresh: bool = False) -> str:
        devices = await self.client.list_devices(use_cache=not refresh)
        return format_device_list(devices)

    async def control_light(
        self,
        device_id: str,
        turn: str,
        brightness: Optional[int] = None,
        channel: int = 0,
    ) -> str:
        device = await self._find_online_device(device_id, "cannot be controlled")
        await self.client.control_light(device_id, channel, turn, brightness)
        result = f"Successfully turned {turn} light '{device.name}'"
        if brightness is not None:
            result += f" with brightness set to {brightness}%"
        return result

    async def control_switch(self, device_id: str, turn: str, channel: int = 0) -> str:
        device = await self._find_online_device(device_id, "cannot be controlled")
        await self.client.control_relay(device_id, channel, turn)
        return f"Successfully turned {turn} switch '{device.name}' (channel {channel})"

    async def get_temperature(self, device_id: str, unit: str = "celsius") -> str:
        device = await self._find_online_device(
            device_id, "cannot provide temperature readings"
        )
        reading = await self.client.get_temperature(device_id)
        if reading is None:
            _LOGGER.info("No temperature data for device %s", device_id)
            return (
                f"Device '{device.name}' does not have a temperature sensor "
                "or temperature data is not available."
            )
        return format_temperature(device, reading, unit)

    async def get_device_status(self, device_id: str) -> str:
        device = await self._find_device(device_id)
        if not device.online:
            return f"Device '{device.name}' is currently offline. No status information available."
        status = await self.client.get_device_status(device_id)
        return format_device_status(device, status)
