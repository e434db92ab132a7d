"""MCP server exposing the Shelly tools over stdio."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator, Awaitable, Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from .client import ShellyClient
from .exceptions import ShellyError, ShellyInternalError
from .tools import ShellyTools

_LOGGER = logging.getLogger(__name__)

SERVER_NAME = "shelly-mcp"

DeviceId = Annotated[str, Field(description="The device ID")]
Turn = Annotated[Literal["on", "off"], Field(description="Turn the device on or off")]
Channel = Annotated[int, Field(ge=0, description="Channel number (default: 0)")]


async def _call(name: str, call: Awaitable[str]) -> str:
    """Await a tool handler, turning failures into MCP error results."""
    _LOGGER.info("Executing tool: %s", name)
    try:
        return await call
    except ShellyError as exc:
        _LOGGER.error("Error executing tool %s: [%s] %s", name, exc.code.value, exc)
        raise ToolError(f"Error: {exc}") from exc
    except Exception as exc:
        _LOGGER.exception("Unexpected error executing tool %s", name)
        error = ShellyInternalError(str(exc) or "Unknown error occurred")
        raise ToolError(f"Error: {error}") from exc


def create_server(client: ShellyClient) -> FastMCP:
    """Build a FastMCP server whose tools are backed by ``client``."""
    tools = ShellyTools(client)

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            _LOGGER.info("Shutting down Shelly MCP server...")
            await client.close()

    mcp = FastMCP(SERVER_NAME, lifespan=lifespan)

    @mcp.tool(description="List all Shelly devices connected to your account")
    async def list_devices(
        refresh: Annotated[
            bool, Field(description="Force refresh device list (bypass cache)")
        ] = False,
    ) -> str:
        return await _call("list_devices", tools.list_devices(refresh))

    @mcp.tool(description="Control a Shelly light device (turn on/off, set brightness)")
    async def control_light(
        device_id: DeviceId,
        turn: Turn,
        brightness: Annotated[
            Optional[Annotated[int, Field(ge=0, le=100)]],
            Field(description="Brightness level (0-100)"),
        ] = None,
        channel: Channel = 0,
    ) -> str:
        return await _call(
            "control_light", tools.control_light(device_id, turn, brightness, channel)
        )

    @mcp.tool(description="Control a Shelly switch/relay device (turn on/off)")
    async def control_switch(device_id: DeviceId, turn: Turn, channel: Channel = 0) -> str:
        return await _call("control_switch", tools.control_switch(device_id, turn, channel))

    @mcp.tool(
        description="Get temperature reading from a Shelly device with temperature sensor"
    )
    async def get_temperature(
        device_id: DeviceId,
        unit: Annotated[
            Literal["celsius", "fahrenheit", "both"],
            Field(description="Temperature unit"),
        ] = "celsius",
    ) -> str:
        return await _call("get_temperature", tools.get_temperature(device_id, unit))

    @mcp.tool(description="Get comprehensive status information for a Shelly device")
    async def get_device_status(device_id: DeviceId) -> str:
        return await _call("get_device_status", tools.get_device_status(device_id))

    _LOGGER.info("All tools registered successfully")
    return mcp
