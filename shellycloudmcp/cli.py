"""Command line entry point: configure logging and serve the MCP tools on stdio."""

from __future__ import annotations

import logging

import click
from dotenv import load_dotenv

from .client import ShellyClient
from .config import ShellyConfig
from .const import DEFAULT_RATE_LIMIT_MS, DEFAULT_SERVER_URIS
from .exceptions import ShellyConfigError
from .logging_config import setup_logging
from .server import create_server

_LOGGER = logging.getLogger(__name__)

load_dotenv()


@click.command()
@click.option(
    "--api-key",
    "-k",
    envvar="SHELLY_API_KEY",
    required=True,
    help="Shelly Cloud auth key (or SHELLY_API_KEY env var)",
)
@click.option(
    "--server-uri",
    "-s",
    envvar="SHELLY_SERVER_URI",
    default=None,
    help="Shelly Cloud server URI (or SHELLY_SERVER_URI). Defaults by region.",
)
@click.option(
    "--region",
    envvar="SHELLY_REGION",
    type=click.Choice(sorted(DEFAULT_SERVER_URIS)),
    default="eu",
    show_default=True,
    help="Region used to pick the default server URI",
)
@click.option(
    "--rate-limit-ms",
    envvar="SHELLY_RATE_LIMIT_MS",
    type=int,
    default=DEFAULT_RATE_LIMIT_MS,
    show_default=True,
    help="Minimum interval between cloud requests in milliseconds (>= 1000)",
)
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    default="DEBUG",
    show_default=True,
    help="Log level for the file logs",
)
@click.option(
    "--log-dir",
    envvar="SHELLY_MCP_LOG_DIR",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for log files (default: ~/.shelly-mcp/logs)",
)
def main(
    api_key: str,
    server_uri: str | None,
    region: str,
    rate_limit_ms: int,
    log_level: str,
    log_dir: str | None,
) -> None:
    """Shelly Cloud MCP server (stdio transport)."""
    setup_logging(log_level, log_dir)
    try:
        config = ShellyConfig.create(
            api_key, server_uri=server_uri, region=region, rate_limit_ms=rate_limit_ms
        )
    except ShellyConfigError as exc:
        _LOGGER.error("Invalid configuration: %s", exc)
        raise click.ClickException(f"Configuration validation failed: {exc}") from None
    _LOGGER.info("Configuration loaded successfully: %s", config.safe_dict())

    _LOGGER.info("Starting Shelly MCP server...")
    server = create_server(ShellyClient(config))
    server.run(transport="stdio")
