"""Tests for the command line entry point and logging setup."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from shellycloudmcp.cli import main
from shellycloudmcp.logging_config import ERROR_LOG_FILE_NAME, LOG_FILE_NAME, setup_logging

CLEAN_ENV = {
    "SHELLY_API_KEY": None,
    "SHELLY_SERVER_URI": None,
    "SHELLY_REGION": None,
    "SHELLY_RATE_LIMIT_MS": None,
}


def test_starts_stdio_server(tmp_path: Path) -> None:
    with patch("shellycloudmcp.cli.setup_logging"), patch(
        "shellycloudmcp.cli.create_server"
    ) as create_server:
        result = CliRunner().invoke(
            main, ["-k", "secret-key", "--region", "us", "--log-dir", str(tmp_path)], env=CLEAN_ENV
        )

    assert result.exit_code == 0, result.output
    client = create_server.call_args.args[0]
    assert client.config.server_uri == "https://shelly-10-us.shelly.cloud"
    create_server.return_value.run.assert_called_once_with(transport="stdio")


def test_api_key_from_environment() -> None:
    with patch("shellycloudmcp.cli.setup_logging"), patch(
        "shellycloudmcp.cli.create_server"
    ) as create_server:
        result = CliRunner().invoke(main, [], env={**CLEAN_ENV, "SHELLY_API_KEY": "env-key"})

    assert result.exit_code == 0, result.output
    assert create_server.call_args.args[0].config.api_key == "env-key"


def test_missing_api_key() -> None:
    with patch("shellycloudmcp.cli.setup_logging"), patch("shellycloudmcp.cli.create_server"):
        result = CliRunner().invoke(main, [], env=CLEAN_ENV)

    assert result.exit_code == 2
    assert "--api-key" in result.output


def test_rate_limit_below_minimum() -> None:
    with patch("shellycloudmcp.cli.setup_logging"), patch(
        "shellycloudmcp.cli.create_server"
    ) as create_server:
        result = CliRunner().invoke(main, ["-k", "key", "--rate-limit-ms", "200"], env=CLEAN_ENV)

    assert result.exit_code == 1
    assert "at least 1000ms" in result.output
    create_server.assert_not_called()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_writes_json_files(tmp_path: Path, restore_root_logger) -> None:
    log_dir = setup_logging("info", tmp_path / "logs")
    logging.getLogger("shellycloudmcp.test").error("Upstream failed: %s", "boom")
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["level"] == "ERROR"
    assert record["message"] == "Upstream failed: boom"
    assert "boom" in (log_dir / ERROR_LOG_FILE_NAME).read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.INFO
