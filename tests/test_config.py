"""Tests for configuration and small helpers."""

from __future__ import annotations

import pytest

from shellycloudmcp.config import ShellyConfig
from shellycloudmcp.exceptions import ErrorCode, ShellyConfigError
from shellycloudmcp.helpers import _category_from_code


@pytest.mark.parametrize(
    "code, expected",
    [
        ("SPSW-001", "switch"),
        ("SPEM-002", "energy_meter"),
        ("SPDM-001", "dimmer"),
        ("S3SN-0U12A", "sensor"),
        ("S3SW-001X16EU", "switch"),
        ("SNGW-BT01", "gateway"),
        ("THERMOSTAT", "thermostat"),
        ("XYZ123", "xyz123"),
        (None, "unknown"),
        ("", "unknown"),
    ],
)
def test_category_from_code(code: str | None, expected: str) -> None:
    assert _category_from_code(code) == expected


def test_defaults() -> None:
    config = ShellyConfig.create("secret-key")

    assert config.server_uri == "https://shelly-10-eu.shelly.cloud"
    assert config.region == "eu"
    assert config.rate_limit_ms == 1000
    assert config.min_interval == 1.0
    assert config.cache_ttl == 60.0


def test_region_default_server() -> None:
    assert ShellyConfig.create("k", region="US").server_uri == "https://shelly-10-us.shelly.cloud"


def test_explicit_server_uri_wins() -> None:
    config = ShellyConfig.create("k", server_uri="https://shelly-77-eu.shelly.cloud/", region="us")

    assert config.server_uri == "https://shelly-77-eu.shelly.cloud"


@pytest.mark.parametrize(
    "kwargs, match",
    [
        ({"api_key": ""}, "API key is required"),
        ({"api_key": None}, "API key is required"),
        ({"api_key": "k", "region": "asia"}, "Invalid region"),
        ({"api_key": "k", "server_uri": "shelly.cloud"}, "Invalid server URI"),
        ({"api_key": "k", "rate_limit_ms": 500}, "at least 1000ms"),
    ],
)
def test_invalid_configuration(kwargs: dict, match: str) -> None:
    with pytest.raises(ShellyConfigError, match=match) as excinfo:
        ShellyConfig.create(**kwargs)
    assert excinfo.value.code is ErrorCode.INVALID_INPUT
    assert isinstance(excinfo.value, ValueError)


def test_api_key_is_masked() -> None:
    config = ShellyConfig.create("abcd1234efgh")

    assert config.safe_dict()["api_key"] == "abcd..."
    assert "abcd1234efgh" not in repr(config)


@pytest.mark.parametrize("api_key", ["k", "abcd"])
def test_short_api_key_is_fully_masked(api_key: str) -> None:
    masked = ShellyConfig.create(api_key).safe_dict()["api_key"]

    assert masked == "..."
    assert api_key not in masked
