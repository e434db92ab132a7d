"""Async Shelly Cloud client and MCP tool server."""

from .client import ShellyClient
from .config import ShellyConfig
from .exceptions import (
    AuthenticationError,
    DeviceNotFoundError,
    DeviceOfflineError,
    ErrorCode,
    InvalidResponseError,
    RateLimitError,
    ShellyConfigError,
    ShellyError,
    ShellyInternalError,
    ShellyNetworkError,
)
from .model import DeviceStatus, ShellyDevice, TemperatureReading
from .rate_limit import RateGovernor

__all__ = [
    "AuthenticationError",
    "DeviceNotFoundError",
    "DeviceOfflineError",
    "DeviceStatus",
    "ErrorCode",
    "InvalidResponseError",
    "RateGovernor",
    "RateLimitError",
    "ShellyClient",
    "ShellyConfig",
    "ShellyConfigError",
    "ShellyDevice",
    "ShellyError",
    "ShellyInternalError",
    "ShellyNetworkError",
    "TemperatureReading",
]
