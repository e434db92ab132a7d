"""Exceptions for the Shelly Cloud client and tools."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error kinds reported to the tool host."""

    INVALID_INPUT = "INVALID_INPUT"
    DEVICE_NOT_FOUND = "DEVICE_NOT_FOUND"
    DEVICE_OFFLINE = "DEVICE_OFFLINE"
    AUTHENTICATION_FAILED = "AUTH_FAILED"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT"
    NETWORK_ERROR = "NETWORK_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ShellyError(Exception):
    """Base error for all Shelly failures."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR


class AuthenticationError(ShellyError):
    """Raised when the cloud rejects the auth key."""

    code = ErrorCode.AUTHENTICATION_FAILED


class RateLimitError(ShellyError):
    """Raised when the cloud answers HTTP 429."""

    code = ErrorCode.RATE_LIMIT_EXCEEDED


class ShellyNetworkError(ShellyError):
    """Raised on transport failures and unexpected HTTP statuses."""

    code = ErrorCode.NETWORK_ERROR

    def __init__(self, message: str, *, timeout: bool = False) -> None:
        super().__init__(message)
        self.timeout = timeout


class InvalidResponseError(ShellyError):
    """Raised when a response lacks the expected envelope or field types."""

    code = ErrorCode.INVALID_RESPONSE


class DeviceNotFoundError(ShellyError):
    code = ErrorCode.DEVICE_NOT_FOUND


class DeviceOfflineError(ShellyError):
    code = ErrorCode.DEVICE_OFFLINE


class ShellyInternalError(ShellyError):
    code = ErrorCode.INTERNAL_ERROR


class ShellyConfigError(ShellyError, ValueError):
    """Raised for invalid configuration values."""

    code = ErrorCode.INVALID_INPUT
