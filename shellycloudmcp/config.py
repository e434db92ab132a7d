"""Runtime configuration for the Shelly Cloud client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .const import (
    DEFAULT_CACHE_TTL,
    DEFAULT_RATE_LIMIT_MS,
    DEFAULT_REGION,
    DEFAULT_SERVER_URIS,
    DEFAULT_TIMEOUT,
    MIN_RATE_LIMIT_MS,
)
from .exceptions import ShellyConfigError
from .helpers import _mask_secret, _to_str_or_none


@dataclass(slots=True, frozen=True)
class ShellyConfig:
    """Validated settings; build with :meth:`create`."""

    api_key: str = field(repr=False)
    server_uri: str
    region: str = DEFAULT_REGION
    rate_limit_ms: int = DEFAULT_RATE_LIMIT_MS
    cache_ttl: float = DEFAULT_CACHE_TTL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def create(
        cls,
        api_key: Optional[str],
        *,
        server_uri: Optional[str] = None,
        region: Optional[str] = None,
        rate_limit_ms: int = DEFAULT_RATE_LIMIT_MS,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> ShellyConfig:
        api_key = _to_str_or_none(api_key)
        if not api_key:
            raise ShellyConfigError("API key is required")

        region = (region or DEFAULT_REGION).lower()
        if region not in DEFAULT_SERVER_URIS:
            raise ShellyConfigError(
                f"Invalid region '{region}'. Must be one of: {', '.join(DEFAULT_SERVER_URIS)}"
            )

        server_uri = _to_str_or_none(server_uri) or DEFAULT_SERVER_URIS[region]
        if not server_uri.startswith(("http://", "https://")):
            raise ShellyConfigError(f"Invalid server URI '{server_uri}'")

        if int(rate_limit_ms) < MIN_RATE_LIMIT_MS:
            raise ShellyConfigError(
                f"Rate limit must be at least {MIN_RATE_LIMIT_MS}ms, got {rate_limit_ms}ms"
            )

        return cls(
            api_key=api_key,
            server_uri=server_uri.rstrip("/"),
            region=region,
            rate_limit_ms=int(rate_limit_ms),
            cache_ttl=float(cache_ttl),
            timeout=float(timeout),
        )

    @property
    def min_interval(self) -> float:
        """Rate limit in seconds."""
        return self.rate_limit_ms / 1000

    def safe_dict(self) -> Dict[str, Any]:
        """Settings suitable for logging, with the API key masked."""
        return {
            "server_uri": self.server_uri,
            "region": self.region,
            "rate_limit_ms": self.rate_limit_ms,
            "api_key": _mask_secret(self.api_key),
        }
