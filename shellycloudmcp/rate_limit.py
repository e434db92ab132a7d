"""Minimum spacing between outbound cloud requests."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

_LOGGER = logging.getLogger(__name__)


class RateGovernor:
    """Allow at most one request per ``min_interval`` seconds.

    Waiters are serialized by a lock, so concurrent callers are paced one
    after another against the shared last-request instant.
    """

    def __init__(self, min_interval: float) -> None:
        self.min_interval = min_interval
        self._last_request: Optional[float] = None
        self._lock = asyncio.Lock()

    async def wait(self) -> None:
        """Sleep until the interval since the previous request has elapsed."""
        async with self._lock:
            if self._last_request is not None:
                elapsed = time.monotonic() - self._last_request
                if elapsed < self.min_interval:
                    delay = self.min_interval - elapsed
                    _LOGGER.debug("Rate limiting: waiting %.3fs", delay)
                    await asyncio.sleep(delay)
            self._last_request = time.monotonic()
