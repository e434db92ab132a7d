"""Tests for the request rate governor."""

from __future__ import annotations

import asyncio
import time

import pytest

from shellycloudmcp.rate_limit import RateGovernor

INTERVAL = 0.05
TOLERANCE = 0.005


@pytest.mark.asyncio
async def test_first_call_does_not_wait() -> None:
    governor = RateGovernor(10.0)
    start = time.monotonic()
    await governor.wait()
    assert time.monotonic() - start < 1.0


@pytest.mark.asyncio
async def test_sequential_calls_are_spaced() -> None:
    governor = RateGovernor(INTERVAL)
    stamps = []
    for _ in range(4):
        await governor.wait()
        stamps.append(time.monotonic())

    for earlier, later in zip(stamps, stamps[1:]):
        assert later - earlier >= INTERVAL - TOLERANCE
    assert stamps[-1] - stamps[0] >= 3 * INTERVAL - TOLERANCE


@pytest.mark.asyncio
async def test_concurrent_callers_are_serialized() -> None:
    governor = RateGovernor(INTERVAL)
    stamps: list[float] = []

    async def call() -> None:
        await governor.wait()
        stamps.append(time.monotonic())

    await asyncio.gather(*(call() for _ in range(3)))

    stamps.sort()
    assert stamps[-1] - stamps[0] >= 2 * INTERVAL - TOLERANCE


@pytest.mark.asyncio
async def test_no_wait_after_interval_elapsed() -> None:
    governor = RateGovernor(INTERVAL)
    await governor.wait()
    await asyncio.sleep(INTERVAL * 2)

    start = time.monotonic()
    await governor.wait()
    assert time.monotonic() - start < INTERVAL
