"""Shared test fixtures."""

from __future__ import annotations

import asyncio

import pytest

from squircley.engine.animation import ManualFrameClock
from squircley.engine.surfaces import RecordingSurface
from squircley.plugin.host import InMemoryHost

# Reference squircle used by the web preview and the plugin.
AXIS = 100.0

# Curvature slider positions and the exponents they map to.
CURVATURE_STAR = 0  # p = 0.5
CURVATURE_MID = 50  # p = 5.25
CURVATURE_BOX = 100  # p = 10

PLUGIN_SVG_HEAD = '<svg width="289" height="289" viewBox="0 0 289 289" fill="none" xmlns="http://www.w3.org/2000/svg">'


async def advance(clock: ManualFrameClock, timestamp: float) -> None:
    """Release one frame at `timestamp` and let the frame task run its step."""
    await asyncio.sleep(0)
    clock.tick(timestamp)
    for _ in range(3):
        await asyncio.sleep(0)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def clock() -> ManualFrameClock:
    return ManualFrameClock()


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost(viewport_center=(500.0, 300.0))
