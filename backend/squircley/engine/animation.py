"""Rotation transition controller: single-flight, interruptible, frame driven.

One controller owns one AnimationState and publishes to one rendering surface.
Each frame step is synchronous; the only suspension point is
`await clock.next_frame()`, so cancelling the frame task drops the pending
frame and nothing else.

Usage:
    surface = RecordingSurface()
    controller = RotationTransitionController(surface, lambda: 75)
    controller.request_rotation(90)
    await controller.wait()
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from squircley.engine.constants import (
    DEFAULT_CONSTANTS,
    SEMI_MAJOR_AXIS,
    SEMI_MINOR_AXIS,
    TRANSITION_DURATION_MS,
    ShapeConstants,
)
from squircley.engine.easing import clamp, ease_in_out_cubic, lerp
from squircley.engine.superellipse import build_path, curvature_to_exponent
from squircley.engine.surfaces import RenderingSurface

logger = logging.getLogger(__name__)


class FrameClock(Protocol):
    async def next_frame(self) -> float:
        """Suspend until the next display frame; return its timestamp in ms."""
        ...


class AsyncioFrameClock:
    """Paces frames with asyncio.sleep at a fixed rate, timestamps from the loop clock."""

    def __init__(self, fps: int = 60) -> None:
        self.interval = 1.0 / fps

    async def next_frame(self) -> float:
        await asyncio.sleep(self.interval)
        return asyncio.get_running_loop().time() * 1000.0


class ManualFrameClock:
    """Frame clock advanced by explicit tick() calls. Deterministic."""

    def __init__(self) -> None:
        self._waiters: list[asyncio.Future[float]] = []

    @property
    def pending(self) -> int:
        """Number of frame waits not yet released."""
        return sum(1 for w in self._waiters if not w.done())

    async def next_frame(self) -> float:
        waiter: asyncio.Future[float] = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        try:
            return await waiter
        finally:
            self._waiters.remove(waiter)

    def tick(self, timestamp: float) -> int:
        """Release every pending frame wait with `timestamp`. Returns how many woke."""
        woken = 0
        for waiter in list(self._waiters):
            if not waiter.done():
                waiter.set_result(timestamp)
                woken += 1
        return woken


@dataclass
class AnimationState:
    is_transitioning: bool = False
    current_rotation: float = 0.0
    target_rotation: float = 0.0
    start_timestamp: float | None = None


class RotationTransitionController:
    """Animates the displayed rotation toward the latest requested target.

    A new request while transitioning cancels the in-flight frame task and
    re-bases from the rotation currently on screen; requests are never queued.
    """

    def __init__(
        self,
        surface: RenderingSurface,
        curvature_source: Callable[[], float],
        *,
        clock: FrameClock | None = None,
        duration_ms: float = TRANSITION_DURATION_MS,
        a: float = SEMI_MAJOR_AXIS,
        b: float = SEMI_MINOR_AXIS,
        initial_rotation: float = 0.0,
        constants: ShapeConstants = DEFAULT_CONSTANTS,
    ) -> None:
        self.surface = surface
        self.curvature_source = curvature_source
        self.clock: FrameClock = clock or AsyncioFrameClock()
        self.duration_ms = duration_ms
        self.a = a
        self.b = b
        self.constants = constants

        self._state = AnimationState(
            current_rotation=float(initial_rotation),
            target_rotation=float(initial_rotation),
        )
        self._displayed = float(initial_rotation)
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> AnimationState:
        """Snapshot copy; mutating it does not affect the controller."""
        return dataclasses.replace(self._state)

    @property
    def displayed_rotation(self) -> float:
        return self._displayed

    @property
    def is_transitioning(self) -> bool:
        return self._state.is_transitioning

    def request_rotation(self, target: float) -> asyncio.Task[None]:
        """Start (or restart) a transition to `target` degrees. Needs a running loop."""
        self._drop_pending_frame()

        state = self._state
        state.current_rotation = self._displayed
        state.target_rotation = float(target)
        state.start_timestamp = None
        state.is_transitioning = True
        logger.debug("Rotation transition %.3f -> %.3f", state.current_rotation, state.target_rotation)

        self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    def cancel(self) -> None:
        """Stop where the shape currently is. No-op when idle."""
        if not self._state.is_transitioning:
            return
        self._drop_pending_frame()
        state = self._state
        state.current_rotation = self._displayed
        state.target_rotation = self._displayed
        state.start_timestamp = None
        state.is_transitioning = False
        logger.debug("Rotation transition cancelled at %.3f", self._displayed)

    async def wait(self) -> None:
        """Wait until no transition is running (follows restarts)."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    def refresh(self) -> str:
        """Republish the path at the displayed rotation, e.g. after a curvature change."""
        return self._publish(self._displayed)

    def step(self, timestamp: float) -> bool:
        """Advance one frame. Returns True once the transition has finished."""
        state = self._state
        if not state.is_transitioning:
            return True

        if state.start_timestamp is None:
            state.start_timestamp = timestamp

        if self.duration_ms > 0:
            progress = clamp((timestamp - state.start_timestamp) / self.duration_ms)
        else:
            progress = 1.0

        if progress >= 1:
            # Snap so the resting rotation carries no interpolation residue.
            self._displayed = state.target_rotation
            self._publish(self._displayed)
            state.current_rotation = state.target_rotation
            state.start_timestamp = None
            state.is_transitioning = False
            logger.debug("Rotation transition finished at %.3f", state.current_rotation)
            return True

        eased = ease_in_out_cubic(progress)
        self._displayed = lerp(state.current_rotation, state.target_rotation, eased)
        self._publish(self._displayed)
        return False

    async def _run(self) -> None:
        while True:
            timestamp = await self.clock.next_frame()
            if self.step(timestamp):
                return

    def _drop_pending_frame(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def _publish(self, rotation: float) -> str:
        p = curvature_to_exponent(self.curvature_source())
        d = build_path(self.a, self.b, p, rotation, self.constants)
        self.surface.set_path(d)
        return d
