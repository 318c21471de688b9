"""Streaming rotation previews via SSE, one event per animation frame."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator

from squircley.config import settings
from squircley.engine.animation import AsyncioFrameClock, FrameClock, RotationTransitionController
from squircley.engine.surfaces import QueueSurface


def _event(name: str, payload: dict) -> str:
    return f"event: {name}\ndata: {json.dumps(payload)}\n\n"


async def stream_rotation_frames(
    curvature: int,
    from_rotation: float,
    to_rotation: float,
    duration_ms: float | None = None,
    clock: FrameClock | None = None,
) -> AsyncGenerator[str, None]:
    """Run one transition and yield `frame` events, then a `done` event."""
    surface = QueueSurface()
    controller = RotationTransitionController(
        surface,
        lambda: curvature,
        clock=clock or AsyncioFrameClock(settings.frame_rate),
        duration_ms=settings.transition_duration_ms if duration_ms is None else duration_ms,
        initial_rotation=from_rotation,
    )
    surface.bind(lambda: controller.displayed_rotation)

    task = controller.request_rotation(to_rotation)
    task.add_done_callback(lambda _: surface.close())

    frames = 0
    try:
        while True:
            frame = await surface.queue.get()
            if frame is None:
                break
            frames += 1
            yield _event("frame", {"type": "frame", "rotation": frame.rotation, "d": frame.d})
    finally:
        # Stops the transition when the client disconnects early.
        controller.cancel()

    state = controller.state
    yield _event("done", {"type": "done", "rotation": state.current_rotation, "frames": frames})
