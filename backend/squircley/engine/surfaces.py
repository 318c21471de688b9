"""Rendering surfaces: where the controller publishes path data.

A surface stands in for a visible <path> element: set_path writes its `d`
attribute, set_fill / set_stroke update paint independently of the geometry.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable, Protocol


class RenderingSurface(Protocol):
    def set_path(self, d: str) -> None: ...

    def set_fill(self, color: str) -> None: ...

    def set_stroke(self, color: str, width: float) -> None: ...


@dataclass
class RecordingSurface:
    """In-memory surface. Keeps current attributes and every published path."""

    d: str = ""
    fill: str = ""
    stroke: str = ""
    stroke_width: float = 0.0
    history: list[str] = field(default_factory=list)

    def set_path(self, d: str) -> None:
        self.d = d
        self.history.append(d)

    # Preview frames carry geometry only; paint is fixed on the client.
    def set_fill(self, color: str) -> None:
        pass

    def set_stroke(self, color: str, width: float) -> None:
        pass


@dataclass
class Frame:
    rotation: float
    d: str


class QueueSurface:
    """Pushes each published path onto an asyncio.Queue for streaming consumers.

    The controller only hands over path data, so the surface reads the rotation
    being displayed through `rotation_of` at publish time.
    """

    def __init__(self, rotation_of: Callable[[], float] | None = None) -> None:
        self.queue: asyncio.Queue[Frame | None] = asyncio.Queue()
        self._rotation_of = rotation_of

    def bind(self, rotation_of: Callable[[], float]) -> None:
        self._rotation_of = rotation_of

    def set_path(self, d: str) -> None:
        rotation = self._rotation_of() if self._rotation_of is not None else 0.0
        self.queue.put_nowait(Frame(rotation=rotation, d=d))

    # Frames carry geometry only; preview clients paint with their own colours.
    def set_fill(self, color: str) -> None:
        pass

    def set_stroke(self, color: str, width: float) -> None:
        pass

    def close(self) -> None:
        """Signal consumers that no more frames follow."""
        self.queue.put_nowait(None)
