"""Host shape-insertion boundary.

ShapeHost is what the plugin side needs from a design tool: import an SVG as a
native node, place it, select it and show a toast. InMemoryHost implements it
for the HTTP service and for tests.
"""

from __future__ import annotations

import itertools
import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)

_SVG_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_WIDTH_RE = re.compile(r'\swidth\s*=\s*"([^"]*?)"')
_HEIGHT_RE = re.compile(r'\sheight\s*=\s*"([^"]*?)"')

MAX_NOTIFICATIONS = 100


@dataclass
class SceneNode:
    id: str
    type: str
    name: str = ""
    svg: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    children: list[SceneNode] = field(default_factory=list)


class ShapeHost(Protocol):
    def selected_container(self) -> SceneNode | None: ...

    def create_node_from_svg(self, svg: str) -> SceneNode: ...

    def append(self, node: SceneNode, container: SceneNode | None = None) -> None: ...

    def center_in_viewport(self, node: SceneNode) -> None: ...

    def select_and_focus(self, node: SceneNode) -> None: ...

    def notify(self, message: str) -> None: ...

    def close(self) -> None: ...


def _dimension(pattern: re.Pattern[str], tag: str) -> float:
    match = pattern.search(tag)
    if not match:
        return 0.0
    try:
        return float(match.group(1).replace("px", ""))
    except ValueError:
        return 0.0


class InMemoryHost:
    """Design document kept in memory: a page, a selection, a viewport and toasts.

    A demo store for the HTTP service and tests. Nodes live as long as the
    process; only the newest `max_notifications` toasts are kept.
    """

    def __init__(
        self,
        viewport_center: tuple[float, float] = (0.0, 0.0),
        max_notifications: int = MAX_NOTIFICATIONS,
    ) -> None:
        self.page: list[SceneNode] = []
        self.selection: list[SceneNode] = []
        self.viewport_center = viewport_center
        self.focused: SceneNode | None = None
        self.notifications: list[str] = []
        self.max_notifications = max_notifications
        self.closed = False
        self._ids = itertools.count(1)

    def new_frame(self, name: str = "Frame", width: float = 400.0, height: float = 400.0) -> SceneNode:
        """Add an empty frame to the page (what a user would draw before selecting it)."""
        frame = SceneNode(id=self._next_id(), type="FRAME", name=name, width=width, height=height)
        self.page.append(frame)
        return frame

    def selected_container(self) -> SceneNode | None:
        return next((node for node in self.selection if node.type == "FRAME"), None)

    def create_node_from_svg(self, svg: str) -> SceneNode:
        tag = _SVG_TAG_RE.search(svg)
        if tag is None:
            raise ValueError("No <svg> element in markup")
        node = SceneNode(
            id=self._next_id(),
            type="FRAME",
            name="svg",
            svg=svg,
            width=_dimension(_WIDTH_RE, tag.group(0)),
            height=_dimension(_HEIGHT_RE, tag.group(0)),
        )
        logger.debug("Imported SVG as node %s (%gx%g)", node.id, node.width, node.height)
        return node

    def append(self, node: SceneNode, container: SceneNode | None = None) -> None:
        if container is None:
            self.page.append(node)
        else:
            container.children.append(node)

    def center_in_viewport(self, node: SceneNode) -> None:
        cx, cy = self.viewport_center
        node.x = cx - node.width / 2
        node.y = cy - node.height / 2

    def select_and_focus(self, node: SceneNode) -> None:
        self.selection = [node]
        self.focused = node

    def notify(self, message: str) -> None:
        logger.info("Notify: %s", message)
        self.notifications.append(message)
        del self.notifications[: -self.max_notifications]

    def close(self) -> None:
        self.closed = True

    def _next_id(self) -> str:
        return f"N{next(self._ids)}"
