"""Plugin message boundary: UI messages in, host calls and notifications out."""

from __future__ import annotations

import logging
import math

from squircley.engine.constants import MAX_CURVATURE, MIN_CURVATURE
from squircley.models.requests import PluginMessage
from squircley.models.responses import PluginResponse
from squircley.plugin.host import SceneNode, ShapeHost
from squircley.svg.serializer import generate_squircle_svg

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Squircle created successfully!"
FAILURE_MESSAGE = "An error occurred. Please try again."


def _require_curvature(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Curvature value is required for create-squircle")
    if not math.isfinite(value) or not MIN_CURVATURE <= value <= MAX_CURVATURE:
        raise ValueError(f"Curvature out of range: {value}")
    return float(value)


def create_squircle(host: ShapeHost, curvature: float, rotation: float = 0.0) -> SceneNode:
    """Insert a squircle into the selected frame, or onto the page centred in view.

    Returns the node that ends up selected (the frame when inserting into one).
    """
    svg = generate_squircle_svg(curvature, rotation)
    container = host.selected_container()
    node = host.create_node_from_svg(svg)

    if container is not None:
        host.append(node, container)
        target = container
    else:
        if node.type == "FRAME":
            node.name = "Squircle"
        host.append(node)
        host.center_in_viewport(node)
        target = node

    host.select_and_focus(target)
    return target


def handle_ui_message(msg: PluginMessage, host: ShapeHost) -> PluginResponse:
    """Dispatch one UI message. Never raises: failures become a notification."""
    notified: list[str] = []

    def notify(message: str) -> None:
        notified.append(message)
        host.notify(message)

    try:
        if msg.type == "create-squircle":
            curvature = _require_curvature(msg.curvature)
            node = create_squircle(host, curvature)
            notify(SUCCESS_MESSAGE)
            return PluginResponse(ok=True, node_id=node.id, notifications=notified)

        if msg.type == "cancel":
            host.close()
            return PluginResponse(ok=True, closed=True)

        logger.warning("Unknown message type: %s", msg.type)
        return PluginResponse(ok=False)
    except Exception:
        logger.exception("Plugin error")
        notify(FAILURE_MESSAGE)
        return PluginResponse(ok=False, notifications=notified)
