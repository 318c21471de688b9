"""POST /api/plugin/message — plugin UI messages against the shape host."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from squircley.dependencies import get_host
from squircley.models.requests import PluginMessage
from squircley.models.responses import NotificationsResponse, PluginResponse
from squircley.plugin.host import InMemoryHost
from squircley.plugin.messages import handle_ui_message

router = APIRouter(prefix="/plugin")


@router.post("/message", response_model=PluginResponse)
async def plugin_message(msg: PluginMessage, host: InMemoryHost = Depends(get_host)) -> PluginResponse:
    return handle_ui_message(msg, host)


@router.get("/notifications", response_model=NotificationsResponse)
async def plugin_notifications(host: InMemoryHost = Depends(get_host)) -> NotificationsResponse:
    return NotificationsResponse(notifications=list(host.notifications))
