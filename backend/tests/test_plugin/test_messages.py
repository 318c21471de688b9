"""Tests for the plugin message boundary against the in-memory host."""

from __future__ import annotations

import logging

import pytest

from squircley.models.requests import PluginMessage
from squircley.plugin.host import InMemoryHost
from squircley.plugin.messages import FAILURE_MESSAGE, SUCCESS_MESSAGE, handle_ui_message
from squircley.svg.serializer import generate_squircle_svg


class _BrokenHost(InMemoryHost):
    def create_node_from_svg(self, svg: str):
        raise RuntimeError("host refused the import")


def test_create_on_page_centres_in_viewport(host):
    response = handle_ui_message(PluginMessage(type="create-squircle", curvature=75), host)

    assert response.ok
    assert response.notifications == [SUCCESS_MESSAGE]
    assert host.notifications == [SUCCESS_MESSAGE]

    assert len(host.page) == 1
    node = host.page[0]
    assert node.id == response.node_id
    assert node.name == "Squircle"
    assert node.svg == generate_squircle_svg(75)
    assert (node.width, node.height) == (289.0, 289.0)
    assert (node.x, node.y) == (500.0 - 144.5, 300.0 - 144.5)
    assert host.selection == [node]
    assert host.focused is node


def test_create_inside_selected_frame(host):
    frame = host.new_frame("Card")
    host.selection = [frame]

    response = handle_ui_message(PluginMessage(type="create-squircle", curvature=20), host)

    assert response.ok
    assert response.node_id == frame.id
    assert host.page == [frame]
    assert len(frame.children) == 1
    assert frame.children[0].name == "svg"
    assert host.selection == [frame]


@pytest.mark.parametrize("curvature", [None, "75", True, float("nan"), 150, -1])
def test_bad_curvature_notifies_failure(host, curvature):
    response = handle_ui_message(PluginMessage(type="create-squircle", curvature=curvature), host)

    assert not response.ok
    assert response.notifications == [FAILURE_MESSAGE]
    assert host.notifications == [FAILURE_MESSAGE]
    assert host.page == []


def test_host_error_is_logged_and_notified(caplog):
    host = _BrokenHost()
    with caplog.at_level(logging.ERROR, logger="squircley.plugin.messages"):
        response = handle_ui_message(PluginMessage(type="create-squircle", curvature=50), host)

    assert not response.ok
    assert host.notifications == [FAILURE_MESSAGE]
    assert "Plugin error" in caplog.text
    assert "host refused the import" in caplog.text


def test_cancel_closes_plugin(host):
    response = handle_ui_message(PluginMessage(type="cancel"), host)
    assert response.ok
    assert response.closed
    assert host.closed
    assert host.notifications == []


def test_unknown_message_is_ignored(host, caplog):
    with caplog.at_level(logging.WARNING, logger="squircley.plugin.messages"):
        response = handle_ui_message(PluginMessage(type="resize"), host)
    assert not response.ok
    assert host.notifications == []
    assert "Unknown message type" in caplog.text


def test_host_rejects_non_svg(host):
    with pytest.raises(ValueError):
        host.create_node_from_svg("<div/>")


def test_host_keeps_only_recent_notifications():
    host = InMemoryHost(max_notifications=2)
    for curvature in (10, 20, 30):
        handle_ui_message(PluginMessage(type="create-squircle", curvature=curvature), host)
    handle_ui_message(PluginMessage(type="create-squircle"), host)
    assert host.notifications == [SUCCESS_MESSAGE, FAILURE_MESSAGE]
    assert len(host.page) == 3
