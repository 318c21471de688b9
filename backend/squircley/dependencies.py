"""FastAPI dependency injection."""

from __future__ import annotations

from squircley.plugin.host import InMemoryHost

_host = InMemoryHost()


def get_host() -> InMemoryHost:
    return _host
