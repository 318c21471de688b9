"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from squircley.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.frame_rate > 0
    assert settings.allowed_rotations == [0, 45, 90, 135, 180, 225, 270, 315]


@pytest.mark.parametrize("frame_rate", [0, -30])
def test_frame_rate_must_be_positive(frame_rate):
    with pytest.raises(ValidationError):
        Settings(frame_rate=frame_rate)
