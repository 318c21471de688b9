"""Tests for the superellipse path generator."""

from __future__ import annotations

import math

import pytest

from squircley.engine.constants import CENTER, ShapeConstants
from squircley.engine.superellipse import (
    Point,
    build_path,
    build_segments,
    curvature_to_exponent,
    exponent_to_curvature,
    format_number,
    point_on_superellipse,
    rotate,
)
from squircley.svg.validation import matches_path_grammar
from tests.conftest import AXIS

EXPONENTS = [0.5, 1.0, 2.0, 5.25, 10.0]

# cos(3pi/2) is ~-1.8e-16, not 0, and |1.8e-16|^(2/10) is ~7e-4,
# so the "zero" coordinate is only zero to ~0.1% of the axis at p = 10.
CARDINAL_REL_TOL = 1e-3


@pytest.mark.parametrize("p", EXPONENTS)
def test_cardinal_points(p):
    a, b = 150.0, 50.0
    tol = CARDINAL_REL_TOL * a
    assert point_on_superellipse(0, a, b, p) == pytest.approx((a, 0.0), abs=tol)
    assert point_on_superellipse(math.pi / 2, a, b, p) == pytest.approx((0.0, b), abs=tol)
    assert point_on_superellipse(math.pi, a, b, p) == pytest.approx((-a, 0.0), abs=tol)
    assert point_on_superellipse(3 * math.pi / 2, a, b, p) == pytest.approx((0.0, -b), abs=tol)


def test_ellipse_point_matches_circle():
    x, y = point_on_superellipse(math.pi / 3, AXIS, AXIS, 2)
    assert x == pytest.approx(50.0)
    assert y == pytest.approx(AXIS * math.sqrt(3) / 2)


def test_higher_exponent_pushes_diagonal_outward():
    round_pt = point_on_superellipse(math.pi / 4, AXIS, AXIS, 2)
    boxy_pt = point_on_superellipse(math.pi / 4, AXIS, AXIS, 10)
    pinched_pt = point_on_superellipse(math.pi / 4, AXIS, AXIS, 0.5)
    assert pinched_pt.x < round_pt.x < boxy_pt.x
    assert pinched_pt.y < round_pt.y < boxy_pt.y


def test_negative_quadrant_signs():
    x, y = point_on_superellipse(5 * math.pi / 4, AXIS, AXIS, 4)
    assert x < 0
    assert y < 0


def test_rotate_zero_is_identity():
    pt = Point(10.0, 20.0)
    assert rotate(pt, 0) is pt
    assert rotate(pt, 0.0) == (10.0, 20.0)


@pytest.mark.parametrize(
    "degrees, expected",
    [(90, (0.0, 10.0)), (180, (-10.0, 0.0)), (270, (0.0, -10.0))],
)
def test_rotate_quarter_turns(degrees, expected):
    assert rotate(Point(10.0, 0.0), degrees) == pytest.approx(expected, abs=1e-5)


def test_rotate_45_degrees():
    result = rotate(Point(10.0, 10.0), 45)
    assert result.x == pytest.approx(0.0, abs=1e-5)
    assert result.y == pytest.approx(math.hypot(10, 10), abs=1e-5)


def test_rotate_returns_new_point():
    pt = Point(3.0, 4.0)
    result = rotate(pt, 30)
    assert pt == (3.0, 4.0)
    assert isinstance(result, Point)
    assert math.hypot(*result) == pytest.approx(5.0)


def test_curvature_mapping_endpoints():
    assert curvature_to_exponent(0) == 0.5
    assert curvature_to_exponent(100) == 10.0
    assert curvature_to_exponent(50) == pytest.approx(5.25)


def test_curvature_mapping_strictly_increasing():
    values = [curvature_to_exponent(c) for c in range(101)]
    assert all(later > earlier for earlier, later in zip(values, values[1:]))


def test_exponent_to_curvature_inverts_mapping():
    assert exponent_to_curvature(curvature_to_exponent(75)) == pytest.approx(75)


@pytest.mark.parametrize("p", EXPONENTS)
@pytest.mark.parametrize("rotation", [0, 45, 90, 137.5, -30])
def test_path_grammar(p, rotation):
    d = build_path(120.0, 80.0, p, rotation)
    assert d.startswith("M ")
    assert d.endswith(" Z")
    assert d.count("M") == 1
    assert d.count(" C ") == 4
    assert matches_path_grammar(d)


def test_path_starts_at_right_key_point():
    d = build_path(AXIS, AXIS, 2, 0)
    assert d.startswith(f"M {format_number(AXIS + CENTER)} {format_number(CENTER)} C ")


def test_path_is_pure():
    assert build_path(100, 100, 3.7, 45) == build_path(100, 100, 3.7, 45)


def test_paths_are_distinct():
    round_d = build_path(100, 100, 2, 0)
    boxy_d = build_path(100, 100, 4, 0)
    wide_d = build_path(150, 50, 2, 0)
    assert round_d != boxy_d
    assert boxy_d != wide_d
    assert round_d != wide_d


def test_rotation_changes_path():
    assert build_path(100, 100, 4, 0) != build_path(100, 100, 4, 45)


def test_segments_form_closed_loop():
    segments = build_segments(130.0, 90.0, 3.0, 20.0)
    assert len(segments) == 4
    for seg, nxt in zip(segments, segments[1:] + segments[:1]):
        assert seg.end == nxt.start


def test_handles_are_tangent_on_circle():
    # On a circle the tangent at the rightmost point is vertical.
    first = build_segments(AXIS, AXIS, 2, 0)[0]
    assert first.cp1.x == pytest.approx(first.start.x)
    assert first.cp1.y > first.start.y
    # and horizontal at the top point.
    assert first.cp2.y == pytest.approx(first.end.y)


def test_handle_length_uses_control_factor():
    first = build_segments(AXIS, AXIS, 2, 0)[0]
    chord = 2 * AXIS * math.sin(math.pi / 16)
    assert first.cp1.y - first.start.y == pytest.approx(chord * 0.552)


def test_rotation_is_rigid():
    plain = build_segments(140.0, 70.0, 6.0, 0)
    turned = build_segments(140.0, 70.0, 6.0, 30)
    for seg_plain, seg_turned in zip(plain, turned):
        for pt_plain, pt_turned in zip(seg_plain, seg_turned):
            local = Point(pt_plain.x - CENTER, pt_plain.y - CENTER)
            expected = rotate(local, 30)
            assert pt_turned.x - CENTER == pytest.approx(expected.x, abs=1e-9)
            assert pt_turned.y - CENTER == pytest.approx(expected.y, abs=1e-9)


def test_custom_center():
    segments = build_segments(AXIS, AXIS, 2, 0, ShapeConstants(center=0.0))
    assert segments[0].start == (AXIS, 0.0)


def test_format_number():
    assert format_number(144.5) == "144.5"
    assert format_number(244.0) == "244"
    assert format_number(-0.0) == "0"
    assert format_number(1e-17) == "1e-17"
