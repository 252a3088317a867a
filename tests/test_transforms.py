import math

import pytest

from geometrize.shapes import (
    Circle,
    Ellipse,
    Line,
    Polyline,
    QuadraticBezier,
    Rectangle,
    RotatedEllipse,
    RotatedRectangle,
    Shape,
    Triangle,
)
from geometrize.transforms import rotate, scale, translate


def _all_shapes():
    return [
        Circle(1.0, 2.0, 3.0),
        Ellipse(1.0, 2.0, 3.0, 4.0),
        Line(1.0, 2.0, 5.0, 7.0),
        Polyline([(1.0, 2.0), (3.0, 4.0), (6.0, 1.0)]),
        QuadraticBezier(1.0, 2.0, 3.0, 4.0, 5.0, 6.0),
        Rectangle(1.0, 2.0, 8.0, 9.0),
        RotatedEllipse(1.0, 2.0, 3.0, 4.0, 30.0),
        RotatedRectangle(1.0, 2.0, 8.0, 9.0, 45.0),
        Triangle(0.0, 0.0, 6.0, 0.0, 0.0, 9.0),
    ]


@pytest.mark.parametrize("shape", _all_shapes(), ids=lambda s: type(s).__name__)
def test_translate_round_trip(shape):
    original = shape.clone()
    translate(shape, 5.0, -3.0)
    assert shape != original
    translate(shape, -5.0, 3.0)
    assert shape == original


def test_translate_circle_moves_centre_only():
    circle = Circle(1.0, 2.0, 3.0)
    translate(circle, 4.0, 5.0)
    assert (circle.x, circle.y, circle.r) == (1.0 + 4.0, 2.0 + 5.0, 3.0)


def test_translate_polyline_moves_every_point():
    points = [(1.0, 2.0), (3.0, 4.0)]
    polyline = Polyline(points)
    translate(polyline, 10.0, 20.0)
    assert polyline.points == [(x + 10.0, y + 20.0) for x, y in points]


def test_translate_base_shape_raises():
    with pytest.raises(TypeError):
        translate(Shape(), 1.0, 1.0)


@pytest.mark.parametrize(
    "shape",
    [
        Circle(1.0, 2.0, 3.0),
        Ellipse(1.0, 2.0, 3.0, 4.0),
        Line(1.0, 2.0, 5.0, 7.0),
        Rectangle(1.0, 2.0, 8.0, 9.0),
        RotatedEllipse(1.0, 2.0, 3.0, 4.0, 30.0),
        RotatedRectangle(1.0, 2.0, 8.0, 9.0, 45.0),
        Triangle(0.0, 0.0, 6.0, 0.0, 0.0, 9.0),
    ],
    ids=lambda s: type(s).__name__,
)
def test_scale_round_trip(shape):
    original = shape.clone()
    scale(shape, 4.0)
    assert shape != original
    scale(shape, 0.25)
    for name in ("x", "y", "r", "rx", "ry", "x1", "y1", "x2", "y2", "x3", "y3", "angle"):
        if hasattr(original, name):
            assert getattr(shape, name) == pytest.approx(getattr(original, name))


def test_scale_rectangle_keeps_midpoint():
    rect = Rectangle(2.0, 4.0, 10.0, 20.0)
    scale(rect, 3.0)
    assert (rect.x1 + rect.x2) / 2 == pytest.approx((2.0 + 10.0) / 2)
    assert (rect.y1 + rect.y2) / 2 == pytest.approx((4.0 + 20.0) / 2)
    assert rect.x2 - rect.x1 == pytest.approx(3.0 * (10.0 - 2.0))


def test_scale_triangle_keeps_centroid():
    tri = Triangle(0.0, 0.0, 6.0, 0.0, 0.0, 9.0)
    scale(tri, 2.5)
    assert (tri.x1 + tri.x2 + tri.x3) / 3 == pytest.approx((0.0 + 6.0 + 0.0) / 3)
    assert (tri.y1 + tri.y2 + tri.y3) / 3 == pytest.approx((0.0 + 0.0 + 9.0) / 3)


def test_scale_circle_multiplies_radius():
    circle = Circle(1.0, 2.0, 3.0)
    scale(circle, 2.0)
    assert circle.r == 3.0 * 2.0
    assert (circle.x, circle.y) == (1.0, 2.0)


def test_scale_polyline_drops_unpaired_point():
    polyline = Polyline([(1.0, 2.0), (3.0, 4.0), (6.0, 1.0)])
    scale(polyline, 1.0)
    assert len(polyline.points) == 2


def test_scale_polyline_pair_shares_first_x():
    polyline = Polyline([(0.0, 0.0), (4.0, 8.0)])
    scale(polyline, 1.0)
    assert polyline.points == [(0.0, 0.0), (0.0, 8.0)]


def test_scale_polyline_single_point_becomes_empty():
    polyline = Polyline([(1.0, 1.0)])
    scale(polyline, 2.0)
    assert polyline.points == []


def test_scale_quadratic_bezier_raises():
    with pytest.raises(TypeError):
        scale(QuadraticBezier(1.0, 2.0, 3.0, 4.0, 5.0, 6.0), 2.0)


@pytest.mark.parametrize(
    "shape",
    [Line(1.0, 2.0, 5.0, 7.0), Triangle(0.0, 0.0, 6.0, 0.0, 0.0, 9.0)],
    ids=lambda s: type(s).__name__,
)
def test_rotate_round_trip(shape):
    original = shape.clone()
    rotate(shape, 0.7)
    assert shape != original
    rotate(shape, -0.7)
    for name in ("x1", "y1", "x2", "y2", "x3", "y3"):
        if hasattr(original, name):
            assert getattr(shape, name) == pytest.approx(getattr(original, name))


def test_rotate_line_by_half_turn_swaps_ends():
    line = Line(1.0, 2.0, 5.0, 7.0)
    rotate(line, math.pi)
    assert line.x1 == pytest.approx(5.0)
    assert line.y1 == pytest.approx(7.0)
    assert line.x2 == pytest.approx(1.0)
    assert line.y2 == pytest.approx(2.0)


def test_rotate_line_preserves_length():
    line = Line(1.0, 2.0, 5.0, 7.0)
    before = math.hypot(line.x2 - line.x1, line.y2 - line.y1)
    rotate(line, 1.1)
    assert math.hypot(line.x2 - line.x1, line.y2 - line.y1) == pytest.approx(before)


@pytest.mark.parametrize("cls", [RotatedEllipse, RotatedRectangle])
def test_rotate_angle_wraps(cls):
    shape = cls(angle=350.0)
    rotate(shape, 20.0)
    assert shape.angle == pytest.approx(10.0)


@pytest.mark.parametrize("cls", [RotatedEllipse, RotatedRectangle])
def test_rotate_full_turn_keeps_angle(cls):
    shape = cls(angle=45.0)
    rotate(shape, 360.0)
    assert shape.angle == pytest.approx(45.0)


def test_rotate_negative_angle_stays_in_range():
    shape = RotatedEllipse(angle=5.0)
    rotate(shape, -30.0)
    assert 0.0 <= shape.angle < 360.0
    rotate(shape, 30.0)
    assert shape.angle == pytest.approx(5.0)


@pytest.mark.parametrize(
    "shape",
    [
        Circle(1.0, 2.0, 3.0),
        Ellipse(1.0, 2.0, 3.0, 4.0),
        Rectangle(1.0, 2.0, 8.0, 9.0),
        Polyline([(1.0, 2.0), (3.0, 4.0)]),
        QuadraticBezier(1.0, 2.0, 3.0, 4.0, 5.0, 6.0),
    ],
    ids=lambda s: type(s).__name__,
)
def test_rotate_unsupported_shapes_unchanged(shape):
    original = shape.clone()
    rotate(shape, 1.0)
    assert shape == original


def test_rotate_non_shape_raises():
    with pytest.raises(TypeError):
        rotate("circle", 1.0)