"""Geometric transforms (translation, scaling, rotation) applied to shapes in place."""

import math
from functools import singledispatch

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


def _wrap_max(value, maximum):
    return math.fmod(maximum + math.fmod(value, maximum), maximum)


def _wrap_min_max(value, minimum, maximum):
    return minimum + _wrap_max(value - minimum, maximum - minimum)


def _scale_about(value, mid, factor):
    return (value - mid) * factor + mid


def _rotate_point(x, y, cos_angle, sin_angle):
    return x * cos_angle - y * sin_angle, x * sin_angle + y * cos_angle


# ---------------------------------------------------------------------------
# translate
# ---------------------------------------------------------------------------


@singledispatch
def translate(shape, x, y):
    """Move a shape by (x, y)."""
    raise TypeError(f"cannot translate shape of type {type(shape).__name__}")


@translate.register(Circle)
@translate.register(Ellipse)
@translate.register(RotatedEllipse)
def _(shape, x, y):
    shape.x += x
    shape.y += y


@translate.register(Line)
@translate.register(Rectangle)
@translate.register(RotatedRectangle)
def _(shape, x, y):
    shape.x1 += x
    shape.y1 += y
    shape.x2 += x
    shape.y2 += y


@translate.register
def _(shape: Polyline, x, y):
    shape.points = [(px + x, py + y) for px, py in shape.points]


@translate.register
def _(shape: QuadraticBezier, x, y):
    shape.cx += x
    shape.cy += y
    shape.x1 += x
    shape.y1 += y
    shape.x2 += x
    shape.y2 += y


@translate.register
def _(shape: Triangle, x, y):
    shape.x1 += x
    shape.y1 += y
    shape.x2 += x
    shape.y2 += y
    shape.x3 += x
    shape.y3 += y


# ---------------------------------------------------------------------------
# scale
# ---------------------------------------------------------------------------


@singledispatch
def scale(shape, scale_factor):
    """Scale a shape by a factor about its own centre."""
    raise TypeError(f"cannot scale shape of type {type(shape).__name__}")


@scale.register
def _(shape: Circle, scale_factor):
    shape.r *= scale_factor


@scale.register(Ellipse)
@scale.register(RotatedEllipse)
def _(shape, scale_factor):
    shape.rx *= scale_factor
    shape.ry *= scale_factor


@scale.register(Line)
@scale.register(Rectangle)
@scale.register(RotatedRectangle)
def _(shape, scale_factor):
    x_mid = (shape.x1 + shape.x2) / 2
    y_mid = (shape.y1 + shape.y2) / 2
    shape.x1 = _scale_about(shape.x1, x_mid, scale_factor)
    shape.y1 = _scale_about(shape.y1, y_mid, scale_factor)
    shape.x2 = _scale_about(shape.x2, x_mid, scale_factor)
    shape.y2 = _scale_about(shape.y2, y_mid, scale_factor)


@scale.register
def _(shape: Polyline, scale_factor):
    # Points are taken in consecutive pairs; a trailing unpaired point is dropped.
    # Both output points of a pair keep the first point's x coordinate.
    scaled = []
    pairs = zip(shape.points[0::2], shape.points[1::2])
    for (x1, y1), (x2, y2) in pairs:
        x_mid = (x1 + x2) / 2
        y_mid = (y1 + y2) / 2
        new_x = _scale_about(x1, x_mid, scale_factor)
        scaled.append((new_x, _scale_about(y1, y_mid, scale_factor)))
        scaled.append((new_x, _scale_about(y2, y_mid, scale_factor)))
    shape.points = scaled


@scale.register
def _(shape: QuadraticBezier, scale_factor):
    raise TypeError("scaling a quadratic bezier is not supported")


@scale.register
def _(shape: Triangle, scale_factor):
    x_mid = (shape.x1 + shape.x2 + shape.x3) / 3
    y_mid = (shape.y1 + shape.y2 + shape.y3) / 3
    shape.x1 = _scale_about(shape.x1, x_mid, scale_factor)
    shape.y1 = _scale_about(shape.y1, y_mid, scale_factor)
    shape.x2 = _scale_about(shape.x2, x_mid, scale_factor)
    shape.y2 = _scale_about(shape.y2, y_mid, scale_factor)
    shape.x3 = _scale_about(shape.x3, x_mid, scale_factor)
    shape.y3 = _scale_about(shape.y3, y_mid, scale_factor)


# ---------------------------------------------------------------------------
# rotate
# ---------------------------------------------------------------------------


@singledispatch
def rotate(shape, angle):
    """Rotate a shape through an angle; shapes without rotation are left alone.

    Lines and triangles rotate about their centre by ``angle`` radians;
    rotated ellipses and rectangles add ``angle`` degrees, wrapped to [0, 360).
    """
    if not isinstance(shape, Shape):
        raise TypeError(f"cannot rotate object of type {type(shape).__name__}")


@rotate.register
def _(shape: Line, angle):
    x_mid = (shape.x1 + shape.x2) / 2
    y_mid = (shape.y1 + shape.y2) / 2
    translate(shape, -x_mid, -y_mid)
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    shape.x1, shape.y1 = _rotate_point(shape.x1, shape.y1, cos_angle, sin_angle)
    shape.x2, shape.y2 = _rotate_point(shape.x2, shape.y2, cos_angle, sin_angle)
    translate(shape, x_mid, y_mid)


@rotate.register(RotatedEllipse)
@rotate.register(RotatedRectangle)
def _(shape, angle):
    shape.angle = _wrap_min_max(shape.angle + angle, 0, 360)


@rotate.register
def _(shape: Triangle, angle):
    x_mid = (shape.x1 + shape.x2 + shape.x3) / 3
    y_mid = (shape.y1 + shape.y2 + shape.y3) / 3
    translate(shape, -x_mid, -y_mid)
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    shape.x1, shape.y1 = _rotate_point(shape.x1, shape.y1, cos_angle, sin_angle)
    shape.x2, shape.y2 = _rotate_point(shape.x2, shape.y2, cos_angle, sin_angle)
    shape.x3, shape.y3 = _rotate_point(shape.x3, shape.y3, cos_angle, sin_angle)
    translate(shape, x_mid, y_mid)