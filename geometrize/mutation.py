"""Default random initialisation and mutation of each kind of shape.

Shapes are modified in place. Randomness comes from the :mod:`random`
module, so seeding it with :func:`random.seed` makes runs reproducible.
"""

import random
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


def _random_range(lower, upper):
    """Return a random integer in the inclusive range [lower, upper]."""
    return random.randint(lower, upper)


def _clamp(value, lower, upper):
    return max(lower, min(value, upper))


def _nudge(value, spread, lower, upper):
    """Move an integer-truncated value by up to ``spread`` and clamp it."""
    return float(_clamp(int(value) + _random_range(-spread, spread), lower, upper))


# ---------------------------------------------------------------------------
# setup
# ---------------------------------------------------------------------------


@singledispatch
def setup(shape, x_min, y_min, x_max, y_max):
    """Give a shape random initial geometry within the given bounds."""
    raise TypeError(f"cannot set up shape of type {type(shape).__name__}")


@setup.register
def _(shape: Circle, x_min, y_min, x_max, y_max):
    shape.x = float(_random_range(x_min, x_max - 1))
    shape.y = float(_random_range(y_min, y_max - 1))
    shape.r = float(_random_range(1, 32))


@setup.register
def _(shape: Ellipse, x_min, y_min, x_max, y_max):
    shape.x = float(_random_range(x_min, x_max - 1))
    shape.y = float(_random_range(y_min, y_max - 1))
    shape.rx = float(_random_range(1, 32))
    shape.ry = float(_random_range(1, 32))


@setup.register
def _(shape: Line, x_min, y_min, x_max, y_max):
    start_x = _random_range(x_min, x_max)
    start_y = _random_range(y_min, y_max - 1)
    shape.x1 = float(_clamp(start_x + _random_range(-32, 32), x_min, x_max - 1))
    shape.y1 = float(_clamp(start_y + _random_range(-32, 32), y_min, y_max - 1))
    shape.x2 = float(_clamp(start_x + _random_range(-32, 32), x_min, x_max - 1))
    shape.y2 = float(_clamp(start_y + _random_range(-32, 32), y_min, y_max - 1))


@setup.register
def _(shape: Polyline, x_min, y_min, x_max, y_max):
    start_x = _random_range(x_min, x_max)
    start_y = _random_range(y_min, y_max - 1)
    for _index in range(4):
        px = _clamp(start_x + _random_range(-32, 32), x_min, x_max - 1)
        py = _clamp(start_y + _random_range(-32, 32), y_min, y_max - 1)
        shape.points.append((float(px), float(py)))


@setup.register
def _(shape: QuadraticBezier, x_min, y_min, x_max, y_max):
    shape.x1 = float(_random_range(x_min, x_max - 1))
    shape.y1 = float(_random_range(y_min, y_max - 1))
    shape.cx = float(_random_range(x_min, x_max - 1))
    shape.cy = float(_random_range(y_min, y_max - 1))
    shape.x2 = float(_random_range(x_min, x_max - 1))
    shape.y2 = float(_random_range(y_min, y_max - 1))


@setup.register
def _(shape: Rectangle, x_min, y_min, x_max, y_max):
    shape.x1 = float(_random_range(x_min, x_max - 1))
    shape.y1 = float(_random_range(y_min, y_max - 1))
    shape.x2 = float(_clamp(int(shape.x1) + _random_range(1, 32), x_min, x_max - 1))
    shape.y2 = float(_clamp(int(shape.y1) + _random_range(1, 32), y_min, y_max - 1))


@setup.register
def _(shape: RotatedEllipse, x_min, y_min, x_max, y_max):
    shape.x = float(_random_range(x_min, x_max - 1))
    shape.y = float(_random_range(y_min, y_max - 1))
    shape.rx = float(_random_range(1, 32))
    shape.ry = float(_random_range(1, 32))
    shape.angle = float(_random_range(0, 360))


@setup.register
def _(shape: RotatedRectangle, x_min, y_min, x_max, y_max):
    shape.x1 = float(_random_range(x_min, x_max - 1))
    shape.y1 = float(_random_range(y_min, y_max - 1))
    shape.x2 = float(_clamp(int(shape.x1) + _random_range(1, 32), x_min, x_max))
    shape.y2 = float(_clamp(int(shape.y1) + _random_range(1, 32), y_min, y_max))
    shape.angle = float(_random_range(0, 360))


@setup.register
def _(shape: Triangle, x_min, y_min, x_max, y_max):
    shape.x1 = float(_random_range(x_min, x_max - 1))
    shape.y1 = float(_random_range(y_min, y_max - 1))
    shape.x2 = shape.x1 + _random_range(-32, 32)
    shape.y2 = shape.y1 + _random_range(-32, 32)
    shape.x3 = shape.x1 + _random_range(-32, 32)
    shape.y3 = shape.y1 + _random_range(-32, 32)


# ---------------------------------------------------------------------------
# mutate
# ---------------------------------------------------------------------------


@singledispatch
def mutate(shape, x_min, y_min, x_max, y_max):
    """Randomly perturb one aspect of a shape, keeping it within bounds."""
    raise TypeError(f"cannot mutate shape of type {type(shape).__name__}")


@mutate.register
def _(shape: Circle, x_min, y_min, x_max, y_max):
    if _random_range(0, 1) == 0:
        shape.x = _nudge(shape.x, 16, x_min, x_max - 1)
        shape.y = _nudge(shape.y, 16, y_min, y_max - 1)
    else:
        shape.r = _nudge(shape.r, 16, 1, x_max - 1)


@mutate.register
def _(shape: Ellipse, x_min, y_min, x_max, y_max):
    choice = _random_range(0, 2)
    if choice == 0:
        shape.x = _nudge(shape.x, 16, x_min, x_max - 1)
        shape.y = _nudge(shape.y, 16, y_min, y_max - 1)
    elif choice == 1:
        shape.rx = _nudge(shape.rx, 16, 1, x_max - 1)
    else:
        shape.ry = _nudge(shape.ry, 16, 1, y_max - 1)


@mutate.register
def _(shape: Line, x_min, y_min, x_max, y_max):
    if _random_range(0, 1) == 0:
        shape.x1 = _nudge(shape.x1, 16, x_min, x_max - 1)
        shape.y1 = _nudge(shape.y1, 16, y_min, y_max - 1)
    else:
        shape.x2 = _nudge(shape.x2, 16, x_min, x_max - 1)
        shape.y2 = _nudge(shape.y2, 16, y_min, y_max - 1)


@mutate.register
def _(shape: Polyline, x_min, y_min, x_max, y_max):
    if not shape.points:
        raise ValueError("cannot mutate a polyline with no points")
    index = _random_range(0, len(shape.points) - 1)
    px, py = shape.points[index]
    shape.points[index] = (
        _nudge(px, 64, x_min, x_max - 1),
        _nudge(py, 64, y_min, y_max - 1),
    )


@mutate.register
def _(shape: QuadraticBezier, x_min, y_min, x_max, y_max):
    choice = _random_range(0, 2)
    if choice == 0:
        shape.cx = _nudge(shape.cx, 8, x_min, x_max - 1)
        shape.cy = _nudge(shape.cy, 8, y_min, y_max - 1)
    elif choice == 1:
        shape.x1 = _nudge(shape.x1, 8, x_min + 1, x_max - 1)
        shape.y1 = _nudge(shape.y1, 8, y_min + 1, y_max - 1)
    else:
        shape.x2 = _nudge(shape.x2, 8, x_min + 1, x_max - 1)
        shape.y2 = _nudge(shape.y2, 8, y_min + 1, y_max - 1)


@mutate.register
def _(shape: Rectangle, x_min, y_min, x_max, y_max):
    if _random_range(0, 1) == 0:
        shape.x1 = _nudge(shape.x1, 16, x_min, x_max - 1)
        shape.y1 = _nudge(shape.y1, 16, y_min, y_max - 1)
    else:
        shape.x2 = _nudge(shape.x2, 16, x_min, x_max - 1)
        shape.y2 = _nudge(shape.y2, 16, y_min, y_max - 1)


@mutate.register
def _(shape: RotatedEllipse, x_min, y_min, x_max, y_max):
    choice = _random_range(0, 3)
    if choice == 0:
        shape.x = _nudge(shape.x, 16, x_min, x_max - 1)
        shape.y = _nudge(shape.y, 16, y_min, y_max - 1)
    elif choice == 1:
        shape.rx = _nudge(shape.rx, 16, 1, x_max - 1)
    elif choice == 2:
        shape.ry = _nudge(shape.ry, 16, 1, y_max - 1)
    else:
        shape.angle = _nudge(shape.angle, 16, 0, 360)


@mutate.register
def _(shape: RotatedRectangle, x_min, y_min, x_max, y_max):
    choice = _random_range(0, 2)
    if choice == 0:
        shape.x1 = _nudge(shape.x1, 16, x_min, x_max)
        shape.y1 = _nudge(shape.y1, 16, y_min, y_max)
    elif choice == 1:
        shape.x2 = _nudge(shape.x2, 16, x_min, x_max)
        shape.y2 = _nudge(shape.y2, 16, y_min, y_max)
    else:
        shape.angle = _nudge(shape.angle, 4, 0, 360)


@mutate.register
def _(shape: Triangle, x_min, y_min, x_max, y_max):
    choice = _random_range(0, 2)
    if choice == 0:
        shape.x1 = _nudge(shape.x1, 32, x_min, x_max)
        shape.y1 = _nudge(shape.y1, 32, y_min, y_max)
    elif choice == 1:
        shape.x2 = _nudge(shape.x2, 32, x_min, x_max)
        shape.y2 = _nudge(shape.y2, 32, y_min, y_max)
    else:
        shape.x3 = _nudge(shape.x3, 32, x_min, x_max)
        shape.y3 = _nudge(shape.y3, 32, y_min, y_max)


__all__ = ["setup", "mutate", "Shape"]