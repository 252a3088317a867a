"""Creation of shapes, including the default creator used by the image runner."""

import random
from functools import partial

from geometrize import mutation
from geometrize.shapes import (
    Circle,
    Ellipse,
    Line,
    Polyline,
    QuadraticBezier,
    Rectangle,
    RotatedEllipse,
    RotatedRectangle,
    Triangle,
)
from geometrize.shapetypes import ALL_SHAPES, ShapeTypes

_SHAPE_CLASSES = {
    ShapeTypes.POLYLINE: Polyline,
    ShapeTypes.QUADRATIC_BEZIER: QuadraticBezier,
    ShapeTypes.CIRCLE: Circle,
    ShapeTypes.ELLIPSE: Ellipse,
    ShapeTypes.ROTATED_ELLIPSE: RotatedEllipse,
    ShapeTypes.ROTATED_RECTANGLE: RotatedRectangle,
    ShapeTypes.TRIANGLE: Triangle,
    ShapeTypes.RECTANGLE: Rectangle,
    ShapeTypes.LINE: Line,
}


def create(shape_type):
    """Create a new shape with default geometry of a single given type."""
    try:
        shape_class = _SHAPE_CLASSES[shape_type]
    except (KeyError, TypeError):
        raise ValueError(f"bad shape type specified: {shape_type!r}") from None
    return shape_class()


def random_shape():
    """Create a shape of a type chosen at random from all types."""
    return create(random.choice(ALL_SHAPES))


def random_shape_of(types):
    """Create a shape of a type chosen at random from the flags in ``types``.

    If ``types`` selects no shape type, any type may be chosen.
    """
    candidates = [t for t in ALL_SHAPES if (t & types) == t]
    if not candidates:
        return random_shape()
    return create(random.choice(candidates))


def create_default_shape_creator(types, x_min, y_min, x_max, y_max):
    """Return a function making random shapes of ``types`` with bound hooks.

    Each shape's ``setup`` and ``mutate`` hooks use the default
    implementations confined to the given bounds.
    """
    bounds = {"x_min": x_min, "y_min": y_min, "x_max": x_max, "y_max": y_max}

    def creator():
        shape = random_shape_of(types)
        shape.setup = partial(mutation.setup, **bounds)
        shape.mutate = partial(mutation.mutate, **bounds)
        return shape

    return creator