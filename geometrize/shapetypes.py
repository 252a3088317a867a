"""Shape type flags and their canonical names."""

import enum


class ShapeTypes(enum.IntFlag):
    """Kinds of primitive shape; members can be combined with ``|``."""

    RECTANGLE = 1
    ROTATED_RECTANGLE = 2
    TRIANGLE = 4
    ELLIPSE = 8
    ROTATED_ELLIPSE = 16
    CIRCLE = 32
    LINE = 64
    QUADRATIC_BEZIER = 128
    POLYLINE = 256


SHAPE_COUNT = 9

ALL_SHAPES: tuple[ShapeTypes, ...] = (
    ShapeTypes.RECTANGLE,
    ShapeTypes.ROTATED_RECTANGLE,
    ShapeTypes.TRIANGLE,
    ShapeTypes.ELLIPSE,
    ShapeTypes.ROTATED_ELLIPSE,
    ShapeTypes.CIRCLE,
    ShapeTypes.LINE,
    ShapeTypes.QUADRATIC_BEZIER,
    ShapeTypes.POLYLINE,
)

SHAPE_TYPE_NAMES: tuple[tuple[ShapeTypes, str], ...] = (
    (ShapeTypes.RECTANGLE, "rectangle"),
    (ShapeTypes.ROTATED_RECTANGLE, "rotated_rectangle"),
    (ShapeTypes.TRIANGLE, "triangle"),
    (ShapeTypes.ELLIPSE, "ellipse"),
    (ShapeTypes.ROTATED_ELLIPSE, "rotated_ellipse"),
    (ShapeTypes.CIRCLE, "circle"),
    (ShapeTypes.LINE, "line"),
    (ShapeTypes.QUADRATIC_BEZIER, "quadratic_bezier"),
    (ShapeTypes.POLYLINE, "polyline"),
)

_NAME_BY_TYPE = dict(SHAPE_TYPE_NAMES)
_TYPE_BY_NAME = {name: shape_type for shape_type, name in SHAPE_TYPE_NAMES}


def shape_type_name(shape_type):
    """Return the lower-case name of a single shape type."""
    try:
        return _NAME_BY_TYPE[shape_type]
    except (KeyError, TypeError):
        raise ValueError(f"not a single shape type: {shape_type!r}") from None


def shape_type_from_name(name):
    """Return the shape type with the given lower-case name."""
    try:
        return _TYPE_BY_NAME[name]
    except (KeyError, TypeError):
        raise ValueError(f"unknown shape type name: {name!r}") from None