"""Geometric primitives that the fitting algorithm places on an image."""

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, List, Optional, Tuple

from geometrize.shapetypes import ShapeTypes

ShapeHook = Callable[["Shape"], None]
Rasterizer = Callable[["Shape"], List[Any]]


@dataclass
class Shape:
    """Base of all shapes, carrying pluggable setup, mutate and rasterize hooks."""

    setup: Optional[ShapeHook] = field(
        default=None, kw_only=True, repr=False, compare=False
    )
    mutate: Optional[ShapeHook] = field(
        default=None, kw_only=True, repr=False, compare=False
    )
    rasterize: Optional[Rasterizer] = field(
        default=None, kw_only=True, repr=False, compare=False
    )

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = None

    @property
    def shape_type(self) -> ShapeTypes:
        """The ShapeTypes member for this kind of shape."""
        if self.SHAPE_TYPE is None:
            raise NotImplementedError("the base Shape has no shape type")
        return self.SHAPE_TYPE

    def clone(self):
        """Return an independent copy sharing the same hooks."""
        if self.SHAPE_TYPE is None:
            raise NotImplementedError("the base Shape cannot be cloned")
        return copy.copy(self)


@dataclass
class Circle(Shape):
    """A circle given by its centre and radius."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.CIRCLE


@dataclass
class Ellipse(Shape):
    """An axis-aligned ellipse given by its centre and two radii."""

    x: float = 0.0
    y: float = 0.0
    rx: float = 0.0
    ry: float = 0.0

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.ELLIPSE


@dataclass
class Line(Shape):
    """A straight line segment between two points."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.LINE


@dataclass
class Polyline(Shape):
    """A chain of connected line segments."""

    points: List[Tuple[float, float]] = field(default_factory=list)

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.POLYLINE

    def __post_init__(self):
        self.points = [(float(x), float(y)) for x, y in self.points]

    def clone(self):
        duplicate = copy.copy(self)
        duplicate.points = list(self.points)
        return duplicate


@dataclass
class QuadraticBezier(Shape):
    """A quadratic Bezier curve with one control point."""

    cx: float = 0.0
    cy: float = 0.0
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.QUADRATIC_BEZIER


@dataclass
class Rectangle(Shape):
    """An axis-aligned rectangle given by two corners."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.RECTANGLE


@dataclass
class RotatedEllipse(Shape):
    """An ellipse rotated through an angle in degrees."""

    x: float = 0.0
    y: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    angle: float = 0.0

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.ROTATED_ELLIPSE


@dataclass
class RotatedRectangle(Shape):
    """A rectangle rotated through an angle in degrees."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    angle: float = 0.0

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.ROTATED_RECTANGLE


@dataclass
class Triangle(Shape):
    """A triangle given by its three vertices."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    x3: float = 0.0
    y3: float = 0.0

    SHAPE_TYPE: ClassVar[Optional[ShapeTypes]] = ShapeTypes.TRIANGLE