# geometrize

Building blocks for approximating an image with simple shapes: the shape
primitives themselves (rectangles, rotated rectangles, triangles, ellipses,
rotated ellipses, circles, lines, quadratic Béziers and polylines), random
placement and mutation of those shapes within bounds, geometric transforms,
and the state objects a hill-climbing search works with.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Shape types

`geometrize.shapetypes.ShapeTypes` is an `IntFlag`, so several kinds can be
combined with `|`. `ALL_SHAPES` lists every kind and `SHAPE_TYPE_NAMES` pairs
each kind with its lower-case name.

```python
from geometrize.shapetypes import ShapeTypes, shape_type_name, shape_type_from_name

types = ShapeTypes.ELLIPSE | ShapeTypes.TRIANGLE
shape_type_name(ShapeTypes.ROTATED_ELLIPSE)    # "rotated_ellipse"
shape_type_from_name("quadratic_bezier")        # ShapeTypes.QUADRATIC_BEZIER
```

Both functions raise `ValueError` for anything that is not a single known
kind or name.

## Shapes

`geometrize.shapes` defines `Shape` and one dataclass per kind: `Circle`,
`Ellipse`, `Line`, `Polyline`, `QuadraticBezier`, `Rectangle`,
`RotatedEllipse`, `RotatedRectangle` and `Triangle`. Each has a
`shape_type` property and a `clone()` method that returns an independent copy
keeping the same hooks. Every shape carries three optional keyword-only
hooks, `setup`, `mutate` and `rasterize`, each a callable taking the shape.

## Creating and changing shapes

```python
from geometrize.factory import create, random_shape_of, create_default_shape_creator
from geometrize.mutation import setup, mutate
from geometrize.transforms import translate, scale, rotate
from geometrize.shapetypes import ShapeTypes

shape = create(ShapeTypes.RECTANGLE)
setup(shape, 0, 0, 256, 256)    # random placement inside the bounds
mutate(shape, 0, 0, 256, 256)   # a small random change, kept inside the bounds

translate(shape, 10, 5)
scale(shape, 2.0)

creator = create_default_shape_creator(ShapeTypes.ELLIPSE | ShapeTypes.CIRCLE, 0, 0, 128, 128)
candidate = creator()           # a shape of one of the requested kinds
```

- `create(shape_type)` raises `ValueError` for anything but a single kind.
- `random_shape()` picks any kind; `random_shape_of(types)` picks one of the
  requested kinds and falls back to any kind when none is requested.
- `create_default_shape_creator(...)` returns a function whose shapes have
  their `setup` and `mutate` hooks bound to `mutation.setup` and
  `mutation.mutate` with the given bounds. It does not set `rasterize`.
- `setup` and `mutate` draw from the `random` module, so `random.seed(...)`
  makes them reproducible. Mutating a polyline with no points raises
  `ValueError`.
- `rotate` turns lines and triangles about their centre by an angle in
  radians, adds degrees to rotated ellipses and rotated rectangles (wrapped
  to [0, 360)), and leaves other shapes unchanged.
- `scale` scales about the shape's centre; scaling a `QuadraticBezier` raises
  `TypeError`. Polylines are scaled pair by pair, and a trailing unpaired
  point is dropped.

## Search state

`geometrize.state.State(shape, alpha)` pairs a shape with an alpha (0–255)
and a score, which starts at -1 (unscored). Constructing a state with a shape
runs the shape's `setup` hook, and raises `ValueError` if it has none.
`State.copy()` returns a state owning a clone of the shape. `State.mutate()`
runs the shape's `mutate` hook, resets the score to -1, and returns a copy of
the state as it was, so a worse result can be undone.

`ShapeResult` is a frozen record of a score, a colour and a shape.

## Options

`geometrize.options.ImageRunnerOptions` holds settings for a search step,
with these defaults: ellipses only, alpha 128, 50 candidate shapes, 100
mutations per candidate, seed 9001, and a thread count of 0. Out-of-range
values raise `ValueError`. `ShapeBoundsOptions` describes, as percentages of
the target image, where shapes may be placed; it is off by default.

## What this package does not do

It does not load or save images, rasterize shapes into scanlines, compute
colours or scores, or run the search itself. The options above are plain
settings records; nothing in the package reads them to drive a run.