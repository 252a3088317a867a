"""Settings for a run of the shape fitting algorithm."""

from dataclasses import dataclass, field

from geometrize.shapetypes import ShapeTypes

_UINT32_MAX = 0xFFFFFFFF


@dataclass
class ShapeBoundsOptions:
    """A rectangle, in percent (0-100) of the target size, confining shapes.

    The bounds apply only when ``enabled`` is true; otherwise the whole
    target image is used.
    """

    enabled: bool = False
    x_min_percent: float = 0.0
    y_min_percent: float = 0.0
    x_max_percent: float = 100.0
    y_max_percent: float = 100.0


@dataclass
class ImageRunnerOptions:
    """Preferences used by a step of the image runner.

    ``max_threads`` of 0 lets the implementation choose.
    """

    shape_types: ShapeTypes = ShapeTypes.ELLIPSE
    alpha: int = 128
    shape_count: int = 50
    max_shape_mutations: int = 100
    seed: int = 9001
    max_threads: int = 0
    shape_bounds: ShapeBoundsOptions = field(default_factory=ShapeBoundsOptions)

    def __post_init__(self):
        if not 0 <= self.alpha <= 255:
            raise ValueError(f"alpha must be in 0..255, got {self.alpha}")
        for name in ("shape_count", "max_shape_mutations", "seed", "max_threads"):
            value = getattr(self, name)
            if not 0 <= value <= _UINT32_MAX:
                raise ValueError(f"{name} must be an unsigned 32-bit value, got {value}")