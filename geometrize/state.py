"""Candidate shapes paired with the score they would achieve."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from geometrize.shapes import Shape

_UNSCORED = -1.0


class State:
    """A shape, its alpha and a measure of how much it improves the image.

    A score of -1 means the state has not been scored yet.
    """

    __slots__ = ("score", "alpha", "shape")

    def __init__(self, shape: Optional[Shape] = None, alpha: int = 0):
        if not 0 <= alpha <= 255:
            raise ValueError(f"alpha must be in 0..255, got {alpha}")
        self.score: float = _UNSCORED
        self.alpha: int = alpha
        self.shape: Optional[Shape] = shape
        if shape is not None:
            if shape.setup is None:
                raise ValueError("shape has no setup hook")
            shape.setup(shape)

    def copy(self) -> "State":
        """Return a copy that owns a clone of the shape."""
        duplicate = State.__new__(State)
        duplicate.score = self.score
        duplicate.alpha = self.alpha
        duplicate.shape = None if self.shape is None else self.shape.clone()
        return duplicate

    def mutate(self) -> "State":
        """Randomly modify the shape and return the state as it was before."""
        if self.shape is None:
            raise ValueError("state has no shape to mutate")
        if self.shape.mutate is None:
            raise ValueError("shape has no mutate hook")
        previous = self.copy()
        self.shape.mutate(self.shape)
        self.score = _UNSCORED
        return previous

    def __repr__(self):
        return f"State(score={self.score!r}, alpha={self.alpha!r}, shape={self.shape!r})"


@dataclass(frozen=True)
class ShapeResult:
    """A shape added to the model together with its colour and score."""

    score: float
    color: Tuple[int, int, int, int] | Any
    shape: Shape