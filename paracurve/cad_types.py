import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

import numpy as np


@dataclass(frozen=True)
class Point2D:
    """An immutable point in the curve's plane."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ to normalise ints to floats
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: object) -> "Point2D":
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __str__(self):
        return f"{{{self.x}, {self.y}}}"

    def __iter__(self):
        yield self.x
        yield self.y

    def distance_to(self, other: "Point2D") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])


PointLike = Union[Tuple[float, float], Point2D]


def as_point(value: PointLike) -> Point2D:
    """Coerce an ``(x, y)`` pair or a Point2D to a Point2D."""
    if isinstance(value, Point2D):
        return value
    x, y = value
    return Point2D(x, y)


class CurveKind(Enum):
    """Tag identifying which curve variant an instance represents."""

    CIRCLE = "Circle"
    ELLIPSE = "Ellipse"
    HELIX = "Helix"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self):
        return self.label

    @classmethod
    def from_label(cls, text: str) -> "CurveKind":
        """Look up a kind by its display label, case-insensitively.

        The legacy spelling "Ellipce" is accepted for ``ELLIPSE``.
        """
        key = text.strip().lower()
        if key == "ellipce":
            return cls.ELLIPSE
        for kind in cls:
            if kind.label.lower() == key:
                return kind
        available = ", ".join(kind.label for kind in cls)
        raise ValueError(f"Unknown curve kind '{text}'. Available: {available}")
