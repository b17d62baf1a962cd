"""Point and Vector value types.

All coordinates and magnitudes are whole game distance units and all
directions are whole degrees, so every conversion rounds back to ``int``:

  - scaling a :class:`Point` rounds half away from zero;
  - polar ↔ cartesian conversions and distances round to the nearest integer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pod_racer.geometry.angles import normalize_direction


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Vector:
    """A polar quantity: non-negative magnitude and a direction in [0, 360)."""

    magnitude: int = 0
    """Length in game distance units."""

    direction: int = 0
    """Degrees, normalised on construction."""

    def __post_init__(self) -> None:
        if self.magnitude < 0:
            raise ValueError(f"magnitude must be >= 0, got {self.magnitude}")
        object.__setattr__(self, "direction", normalize_direction(self.direction))

    def with_direction(self, direction: int) -> Vector:
        """Return a copy pointing at *direction* (normalised)."""
        return Vector(self.magnitude, direction)

    @property
    def x(self) -> int:
        return round_half_away(math.cos(math.radians(self.direction)) * self.magnitude)

    @property
    def y(self) -> int:
        return round_half_away(math.sin(math.radians(self.direction)) * self.magnitude)

    def to_point(self) -> Point:
        """Cartesian offset from the origin."""
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Point:
    """A cartesian coordinate, or an offset such as a per-turn velocity."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_vector(cls, vector: Vector) -> Point:
        return vector.to_point()

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(round_half_away(self.x * factor), round_half_away(self.y * factor))

    __rmul__ = __mul__

    def distance(self, other: Point) -> int:
        """Euclidean distance to *other*, rounded to the nearest unit."""
        return round_half_away(math.hypot(other.x - self.x, other.y - self.y))

    def magnitude(self) -> int:
        return self.distance(Point())

    def angle(self) -> int:
        """Bearing from the origin to this point in [0, 360).

        The zero point has angle 0 (``atan2(0, 0) == 0``).
        """
        return normalize_direction(round_half_away(math.degrees(math.atan2(self.y, self.x))))

    def to_vector(self) -> Vector:
        return Vector(self.magnitude(), self.angle())

    def __str__(self) -> str:
        return f"{self.x} {self.y}"
