"""
Value types shared by the stamper and the partitioner.

Primitives carry a position, a polarity (-1 sinks, +1 raises) and their
shape parameters. Positions are mutable so the row generator can walk a
single primitive along an axis.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class Axis(Enum):
    """Axis-aligned direction with its unit step."""

    HORIZONTAL = (1, 0)
    VERTICAL = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def perpendicular(self) -> "Axis":
        if self is Axis.HORIZONTAL:
            return Axis.VERTICAL
        return Axis.HORIZONTAL

    @classmethod
    def from_index(cls, index: int) -> "Axis":
        """Map 0 to HORIZONTAL and 1 to VERTICAL."""
        return (cls.HORIZONTAL, cls.VERTICAL)[index]


@dataclass
class Line:
    """A groove (or ridge) of ``length`` pixels centered on (x, y)."""

    x: int
    y: int
    length: int
    axis: Axis
    in_or_out: int = 1


@dataclass
class Rectangle:
    """Axis-aligned panel centered on (x, y)."""

    x: int
    y: int
    width: int
    height: int
    in_or_out: int = 1

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return (lox, loy, hix, hiy) of the outline."""
        return (
            self.x - self.width // 2,
            self.y - self.height // 2,
            self.x + self.width // 2,
            self.y + self.height // 2,
        )


@dataclass
class Circle:
    x: int
    y: int
    radius: int
    in_or_out: int = 1


@dataclass
class AnnulusSector:
    """Ring segment between two radii and two angles (radians)."""

    x: int
    y: int
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    in_or_out: int = 1


Primitive = Union[Line, Rectangle, Circle, AnnulusSector]


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle (x1, y1)-(x2, y2) handled by the partitioner."""

    x1: int
    y1: int
    x2: int
    y2: int

    def normalized(self) -> "Region":
        """Return the same region with x1 <= x2 and y1 <= y2."""
        return Region(
            min(self.x1, self.x2),
            min(self.y1, self.y2),
            max(self.x1, self.x2),
            max(self.y1, self.y2),
        )

    @property
    def dx(self) -> int:
        return abs(self.x2 - self.x1)

    @property
    def dy(self) -> int:
        return abs(self.y2 - self.y1)

    @property
    def longer_axis(self) -> Axis:
        """Axis along which the region is longest; ties go horizontal."""
        return Axis.HORIZONTAL if self.dx >= self.dy else Axis.VERTICAL

    def extent(self, axis: Axis) -> int:
        return self.dx if axis is Axis.HORIZONTAL else self.dy

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2

    def split(self, axis: Axis, at: int) -> Tuple["Region", "Region"]:
        """Cut the region at coordinate ``at`` along ``axis``."""
        if axis is Axis.HORIZONTAL:
            return Region(self.x1, self.y1, at, self.y2), Region(at, self.y1, self.x2, self.y2)
        return Region(self.x1, self.y1, self.x2, at), Region(self.x1, at, self.x2, self.y2)
