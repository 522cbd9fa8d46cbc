"""Point2D - The geometry atom of a ski outline.

A Point2D is a position in the outline plane, in millimetres:
- x runs along the ski's long axis (0 = tip end)
- y is the lateral offset from the centerline

Used by:
- core (spline, arc and circumradius calculations)
- SkiOutline (outline, half-profile and control point sequences)
"""

from dataclasses import dataclass
from math import hypot


@dataclass(frozen=True)
class Point2D:
    """A point in the outline plane.

    Attributes:
        x: Position along the long axis in mm (0 = tip end)
        y: Lateral offset from the centerline in mm

    Example:
        point = Point2D(x=1035.0, y=56.0)
    """

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        """Return (x, y) tuple."""
        return (self.x, self.y)

    def mirrored(self) -> "Point2D":
        """Return the reflection across the centerline (y -> -y)."""
        return Point2D(x=self.x, y=-self.y)

    def distance_to(self, other: "Point2D") -> float:
        """Euclidean distance to another point in mm."""
        return hypot(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"
