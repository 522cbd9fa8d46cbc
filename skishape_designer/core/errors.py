"""Geometry errors raised by the outline kernel and its validators.

Only geometric failures are exceptions. Expected user-input problems are
returned as Message objects by ui.validators instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skishape_designer.model.point import Point2D


class GeometryError(Exception):
    """Base class for geometry failures."""


class DegenerateGeometryError(GeometryError):
    """Three points do not define a circle (collinear or coincident).

    Attributes:
        points: The three offending points
    """

    def __init__(self, points: tuple[Point2D, Point2D, Point2D]) -> None:
        self.points = points
        super().__init__(f"Points are collinear, no circle passes through {list(points)}")


class InvalidGeometryError(GeometryError):
    """A parameter set produces inverted or overlapping x-extents.

    Attributes:
        reasons: Human-readable descriptions of each failed check
    """

    def __init__(self, reasons: list[str]) -> None:
        self.reasons = reasons
        super().__init__("Invalid ski geometry: " + "; ".join(reasons))
