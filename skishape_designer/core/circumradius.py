"""Circumradius of three points, used as the effective sidecut radius.

Side lengths a, b, c give the triangle area via Heron's formula, and the
circumradius is R = (a * b * c) / (4 * area).
"""

from math import isfinite, sqrt

from skishape_designer.constants import OutlineConfig
from skishape_designer.core.errors import DegenerateGeometryError
from skishape_designer.model.point import Point2D


def circumradius(p1: Point2D, p2: Point2D, p3: Point2D) -> float:
    """Radius of the circle through three points.

    Args:
        p1: First point
        p2: Second point
        p3: Third point

    Returns:
        Circumradius in the same units as the points (mm).

    Raises:
        DegenerateGeometryError: If the points are collinear or coincident.
    """
    a = p1.distance_to(p2)
    b = p2.distance_to(p3)
    c = p3.distance_to(p1)
    s = (a + b + c) / 2

    # Heron's product is float noise for tilted collinear points
    cross = (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)
    longest = max(a, b, c)
    if not abs(cross) > OutlineConfig.COLLINEAR_TOLERANCE * longest * longest:
        raise DegenerateGeometryError(points=(p1, p2, p3))

    heron = s * (s - a) * (s - b) * (s - c)
    # NaN fails this comparison too
    if not heron > 0:
        raise DegenerateGeometryError(points=(p1, p2, p3))

    radius = (a * b * c) / (4 * sqrt(heron))
    if not isfinite(radius):
        raise DegenerateGeometryError(points=(p1, p2, p3))
    return radius


def sidecut_radius_m(p1: Point2D, p2: Point2D, p3: Point2D) -> float:
    """Circumradius of three outline points converted from mm to metres."""
    return circumradius(p1, p2, p3) / OutlineConfig.MM_PER_M
