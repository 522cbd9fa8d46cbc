"""Catmull-Rom interpolation of the sidecut curve.

Produces a dense point sequence passing exactly through every control
point, with a continuous tangent direction at interior points. At the ends
the missing neighbour is replaced by the nearest in-range point, which
flattens curvature there.

Each segment is sampled at steps + 1 uniform values of t in [0, 1], so the
shared point between consecutive segments appears twice in the output.
"""

from typing import Sequence

import numpy as np

from skishape_designer.constants import OutlineConfig
from skishape_designer.model.point import Point2D


def interpolate_curve(
    points: Sequence[Point2D],
    steps: int = OutlineConfig.SPLINE_STEPS,
) -> list[Point2D]:
    """Sample a Catmull-Rom spline through the given control points.

    Args:
        points: Ordered control points
        steps: Samples per segment (each segment emits steps + 1 points)

    Returns:
        Sampled curve points, empty if fewer than 2 control points.
    """
    if len(points) < 2:
        return []

    coords = np.array([p.as_tuple() for p in points], dtype=float)
    last = len(coords) - 1

    t = np.linspace(0.0, 1.0, steps + 1)[:, np.newaxis]
    t2 = t * t
    t3 = t2 * t

    curve: list[Point2D] = []
    for i in range(last):
        p0 = coords[max(i - 1, 0)]
        p1 = coords[i]
        p2 = coords[i + 1]
        p3 = coords[min(i + 2, last)]

        segment = 0.5 * (
            2 * p1
            + (-p0 + p2) * t
            + (2 * p0 - 5 * p1 + 4 * p2 - p3) * t2
            + (-p0 + 3 * p1 - 3 * p2 + p3) * t3
        )
        curve.extend(Point2D(x=float(x), y=float(y)) for x, y in segment)

    return curve
