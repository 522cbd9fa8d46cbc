"""Circular arc sampling for the rounded nose and tail."""

import numpy as np

from skishape_designer.constants import OutlineConfig
from skishape_designer.model.point import Point2D


def generate_arc(
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    steps: int = OutlineConfig.ARC_STEPS,
) -> list[Point2D]:
    """Sample points along a circular arc.

    The angle is interpolated uniformly from start_angle to end_angle
    inclusive. end_angle < start_angle traverses the arc clockwise.

    Args:
        cx: Circle center x (mm)
        cy: Circle center y (mm)
        radius: Circle radius (mm)
        start_angle: First angle (radians)
        end_angle: Last angle (radians)
        steps: Number of angular steps (emits steps + 1 points)

    Returns:
        steps + 1 points from start to end.
    """
    angles = np.linspace(start_angle, end_angle, steps + 1)
    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)
    return [Point2D(x=float(x), y=float(y)) for x, y in zip(xs, ys)]
