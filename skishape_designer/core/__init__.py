"""Core numerical kernel for ski outline generation.

This module provides the pure, stateless geometry functions:
- interpolate_curve: Catmull-Rom spline through control points
- generate_arc: Uniformly sampled circular arc
- circumradius: Radius of the circle through three points (Heron's formula)

Errors:
- DegenerateGeometryError: Collinear points passed to circumradius
- InvalidGeometryError: Parameter set with inverted x-extents
"""

from skishape_designer.core.arc_generator import generate_arc
from skishape_designer.core.circumradius import circumradius, sidecut_radius_m
from skishape_designer.core.curve_interpolator import interpolate_curve
from skishape_designer.core.errors import (
    DegenerateGeometryError,
    GeometryError,
    InvalidGeometryError,
)

__all__ = [
    # Curves
    "interpolate_curve",
    "generate_arc",
    # Circle
    "circumradius",
    "sidecut_radius_m",
    # Errors
    "GeometryError",
    "DegenerateGeometryError",
    "InvalidGeometryError",
]
