"""Outline generation for ski shapes.

Provides the OutlineBuilder, which turns SkiParameters into a closed outline:
- Control points from parameters (classic: 3, tapered: 5)
- Catmull-Rom sidecut joined to circular nose and tail arcs
- Mirrored lower half for a symmetric silhouette
"""

from skishape_designer.generators.outline_builder import (
    OutlineBuilder,
    build_outline,
    mirror_half_profile,
)

__all__ = [
    "OutlineBuilder",
    "build_outline",
    "mirror_half_profile",
]
