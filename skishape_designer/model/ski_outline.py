"""SkiOutline - The closed silhouette produced by the outline builder.

Holds the closed point sequence plus the intermediate results a caller
needs for display and export:
- upper_half: nose arc + sidecut + tail arc (y >= 0 side)
- control_points: the points the sidecut spline passes through
- radius_control_points: the 3 points used for sidecut radius estimation

The outline is not explicitly closed. Renderers connect the last point back
to the first.
"""

from dataclasses import dataclass

import numpy as np

from skishape_designer.core.circumradius import circumradius, sidecut_radius_m
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.model.point import Point2D
from skishape_designer.model.ski_parameters import SkiParameters


@dataclass(frozen=True)
class SkiOutline:
    """A closed, centerline-symmetric ski outline.

    Attributes:
        outline: Upper half followed by its mirrored reverse
        upper_half: Nose arc, sidecut and tail arc on the y >= 0 side
        control_points: Sidecut control points (3 classic, 5 tapered)
        radius_control_points: Points for sidecut radius estimation
        params: Parameters the outline was built from
        mode: Construction mode
    """

    outline: tuple[Point2D, ...]
    upper_half: tuple[Point2D, ...]
    control_points: tuple[Point2D, ...]
    radius_control_points: tuple[Point2D, Point2D, Point2D]
    params: SkiParameters
    mode: OutlineMode

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if len(self.radius_control_points) != 3:
            raise ValueError(f"SkiOutline needs 3 radius control points, got {len(self.radius_control_points)}")
        if len(self.control_points) != self.mode.control_point_count:
            raise ValueError(
                f"{self.mode.display_name} outline needs {self.mode.control_point_count} control points, "
                f"got {len(self.control_points)}"
            )

    @property
    def sidecut_radius_mm(self) -> float:
        """Effective sidecut radius in mm.

        Raises:
            DegenerateGeometryError: If the radius control points are collinear
                (straight sidecut).
        """
        return circumradius(*self.radius_control_points)

    @property
    def sidecut_radius_m(self) -> float:
        """Effective sidecut radius in metres."""
        return sidecut_radius_m(*self.radius_control_points)

    @property
    def mount_point(self) -> Point2D:
        """Mount point on the centerline at the waist position."""
        return Point2D(x=self.params.waist_x, y=0.0)

    @property
    def max_width(self) -> float:
        """Widest full width of the outline in mm."""
        return 2 * max(p.y for p in self.upper_half)

    def as_array(self) -> np.ndarray:
        """Outline as an (N, 2) array of x, y."""
        return np.array([p.as_tuple() for p in self.outline], dtype=float)

    def __repr__(self) -> str:
        return (
            f"SkiOutline(mode={self.mode.value}, points={len(self.outline)}, "
            f"length={self.params.total_length:.0f}mm)"
        )
