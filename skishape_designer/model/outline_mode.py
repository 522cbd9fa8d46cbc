"""OutlineMode - Which sidecut construction the outline builder uses."""

from enum import Enum


class OutlineMode(Enum):
    """Sidecut construction mode.

    CLASSIC: 3 control points (tip arc, waist, tail arc), no taper segments.
    TAPERED: 5 control points, adds tip and tail taper positions.
    """

    CLASSIC = "classic"
    TAPERED = "tapered"

    @property
    def display_name(self) -> str:
        return {
            OutlineMode.CLASSIC: "Classic",
            OutlineMode.TAPERED: "Tapered",
        }[self]

    @property
    def control_point_count(self) -> int:
        """Number of control points the sidecut spline passes through."""
        return 3 if self is OutlineMode.CLASSIC else 5
