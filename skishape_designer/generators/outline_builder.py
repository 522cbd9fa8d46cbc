"""OutlineBuilder - Ski parameters to a closed, symmetric outline.

Construction:
1. Waist x = total_length / 2 + setback
2. Tapered mode clamps each taper offset to at least its arc radius, so taper
   points never fall inside the tip/tail arc's x-extent
3. Control points (tip arc, [tip taper], waist, [tail taper], tail arc)
4. Catmull-Rom sidecut through the control points
5. Nose arc (pi -> pi/2) and a shallower tail arc (pi/2.85 -> 0)
6. Upper half = nose arc + sidecut + tail arc
7. Lower half = upper half mirrored to -y and reversed
8. Outline = upper half + lower half

The builder does not validate parameters. A total length shorter than the
two arc radii inverts the x-extents; ui.validators detects that.
"""

import logging
from typing import Sequence

from skishape_designer.constants import OutlineConfig
from skishape_designer.core.arc_generator import generate_arc
from skishape_designer.core.curve_interpolator import interpolate_curve
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.model.point import Point2D
from skishape_designer.model.ski_outline import SkiOutline
from skishape_designer.model.ski_parameters import SkiParameters

logger = logging.getLogger(__name__)


def mirror_half_profile(points: Sequence[Point2D]) -> list[Point2D]:
    """Mirror a half-profile across the centerline and reverse its order.

    Returns a new list; the input sequence is left untouched.
    """
    return [p.mirrored() for p in reversed(points)]


class OutlineBuilder:
    """Builds ski outlines from design parameters.

    Stateless apart from sampling density, so one instance can be shared.

    Example:
        builder = OutlineBuilder()
        outline = builder.build(params=SkiParameters.default(), mode=OutlineMode.TAPERED)
        print(f"{outline.sidecut_radius_m:.1f} m")
    """

    def __init__(
        self,
        spline_steps: int = OutlineConfig.SPLINE_STEPS,
        arc_steps: int = OutlineConfig.ARC_STEPS,
    ) -> None:
        """Initialize builder.

        Args:
            spline_steps: Samples per sidecut spline segment
            arc_steps: Samples per tip/tail arc
        """
        self.spline_steps = spline_steps
        self.arc_steps = arc_steps

    def control_points(self, params: SkiParameters, mode: OutlineMode) -> list[Point2D]:
        """Derive the sidecut control points, ordered tip to tail.

        Args:
            params: Ski design parameters
            mode: CLASSIC (3 points) or TAPERED (5 points)

        Returns:
            Control points the sidecut spline passes through.
        """
        tip_arc = Point2D(x=params.tip_arc_radius, y=params.tip_arc_radius)
        waist = Point2D(x=params.waist_x, y=params.waist_width / 2)
        tail_arc = Point2D(x=params.total_length - params.tail_arc_radius, y=params.tail_arc_radius)

        if mode is OutlineMode.CLASSIC:
            return [tip_arc, waist, tail_arc]

        tip_offset = max(params.tip_taper_offset, params.tip_arc_radius)
        tail_offset = max(params.tail_taper_offset, params.tail_arc_radius)

        tip_taper = Point2D(x=tip_offset + params.tip_taper_length, y=params.tip_taper_width / 2)
        tail_taper = Point2D(
            x=params.total_length - tail_offset - params.tail_taper_length,
            y=params.tail_taper_width / 2,
        )
        return [tip_arc, tip_taper, waist, tail_taper, tail_arc]

    @staticmethod
    def radius_control_points(
        control_points: Sequence[Point2D],
        mode: OutlineMode,
    ) -> tuple[Point2D, Point2D, Point2D]:
        """Pick the 3 points used for sidecut radius estimation.

        Classic mode uses all three control points, tapered mode the middle
        three (tip taper, waist, tail taper).
        """
        if mode is OutlineMode.CLASSIC:
            first, middle, last = control_points
        else:
            first, middle, last = control_points[1:4]
        return (first, middle, last)

    def build(self, params: SkiParameters, mode: OutlineMode) -> SkiOutline:
        """Build the closed outline.

        Args:
            params: Ski design parameters
            mode: CLASSIC or TAPERED

        Returns:
            SkiOutline with the closed point sequence and radius control points.
        """
        control_points = self.control_points(params=params, mode=mode)
        sidecut = interpolate_curve(control_points, steps=self.spline_steps)

        nose_arc = generate_arc(
            cx=params.tip_arc_radius,
            cy=0.0,
            radius=params.tip_arc_radius,
            start_angle=OutlineConfig.NOSE_ARC_START_RAD,
            end_angle=OutlineConfig.NOSE_ARC_END_RAD,
            steps=self.arc_steps,
        )
        tail_arc = generate_arc(
            cx=params.total_length - params.tail_arc_radius,
            cy=0.0,
            radius=params.tail_arc_radius,
            start_angle=OutlineConfig.TAIL_ARC_START_RAD,
            end_angle=OutlineConfig.TAIL_ARC_END_RAD,
            steps=self.arc_steps,
        )

        upper_half = nose_arc + sidecut + tail_arc
        outline = upper_half + mirror_half_profile(upper_half)

        logger.debug(
            f"Built {mode.value} outline: {len(control_points)} control points, "
            f"{len(upper_half)} half-profile points, {len(outline)} outline points"
        )

        return SkiOutline(
            outline=tuple(outline),
            upper_half=tuple(upper_half),
            control_points=tuple(control_points),
            radius_control_points=self.radius_control_points(control_points=control_points, mode=mode),
            params=params,
            mode=mode,
        )


def build_outline(params: SkiParameters, mode: OutlineMode) -> SkiOutline:
    """Build a ski outline with default sampling density."""
    return OutlineBuilder().build(params=params, mode=mode)
