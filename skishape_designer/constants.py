"""Configuration constants for Ski Shape Designer.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    OutlineConfig: Spline and arc sampling for the outline builder
    ParameterConfig: Parameter fields, defaults, labels and constraint table
    ExportConfig: SVG export layout
    StyleConfig: Visual colors and styling
    ChartConfig: Chart rendering dimensions
"""

from math import pi
from pathlib import Path

# Package root directory (where skishape_designer/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of skishape_designer/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Output directory for exported shapes
OUTPUT_DIR = PROJECT_ROOT / "output"


class AppConfig:
    """UI application settings."""

    TITLE = "Ski Shape Designer"
    ICON = "🎿"
    LAYOUT = "wide"


class OutlineConfig:
    """Sampling and arc geometry for the outline builder."""

    # Catmull-Rom samples per segment (each segment emits SPLINE_STEPS + 1 points)
    SPLINE_STEPS = 300

    # Samples per tip/tail arc (each arc emits ARC_STEPS + 1 points)
    ARC_STEPS = 40

    # Nose arc: upper-left quarter circle
    NOSE_ARC_START_RAD = pi
    NOSE_ARC_END_RAD = pi / 2

    # Tail arc: shallower than a quarter circle, keep the divisor as is
    TAIL_ARC_END_DIVISOR = 2.85
    TAIL_ARC_START_RAD = pi / TAIL_ARC_END_DIVISOR
    TAIL_ARC_END_RAD = 0.0

    # Millimetres per metre for sidecut radius display
    MM_PER_M = 1000.0

    # Radius points count as collinear when |cross product| <= tolerance * longest side squared
    COLLINEAR_TOLERANCE = 1e-9


class ParameterConfig:
    """Ski parameter fields, defaults and per-field constraints.

    All values are millimetres. Widths are full widths (the outline builder
    halves them for the symmetric half-profile).
    """

    FIELDS = [
        "total_length",
        "waist_width",
        "tip_arc_radius",
        "tail_arc_radius",
        "tip_taper_width",
        "tail_taper_width",
        "tip_taper_offset",
        "tail_taper_offset",
        "tip_taper_length",
        "tail_taper_length",
        "setback",
    ]

    # Fields that only shape the outline in tapered mode
    TAPER_FIELDS = [
        "tip_taper_width",
        "tail_taper_width",
        "tip_taper_offset",
        "tail_taper_offset",
        "tip_taper_length",
        "tail_taper_length",
    ]

    DEFAULTS = {
        "total_length": 1870.0,
        "waist_width": 112.0,
        "tip_arc_radius": 56.0,
        "tail_arc_radius": 56.0,
        "tip_taper_width": 135.0,
        "tail_taper_width": 130.0,
        "tip_taper_offset": 250.0,
        "tail_taper_offset": 150.0,
        "tip_taper_length": 100.0,
        "tail_taper_length": 100.0,
        "setback": 100.0,
    }
    assert list(DEFAULTS.keys()) == FIELDS

    # Constraint table (min, max) in mm - consumed only by ui.validators
    CONSTRAINTS = {
        "total_length": (800.0, 2400.0),
        "waist_width": (50.0, 180.0),
        "tip_arc_radius": (10.0, 200.0),
        "tail_arc_radius": (10.0, 200.0),
        "tip_taper_width": (50.0, 220.0),
        "tail_taper_width": (50.0, 220.0),
        "tip_taper_offset": (0.0, 800.0),
        "tail_taper_offset": (0.0, 800.0),
        "tip_taper_length": (0.0, 600.0),
        "tail_taper_length": (0.0, 600.0),
        "setback": (-300.0, 300.0),
    }
    assert list(CONSTRAINTS.keys()) == FIELDS

    @staticmethod
    def label(field_name: str) -> str:
        """Human-readable label, e.g. 'tip_taper_width' -> 'Tip Taper Width'."""
        return " ".join(word.capitalize() for word in field_name.split("_"))

    @staticmethod
    def default_raw_values() -> dict[str, str]:
        """Defaults formatted the way a user would type them."""
        return {name: f"{value:g}" for name, value in ParameterConfig.DEFAULTS.items()}


# Validate defaults are within the constraint table (module-level assertion)
assert all(
    ParameterConfig.CONSTRAINTS[name][0] <= value <= ParameterConfig.CONSTRAINTS[name][1]
    for name, value in ParameterConfig.DEFAULTS.items()
), "Defaults must satisfy the constraint table"


class ExportConfig:
    """SVG export layout (matches the on-screen preview)."""

    FILENAME = "ski-design.svg"
    MIME_TYPE = "image/svg+xml"
    SVG_NAMESPACE = "http://www.w3.org/2000/svg"

    HEIGHT = 300
    VIEWBOX_MIN_Y = -150

    # Path coordinates are written with this many decimals
    COORDINATE_DECIMALS = 2

    PATH_FILL = "lightgray"
    PATH_STROKE = "black"
    PATH_STROKE_WIDTH = 2

    MOUNT_POINT_RADIUS = 4
    MOUNT_POINT_FILL = "red"

    # Label positions (tail label is placed relative to total length)
    LABEL_Y = -130
    TIP_LABEL_X = 10
    TAIL_LABEL_OFFSET_X = 60
    LABEL_FONT_SIZE = 16

    PARAMS_X = 10
    PARAMS_Y = 140
    PARAMS_FONT_SIZE = 12
    PARAMS_LINE_HEIGHT = 14
    PARAMS_FILL = "gray"


class StyleConfig:
    """Visual colors and styling."""

    OUTLINE_FILL = "rgba(211, 211, 211, 0.8)"  # lightgray
    OUTLINE_LINE = "#111827"  # gray-900
    CONTROL_POINT_COLOR = "#3B82F6"  # blue-500
    MOUNT_POINT_COLOR = "#EF4444"  # red-500
    LABEL_COLOR = "#111827"

    MODE_ICONS = {
        "classic": "🎿",
        "tapered": "⛷️",
    }


class ChartConfig:
    """Chart rendering dimensions."""

    OUTLINE_WIDTH = 1100
    OUTLINE_HEIGHT = 320

    # Extra space around the outline (mm)
    PADDING_MM = 40.0

    CONTROL_POINT_SIZE = 9
    MOUNT_POINT_SIZE = 10
