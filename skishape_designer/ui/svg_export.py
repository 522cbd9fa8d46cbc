"""SVG export of a ski outline ("Download Shape").

The document mirrors the on-screen preview: filled outline, red mount
point, Tip/Tail labels and a parameter listing below the shape. Path
coordinates are written with two decimals as "M x y L x y ... Z".
"""

import logging
import xml.etree.ElementTree as ET
from typing import Sequence

from skishape_designer.constants import ExportConfig, ParameterConfig
from skishape_designer.model.point import Point2D
from skishape_designer.model.ski_outline import SkiOutline

logger = logging.getLogger(__name__)


def outline_path_d(points: Sequence[Point2D]) -> str:
    """Render points as a closed SVG path 'd' attribute.

    Returns:
        "M x y L x y ... Z", or "" for an empty sequence.
    """
    if not points:
        return ""
    decimals = ExportConfig.COORDINATE_DECIMALS
    commands = [
        f"{'M' if i == 0 else 'L'} {p.x:.{decimals}f} {p.y:.{decimals}f}" for i, p in enumerate(points)
    ]
    return " ".join(commands) + " Z"


def parameter_lines(outline: SkiOutline) -> list[str]:
    """One 'Label: value mm' line per parameter, e.g. 'Total Length: 1870 mm'."""
    values = outline.params.to_dict()
    return [f"{ParameterConfig.label(name)}: {values[name]:g} mm" for name in ParameterConfig.FIELDS]


def build_svg(outline: SkiOutline) -> str:
    """Render a standalone SVG document for an outline.

    Args:
        outline: Outline to export

    Returns:
        SVG document as a string.
    """
    total_length = outline.params.total_length
    height = ExportConfig.HEIGHT

    svg = ET.Element(
        "svg",
        xmlns=ExportConfig.SVG_NAMESPACE,
        width=f"{total_length:g}",
        height=str(height),
        viewBox=f"0 {ExportConfig.VIEWBOX_MIN_Y} {total_length:g} {height}",
    )

    ET.SubElement(
        svg,
        "path",
        d=outline_path_d(outline.outline),
        fill=ExportConfig.PATH_FILL,
        stroke=ExportConfig.PATH_STROKE,
        **{"stroke-width": str(ExportConfig.PATH_STROKE_WIDTH)},
    )

    mount = outline.mount_point
    ET.SubElement(
        svg,
        "circle",
        cx=f"{mount.x:g}",
        cy=f"{mount.y:g}",
        r=str(ExportConfig.MOUNT_POINT_RADIUS),
        fill=ExportConfig.MOUNT_POINT_FILL,
    )

    for label, x in (
        ("Tip", ExportConfig.TIP_LABEL_X),
        ("Tail", total_length - ExportConfig.TAIL_LABEL_OFFSET_X),
    ):
        text = ET.SubElement(
            svg,
            "text",
            x=f"{x:g}",
            y=str(ExportConfig.LABEL_Y),
            fill=ExportConfig.PATH_STROKE,
            **{"font-size": str(ExportConfig.LABEL_FONT_SIZE)},
        )
        text.text = label

    params_text = ET.SubElement(
        svg,
        "text",
        x=str(ExportConfig.PARAMS_X),
        y=str(ExportConfig.PARAMS_Y),
        fill=ExportConfig.PARAMS_FILL,
        **{"font-size": str(ExportConfig.PARAMS_FONT_SIZE)},
    )
    for i, line in enumerate(parameter_lines(outline)):
        tspan = ET.SubElement(
            params_text,
            "tspan",
            x=str(ExportConfig.PARAMS_X),
            dy="0" if i == 0 else str(ExportConfig.PARAMS_LINE_HEIGHT),
        )
        tspan.text = line

    document = ET.tostring(svg, encoding="unicode", method="xml")
    logger.info(f"[EXPORT] SVG with {len(outline.outline)} outline points ({len(document)} chars)")
    return document
