"""Export the default tapered ski design as an SVG file.

Developer utility: writes output/ski-design.svg without starting the
Streamlit app. Edit PARAMS/MODE below to export another design.

Run: python scripts/export_ski_svg.py
"""

from skishape_designer.constants import OUTPUT_DIR, ExportConfig
from skishape_designer.core.errors import DegenerateGeometryError
from skishape_designer.generators.outline_builder import build_outline
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.model.ski_parameters import SkiParameters
from skishape_designer.ui.svg_export import build_svg
from skishape_designer.ui.validators import require_valid_geometry

PARAMS = SkiParameters.default()
MODE = OutlineMode.TAPERED
OUTPUT_FILE = OUTPUT_DIR / ExportConfig.FILENAME


def export_ski_svg() -> None:
    """Validate, build and write the outline as SVG."""
    require_valid_geometry(params=PARAMS, mode=MODE)
    outline = build_outline(params=PARAMS, mode=MODE)

    print(f"Mode: {MODE.display_name}, outline points: {len(outline.outline)}")
    try:
        print(f"Approx. sidecut radius: {outline.sidecut_radius_m:.1f} m")
    except DegenerateGeometryError:
        print("Straight sidecut (radius points are collinear)")

    OUTPUT_FILE.parent.mkdir(parents=True, exist_ok=True)
    OUTPUT_FILE.write_text(build_svg(outline), encoding="utf-8")
    print(f"Saved to: {OUTPUT_FILE}")


if __name__ == "__main__":
    export_ski_svg()
