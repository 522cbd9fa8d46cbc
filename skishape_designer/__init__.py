"""Ski Shape Designer - Parametric ski outlines with sidecut radius.

Turns a handful of design numbers into a closed ski silhouette:
- Catmull-Rom sidecut through parameter-derived control points
- Circular nose and tail arcs, mirrored into a symmetric outline
- Effective sidecut radius from three control points (circumradius)
- Streamlit editor with live preview and SVG download

Modules:
    core: Numerical kernel (spline, arc, circumradius, geometry errors)
    model: Data structures (Point2D, SkiParameters, OutlineMode, SkiOutline)
    generators: Outline construction (OutlineBuilder)
    ui: Streamlit interface components (state machine, validators, chart, export)

Example:
    from skishape_designer.generators import build_outline
    from skishape_designer.model import OutlineMode, SkiParameters

    outline = build_outline(params=SkiParameters.default(), mode=OutlineMode.TAPERED)
    print(f"{outline.sidecut_radius_m:.1f} m")
"""
