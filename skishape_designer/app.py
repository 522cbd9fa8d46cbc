"""Ski Shape Designer - Interactive ski outline editor.

Edit the numeric design of a ski (length, waist, tip/tail arcs, taper,
setback), preview the outline with its sidecut radius, and download it
as SVG.

Run: streamlit run skishape_designer/app.py
"""

import logging

import streamlit as st

from skishape_designer.constants import AppConfig, ChartConfig, ExportConfig
from skishape_designer.core.errors import DegenerateGeometryError
from skishape_designer.generators.outline_builder import OutlineBuilder
from skishape_designer.model.message import StraightSidecutMessage, UsingLastKnownGoodMessage
from skishape_designer.model.ski_outline import SkiOutline
from skishape_designer.ui import (
    OutlineChart,
    ParameterEditorStateMachine,
    ParameterPanel,
    build_svg,
    sync_widget_state,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with the editor state machine and widget values."""
    if "state_machine" not in st.session_state:
        sm, ctx = ParameterEditorStateMachine.create()
        st.session_state.state_machine = sm
        st.session_state.context = ctx
        sync_widget_state(ctx)

    if "outline_builder" not in st.session_state:
        st.session_state.outline_builder = OutlineBuilder()


# =============================================================================
# RENDERING
# =============================================================================


def render_sidecut_radius(outline: SkiOutline) -> None:
    """Show the effective sidecut radius in metres, or why there is none."""
    try:
        radius_m = outline.sidecut_radius_m
    except DegenerateGeometryError:
        StraightSidecutMessage().display()
        return
    st.metric("Approx. Sidecut Radius", f"{radius_m:.1f} m")


def main() -> None:
    """Main application entry point."""
    st.set_page_config(
        page_title=AppConfig.TITLE,
        page_icon=AppConfig.ICON,
        layout=AppConfig.LAYOUT,
    )
    init_session_state()

    sm: ParameterEditorStateMachine = st.session_state.state_machine
    ctx = sm.context
    builder: OutlineBuilder = st.session_state.outline_builder
    logger.info(f"[MAIN] Render cycle starting: state={sm.get_state_name()}, mode={ctx.mode.value}")

    st.title(f"{AppConfig.ICON} {AppConfig.TITLE}")

    ParameterPanel(state_machine=sm).render()

    outline = builder.build(params=sm.active_parameters(), mode=sm.active_mode())

    for message in ctx.geometry_errors:
        message.display()
    if sm.is_invalid:
        UsingLastKnownGoodMessage(error_count=len(ctx.messages)).display()

    render_sidecut_radius(outline)

    chart = OutlineChart(width=ChartConfig.OUTLINE_WIDTH, height=ChartConfig.OUTLINE_HEIGHT)
    st.plotly_chart(chart.render(outline=outline), key="outline_preview")

    st.download_button(
        "📥 Download Shape",
        data=build_svg(outline),
        file_name=ExportConfig.FILENAME,
        mime=ExportConfig.MIME_TYPE,
        help="Download the outline as an SVG file",
    )


if __name__ == "__main__":
    main()
