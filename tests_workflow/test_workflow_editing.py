"""Workflow tests: a designer edits a ski from defaults to export.

Each test drives the editor through events only, then builds and exports
whatever the preview would show.
"""

import xml.etree.ElementTree as ET

import pytest

from skishape_designer.constants import ExportConfig
from skishape_designer.core.errors import DegenerateGeometryError
from skishape_designer.generators.outline_builder import OutlineBuilder
from skishape_designer.model.message import (
    ControlPointsOutOfOrderMessage,
    InvalidNumberMessage,
    ParameterOutOfRangeMessage,
)
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.ui.state_machine import EditorContext, ParameterEditorStateMachine
from skishape_designer.ui.svg_export import build_svg

SMAndCtx = tuple[ParameterEditorStateMachine, EditorContext]
SVG = f"{{{ExportConfig.SVG_NAMESPACE}}}"


def _preview(sm: ParameterEditorStateMachine, builder: OutlineBuilder):
    return builder.build(params=sm.active_parameters(), mode=sm.active_mode())


class TestCarvingSkiWorkflow:
    """Narrow the waist, break the design, fix it, export it."""

    def test_full_session(self, sm_and_ctx: SMAndCtx, builder: OutlineBuilder) -> None:
        sm, ctx = sm_and_ctx

        # Step 1: defaults preview at about 19.7 m
        assert _preview(sm, builder).sidecut_radius_m == pytest.approx(19.7, abs=0.05)

        # Step 2: narrower waist gives a tighter sidecut
        sm.send("edit", field_name="waist_width", raw_value="98")
        assert sm.is_valid
        tighter = _preview(sm, builder).sidecut_radius_m
        assert tighter < 19.7

        # Step 3: typo in the length keeps the preview on the last valid design
        sm.send("edit", field_name="total_length", raw_value="18x0")
        assert sm.is_invalid
        assert isinstance(ctx.field_errors["total_length"], InvalidNumberMessage)
        assert _preview(sm, builder).sidecut_radius_m == pytest.approx(tighter)

        # Step 4: fix the typo
        sm.send("edit", field_name="total_length", raw_value="1800")
        assert sm.is_valid
        outline = _preview(sm, builder)
        assert outline.params.total_length == 1800.0
        assert outline.params.waist_width == 98.0

        # Step 5: export what the preview shows
        root = ET.fromstring(build_svg(outline))
        assert root.get("viewBox") == "0 -150 1800 300"
        lines = [tspan.text for tspan in root.iter(f"{SVG}tspan")]
        assert "Waist Width: 98 mm" in lines


class TestGeometryErrorWorkflow:
    """Cross-field problems are reported with the committed values kept."""

    def test_tip_taper_past_waist_then_reset(self, sm_and_ctx: SMAndCtx) -> None:
        sm, ctx = sm_and_ctx
        sm.send("edit", field_name="tip_taper_offset", raw_value="500")
        assert sm.is_valid

        sm.send("edit", field_name="tip_taper_length", raw_value="600")
        assert sm.is_invalid
        assert ctx.committed.tip_taper_length == 600.0
        assert sm.active_parameters().tip_taper_length == 100.0
        assert sm.active_parameters().tip_taper_offset == 500.0

        sm.send("reset_defaults")
        assert sm.is_valid
        assert not ctx.messages

    def test_tail_taper_crosses_waist(self, sm_and_ctx: SMAndCtx) -> None:
        sm, ctx = sm_and_ctx
        sm.send("edit", field_name="tail_taper_offset", raw_value="800")

        assert sm.is_invalid
        assert not ctx.field_errors
        assert isinstance(ctx.geometry_errors[0], ControlPointsOutOfOrderMessage)
        assert ctx.committed.tail_taper_offset == 800.0

    def test_out_of_range_then_blank(self, sm_and_ctx: SMAndCtx) -> None:
        sm, ctx = sm_and_ctx
        sm.send("edit", field_name="setback", raw_value="301")
        assert isinstance(ctx.field_errors["setback"], ParameterOutOfRangeMessage)

        sm.send("edit", field_name="setback", raw_value="")
        assert isinstance(ctx.field_errors["setback"], InvalidNumberMessage)
        assert "value is required" in ctx.field_errors["setback"].message

        sm.send("edit", field_name="setback", raw_value="-300")
        assert sm.is_valid
        assert sm.active_parameters().setback == -300.0


class TestModeSwitchWorkflow:
    """Switching construction modes changes what the preview builds."""

    def test_classic_defaults_have_straight_sidecut(self, sm_and_ctx: SMAndCtx, builder: OutlineBuilder) -> None:
        sm, _ = sm_and_ctx
        sm.send("switch_mode", mode=OutlineMode.CLASSIC)

        assert sm.is_valid
        assert sm.active_mode() is OutlineMode.CLASSIC
        outline = _preview(sm, builder)
        assert len(outline.control_points) == 3
        with pytest.raises(DegenerateGeometryError):
            _ = outline.sidecut_radius_m

    def test_classic_curved_then_back_to_tapered(self, sm_and_ctx: SMAndCtx, builder: OutlineBuilder) -> None:
        sm, _ = sm_and_ctx
        sm.send("switch_mode", mode=OutlineMode.CLASSIC)
        sm.send("edit", field_name="waist_width", raw_value="100")
        classic_radius = _preview(sm, builder).sidecut_radius_m
        assert 10.0 < classic_radius < 100.0

        sm.send("switch_mode", mode=OutlineMode.TAPERED)
        outline = _preview(sm, builder)
        assert len(outline.control_points) == 5
        assert outline.sidecut_radius_m != pytest.approx(classic_radius)

    def test_taper_only_error_blocks_both_modes(self, sm_and_ctx: SMAndCtx) -> None:
        """Taper fields are validated in classic mode too."""
        sm, ctx = sm_and_ctx
        sm.send("switch_mode", mode=OutlineMode.CLASSIC)
        sm.send("edit", field_name="tip_taper_width", raw_value="abc")
        assert sm.is_invalid
        assert "tip_taper_width" in ctx.field_errors

    def test_preview_mode_follows_last_known_good(self, sm_and_ctx: SMAndCtx) -> None:
        """Switching mode while invalid does not change the preview's mode."""
        sm, ctx = sm_and_ctx
        sm.send("edit", field_name="waist_width", raw_value="abc")
        sm.send("switch_mode", mode=OutlineMode.CLASSIC)

        assert ctx.mode is OutlineMode.CLASSIC
        assert sm.active_mode() is OutlineMode.TAPERED
