"""State Machine Transition Matrix - Parameterized validation of all event/state combinations.

Uses pytest.mark.parametrize to create a data-driven truth table for state transitions.
This serves as executable documentation of the editor contract.

Every event is accepted from both states; guards decide the target:
    2 states × 3 events, each with a valid and an invalid outcome
    reset_defaults always lands in VALID
"""

import pytest

from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.ui.state_machine import EditorContext, ParameterEditorStateMachine

SMAndCtx = tuple[ParameterEditorStateMachine, EditorContext]


# =============================================================================
# TRUTH TABLE
# =============================================================================
# Format: (source_state, event_name, event_kwargs, expected_target)

TRANSITIONS: list[tuple[str, str, dict, str]] = [
    # edit
    ("valid", "edit", {"field_name": "waist_width", "raw_value": "100"}, "valid"),
    ("valid", "edit", {"field_name": "waist_width", "raw_value": "abc"}, "invalid"),
    ("valid", "edit", {"field_name": "waist_width", "raw_value": "5000"}, "invalid"),
    ("valid", "edit", {"field_name": "tip_arc_radius", "raw_value": ""}, "invalid"),
    ("invalid", "edit", {"field_name": "total_length", "raw_value": "1800"}, "invalid"),
    ("invalid", "edit", {"field_name": "setback", "raw_value": "abc"}, "invalid"),
    ("invalid", "edit", {"field_name": "setback", "raw_value": "100"}, "valid"),
    # switch_mode
    ("valid", "switch_mode", {"mode": OutlineMode.CLASSIC}, "valid"),
    ("valid", "switch_mode", {"mode": OutlineMode.TAPERED}, "valid"),
    ("invalid", "switch_mode", {"mode": OutlineMode.CLASSIC}, "invalid"),
    # reset_defaults
    ("valid", "reset_defaults", {}, "valid"),
    ("invalid", "reset_defaults", {}, "valid"),
]


def _to_state(sm: ParameterEditorStateMachine, state_name: str) -> None:
    """Drive the editor into a state through real events.

    The invalid state is reached with a non-numeric setback, which every
    truth-table row above either keeps or fixes explicitly.
    """
    if state_name == "invalid":
        sm.send("edit", field_name="setback", raw_value="abc")
    assert getattr(sm, state_name).is_active


class TestTransitionMatrix:
    """Parameterized tests validating the complete transition matrix."""

    @pytest.mark.parametrize(
        "source,event,kwargs,target",
        TRANSITIONS,
        ids=[f"{source}-{event}-{i}" for i, (source, event, _, _) in enumerate(TRANSITIONS)],
    )
    def test_transition(self, sm_and_ctx: SMAndCtx, source: str, event: str, kwargs: dict, target: str) -> None:
        """Event fired from source lands in the expected target state."""
        sm, ctx = sm_and_ctx
        _to_state(sm=sm, state_name=source)

        sm.send(event, **kwargs)

        assert getattr(sm, target).is_active
        assert ctx.has_errors() == (target == "invalid")

    @pytest.mark.parametrize("event", ["edit", "switch_mode", "reset_defaults"])
    @pytest.mark.parametrize("state_name", ["valid", "invalid"])
    def test_every_event_allowed_everywhere(self, sm_and_ctx: SMAndCtx, state_name: str, event: str) -> None:
        """No event is forbidden in any state."""
        sm, _ = sm_and_ctx
        _to_state(sm=sm, state_name=state_name)
        kwargs = {
            "edit": {"field_name": "waist_width", "raw_value": "112"},
            "switch_mode": {"mode": OutlineMode.TAPERED},
            "reset_defaults": {},
        }[event]
        assert sm.try_transition(event, **kwargs)


class TestLastKnownGoodAcrossTransitions:
    """Preview parameters only move on transitions into VALID."""

    @pytest.mark.parametrize(
        "field_name,raw_value",
        [
            pytest.param("waist_width", "abc", id="not_a_number"),
            pytest.param("waist_width", "", id="blank"),
            pytest.param("total_length", "99999", id="out_of_range"),
            pytest.param("total_length", "100", id="arcs_do_not_fit_and_out_of_range"),
            pytest.param("tail_taper_offset", "800", id="tail_taper_before_waist"),
        ],
    )
    def test_invalid_edit_keeps_preview(self, sm_and_ctx: SMAndCtx, field_name: str, raw_value: str) -> None:
        sm, ctx = sm_and_ctx
        before = sm.active_parameters()

        sm.send("edit", field_name=field_name, raw_value=raw_value)

        assert sm.is_invalid
        assert sm.active_parameters() == before
        assert ctx.editing[field_name] == raw_value

    def test_valid_edit_moves_preview(self, sm_and_ctx: SMAndCtx) -> None:
        sm, _ = sm_and_ctx
        sm.send("edit", field_name="waist_width", raw_value="98")
        assert sm.is_valid
        assert sm.active_parameters().waist_width == 98.0
