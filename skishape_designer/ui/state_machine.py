"""State machine for the ski shape parameter editor.

Uses python-statemachine for robust state management with:
- Clear state definitions
- Guarded transitions (conditions)
- Entry hooks for logging
- Explicit event-driven transitions

Value Sets
----------
The editor keeps three parameter value sets apart, never conflating them:

    editing: Raw strings exactly as typed (possibly blank or invalid)
    committed: Last SkiParameters whose fields all parsed and passed the
        constraint table
    last_known_good: Last committed set that also passed the cross-field
        geometry checks. Preview and export always use this set.

States (2 states):
    VALID: Editing values are fully valid (committed == last_known_good)
    INVALID: Some field or geometry check fails; preview falls back to
        last_known_good

Transitions:
    VALID/INVALID -> VALID: edit, switch_mode (when the result is valid)
    VALID/INVALID -> INVALID: edit, switch_mode (when the result is invalid)
    VALID/INVALID -> VALID: reset_defaults

Guards evaluate the proposed values without touching the context; the
before_* actions then apply them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from skishape_designer.constants import ParameterConfig
from skishape_designer.model.message import Message
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.model.ski_parameters import SkiParameters
from skishape_designer.ui.validators import EditEvaluation, validate_editing_values

logger = logging.getLogger(__name__)


@dataclass
class EditorContext:
    """Shared context/model for the editor state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state value.
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    mode: OutlineMode = OutlineMode.TAPERED
    editing: dict[str, str] = field(default_factory=ParameterConfig.default_raw_values)
    committed: SkiParameters = field(default_factory=SkiParameters.default)
    last_known_good: SkiParameters = field(default_factory=SkiParameters.default)
    last_known_good_mode: OutlineMode = OutlineMode.TAPERED
    field_errors: dict[str, Message] = field(default_factory=dict)
    geometry_errors: list[Message] = field(default_factory=list)

    # =========================================================================
    # EVALUATION (pure - used by guards)
    # =========================================================================

    def evaluate_edit(self, field_name: str, raw_value: str) -> EditEvaluation:
        """Validate editing values with one field replaced, without applying."""
        if field_name not in ParameterConfig.FIELDS:
            raise ValueError(f"Unknown parameter field '{field_name}'")
        return validate_editing_values(raw_values={**self.editing, field_name: raw_value}, mode=self.mode)

    def evaluate_mode(self, mode: OutlineMode) -> EditEvaluation:
        """Validate current editing values under another mode, without applying."""
        return validate_editing_values(raw_values=self.editing, mode=mode)

    # =========================================================================
    # MUTATION (used by before_* actions)
    # =========================================================================

    def apply_edit(self, field_name: str, raw_value: str) -> None:
        evaluation = self.evaluate_edit(field_name=field_name, raw_value=raw_value)
        self.editing[field_name] = raw_value
        self._apply_evaluation(evaluation=evaluation, mode=self.mode)

    def apply_mode(self, mode: OutlineMode) -> None:
        evaluation = self.evaluate_mode(mode=mode)
        self.mode = mode
        self._apply_evaluation(evaluation=evaluation, mode=mode)

    def reset(self) -> None:
        """Restore the default design in all three value sets (mode is kept)."""
        self.editing = ParameterConfig.default_raw_values()
        self.committed = SkiParameters.default()
        self.last_known_good = SkiParameters.default()
        self.last_known_good_mode = self.mode
        self.field_errors = {}
        self.geometry_errors = []

    def _apply_evaluation(self, evaluation: EditEvaluation, mode: OutlineMode) -> None:
        self.field_errors = evaluation.field_errors
        self.geometry_errors = evaluation.geometry_errors
        if evaluation.parameters is not None:
            self.committed = evaluation.parameters
            if evaluation.is_valid:
                self.last_known_good = evaluation.parameters
                self.last_known_good_mode = mode

    # =========================================================================
    # HELPERS
    # =========================================================================

    @property
    def messages(self) -> list[Message]:
        """All current validation messages, field errors first."""
        return list(self.field_errors.values()) + self.geometry_errors

    def has_errors(self) -> bool:
        return bool(self.field_errors or self.geometry_errors)

    def __repr__(self) -> str:
        return (
            f"EditorContext(state={self.state}, mode={self.mode.value}, "
            f"field_errors={list(self.field_errors)}, geometry_errors={len(self.geometry_errors)})"
        )


class EditorLoggingListener:
    """Listener that logs every state transition.

    Usage:
        sm = ParameterEditorStateMachine(context=context)
        sm.add_listener(EditorLoggingListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")


class ParameterEditorStateMachine(StateMachine):
    """State machine for the parameter editing workflow.

    States:
        valid: Editing values build a valid outline
        invalid: Preview falls back to the last known good parameters
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    valid = State("Valid", initial=True)
    invalid = State("Invalid")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    # Change one field's raw text
    edit = (
        valid.to(valid, cond="edit_is_valid")
        | valid.to(invalid, unless="edit_is_valid")
        | invalid.to(valid, cond="edit_is_valid")
        | invalid.to(invalid, unless="edit_is_valid")
    )
    # Switch between classic and tapered construction
    switch_mode = (
        valid.to(valid, cond="mode_is_valid")
        | valid.to(invalid, unless="mode_is_valid")
        | invalid.to(valid, cond="mode_is_valid")
        | invalid.to(invalid, unless="mode_is_valid")
    )
    # Restore the default design
    reset_defaults = valid.to(valid) | invalid.to(valid)

    # ==========================================================================
    # Guards (Conditions)
    # ==========================================================================

    def edit_is_valid(self, field_name: str, raw_value: str) -> bool:
        """Guard: Would the edited values be fully valid."""
        return self.context.evaluate_edit(field_name=field_name, raw_value=raw_value).is_valid

    def mode_is_valid(self, mode: OutlineMode) -> bool:
        """Guard: Would the current values be fully valid in this mode."""
        return self.context.evaluate_mode(mode=mode).is_valid

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_valid(self) -> bool:
        return self.valid.is_active

    @property
    def is_invalid(self) -> bool:
        return self.invalid.is_active

    # ==========================================================================
    # Entry Hooks
    # ==========================================================================

    def on_enter_invalid(self) -> None:
        """Hook: Entering invalid state."""
        logger.info(f"Editor invalid, preview uses last known good: {self.context!r}")

    # ==========================================================================
    # Transition Actions (before_* hooks)
    # ==========================================================================

    def before_edit(self, field_name: str, raw_value: str) -> None:
        self.context.apply_edit(field_name=field_name, raw_value=raw_value)

    def before_switch_mode(self, mode: OutlineMode) -> None:
        self.context.apply_mode(mode=mode)

    def before_reset_defaults(self) -> None:
        self.context.reset()

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(self, context: EditorContext | None = None, start_value: str | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or EditorContext()
        super().__init__(model=model, start_value=start_value)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> EditorContext:
        """Alias for model."""
        return self.model

    def active_parameters(self) -> SkiParameters:
        """Parameters the preview and export should use."""
        return self.context.last_known_good

    def active_mode(self) -> OutlineMode:
        """Mode the last known good parameters were validated in."""
        return self.context.last_known_good_mode

    def get_state_name(self) -> str:
        """Get current state name for display."""
        return self.valid.name if self.valid.is_active else self.invalid.name

    def __repr__(self) -> str:
        return f"ParameterEditorStateMachine(state={self.get_state_name()}, model={self.context!r})"

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition

        Returns:
            True if transition succeeded, False otherwise.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    @staticmethod
    def create(add_listener: bool = True) -> tuple["ParameterEditorStateMachine", EditorContext]:
        """Factory method to create state machine with context and optional logging listener.

        Returns:
            Tuple of (ParameterEditorStateMachine, EditorContext)
        """
        context = EditorContext()
        sm = ParameterEditorStateMachine(context=context)
        if add_listener:
            sm.add_listener(EditorLoggingListener())
            logger.info("Created ParameterEditorStateMachine with EditorLoggingListener")
        else:
            logger.info("Created ParameterEditorStateMachine without listener")
        return sm, context
