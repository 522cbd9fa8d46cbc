"""ParameterPanel - Mode selector, parameter inputs and reset button.

Widgets write through callbacks into the editor state machine, so the raw
text lives in EditorContext.editing and never goes straight to the builder.
"""

import logging

import streamlit as st

from skishape_designer.constants import ParameterConfig, StyleConfig
from skishape_designer.model.message import ParametersResetMessage
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.ui.state_machine import EditorContext, ParameterEditorStateMachine

logger = logging.getLogger(__name__)

MODE_WIDGET_KEY = "outline_mode"
INPUT_COLUMNS = 4


def widget_key(field_name: str) -> str:
    """Session state key of a parameter text input."""
    return f"param_{field_name}"


def sync_widget_state(context: EditorContext) -> None:
    """Copy editing values and mode from the context into widget state."""
    for name in ParameterConfig.FIELDS:
        st.session_state[widget_key(name)] = context.editing[name]
    st.session_state[MODE_WIDGET_KEY] = context.mode


class ParameterPanel:
    """Renders the parameter editor.

    Example:
        panel = ParameterPanel(state_machine=sm)
        panel.render()
    """

    def __init__(self, state_machine: ParameterEditorStateMachine) -> None:
        self.sm = state_machine

    @property
    def context(self) -> EditorContext:
        return self.sm.context

    def render(self) -> None:
        st.radio(
            "Shape",
            options=list(OutlineMode),
            format_func=lambda mode: f"{StyleConfig.MODE_ICONS[mode.value]} {mode.display_name}",
            key=MODE_WIDGET_KEY,
            on_change=self._on_mode_change,
            horizontal=True,
        )

        columns = st.columns(INPUT_COLUMNS)
        for i, name in enumerate(ParameterConfig.FIELDS):
            disabled_hint = (
                " (tapered only)"
                if self.context.mode is OutlineMode.CLASSIC and name in ParameterConfig.TAPER_FIELDS
                else ""
            )
            with columns[i % INPUT_COLUMNS]:
                st.text_input(
                    f"{ParameterConfig.label(name)} (mm){disabled_hint}",
                    key=widget_key(name),
                    on_change=self._on_edit,
                    args=(name,),
                )

        st.button("↩️ Reset to defaults", on_click=self._on_reset)

        for message in self.context.field_errors.values():
            message.display()

    # =========================================================================
    # CALLBACKS
    # =========================================================================

    def _on_edit(self, field_name: str) -> None:
        raw_value = st.session_state[widget_key(field_name)]
        self.sm.send("edit", field_name=field_name, raw_value=raw_value)

    def _on_mode_change(self) -> None:
        mode = st.session_state[MODE_WIDGET_KEY]
        self.sm.send("switch_mode", mode=mode)

    def _on_reset(self) -> None:
        self.sm.send("reset_defaults")
        sync_widget_state(self.context)
        ParametersResetMessage().display()
