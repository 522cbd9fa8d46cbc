"""User interface components for the ski shape designer.

File Structure:
- parameter_panel.py: Mode selector, parameter inputs, reset button
- outline_chart.py: Plotly top view of the outline
- svg_export.py: SVG document for "Download Shape"

Core Components:
- state_machine.py: ParameterEditorStateMachine (2 states) + EditorContext
- validators.py: Input validation with Optional[Message] returns
"""

from skishape_designer.ui.outline_chart import OutlineChart
from skishape_designer.ui.parameter_panel import ParameterPanel, sync_widget_state, widget_key
from skishape_designer.ui.state_machine import (
    EditorContext,
    EditorLoggingListener,
    ParameterEditorStateMachine,
)
from skishape_designer.ui.svg_export import build_svg, outline_path_d
from skishape_designer.ui.validators import (
    require_valid_geometry,
    validate_editing_values,
    validate_geometry,
)

__all__ = [
    # State machine
    "ParameterEditorStateMachine",
    "EditorContext",
    "EditorLoggingListener",
    # Renderers
    "ParameterPanel",
    "OutlineChart",
    "sync_widget_state",
    "widget_key",
    # Export
    "build_svg",
    "outline_path_d",
    # Validators
    "validate_editing_values",
    "validate_geometry",
    "require_valid_geometry",
]
