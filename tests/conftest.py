"""Shared pytest fixtures for skishape_designer tests.

Provides the reference parameter set and prebuilt outlines for all tests.

REFERENCE DESIGN:
    The default parameters (1870 mm long, 112 mm waist, 56 mm arcs,
    100 mm setback) give these tapered control points:
        tip arc (56, 56), tip taper (350, 67.5), waist (1035, 56),
        tail taper (1620, 65), tail arc (1814, 56)
    In classic mode the three control points all sit at y=56, so the
    sidecut is straight.
"""

import pytest

from skishape_designer.generators.outline_builder import OutlineBuilder
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.model.ski_outline import SkiOutline
from skishape_designer.model.ski_parameters import SkiParameters
from skishape_designer.ui.state_machine import EditorContext, ParameterEditorStateMachine


# =============================================================================
# PARAMETERS
# =============================================================================


@pytest.fixture
def default_params() -> SkiParameters:
    """Reference all-mountain design."""
    return SkiParameters.default()


@pytest.fixture
def classic_curved_params() -> SkiParameters:
    """Classic design with a narrower waist so the sidecut is curved."""
    return SkiParameters.default().with_changes(waist_width=100.0)


# =============================================================================
# OUTLINES
# =============================================================================


@pytest.fixture
def builder() -> OutlineBuilder:
    return OutlineBuilder()


@pytest.fixture
def tapered_outline(builder: OutlineBuilder, default_params: SkiParameters) -> SkiOutline:
    """Default design in tapered mode (5 control points)."""
    return builder.build(params=default_params, mode=OutlineMode.TAPERED)


@pytest.fixture
def classic_outline(builder: OutlineBuilder, default_params: SkiParameters) -> SkiOutline:
    """Default design in classic mode (3 control points, straight sidecut)."""
    return builder.build(params=default_params, mode=OutlineMode.CLASSIC)


# =============================================================================
# EDITOR
# =============================================================================


@pytest.fixture
def editor() -> tuple[ParameterEditorStateMachine, EditorContext]:
    """Fresh editor state machine without listener."""
    return ParameterEditorStateMachine.create(add_listener=False)
