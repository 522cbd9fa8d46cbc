"""Shared pytest fixtures for skishape_designer workflow tests.

Keeps conftest.py minimal: a fresh editor and an outline builder.

REFERENCE DESIGN:
    Default parameters build a valid tapered outline with a sidecut
    radius of about 19.7 m. Typing "abc" into any field is the simplest
    way to reach the invalid state.
"""

import pytest

from skishape_designer.generators.outline_builder import OutlineBuilder
from skishape_designer.ui.state_machine import EditorContext, ParameterEditorStateMachine

SMAndCtx = tuple[ParameterEditorStateMachine, EditorContext]


@pytest.fixture
def sm_and_ctx() -> SMAndCtx:
    """Fresh editor state machine with logging listener attached."""
    return ParameterEditorStateMachine.create(add_listener=True)


@pytest.fixture
def builder() -> OutlineBuilder:
    return OutlineBuilder()
