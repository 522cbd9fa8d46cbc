"""Message - User-facing messages for the ski shape designer UI.

Architecture:
- PARAMETER PANEL: Red error messages for fields that fail parsing or range checks
- PREVIEW: Red geometry errors, yellow fallback notice, blue info (straight sidecut)
- TOASTS: Brief confirmations (reset to defaults)

Design Principles:
- Validators return messages, they never raise for expected input problems
- Messages know their own display level (error/warning/info)
- Caller controls when/how to display the message
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status
    WARNING = "warning"  # Yellow - preview is not showing the typed values
    ERROR = "error"  # Red - invalid input


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for user-facing messages displayed inline.

    These messages are rendered as st.info/st.warning/st.error blocks that
    persist in the UI until the input changes.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications.

    Good for: quick confirmations of user actions
    Bad for: validation errors that must stay visible until fixed
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast. Override in subclasses."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# PARAMETER PANEL - Field errors (RED)
# =============================================================================


@dataclass(frozen=True)
class InvalidNumberMessage(Message):
    """Field text is blank or not a finite number."""

    field_label: str
    raw_value: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        if not self.raw_value.strip():
            return f"**{self.field_label}** — value is required."
        return f"**{self.field_label}** — '{self.raw_value}' is not a number."


@dataclass(frozen=True)
class ParameterOutOfRangeMessage(Message):
    """Field value outside the constraint table range."""

    field_label: str
    value: float
    min_value: float
    max_value: float

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return (
            f"**{self.field_label}** — {self.value:g} mm is outside "
            f"{self.min_value:g}–{self.max_value:g} mm."
        )


# =============================================================================
# PREVIEW - Geometry errors (RED)
# =============================================================================


@dataclass(frozen=True)
class ArcRadiiTooLargeMessage(Message):
    """Tip and tail arcs do not fit in the total length."""

    total_length: float
    tip_arc_radius: float
    tail_arc_radius: float

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        arcs = self.tip_arc_radius + self.tail_arc_radius
        return (
            f"📏 **Arcs Do Not Fit** — tip + tail arc radii ({arcs:g} mm) must be "
            f"less than the total length ({self.total_length:g} mm)."
        )


@dataclass(frozen=True)
class ControlPointsOutOfOrderMessage(Message):
    """Two consecutive control points are not in tip-to-tail order."""

    first_name: str
    second_name: str
    first_x: float
    second_x: float

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return (
            f"↔️ **Points Out Of Order** — {self.first_name} (x={self.first_x:.0f} mm) must lie "
            f"before {self.second_name} (x={self.second_x:.0f} mm)."
        )


@dataclass(frozen=True)
class SelfIntersectingOutlineMessage(Message):
    """Built outline is not a simple polygon."""

    reason: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return f"✂️ **Outline Crosses Itself** — {self.reason}"


# =============================================================================
# PREVIEW - Status (YELLOW / BLUE)
# =============================================================================


@dataclass(frozen=True)
class UsingLastKnownGoodMessage(Message):
    """Preview shows the last valid design because current input is invalid."""

    error_count: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        plural = "problem" if self.error_count == 1 else "problems"
        return (
            f"⚠️ **Showing Last Valid Design** — fix {self.error_count} input {plural} "
            "to update the preview and export."
        )


@dataclass(frozen=True)
class StraightSidecutMessage(Message):
    """Radius control points are collinear, so the sidecut radius is infinite."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "📐 **Straight Sidecut** — the radius points are collinear, sidecut radius is infinite."


# =============================================================================
# TOASTS
# =============================================================================


@dataclass(frozen=True)
class ParametersResetMessage(ToastMessage):
    """All parameters restored to the default design."""

    @property
    def icon(self) -> str:
        return "↩️"

    @property
    def message(self) -> str:
        return "Parameters Reset — default design restored."
