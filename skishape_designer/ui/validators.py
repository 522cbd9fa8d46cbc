"""Validators - Input validation for the ski shape designer.

Centralizes all validation logic. Validators return Optional[Message]:
- None if valid
- A Message object if invalid (caller displays it)

Design Principles:
- No exceptions for expected validation failures
- Messages know their own display level (error/warning/info)
- Caller controls when/how to display the message

require_valid_geometry() is the exception-raising entry point for
non-interactive callers (scripts), built on the same checks.
"""

from dataclasses import dataclass, field
from math import isfinite
from typing import Sequence

from shapely.geometry import Polygon
from shapely.validation import explain_validity

from skishape_designer.constants import ParameterConfig
from skishape_designer.core.errors import InvalidGeometryError
from skishape_designer.generators.outline_builder import OutlineBuilder
from skishape_designer.model.message import (
    ArcRadiiTooLargeMessage,
    ControlPointsOutOfOrderMessage,
    InvalidNumberMessage,
    Message,
    ParameterOutOfRangeMessage,
    SelfIntersectingOutlineMessage,
)
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.model.point import Point2D
from skishape_designer.model.ski_parameters import SkiParameters

CONTROL_POINT_NAMES = {
    OutlineMode.CLASSIC: ["tip arc", "waist", "tail arc"],
    OutlineMode.TAPERED: ["tip arc", "tip taper", "waist", "tail taper", "tail arc"],
}


def parse_number(raw_value: str) -> float | None:
    """Parse user text as a finite float, None if it is not one."""
    try:
        value = float(raw_value.strip())
    except ValueError:
        return None
    return value if isfinite(value) else None


def validate_number(field_name: str, raw_value: str) -> Message | None:
    """Validate that a field's text is a finite number.

    Returns:
        None if valid, InvalidNumberMessage if blank or not numeric.
    """
    if parse_number(raw_value) is None:
        return InvalidNumberMessage(field_label=ParameterConfig.label(field_name), raw_value=raw_value)
    return None


def validate_parameter_range(field_name: str, value: float) -> Message | None:
    """Validate a field value against the constraint table.

    Returns:
        None if valid, ParameterOutOfRangeMessage if outside (min, max).
    """
    min_value, max_value = ParameterConfig.CONSTRAINTS[field_name]
    if not min_value <= value <= max_value:
        return ParameterOutOfRangeMessage(
            field_label=ParameterConfig.label(field_name),
            value=value,
            min_value=min_value,
            max_value=max_value,
        )
    return None


def validate_arc_radii_fit(params: SkiParameters) -> Message | None:
    """Validate that tip and tail arcs fit within the total length.

    Returns:
        None if valid, ArcRadiiTooLargeMessage if the arcs overlap.
    """
    if params.total_length <= params.tip_arc_radius + params.tail_arc_radius:
        return ArcRadiiTooLargeMessage(
            total_length=params.total_length,
            tip_arc_radius=params.tip_arc_radius,
            tail_arc_radius=params.tail_arc_radius,
        )
    return None


def validate_control_point_order(control_points: Sequence[Point2D], mode: OutlineMode) -> Message | None:
    """Validate that control points run strictly tip to tail.

    Catches taper points crossing the waist and setbacks pushing the waist
    into an arc.

    Returns:
        None if valid, ControlPointsOutOfOrderMessage for the first bad pair.
    """
    names = CONTROL_POINT_NAMES[mode]
    for i in range(len(control_points) - 1):
        first, second = control_points[i], control_points[i + 1]
        if first.x >= second.x:
            return ControlPointsOutOfOrderMessage(
                first_name=names[i],
                second_name=names[i + 1],
                first_x=first.x,
                second_x=second.x,
            )
    return None


def validate_outline_polygon(outline: Sequence[Point2D]) -> Message | None:
    """Validate that the outline is a simple (non self-intersecting) polygon.

    Returns:
        None if valid, SelfIntersectingOutlineMessage otherwise.
    """
    polygon = Polygon([p.as_tuple() for p in outline])
    if not polygon.is_valid:
        return SelfIntersectingOutlineMessage(reason=explain_validity(polygon))
    return None


def validate_geometry(
    params: SkiParameters,
    mode: OutlineMode,
    builder: OutlineBuilder | None = None,
) -> list[Message]:
    """Run all cross-field geometry checks on a parameter set.

    The outline polygon is only built when the cheaper checks pass.

    Returns:
        Empty list if valid, otherwise the messages of the failed checks.
    """
    builder = builder or OutlineBuilder()
    messages: list[Message] = []

    arc_message = validate_arc_radii_fit(params)
    if arc_message is not None:
        messages.append(arc_message)

    control_points = builder.control_points(params=params, mode=mode)
    order_message = validate_control_point_order(control_points=control_points, mode=mode)
    if order_message is not None:
        messages.append(order_message)

    if not messages:
        outline = builder.build(params=params, mode=mode)
        polygon_message = validate_outline_polygon(outline.outline)
        if polygon_message is not None:
            messages.append(polygon_message)

    return messages


def require_valid_geometry(params: SkiParameters, mode: OutlineMode) -> None:
    """Raise if the parameter set does not produce a valid outline.

    Raises:
        InvalidGeometryError: With one reason per failed check.
    """
    messages = validate_geometry(params=params, mode=mode)
    if messages:
        raise InvalidGeometryError(reasons=[m.message for m in messages])


@dataclass
class EditEvaluation:
    """Result of validating a full set of raw editing values.

    Attributes:
        parameters: Parsed parameters if every field passed, else None
        field_errors: Per-field parsing/range messages
        geometry_errors: Cross-field messages (only when all fields passed)
    """

    parameters: SkiParameters | None = None
    field_errors: dict[str, Message] = field(default_factory=dict)
    geometry_errors: list[Message] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.parameters is not None and not self.geometry_errors

    @property
    def messages(self) -> list[Message]:
        return list(self.field_errors.values()) + self.geometry_errors


def validate_editing_values(raw_values: dict[str, str], mode: OutlineMode) -> EditEvaluation:
    """Validate raw text for all parameter fields.

    Args:
        raw_values: Field name -> text as typed
        mode: Construction mode for the geometry checks

    Returns:
        EditEvaluation with parsed parameters and any messages.
    """
    evaluation = EditEvaluation()
    values: dict[str, float] = {}

    for name in ParameterConfig.FIELDS:
        raw_value = raw_values.get(name, "")
        number_message = validate_number(field_name=name, raw_value=raw_value)
        if number_message is not None:
            evaluation.field_errors[name] = number_message
            continue

        value = parse_number(raw_value)
        range_message = validate_parameter_range(field_name=name, value=value)
        if range_message is not None:
            evaluation.field_errors[name] = range_message
            continue
        values[name] = value

    if evaluation.field_errors:
        return evaluation

    evaluation.parameters = SkiParameters.from_dict(values)
    evaluation.geometry_errors = validate_geometry(params=evaluation.parameters, mode=mode)
    return evaluation
