"""SkiParameters - The numeric design record a ski outline is derived from.

All fields are millimetres. Widths are full widths; the outline builder
halves them for the symmetric half-profile.

The record is not validated here. Range and cross-field checks live in
ui.validators, which consume the constraint table in ParameterConfig.
"""

from dataclasses import asdict, dataclass, replace

from skishape_designer.constants import ParameterConfig


@dataclass(frozen=True)
class SkiParameters:
    """Design parameters for one ski shape.

    Attributes:
        total_length: Tip-to-tail length (mm)
        waist_width: Full width at the waist (mm)
        tip_arc_radius: Radius of the rounded nose (mm)
        tail_arc_radius: Radius of the rounded tail (mm)
        tip_taper_width: Full width at the tip taper point (mm)
        tail_taper_width: Full width at the tail taper point (mm)
        tip_taper_offset: Distance from the tip where the taper starts (mm)
        tail_taper_offset: Distance from the tail where the taper starts (mm)
        tip_taper_length: Length of the tip taper (mm)
        tail_taper_length: Length of the tail taper (mm)
        setback: Waist/mount offset from the geometric center, towards the tail (mm)

    Example:
        params = SkiParameters.default().with_changes(waist_width=100.0)
    """

    total_length: float
    waist_width: float
    tip_arc_radius: float
    tail_arc_radius: float
    tip_taper_width: float
    tail_taper_width: float
    tip_taper_offset: float
    tail_taper_offset: float
    tip_taper_length: float
    tail_taper_length: float
    setback: float

    @classmethod
    def default(cls) -> "SkiParameters":
        """The reference all-mountain design (1870 mm, 112 mm waist)."""
        return cls(**ParameterConfig.DEFAULTS)

    @classmethod
    def from_dict(cls, data: dict[str, float]) -> "SkiParameters":
        """Create from a field-name mapping.

        Raises:
            ValueError: If a field is missing or unknown.
        """
        missing = [name for name in ParameterConfig.FIELDS if name not in data]
        unknown = [name for name in data if name not in ParameterConfig.FIELDS]
        if missing or unknown:
            raise ValueError(f"Invalid ski parameters: missing={missing}, unknown={unknown}")
        return cls(**{name: float(data[name]) for name in ParameterConfig.FIELDS})

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    def with_changes(self, **changes: float) -> "SkiParameters":
        """Return a copy with some fields replaced."""
        return replace(self, **changes)

    @property
    def waist_x(self) -> float:
        """Waist (mount point) position along the long axis in mm."""
        return self.total_length / 2 + self.setback
