"""Data model classes for ski outline generation.

- Point2D: Geometry atom (x, y in mm)
- SkiParameters: Numeric design record (eleven mm fields)
- OutlineMode: Classic (3 control points) or tapered (5 control points)
- SkiOutline: Closed outline plus control points and derived radius
- Message/ToastMessage: User-facing validation and status messages
"""

from skishape_designer.model.point import Point2D
from skishape_designer.model.outline_mode import OutlineMode
from skishape_designer.model.ski_parameters import SkiParameters
from skishape_designer.model.ski_outline import SkiOutline

__all__ = [
    "Point2D",
    "OutlineMode",
    "SkiParameters",
    "SkiOutline",
]
