"""typedgeom: generic 2D/3D geometry and transform primitives.

Key Components:
    - num: scalar capabilities (identities, rounding, casting) for any numeric type
    - approxeq: tolerance-based scalar equality
    - Length / ScaleFactor: unit-tagged scalars and unit conversions
    - Point2D / Point3D / Point4D / Size2D / Rect: value types over any scalar
    - Matrix4: 4x4 homogeneous transforms
"""

from typedgeom.approxeq import approx_eq
from typedgeom.exceptions import GeometryError, UnitMismatchError, UnsupportedScalarError
from typedgeom.geometry import Point2D, Point3D, Point4D, Rect, Size2D
from typedgeom.length import Length, ScaleFactor, UnknownUnit
from typedgeom.matrix import Matrix4

__all__ = [
    "GeometryError",
    "Length",
    "Matrix4",
    "Point2D",
    "Point3D",
    "Point4D",
    "Rect",
    "ScaleFactor",
    "Size2D",
    "UnitMismatchError",
    "UnknownUnit",
    "UnsupportedScalarError",
    "approx_eq",
]
