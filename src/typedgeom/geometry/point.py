"""Point primitives for typedgeom.

Points are ordered tuples of 2, 3, or 4 scalars. They carry no unit of
their own: a point in a coordinate space is a point whose scalars are
unit-tagged lengths, e.g. ``Point2D(x=Length(1.0, CssPixel), y=...)``.
"""

from __future__ import annotations

from typing import Generic

from typedgeom.geometry.components import Components, T


class Point2D(Components, Generic[T]):
    """A 2D point.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate.
    """

    x: T
    y: T

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Point3D(Components, Generic[T]):
    """A 3D point.

    Attributes:
        x: First coordinate.
        y: Second coordinate.
        z: Third coordinate.
    """

    x: T
    y: T
    z: T

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"


class Point4D(Components, Generic[T]):
    """A 4D point in homogeneous coordinates.

    Attributes:
        x: First coordinate.
        y: Second coordinate.
        z: Third coordinate.
        w: Homogeneous coordinate.
    """

    x: T
    y: T
    z: T
    w: T

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z},{self.w})"
