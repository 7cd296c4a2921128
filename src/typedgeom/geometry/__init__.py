"""Geometry primitives for typedgeom.

Points, sizes, and rects generic over their scalar. Any numeric scalar
works (int, float, numpy scalars), and unit-tagged lengths make a value
belong to a specific coordinate space.

Example:
    from typedgeom import Length
    from typedgeom.geometry import Point2D, Rect

    class CssPixel: ...

    rect = Rect.from_tuple((0, 0, 50, 40)).union(Rect.from_tuple((20, -15, 250, 200)))
    typed = Rect.from_untyped(rect, CssPixel)
    typed.contains(Point2D(x=Length(10, CssPixel), y=Length(10, CssPixel)))
"""

from typedgeom.geometry.point import Point2D, Point3D, Point4D
from typedgeom.geometry.rect import Rect
from typedgeom.geometry.size import Size2D

__all__ = [
    "Point2D",
    "Point3D",
    "Point4D",
    "Rect",
    "Size2D",
]
