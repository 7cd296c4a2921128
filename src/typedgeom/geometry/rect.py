"""Axis-aligned rectangles for typedgeom.

A Rect is an origin plus a size over any scalar type, including
unit-tagged lengths. Its edges are half-open: the minimum x/y edges belong
to the rect, the maximum x/y edges do not, so two rects that only share
an edge do not intersect.

No normalization is ever performed. A negative size is a legal value; the
operations below simply produce the corresponding degenerate results.

All comparisons are exact (``<``, ``<=``). Only Matrix4 participates in
tolerance-based comparison.

Example:
    >>> a = Rect.from_tuple((0, 0, 10, 20))
    >>> b = Rect.from_tuple((5, 15, 10, 10))
    >>> a.intersection(b).to_tuple()
    (5, 15, 5, 5)
"""

from __future__ import annotations

from typing import Any, Generic, Self

from pydantic import BaseModel

from typedgeom import num
from typedgeom.geometry.components import T
from typedgeom.geometry.point import Point2D
from typedgeom.geometry.size import Size2D


class Rect(BaseModel, Generic[T], frozen=True):
    """A rectangle defined by its origin and size.

    The rect covers ``[origin.x, origin.x + width)`` horizontally and
    ``[origin.y, origin.y + height)`` vertically.

    Attributes:
        origin: Minimum corner.
        size: Extent along each axis.
    """

    origin: Point2D[T]
    size: Size2D[T]

    @property
    def min_x(self) -> T:
        return self.origin.x

    @property
    def max_x(self) -> T:
        """X coordinate of the right edge (exclusive)."""
        return self.origin.x + self.size.width  # type: ignore[operator]

    @property
    def min_y(self) -> T:
        return self.origin.y

    @property
    def max_y(self) -> T:
        """Y coordinate of the bottom edge (exclusive)."""
        return self.origin.y + self.size.height  # type: ignore[operator]

    @property
    def max_point(self) -> Point2D[T]:
        """The far corner, origin + size."""
        return Point2D(x=self.max_x, y=self.max_y)

    def to_tuple(self) -> tuple[T, T, T, T]:
        """Convert to (x, y, width, height) tuple."""
        return (self.origin.x, self.origin.y, self.size.width, self.size.height)

    @classmethod
    def from_tuple(cls, bbox: tuple[Any, Any, Any, Any]) -> Self:
        """Create Rect from (x, y, width, height) tuple."""
        return cls(
            origin=Point2D(x=bbox[0], y=bbox[1]),
            size=Size2D(width=bbox[2], height=bbox[3]),
        )

    @classmethod
    def from_corners(cls, min_point: Point2D[Any], max_point: Point2D[Any]) -> Self:
        """Create Rect spanning ``min_point`` (inclusive) to ``max_point`` (exclusive)."""
        return cls(
            origin=min_point,
            size=Size2D(width=max_point.x - min_point.x, height=max_point.y - min_point.y),
        )

    @classmethod
    def zero(cls, kind: type[Any] = int) -> Self:
        """Rect with origin and size equal to ``kind``'s additive identity."""
        return cls(origin=Point2D.zero(kind), size=Size2D.zero(kind))

    def is_empty(self) -> bool:
        """True iff the width or height is zero."""
        return self.size.is_empty()

    def intersects(self, other: Rect[T]) -> bool:
        """Check if this rect overlaps another.

        Rects that only touch along an edge do not intersect.

        Args:
            other: Another Rect in the same scalar type.

        Returns:
            True if the interiors overlap on both axes.
        """
        return bool(
            self.min_x < other.max_x
            and other.min_x < self.max_x
            and self.min_y < other.max_y
            and other.min_y < self.max_y
        )

    def intersection(self, other: Rect[T]) -> Rect[T] | None:
        """Compute the overlap of two rects.

        Args:
            other: Another Rect in the same scalar type.

        Returns:
            The overlapping Rect, or None if the rects do not intersect.
        """
        if not self.intersects(other):
            return None

        upper_left = Point2D(
            x=num.max_scalar(self.min_x, other.min_x),
            y=num.max_scalar(self.min_y, other.min_y),
        )
        lower_right = Point2D(
            x=num.min_scalar(self.max_x, other.max_x),
            y=num.min_scalar(self.max_y, other.max_y),
        )
        return Rect.from_corners(upper_left, lower_right)

    def union(self, other: Rect[T]) -> Rect[T]:
        """Return the bounding box of both rects.

        Defined whether or not the rects intersect.
        """
        upper_left = Point2D(
            x=num.min_scalar(self.min_x, other.min_x),
            y=num.min_scalar(self.min_y, other.min_y),
        )
        lower_right = Point2D(
            x=num.max_scalar(self.max_x, other.max_x),
            y=num.max_scalar(self.max_y, other.max_y),
        )
        return Rect.from_corners(upper_left, lower_right)

    def contains(self, point: Point2D[T]) -> bool:
        """Check if a point lies inside this rect.

        Inclusive of the left and top edges, exclusive of the right and
        bottom edges.
        """
        return bool(
            self.min_x <= point.x < self.max_x and self.min_y <= point.y < self.max_y
        )

    def translate(self, delta: Point2D[T]) -> Rect[T]:
        """Move the origin by ``delta``; the size is unchanged."""
        return Rect(origin=self.origin + delta, size=self.size)

    def inflate(self, width: T, height: T) -> Rect[T]:
        """Grow the rect by ``width``/``height`` on every side.

        Negative amounts shrink it, possibly to a negative size.
        """
        return Rect(
            origin=Point2D(x=self.origin.x - width, y=self.origin.y - height),  # type: ignore[operator]
            size=Size2D(
                width=self.size.width + width + width,  # type: ignore[operator]
                height=self.size.height + height + height,  # type: ignore[operator]
            ),
        )

    def scale(self, x: Any, y: Any) -> Rect[Any]:
        """Multiply origin and size by separate horizontal/vertical factors."""
        return Rect(
            origin=Point2D(x=self.origin.x * x, y=self.origin.y * y),
            size=Size2D(width=self.size.width * x, height=self.size.height * y),
        )

    def __mul__(self, factor: object) -> Rect[Any]:
        if isinstance(factor, (Rect, Point2D, Size2D)):
            return NotImplemented
        return Rect(origin=self.origin * factor, size=self.size * factor)

    def __truediv__(self, divisor: object) -> Rect[Any]:
        if isinstance(divisor, (Rect, Point2D, Size2D)):
            return NotImplemented
        return Rect(origin=self.origin / divisor, size=self.size / divisor)

    def cast(self, kind: type[Any]) -> Rect[Any] | None:
        """Cast origin and size to another numeric type, keeping units.

        Returns:
            The cast Rect, or None if any component is not representable.
        """
        origin = self.origin.cast(kind)
        size = self.size.cast(kind)
        if origin is None or size is None:
            return None
        return Rect(origin=origin, size=size)

    def to_untyped(self) -> Rect[Any]:
        """Drop the units, preserving only the numeric values."""
        return Rect(origin=self.origin.to_untyped(), size=self.size.to_untyped())

    @classmethod
    def from_untyped(cls, rect: Rect[Any], unit: type[Any]) -> Rect[Any]:
        """Tag a unitless rect with ``unit``."""
        return cls(
            origin=Point2D.from_untyped(rect.origin, unit),
            size=Size2D.from_untyped(rect.size, unit),
        )

    def __str__(self) -> str:
        return f"Rect({self.size} at {self.origin})"
