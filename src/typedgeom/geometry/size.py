"""Size primitive for typedgeom."""

from __future__ import annotations

from typing import Any, Generic

from typedgeom import num
from typedgeom.geometry.components import Components, T
from typedgeom.length import Length


class Size2D(Components, Generic[T]):
    """A 2D size representing width and height.

    Unlike points, sizes are not required to be positive: negative extents
    are legal values produced by degenerate rect operations.

    Attributes:
        width: Horizontal extent.
        height: Vertical extent.
    """

    width: T
    height: T

    @property
    def area(self) -> Any:
        """Width times height, as a bare scalar for unit-tagged sizes."""
        width, height = self.width, self.height
        if isinstance(width, Length) and isinstance(height, Length):
            return width.get() * height.get()
        return width * height  # type: ignore[operator]

    def is_empty(self) -> bool:
        """True iff either extent equals the scalar's additive identity."""
        return bool(
            self.width == num.zero_like(self.width)
            or self.height == num.zero_like(self.height)
        )

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
