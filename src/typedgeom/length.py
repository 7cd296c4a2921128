"""One-dimensional lengths tagged with their units.

A unit is any marker class: it has no instances and carries no data.
``Length[DevicePixel, float]`` and ``Length[CssPixel, float]`` are distinct
types for a static type checker, and at runtime every operation between
two lengths checks that their markers are the same class, raising
UnitMismatchError otherwise. Converting between spaces is always explicit,
either by dropping the unit (``get()``) or through a ScaleFactor.

Geometry types become unit-aware by using lengths as their scalar:

    >>> class CssPixel: ...
    >>> origin = Point2D(x=Length(1.0, CssPixel), y=Length(2.0, CssPixel))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typedgeom import num
from typedgeom.approxeq import approx_eq
from typedgeom.exceptions import UnitMismatchError, UnsupportedScalarError

U = TypeVar("U")
T = TypeVar("T")
Src = TypeVar("Src")
Dst = TypeVar("Dst")

__all__ = ["Length", "ScaleFactor", "UnknownUnit"]


class UnknownUnit:
    """Marker for values whose coordinate space is not known."""


def check_units(expected: Any, actual: Any, operation: str) -> None:
    """Raise UnitMismatchError unless both unit markers are the same class."""
    if expected is not actual:
        raise UnitMismatchError(
            f"Cannot {operation} lengths in different units",
            expected=expected,
            actual=actual,
        )


@dataclass(frozen=True, slots=True)
class Length(Generic[U, T]):
    """A scalar value tagged with a unit.

    Attributes:
        value: The raw scalar.
        unit: The unit marker class.
    """

    value: T
    unit: type[U] = UnknownUnit  # type: ignore[assignment]

    @classmethod
    def zero(cls, unit: type[U], kind: type[T] = float) -> Length[U, T]:  # type: ignore[assignment]
        """Zero length in the given unit."""
        return cls(num.zero(kind), unit)

    def get(self) -> T:
        """Return the raw scalar, dropping the unit."""
        return self.value

    def cast(self, kind: type[Any]) -> Length[U, Any] | None:
        """Cast the value to another numeric type, keeping the unit.

        Returns:
            The cast length, or None if the value is not representable.
        """
        value = num.cast_scalar(self.value, kind)
        if value is None:
            return None
        return Length(value, self.unit)

    def _same_unit(self, other: Length[Any, Any], operation: str) -> None:
        check_units(self.unit, other.unit, operation)

    def __add__(self, other: object) -> Length[U, T]:
        if not isinstance(other, Length):
            return NotImplemented
        self._same_unit(other, "add")
        return Length(self.value + other.value, self.unit)  # type: ignore[operator]

    def __sub__(self, other: object) -> Length[U, T]:
        if not isinstance(other, Length):
            return NotImplemented
        self._same_unit(other, "subtract")
        return Length(self.value - other.value, self.unit)  # type: ignore[operator]

    def __neg__(self) -> Length[U, T]:
        return Length(-self.value, self.unit)  # type: ignore[operator]

    def __mul__(self, factor: object) -> Length[Any, T]:
        if isinstance(factor, ScaleFactor):
            check_units(factor.src, self.unit, "scale")
            return Length(self.value * factor.value, factor.dst)
        if isinstance(factor, Length):
            return NotImplemented
        return Length(self.value * factor, self.unit)  # type: ignore[operator]

    def __rmul__(self, factor: object) -> Length[U, T]:
        if isinstance(factor, (Length, ScaleFactor)):
            return NotImplemented
        return Length(factor * self.value, self.unit)  # type: ignore[operator]

    def __truediv__(self, divisor: object) -> Any:
        if isinstance(divisor, ScaleFactor):
            check_units(divisor.dst, self.unit, "unscale")
            return Length(self.value / divisor.value, divisor.src)
        if isinstance(divisor, Length):
            # Same-unit ratio is a bare scalar
            self._same_unit(divisor, "divide")
            return self.value / divisor.value  # type: ignore[operator]
        return Length(self.value / divisor, self.unit)  # type: ignore[operator]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        self._same_unit(other, "compare")
        return self.value < other.value  # type: ignore[operator]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        self._same_unit(other, "compare")
        return self.value <= other.value  # type: ignore[operator]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        self._same_unit(other, "compare")
        return self.value > other.value  # type: ignore[operator]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        self._same_unit(other, "compare")
        return self.value >= other.value  # type: ignore[operator]

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class ScaleFactor(Generic[Src, Dst, T]):
    """A ratio converting lengths from one unit to another.

    ``Length(2.0, CssPixel) * ScaleFactor(1.5, CssPixel, DevicePixel)``
    is ``Length(3.0, DevicePixel)``; dividing a DevicePixel length by the
    same factor converts it back.

    Attributes:
        value: Number of ``dst`` units per ``src`` unit.
        src: Source unit marker.
        dst: Destination unit marker.
    """

    value: T
    src: type[Src]
    dst: type[Dst]

    def get(self) -> T:
        """Return the raw ratio."""
        return self.value

    def inv(self) -> ScaleFactor[Dst, Src, Any]:
        """Return the factor converting ``dst`` back to ``src``."""
        return ScaleFactor(num.one_like(self.value) / self.value, self.dst, self.src)  # type: ignore[operator]

    def __rmul__(self, other: object) -> Any:
        # Bare scalars scale by the raw ratio; lengths are handled by Length
        if isinstance(other, Length):
            return NotImplemented
        return other * self.value  # type: ignore[operator]

    def __rtruediv__(self, other: object) -> Any:
        if isinstance(other, Length):
            return NotImplemented
        return other / self.value  # type: ignore[operator]


# Scalar capabilities for lengths delegate to the wrapped value


@num.zero_like.register
def _(value: Length) -> Length[Any, Any]:
    return Length(num.zero_like(value.value), value.unit)


@num.one_like.register
def _(value: Length) -> Length[Any, Any]:
    return Length(num.one_like(value.value), value.unit)


@num.round_scalar.register
def _(value: Length) -> Length[Any, Any]:
    return Length(num.round_scalar(value.value), value.unit)


@num.floor_scalar.register
def _(value: Length) -> Length[Any, Any]:
    return Length(num.floor_scalar(value.value), value.unit)


@num.ceil_scalar.register
def _(value: Length) -> Length[Any, Any]:
    return Length(num.ceil_scalar(value.value), value.unit)


@num.cast_scalar.register
def _(value: Length, kind: type[Any]) -> Length[Any, Any] | None:
    return value.cast(kind)


@approx_eq.register
def _(a: Length, b: Any, epsilon: float | None = None) -> bool:
    if not isinstance(b, Length):
        raise UnsupportedScalarError("Cannot compare a length with a bare scalar", kind=type(b))
    check_units(a.unit, b.unit, "compare")
    return approx_eq(a.value, b.value, epsilon)
