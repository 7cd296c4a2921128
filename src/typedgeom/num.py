"""Scalar capability layer for typedgeom.

Every geometry type is generic over its scalar. This module provides the
small set of capabilities those types need (identities, rounding, casting,
IEEE division, trigonometry), implemented once per numeric family rather
than once per concrete type:

    - ``numbers.Integral``: Python ``int`` and every numpy integer type.
      Rounding is the identity; approximate equality is exact.
    - ``numbers.Real``: Python ``float``, ``fractions.Fraction``.
    - ``numpy.floating``: numpy floats, keeping their dtype.

Unit-tagged lengths register their own implementations in
``typedgeom.length``, so a ``Point2D`` of lengths rounds, casts, and
compares through the same entry points as a ``Point2D`` of floats.

Example:
    >>> round_scalar(2.5), round_scalar(-2.5), round_scalar(7)
    (3.0, -3.0, 7)
    >>> cast_scalar(1e20, numpy.int32) is None
    True
"""

from __future__ import annotations

import logging
import math
import numbers
from functools import singledispatch
from typing import Any, TypeVar

import numpy

from typedgeom.exceptions import UnsupportedScalarError

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "cast_scalar",
    "ceil_scalar",
    "cos_scalar",
    "div_scalar",
    "floor_scalar",
    "max_scalar",
    "min_scalar",
    "one",
    "one_like",
    "round_scalar",
    "sin_scalar",
    "tan_scalar",
    "zero",
    "zero_like",
]


def _is_numeric_kind(kind: type) -> bool:
    return isinstance(kind, type) and issubclass(kind, numbers.Number) and kind is not bool


def zero(kind: type[T]) -> T:
    """Return the additive identity of a scalar type.

    Args:
        kind: A numeric type (``int``, ``float``, ``numpy.float32``, ...).

    Returns:
        ``kind(0)``.

    Raises:
        UnsupportedScalarError: If ``kind`` is not a numeric type.
    """
    if not _is_numeric_kind(kind):
        raise UnsupportedScalarError("Type has no additive identity", kind=kind)
    return kind(0)  # type: ignore[call-arg]


def one(kind: type[T]) -> T:
    """Return the multiplicative identity of a scalar type.

    Raises:
        UnsupportedScalarError: If ``kind`` is not a numeric type.
    """
    if not _is_numeric_kind(kind):
        raise UnsupportedScalarError("Type has no multiplicative identity", kind=kind)
    return kind(1)  # type: ignore[call-arg]


@singledispatch
def zero_like(value: Any) -> Any:
    """Return the additive identity with the same type (and unit) as ``value``."""
    raise UnsupportedScalarError("Value has no additive identity", kind=type(value))


@zero_like.register
def _(value: numbers.Number) -> Any:
    return zero(type(value))


@singledispatch
def one_like(value: Any) -> Any:
    """Return the multiplicative identity with the same type as ``value``."""
    raise UnsupportedScalarError("Value has no multiplicative identity", kind=type(value))


@one_like.register
def _(value: numbers.Number) -> Any:
    return one(type(value))


# Rounding family


@singledispatch
def round_scalar(value: Any) -> Any:
    """Round to the nearest integral value, halfway cases away from zero.

    Integers are returned unchanged. Floating values keep their type.

    Raises:
        UnsupportedScalarError: If the value type cannot be rounded.
    """
    raise UnsupportedScalarError("Value cannot be rounded", kind=type(value))


@singledispatch
def floor_scalar(value: Any) -> Any:
    """Round toward negative infinity, keeping the scalar type."""
    raise UnsupportedScalarError("Value cannot be floored", kind=type(value))


@singledispatch
def ceil_scalar(value: Any) -> Any:
    """Round toward positive infinity, keeping the scalar type."""
    raise UnsupportedScalarError("Value cannot be ceiled", kind=type(value))


@round_scalar.register
@floor_scalar.register
@ceil_scalar.register
def _(value: numbers.Integral) -> Any:
    return value


@round_scalar.register
def _(value: numbers.Real) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return value
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += 1 if value > 0 else -1
    return type(value)(truncated)


@floor_scalar.register
def _(value: numbers.Real) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return type(value)(math.floor(value))


@ceil_scalar.register
def _(value: numbers.Real) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return type(value)(math.ceil(value))


@round_scalar.register
def _(value: numpy.floating) -> Any:
    truncated = numpy.trunc(value)
    if numpy.abs(value - truncated) >= 0.5:
        return truncated + numpy.copysign(type(value)(1), value)
    return truncated


@floor_scalar.register
def _(value: numpy.floating) -> Any:
    return numpy.floor(value)


@ceil_scalar.register
def _(value: numpy.floating) -> Any:
    return numpy.ceil(value)


# Casting


def _integer_bounds(kind: type) -> tuple[int, int] | None:
    if issubclass(kind, numpy.integer):
        info = numpy.iinfo(kind)
        return int(info.min), int(info.max)
    return None


def _cast_to(value: numbers.Real, kind: type[T]) -> T | None:
    if issubclass(kind, numbers.Integral):
        if isinstance(value, numbers.Integral):
            integral = int(value)
        else:
            if not math.isfinite(value):
                return None
            integral = math.trunc(value)
        bounds = _integer_bounds(kind)
        if bounds is not None and not bounds[0] <= integral <= bounds[1]:
            return None
        return kind(integral)  # type: ignore[call-arg]

    if issubclass(kind, numpy.floating):
        finite = isinstance(value, numbers.Integral) or math.isfinite(value)
        if finite and abs(value) > float(numpy.finfo(kind).max):
            return None
        return kind(value)  # type: ignore[call-arg]

    if issubclass(kind, numbers.Real):
        try:
            return kind(value)  # type: ignore[call-arg]
        except (OverflowError, ValueError):
            return None

    raise UnsupportedScalarError("Cannot cast to this type", kind=kind)


@singledispatch
def cast_scalar(value: Any, kind: type[T]) -> T | None:
    """Cast a scalar to another numeric representation.

    Floating values cast to integers are truncated toward zero. A cast that
    cannot represent the value (non-finite to integer, or outside the target
    range) yields ``None`` instead of a lossy result.

    Args:
        value: The scalar to convert.
        kind: Target numeric type.

    Returns:
        The converted value, or None if it is not representable.

    Raises:
        UnsupportedScalarError: If either type is not numeric.
    """
    raise UnsupportedScalarError("Value cannot be cast", kind=type(value))


@cast_scalar.register
def _(value: numbers.Real, kind: type[T]) -> T | None:
    result = _cast_to(value, kind)
    if result is None:
        logger.debug("Unrepresentable cast of %r to %s", value, kind.__name__)
    return result


# Arithmetic helpers


def div_scalar(numerator: Any, denominator: Any) -> Any:
    """Divide with IEEE-754 semantics.

    Python numbers raise on division by zero; this returns +/-inf or NaN
    instead, matching numpy scalars and hardware floats. A zero integer
    denominator yields a float result.
    """
    with numpy.errstate(divide="ignore", invalid="ignore"):
        try:
            return numerator / denominator
        except ZeroDivisionError:
            if numerator == 0 or math.isnan(numerator):
                return math.nan
            return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def min_scalar(x: T, y: T) -> T:
    """Return the smaller value; ``x`` on ties."""
    return x if x <= y else y  # type: ignore[operator]


def max_scalar(x: T, y: T) -> T:
    """Return the larger value; ``x`` on ties."""
    return x if x >= y else y  # type: ignore[operator]


# Trigonometry


def _apply(func: numpy.ufunc, value: Any) -> Any:
    if isinstance(value, numpy.floating):
        return func(value)
    if isinstance(value, numbers.Real):
        return float(func(float(value)))
    raise UnsupportedScalarError("Trigonometry requires a real scalar", kind=type(value))


def sin_scalar(value: Any) -> Any:
    """Sine of an angle in radians, keeping floating scalar type."""
    return _apply(numpy.sin, value)


def cos_scalar(value: Any) -> Any:
    """Cosine of an angle in radians, keeping floating scalar type."""
    return _apply(numpy.cos, value)


def tan_scalar(value: Any) -> Any:
    """Tangent of an angle in radians, keeping floating scalar type."""
    return _apply(numpy.tan, value)
