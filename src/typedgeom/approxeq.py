"""Approximate equality for scalars.

Tolerance comparison is the canonical way to test values produced by
floating-point transforms. Integers always compare exactly; real values
compare within an absolute epsilon, which defaults to
``settings.APPROX_EPSILON``.
"""

from __future__ import annotations

import numbers
from functools import singledispatch
from typing import Any

from typedgeom.config import settings
from typedgeom.exceptions import UnsupportedScalarError

__all__ = ["approx_eq", "resolve_epsilon"]


def resolve_epsilon(epsilon: float | None) -> float:
    """Return ``epsilon``, or the configured tolerance when it is None."""
    return settings.APPROX_EPSILON if epsilon is None else epsilon


@singledispatch
def approx_eq(a: Any, b: Any, epsilon: float | None = None) -> bool:
    """Check whether two scalars are equal within a tolerance.

    Args:
        a: First scalar.
        b: Second scalar, of the same family as ``a``.
        epsilon: Absolute tolerance. Defaults to settings.APPROX_EPSILON.

    Returns:
        True if ``|a - b| < epsilon`` (exact equality for integers).
        NaN is never approximately equal to anything.

    Raises:
        UnsupportedScalarError: If ``a`` is not a supported scalar.
    """
    raise UnsupportedScalarError("Value has no approximate equality", kind=type(a))


@approx_eq.register
def _(a: numbers.Integral, b: Any, epsilon: float | None = None) -> bool:
    if isinstance(b, numbers.Integral):
        return bool(a == b)
    return _approx_eq_real(a, b, epsilon)


@approx_eq.register
def _(a: numbers.Real, b: Any, epsilon: float | None = None) -> bool:
    return _approx_eq_real(a, b, epsilon)


def _approx_eq_real(a: Any, b: Any, epsilon: float | None) -> bool:
    return bool(abs(a - b) < resolve_epsilon(epsilon))
