"""Shared componentwise behaviour for fixed-arity geometry tuples.

Points and sizes are frozen Pydantic models whose fields are all of the
same scalar type. Every arithmetic or conversion operation maps a scalar
function over the fields in declaration order and builds a new instance,
so subclasses only declare their fields.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self, TypeVar

from pydantic import BaseModel

from typedgeom import num
from typedgeom.exceptions import UnsupportedScalarError
from typedgeom.length import Length

# Shared by every generic geometry model so nested annotations such as
# Point2D[T] resolve to the unparametrized class.
T = TypeVar("T")


class Components(BaseModel, frozen=True):
    """Base class for tuples of scalars supporting componentwise arithmetic."""

    @classmethod
    def component_names(cls) -> tuple[str, ...]:
        """Field names in declaration order."""
        return tuple(cls.model_fields)

    def components(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.component_names())

    def to_tuple(self) -> tuple[Any, ...]:
        """Convert to a plain tuple of components."""
        return self.components()

    @classmethod
    def from_tuple(cls, values: tuple[Any, ...]) -> Self:
        """Create an instance from a tuple of components."""
        names = cls.component_names()
        if len(values) != len(names):
            raise ValueError(f"{cls.__name__} expects {len(names)} components, got {len(values)}")
        return cls(**dict(zip(names, values, strict=True)))

    @classmethod
    def zero(cls, kind: type[Any] = int) -> Self:
        """Instance with every component equal to ``kind``'s additive identity."""
        value = num.zero(kind)
        return cls(**{name: value for name in cls.component_names()})

    def map(self, func: Callable[[Any], Any]) -> Self:
        """Apply ``func`` to every component."""
        return type(self)(**{name: func(getattr(self, name)) for name in self.component_names()})

    def _zip_with(self, other: Self, func: Callable[[Any, Any], Any]) -> Self:
        return type(self)(
            **{
                name: func(getattr(self, name), getattr(other, name))
                for name in self.component_names()
            }
        )

    def __add__(self, other: object) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self._zip_with(other, lambda a, b: a + b)  # type: ignore[arg-type]

    def __sub__(self, other: object) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self._zip_with(other, lambda a, b: a - b)  # type: ignore[arg-type]

    def __neg__(self) -> Self:
        return self.map(lambda a: -a)

    def __mul__(self, factor: object) -> Self:
        if isinstance(factor, Components):
            return NotImplemented
        return self.map(lambda a: a * factor)

    def __rmul__(self, factor: object) -> Self:
        if isinstance(factor, Components):
            return NotImplemented
        return self.map(lambda a: factor * a)

    def __truediv__(self, divisor: object) -> Self:
        if isinstance(divisor, Components):
            return NotImplemented
        return self.map(lambda a: a / divisor)

    def round(self) -> Self:
        """Round every component, halfway cases away from zero."""
        return self.map(num.round_scalar)

    def floor(self) -> Self:
        return self.map(num.floor_scalar)

    def ceil(self) -> Self:
        return self.map(num.ceil_scalar)

    def cast(self, kind: type[Any]) -> Self | None:
        """Cast every component to another numeric type.

        Unit tags on length components are preserved.

        Returns:
            The cast instance, or None if any component is not representable.
        """
        values = {}
        for name in self.component_names():
            value = num.cast_scalar(getattr(self, name), kind)
            if value is None:
                return None
            values[name] = value
        return type(self)(**values)

    def to_untyped(self) -> Self:
        """Drop the units of length components, keeping the raw scalars.

        Raises:
            UnsupportedScalarError: If a component is not a Length.
        """
        return self.map(_untyped)

    @classmethod
    def from_untyped(cls, value: Self, unit: type[Any]) -> Self:
        """Tag every component of a unitless instance with ``unit``."""
        return cls(**{name: Length(getattr(value, name), unit) for name in cls.component_names()})


def _untyped(value: Any) -> Any:
    if not isinstance(value, Length):
        raise UnsupportedScalarError("Component is not a unit-tagged length", kind=type(value))
    return value.get()
