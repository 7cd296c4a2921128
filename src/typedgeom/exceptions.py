"""Custom exceptions for typedgeom.

Geometry operations are total over legal values, so the only errors raised
are misuse of the scalar layer: mixing coordinate spaces, or asking for a
capability a scalar type does not provide.
"""

from __future__ import annotations

from typing import Any


def _unit_name(unit: Any) -> str:
    return getattr(unit, "__name__", repr(unit))


class GeometryError(Exception):
    """Base exception for all typedgeom errors."""

    def __init__(self, message: str) -> None:
        """Initialize geometry error.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class UnitMismatchError(GeometryError, TypeError):
    """Raised when two values tagged with different units are combined.

    Lengths, points, and rects in different coordinate spaces can only be
    combined after an explicit conversion (``to_untyped`` or a
    ``ScaleFactor``).

    Attributes:
        expected: Unit marker of the left-hand operand.
        actual: Unit marker of the right-hand operand.
    """

    def __init__(self, message: str, *, expected: Any, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    def _format_message(self) -> str:
        return (
            f"{self.message} "
            f"(expected={_unit_name(self.expected)}, actual={_unit_name(self.actual)})"
        )


class UnsupportedScalarError(GeometryError, TypeError):
    """Raised when a scalar type lacks a required capability.

    Attributes:
        kind: The scalar type (or value type) that was rejected.
    """

    def __init__(self, message: str, *, kind: Any) -> None:
        self.kind = kind
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} (kind={_unit_name(self.kind)})"
