"""Unit tests for unit-tagged lengths and scale factors."""

from __future__ import annotations

import dataclasses
import math

import pytest

from typedgeom.exceptions import UnitMismatchError
from typedgeom.length import Length, ScaleFactor, UnknownUnit


class CssPixel:
    pass


class DevicePixel:
    pass


class TestLength:
    """Tests for the Length type."""

    def test_creation(self) -> None:
        length = Length(2.0, CssPixel)
        assert length.get() == 2.0
        assert length.value == 2.0
        assert length.unit is CssPixel

    def test_default_unit(self) -> None:
        assert Length(1).unit is UnknownUnit

    def test_zero(self) -> None:
        assert Length.zero(CssPixel) == Length(0.0, CssPixel)
        assert Length.zero(CssPixel, int) == Length(0, CssPixel)

    def test_add_and_subtract_same_unit(self) -> None:
        a = Length(3.0, CssPixel)
        b = Length(1.5, CssPixel)
        assert a + b == Length(4.5, CssPixel)
        assert a - b == Length(1.5, CssPixel)

    def test_add_different_units_raises(self) -> None:
        with pytest.raises(UnitMismatchError, match="Cannot add"):
            Length(1.0, CssPixel) + Length(1.0, DevicePixel)

    def test_subtract_different_units_raises(self) -> None:
        with pytest.raises(UnitMismatchError, match="Cannot subtract"):
            Length(1.0, CssPixel) - Length(1.0, DevicePixel)

    def test_add_bare_scalar_rejected(self) -> None:
        with pytest.raises(TypeError):
            Length(1.0, CssPixel) + 1.0  # type: ignore[operator]

    def test_negation(self) -> None:
        assert -Length(2, CssPixel) == Length(-2, CssPixel)

    def test_scalar_multiplication_keeps_unit(self) -> None:
        assert Length(2.0, CssPixel) * 3 == Length(6.0, CssPixel)
        assert 3 * Length(2.0, CssPixel) == Length(6.0, CssPixel)
        assert Length(6.0, CssPixel) / 3 == Length(2.0, CssPixel)

    def test_ratio_of_lengths_is_bare_scalar(self) -> None:
        assert Length(6.0, CssPixel) / Length(3.0, CssPixel) == 2.0

    def test_ratio_of_different_units_raises(self) -> None:
        with pytest.raises(UnitMismatchError):
            Length(6.0, CssPixel) / Length(3.0, DevicePixel)

    def test_ordering(self) -> None:
        small = Length(1.0, CssPixel)
        large = Length(2.0, CssPixel)
        assert small < large
        assert small <= small
        assert large > small
        assert large >= large

    def test_ordering_different_units_raises(self) -> None:
        with pytest.raises(UnitMismatchError, match="Cannot compare"):
            _ = Length(1.0, CssPixel) < Length(2.0, DevicePixel)

    def test_ordering_against_bare_scalar_rejected(self) -> None:
        with pytest.raises(TypeError):
            _ = Length(1.0, CssPixel) < 5  # type: ignore[operator]
        with pytest.raises(TypeError):
            _ = 5 >= Length(1.0, CssPixel)  # type: ignore[operator]

    def test_equality_respects_unit(self) -> None:
        assert Length(1.0, CssPixel) == Length(1.0, CssPixel)
        assert Length(1.0, CssPixel) != Length(1.0, DevicePixel)

    def test_hashable(self) -> None:
        assert len({Length(1.0, CssPixel), Length(1.0, CssPixel)}) == 1

    def test_frozen(self) -> None:
        length = Length(1.0, CssPixel)
        with pytest.raises(dataclasses.FrozenInstanceError):
            length.value = 2.0  # type: ignore[misc]

    def test_cast(self) -> None:
        assert Length(3.7, CssPixel).cast(int) == Length(3, CssPixel)
        assert Length(math.nan, CssPixel).cast(int) is None

    def test_str(self) -> None:
        assert str(Length(2.5, CssPixel)) == "2.5"


class TestScaleFactor:
    """Tests for unit conversion through ScaleFactor."""

    def test_multiply_converts_units(self) -> None:
        scale = ScaleFactor(1.5, CssPixel, DevicePixel)
        assert Length(2.0, CssPixel) * scale == Length(3.0, DevicePixel)

    def test_divide_converts_back(self) -> None:
        scale = ScaleFactor(1.5, CssPixel, DevicePixel)
        assert Length(3.0, DevicePixel) / scale == Length(2.0, CssPixel)

    def test_wrong_source_unit_raises(self) -> None:
        scale = ScaleFactor(1.5, CssPixel, DevicePixel)
        with pytest.raises(UnitMismatchError):
            Length(2.0, DevicePixel) * scale
        with pytest.raises(UnitMismatchError):
            Length(2.0, CssPixel) / scale

    def test_inverse(self) -> None:
        scale = ScaleFactor(2.0, CssPixel, DevicePixel)
        assert scale.inv() == ScaleFactor(0.5, DevicePixel, CssPixel)
        assert scale.get() == 2.0

    def test_bare_scalars_use_raw_ratio(self) -> None:
        scale = ScaleFactor(1.5, CssPixel, DevicePixel)
        assert 4.0 * scale == 6.0
        assert 3.0 / scale == 2.0
