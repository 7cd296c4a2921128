"""4x4 homogeneous transform matrices for typedgeom.

Matrices use the row-vector convention: a point is a row ``[x, y, z, 1]``
multiplied on the left of the matrix, so the translation lives in the
fourth row (m41, m42, m43). ``a.mul(b)`` is the matrix that applies ``a``
first and then ``b``, and the chaining builders (``translate``, ``scale``,
``rotate``, ``skew``) append their transform after the receiver's:

    >>> m = Matrix4.identity().translate(10.0, 0.0, 0.0).scale(2.0, 2.0, 1.0)
    >>> str(m.transform_point(Point2D(x=1.0, y=1.0)))
    '(22.0,2.0)'

No construction helper validates its inputs. Rotation axes must be
normalized by the caller, and a zero-extent orthographic box or a zero
perspective distance produces non-finite fields rather than an error.
"""

from __future__ import annotations

from typing import Any, Generic, Self

from pydantic import BaseModel

from typedgeom import num
from typedgeom.approxeq import approx_eq
from typedgeom.geometry.components import T
from typedgeom.geometry.point import Point2D

FIELD_NAMES = (
    "m11", "m12", "m13", "m14",
    "m21", "m22", "m23", "m24",
    "m31", "m32", "m33", "m34",
    "m41", "m42", "m43", "m44",
)  # fmt: skip


class Matrix4(BaseModel, Generic[T], frozen=True):
    """A 4x4 homogeneous transform matrix with 16 named fields.

    Field ``mRC`` is row R, column C. There is no invariant on determinant
    or orthogonality.
    """

    m11: T
    m12: T
    m13: T
    m14: T
    m21: T
    m22: T
    m23: T
    m24: T
    m31: T
    m32: T
    m33: T
    m34: T
    m41: T
    m42: T
    m43: T
    m44: T

    @classmethod
    def from_tuple(cls, values: tuple[Any, ...]) -> Self:
        """Create a matrix from 16 values in row-major order."""
        if len(values) != len(FIELD_NAMES):
            raise ValueError(f"Matrix4 expects 16 values, got {len(values)}")
        return cls(**dict(zip(FIELD_NAMES, values, strict=True)))

    def to_tuple(self) -> tuple[T, ...]:
        """Return the 16 fields in row-major order."""
        return tuple(getattr(self, name) for name in FIELD_NAMES)

    def rows(self) -> tuple[tuple[T, T, T, T], ...]:
        """Return the matrix as four row tuples."""
        values = self.to_tuple()
        return tuple(
            (values[i], values[i + 1], values[i + 2], values[i + 3]) for i in range(0, 16, 4)
        )

    # Construction

    @classmethod
    def identity(cls, kind: type[Any] = float) -> Self:
        """The multiplicative identity matrix."""
        _0, _1 = num.zero(kind), num.one(kind)
        return cls.from_tuple(
            (
                _1, _0, _0, _0,
                _0, _1, _0, _0,
                _0, _0, _1, _0,
                _0, _0, _0, _1,
            )
        )  # fmt: skip

    @classmethod
    def create_translation(cls, x: T, y: T, z: T) -> Self:
        """Create a 3D translation matrix."""
        _0, _1 = num.zero_like(x), num.one_like(x)
        return cls.from_tuple(
            (
                _1, _0, _0, _0,
                _0, _1, _0, _0,
                _0, _0, _1, _0,
                x,  y,  z,  _1,
            )
        )  # fmt: skip

    @classmethod
    def create_scale(cls, x: T, y: T, z: T) -> Self:
        """Create a 3D scale matrix."""
        _0, _1 = num.zero_like(x), num.one_like(x)
        return cls.from_tuple(
            (
                x,  _0, _0, _0,
                _0, y,  _0, _0,
                _0, _0, z,  _0,
                _0, _0, _0, _1,
            )
        )  # fmt: skip

    @classmethod
    def create_rotation(cls, x: T, y: T, z: T, theta: T) -> Self:
        """Create a 3D rotation matrix from an axis and an angle.

        Uses the half-angle (quaternion) form: sin and cos of theta/2 are
        computed once and every entry is built from their products.

        Args:
            x: Axis x component.
            y: Axis y component.
            z: Axis z component.
            theta: Rotation angle in radians.

        Returns:
            The rotation matrix. The axis must already be normalized;
            otherwise the result is silently non-orthogonal.
        """
        _0, _1 = num.zero_like(theta), num.one_like(theta)
        _2 = _1 + _1
        half = _1 / _2

        xx = x * x  # type: ignore[operator]
        yy = y * y  # type: ignore[operator]
        zz = z * z  # type: ignore[operator]

        half_theta = theta * half  # type: ignore[operator]
        sin_half = num.sin_scalar(half_theta)
        cos_half = num.cos_scalar(half_theta)
        sc = sin_half * cos_half
        sq = sin_half * sin_half

        return cls.from_tuple(
            (
                _1 - _2 * (yy + zz) * sq,
                _2 * (x * y * sq - z * sc),  # type: ignore[operator]
                _2 * (x * z * sq + y * sc),  # type: ignore[operator]
                _0,
                _2 * (x * y * sq + z * sc),  # type: ignore[operator]
                _1 - _2 * (xx + zz) * sq,
                _2 * (y * z * sq - x * sc),  # type: ignore[operator]
                _0,
                _2 * (x * z * sq - y * sc),  # type: ignore[operator]
                _2 * (y * z * sq + x * sc),  # type: ignore[operator]
                _1 - _2 * (xx + yy) * sq,
                _0,
                _0,
                _0,
                _0,
                _1,
            )
        )

    @classmethod
    def create_skew(cls, alpha: T, beta: T) -> Self:
        """Create a 2D skew matrix.

        ``alpha`` skews along the x axis and ``beta`` along the y axis, as
        in the CSS ``skew(alpha, beta)`` transform function.
        """
        _0, _1 = num.zero_like(alpha), num.one_like(alpha)
        return cls.from_tuple(
            (
                _1,                    num.tan_scalar(beta), _0, _0,
                num.tan_scalar(alpha), _1,                   _0, _0,
                _0,                    _0,                   _1, _0,
                _0,                    _0,                   _0, _1,
            )
        )  # fmt: skip

    @classmethod
    def create_perspective(cls, d: T) -> Self:
        """Create a simple perspective projection at distance ``d``."""
        _0, _1 = num.zero_like(d), num.one_like(d)
        return cls.from_tuple(
            (
                _1, _0, _0, _0,
                _0, _1, _0, _0,
                _0, _0, _1, num.div_scalar(-_1, d),
                _0, _0, _0, _1,
            )
        )  # fmt: skip

    @classmethod
    def ortho(cls, left: T, right: T, bottom: T, top: T, near: T, far: T) -> Self:
        """Create an orthographic projection.

        Maps the box ``[left, right] x [bottom, top] x [near, far]`` onto
        the canonical ``[-1, 1]`` clip volume.
        """
        _0, _1 = num.zero_like(left), num.one_like(left)
        _2 = _1 + _1
        width = right - left  # type: ignore[operator]
        height = top - bottom  # type: ignore[operator]
        depth = far - near  # type: ignore[operator]

        tx = -num.div_scalar(right + left, width)  # type: ignore[operator]
        ty = -num.div_scalar(top + bottom, height)  # type: ignore[operator]
        tz = -num.div_scalar(far + near, depth)  # type: ignore[operator]

        return cls.from_tuple(
            (
                num.div_scalar(_2, width), _0, _0, _0,
                _0, num.div_scalar(_2, height), _0, _0,
                _0, _0, num.div_scalar(-_2, depth), _0,
                tx, ty, tz, _1,
            )
        )  # fmt: skip

    # Composition

    def mul(self, other: Matrix4[T]) -> Matrix4[T]:
        """Compose two transforms: the result applies ``self``, then ``other``."""
        a = self.rows()
        b = other.rows()
        return Matrix4.from_tuple(
            tuple(
                a[row][0] * b[0][col]
                + a[row][1] * b[1][col]
                + a[row][2] * b[2][col]
                + a[row][3] * b[3][col]
                for row in range(4)
                for col in range(4)
            )
        )

    def mul_s(self, factor: T) -> Matrix4[T]:
        """Multiply every field by a scalar."""
        return Matrix4.from_tuple(tuple(value * factor for value in self.to_tuple()))  # type: ignore[operator]

    def translate(self, x: T, y: T, z: T) -> Matrix4[T]:
        """Apply a translation after this transform."""
        return self.mul(Matrix4.create_translation(x, y, z))

    def scale(self, x: T, y: T, z: T) -> Matrix4[T]:
        """Apply a scale after this transform.

        This is a full composition, so translation fields are scaled too;
        it is not a diagonal-only multiply of m11, m22 and m33.
        """
        return self.mul(Matrix4.create_scale(x, y, z))

    def rotate(self, x: T, y: T, z: T, theta: T) -> Matrix4[T]:
        """Apply a rotation about a normalized axis after this transform."""
        return self.mul(Matrix4.create_rotation(x, y, z, theta))

    def skew(self, alpha: T, beta: T) -> Matrix4[T]:
        """Apply a 2D skew after this transform."""
        return self.mul(Matrix4.create_skew(alpha, beta))

    def transform_point(self, point: Point2D[T]) -> Point2D[T]:
        """Return the given 2D point transformed by this matrix.

        Only the 2D affine block (m11, m12, m21, m22, m41, m42) is used;
        z and w are ignored.
        """
        return Point2D(
            x=point.x * self.m11 + point.y * self.m21 + self.m41,  # type: ignore[operator]
            y=point.x * self.m12 + point.y * self.m22 + self.m42,  # type: ignore[operator]
        )

    def approx_eq(self, other: Matrix4[T], epsilon: float | None = None) -> bool:
        """True iff every pair of corresponding fields is approximately equal.

        Args:
            other: Matrix to compare against.
            epsilon: Tolerance override. Defaults to settings.APPROX_EPSILON.
        """
        return all(
            approx_eq(mine, theirs, epsilon)
            for mine, theirs in zip(self.to_tuple(), other.to_tuple(), strict=True)
        )

    def __str__(self) -> str:
        rows = ", ".join("(" + ",".join(str(v) for v in row) + ")" for row in self.rows())
        return f"Matrix4({rows})"
