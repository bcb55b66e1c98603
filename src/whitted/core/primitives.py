"""Numeric primitives: points, vectors, coefficient triples and colors.

This module provides the immutable 3-component value types consumed by every
other part of the ray tracer. All of them are backed by read-only NumPy
float64 arrays and compare exactly (coordinate-wise), while geometric code
uses the tolerance helpers ``is_zero`` and ``align_zero`` for "effectively
zero" decisions.

Types:
    Point: A location in 3D space.
    Vector: A non-zero direction (construction fails on the zero vector).
    Double3: Per-channel coefficient triple (material kD/kS/kT/kR).
    Color: Unbounded RGB radiance on the 0-255 display scale.

Example:
    >>> from whitted.core.primitives import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, 2.0)
    >>> p + v.normalize()
    Point(1.0, 2.0, 4.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import ClassVar

import numpy as np
import numpy.typing as npt

# Absolute tolerance below which a value is treated as zero
ZERO_TOLERANCE = 1e-10


def is_zero(value: float) -> bool:
    """Check whether a value is effectively zero.

    Args:
        value: The value to test.

    Returns:
        True if ``abs(value)`` is below ZERO_TOLERANCE.
    """
    return abs(value) < ZERO_TOLERANCE


def align_zero(value: float) -> float:
    """Snap a near-zero value to exactly zero.

    Args:
        value: The value to align.

    Returns:
        0.0 if the value is effectively zero, otherwise the value unchanged.
    """
    return 0.0 if is_zero(value) else value


def _frozen(values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Copy values into a read-only float64 array of shape (3,)."""
    array = np.array(values, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {array.shape}")
    array.flags.writeable = False
    return array


# =============================================================================
# Point and Vector
# =============================================================================


class Point:
    """An immutable point in 3D Cartesian space.

    Points support ``point + vector -> Point`` and ``point - point -> Vector``.
    Equality is exact and coordinate-wise.
    """

    __slots__ = ("_xyz",)

    ZERO: ClassVar[Point]

    def __init__(self, x: float, y: float, z: float) -> None:
        self._xyz = _frozen((x, y, z))
        self._validate()

    @classmethod
    def from_array(cls, xyz: npt.ArrayLike) -> Point:
        """Create an instance from any 3-element array-like."""
        obj = cls.__new__(cls)
        obj._xyz = _frozen(xyz)
        obj._validate()
        return obj

    def _validate(self) -> None:
        """Check construction invariants (none for a plain point)."""

    @property
    def x(self) -> float:
        return float(self._xyz[0])

    @property
    def y(self) -> float:
        return float(self._xyz[1])

    @property
    def z(self) -> float:
        return float(self._xyz[2])

    @property
    def xyz(self) -> npt.NDArray[np.float64]:
        """The read-only coordinate array."""
        return self._xyz

    def __iter__(self) -> Iterator[float]:
        return iter(self._xyz.tolist())

    def __add__(self, vector: Vector) -> Point:
        if not isinstance(vector, Vector):
            return NotImplemented
        return type(self).from_array(self._xyz + vector._xyz)

    def __sub__(self, other: Point) -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector.from_array(self._xyz - other._xyz)

    def distance_squared(self, other: Point) -> float:
        """Squared Euclidean distance to another point."""
        diff = self._xyz - other._xyz
        return float(np.dot(diff, diff))

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.distance_squared(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._xyz, other._xyz))

    def __hash__(self) -> int:
        return hash(tuple(self._xyz.tolist()))

    def __repr__(self) -> str:
        x, y, z = self._xyz.tolist()
        return f"{type(self).__name__}({x}, {y}, {z})"


class Vector(Point):
    """A non-zero direction in 3D space.

    Any operation whose result would be the zero vector raises ValueError,
    so callers computing a possibly-degenerate direction must guard it.
    """

    __slots__ = ()

    def _validate(self) -> None:
        if not np.any(self._xyz):
            raise ValueError("Vector ZERO is not allowed")

    def __mul__(self, scalar: float) -> Vector:
        return Vector.from_array(self._xyz * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector.from_array(-self._xyz)

    def scale(self, scalar: float) -> Vector:
        """Return this vector multiplied by a scalar."""
        return self * scalar

    def dot(self, other: Vector) -> float:
        """Dot product with another vector."""
        return float(np.dot(self._xyz, other._xyz))

    def cross(self, other: Vector) -> Vector:
        """Cross product ``self x other``.

        Raises:
            ValueError: If the vectors are parallel (the product is zero).
        """
        a1, a2, a3 = self._xyz.tolist()
        b1, b2, b3 = other._xyz.tolist()
        return Vector(a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1)

    def length_squared(self) -> float:
        return float(np.dot(self._xyz, self._xyz))

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector:
        """Return the unit vector with the same direction."""
        return Vector.from_array(self._xyz / self.length())

    def rotate(self, axis: Vector, degrees: float) -> Vector:
        """Rotate this vector around an axis using Rodrigues' formula.

        Args:
            axis: The rotation axis (need not be normalized).
            degrees: Rotation angle in degrees, counter-clockwise when looking
                down the axis toward the origin.

        Returns:
            The rotated vector.
        """
        theta = math.radians(degrees)
        k = axis.normalize()._xyz
        v = self._xyz
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        k_cross_v = np.array(
            (k[1] * v[2] - k[2] * v[1], k[2] * v[0] - k[0] * v[2], k[0] * v[1] - k[1] * v[0])
        )
        rotated = v * cos_t + k_cross_v * sin_t + k * float(np.dot(k, v)) * (1.0 - cos_t)
        return Vector.from_array(rotated)


Point.ZERO = Point(0.0, 0.0, 0.0)


# =============================================================================
# Coefficients and Colors
# =============================================================================


class Double3:
    """An immutable triple of per-channel coefficients.

    Used for material reflectance coefficients and for the accumulated
    contribution weight carried through recursive shading.
    """

    __slots__ = ("_d",)

    ZERO: ClassVar[Double3]
    ONE: ClassVar[Double3]

    def __init__(self, d1: float, d2: float | None = None, d3: float | None = None) -> None:
        if d2 is None and d3 is None:
            d2 = d3 = d1
        elif d2 is None or d3 is None:
            raise TypeError("Double3 takes either one or three components")
        self._d = _frozen((d1, d2, d3))

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Double3:
        obj = cls.__new__(cls)
        obj._d = _frozen(values)
        return obj

    @classmethod
    def coerce(cls, value: Double3 | float | Sequence[float]) -> Double3:
        """Build a Double3 from a scalar, a 3-sequence or an existing Double3."""
        if isinstance(value, Double3):
            return value
        if isinstance(value, (int, float)):
            return cls(float(value))
        return cls.from_array(value)

    @property
    def values(self) -> tuple[float, float, float]:
        d1, d2, d3 = self._d.tolist()
        return d1, d2, d3

    def __iter__(self) -> Iterator[float]:
        return iter(self._d.tolist())

    def __add__(self, other: Double3) -> Double3:
        return Double3.from_array(self._d + other._d)

    def __mul__(self, other: Double3 | float) -> Double3:
        if isinstance(other, Double3):
            return Double3.from_array(self._d * other._d)
        return Double3.from_array(self._d * other)

    def scale(self, factor: float) -> Double3:
        return Double3.from_array(self._d * factor)

    def reduce(self, divisor: float) -> Double3:
        return Double3.from_array(self._d / divisor)

    def lower_than(self, k: float) -> bool:
        """Check whether every channel is strictly below ``k``."""
        return bool(np.all(self._d < k))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Double3):
            return NotImplemented
        return bool(np.array_equal(self._d, other._d))

    def __hash__(self) -> int:
        return hash(self.values)

    def __repr__(self) -> str:
        return f"Double3{self.values}"


Double3.ZERO = Double3(0.0)
Double3.ONE = Double3(1.0)


class Color:
    """Unbounded RGB radiance.

    Channels use the 0-255 display scale but are not clamped; accumulated
    highlights may exceed 255 and are clamped by the image sink.
    """

    __slots__ = ("_rgb",)

    BLACK: ClassVar[Color]

    def __init__(self, r: float, g: float, b: float) -> None:
        self._rgb = _frozen((r, g, b))

    @classmethod
    def from_array(cls, rgb: npt.ArrayLike) -> Color:
        obj = cls.__new__(cls)
        obj._rgb = _frozen(rgb)
        return obj

    @property
    def rgb(self) -> tuple[float, float, float]:
        r, g, b = self._rgb.tolist()
        return r, g, b

    @property
    def array(self) -> npt.NDArray[np.float64]:
        """The read-only channel array."""
        return self._rgb

    def add(self, *colors: Color) -> Color:
        """Return the channel-wise sum of this color and ``colors``."""
        total = self._rgb.copy()
        for color in colors:
            total += color._rgb
        return Color.from_array(total)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._rgb + other._rgb)

    def scale(self, k: float | Double3) -> Color:
        """Scale by a scalar or channel-wise by a coefficient triple."""
        if isinstance(k, Double3):
            return Color.from_array(self._rgb * k._d)
        return Color.from_array(self._rgb * k)

    def reduce(self, k: float) -> Color:
        """Divide every channel by ``k``.

        Raises:
            ZeroDivisionError: If ``k`` is zero.
        """
        if k == 0:
            raise ZeroDivisionError("Cannot reduce a color by zero")
        return Color.from_array(self._rgb / k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.array_equal(self._rgb, other._rgb))

    def __hash__(self) -> int:
        return hash(self.rgb)

    def __repr__(self) -> str:
        return f"Color{self.rgb}"


Color.BLACK = Color(0.0, 0.0, 0.0)
