"""Ray data structure and ray utilities.

This module provides the Ray value type used for camera, shadow, reflection
and refraction rays, together with helpers to pick the closest of a set of
intersection candidates and to build a beam of rays toward a target.

Example:
    >>> from whitted.core.primitives import Point, Vector
    >>> ray = Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, -2.0))
    >>> ray.point_at(5.0)
    Point(0.0, 0.0, -5.0)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from whitted.core.primitives import Point, Vector, is_zero

if TYPE_CHECKING:
    from whitted.geometry.intersectable import GeoPoint

# Magnitude of the offset applied to secondary ray origins along the normal
RAY_DELTA = 0.1


class Ray:
    """A ray with an origin point and a unit direction.

    The direction is normalized on construction. Two rays are equal when both
    origins and directions are equal.

    Attributes:
        head: The starting point of the ray.
        direction: The unit direction of the ray.
    """

    __slots__ = ("_head", "_direction")

    def __init__(self, head: Point, direction: Vector) -> None:
        self._head = head
        self._direction = direction.normalize()

    @classmethod
    def offset(cls, head: Point, direction: Vector, normal: Vector) -> Ray:
        """Create a secondary ray whose origin is nudged off the surface.

        The origin is moved by RAY_DELTA along ``normal``, toward the side the
        direction points to, so the new ray cannot re-hit the surface it was
        spawned from. When the direction is tangent to the surface the origin
        is left unchanged.

        Args:
            head: The surface point the ray is spawned from.
            direction: The direction of the new ray.
            normal: The surface normal at ``head``.

        Returns:
            A new Ray with the offset origin.
        """
        nv = normal.dot(direction)
        if is_zero(nv):
            return cls(head, direction)
        delta = normal * (RAY_DELTA if nv > 0 else -RAY_DELTA)
        return cls(head + delta, direction)

    @property
    def head(self) -> Point:
        return self._head

    @property
    def direction(self) -> Vector:
        return self._direction

    def point_at(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: Distance along the ray. Zero returns the origin itself.

        Returns:
            The point ``head + t * direction``.
        """
        if is_zero(t):
            return self._head
        return Point.from_array(self._head.xyz + self._direction.xyz * t)

    def find_closest_geo_point(self, candidates: Iterable[GeoPoint] | None) -> GeoPoint | None:
        """Select the candidate intersection nearest to the ray origin.

        Args:
            candidates: Geo-points to choose from. May be None or empty.

        Returns:
            The nearest geo-point, the first one encountered on ties, or None
            when there are no candidates.
        """
        if not candidates:
            return None
        closest = None
        best = float("inf")
        for candidate in candidates:
            d = self._head.distance_squared(candidate.point)
            if d < best:
                best = d
                closest = candidate
        return closest

    def find_closest_point(self, points: Iterable[Point] | None) -> Point | None:
        """Select the point nearest to the ray origin (first wins ties)."""
        if not points:
            return None
        closest = None
        best = float("inf")
        for point in points:
            d = self._head.distance_squared(point)
            if d < best:
                best = d
                closest = point
        return closest

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self._head == other._head and self._direction == other._direction

    def __hash__(self) -> int:
        return hash((self._head, self._direction))

    def __repr__(self) -> str:
        return f"Ray(head={self._head!r}, direction={self._direction!r})"


def beam_of_rays(points: Sequence[Point], target: Point) -> list[Ray]:
    """Build one ray from each point toward a common target.

    Points that coincide with the target are skipped since no direction can
    be formed from them.

    Args:
        points: Ray origins, e.g. sample points on a lens aperture.
        target: The point every ray passes through.

    Returns:
        A list of rays, one per usable origin.
    """
    rays = []
    for point in points:
        if point == target:
            continue
        rays.append(Ray(point, target - point))
    return rays
