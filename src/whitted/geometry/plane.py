"""Infinite plane primitive with ray-plane intersection.

A plane is defined by a reference point ``q0`` and a unit normal. It can
also be derived from three points, in which case the normal is
``normalize((p1 - p2) x (p1 - p3))`` (right-hand rule).

Ray-plane intersection solves

    t = n . (q0 - p0) / (n . v)

and rejects rays parallel to the plane, rays starting on the plane
(including exactly at ``q0``), and hits behind the origin or beyond the
maximum distance.

Example:
    >>> from whitted.core.primitives import Point, Vector
    >>> from whitted.core.ray import Ray
    >>> floor = Plane(Point(0, 0, 0), Vector(0, 1, 0))
    >>> floor.find_intersections(Ray(Point(0, 2, 0), Vector(0, -1, 0)))
    [Point(0.0, 0.0, 0.0)]
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.primitives import Point, Vector, align_zero, is_zero
from whitted.core.ray import Ray
from whitted.geometry.intersectable import GeoPoint, Geometry


class Plane(Geometry):
    """An infinite plane.

    Args:
        q0: A reference point on the plane.
        normal: The plane normal; normalized on construction.
        **kwargs: Emission and material, see Geometry.
    """

    def __init__(self, q0: Point, normal: Vector, **kwargs) -> None:
        super().__init__(**kwargs)
        self._q0 = q0
        self._normal = normal.normalize()

    @classmethod
    def from_points(cls, p1: Point, p2: Point, p3: Point, **kwargs) -> Plane:
        """Create the plane through three points.

        Raises:
            ValueError: If two points coincide or all three are collinear.
        """
        return cls(p1, plane_normal(p1, p2, p3), **kwargs)

    @property
    def q0(self) -> Point:
        return self._q0

    @property
    def normal(self) -> Vector:
        return self._normal

    def get_normal(self, point: Point | None = None) -> Vector:
        return self._normal

    def intersect(self, ray: Ray, max_distance: float = math.inf) -> Point | None:
        """Find the single point where a ray crosses the plane, if any."""
        if self._q0 == ray.head:
            return None

        nv = align_zero(self._normal.dot(ray.direction))
        if nv == 0.0:
            return None

        numerator = align_zero(float(np.dot(self._normal.xyz, self._q0.xyz - ray.head.xyz)))
        if numerator == 0.0:
            return None

        t = align_zero(numerator / nv)
        if t <= 0.0 or align_zero(t - max_distance) > 0.0:
            return None
        return ray.point_at(t)

    def find_geo_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[GeoPoint]:
        point = self.intersect(ray, max_distance)
        if point is None:
            return []
        return [GeoPoint(self, point)]


def plane_normal(p1: Point, p2: Point, p3: Point) -> Vector:
    """Unit normal of the plane through three points.

    Raises:
        ValueError: If the points do not span a plane.
    """
    u = p1.xyz - p2.xyz
    v = p1.xyz - p3.xyz
    n = np.cross(u, v)
    length = float(np.linalg.norm(n))
    if is_zero(length):
        raise ValueError("Plane points must not be coincident or collinear")
    return Vector.from_array(n / length)
