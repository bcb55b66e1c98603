"""Sphere primitive with ray-sphere intersection.

Ray-sphere intersection uses the projection method:

    u  = center - p0
    tm = v . u                  (projection of u on the ray)
    d  = sqrt(|u|^2 - tm^2)     (distance from the center to the ray line)
    th = sqrt(r^2 - d^2)
    t1, t2 = tm - th, tm + th

A ray whose line passes at distance ``d >= r`` misses, so tangent rays
report no intersection. Roots that are not strictly positive, or lie beyond
the maximum distance, are dropped.

Example:
    >>> from whitted.core.primitives import Point, Vector
    >>> from whitted.core.ray import Ray
    >>> sphere = Sphere(Point(0, 0, -3), 1.0)
    >>> len(sphere.find_intersections(Ray(Point(0, 0, 0), Vector(0, 0, -1))))
    2
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.primitives import Point, Vector, align_zero
from whitted.core.ray import Ray
from whitted.geometry.intersectable import GeoPoint, Geometry


class Sphere(Geometry):
    """A sphere defined by its center and radius.

    Args:
        center: The center of the sphere.
        radius: The radius; must be positive.
        **kwargs: Emission and material, see Geometry.

    Raises:
        ValueError: If the radius is not positive.
    """

    def __init__(self, center: Point, radius: float, **kwargs) -> None:
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        super().__init__(**kwargs)
        self._center = center
        self._radius = float(radius)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def get_normal(self, point: Point) -> Vector:
        return (point - self._center).normalize()

    def find_geo_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[GeoPoint]:
        u = self._center.xyz - ray.head.xyz
        tm = float(np.dot(ray.direction.xyz, u))
        d_squared = max(float(np.dot(u, u)) - tm * tm, 0.0)
        r_squared = self._radius * self._radius
        if d_squared >= r_squared:
            return []

        th = math.sqrt(r_squared - d_squared)
        hits = []
        for t in (align_zero(tm - th), align_zero(tm + th)):
            if t > 0.0 and align_zero(t - max_distance) <= 0.0:
                hits.append(GeoPoint(self, ray.point_at(t)))
        return hits
