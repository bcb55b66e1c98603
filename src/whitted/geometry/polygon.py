"""Convex polygon and triangle primitives.

A polygon is an ordered list of at least three coplanar vertices forming a
convex outline. Intersection first finds the hit on the containing plane,
then checks that the ray passes inside every edge:

For each edge (a, b), the side normal ``n_i = (a - p0) x (b - p0)`` is
formed relative to the ray origin ``p0``. The ray is inside the polygon
when ``v . n_i`` is non-zero and has the same sign for all edges. A zero
value means the ray grazes an edge or vertex and counts as a miss.

Example:
    >>> from whitted.core.primitives import Point, Vector
    >>> from whitted.core.ray import Ray
    >>> tri = Triangle(Point(1, 0, 0), Point(-1, 0, 0), Point(0, 1, 0))
    >>> len(tri.find_intersections(Ray(Point(0, 0.5, -1), Vector(0, 0, 1))))
    1
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.primitives import Point, Vector, align_zero, is_zero
from whitted.core.ray import Ray
from whitted.geometry.intersectable import GeoPoint, Geometry
from whitted.geometry.plane import Plane, plane_normal


class Polygon(Geometry):
    """A convex planar polygon.

    Args:
        *vertices: The vertices in edge order.
        **kwargs: Emission and material, see Geometry.

    Raises:
        ValueError: If fewer than three vertices are given, or the vertices
            are not coplanar, or the outline is not convex.
    """

    def __init__(self, *vertices: Point, **kwargs) -> None:
        if len(vertices) < 3:
            raise ValueError("A polygon must have at least 3 vertices")
        super().__init__(**kwargs)
        self._vertices = tuple(vertices)
        normal = plane_normal(vertices[0], vertices[1], vertices[2])
        self._plane = Plane(vertices[0], normal)
        if len(vertices) > 3:
            _check_convex_coplanar(self._vertices, normal)

    @property
    def vertices(self) -> tuple[Point, ...]:
        return self._vertices

    @property
    def plane(self) -> Plane:
        return self._plane

    def get_normal(self, point: Point | None = None) -> Vector:
        return self._plane.normal

    def find_geo_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[GeoPoint]:
        point = self._plane.intersect(ray, max_distance)
        if point is None:
            return []

        head = ray.head.xyz
        direction = ray.direction.xyz
        sign = 0.0
        count = len(self._vertices)
        for i in range(count):
            a = self._vertices[i].xyz - head
            b = self._vertices[(i + 1) % count].xyz - head
            side = np.cross(a, b)
            length = float(np.linalg.norm(side))
            if is_zero(length):
                return []
            s = align_zero(float(np.dot(direction, side)) / length)
            if s == 0.0 or s * sign < 0.0:
                return []
            sign = s
        return [GeoPoint(self, point)]


class Triangle(Polygon):
    """A triangle, the three-vertex polygon."""

    def __init__(self, p1: Point, p2: Point, p3: Point, **kwargs) -> None:
        super().__init__(p1, p2, p3, **kwargs)


def _check_convex_coplanar(vertices: tuple[Point, ...], normal: Vector) -> None:
    n = normal.xyz
    origin = vertices[0].xyz
    count = len(vertices)

    edge1 = vertices[-1].xyz - vertices[-2].xyz
    edge2 = vertices[0].xyz - vertices[-1].xyz
    positive = float(np.dot(np.cross(edge1, edge2), n)) > 0.0
    for i in range(1, count):
        if not is_zero(float(np.dot(vertices[i].xyz - origin, n))):
            raise ValueError("All polygon vertices must lie in the same plane")
        edge1 = edge2
        edge2 = vertices[i].xyz - vertices[i - 1].xyz
        if positive != (float(np.dot(np.cross(edge1, edge2), n)) > 0.0):
            raise ValueError("Polygon vertices must form a convex outline")
