"""Tube (infinite cylinder) and capped Cylinder primitives.

A tube is the set of points at distance ``r`` from an axis ray
``(pa, va)``. With ``dp = p0 - pa``, the lateral intersection solves

    A = v - (v . va) va
    B = dp - (dp . va) va
    |A|^2 t^2 + 2 (A . B) t + |B|^2 - r^2 = 0

A ray parallel to the axis (``|A| ~ 0``) or tangent to the surface (zero
discriminant) misses.

A cylinder clips the tube to axial offsets ``0 < s < height`` and closes it
with two cap discs centered at ``pa`` and ``pa + height * va``. Cap points
are classified by their offset from the cap center being orthogonal to the
axis; every other surface point takes the lateral tube normal.
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.primitives import Point, Vector, align_zero, is_zero
from whitted.core.ray import Ray
from whitted.geometry.intersectable import GeoPoint, Geometry


class Tube(Geometry):
    """An infinite cylinder around an axis ray.

    The normal is undefined on the ring of points whose axial offset from
    the axis origin is zero, and ``get_normal`` raises there. A ray tracer
    shading such a hit propagates the error, so a camera level with the axis
    origin aborts the render. Place the axis origin away from visible
    regions, or use a Cylinder, whose bottom cap covers that ring.

    Args:
        radius: The tube radius; must be positive.
        axis: The axis ray (origin and unit direction).
        **kwargs: Emission and material, see Geometry.

    Raises:
        ValueError: If the radius is not positive.
    """

    def __init__(self, radius: float, axis: Ray, **kwargs) -> None:
        if radius <= 0:
            raise ValueError(f"{type(self).__name__} radius must be positive, got {radius}")
        super().__init__(**kwargs)
        self._radius = float(radius)
        self._axis = axis

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def axis(self) -> Ray:
        return self._axis

    def _axial_offset(self, point: Point) -> float:
        return float(np.dot(self._axis.direction.xyz, point.xyz - self._axis.head.xyz))

    def get_normal(self, point: Point) -> Vector:
        """Return the lateral normal at a point on the tube.

        Raises:
            ValueError: If the point projects onto the axis origin itself.
        """
        t = self._axial_offset(point)
        if is_zero(t):
            raise ValueError("Tube normal is undefined at a point projecting onto the axis origin")
        return (point - self._axis.point_at(t)).normalize()

    def _lateral_roots(self, ray: Ray) -> list[float]:
        """Positive ray parameters where the ray crosses the lateral surface."""
        va = self._axis.direction.xyz
        v = ray.direction.xyz
        dp = ray.head.xyz - self._axis.head.xyz

        a_vec = v - float(np.dot(v, va)) * va
        b_vec = dp - float(np.dot(dp, va)) * va
        a = float(np.dot(a_vec, a_vec))
        if is_zero(a):
            return []
        b = 2.0 * float(np.dot(a_vec, b_vec))
        c = float(np.dot(b_vec, b_vec)) - self._radius * self._radius

        discriminant = align_zero(b * b - 4.0 * a * c)
        if discriminant <= 0.0:
            return []
        root = math.sqrt(discriminant)
        roots = [align_zero((-b - root) / (2.0 * a)), align_zero((-b + root) / (2.0 * a))]
        return [t for t in roots if t > 0.0]

    def find_geo_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[GeoPoint]:
        return [
            GeoPoint(self, ray.point_at(t))
            for t in self._lateral_roots(ray)
            if align_zero(t - max_distance) <= 0.0
        ]


class Cylinder(Tube):
    """A finite tube of given height closed by two cap discs.

    Args:
        radius: The cylinder radius; must be positive.
        axis: The axis ray; its origin is the bottom cap center.
        height: Distance between the caps along the axis; must be positive.
        **kwargs: Emission and material, see Geometry.

    Raises:
        ValueError: If the radius or height is not positive.
    """

    def __init__(self, radius: float, axis: Ray, height: float, **kwargs) -> None:
        if height <= 0:
            raise ValueError(f"Cylinder height must be positive, got {height}")
        super().__init__(radius, axis, **kwargs)
        self._height = float(height)
        self._top_center = axis.point_at(self._height)

    @property
    def height(self) -> float:
        return self._height

    def get_normal(self, point: Point) -> Vector:
        s = self._axial_offset(point)
        if is_zero(s):
            return -self._axis.direction
        if is_zero(s - self._height):
            return self._axis.direction
        return super().get_normal(point)

    def _cap_root(self, ray: Ray, center: Point) -> float | None:
        """Ray parameter of a hit strictly inside the cap disc at ``center``."""
        va = self._axis.direction.xyz
        nv = align_zero(float(np.dot(va, ray.direction.xyz)))
        if nv == 0.0:
            return None
        t = align_zero(float(np.dot(va, center.xyz - ray.head.xyz)) / nv)
        if t <= 0.0:
            return None
        if ray.point_at(t).distance_squared(center) >= self._radius * self._radius:
            return None
        return t

    def find_geo_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[GeoPoint]:
        hits = []
        for t in self._lateral_roots(ray):
            if align_zero(t - max_distance) > 0.0:
                continue
            point = ray.point_at(t)
            s = align_zero(self._axial_offset(point))
            if 0.0 < s and align_zero(s - self._height) < 0.0:
                hits.append(GeoPoint(self, point))

        for center in (self._axis.head, self._top_center):
            t = self._cap_root(ray, center)
            if t is not None and align_zero(t - max_distance) <= 0.0:
                hits.append(GeoPoint(self, ray.point_at(t)))
        return hits
