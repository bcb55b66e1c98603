"""Intersection interface shared by every shape and shape collection.

This module defines:
- Intersectable: anything a ray can be intersected with
- Geometry: an Intersectable surface with emission, material and normal
- GeoPoint: an intersection point tagged with the geometry it lies on

Intersection queries never raise for geometric degeneracies (parallel rays,
tangent hits, rays starting on a surface); they return an empty list.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from whitted.core.primitives import Color, Point, Vector
from whitted.core.ray import Ray
from whitted.materials.material import Material


@dataclass(frozen=True)
class GeoPoint:
    """An intersection point and the geometry it belongs to.

    Attributes:
        geometry: The intersected surface (compared by identity).
        point: The intersection point.
    """

    geometry: Geometry
    point: Point


class Intersectable(ABC):
    """Interface for objects that can be intersected by a ray."""

    @abstractmethod
    def find_geo_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[GeoPoint]:
        """Find the intersections of a ray with this object.

        Args:
            ray: The ray to intersect.
            max_distance: Hits farther than this from the ray origin are
                discarded. Shadow rays pass the distance to the light.

        Returns:
            All intersections within range, in no particular order. An empty
            list means the ray misses.
        """

    def find_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[Point]:
        """Find the intersection points of a ray with this object."""
        return [gp.point for gp in self.find_geo_intersections(ray, max_distance)]


class Geometry(Intersectable):
    """A surface with an emission color, a material and a normal field.

    Args:
        emission: Light emitted by the surface itself.
        material: Phong coefficients used for shading.
    """

    def __init__(self, *, emission: Color = Color.BLACK, material: Material | None = None) -> None:
        self._emission = emission
        self._material = material if material is not None else Material()

    @property
    def emission(self) -> Color:
        return self._emission

    @property
    def material(self) -> Material:
        return self._material

    @abstractmethod
    def get_normal(self, point: Point) -> Vector:
        """Return the outward unit normal at a point on the surface."""
