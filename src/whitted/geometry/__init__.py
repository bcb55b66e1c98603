"""Geometry module for shape primitives and intersection algorithms.

Components:
    intersectable: Intersectable / Geometry interfaces and the GeoPoint record
    plane: Infinite plane
    sphere: Sphere
    polygon: Convex polygon and triangle
    tube: Infinite tube and capped cylinder
    geometries: Composite collection with linear-scan intersection

Every shape implements

    find_geo_intersections(ray, max_distance=math.inf) -> list[GeoPoint]

returning an empty list when the ray misses. Geometric degeneracies (parallel
or tangent rays, rays starting on the surface) are reported as misses, never
raised. Closest-hit selection is left to ``Ray.find_closest_geo_point``.
"""

from .geometries import Geometries
from .intersectable import GeoPoint, Geometry, Intersectable
from .plane import Plane
from .polygon import Polygon, Triangle
from .sphere import Sphere
from .tube import Cylinder, Tube

__all__ = [
    "Intersectable",
    "Geometry",
    "GeoPoint",
    "Geometries",
    "Plane",
    "Sphere",
    "Polygon",
    "Triangle",
    "Tube",
    "Cylinder",
]
