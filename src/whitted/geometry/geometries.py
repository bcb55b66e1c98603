"""Composite collection of intersectables.

Geometries fans a ray query out to every child with a linear scan and
concatenates the results. Children may themselves be Geometries.

A collection accepts children until it is sealed. Scenes seal their
geometry when they are created, so a scene shared by render workers cannot
change under them.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from whitted.core.ray import Ray
from whitted.geometry.intersectable import GeoPoint, Intersectable


class Geometries(Intersectable):
    """A flat or nested collection of intersectable objects.

    Args:
        *intersectables: Initial children.
    """

    def __init__(self, *intersectables: Intersectable) -> None:
        self._intersectables: list[Intersectable] | tuple[Intersectable, ...] = list(intersectables)

    @property
    def sealed(self) -> bool:
        return isinstance(self._intersectables, tuple)

    def add(self, *intersectables: Intersectable) -> None:
        """Append children.

        Raises:
            RuntimeError: If the collection has been sealed.
        """
        if self.sealed:
            raise RuntimeError("Cannot add to a sealed Geometries collection")
        self._intersectables.extend(intersectables)

    def seal(self) -> Geometries:
        """Freeze this collection and every nested collection.

        Returns:
            self, for chaining.
        """
        self._intersectables = tuple(self._intersectables)
        for item in self._intersectables:
            if isinstance(item, Geometries):
                item.seal()
        return self

    def __len__(self) -> int:
        return len(self._intersectables)

    def __iter__(self) -> Iterator[Intersectable]:
        return iter(self._intersectables)

    def find_geo_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[GeoPoint]:
        result: list[GeoPoint] = []
        for item in self._intersectables:
            result.extend(item.find_geo_intersections(ray, max_distance))
        return result
