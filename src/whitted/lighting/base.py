"""Light base class and the light-source capability interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from whitted.core.primitives import Color, Point, Vector


class Light:
    """A light with a fixed base intensity."""

    def __init__(self, intensity: Color) -> None:
        self._intensity = intensity

    @property
    def intensity(self) -> Color:
        return self._intensity


class LightSource(ABC):
    """A light that illuminates surface points directly.

    Implementations provide the intensity arriving at a point, the direction
    of travel from the light toward that point and the distance to it (used
    to bound shadow rays).
    """

    @abstractmethod
    def get_intensity(self, point: Point) -> Color:
        """Return the light intensity arriving at ``point``."""

    @abstractmethod
    def get_l(self, point: Point) -> Vector:
        """Return the unit vector from the light toward ``point``."""

    @abstractmethod
    def get_distance(self, point: Point) -> float:
        """Return the distance from ``point`` to the light."""
