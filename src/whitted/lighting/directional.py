"""Directional light: parallel rays from an infinitely distant source."""

from __future__ import annotations

import math

from whitted.core.primitives import Color, Point, Vector
from whitted.lighting.base import Light, LightSource


class DirectionalLight(Light, LightSource):
    """A light with a fixed direction and no attenuation.

    Args:
        intensity: The light color.
        direction: Direction the light travels; normalized on construction.
    """

    def __init__(self, intensity: Color, direction: Vector) -> None:
        super().__init__(intensity)
        self._direction = direction.normalize()

    @property
    def direction(self) -> Vector:
        return self._direction

    def get_intensity(self, point: Point) -> Color:
        return self.intensity

    def get_l(self, point: Point) -> Vector:
        return self._direction

    def get_distance(self, point: Point) -> float:
        return math.inf
