"""Point and spot lights with distance attenuation."""

from __future__ import annotations

from whitted.core.primitives import Color, Point, Vector
from whitted.lighting.base import Light, LightSource


class PointLight(Light, LightSource):
    """An omnidirectional light at a position.

    Intensity at distance ``d`` is ``intensity / (kc + kl*d + kq*d^2)``.

    Args:
        intensity: The light color at the source.
        position: Location of the light.
        kc: Constant attenuation.
        kl: Linear attenuation.
        kq: Quadratic attenuation.
    """

    def __init__(
        self,
        intensity: Color,
        position: Point,
        *,
        kc: float = 1.0,
        kl: float = 0.0,
        kq: float = 0.0,
    ) -> None:
        super().__init__(intensity)
        self._position = position
        self._kc = kc
        self._kl = kl
        self._kq = kq

    @property
    def position(self) -> Point:
        return self._position

    @property
    def attenuation(self) -> tuple[float, float, float]:
        """The (kc, kl, kq) attenuation coefficients."""
        return self._kc, self._kl, self._kq

    def get_intensity(self, point: Point) -> Color:
        d_squared = point.distance_squared(self._position)
        factor = self._kc + self._kl * d_squared**0.5 + self._kq * d_squared
        return self.intensity.reduce(factor)

    def get_l(self, point: Point) -> Vector:
        return (point - self._position).normalize()

    def get_distance(self, point: Point) -> float:
        return point.distance(self._position)


class SpotLight(PointLight):
    """A point light focused along a beam direction.

    The point-light intensity is scaled by ``max(0, dir . l) ** narrow_beam``;
    larger ``narrow_beam`` values give a tighter beam.

    Args:
        intensity: The light color at the source.
        position: Location of the light.
        direction: Beam axis; normalized on construction.
        kc: Constant attenuation.
        kl: Linear attenuation.
        kq: Quadratic attenuation.
        narrow_beam: Beam focus exponent.
    """

    def __init__(
        self,
        intensity: Color,
        position: Point,
        direction: Vector,
        *,
        kc: float = 1.0,
        kl: float = 0.0,
        kq: float = 0.0,
        narrow_beam: float = 1.0,
    ) -> None:
        super().__init__(intensity, position, kc=kc, kl=kl, kq=kq)
        self._direction = direction.normalize()
        self._narrow_beam = narrow_beam

    @property
    def direction(self) -> Vector:
        return self._direction

    @property
    def narrow_beam(self) -> float:
        return self._narrow_beam

    def get_intensity(self, point: Point) -> Color:
        projection = max(0.0, self._direction.dot(self.get_l(point)))
        return super().get_intensity(point).scale(projection**self._narrow_beam)
