"""Recursive Whitted-style ray tracer.

This module computes the color seen along a ray:

    color(ray) = background                          if the ray hits nothing
               = ambient + calc_color(closest hit)   otherwise

``calc_color`` sums the local effects at the hit (emission plus Phong
diffuse and specular terms for every light that is not shadowed) and, until
the recursion bottoms out, the global effects: a reflected ray weighted by
the material kr and a refracted ray (continuing straight through the
surface) weighted by kt.

Recursion stops on either of two conditions:
- the remaining level reaches 1 (MAX_CALC_COLOR_LEVEL bounces at most)
- the accumulated weight ``k`` along the path falls below MIN_CALC_COLOR_K
  in every channel, so the branch could not visibly change the result

Shadows are attenuated rather than binary: the transparency of every
occluder between the point and the light is multiplied together, giving
soft colored shadows behind partially transparent objects.

Example:
    >>> from whitted.core.tracer import RayTracer
    >>> tracer = RayTracer(scene)
    >>> color = tracer.trace_ray(ray)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from whitted.core.primitives import Color, Double3, Vector, align_zero
from whitted.core.ray import Ray
from whitted.geometry.intersectable import GeoPoint
from whitted.lighting.base import LightSource
from whitted.scene.scene import Scene

# Maximum recursion depth of calc_color (primary hit included)
MAX_CALC_COLOR_LEVEL = 10

# Contribution weight below which a branch is pruned
MIN_CALC_COLOR_K = 0.001

# Weight of a primary ray
INITIAL_K = Double3.ONE


class RayTracerBase(ABC):
    """Base class for ray tracers bound to a scene.

    Args:
        scene: The scene to trace against. Shared read-only across workers.
    """

    def __init__(self, scene: Scene) -> None:
        self._scene = scene

    @property
    def scene(self) -> Scene:
        return self._scene

    @abstractmethod
    def trace_ray(self, ray: Ray) -> Color:
        """Return the color seen along a ray."""

    def trace_beam(self, rays: Sequence[Ray]) -> Color:
        """Return the mean color of a set of rays.

        Raises:
            ValueError: If the beam is empty.
        """
        if not rays:
            raise ValueError("Cannot trace an empty beam")
        return Color.BLACK.add(*(self.trace_ray(ray) for ray in rays)).reduce(len(rays))


class RayTracer(RayTracerBase):
    """Recursive ray tracer with Phong shading, soft shadows, reflection and refraction."""

    def trace_ray(self, ray: Ray) -> Color:
        closest = self.find_closest_intersection(ray)
        if closest is None:
            return self._scene.background
        return self.calc_color(closest, ray).add(self._scene.ambient_light.intensity)

    def find_closest_intersection(self, ray: Ray) -> GeoPoint | None:
        """Return the hit nearest to the ray origin, or None on a miss."""
        return ray.find_closest_geo_point(self._scene.geometries.find_geo_intersections(ray))

    def calc_color(
        self,
        gp: GeoPoint,
        ray: Ray,
        level: int = MAX_CALC_COLOR_LEVEL,
        k: Double3 = INITIAL_K,
    ) -> Color:
        """Compute the color at a hit point without the ambient term.

        Args:
            gp: The intersection being shaded.
            ray: The ray that produced the intersection.
            level: Remaining recursion depth; 1 means local effects only.
            k: Accumulated contribution weight along the ray path.

        Returns:
            Emission plus local and (recursively) global effects.
        """
        n = gp.geometry.get_normal(gp.point)
        v = ray.direction
        nv = align_zero(n.dot(v))
        if nv == 0.0:
            return gp.geometry.emission

        color = self._calc_local_effects(gp, n, v, nv, k)
        if level == 1:
            return color
        return color.add(self._calc_global_effects(gp, n, v, nv, level, k))

    def _calc_local_effects(self, gp: GeoPoint, n: Vector, v: Vector, nv: float, k: Double3) -> Color:
        material = gp.geometry.material
        color = gp.geometry.emission
        for light in self._scene.lights:
            l = light.get_l(gp.point)
            nl = align_zero(n.dot(l))
            if nl * nv <= 0.0:
                continue
            ktr = self.transparency(gp, light, l, n)
            if (ktr * k).lower_than(MIN_CALC_COLOR_K):
                continue
            intensity = light.get_intensity(gp.point).scale(ktr)
            color = color.add(
                intensity.scale(material.kd.scale(abs(nl))),
                self._calc_specular(material.ks, material.shininess, n, l, nl, v, intensity),
            )
        return color

    @staticmethod
    def _calc_specular(
        ks: Double3, shininess: int, n: Vector, l: Vector, nl: float, v: Vector, intensity: Color
    ) -> Color:
        r = l - n * (2.0 * nl)
        vr = -align_zero(v.dot(r))
        if vr <= 0.0:
            return Color.BLACK
        return intensity.scale(ks.scale(vr**shininess))

    def _calc_global_effects(
        self, gp: GeoPoint, n: Vector, v: Vector, nv: float, level: int, k: Double3
    ) -> Color:
        material = gp.geometry.material
        color = Color.BLACK

        kkr = k * material.kr
        if not kkr.lower_than(MIN_CALC_COLOR_K):
            reflected = Ray.offset(gp.point, v - n * (2.0 * nv), n)
            color = color.add(self._calc_global_effect(reflected, level, material.kr, kkr))

        kkt = k * material.kt
        if not kkt.lower_than(MIN_CALC_COLOR_K):
            refracted = Ray.offset(gp.point, v, n)
            color = color.add(self._calc_global_effect(refracted, level, material.kt, kkt))

        return color

    def _calc_global_effect(self, ray: Ray, level: int, kx: Double3, kkx: Double3) -> Color:
        gp = self.find_closest_intersection(ray)
        if gp is None:
            return self._scene.background.scale(kx)
        return self.calc_color(gp, ray, level - 1, kkx).scale(kx)

    def transparency(self, gp: GeoPoint, light: LightSource, l: Vector, n: Vector) -> Double3:
        """Compute how much of a light reaches a point through occluders.

        Args:
            gp: The shaded point.
            light: The light source.
            l: Unit vector from the light toward the point.
            n: Surface normal at the point.

        Returns:
            The product of the kt coefficients of everything between the
            point and the light: Double3.ONE when unobstructed, Double3.ZERO
            once the product drops below MIN_CALC_COLOR_K.
        """
        light_ray = Ray.offset(gp.point, -l, n)
        occluders = self._scene.geometries.find_geo_intersections(
            light_ray, light.get_distance(gp.point)
        )
        ktr = Double3.ONE
        for occluder in occluders:
            ktr = ktr * occluder.geometry.material.kt
            if ktr.lower_than(MIN_CALC_COLOR_K):
                return Double3.ZERO
        return ktr
