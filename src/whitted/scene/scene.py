"""Immutable scene record consumed by the ray tracer."""

from __future__ import annotations

from dataclasses import dataclass, field

from whitted.core.primitives import Color
from whitted.geometry.geometries import Geometries
from whitted.lighting.ambient import AmbientLight
from whitted.lighting.base import LightSource


@dataclass(frozen=True)
class Scene:
    """Everything the tracer needs to shade a ray.

    A scene is assembled once (see SceneBuilder) and then shared read-only by
    all render workers.

    Attributes:
        name: Human-readable scene name.
        background: Color returned for rays that hit nothing.
        ambient_light: Uniform light added once per primary hit.
        geometries: All shapes in the scene; sealed on creation.
        lights: Light sources used for local shading and shadows.
    """

    name: str
    background: Color = Color.BLACK
    ambient_light: AmbientLight = AmbientLight.NONE
    geometries: Geometries = field(default_factory=Geometries)
    lights: tuple[LightSource, ...] = ()

    def __post_init__(self) -> None:
        self.geometries.seal()
