"""Lighting module for light sources.

Components:
    base: Light base class and the LightSource interface
    ambient: Uniform ambient light (added once per primary hit)
    directional: Parallel light with infinite distance
    point: Point light with kc/kl/kq attenuation, and the focused SpotLight

Light sources are immutable once constructed and are shared read-only by all
render workers.
"""

from .ambient import AmbientLight
from .base import Light, LightSource
from .directional import DirectionalLight
from .point import PointLight, SpotLight

__all__ = [
    "Light",
    "LightSource",
    "AmbientLight",
    "DirectionalLight",
    "PointLight",
    "SpotLight",
]
