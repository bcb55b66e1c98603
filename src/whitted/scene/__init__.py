"""Scene module for scene assembly and demo scenes.

Components:
    scene: Immutable Scene record (background, ambient light, geometries,
        lights)
    builder: Fluent SceneBuilder and plain-dict scene configuration
    presets: Ready-made demo scenes with matching cameras

A scene is assembled once and then shared read-only by the ray tracer and
all render workers; it is never mutated during a render.
"""

from .builder import SceneBuilder, SceneConfig, scene_to_config, scene_to_dict
from .presets import PRESETS, create_preset_scene
from .scene import Scene

__all__ = [
    "Scene",
    "SceneBuilder",
    "SceneConfig",
    "scene_to_config",
    "scene_to_dict",
    "PRESETS",
    "create_preset_scene",
]
