"""Scene builder and plain-dict scene configuration.

SceneBuilder assembles a Scene with fluent setters and produces the final
immutable record with ``build()``. Scenes can also be described as plain
dictionaries (e.g. loaded from JSON):

    {
        "name": "demo",
        "background": [0, 0, 0],
        "ambient_light": {"color": [255, 255, 255], "ka": 0.1},
        "geometries": [
            {"type": "sphere", "center": [0, 0, -50], "radius": 50,
             "emission": [0, 0, 255],
             "material": {"kd": 0.4, "ks": 0.3, "kt": 0.3, "shininess": 100}},
            {"type": "plane", "q0": [0, 0, 0], "normal": [0, 0, 1]},
            {"type": "triangle", "vertices": [[...], [...], [...]]},
            {"type": "polygon", "vertices": [[...], ...]},
            {"type": "tube", "radius": 1, "axis": {"head": [...], "direction": [...]}},
            {"type": "cylinder", "radius": 1, "height": 2, "axis": {...}},
            {"type": "geometries", "items": [...]}
        ],
        "lights": [
            {"type": "directional", "intensity": [...], "direction": [...]},
            {"type": "point", "intensity": [...], "position": [...], "kc": 1, "kl": 0, "kq": 0},
            {"type": "spot", "intensity": [...], "position": [...], "direction": [...],
             "kl": 0.0004, "kq": 6e-7, "narrow_beam": 1}
        ]
    }

Example:
    >>> from whitted.core.primitives import Color, Point
    >>> from whitted.geometry.sphere import Sphere
    >>> scene = (
    ...     SceneBuilder("demo")
    ...     .set_background(Color(10, 10, 10))
    ...     .add_geometries(Sphere(Point(0, 0, -100), 50))
    ...     .build()
    ... )
    >>> len(scene.geometries)
    1
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from whitted.core.primitives import Color, Double3, Point, Vector
from whitted.core.ray import Ray
from whitted.geometry.geometries import Geometries
from whitted.geometry.intersectable import Geometry, Intersectable
from whitted.geometry.plane import Plane
from whitted.geometry.polygon import Polygon, Triangle
from whitted.geometry.sphere import Sphere
from whitted.geometry.tube import Cylinder, Tube
from whitted.lighting.ambient import AmbientLight
from whitted.lighting.base import LightSource
from whitted.lighting.directional import DirectionalLight
from whitted.lighting.point import PointLight, SpotLight
from whitted.materials.material import Material
from whitted.scene.scene import Scene

logger = logging.getLogger(__name__)


class SceneBuilder:
    """Fluent builder producing an immutable Scene.

    Args:
        name: The scene name.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._background = Color.BLACK
        self._ambient_light = AmbientLight.NONE
        self._geometries: list[Intersectable] = []
        self._lights: list[LightSource] = []

    def set_background(self, background: Color) -> SceneBuilder:
        self._background = background
        return self

    def set_ambient_light(self, ambient_light: AmbientLight) -> SceneBuilder:
        self._ambient_light = ambient_light
        return self

    def add_geometries(self, *intersectables: Intersectable) -> SceneBuilder:
        self._geometries.extend(intersectables)
        return self

    def add_lights(self, *lights: LightSource) -> SceneBuilder:
        self._lights.extend(lights)
        return self

    def build(self) -> Scene:
        """Produce the scene.

        Each scene gets its own sealed geometry collection, so later
        builder calls cannot mutate a built scene.
        """
        scene = Scene(
            name=self._name,
            background=self._background,
            ambient_light=self._ambient_light,
            geometries=Geometries(*self._geometries),
            lights=tuple(self._lights),
        )
        logger.debug(
            "Built scene %r with %d geometries and %d lights",
            scene.name,
            len(scene.geometries),
            len(scene.lights),
        )
        return scene

    @classmethod
    def from_config(cls, config: SceneConfig) -> SceneBuilder:
        """Create a builder populated from a configuration object.

        Raises:
            ValueError: If the configuration contains an unknown geometry or
                light type.
        """
        builder = cls(config.name)
        builder.set_background(_color(config.background))
        if config.ambient_light:
            builder.set_ambient_light(
                AmbientLight(
                    _color(config.ambient_light.get("color", [0, 0, 0])),
                    Double3.coerce(config.ambient_light.get("ka", 1.0)),
                )
            )
        for geometry_config in config.geometries:
            builder.add_geometries(_intersectable_from_dict(geometry_config))
        for light_config in config.lights:
            builder.add_lights(_light_from_dict(light_config))
        return builder

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneBuilder:
        """Create a builder from a plain dictionary (see module docstring)."""
        config = SceneConfig(
            name=data.get("name", "scene"),
            background=data.get("background", [0, 0, 0]),
            ambient_light=data.get("ambient_light", {}),
            geometries=data.get("geometries", []),
            lights=data.get("lights", []),
        )
        return cls.from_config(config)


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        name: The scene name.
        background: Background color as [r, g, b].
        ambient_light: Ambient light as {"color": [...], "ka": ...}.
        geometries: Typed geometry configurations.
        lights: Typed light configurations.
    """

    name: str = "scene"
    background: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    ambient_light: dict[str, Any] = field(default_factory=dict)
    geometries: list[dict[str, Any]] = field(default_factory=list)
    lights: list[dict[str, Any]] = field(default_factory=list)


def scene_to_config(scene: Scene) -> SceneConfig:
    """Export a scene to a configuration object.

    The ambient light is exported with its precomputed intensity and
    ``ka = 1``.

    Raises:
        ValueError: If the scene holds a geometry or light type that has no
            configuration form.
    """
    return SceneConfig(
        name=scene.name,
        background=list(scene.background.rgb),
        ambient_light={"color": list(scene.ambient_light.intensity.rgb), "ka": 1.0},
        geometries=[_intersectable_to_dict(item) for item in scene.geometries],
        lights=[_light_to_dict(light) for light in scene.lights],
    )


def scene_to_dict(scene: Scene) -> dict[str, Any]:
    """Export a scene to a dictionary (for JSON serialization)."""
    config = scene_to_config(scene)
    return {
        "name": config.name,
        "background": config.background,
        "ambient_light": config.ambient_light,
        "geometries": config.geometries,
        "lights": config.lights,
    }


# =============================================================================
# Conversion Helpers
# =============================================================================


def _color(values: list[float]) -> Color:
    return Color(values[0], values[1], values[2])


def _point(values: list[float]) -> Point:
    return Point(values[0], values[1], values[2])


def _vector(values: list[float]) -> Vector:
    return Vector(values[0], values[1], values[2])


def _material_from_dict(data: dict[str, Any]) -> Material:
    return Material(
        kd=data.get("kd", 0.0),
        ks=data.get("ks", 0.0),
        kt=data.get("kt", 0.0),
        kr=data.get("kr", 0.0),
        shininess=data.get("shininess", 0),
    )


def _material_to_dict(material: Material) -> dict[str, Any]:
    return {
        "kd": list(material.kd),
        "ks": list(material.ks),
        "kt": list(material.kt),
        "kr": list(material.kr),
        "shininess": material.shininess,
    }


def _intersectable_from_dict(data: dict[str, Any]) -> Intersectable:
    kind = data.get("type", "").lower()
    if kind == "geometries":
        return Geometries(*(_intersectable_from_dict(item) for item in data.get("items", [])))

    surface = {
        "emission": _color(data.get("emission", [0, 0, 0])),
        "material": _material_from_dict(data.get("material", {})),
    }
    if kind == "sphere":
        return Sphere(_point(data["center"]), data["radius"], **surface)
    if kind == "plane":
        if "points" in data:
            p1, p2, p3 = (_point(p) for p in data["points"])
            return Plane.from_points(p1, p2, p3, **surface)
        return Plane(_point(data["q0"]), _vector(data["normal"]), **surface)
    if kind == "triangle":
        p1, p2, p3 = (_point(p) for p in data["vertices"])
        return Triangle(p1, p2, p3, **surface)
    if kind == "polygon":
        return Polygon(*(_point(p) for p in data["vertices"]), **surface)
    if kind in ("tube", "cylinder"):
        axis_config = data["axis"]
        axis = Ray(_point(axis_config["head"]), _vector(axis_config["direction"]))
        if kind == "cylinder":
            return Cylinder(data["radius"], axis, data["height"], **surface)
        return Tube(data["radius"], axis, **surface)
    raise ValueError(f"Unknown geometry type: {kind}")


def _intersectable_to_dict(item: Intersectable) -> dict[str, Any]:
    if isinstance(item, Geometries):
        return {"type": "geometries", "items": [_intersectable_to_dict(child) for child in item]}
    if not isinstance(item, Geometry):
        raise ValueError(f"Unsupported intersectable: {type(item).__name__}")

    data: dict[str, Any]
    if isinstance(item, Sphere):
        data = {"type": "sphere", "center": list(item.center), "radius": item.radius}
    elif isinstance(item, Plane):
        data = {"type": "plane", "q0": list(item.q0), "normal": list(item.normal)}
    elif isinstance(item, Triangle):
        data = {"type": "triangle", "vertices": [list(v) for v in item.vertices]}
    elif isinstance(item, Polygon):
        data = {"type": "polygon", "vertices": [list(v) for v in item.vertices]}
    elif isinstance(item, Tube):
        axis = {"head": list(item.axis.head), "direction": list(item.axis.direction)}
        data = {"type": "tube", "radius": item.radius, "axis": axis}
        if isinstance(item, Cylinder):
            data["type"] = "cylinder"
            data["height"] = item.height
    else:
        raise ValueError(f"Unsupported geometry: {type(item).__name__}")

    data["emission"] = list(item.emission.rgb)
    data["material"] = _material_to_dict(item.material)
    return data


def _light_from_dict(data: dict[str, Any]) -> LightSource:
    kind = data.get("type", "").lower()
    intensity = _color(data["intensity"])
    if kind == "directional":
        return DirectionalLight(intensity, _vector(data["direction"]))
    attenuation = {
        "kc": data.get("kc", 1.0),
        "kl": data.get("kl", 0.0),
        "kq": data.get("kq", 0.0),
    }
    if kind == "point":
        return PointLight(intensity, _point(data["position"]), **attenuation)
    if kind == "spot":
        return SpotLight(
            intensity,
            _point(data["position"]),
            _vector(data["direction"]),
            narrow_beam=data.get("narrow_beam", 1.0),
            **attenuation,
        )
    raise ValueError(f"Unknown light type: {kind}")


def _light_to_dict(light: LightSource) -> dict[str, Any]:
    if isinstance(light, DirectionalLight):
        return {
            "type": "directional",
            "intensity": list(light.intensity.rgb),
            "direction": list(light.direction),
        }
    if isinstance(light, PointLight):
        kc, kl, kq = light.attenuation
        data: dict[str, Any] = {
            "type": "point",
            "intensity": list(light.intensity.rgb),
            "position": list(light.position),
            "kc": kc,
            "kl": kl,
            "kq": kq,
        }
        if isinstance(light, SpotLight):
            data["type"] = "spot"
            data["direction"] = list(light.direction)
            data["narrow_beam"] = light.narrow_beam
        return data
    raise ValueError(f"Unsupported light: {type(light).__name__}")
