"""Pytest configuration for ray tracer tests.

Shared fixtures build small scenes and cameras used across test modules.
Matplotlib is switched to the non-interactive Agg backend so preview tests
never open a window.
"""

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def unit_sphere_scene():
    """Unit sphere at the origin lit by a point light at (0, 0, 5)."""
    from whitted.core.primitives import Color, Point
    from whitted.geometry.sphere import Sphere
    from whitted.lighting.point import PointLight
    from whitted.materials.material import Material
    from whitted.scene.builder import SceneBuilder

    return (
        SceneBuilder("unit sphere")
        .set_background(Color(10, 20, 30))
        .add_geometries(
            Sphere(
                Point(0, 0, 0),
                1.0,
                emission=Color(10, 0, 0),
                material=Material(kd=0.5, ks=0.5, shininess=10),
            )
        )
        .add_lights(PointLight(Color(100, 100, 100), Point(0, 0, 5)))
        .build()
    )


@pytest.fixture
def integration_camera():
    """Factory for the 3x3 view-plane cameras used by intersection counts."""
    from whitted.camera.camera import Camera
    from whitted.core.primitives import Point, Vector

    def make(z: float = 0.0):
        return Camera(
            Point(0, 0, z),
            Vector(0, 0, -1),
            Vector(0, -1, 0),
            vp_distance=1,
            vp_size=(3, 3),
        )

    return make


@pytest.fixture
def count_intersections():
    """Count intersections of every 3x3 pixel ray with a geometry."""

    def count(camera, geometry) -> int:
        total = 0
        for i in range(3):
            for j in range(3):
                total += len(geometry.find_intersections(camera.construct_ray(3, 3, j, i)))
        return total

    return count
