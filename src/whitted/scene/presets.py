"""Ready-made demo scenes.

Each factory returns ``(scene, camera)``. The camera carries the view
parameters for the scene but no image writer or ray tracer; bind those with
``Camera.with_options``.

Presets:
    basic: Sphere and three triangles on a colored background
    two_spheres: Nested spheres, the outer one partially transparent, lit by
        a spot light
    spheres_on_mirrors: Spheres reflected between two mirror triangles
    triangles_transparent_sphere: A transparent sphere casting a soft shadow
        on two triangles
    three_spheres_dof: Three reflective spheres at different depths, for
        depth-of-field renders
    room: A box room with a sphere and a reflective cube

Example:
    >>> from whitted.scene.presets import create_preset_scene
    >>> scene, camera = create_preset_scene("two_spheres")
"""

from __future__ import annotations

from collections.abc import Callable

from whitted.camera.camera import Camera
from whitted.camera.sampling import DepthOfField
from whitted.core.primitives import Color, Double3, Point, Vector
from whitted.geometry.plane import Plane
from whitted.geometry.polygon import Polygon, Triangle
from whitted.geometry.sphere import Sphere
from whitted.lighting.ambient import AmbientLight
from whitted.lighting.directional import DirectionalLight
from whitted.lighting.point import SpotLight
from whitted.materials.material import Material
from whitted.scene.builder import SceneBuilder
from whitted.scene.scene import Scene

WHITE = Color(255, 255, 255)
GRAY = Color(128, 128, 128)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)

PresetFactory = Callable[[], tuple[Scene, Camera]]


def _front_camera(z: float, size: float, distance: float, **options) -> Camera:
    """Camera on the z axis looking down -z with +y up."""
    return Camera(
        Point(0, 0, z),
        Vector(0, 0, -1),
        Vector(0, 1, 0),
        vp_distance=distance,
        vp_size=(size, size),
        **options,
    )


def create_basic_scene() -> tuple[Scene, Camera]:
    """Sphere surrounded by three triangles, shaded by ambient light only."""
    scene = (
        SceneBuilder("basic")
        .set_ambient_light(AmbientLight(Color(255, 191, 191), Double3(1, 1, 1)))
        .set_background(Color(75, 127, 90))
        .add_geometries(
            Sphere(Point(0, 0, -100), 50),
            Triangle(Point(-100, 0, -100), Point(0, 100, -100), Point(-100, 100, -100)),
            Triangle(Point(-100, 0, -100), Point(0, -100, -100), Point(-100, -100, -100)),
            Triangle(Point(100, 0, -100), Point(0, -100, -100), Point(100, -100, -100)),
        )
        .build()
    )
    return scene, _front_camera(0, 500, 100)


def create_two_spheres_scene() -> tuple[Scene, Camera]:
    """A red sphere inside a partially transparent blue sphere."""
    scene = (
        SceneBuilder("two_spheres")
        .add_geometries(
            Sphere(
                Point(0, 0, -50),
                50,
                emission=BLUE,
                material=Material(kd=0.4, ks=0.3, kt=0.3, shininess=100),
            ),
            Sphere(
                Point(0, 0, -50),
                25,
                emission=RED,
                material=Material(kd=0.5, ks=0.5, shininess=100),
            ),
        )
        .add_lights(
            SpotLight(
                Color(1000, 600, 0),
                Point(-100, -100, 500),
                Vector(-1, -1, -2),
                kl=0.0004,
                kq=0.0000006,
            )
        )
        .build()
    )
    return scene, _front_camera(1000, 150, 1000)


def create_spheres_on_mirrors_scene() -> tuple[Scene, Camera]:
    """Nested spheres reflected between two mirror triangles."""
    mirror_emission = Color(20, 20, 20)
    scene = (
        SceneBuilder("spheres_on_mirrors")
        .set_ambient_light(AmbientLight(WHITE, 0.1))
        .add_geometries(
            Sphere(
                Point(-950, -900, -1000),
                400,
                emission=Color(0, 50, 100),
                material=Material(kd=0.25, ks=0.25, kt=(0.5, 0, 0), shininess=20),
            ),
            Sphere(
                Point(-950, -900, -1000),
                200,
                emission=Color(100, 50, 20),
                material=Material(kd=0.25, ks=0.25, shininess=20),
            ),
            Triangle(
                Point(1500, -1500, -1500),
                Point(-1500, 1500, -1500),
                Point(670, 670, 3000),
                emission=mirror_emission,
                material=Material(kr=1),
            ),
            Triangle(
                Point(1500, -1500, -1500),
                Point(-1500, 1500, -1500),
                Point(-1500, -1500, -2000),
                emission=mirror_emission,
                material=Material(kr=(0.5, 0, 0.4)),
            ),
        )
        .add_lights(
            SpotLight(
                Color(1020, 400, 400),
                Point(-750, -750, -150),
                Vector(-1, -1, -4),
                kl=0.00001,
                kq=0.000005,
            )
        )
        .build()
    )
    return scene, _front_camera(10000, 2500, 10000)


def create_triangles_transparent_sphere_scene() -> tuple[Scene, Camera]:
    """A transparent sphere casting a soft shadow on two triangles."""
    triangle_material = Material(kd=0.5, ks=0.5, shininess=60)
    scene = (
        SceneBuilder("triangles_transparent_sphere")
        .set_ambient_light(AmbientLight(WHITE, 0.15))
        .add_geometries(
            Triangle(
                Point(-150, -150, -115),
                Point(150, -150, -135),
                Point(75, 75, -150),
                material=triangle_material,
            ),
            Triangle(
                Point(-150, -150, -115),
                Point(-70, 70, -140),
                Point(75, 75, -150),
                material=triangle_material,
            ),
            Sphere(
                Point(60, 50, -50),
                30,
                emission=BLUE,
                material=Material(kd=0.2, ks=0.2, kt=0.6, shininess=30),
            ),
        )
        .add_lights(
            SpotLight(
                Color(700, 400, 400),
                Point(60, 50, 0),
                Vector(0, 0, -1),
                kl=4e-5,
                kq=2e-7,
            )
        )
        .build()
    )
    return scene, _front_camera(1000, 200, 1000)


def create_three_spheres_dof_scene() -> tuple[Scene, Camera]:
    """Three reflective spheres at increasing depth over a reflective floor."""
    sphere_material = Material(kd=0.6, ks=0.4, kr=0.3, shininess=100)
    scene = (
        SceneBuilder("three_spheres_dof")
        .set_ambient_light(AmbientLight(Color(30, 30, 30), 0.16))
        .add_geometries(
            Plane(
                Point(0, 0, 0),
                Vector(0, 0, 1),
                emission=Color(0, 20, 20),
                material=Material(kd=0.5, ks=0.5, kr=0.2, shininess=60),
            ),
            Sphere(Point(-100, 0, 300), 70, material=sphere_material),
            Sphere(Point(0, 0, 900), 70, material=sphere_material),
            Sphere(Point(100, 0, 1500), 70, material=sphere_material),
        )
        .add_lights(DirectionalLight(Color(255, 0, 255), Vector(1, 0, 0)))
        .build()
    )
    camera = Camera(
        Point(0, 20, 2500),
        Vector(0, 0, -1),
        Vector(0, 1, 0),
        vp_distance=850,
        vp_size=(200, 200),
        depth_of_field=DepthOfField(aperture_radius=20, focal_length=1600, density=9, seed=0),
    )
    return scene, camera


def create_room_scene() -> tuple[Scene, Camera]:
    """A closed room with colored walls, a glossy sphere and a cube."""
    wall = Material(kd=0.5, ks=0.5, shininess=10)
    cube = Material(kd=0.6, ks=0.4, kt=0.1, kr=0.4, shininess=100)
    cube_emission = Color(200, 10, 60)
    cube_faces = (
        ((60, -30, 45), (-15, -30, -30), (60, -30, -106), (136, -30, -30)),
        ((60, -150, 45), (-15, -150, -30), (60, -150, -106), (136, -150, -30)),
        ((60, -150, 45), (60, -30, 45), (-15, -30, -30), (-15, -150, -30)),
        ((60, -150, 45), (60, -30, 45), (136, -30, -30), (136, -150, -30)),
        ((136, -150, -30), (136, -30, -30), (60, -30, -106), (60, -150, -106)),
        ((60, -150, -106), (60, -30, -106), (-15, -30, -30), (-15, -150, -30)),
    )

    builder = (
        SceneBuilder("room")
        .set_ambient_light(AmbientLight(WHITE, 0.01))
        .add_geometries(
            Polygon(
                Point(150, 150, -150),
                Point(150, -150, -150),
                Point(-150, -150, -150),
                Point(-150, 150, -150),
                emission=GRAY,
                material=wall,
            ),
            Polygon(
                Point(150, 150, -150),
                Point(150, -150, -150),
                Point(150, -150, 150),
                Point(150, 150, 150),
                emission=GREEN,
                material=wall,
            ),
            Polygon(
                Point(-150, 150, -150),
                Point(-150, -150, -150),
                Point(-150, -150, 150),
                Point(-150, 150, 150),
                emission=RED,
                material=wall,
            ),
            Polygon(
                Point(150, 150, -150),
                Point(-150, 150, -150),
                Point(-150, 150, 150),
                Point(150, 150, 150),
                emission=GRAY,
                material=wall,
            ),
            Polygon(
                Point(-150, -150, -150),
                Point(150, -150, -150),
                Point(150, -150, 150),
                Point(-150, -150, 150),
                emission=GRAY,
                material=Material(kd=0.5, ks=0.5, kr=0.1, shininess=10),
            ),
            Sphere(
                Point(-83, -98, -90),
                53,
                emission=Color(50, 50, 224),
                material=Material(kd=0.2, ks=0.2, kr=0.3, shininess=100),
            ),
        )
        .add_lights(
            SpotLight(GRAY, Point(-130, 0, 150), Vector(1, 0, -1), narrow_beam=3),
            SpotLight(GRAY, Point(130, 100, 150), Vector(-1, 0, -1), narrow_beam=3),
        )
    )
    for face in cube_faces:
        builder.add_geometries(
            Polygon(*(Point(*vertex) for vertex in face), emission=cube_emission, material=cube)
        )
    return builder.build(), _front_camera(350, 150, 150)


PRESETS: dict[str, PresetFactory] = {
    "basic": create_basic_scene,
    "two_spheres": create_two_spheres_scene,
    "spheres_on_mirrors": create_spheres_on_mirrors_scene,
    "triangles_transparent_sphere": create_triangles_transparent_sphere_scene,
    "three_spheres_dof": create_three_spheres_dof_scene,
    "room": create_room_scene,
}


def create_preset_scene(name: str) -> tuple[Scene, Camera]:
    """Create a preset scene and its camera by name.

    Raises:
        ValueError: If the preset name is unknown.
    """
    factory = PRESETS.get(name)
    if factory is None:
        raise ValueError(f"Unknown preset scene: {name!r}. Available: {', '.join(sorted(PRESETS))}")
    return factory()
