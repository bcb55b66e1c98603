"""Tests for the recursive ray tracer.

Tests cover:
- Background on a miss and the ambient term on a hit
- Phong local shading of a lit sphere
- Opaque and partially transparent shadows
- Refraction through a transparent sphere
- Recursion termination between facing mirrors
- Contribution-weight pruning
- Beam averaging
"""

import pytest


def _shading_setup(blocker_kt=None):
    """Unit sphere, a point light at (0, 0, 5) and an optional blocker at (0, 0, 3)."""
    from whitted.core.primitives import Color, Point, Vector
    from whitted.core.ray import Ray
    from whitted.core.tracer import RayTracer
    from whitted.geometry.intersectable import GeoPoint
    from whitted.geometry.sphere import Sphere
    from whitted.lighting.point import PointLight
    from whitted.materials.material import Material
    from whitted.scene.builder import SceneBuilder

    sphere = Sphere(
        Point(0, 0, 0),
        1.0,
        emission=Color(10, 0, 0),
        material=Material(kd=0.5, ks=0.5, shininess=10),
    )
    builder = (
        SceneBuilder("shadow")
        .add_geometries(sphere)
        .add_lights(PointLight(Color(100, 100, 100), Point(0, 0, 5)))
    )
    if blocker_kt is not None:
        builder.add_geometries(Sphere(Point(0, 0, 3), 0.5, material=Material(kt=blocker_kt)))
    tracer = RayTracer(builder.build())
    gp = GeoPoint(sphere, Point(0, 0, 1))
    ray = Ray(Point(0, 0, 10), Vector(0, 0, -1))
    return tracer, gp, ray


class TestTraceRay:
    """Tests for primary ray tracing."""

    def test_miss_returns_background(self, unit_sphere_scene):
        """Test a ray hitting nothing returns the background color."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer

        tracer = RayTracer(unit_sphere_scene)
        assert tracer.trace_ray(Ray(Point(0, 0, 10), Vector(0, 0, 1))) == Color(10, 20, 30)

    def test_lit_sphere(self, unit_sphere_scene):
        """Test emission plus diffuse and specular terms at the lit pole."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer

        tracer = RayTracer(unit_sphere_scene)
        color = tracer.trace_ray(Ray(Point(0, 0, 10), Vector(0, 0, -1)))
        # emission (10, 0, 0) + diffuse 0.5 * 100 + specular 0.5 * 100
        assert color == Color(110, 100, 100)

    def test_ray_from_light_position(self, unit_sphere_scene):
        """Test a ray cast from the light position sees the fully lit pole."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer

        tracer = RayTracer(unit_sphere_scene)
        ray = Ray(Point(0, 0, 5), Vector(0, 0, -1))
        gp = tracer.find_closest_intersection(ray)
        assert gp.point == Point(0, 0, 1)
        assert gp.geometry.get_normal(gp.point) == Vector(0, 0, 1)
        assert tracer.trace_ray(ray) == Color(110, 100, 100)

    def test_ambient_added_on_hit(self):
        """Test the ambient intensity is added once to a hit."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.sphere import Sphere
        from whitted.lighting.ambient import AmbientLight
        from whitted.scene.builder import SceneBuilder

        scene = (
            SceneBuilder("ambient")
            .set_ambient_light(AmbientLight(Color(40, 40, 40), 0.5))
            .add_geometries(Sphere(Point(0, 0, 0), 1.0, emission=Color(0, 0, 5)))
            .build()
        )
        color = RayTracer(scene).trace_ray(Ray(Point(0, 0, 10), Vector(0, 0, -1)))
        assert color == Color(20, 20, 25)

    def test_find_closest_intersection(self):
        """Test the nearest geometry is selected."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.sphere import Sphere
        from whitted.scene.builder import SceneBuilder

        far = Sphere(Point(0, 0, -10), 1.0)
        near = Sphere(Point(0, 0, -5), 1.0)
        tracer = RayTracer(SceneBuilder("closest").add_geometries(far, near).build())
        gp = tracer.find_closest_intersection(Ray(Point(0, 0, 0), Vector(0, 0, -1)))
        assert gp.geometry is near
        assert gp.point == Point(0, 0, -4)

    def test_scene_property(self, unit_sphere_scene):
        """Test the tracer exposes its scene."""
        from whitted.core.tracer import RayTracer

        assert RayTracer(unit_sphere_scene).scene is unit_sphere_scene


class TestShadows:
    """Tests for shadow attenuation."""

    def test_unshadowed(self):
        """Test the transparency factor is one without occluders."""
        from whitted.core.primitives import Color, Double3

        tracer, gp, ray = _shading_setup()
        light = tracer.scene.lights[0]
        l = light.get_l(gp.point)
        assert tracer.transparency(gp, light, l, gp.geometry.get_normal(gp.point)) == Double3.ONE
        assert tracer.calc_color(gp, ray) == Color(110, 100, 100)

    def test_opaque_blocker(self):
        """Test an opaque occluder removes the light's contribution."""
        from whitted.core.primitives import Color, Double3

        tracer, gp, ray = _shading_setup(blocker_kt=0.0)
        light = tracer.scene.lights[0]
        l = light.get_l(gp.point)
        assert tracer.transparency(gp, light, l, gp.geometry.get_normal(gp.point)) == Double3.ZERO
        assert tracer.calc_color(gp, ray) == Color(10, 0, 0)

    def test_transparent_blocker(self):
        """Test both surfaces of a transparent occluder attenuate the light."""
        from whitted.core.primitives import Color, Double3

        tracer, gp, ray = _shading_setup(blocker_kt=0.5)
        light = tracer.scene.lights[0]
        l = light.get_l(gp.point)
        assert tracer.transparency(gp, light, l, gp.geometry.get_normal(gp.point)) == Double3(0.25)
        # Light reaches the point at a quarter intensity
        assert tracer.calc_color(gp, ray) == Color(35, 25, 25)

    def test_fully_transparent_blocker(self):
        """Test a fully transparent occluder leaves the contribution unchanged."""
        from whitted.core.primitives import Color

        tracer, gp, ray = _shading_setup(blocker_kt=1.0)
        assert tracer.calc_color(gp, ray) == Color(110, 100, 100)

    def test_occluder_beyond_light_ignored(self):
        """Test geometry behind the light does not cast a shadow."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.intersectable import GeoPoint
        from whitted.geometry.sphere import Sphere
        from whitted.lighting.point import PointLight
        from whitted.materials.material import Material
        from whitted.scene.builder import SceneBuilder

        sphere = Sphere(
            Point(0, 0, 0),
            1.0,
            emission=Color(10, 0, 0),
            material=Material(kd=0.5, ks=0.5, shininess=10),
        )
        scene = (
            SceneBuilder("behind light")
            .add_geometries(sphere, Sphere(Point(0, 0, 8), 1.0))
            .add_lights(PointLight(Color(100, 100, 100), Point(0, 0, 5)))
            .build()
        )
        tracer = RayTracer(scene)
        color = tracer.calc_color(GeoPoint(sphere, Point(0, 0, 1)), Ray(Point(0, 0, 4), Vector(0, 0, -1)))
        assert color == Color(110, 100, 100)

    def test_light_on_far_side(self):
        """Test a light behind the surface relative to the viewer adds nothing."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.intersectable import GeoPoint
        from whitted.geometry.sphere import Sphere
        from whitted.lighting.point import PointLight
        from whitted.materials.material import Material
        from whitted.scene.builder import SceneBuilder

        sphere = Sphere(Point(0, 0, 0), 1.0, emission=Color(10, 0, 0), material=Material(kd=1))
        scene = (
            SceneBuilder("far side")
            .add_geometries(sphere)
            .add_lights(PointLight(Color(100, 100, 100), Point(0, 0, -5)))
            .build()
        )
        tracer = RayTracer(scene)
        color = tracer.calc_color(GeoPoint(sphere, Point(0, 0, 1)), Ray(Point(0, 0, 10), Vector(0, 0, -1)))
        assert color == Color(10, 0, 0)


class TestGlobalEffects:
    """Tests for reflection, refraction and recursion limits."""

    def test_refraction_through_sphere(self):
        """Test the background seen through a transparent sphere is scaled by kt at each surface."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.sphere import Sphere
        from whitted.materials.material import Material
        from whitted.scene.builder import SceneBuilder

        scene = (
            SceneBuilder("glass")
            .set_background(Color(0, 0, 100))
            .add_geometries(Sphere(Point(0, 0, 0), 1.0, material=Material(kt=0.5)))
            .build()
        )
        color = RayTracer(scene).trace_ray(Ray(Point(0, 0, 10), Vector(0, 0, -1)))
        assert color == Color(0, 0, 25)

    def test_facing_mirrors_terminate(self):
        """Test recursion between perfect mirrors stops at the maximum level."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import MAX_CALC_COLOR_LEVEL, RayTracer
        from whitted.geometry.plane import Plane
        from whitted.materials.material import Material
        from whitted.scene.builder import SceneBuilder

        mirror = Material(kr=1)
        scene = (
            SceneBuilder("mirrors")
            .add_geometries(
                Plane(Point(0, 0, 0), Vector(0, 0, 1), emission=Color(1, 0, 0), material=mirror),
                Plane(Point(0, 0, 10), Vector(0, 0, -1), emission=Color(1, 0, 0), material=mirror),
            )
            .build()
        )
        color = RayTracer(scene).trace_ray(Ray(Point(0, 0, 5), Vector(0, 0, -1)))
        # One emission per recursion level
        assert abs(color.rgb[0] - MAX_CALC_COLOR_LEVEL) < 1e-9
        assert color.rgb[1:] == (0.0, 0.0)

    def test_low_weight_reflection_pruned(self):
        """Test a reflection whose weight falls below the cutoff is not traced."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.plane import Plane
        from whitted.materials.material import Material
        from whitted.scene.builder import SceneBuilder

        scene = (
            SceneBuilder("dim mirror")
            .set_background(Color(100, 100, 100))
            .add_geometries(
                Plane(Point(0, 0, 0), Vector(0, 0, 1), emission=Color(1, 0, 0), material=Material(kr=0.0005))
            )
            .build()
        )
        color = RayTracer(scene).trace_ray(Ray(Point(0, 0, 5), Vector(0, 0, -1)))
        assert color == Color(1, 0, 0)

    def test_reflection_sees_background(self):
        """Test a mirror with nothing in front reflects the background."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.plane import Plane
        from whitted.materials.material import Material
        from whitted.scene.builder import SceneBuilder

        scene = (
            SceneBuilder("mirror")
            .set_background(Color(100, 100, 100))
            .add_geometries(Plane(Point(0, 0, 0), Vector(0, 0, 1), material=Material(kr=0.5)))
            .build()
        )
        color = RayTracer(scene).trace_ray(Ray(Point(0, 0, 5), Vector(0, 0, -1)))
        assert color == Color(50, 50, 50)

    def test_level_one_is_local_only(self):
        """Test level 1 skips reflection and refraction."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.intersectable import GeoPoint
        from whitted.geometry.plane import Plane
        from whitted.materials.material import Material
        from whitted.scene.builder import SceneBuilder

        plane = Plane(Point(0, 0, 0), Vector(0, 0, 1), emission=Color(1, 2, 3), material=Material(kr=1))
        tracer = RayTracer(SceneBuilder("local").set_background(Color(100, 100, 100)).add_geometries(plane).build())
        gp = GeoPoint(plane, Point(0, 0, 0))
        assert tracer.calc_color(gp, Ray(Point(0, 0, 5), Vector(0, 0, -1)), level=1) == Color(1, 2, 3)


class TestTraceBeam:
    """Tests for beam averaging."""

    def test_average(self):
        """Test the beam color is the mean of the ray colors."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.core.ray import Ray
        from whitted.core.tracer import RayTracer
        from whitted.geometry.plane import Plane
        from whitted.scene.builder import SceneBuilder

        scene = (
            SceneBuilder("half")
            .set_background(Color(100, 0, 0))
            .add_geometries(Plane(Point(0, 0, 0), Vector(0, 0, 1), emission=Color(0, 0, 50)))
            .build()
        )
        rays = [
            Ray(Point(0, 0, 5), Vector(0, 0, -1)),
            Ray(Point(0, 0, 5), Vector(0, 0, 1)),
        ]
        assert RayTracer(scene).trace_beam(rays) == Color(50, 0, 25)

    def test_empty_beam(self):
        """Test an empty beam raises."""
        from whitted.core.tracer import RayTracer

        tracer, _, _ = _shading_setup()
        assert isinstance(tracer, RayTracer)
        with pytest.raises(ValueError, match="empty beam"):
            tracer.trace_beam([])
