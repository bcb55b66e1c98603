"""Unit tests for light sources.

Tests cover:
- Ambient light intensity
- Directional light direction, intensity and distance
- Point light attenuation and direction
- Spot light beam focusing
"""

import math


class TestAmbientLight:
    """Tests for AmbientLight."""

    def test_intensity_is_scaled(self):
        """Test intensity = ia * ka."""
        from whitted.core.primitives import Color, Double3
        from whitted.lighting.ambient import AmbientLight

        assert AmbientLight(Color(100, 50, 20), 0.5).intensity == Color(50, 25, 10)
        assert AmbientLight(Color(100, 50, 20), Double3(1, 0, 0.5)).intensity == Color(100, 0, 10)

    def test_none(self):
        """Test the NONE ambient light is black."""
        from whitted.core.primitives import Color
        from whitted.lighting.ambient import AmbientLight

        assert AmbientLight.NONE.intensity == Color.BLACK


class TestDirectionalLight:
    """Tests for DirectionalLight."""

    def test_constant_everywhere(self):
        """Test intensity and direction do not depend on the point."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.lighting.directional import DirectionalLight

        light = DirectionalLight(Color(10, 20, 30), Vector(0, 0, -2))
        for point in (Point(0, 0, 0), Point(100, -5, 3)):
            assert light.get_intensity(point) == Color(10, 20, 30)
            assert light.get_l(point) == Vector(0, 0, -1)
            assert light.get_distance(point) == math.inf


class TestPointLight:
    """Tests for PointLight."""

    def test_attenuation(self):
        """Test intensity is divided by kc + kl*d + kq*d^2."""
        from whitted.core.primitives import Color, Point
        from whitted.lighting.point import PointLight

        light = PointLight(Color(100, 100, 100), Point(0, 0, 0), kc=1, kl=1, kq=1)
        assert light.attenuation == (1, 1, 1)
        # d = 2: 1 + 2 + 4
        assert light.get_intensity(Point(0, 0, 2)) == Color(100 / 7, 100 / 7, 100 / 7)

    def test_default_attenuation(self):
        """Test the default attenuation leaves intensity unchanged."""
        from whitted.core.primitives import Color, Point
        from whitted.lighting.point import PointLight

        light = PointLight(Color(100, 100, 100), Point(0, 0, 0))
        assert light.get_intensity(Point(0, 0, 50)) == Color(100, 100, 100)

    def test_direction_and_distance(self):
        """Test l points from the light toward the point."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.lighting.point import PointLight

        light = PointLight(Color(100, 100, 100), Point(0, 0, 5))
        assert light.get_l(Point(0, 0, 1)) == Vector(0, 0, -1)
        assert light.get_distance(Point(0, 0, 1)) == 4.0


class TestSpotLight:
    """Tests for SpotLight."""

    def test_on_axis(self):
        """Test full intensity along the beam axis."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.lighting.point import SpotLight

        light = SpotLight(Color(100, 100, 100), Point(0, 0, 0), Vector(0, 0, 1))
        assert light.get_intensity(Point(0, 0, 2)) == Color(100, 100, 100)

    def test_behind_is_dark(self):
        """Test points behind the spot receive nothing."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.lighting.point import SpotLight

        light = SpotLight(Color(100, 100, 100), Point(0, 0, 0), Vector(0, 0, 1))
        assert light.get_intensity(Point(0, 0, -2)) == Color.BLACK

    def test_narrow_beam(self):
        """Test off-axis intensity falls with the narrow-beam exponent."""
        from whitted.core.primitives import Color, Point, Vector
        from whitted.lighting.point import SpotLight

        wide = SpotLight(Color(100, 100, 100), Point(0, 0, 0), Vector(0, 0, 1))
        narrow = SpotLight(Color(100, 100, 100), Point(0, 0, 0), Vector(0, 0, 1), narrow_beam=2)
        wide_r = wide.get_intensity(Point(1, 0, 1)).rgb[0]
        narrow_r = narrow.get_intensity(Point(1, 0, 1)).rgb[0]
        assert abs(wide_r - 100 / math.sqrt(2)) < 1e-9
        assert abs(narrow_r - 50) < 1e-9
