"""Unit tests for Polygon and Triangle geometry.

Tests cover:
- Vertex validation (count, coplanarity, convexity)
- Normals
- Inside, outside, edge and vertex hits
"""

import math

import pytest


def _square():
    from whitted.core.primitives import Point
    from whitted.geometry.polygon import Polygon

    return Polygon(Point(-1, -1, 0), Point(1, -1, 0), Point(1, 1, 0), Point(-1, 1, 0))


class TestPolygonConstruction:
    """Tests for Polygon construction."""

    def test_valid_quad(self):
        """Test a convex coplanar quadrilateral is accepted."""
        from whitted.core.primitives import Point
        from whitted.geometry.polygon import Polygon

        polygon = Polygon(Point(0, 0, 1), Point(1, 0, 0), Point(0, 1, 0), Point(-1, 1, 1))
        assert len(polygon.vertices) == 4

    def test_too_few_vertices(self):
        """Test fewer than three vertices raise."""
        from whitted.core.primitives import Point
        from whitted.geometry.polygon import Polygon

        with pytest.raises(ValueError, match="at least 3"):
            Polygon(Point(0, 0, 1), Point(1, 0, 0))

    def test_wrong_vertex_order(self):
        """Test a self-crossing vertex order raises."""
        from whitted.core.primitives import Point
        from whitted.geometry.polygon import Polygon

        with pytest.raises(ValueError, match="convex"):
            Polygon(Point(0, 0, 1), Point(1, 0, 0), Point(-1, 1, 1), Point(0, 1, 0))

    def test_not_coplanar(self):
        """Test a vertex off the plane raises."""
        from whitted.core.primitives import Point
        from whitted.geometry.polygon import Polygon

        with pytest.raises(ValueError, match="same plane"):
            Polygon(Point(0, 0, 1), Point(1, 0, 0), Point(0, 1, 0), Point(-1, 1, 2))

    def test_collinear_start(self):
        """Test three collinear leading vertices raise."""
        from whitted.core.primitives import Point
        from whitted.geometry.polygon import Polygon

        with pytest.raises(ValueError):
            Polygon(Point(0, 0, 0), Point(1, 0, 0), Point(2, 0, 0))

    def test_normal(self):
        """Test the normal is the unit plane normal."""
        from whitted.core.primitives import Point
        from whitted.geometry.polygon import Polygon

        polygon = Polygon(Point(0, 0, 1), Point(1, 0, 0), Point(0, 1, 0), Point(-1, 1, 1))
        n = polygon.get_normal(Point(0, 0, 1))
        expected = 1 / math.sqrt(3)
        assert abs(abs(n.x) - expected) < 1e-12
        assert abs(abs(n.y) - expected) < 1e-12
        assert abs(abs(n.z) - expected) < 1e-12


class TestPolygonIntersection:
    """Tests for ray-polygon intersection."""

    def test_inside(self):
        """Test a ray through the interior hits once."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray

        points = _square().find_intersections(Ray(Point(0, 0, 1), Vector(0, 0, -1)))
        assert points == [Point(0, 0, 0)]

    def test_outside(self):
        """Test a ray hitting the plane outside the outline misses."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray

        assert _square().find_intersections(Ray(Point(2, 0, 1), Vector(0, 0, -1))) == []

    def test_on_edge(self):
        """Test a ray hitting an edge misses."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray

        assert _square().find_intersections(Ray(Point(1, 0.5, 1), Vector(0, 0, -1))) == []

    def test_on_vertex(self):
        """Test a ray hitting a vertex misses."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray

        assert _square().find_intersections(Ray(Point(1, 1, 1), Vector(0, 0, -1))) == []

    def test_max_distance(self):
        """Test a hit beyond the maximum distance is dropped."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray

        ray = Ray(Point(0, 0, 1), Vector(0, 0, -1))
        assert _square().find_intersections(ray, 0.5) == []


class TestTriangle:
    """Tests for Triangle intersection."""

    def test_inside(self):
        """Test a ray through the interior hits once."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray
        from whitted.geometry.polygon import Triangle

        triangle = Triangle(Point(1, 0, 0), Point(-1, 0, 0), Point(0, 1, 0))
        assert len(triangle.find_intersections(Ray(Point(0, 0.5, -1), Vector(0, 0, 1)))) == 1

    def test_on_edge_and_vertex(self):
        """Test rays hitting an edge or a vertex miss."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray
        from whitted.geometry.polygon import Triangle

        triangle = Triangle(Point(1, 0, 0), Point(-1, 0, 0), Point(0, 1, 0))
        assert triangle.find_intersections(Ray(Point(0.5, 0, -1), Vector(0, 0, 1))) == []
        assert triangle.find_intersections(Ray(Point(1, 0, -1), Vector(0, 0, 1))) == []

    def test_outside(self):
        """Test a ray beside the triangle misses."""
        from whitted.core.primitives import Point, Vector
        from whitted.core.ray import Ray
        from whitted.geometry.polygon import Triangle

        triangle = Triangle(Point(1, 0, 0), Point(-1, 0, 0), Point(0, 1, 0))
        assert triangle.find_intersections(Ray(Point(1, 1, -1), Vector(0, 0, 1))) == []
