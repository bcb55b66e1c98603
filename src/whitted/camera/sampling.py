"""Pixel sampling strategies: depth of field and adaptive super-sampling.

Depth of field:
    A set of sample points is spread over a disk (the lens aperture) around
    the camera position. For every pixel, rays from each aperture point are
    aimed at the pixel's focal point (the primary ray evaluated at the focal
    length) and their colors averaged. Objects at the focal distance stay
    sharp; everything else blurs.

Adaptive super-sampling:
    A pixel is sampled at its center and its four corners. If all five
    colors agree the pixel is uniform and the center color is used.
    Otherwise each quadrant whose corner differs from the center is
    subdivided and sampled the same way, down to a fixed depth. Points
    already traced for the pixel are cached, so shared corners between
    sibling quadrants are traced once.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from whitted.core.primitives import Color, Point, Vector

# Fraction of a grid cell used as jitter amplitude (each direction)
APERTURE_JITTER = 0.25


@dataclass(frozen=True)
class DepthOfField:
    """Finite-aperture lens configuration.

    Attributes:
        aperture_radius: Radius of the lens disk. Zero degenerates to a
            pinhole (a single sample at the camera position).
        focal_length: Distance along each primary ray to the in-focus point.
        density: Grid resolution across the aperture diameter; the sample
            count grows roughly as ``0.785 * density**2``.
        seed: Seed for the jitter random generator, for reproducible renders.
    """

    aperture_radius: float
    focal_length: float
    density: int = 9
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.aperture_radius < 0:
            raise ValueError(f"aperture_radius must be non-negative, got {self.aperture_radius}")
        if self.focal_length <= 0:
            raise ValueError(f"focal_length must be positive, got {self.focal_length}")
        if self.density < 1:
            raise ValueError(f"density must be at least 1, got {self.density}")


def points_on_aperture(
    center: Point,
    up: Vector,
    right: Vector,
    density: int,
    radius: float,
    rng: np.random.Generator | None = None,
) -> list[Point]:
    """Generate jittered sample points on a lens disk.

    A ``density x density`` grid of cell centers covers the square enclosing
    the disk; each point is jittered by up to APERTURE_JITTER of a cell and
    kept if it falls inside the disk.

    Args:
        center: Center of the aperture (the camera position).
        up: Unit up vector spanning the aperture plane.
        right: Unit right vector spanning the aperture plane.
        density: Grid resolution across the diameter.
        radius: Aperture radius.
        rng: Random generator for the jitter; a fresh one if omitted.

    Returns:
        Points on the aperture disk. Just ``[center]`` for a zero radius.
    """
    if radius <= 0:
        return [center]
    rng = rng if rng is not None else np.random.default_rng()

    cell = 2.0 * radius / density
    axis = (np.arange(density) + 0.5) * cell - radius
    xs, ys = np.meshgrid(axis, axis)
    xs = xs.ravel() + rng.uniform(-APERTURE_JITTER, APERTURE_JITTER, xs.size) * cell
    ys = ys.ravel() + rng.uniform(-APERTURE_JITTER, APERTURE_JITTER, ys.size) * cell
    inside = xs**2 + ys**2 <= radius**2

    offsets = np.outer(xs[inside], right.xyz) + np.outer(ys[inside], up.xyz)
    return [Point.from_array(center.xyz + offset) for offset in offsets]


def adaptive_sample(
    trace: Callable[[Point], Color],
    center: Point,
    right: Vector,
    up: Vector,
    half_width: float,
    half_height: float,
    depth: int,
) -> Color:
    """Adaptively super-sample one pixel of the view plane.

    Sample positions are addressed on an integer sub-grid of the pixel with
    ``2**depth`` cells per side, so a corner shared by sibling quadrants has
    a single key regardless of the floating point path that reached it.

    Args:
        trace: Returns the color seen through a view-plane point.
        center: Pixel center on the view plane.
        right: Unit right vector of the view plane.
        up: Unit up vector of the view plane.
        half_width: Half the pixel width.
        half_height: Half the pixel height.
        depth: Maximum subdivision depth; 1 samples the pixel once
            (center and corners) without subdividing.

    Returns:
        The estimated pixel color.
    """
    half_cells = 1 << (depth - 1)
    cell_x = right.xyz * (half_width / half_cells)
    cell_y = up.xyz * (half_height / half_cells)
    cache: dict[tuple[int, int], Color] = {}

    def sample(ix: int, iy: int) -> Color:
        color = cache.get((ix, iy))
        if color is None:
            color = trace(Point.from_array(center.xyz + cell_x * ix + cell_y * iy))
            cache[(ix, iy)] = color
        return color

    def subdivide(ix: int, iy: int, half: int, level: int) -> Color:
        center_color = sample(ix, iy)
        corners = [
            (ix + sx * half, iy + sy * half) for sx, sy in ((-1, 1), (1, 1), (-1, -1), (1, -1))
        ]
        corner_colors = [sample(cx, cy) for cx, cy in corners]
        if all(color == center_color for color in corner_colors):
            return center_color
        if level <= 1:
            return center_color.add(*corner_colors).reduce(5)

        total = Color.BLACK
        for (cx, cy), color in zip(corners, corner_colors):
            if color == center_color:
                total = total.add(center_color)
            else:
                quadrant = subdivide((ix + cx) // 2, (iy + cy) // 2, half // 2, level - 1)
                total = total.add(quadrant)
        return total.reduce(4)

    return subdivide(0, 0, half_cells, depth)
