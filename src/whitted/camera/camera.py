"""Camera model: primary ray generation and the render loop.

The camera sits at ``position`` and looks along ``to``, with ``up`` pointing
to the top of the image and ``right = to x up``. The view plane is centered
at ``position + to * vp_distance`` and has size ``vp_size = (width,
height)``. Pixel (j, i) (column, row; row 0 at the top) maps to

    xJ = (j - (nx - 1) / 2) * width / nx
    yI = -(i - (ny - 1) / 2) * height / ny
    Pij = Pc + right * xJ + up * yI

and its primary ray runs from the camera position through Pij.

Each pixel is rendered with one of three strategies:
    - plain: one ray through the pixel center
    - depth of field: a beam from the aperture toward the focal point
    - adaptive: recursive corner-based super-sampling

Cameras are immutable; ``with_options``, ``rotate`` and ``move`` return new
cameras.

Example:
    >>> from whitted.core.primitives import Point, Vector
    >>> from whitted.core.tracer import RayTracer
    >>> from whitted.preview.image_writer import ImageWriter
    >>> camera = Camera(
    ...     Point(0, 0, 1000), Vector(0, 0, -1), Vector(0, 1, 0),
    ...     vp_distance=1000, vp_size=(150, 150),
    ...     image_writer=ImageWriter("two_spheres", 500, 500),
    ...     ray_tracer=RayTracer(scene),
    ...     threads=4,
    ... )
    >>> camera.render_image().write_to_image()
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from whitted.camera.sampling import DepthOfField, adaptive_sample, points_on_aperture
from whitted.core.primitives import Color, Point, Vector, is_zero
from whitted.core.progress import PixelProgress, ProgressCallback
from whitted.core.ray import Ray, beam_of_rays

if TYPE_CHECKING:
    from whitted.core.tracer import RayTracerBase
    from whitted.preview.image_writer import ImageWriter

logger = logging.getLogger(__name__)

# Default subdivision depth for adaptive super-sampling
DEFAULT_ADAPTIVE_DEPTH = 3


class Camera:
    """A pinhole camera with optional depth of field and adaptive sampling.

    Args:
        position: Camera location.
        to: Viewing direction; normalized.
        up: Up direction, orthogonal to ``to``; normalized.
        vp_distance: Distance from the camera to the view plane.
        vp_size: View plane (width, height).
        image_writer: Sink receiving pixel colors.
        ray_tracer: Tracer computing the color of each ray.
        depth_of_field: Lens configuration; None for a pinhole.
        adaptive: Enable adaptive super-sampling.
        adaptive_depth: Maximum adaptive subdivision depth.
        threads: Worker threads; 0 renders sequentially.
        progress_callback: Called with (done, total) pixels as the render
            advances.

    Raises:
        ValueError: If ``to`` and ``up`` are not orthogonal, a view-plane
            parameter is not positive, ``threads`` is negative, or depth of
            field and adaptive sampling are both enabled.
    """

    def __init__(
        self,
        position: Point,
        to: Vector,
        up: Vector,
        *,
        vp_distance: float = 1.0,
        vp_size: tuple[float, float] = (1.0, 1.0),
        image_writer: ImageWriter | None = None,
        ray_tracer: RayTracerBase | None = None,
        depth_of_field: DepthOfField | None = None,
        adaptive: bool = False,
        adaptive_depth: int = DEFAULT_ADAPTIVE_DEPTH,
        threads: int = 0,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        if not is_zero(to.dot(up)):
            raise ValueError("Camera 'to' and 'up' vectors must be orthogonal")
        if vp_distance <= 0:
            raise ValueError(f"vp_distance must be positive, got {vp_distance}")
        if vp_size[0] <= 0 or vp_size[1] <= 0:
            raise ValueError(f"vp_size must be positive, got {vp_size}")
        if threads < 0:
            raise ValueError(f"threads must be non-negative, got {threads}")
        if adaptive_depth < 1:
            raise ValueError(f"adaptive_depth must be at least 1, got {adaptive_depth}")
        if depth_of_field is not None and adaptive:
            raise ValueError("Depth of field and adaptive sampling cannot be combined")

        self._position = position
        self._to = to.normalize()
        self._up = up.normalize()
        self._right = self._to.cross(self._up)
        self._vp_distance = float(vp_distance)
        self._vp_size = (float(vp_size[0]), float(vp_size[1]))
        self._image_writer = image_writer
        self._ray_tracer = ray_tracer
        self._depth_of_field = depth_of_field
        self._adaptive = adaptive
        self._adaptive_depth = adaptive_depth
        self._threads = threads
        self._progress_callback = progress_callback

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def position(self) -> Point:
        return self._position

    @property
    def to(self) -> Vector:
        return self._to

    @property
    def up(self) -> Vector:
        return self._up

    @property
    def right(self) -> Vector:
        return self._right

    @property
    def vp_distance(self) -> float:
        return self._vp_distance

    @property
    def vp_size(self) -> tuple[float, float]:
        return self._vp_size

    @property
    def image_writer(self) -> ImageWriter | None:
        return self._image_writer

    @property
    def ray_tracer(self) -> RayTracerBase | None:
        return self._ray_tracer

    @property
    def depth_of_field(self) -> DepthOfField | None:
        return self._depth_of_field

    @property
    def adaptive(self) -> bool:
        return self._adaptive

    @property
    def threads(self) -> int:
        return self._threads

    # =========================================================================
    # Derived Cameras
    # =========================================================================

    def _options(self) -> dict[str, Any]:
        return {
            "vp_distance": self._vp_distance,
            "vp_size": self._vp_size,
            "image_writer": self._image_writer,
            "ray_tracer": self._ray_tracer,
            "depth_of_field": self._depth_of_field,
            "adaptive": self._adaptive,
            "adaptive_depth": self._adaptive_depth,
            "threads": self._threads,
            "progress_callback": self._progress_callback,
        }

    def with_options(self, **changes: Any) -> Camera:
        """Return a copy of this camera with some keyword options replaced.

        Example:
            >>> hd = camera.with_options(image_writer=ImageWriter("hd", 1920, 1080))
        """
        options = self._options()
        unknown = set(changes) - set(options)
        if unknown:
            raise ValueError(f"Unknown camera options: {sorted(unknown)}")
        options.update(changes)
        return Camera(self._position, self._to, self._up, **options)

    def rotate(self, axis: Vector, degrees: float) -> Camera:
        """Return a camera rotated around ``axis``; ``right`` is re-derived."""
        if is_zero(degrees):
            return self
        return Camera(
            self._position,
            self._to.rotate(axis, degrees),
            self._up.rotate(axis, degrees),
            **self._options(),
        )

    def move(self, offset: Vector) -> Camera:
        """Return a camera translated by ``offset``."""
        return Camera(self._position + offset, self._to, self._up, **self._options())

    # =========================================================================
    # Ray Generation
    # =========================================================================

    def _pixel_center(self, nx: int, ny: int, j: int, i: int) -> Point:
        width, height = self._vp_size
        x_j = (j - (nx - 1) / 2.0) * width / nx
        y_i = -(i - (ny - 1) / 2.0) * height / ny
        pc = self._position.xyz + self._to.xyz * self._vp_distance
        return Point.from_array(pc + self._right.xyz * x_j + self._up.xyz * y_i)

    def construct_ray(self, nx: int, ny: int, j: int, i: int) -> Ray:
        """Build the primary ray through the center of pixel (j, i).

        Args:
            nx: Number of pixel columns.
            ny: Number of pixel rows.
            j: Column index, 0 at the left.
            i: Row index, 0 at the top.

        Returns:
            The ray from the camera position through the pixel center.
        """
        return Ray(self._position, self._pixel_center(nx, ny, j, i) - self._position)

    # =========================================================================
    # Rendering
    # =========================================================================

    def _require_writer(self) -> ImageWriter:
        if self._image_writer is None:
            raise RuntimeError("Image writer not set. Call with_options(image_writer=...) first.")
        return self._image_writer

    def _require_tracer(self) -> RayTracerBase:
        if self._ray_tracer is None:
            raise RuntimeError("Ray tracer not set. Call with_options(ray_tracer=...) first.")
        return self._ray_tracer

    def _strategy(self) -> str:
        if self._depth_of_field is not None:
            return "depth-of-field"
        if self._adaptive:
            return "adaptive"
        return "plain"

    def aperture_points(self) -> list[Point]:
        """Sample points on the lens aperture for the current DOF settings."""
        dof = self._depth_of_field
        if dof is None:
            return [self._position]
        rng = np.random.default_rng(dof.seed)
        return points_on_aperture(
            self._position, self._up, self._right, dof.density, dof.aperture_radius, rng
        )

    def _pixel_color(
        self,
        tracer: RayTracerBase,
        nx: int,
        ny: int,
        j: int,
        i: int,
        aperture: list[Point] | None,
    ) -> Color:
        if aperture is not None and self._depth_of_field is not None:
            focal_point = self.construct_ray(nx, ny, j, i).point_at(self._depth_of_field.focal_length)
            return tracer.trace_beam(beam_of_rays(aperture, focal_point))

        if self._adaptive:
            width, height = self._vp_size

            def trace(point: Point) -> Color:
                return tracer.trace_ray(Ray(self._position, point - self._position))

            return adaptive_sample(
                trace,
                self._pixel_center(nx, ny, j, i),
                self._right,
                self._up,
                width / nx / 2.0,
                height / ny / 2.0,
                self._adaptive_depth,
            )

        return tracer.trace_ray(self.construct_ray(nx, ny, j, i))

    def render_image(self) -> Camera:
        """Render every pixel into the image writer.

        Pixels are rendered sequentially when ``threads`` is 0, otherwise rows
        are distributed over a thread pool. Pixel order is not guaranteed.

        Returns:
            This camera, for chaining ``write_to_image()``.

        Raises:
            RuntimeError: If the image writer or ray tracer is not set.
        """
        writer = self._require_writer()
        tracer = self._require_tracer()
        nx, ny = writer.nx, writer.ny
        aperture = self.aperture_points() if self._depth_of_field is not None else None
        progress = PixelProgress(nx * ny, self._progress_callback)

        logger.info(
            "Rendering %s: %dx%d, %s sampling, %s",
            writer.image_name,
            nx,
            ny,
            self._strategy(),
            f"{self._threads} threads" if self._threads else "sequential",
        )
        start = time.perf_counter()

        def render_row(i: int) -> None:
            for j in range(nx):
                writer.write_pixel(j, i, self._pixel_color(tracer, nx, ny, j, i, aperture))
                progress.step()

        if self._threads == 0:
            for i in range(ny):
                render_row(i)
        else:
            with ThreadPoolExecutor(max_workers=self._threads) as executor:
                # Consume results so worker exceptions propagate
                list(executor.map(render_row, range(ny)))

        logger.info("Rendered %s in %.2fs", writer.image_name, time.perf_counter() - start)
        return self

    def print_grid(self, interval: int, color: Color) -> Camera:
        """Paint grid lines every ``interval`` pixels over the image.

        Raises:
            RuntimeError: If the image writer is not set.
        """
        writer = self._require_writer()
        for i in range(writer.ny):
            for j in range(writer.nx):
                if i % interval == 0 or j % interval == 0:
                    writer.write_pixel(j, i, color)
        return self

    def write_to_image(self) -> Path:
        """Flush the image writer to disk and return the written path.

        Raises:
            RuntimeError: If the image writer is not set.
        """
        return self._require_writer().write_to_image()
