"""Image sink receiving rendered pixel colors.

The camera writes one Color per pixel, in any order and possibly from
several threads. Each pixel is clamped to the displayable [0, 255] range
when written, so shading may produce unbounded radiance. ``write_to_image``
flushes the buffer to ``<output_dir>/<image_name>.png``.

Example:
    >>> from whitted.core.primitives import Color
    >>> writer = ImageWriter("grid", 800, 500, output_dir="images")
    >>> writer.write_pixel(0, 0, Color(255, 0, 0))
    >>> writer.write_to_image()
    PosixPath('images/grid.png')
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt

from whitted.core.primitives import Color
from whitted.preview.export import save_png_from_array

logger = logging.getLogger(__name__)

# Largest channel value of the 8-bit output format
MAX_CHANNEL = 255.0


class ImageWriter:
    """A float RGB frame buffer that saves to PNG via Pillow.

    Args:
        image_name: Output file name without extension.
        nx: Image width in pixels.
        ny: Image height in pixels.
        output_dir: Directory the PNG is written to.

    Raises:
        ValueError: If a dimension is not positive.
    """

    def __init__(
        self,
        image_name: str,
        nx: int,
        ny: int,
        *,
        output_dir: str | Path = "images",
    ) -> None:
        if nx <= 0 or ny <= 0:
            raise ValueError(f"Image dimensions must be positive, got {nx}x{ny}")
        self._image_name = image_name
        self._nx = nx
        self._ny = ny
        self._output_dir = Path(output_dir)
        self._buffer = np.zeros((ny, nx, 3), dtype=np.float64)

    @property
    def image_name(self) -> str:
        return self._image_name

    @property
    def nx(self) -> int:
        """Image width in pixels."""
        return self._nx

    @property
    def ny(self) -> int:
        """Image height in pixels."""
        return self._ny

    @property
    def output_path(self) -> Path:
        return self._output_dir / f"{self._image_name}.png"

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Store the color of pixel (x, y), clamped to [0, 255].

        Args:
            x: Column index, 0 at the left.
            y: Row index, 0 at the top.
            color: The pixel color.

        Raises:
            IndexError: If the pixel lies outside the image.
        """
        if not (0 <= x < self._nx and 0 <= y < self._ny):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._nx}x{self._ny} image")
        self._buffer[y, x] = np.clip(color.array, 0.0, MAX_CHANNEL)

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the stored (clamped) color of pixel (x, y)."""
        if not (0 <= x < self._nx and 0 <= y < self._ny):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._nx}x{self._ny} image")
        return Color.from_array(self._buffer[y, x])

    def get_image_numpy(self) -> npt.NDArray[np.float32]:
        """Return a copy of the image normalized to [0, 1], shape (ny, nx, 3)."""
        return (self._buffer / MAX_CHANNEL).astype(np.float32)

    def write_to_image(self) -> Path:
        """Save the buffer as an 8-bit PNG and return its path."""
        path = save_png_from_array(self.get_image_numpy(), self.output_path)
        logger.info("Wrote %dx%d image to %s", self._nx, self._ny, path)
        return path
