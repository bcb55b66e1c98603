"""PNG export via Pillow.

Example:
    >>> from whitted.preview.export import save_png_from_array
    >>> save_png_from_array(writer.get_image_numpy(), "images/out.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a [0, 1] float image to 8-bit, rounding to the nearest level.

    Args:
        image: Image array of shape (H, W, 3). Values outside [0, 1] are
            clamped.

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    return np.rint(np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint8)


def save_png_from_array(image: npt.NDArray[np.floating], filepath: str | Path) -> Path:
    """Save a [0, 1] float image as an 8-bit RGB PNG.

    Missing parent directories are created.

    Returns:
        The path written.
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    PILImage.fromarray(image_to_uint8(image)).save(path)
    return path
