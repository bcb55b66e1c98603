"""Matplotlib preview for rendered images.

The image writer already holds display-ready colors clamped to [0, 255], so
the preview shows ``ImageWriter.get_image_numpy`` as is.

Example:
    >>> from whitted.preview.display import show_preview
    >>> camera.render_image()
    >>> show_preview(camera.image_writer)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whitted.preview.image_writer import ImageWriter


def show_preview(
    writer: ImageWriter,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Show the contents of an image writer in a Matplotlib window.

    Args:
        writer: The image sink holding the rendered pixels.
        title: Figure title; defaults to the image name and size.
        figsize: Figure size in inches (width, height).
        block: Whether to block until the window is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(writer.get_image_numpy())
    ax.axis("off")
    if title is None:
        title = f"{writer.image_name} ({writer.nx}x{writer.ny})"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
