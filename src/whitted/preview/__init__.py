"""Preview module for image output and visualization.

Components:
    image_writer: Frame buffer receiving pixel colors from the camera
    display: Matplotlib preview
    export: PNG export (Pillow)

Example:
    >>> from whitted.preview import ImageWriter, show_preview
    >>> writer = ImageWriter("two_spheres", 500, 500)
    >>> camera = camera.with_options(image_writer=writer).render_image()
    >>> camera.write_to_image()
    >>> show_preview(writer)
"""

from whitted.preview.display import show_preview
from whitted.preview.export import image_to_uint8, save_png_from_array
from whitted.preview.image_writer import ImageWriter

__all__ = [
    # Image sink
    "ImageWriter",
    # Display functions
    "show_preview",
    # Export functions
    "save_png_from_array",
    "image_to_uint8",
]
