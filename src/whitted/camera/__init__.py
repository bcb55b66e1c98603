"""Camera module for primary ray generation and rendering.

Components:
    camera: Immutable camera with view-plane ray construction and the
        (optionally threaded) render loop
    sampling: Depth-of-field aperture sampling and adaptive super-sampling

The camera builds its orthonormal basis from the viewing direction ``to``
and the ``up`` vector, deriving ``right = to x up``.
"""

from .camera import DEFAULT_ADAPTIVE_DEPTH, Camera
from .sampling import DepthOfField, adaptive_sample, points_on_aperture

__all__ = [
    "Camera",
    "DEFAULT_ADAPTIVE_DEPTH",
    "DepthOfField",
    "points_on_aperture",
    "adaptive_sample",
]
