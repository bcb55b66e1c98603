"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    primitives: Point, Vector, Double3 and Color value types and the
        tolerance helpers shared by all geometric code
    ray: Ray data structure, epsilon-offset construction and closest-point
        selection
    tracer: Recursive Whitted ray tracer (local Phong lighting, soft shadows,
        reflection and refraction with depth and energy cutoffs)
    progress: Thread-safe pixel progress counter

All values are immutable; a Scene and everything reachable from it may be
shared by render threads without locking.
"""

from .primitives import ZERO_TOLERANCE, Color, Double3, Point, Vector, align_zero, is_zero
from .progress import PixelProgress, ProgressCallback
from .ray import RAY_DELTA, Ray, beam_of_rays

# Note: tracer is NOT imported here to avoid circular imports with the
# geometry and scene packages. Import it directly:
#   from whitted.core.tracer import RayTracer

__all__ = [
    "ZERO_TOLERANCE",
    "is_zero",
    "align_zero",
    "Point",
    "Vector",
    "Double3",
    "Color",
    "Ray",
    "RAY_DELTA",
    "beam_of_rays",
    "PixelProgress",
    "ProgressCallback",
]
