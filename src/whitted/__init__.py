"""Whitted-style recursive ray tracer.

This package renders scenes of geometric primitives and light sources into
raster images by casting rays from a virtual camera, with support for:
- Closed-form and quadratic ray/surface intersection per shape
- Phong local lighting with transparency-attenuated shadows
- Recursive reflection and refraction with an energy cutoff
- Depth of field and adaptive super-sampling
- Thread-pool rendering over the pixel grid

Subpackages:
    core: Numeric primitives, rays, the recursive ray tracer and progress tracking
    geometry: Shape primitives and intersection algorithms
    materials: Phong material coefficients
    lighting: Ambient, directional, point and spot lights
    scene: Scene container, builder and preset demo scenes
    camera: Camera model with ray generation and sampling strategies
    preview: Image sink, PNG export and preview utilities
"""

__version__ = "0.1.0"
