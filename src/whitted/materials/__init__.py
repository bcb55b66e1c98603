"""Materials module for surface shading properties.

Components:
    material: Immutable Phong material (diffuse, specular, transparency and
        reflection coefficients plus a shininess exponent)

Every Geometry carries a Material; the default is fully black (all
coefficients zero), so such a surface shows only its emission and the
ambient light.
"""

from .material import Material

__all__ = [
    "Material",
]
