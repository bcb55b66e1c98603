"""Phong material coefficients.

A Material is an immutable record of the per-channel reflectance
coefficients consumed by the recursive ray tracer:

- kd: diffuse reflection
- ks: specular reflection (Phong highlight, sharpened by ``shininess``)
- kt: transmission, used both for refraction rays and for shadow attenuation
- kr: mirror reflection

Coefficients may be given as a scalar (applied to all three channels), a
3-sequence, or a Double3; they are stored as Double3 and must lie in [0, 1].

Example:
    >>> from whitted.materials.material import Material
    >>> glass = Material(kd=0.1, ks=0.3, kt=0.6, shininess=100)
    >>> glass.kt
    Double3(0.6, 0.6, 0.6)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from whitted.core.primitives import Double3

CoefficientLike = Double3 | float | Sequence[float]


@dataclass(frozen=True)
class Material:
    """Immutable Phong material.

    Attributes:
        kd: Diffuse coefficient per channel.
        ks: Specular coefficient per channel.
        kt: Transparency coefficient per channel.
        kr: Reflection coefficient per channel.
        shininess: Phong exponent for the specular highlight.
    """

    kd: CoefficientLike = Double3.ZERO
    ks: CoefficientLike = Double3.ZERO
    kt: CoefficientLike = Double3.ZERO
    kr: CoefficientLike = Double3.ZERO
    shininess: int = 0

    def __post_init__(self) -> None:
        for name in ("kd", "ks", "kt", "kr"):
            value = Double3.coerce(getattr(self, name))
            if any(c < 0.0 or c > 1.0 for c in value):
                raise ValueError(f"Material {name} must be in [0, 1], got {value.values}")
            object.__setattr__(self, name, value)
        if self.shininess < 0:
            raise ValueError(f"shininess must be non-negative, got {self.shininess}")
