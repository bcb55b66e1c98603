"""Ambient light: a uniform, position-independent contribution."""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from whitted.core.primitives import Color, Double3
from whitted.lighting.base import Light


class AmbientLight(Light):
    """Uniform ambient light with intensity ``ia * ka``.

    Args:
        ia: The ambient light color.
        ka: Ambient attenuation, a scalar or per-channel coefficient.
    """

    NONE: ClassVar[AmbientLight]

    def __init__(self, ia: Color, ka: Double3 | float | Sequence[float]) -> None:
        super().__init__(ia.scale(Double3.coerce(ka)))


AmbientLight.NONE = AmbientLight(Color.BLACK, Double3.ZERO)
