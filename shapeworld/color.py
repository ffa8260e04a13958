"""Color types and conversions for shapes.

Colors are stored as four floats (red, green, blue, alpha) in the 0.0-1.0
range because that is exactly what a save record holds. Conversions here are
pure functions with no session dependencies.
"""

from __future__ import annotations

import colorsys
import random
import struct
from dataclasses import dataclass

from shapeworld.config.persistence import DEFAULT_SHAPE_RGBA
from shapeworld.config.spawning import ALPHA, HUE_RANGE, SATURATION_RANGE, VALUE_RANGE

_FLOAT32X4 = struct.Struct("<4f")


@dataclass(frozen=True)
class Color:
    """An RGBA color with float channels.

    Channels are held at float32 precision, the precision of a save record,
    so a color compares equal to itself after a save and load.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        channels = _FLOAT32X4.unpack(_FLOAT32X4.pack(self.r, self.g, self.b, self.a))
        for name, value in zip(("r", "g", "b", "a"), channels):
            object.__setattr__(self, name, value)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_rgb255(self) -> tuple[int, int, int]:
        """Convert to 8-bit RGB, dropping alpha.

        Example:
            >>> Color(1.0, 0.5, 0.0).to_rgb255()
            (255, 128, 0)
        """
        return tuple(int(round(_clamp01(c) * 255)) for c in (self.r, self.g, self.b))  # type: ignore[return-value]


# Color given to shapes loaded from data that never stored one
WHITE = Color(*DEFAULT_SHAPE_RGBA)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def hsv_to_color(hue: float, saturation: float, value: float, alpha: float = 1.0) -> Color:
    """Convert HSV components (each 0.0-1.0) to a Color.

    Hue wraps around like a color wheel, so 1.0 is the same red as 0.0.
    """
    r, g, b = colorsys.hsv_to_rgb(hue % 1.0, _clamp01(saturation), _clamp01(value))
    return Color(r, g, b, _clamp01(alpha))


def random_shape_color(rng: random.Random) -> Color:
    """Pick a random, reasonably vivid color for a newly created shape."""
    return hsv_to_color(
        rng.uniform(*HUE_RANGE),
        rng.uniform(*SATURATION_RANGE),
        rng.uniform(*VALUE_RANGE),
        ALPHA,
    )
