# gdengine/core/color.py
"""
ColorRGBA - Clamped RGBA color.

Every channel lives in [0, 1]. The clamp runs on each write, so constructors,
attribute assignment and operator results all satisfy it. NaN becomes 0.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import logging
import math
import numbers
import re

import numpy as np

from . import config
from .math3d import Vector3, clamp01

logger = logging.getLogger(__name__)

_CHANNELS = ('r', 'g', 'b', 'a')

# ITU-R BT.601 luma weights
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?")


def _coerce_channel(name: str, value) -> float:
    value = float(value)
    if math.isnan(value):
        logger.warning(f"NaN written to ColorRGBA.{name}, storing 0.0")
    return clamp01(value)


@dataclass
class ColorRGBA:
    """RGBA color with 0-1 range channels. Defaults to opaque white."""
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def __setattr__(self, name, value):
        if name in _CHANNELS:
            value = _coerce_channel(name, value)
        object.__setattr__(self, name, value)

    # Common colors
    @staticmethod
    def red() -> ColorRGBA: return ColorRGBA(1.0, 0.0, 0.0, 1.0)
    @staticmethod
    def green() -> ColorRGBA: return ColorRGBA(0.0, 1.0, 0.0, 1.0)
    @staticmethod
    def blue() -> ColorRGBA: return ColorRGBA(0.0, 0.0, 1.0, 1.0)
    @staticmethod
    def black() -> ColorRGBA: return ColorRGBA(0.0, 0.0, 0.0, 1.0)
    @staticmethod
    def white() -> ColorRGBA: return ColorRGBA(1.0, 1.0, 1.0, 1.0)

    # -------------------------------------------------------------------------
    # Arithmetic (saturating)
    # -------------------------------------------------------------------------

    def add(self, other: ColorRGBA) -> ColorRGBA:
        return ColorRGBA(
            self.r + other.r,
            self.g + other.g,
            self.b + other.b,
            self.a + other.a
        )

    def scale(self, scalar: float) -> ColorRGBA:
        return ColorRGBA(
            self.r * scalar,
            self.g * scalar,
            self.b * scalar,
            self.a * scalar
        )

    def __add__(self, other: ColorRGBA) -> ColorRGBA:
        if not isinstance(other, ColorRGBA):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar) -> ColorRGBA:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_grayscale(self) -> ColorRGBA:
        """Luma-weighted gray with alpha preserved."""
        gray = LUMA_R * self.r + LUMA_G * self.g + LUMA_B * self.b
        return ColorRGBA(gray, gray, gray, self.a)

    def lerp(self, other: ColorRGBA, t: float) -> ColorRGBA:
        """Interpolate toward other. t is clamped to [0, 1].

        Also callable as ColorRGBA.lerp(a, b, t).
        """
        t = clamp01(t)
        # a + (b - a) * 1 can miss b by an ulp
        if t == 1.0:
            return other.deep_copy()
        return ColorRGBA(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
            self.a + (other.a - self.a) * t
        )

    def to_hsv(self) -> Vector3:
        """Convert to Vector3(hue degrees [0, 360), saturation, value).

        Also callable as ColorRGBA.to_hsv(color). Achromatic colors get hue 0.
        """
        r, g, b = self.r, self.g, self.b
        max_c = max(r, g, b)
        min_c = min(r, g, b)
        delta = max_c - min_c

        h = 0.0
        if delta > 0.0:
            if max_c == r:
                h = (g - b) / delta
            elif max_c == g:
                h = 2.0 + (b - r) / delta
            else:
                h = 4.0 + (r - g) / delta

            h *= 60.0
            if h < 0.0:
                h += 360.0
            if h >= 360.0:
                h -= 360.0

        s = delta / max_c if max_c > 0.0 else 0.0
        return Vector3(h, s, max_c)

    @staticmethod
    def from_hsv(h: float, s: float, v: float) -> ColorRGBA:
        """Build an opaque color from hue (degrees), saturation and value.

        A Vector3 from to_hsv() can be unpacked straight in: from_hsv(*hsv).
        """
        h = float(h)
        if not math.isfinite(h):
            logger.warning(f"Non-finite hue {h} passed to ColorRGBA.from_hsv, using 0.0")
            h = 0.0
        sector_pos = h / 60.0
        sector_floor = math.floor(sector_pos)
        sector = int(sector_floor) % 6
        f = sector_pos - sector_floor

        p = v * (1.0 - s)
        q = v * (1.0 - f * s)
        t = v * (1.0 - (1.0 - f) * s)

        if sector == 0:
            return ColorRGBA(v, t, p, 1.0)
        elif sector == 1:
            return ColorRGBA(q, v, p, 1.0)
        elif sector == 2:
            return ColorRGBA(p, v, t, 1.0)
        elif sector == 3:
            return ColorRGBA(p, q, v, 1.0)
        elif sector == 4:
            return ColorRGBA(t, p, v, 1.0)
        return ColorRGBA(v, p, q, 1.0)

    @staticmethod
    def from_hex(hex_str: str) -> ColorRGBA:
        """Parse hex color like '#ff6b6b', 'ff6b6b' or '#ff6b6b80'."""
        h = hex_str.lstrip('#')
        if not _HEX_RE.fullmatch(h):
            raise ValueError(f"Invalid hex color: {hex_str}")
        r, g, b = (int(h[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
        a = int(h[6:8], 16) / 255.0 if len(h) == 8 else 1.0
        return ColorRGBA(r, g, b, a)

    @staticmethod
    def from_rgb(r: int, g: int, b: int, a: int = 255) -> ColorRGBA:
        """Create from 0-255 RGB values."""
        return ColorRGBA(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def with_alpha(self, alpha: float) -> ColorRGBA:
        return ColorRGBA(self.r, self.g, self.b, alpha)

    def deep_copy(self) -> ColorRGBA:
        return ColorRGBA(self.r, self.g, self.b, self.a)

    __copy__ = deep_copy

    def __deepcopy__(self, memo) -> ColorRGBA:
        return self.deep_copy()

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_array(self) -> np.ndarray:
        return color_to_array(self)

    def __str__(self) -> str:
        # Alpha is left out of the short form
        p = config.settings.display_precision
        return f"({self.r:.{p}f}, {self.g:.{p}f}, {self.b:.{p}f})"


def color_to_array(c: ColorRGBA) -> np.ndarray:
    """Convert color to a float32 RGBA array."""
    return np.array(c.to_tuple(), dtype=np.float32)
