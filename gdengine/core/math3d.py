# gdengine/core/math3d.py
"""
Core vector type and scalar helpers for the engine.

Vectors are plain values: copy them with deep_copy() (or copy.copy), compare
them with ==. Component writes are guarded so NaN never gets stored.
Components are stored as double-precision Python floats.
"""

from __future__ import annotations
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from . import config

logger = logging.getLogger(__name__)

_AXES = ('x', 'y', 'z')


def _coerce_component(name: str, value) -> float:
    value = float(value)
    if math.isnan(value):
        logger.warning(f"NaN written to Vector3.{name}, storing 0.0")
        return 0.0
    return value


# =============================================================================
# Vector Types
# =============================================================================

@dataclass
class Vector3:
    """3D vector (position, direction, Euler angles, scale factors).

    Components are Python floats (double precision); to_array() gives the
    float32 form. Writing NaN to a component stores 0.0 instead. Infinities
    are kept.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __setattr__(self, name, value):
        if name in _AXES:
            value = _coerce_component(name, value)
        object.__setattr__(self, name, value)

    # -------------------------------------------------------------------------
    # Named constants (fresh instance per call)
    # -------------------------------------------------------------------------

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def one() -> Vector3:
        return Vector3(1.0, 1.0, 1.0)

    @staticmethod
    def up() -> Vector3:
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def down() -> Vector3:
        return Vector3(0.0, -1.0, 0.0)

    @staticmethod
    def left() -> Vector3:
        return Vector3(-1.0, 0.0, 0.0)

    @staticmethod
    def right() -> Vector3:
        return Vector3(1.0, 0.0, 0.0)

    @staticmethod
    def forward() -> Vector3:
        return Vector3(0.0, 0.0, 1.0)

    @staticmethod
    def back() -> Vector3:
        return Vector3(0.0, 0.0, -1.0)

    @staticmethod
    def unit_x() -> Vector3:
        return Vector3(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> Vector3:
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> Vector3:
        return Vector3(0.0, 0.0, 1.0)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def negate(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def scale(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def multiply(self, other: Vector3) -> Vector3:
        """Component-wise product."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def divide(self, scalar: float) -> Vector3:
        """Divide every component by scalar.

        Raises ZeroDivisionError when scalar is exactly zero.
        """
        if scalar == 0:
            raise ZeroDivisionError(f"Cannot divide {self!r} by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Vector3:
        return self.negate()

    def __mul__(self, other) -> Vector3:
        if isinstance(other, Vector3):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, scalar) -> Vector3:
        if isinstance(scalar, numbers.Real):
            return self.scale(scalar)
        return NotImplemented

    def __truediv__(self, scalar) -> Vector3:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.divide(scalar)

    # -------------------------------------------------------------------------
    # Length
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def squared_magnitude(self) -> float:
        """Squared length; use for comparisons to skip the sqrt."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> None:
        """Scale this vector to unit length in place. The zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0:
            return
        self.x /= mag
        self.y /= mag
        self.z /= mag

    def normalized(self) -> Vector3:
        """Unit-length copy of this vector, or the zero vector."""
        mag = self.magnitude()
        if mag == 0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def distance_to(self, other: Vector3) -> float:
        return (self - other).magnitude()

    def lerp(self, other: Vector3, t: float) -> Vector3:
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t
        )

    # -------------------------------------------------------------------------
    # Copying & conversion
    # -------------------------------------------------------------------------

    def deep_copy(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    __copy__ = deep_copy

    def __deepcopy__(self, memo) -> Vector3:
        return self.deep_copy()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=np.float32)

    @staticmethod
    def from_tuple(t: Tuple[float, float, float]) -> Vector3:
        return Vector3(t[0], t[1], t[2])

    def __str__(self) -> str:
        p = config.settings.display_precision
        return f"({self.x:.{p}f}, {self.y:.{p}f}, {self.z:.{p}f})"


# =============================================================================
# Free Functions
# =============================================================================

def dot(a: Vector3, b: Vector3) -> float:
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return a.cross(b)


def distance(a: Vector3, b: Vector3) -> float:
    return a.distance_to(b)


# =============================================================================
# Utility Functions
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))


def clamp01(value: float) -> float:
    """Clamp into [0, 1]; NaN maps to 0."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return clamp(value, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)
