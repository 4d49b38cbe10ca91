# gdengine/core/transform.py
"""
Transform - Position, rotation and scale of a single scene entity.

Rotation is stored behind the Rotation interface. EulerRotation keeps plain
Euler angles in degrees and simply accumulates deltas: angles can grow past
360 or go negative and are never wrapped. Gimbal lock applies. A quaternion
model can be dropped in later without changing Transform's API.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import logging

from .math3d import Vector3
from .signal import SignalEmitter, SIGNAL_TRANSFORM_CHANGED

logger = logging.getLogger(__name__)


# =============================================================================
# Rotation Models
# =============================================================================

class Rotation(ABC):
    """Storage for a transform's orientation."""

    @abstractmethod
    def rotate(self, delta_degrees: Vector3) -> None:
        """Apply a rotation given as Euler angle deltas in degrees."""

    @abstractmethod
    def euler_angles(self) -> Vector3:
        """Current orientation as Euler angles in degrees."""

    @abstractmethod
    def set_euler(self, angles_degrees: Vector3) -> None:
        """Replace the orientation."""

    @abstractmethod
    def deep_copy(self) -> Rotation:
        pass


class EulerRotation(Rotation):
    """Additive Euler angles, in degrees."""

    def __init__(self, angles: Optional[Vector3] = None):
        self._angles = angles.deep_copy() if angles is not None else Vector3.zero()

    def rotate(self, delta_degrees: Vector3) -> None:
        self._angles = self._angles + delta_degrees

    def euler_angles(self) -> Vector3:
        return self._angles.deep_copy()

    def set_euler(self, angles_degrees: Vector3) -> None:
        self._angles = angles_degrees.deep_copy()

    def deep_copy(self) -> EulerRotation:
        return EulerRotation(self._angles)

    def __repr__(self) -> str:
        return f"EulerRotation({self._angles!r})"


# =============================================================================
# Transform
# =============================================================================

class Transform(SignalEmitter):
    """Combined position, rotation (Euler degrees), scale.

    Vectors passed in or assigned are copied, and the properties hand out
    copies, so a transform never shares state with its callers.

    When bound to a SignalBridge, every mutation emits
    SIGNAL_TRANSFORM_CHANGED with the transform as the only argument.
    """

    def __init__(
        self,
        position: Optional[Vector3] = None,
        rotation: Optional[Vector3] = None,
        scale: Optional[Vector3] = None,
        rotation_model: Optional[Rotation] = None,
    ):
        self._position = position.deep_copy() if position is not None else Vector3.zero()
        self._scale = scale.deep_copy() if scale is not None else Vector3.one()
        self._rotation = rotation_model if rotation_model is not None else EulerRotation()
        if rotation is not None:
            self._rotation.set_euler(rotation)
        self._dirty = False

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def position(self) -> Vector3:
        return self._position.deep_copy()

    @position.setter
    def position(self, value: Vector3):
        self._position = value.deep_copy()
        self._changed()

    @property
    def rotation(self) -> Vector3:
        return self._rotation.euler_angles()

    @rotation.setter
    def rotation(self, value: Vector3):
        self._rotation.set_euler(value)
        self._changed()

    @property
    def scale(self) -> Vector3:
        return self._scale.deep_copy()

    @scale.setter
    def scale(self, value: Vector3):
        self._scale = value.deep_copy()
        self._changed()

    @property
    def rotation_model(self) -> Rotation:
        return self._rotation

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def clear_dirty(self):
        self._dirty = False

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def translate(self, delta: Vector3) -> Transform:
        self._position = self._position + delta
        self._changed()
        return self

    def rotate(self, delta_euler_degrees: Vector3) -> Transform:
        """Add Euler angle deltas. No wrap into [0, 360)."""
        self._rotation.rotate(delta_euler_degrees)
        self._changed()
        return self

    def scale_by(self, factors: Vector3) -> Transform:
        """Multiply the current scale component-wise."""
        self._scale = self._scale.multiply(factors)
        self._changed()
        return self

    def _changed(self):
        self._dirty = True
        logger.debug(f"Transform changed: {self}")
        self.emit(SIGNAL_TRANSFORM_CHANGED, self)

    # -------------------------------------------------------------------------
    # Copying & display
    # -------------------------------------------------------------------------

    def deep_copy(self) -> Transform:
        """Independent copy. The copy is clean and not bound to any bridge."""
        return Transform(
            position=self._position,
            scale=self._scale,
            rotation_model=self._rotation.deep_copy(),
        )

    __copy__ = deep_copy

    def __deepcopy__(self, memo) -> Transform:
        return self.deep_copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return (
            self._position == other._position
            and self.rotation == other.rotation
            and self._scale == other._scale
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Transform(position={self._position!r}, "
            f"rotation={self.rotation!r}, scale={self._scale!r})"
        )

    def __str__(self) -> str:
        return f"Transform(position={self._position}, rotation={self.rotation}, scale={self._scale})"
