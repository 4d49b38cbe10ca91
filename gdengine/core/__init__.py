# gdengine/core/__init__.py
from .math3d import (
    Vector3,
    dot, cross, distance,
    clamp, clamp01, lerp, to_degrees, to_radians,
)
from .color import ColorRGBA, color_to_array
from .transform import Rotation, EulerRotation, Transform
from .signal import SignalBridge, SignalEmitter, Connection, SIGNAL_TRANSFORM_CHANGED
from .config import MathConfig, settings, setup_default_logging
