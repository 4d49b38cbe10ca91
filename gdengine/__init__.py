# gdengine/__init__.py
"""
GDEngine - Teaching math library for a small game engine.

Core components:
- Vector3: 3D vector math (dot, cross, normalization)
- ColorRGBA: Clamped RGBA color with HSV conversion and interpolation
- Transform: Position / Euler rotation / scale of a scene entity
- SignalBridge: Change notifications for bound transforms
"""

from .core import (
    # Math
    Vector3,
    dot, cross, distance,
    clamp, clamp01, lerp, to_degrees, to_radians,

    # Color
    ColorRGBA,
    color_to_array,

    # Scene
    Rotation,
    EulerRotation,
    Transform,

    # Signals
    SignalBridge,
    SignalEmitter,
    Connection,
    SIGNAL_TRANSFORM_CHANGED,

    # Config
    MathConfig,
    settings,
    setup_default_logging,
)

__version__ = '0.1.0'

__all__ = [
    # Math
    'Vector3',
    'dot', 'cross', 'distance',
    'clamp', 'clamp01', 'lerp', 'to_degrees', 'to_radians',

    # Color
    'ColorRGBA',
    'color_to_array',

    # Scene
    'Rotation',
    'EulerRotation',
    'Transform',

    # Signals
    'SignalBridge',
    'SignalEmitter',
    'Connection',
    'SIGNAL_TRANSFORM_CHANGED',

    # Config
    'MathConfig',
    'settings',
    'setup_default_logging',
]
