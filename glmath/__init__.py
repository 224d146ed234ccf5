# glmath/__init__.py
"""
glmath - float32 linear algebra for real-time graphics.

Core components:
- Vec2, Vec3, Vec4: vector value types with GLSL-style helpers
- Mat4: column-major 4x4 matrix with projection/view builders
- Quat: rotation quaternion
- MathConfig: normalization policy for reflect/refract/axis-angle
"""

from .config import DEFAULT_CONFIG, MathConfig
from .matrix import Mat4
from .quat import Quat
from .scalar import (
    EPSILON,
    clamp, fade, fmax, fmin, fract, mix, smooth, smoothstep, step,
)
from .vector import Vec2, Vec3, Vec4

__version__ = '0.1.0'

__all__ = [
    # Types
    'Vec2', 'Vec3', 'Vec4',
    'Mat4',
    'Quat',

    # Config
    'MathConfig',
    'DEFAULT_CONFIG',

    # Scalar helpers
    'EPSILON',
    'clamp', 'fract', 'mix', 'step', 'smooth', 'smoothstep', 'fade',
    'fmin', 'fmax',
]
