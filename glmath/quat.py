# glmath/quat.py
"""
Quaternion (x, y, z, w) with w the scalar part.

Only unit quaternions are rotations. Nothing here renormalizes implicitly
except from_axis_angle, which normalizes its axis unless the config says the
axis is already unit length.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np

from .config import DEFAULT_CONFIG, MathConfig
from .matrix import Mat4
from .scalar import F32, ieee
from .vector import Vec3, _Components


@dataclass
class Quat(_Components):
    """Quaternion for rotations. Defaults to identity."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    _FIELDS: ClassVar[Tuple[str, ...]] = ('x', 'y', 'z', 'w')

    @ieee
    def dot(self, other: Quat) -> np.float32:
        return self.x*other.x + self.y*other.y + self.z*other.z + self.w*other.w

    def neg(self) -> Quat:
        """Same rotation, opposite sign (q and -q are rotation-equivalent)."""
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __neg__(self) -> Quat:
        return self.neg()

    @ieee
    def mul(self, other: Quat) -> Quat:
        """Hamilton product self * other: other's rotation is applied first."""
        return Quat(
            self.w*other.x + self.x*other.w + self.y*other.z - self.z*other.y,
            self.w*other.y - self.x*other.z + self.y*other.w + self.z*other.x,
            self.w*other.z + self.x*other.y - self.y*other.x + self.z*other.w,
            self.w*other.w - self.x*other.x - self.y*other.y - self.z*other.z
        )

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return self.mul(other)

    def conjugate(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, self.w)

    @ieee
    def length(self) -> np.float32:
        return np.sqrt(self.dot(self))

    @ieee
    def normalize(self) -> Quat:
        ln = self.length()
        if ln == 0.0:
            return Quat.identity()
        return Quat(self.x/ln, self.y/ln, self.z/ln, self.w/ln)

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate v by this (unit) quaternion."""
        qv = Quat(v.x, v.y, v.z, 0.0)
        r = self * qv * self.conjugate()
        return Vec3(r.x, r.y, r.z)

    @ieee
    def to_mat4(self) -> Mat4:
        """Column-major rotation matrix, same handedness as Mat4.rotate_*."""
        x, y, z, w = self.x, self.y, self.z, self.w

        xx = x*x; yy = y*y; zz = z*z
        xy = x*y; xz = x*z; yz = y*z
        wx = w*x; wy = w*y; wz = w*z

        one = F32(1.0)
        two = F32(2.0)
        return Mat4((
            one - two*(yy + zz), two*(xy + wz),       two*(xz - wy),       0.0,
            two*(xy - wz),       one - two*(xx + zz), two*(yz + wx),       0.0,
            two*(xz + wy),       two*(yz - wx),       one - two*(xx + yy), 0.0,
            0.0,                 0.0,                 0.0,                 1.0
        ))

    @staticmethod
    def identity() -> Quat:
        return Quat(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    @ieee
    def from_axis_angle(axis: Vec3, angle: float, config: MathConfig = DEFAULT_CONFIG) -> Quat:
        """Rotation of angle radians about axis.

        A zero axis yields a zero vector part; the result is then not a
        unit quaternion.
        """
        if not config.assume_normalized:
            axis = axis.normalize()
        half = F32(angle) * F32(0.5)
        s = np.sin(half)
        return Quat(axis.x * s, axis.y * s, axis.z * s, np.cos(half))
