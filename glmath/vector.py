# glmath/vector.py
"""
2D/3D/4D vector value types.

Components are float32. Operations never mutate their inputs; each one
returns a new vector. Helpers mirror their GLSL namesakes (mix, step,
smoothstep, reflect, refract, ...).
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Callable, ClassVar, Iterator, Sequence, Tuple, Type, TypeVar

import numpy as np

from .config import DEFAULT_CONFIG, MathConfig
from .scalar import (
    F32, clamp, fade, fmax, fmin, fract, ieee, mix, smoothstep, step,
)

C = TypeVar('C', bound='_Components')
V = TypeVar('V', bound='_Vector')


# =============================================================================
# Shared behaviour
# =============================================================================

class _Components:
    """Fixed-size float32 record: coercion, iteration and interchange."""

    _FIELDS: ClassVar[Tuple[str, ...]] = ()

    # keep numpy scalars from broadcasting over us in `np.float32(2) * v`
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        for name in self._FIELDS:
            setattr(self, name, F32(getattr(self, name)))

    def to_tuple(self) -> Tuple[np.float32, ...]:
        return tuple(getattr(self, name) for name in self._FIELDS)

    def to_numpy(self) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=np.float32)

    def __iter__(self) -> Iterator[np.float32]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return len(self._FIELDS)

    def __getitem__(self, idx: int) -> np.float32:
        return self.to_tuple()[idx]

    @classmethod
    def from_sequence(cls: Type[C], values: Sequence[float]) -> C:
        if len(values) != len(cls._FIELDS):
            raise ValueError(
                f"{cls.__name__} needs {len(cls._FIELDS)} components, got {len(values)}"
            )
        return cls(*values)


class _Vector(_Components):
    """Component-wise operations common to every arity."""

    @ieee
    def _map(self: V, fn: Callable[..., float], *others: _Vector) -> V:
        columns = [self.to_tuple()] + [o.to_tuple() for o in others]
        return type(self)(*(fn(*args) for args in zip(*columns)))

    @ieee
    def length(self) -> np.float32:
        return np.sqrt(self.dot(self))

    @ieee
    def normalize(self: V) -> V:
        ln = self.length()
        if ln == 0.0:
            return self.zero()
        return self.div_scale(ln)

    def distance(self: V, other: V) -> np.float32:
        return self.sub(other).length()

    @ieee
    def reflect(self: V, n: V, config: MathConfig = DEFAULT_CONFIG) -> V:
        """Reflect about the surface normal n."""
        if not config.assume_normalized:
            n = n.normalize()
        d = self.dot(n)
        return self.sub(n.scale(F32(2.0) * d))

    @ieee
    def refract(self: V, n: V, eta: float, config: MathConfig = DEFAULT_CONFIG) -> V:
        """Refract through a surface with normal n and index ratio eta.

        Returns the zero vector on total internal reflection.
        """
        if not config.assume_normalized:
            n = n.normalize()
        eta = F32(eta)
        d = n.dot(self)
        k = F32(1.0) - eta * eta * (F32(1.0) - d * d)
        if k < 0.0:
            return self.zero()
        return self.scale(eta).sub(n.scale(eta * d + np.sqrt(k)))

    def floor(self: V) -> V:
        return self._map(np.floor)

    def ceil(self: V) -> V:
        return self._map(np.ceil)

    def abs(self: V) -> V:
        return self._map(np.abs)

    def fract(self: V) -> V:
        return self._map(fract)

    def min(self: V, other: V) -> V:
        return self._map(fmin, other)

    def max(self: V, other: V) -> V:
        return self._map(fmax, other)

    def clamp(self: V, lo: V, hi: V) -> V:
        return self._map(clamp, lo, hi)

    def mix(self: V, other: V, t: float) -> V:
        return self._map(lambda a, b: mix(a, b, t), other)

    def step(self: V, edge: V) -> V:
        """0 where self < edge, 1 elsewhere."""
        return self._map(lambda x, e: step(e, x), edge)

    def smoothstep(self: V, edge0: V, edge1: V) -> V:
        return self._map(lambda x, e0, e1: smoothstep(e0, e1, x), edge0, edge1)

    def __abs__(self: V) -> V:
        return self.abs()

    def __add__(self: V, other: V) -> V:
        return self.add(other)

    def __sub__(self: V, other: V) -> V:
        return self.sub(other)

    def __neg__(self: V) -> V:
        return self.neg()

    def __mul__(self, other):
        if isinstance(other, type(self)):
            return self.mul(other)
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, type(self)):
            return self.div(other)
        if isinstance(other, Real):
            return self.div_scale(other)
        return NotImplemented

    @classmethod
    def splat(cls: Type[V], s: float) -> V:
        return cls(*([s] * len(cls._FIELDS)))

    @classmethod
    def zero(cls: Type[V]) -> V:
        return cls.splat(0.0)

    @classmethod
    def one(cls: Type[V]) -> V:
        return cls.splat(1.0)


# =============================================================================
# Vector Types
# =============================================================================

@dataclass
class Vec2(_Vector):
    """2D vector (screen space, texture coordinates, noise lattices)."""
    x: float = 0.0
    y: float = 0.0

    _FIELDS: ClassVar[Tuple[str, ...]] = ('x', 'y')

    @ieee
    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    @ieee
    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    @ieee
    def mul(self, other: Vec2) -> Vec2:
        return Vec2(self.x * other.x, self.y * other.y)

    @ieee
    def div(self, other: Vec2) -> Vec2:
        return Vec2(self.x / other.x, self.y / other.y)

    @ieee
    def scale(self, s: float) -> Vec2:
        s = F32(s)
        return Vec2(self.x * s, self.y * s)

    @ieee
    def div_scale(self, s: float) -> Vec2:
        s = F32(s)
        return Vec2(self.x / s, self.y / s)

    def neg(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    @ieee
    def dot(self, other: Vec2) -> np.float32:
        return self.x * other.x + self.y * other.y

    def fade(self) -> Vec2:
        return self._map(fade)


@dataclass
class Vec3(_Vector):
    """3D vector for positions, directions and normals."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _FIELDS: ClassVar[Tuple[str, ...]] = ('x', 'y', 'z')

    @ieee
    def add(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    @ieee
    def sub(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    @ieee
    def mul(self, other: Vec3) -> Vec3:
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    @ieee
    def div(self, other: Vec3) -> Vec3:
        return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)

    @ieee
    def scale(self, s: float) -> Vec3:
        s = F32(s)
        return Vec3(self.x * s, self.y * s, self.z * s)

    @ieee
    def div_scale(self, s: float) -> Vec3:
        s = F32(s)
        return Vec3(self.x / s, self.y / s, self.z / s)

    def neg(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    @ieee
    def dot(self, other: Vec3) -> np.float32:
        return self.x * other.x + self.y * other.y + self.z * other.z

    @ieee
    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def fade(self) -> Vec3:
        return self._map(fade)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xz(self) -> Vec2:
        return Vec2(self.x, self.z)

    def yz(self) -> Vec2:
        return Vec2(self.y, self.z)

    @staticmethod
    def unit_x() -> Vec3:
        return Vec3(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> Vec3:
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> Vec3:
        return Vec3(0.0, 0.0, 1.0)


@dataclass
class Vec4(_Vector):
    """4D vector for homogeneous coordinates."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _FIELDS: ClassVar[Tuple[str, ...]] = ('x', 'y', 'z', 'w')

    @ieee
    def add(self, other: Vec4) -> Vec4:
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    @ieee
    def sub(self, other: Vec4) -> Vec4:
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    @ieee
    def mul(self, other: Vec4) -> Vec4:
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    @ieee
    def div(self, other: Vec4) -> Vec4:
        return Vec4(self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w)

    @ieee
    def scale(self, s: float) -> Vec4:
        s = F32(s)
        return Vec4(self.x * s, self.y * s, self.z * s, self.w * s)

    @ieee
    def div_scale(self, s: float) -> Vec4:
        s = F32(s)
        return Vec4(self.x / s, self.y / s, self.z / s, self.w / s)

    def neg(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    @ieee
    def dot(self, other: Vec4) -> np.float32:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    @staticmethod
    def from_vec3(v: Vec3, w: float = 1.0) -> Vec4:
        return Vec4(v.x, v.y, v.z, w)
