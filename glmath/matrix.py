# glmath/matrix.py
"""
4x4 float32 matrix in column-major order.

Element (row r, column c) is stored at linear index c*4 + r, which is the
layout OpenGL-style uniforms expect, so `to_bytes()` can be uploaded as is.
Transforms act on column vectors: (a @ b) @ v == a @ (b @ v).
"""

from __future__ import annotations
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from .scalar import F32, ieee
from .vector import Vec3, Vec4

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _cofactors(m: Sequence[np.float32]) -> List[np.float32]:
    """Transposed cofactor matrix (the adjugate), column-major."""
    return [
        m[5]*m[10]*m[15] - m[5]*m[11]*m[14] - m[9]*m[6]*m[15] + m[9]*m[7]*m[14] + m[13]*m[6]*m[11] - m[13]*m[7]*m[10],
        -m[1]*m[10]*m[15] + m[1]*m[11]*m[14] + m[9]*m[2]*m[15] - m[9]*m[3]*m[14] - m[13]*m[2]*m[11] + m[13]*m[3]*m[10],
        m[1]*m[6]*m[15] - m[1]*m[7]*m[14] - m[5]*m[2]*m[15] + m[5]*m[3]*m[14] + m[13]*m[2]*m[7] - m[13]*m[3]*m[6],
        -m[1]*m[6]*m[11] + m[1]*m[7]*m[10] + m[5]*m[2]*m[11] - m[5]*m[3]*m[10] - m[9]*m[2]*m[7] + m[9]*m[3]*m[6],

        -m[4]*m[10]*m[15] + m[4]*m[11]*m[14] + m[8]*m[6]*m[15] - m[8]*m[7]*m[14] - m[12]*m[6]*m[11] + m[12]*m[7]*m[10],
        m[0]*m[10]*m[15] - m[0]*m[11]*m[14] - m[8]*m[2]*m[15] + m[8]*m[3]*m[14] + m[12]*m[2]*m[11] - m[12]*m[3]*m[10],
        -m[0]*m[6]*m[15] + m[0]*m[7]*m[14] + m[4]*m[2]*m[15] - m[4]*m[3]*m[14] - m[12]*m[2]*m[7] + m[12]*m[3]*m[6],
        m[0]*m[6]*m[11] - m[0]*m[7]*m[10] - m[4]*m[2]*m[11] + m[4]*m[3]*m[10] + m[8]*m[2]*m[7] - m[8]*m[3]*m[6],

        m[4]*m[9]*m[15] - m[4]*m[11]*m[13] - m[8]*m[5]*m[15] + m[8]*m[7]*m[13] + m[12]*m[5]*m[11] - m[12]*m[7]*m[9],
        -m[0]*m[9]*m[15] + m[0]*m[11]*m[13] + m[8]*m[1]*m[15] - m[8]*m[3]*m[13] - m[12]*m[1]*m[11] + m[12]*m[3]*m[9],
        m[0]*m[5]*m[15] - m[0]*m[7]*m[13] - m[4]*m[1]*m[15] + m[4]*m[3]*m[13] + m[12]*m[1]*m[7] - m[12]*m[3]*m[5],
        -m[0]*m[5]*m[11] + m[0]*m[7]*m[9] + m[4]*m[1]*m[11] - m[4]*m[3]*m[9] - m[8]*m[1]*m[7] + m[8]*m[3]*m[5],

        -m[4]*m[9]*m[14] + m[4]*m[10]*m[13] + m[8]*m[5]*m[14] - m[8]*m[6]*m[13] - m[12]*m[5]*m[10] + m[12]*m[6]*m[9],
        m[0]*m[9]*m[14] - m[0]*m[10]*m[13] - m[8]*m[1]*m[14] + m[8]*m[2]*m[13] + m[12]*m[1]*m[10] - m[12]*m[2]*m[9],
        -m[0]*m[5]*m[14] + m[0]*m[6]*m[13] + m[4]*m[1]*m[14] - m[4]*m[2]*m[13] - m[12]*m[1]*m[6] + m[12]*m[2]*m[5],
        m[0]*m[5]*m[10] - m[0]*m[6]*m[9] - m[4]*m[1]*m[10] + m[4]*m[2]*m[9] + m[8]*m[1]*m[6] - m[8]*m[2]*m[5],
    ]


# =============================================================================
# Matrix Type
# =============================================================================

class Mat4:
    """4x4 matrix for 3D transforms. `Mat4()` is the zero matrix."""

    __slots__ = ('m',)

    __array_ufunc__ = None

    def __init__(self, values: Sequence[float] = None):
        """Initialize with 16 column-major values, or zeros."""
        if values is None:
            self.m = (F32(0.0),) * 16
            return
        arr = np.asarray(values, dtype=np.float32)
        if arr.shape != (16,):
            raise ValueError(f"Mat4 needs 16 column-major values, got shape {arr.shape}")
        self.m = tuple(arr)

    def __getitem__(self, idx: Union[int, Tuple[int, int]]) -> np.float32:
        if isinstance(idx, tuple):
            row, col = idx
            return self.m[col * 4 + row]
        return self.m[idx]

    def __iter__(self) -> Iterator[np.float32]:
        return iter(self.m)

    def __len__(self) -> int:
        return 16

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.m == other.m

    __hash__ = None

    def __repr__(self) -> str:
        return f"Mat4({[float(v) for v in self.m]})"

    def __matmul__(self, other: Union[Mat4, Vec4]) -> Union[Mat4, Vec4]:
        if isinstance(other, Mat4):
            return self.mul(other)
        elif isinstance(other, Vec4):
            return self.mul_vec4(other)
        raise TypeError(f"Cannot multiply Mat4 by {type(other).__name__}")

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    @ieee
    def mul(self, other: Mat4) -> Mat4:
        """self * other: other is applied first."""
        a = self.m
        b = other.m
        return Mat4(tuple(
            a[r] * b[c*4] + a[4 + r] * b[c*4 + 1] + a[8 + r] * b[c*4 + 2] + a[12 + r] * b[c*4 + 3]
            for c in range(4)
            for r in range(4)
        ))

    @ieee
    def mul_vec4(self, v: Vec4) -> Vec4:
        m = self.m
        return Vec4(
            m[0]*v.x + m[4]*v.y + m[8]*v.z  + m[12]*v.w,
            m[1]*v.x + m[5]*v.y + m[9]*v.z  + m[13]*v.w,
            m[2]*v.x + m[6]*v.y + m[10]*v.z + m[14]*v.w,
            m[3]*v.x + m[7]*v.y + m[11]*v.z + m[15]*v.w
        )

    @ieee
    def determinant(self) -> np.float32:
        m = self.m
        c = _cofactors(m)
        return m[0]*c[0] + m[1]*c[4] + m[2]*c[8] + m[3]*c[12]

    @ieee
    def inverse(self) -> Mat4:
        """Adjugate / determinant.

        Singular matrices are not detected: the result is filled with
        inf/nan from the division by a zero determinant.
        """
        m = self.m
        c = _cofactors(m)
        det = m[0]*c[0] + m[1]*c[4] + m[2]*c[8] + m[3]*c[12]
        inv_det = F32(1.0) / det
        return Mat4(tuple(v * inv_det for v in c))

    def transpose(self) -> Mat4:
        m = self.m
        return Mat4(tuple(m[r*4 + c] for c in range(4) for r in range(4)))

    # -------------------------------------------------------------------------
    # Interchange
    # -------------------------------------------------------------------------

    def to_tuple(self) -> Tuple[np.float32, ...]:
        return self.m

    def to_list(self) -> List[float]:
        """Column-major Python floats."""
        return [float(v) for v in self.m]

    def to_numpy(self, square: bool = False) -> np.ndarray:
        """Flat column-major array, or a (4, 4) array indexed [row, col]."""
        flat = np.array(self.m, dtype=np.float32)
        if square:
            return flat.reshape(4, 4).T.copy()
        return flat

    def to_bytes(self) -> bytes:
        """Little-endian float32 buffer, ready for a mat4 uniform."""
        return self.to_numpy().astype('<f4').tobytes()

    @staticmethod
    def from_numpy(arr: np.ndarray) -> Mat4:
        arr = np.asarray(arr, dtype=np.float32)
        if arr.shape == (4, 4):
            return Mat4(arr.flatten(order='F'))
        if arr.shape == (16,):
            return Mat4(arr)
        raise ValueError(f"expected shape (16,) or (4, 4), got {arr.shape}")

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    @staticmethod
    def zero() -> Mat4:
        return Mat4()

    @staticmethod
    def identity() -> Mat4:
        return Mat4(_IDENTITY)

    @staticmethod
    def translate(x: float, y: float, z: float) -> Mat4:
        m = list(_IDENTITY)
        m[12] = x
        m[13] = y
        m[14] = z
        return Mat4(m)

    @staticmethod
    def translate_vec(v: Vec3) -> Mat4:
        return Mat4.translate(v.x, v.y, v.z)

    @staticmethod
    def scale(x: float, y: float, z: float) -> Mat4:
        m = list(_IDENTITY)
        m[0] = x
        m[5] = y
        m[10] = z
        return Mat4(m)

    @staticmethod
    def rotate_x(angle: float) -> Mat4:
        """Rotation about +X (radians); +Y turns towards +Z.

        +sin sits at index 6 and -sin at 9. Swapping them, as some C
        math headers do, turns +Y towards -Z instead.
        """
        c = np.cos(F32(angle))
        s = np.sin(F32(angle))
        m = list(_IDENTITY)
        m[5] = c
        m[6] = s
        m[9] = -s
        m[10] = c
        return Mat4(m)

    @staticmethod
    def rotate_y(angle: float) -> Mat4:
        """Rotation about +Y (radians); +Z turns towards +X."""
        c = np.cos(F32(angle))
        s = np.sin(F32(angle))
        m = list(_IDENTITY)
        m[0] = c
        m[2] = -s
        m[8] = s
        m[10] = c
        return Mat4(m)

    @staticmethod
    def rotate_z(angle: float) -> Mat4:
        """Rotation about +Z (radians); +X turns towards +Y."""
        c = np.cos(F32(angle))
        s = np.sin(F32(angle))
        m = list(_IDENTITY)
        m[0] = c
        m[1] = s
        m[4] = -s
        m[5] = c
        return Mat4(m)

    @staticmethod
    @ieee
    def perspective(fov_y: float, aspect: float, near: float, far: float) -> Mat4:
        """OpenGL-style projection, right-handed eye space looking down -Z."""
        near = F32(near)
        far = F32(far)
        t = np.tan(F32(fov_y) * F32(0.5))
        m = [F32(0.0)] * 16
        m[0] = F32(1.0) / (F32(aspect) * t)
        m[5] = F32(1.0) / t
        m[10] = -(far + near) / (far - near)
        m[11] = F32(-1.0)
        m[14] = -(F32(2.0) * far * near) / (far - near)
        return Mat4(m)

    @staticmethod
    @ieee
    def look_at(eye: Vec3, center: Vec3, up: Vec3) -> Mat4:
        """View matrix for a camera at eye looking at center.

        up must not be parallel to the view direction; the basis collapses
        to zero vectors if it is.
        """
        f = (center - eye).normalize()
        s = f.cross(up).normalize()
        u = s.cross(f)

        m = list(_IDENTITY)
        m[0], m[4], m[8] = s.x, s.y, s.z
        m[1], m[5], m[9] = u.x, u.y, u.z
        m[2], m[6], m[10] = -f.x, -f.y, -f.z

        m[12] = -s.dot(eye)
        m[13] = -u.dot(eye)
        m[14] = f.dot(eye)
        return Mat4(m)
