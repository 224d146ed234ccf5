# glmath/scalar.py
"""
Scalar helpers shared by the vector, matrix and quaternion types.

Everything is computed in float32. Numpy scalars follow IEEE-754 on division
by zero (inf/nan) where Python floats would raise, which is what the
degenerate-case policies of this package rely on.
"""

from __future__ import annotations
from functools import wraps
from typing import Callable, TypeVar

import numpy as np

T = TypeVar('T', bound=Callable)

F32 = np.float32

EPSILON = F32(1e-8)

_ZERO = F32(0.0)
_ONE = F32(1.0)


def f32(x: float) -> np.float32:
    return F32(x)


def fp_silent() -> np.errstate:
    """Context that lets inf/nan through without RuntimeWarnings."""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def ieee(fn: T) -> T:
    """Run fn under fp_silent(): overflow and inf*0 come back as inf/nan."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        with fp_silent():
            return fn(*args, **kwargs)
    return wrapper


# =============================================================================
# Ordering
# =============================================================================

def fmin(a: float, b: float) -> np.float32:
    a = F32(a)
    b = F32(b)
    return a if a < b else b

def fmax(a: float, b: float) -> np.float32:
    a = F32(a)
    b = F32(b)
    return a if a > b else b

def clamp(x: float, lo: float, hi: float) -> np.float32:
    # lo > hi is not reordered
    return fmax(lo, fmin(x, hi))


# =============================================================================
# Interpolation
# =============================================================================

@ieee
def fract(x: float) -> np.float32:
    x = F32(x)
    return x - np.floor(x)

@ieee
def mix(a: float, b: float, t: float) -> np.float32:
    a = F32(a)
    return a + (F32(b) - a) * F32(t)

def step(edge: float, x: float) -> np.float32:
    return _ZERO if F32(x) < F32(edge) else _ONE

@ieee
def smooth(t: float) -> np.float32:
    """Cubic Hermite curve; zero slope at t = 0 and t = 1."""
    t = F32(t)
    return t * t * (F32(3.0) - F32(2.0) * t)

def smoothstep(edge0: float, edge1: float, x: float) -> np.float32:
    e0 = F32(edge0)
    with fp_silent():
        t = clamp((F32(x) - e0) / (F32(edge1) - e0), _ZERO, _ONE)
    return smooth(t)

@ieee
def fade(t: float) -> np.float32:
    """Quintic 6t^5 - 15t^4 + 10t^3 used by gradient noise."""
    t = F32(t)
    return t * t * t * (t * (t * F32(6.0) - F32(15.0)) + F32(10.0))
