import math

import numpy as np
import pytest

from glmath import MathConfig, Vec2, Vec3, Vec4


ASSUME_NORMALIZED = MathConfig(assume_normalized=True)


def test_components_are_float32():
    v = Vec3(1, 2, 3)
    assert all(isinstance(c, np.float32) for c in v)
    assert v.to_numpy().dtype == np.float32

def test_vec3_add():
    assert Vec3(1.0, 2.0, 3.0) + Vec3(4.0, 5.0, 6.0) == Vec3(5.0, 7.0, 9.0)
    assert Vec3(1.0, 2.0, 3.0).add(Vec3(4.0, 5.0, 6.0)) == Vec3(5.0, 7.0, 9.0)

def test_arithmetic_operators():
    a = Vec2(6.0, 8.0)
    b = Vec2(2.0, 4.0)
    assert a - b == Vec2(4.0, 4.0)
    assert a * b == Vec2(12.0, 32.0)
    assert a / b == Vec2(3.0, 2.0)
    assert a * 0.5 == Vec2(3.0, 4.0)
    assert 2.0 * b == Vec2(4.0, 8.0)
    assert np.float32(2.0) * b == Vec2(4.0, 8.0)
    assert a / 2.0 == Vec2(3.0, 4.0)
    assert -a == Vec2(-6.0, -8.0)

def test_mixed_arity_operands_are_rejected():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) * Vec2(1.0, 2.0)

def test_div_by_zero_component_is_ieee():
    with np.errstate(all='raise'):
        r = Vec4(1.0, -1.0, 0.0, 4.0).div(Vec4(0.0, 0.0, 0.0, 2.0))
    assert r.x == np.inf
    assert r.y == -np.inf
    assert math.isnan(r.z)
    assert r.w == 2.0

def test_div_scale_by_zero():
    r = Vec2(1.0, 0.0).div_scale(0.0)
    assert r.x == np.inf
    assert math.isnan(r.y)

def test_dot_is_symmetric():
    a = Vec4(1.0, -2.0, 3.5, 0.25)
    b = Vec4(-4.0, 0.5, 2.0, 8.0)
    assert a.dot(b) == b.dot(a)
    assert a.dot(b) == 4.0

def test_length():
    assert Vec2(3.0, 4.0).length() == 5.0
    assert Vec3(0.0, 0.0, 0.0).length() == 0.0
    assert Vec4(-1.0, -1.0, -1.0, -1.0).length() == 2.0

def test_normalize_has_unit_length():
    for v in [Vec2(3.0, -4.0), Vec3(1.0, 2.0, 3.0), Vec4(0.1, 0.0, -7.0, 2.0)]:
        assert abs(v.normalize().length() - 1.0) < 1e-6

def test_normalize_zero_returns_zero():
    with np.errstate(all='raise'):
        assert Vec2.zero().normalize() == Vec2(0.0, 0.0)
        assert Vec3.zero().normalize() == Vec3(0.0, 0.0, 0.0)
        assert Vec4.zero().normalize() == Vec4(0.0, 0.0, 0.0, 0.0)

def test_distance():
    assert Vec3(1.0, 1.0, 1.0).distance(Vec3(1.0, 4.0, 5.0)) == 5.0

def test_cross_is_right_handed():
    assert Vec3.unit_x().cross(Vec3.unit_y()) == Vec3.unit_z()
    assert Vec3.unit_y().cross(Vec3.unit_z()) == Vec3.unit_x()
    assert Vec3.unit_y().cross(Vec3.unit_x()) == -Vec3.unit_z()

def test_reflect_normal_incidence():
    v = Vec3(0.0, -3.0, 0.0)
    assert v.reflect(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 3.0, 0.0)

def test_reflect_renormalizes_normal_by_default():
    v = Vec2(1.0, -1.0)
    assert v.reflect(Vec2(0.0, 5.0)) == Vec2(1.0, 1.0)

def test_reflect_with_assumed_normal_uses_it_as_is():
    v = Vec2(1.0, -1.0)
    # n = (0, 2): v - 2 * dot(v, n) * n = (1, -1) - 2 * -2 * (0, 2)
    assert v.reflect(Vec2(0.0, 2.0), config=ASSUME_NORMALIZED) == Vec2(1.0, 7.0)

def test_refract_straight_through_with_unit_eta():
    v = Vec3(0.6, -0.8, 0.0)
    r = v.refract(Vec3(0.0, 1.0, 0.0), 1.0)
    assert abs(r.x - 0.6) < 1e-6
    assert abs(r.y + 0.8) < 1e-6

def test_refract_total_internal_reflection_is_zero():
    v = Vec2(1.0, -0.1).normalize()
    assert v.refract(Vec2(0.0, 1.0), 1.5) == Vec2(0.0, 0.0)

def test_refract_bends_towards_normal():
    v = Vec3(1.0, -1.0, 0.0).normalize()
    r = v.refract(Vec3(0.0, 2.0, 0.0), 1.0 / 1.33)
    assert abs(r.length() - 1.0) < 1e-5
    assert 0.0 < r.x < v.x
    assert r.y < 0.0

def test_refract_with_assumed_normal_uses_it_as_is():
    v = Vec3(0.0, -1.0, 0.0)
    # d = -3, k = 9: the normal term cancels and v passes straight through
    assert v.refract(Vec3(0.0, 3.0, 0.0), 1.0, config=ASSUME_NORMALIZED) == Vec3(0.0, -1.0, 0.0)

def test_refract_normalization_policy_changes_result():
    v = Vec3(0.0, -1.0, 0.0)
    n = Vec3(0.0, 2.0, 0.0)
    safe = v.refract(n, 0.5)
    fast = v.refract(n, 0.5, config=ASSUME_NORMALIZED)
    assert abs(safe.y + 1.0) < 1e-6
    # d = -2, k = 1.75: 0.5 * v - (0.5 * d + sqrt(k)) * n
    assert abs(fast.y - (-0.5 - 2.0 * (math.sqrt(1.75) - 1.0))) < 1e-5
    assert safe != fast

def test_overflow_saturates_to_inf_without_raising():
    with np.errstate(all='raise'):
        big = Vec3(3e38, 0.0, 0.0)
        assert (big + big).x == np.inf
        assert big.scale(10.0).x == np.inf
        assert (big * Vec3(10.0, 1.0, 1.0)).x == np.inf
        assert big.dot(big) == np.inf
        assert big.cross(Vec3(0.0, 3e38, 0.0)).z == np.inf

def test_normalize_of_huge_vector_does_not_raise():
    with np.errstate(all='raise'):
        # the squared length overflows, so dividing by it flushes to zero
        n = Vec3(1e20, 0.0, 0.0).normalize()
        assert Vec3(1e20, 0.0, 0.0).length() == np.inf
    assert n == Vec3(0.0, 0.0, 0.0)

def test_refract_overflow_propagates_nan():
    with np.errstate(all='raise'):
        r = Vec3(0.0, -1.0, 0.0).refract(Vec3(0.0, 1.0, 0.0), 1e20)
    assert np.all(np.isnan(r.to_numpy()))

def test_component_helpers_overflow_without_raising():
    with np.errstate(all='raise'):
        m = Vec2(-3e38, 0.0).mix(Vec2(3e38, 1.0), 1.0)
    assert m.x == np.inf
    assert m.y == 1.0

def test_floor_ceil_abs_fract():
    v = Vec4(1.5, -1.5, 2.0, -0.25)
    assert v.floor() == Vec4(1.0, -2.0, 2.0, -1.0)
    assert v.ceil() == Vec4(2.0, -1.0, 2.0, 0.0)
    assert abs(v) == Vec4(1.5, 1.5, 2.0, 0.25)
    assert v.fract() == Vec4(0.5, 0.5, 0.0, 0.75)

def test_min_max_clamp():
    a = Vec3(1.0, 5.0, -2.0)
    b = Vec3(3.0, 2.0, -1.0)
    assert a.min(b) == Vec3(1.0, 2.0, -2.0)
    assert a.max(b) == Vec3(3.0, 5.0, -1.0)
    assert a.clamp(Vec3.splat(0.0), Vec3.splat(2.0)) == Vec3(1.0, 2.0, 0.0)

def test_mix():
    a = Vec2(0.0, 10.0)
    b = Vec2(10.0, 20.0)
    assert a.mix(b, 0.25) == Vec2(2.5, 12.5)
    assert a.mix(b, 1.5) == Vec2(15.0, 25.0)

def test_step_and_smoothstep():
    x = Vec3(0.2, 0.5, 0.8)
    assert x.step(Vec3.splat(0.5)) == Vec3(0.0, 1.0, 1.0)
    s = x.smoothstep(Vec3.zero(), Vec3.one())
    assert abs(s.y - 0.5) < 1e-6
    assert s.x < 0.2
    assert s.z > 0.8

def test_fade():
    assert Vec2(0.0, 1.0).fade() == Vec2(0.0, 1.0)
    assert Vec3(0.5, 0.5, 0.5).fade() == Vec3.splat(0.5)

def test_swizzles():
    v = Vec3(1.0, 2.0, 3.0)
    assert v.xy() == Vec2(1.0, 2.0)
    assert v.xz() == Vec2(1.0, 3.0)
    assert v.yz() == Vec2(2.0, 3.0)
    h = Vec4.from_vec3(v)
    assert h == Vec4(1.0, 2.0, 3.0, 1.0)
    assert h.xyz() == v
    assert h.xy() == Vec2(1.0, 2.0)

def test_interchange():
    v = Vec4.from_sequence([1.0, 2.0, 3.0, 4.0])
    assert v[2] == 3.0
    assert len(v) == 4
    assert tuple(v) == (1.0, 2.0, 3.0, 4.0)
    assert Vec2.from_sequence(np.array([5.0, 6.0])) == Vec2(5.0, 6.0)

def test_from_sequence_rejects_wrong_length():
    with pytest.raises(ValueError):
        Vec3.from_sequence([1.0, 2.0])

def test_operations_do_not_mutate_inputs():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)
    a + b
    a.normalize()
    a.reflect(b)
    assert a == Vec3(1.0, 2.0, 3.0)
    assert b == Vec3(4.0, 5.0, 6.0)


if __name__ == "__main__":
    test_vec3_add()
    test_normalize_has_unit_length()
    test_normalize_zero_returns_zero()
    test_reflect_normal_incidence()
    test_refract_total_internal_reflection_is_zero()
