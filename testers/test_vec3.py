# -*- coding: utf-8 -*-
import copy
import logging
import warnings

import numpy as np
import pytest

from geomath.math import Axis, Vec3


def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (2 * a).as_np().tolist() == [2, 4, 6]
    assert (np.float64(2) * a).as_np().tolist() == [2, 4, 6]
    assert (a / 2).as_np().tolist() == [0.5, 1, 1.5]
    assert (-a).as_np().tolist() == [-1, -2, -3]


def test_in_place_ops_mutate_receiver():
    a = Vec3(1, 2, 3)
    alias = a
    a += Vec3(1, 1, 1)
    a *= 2
    a -= Vec3(0, 0, 8)
    a /= 4
    assert alias is a
    assert a == Vec3(1, 1.5, 0)


def test_binary_ops_leave_operands_untouched():
    a = Vec3(1, 2, 3)
    _ = a + Vec3(1, 1, 1)
    _ = a * 3
    assert a == Vec3(1, 2, 3)


def test_dot_and_cross():
    assert Vec3(1, 2, 3).dot(Vec3(4, -5, 6)) == 12
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)
    assert Vec3(0, 1, 0).cross(Vec3(1, 0, 0)) == Vec3(0, 0, -1)
    assert Vec3(2, 3, 4).cross(Vec3(5, 6, 7)) == Vec3(-3, 6, -3)


def test_norm_and_normal(rng):
    assert Vec3(3, 4, 0).norm() == 5
    for _ in range(20):
        v = Vec3(*rng.uniform(-10, 10, size=3))
        n = v.normal()
        assert n.norm() == pytest.approx(1.0)


def test_normalize_in_place_returns_self():
    v = Vec3(0, 0, 2)
    assert v.normalize() is v
    assert v == Vec3(0, 0, 1)


def test_normalize_zero_vector_gives_nan_silently(caplog):
    caplog.set_level(logging.DEBUG, logger="geomath")
    v = Vec3()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v.normalize()
    assert np.all(np.isnan(v.as_np()))
    assert "[Vec3] normalize()" in caplog.text


def test_index_access_aliases_to_z():
    v = Vec3(1, 2, 3)
    assert (v[0], v[1], v[2]) == (1, 2, 3)
    assert v[3] == 3
    assert v[42] == 3
    assert v[Axis.Y] == 2
    v[7] = 9
    assert v.z == 9


def test_strict_indexing_raises(clean_config):
    clean_config["strict_indexing"] = True
    v = Vec3(1, 2, 3)
    assert v[2] == 3
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[Axis.W] = 1.0


def test_precision():
    v = Vec3(1, 2, 3)
    assert v.dtype == np.float64
    f = v.to_float()
    assert f.dtype == np.float32
    assert v.dtype == np.float64
    ext = Vec3(1, 2, 3, dtype="longdouble")
    assert ext.x.dtype == np.longdouble
    assert ext.norm().dtype == np.longdouble


def test_result_takes_left_operand_precision():
    a = Vec3(1, 2, 3, dtype=np.float32)
    b = Vec3(1, 1, 1, dtype=np.float64)
    assert (a + b).dtype == np.float32
    assert (b + a).dtype == np.float64


def test_unsupported_operands():
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) + 1.0
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) * Vec3(1, 2, 3)


def test_copy_is_independent():
    v = Vec3(1, 2, 3)
    for c in (v.copy(), copy.copy(v), copy.deepcopy(v)):
        c.x = 10
        assert v.x == 1


def test_formatting():
    assert str(Vec3(1, 2, 3)) == "[1 2 3]"
    assert str(Vec3(0.5, -1, 1e-7)) == "[0.5 -1 1e-07]"
    assert repr(Vec3(1, 2, 3)) == "Vec3(1.000, 2.000, 3.000)"


def test_sum_and_difference_overflow_silently():
    big = Vec3(1e308, 0, 0)
    inf = Vec3(np.inf, 0, 0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert (big + big).x == np.inf
        assert np.isnan((inf - inf).x)
        v = big.copy()
        v += big
        assert v.x == np.inf
        v -= v
        assert np.isnan(v.x)


def test_formatting_extended_precision():
    big = np.longdouble("1e400")
    if not np.isfinite(big):
        pytest.skip("longdouble has no extended exponent range on this platform")
    v = Vec3(big, 0, 0, dtype="longdouble")
    assert str(v) == "[1e+400 0 0]"
    assert repr(v).startswith("Vec3(1") and "inf" not in repr(v)
