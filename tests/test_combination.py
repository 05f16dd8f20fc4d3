# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from matrixkit.combination import add, divide, hadamard, lerp, linear_combination, neg, scale, sub
from matrixkit.errors import DimensionError, ShapeMismatchError, ZeroDivisorError


def test_add_sub_scale():
    u = np.array([2.0, 3.0])
    v = np.array([5.0, 7.0])
    np.testing.assert_array_equal(add(u, v), [7.0, 10.0])
    np.testing.assert_array_equal(sub(u, v), [-3.0, -4.0])
    np.testing.assert_array_equal(scale(u, 2), [4.0, 6.0])
    np.testing.assert_array_equal(neg(u), [-2.0, -3.0])
    np.testing.assert_array_equal(hadamard(u, v), [10.0, 21.0])
    np.testing.assert_array_equal(add([[1, 2], [3, 4]], [[7, 4], [-2, 2]]), [[8, 6], [1, 6]])
    # inputs untouched
    np.testing.assert_array_equal(u, [2.0, 3.0])


def test_add_is_commutative_with_zero_identity():
    rng = np.random.default_rng(0)
    u, v = rng.standard_normal((2, 5))
    np.testing.assert_array_equal(add(u, v), add(v, u))
    np.testing.assert_array_equal(add(u, np.zeros(5)), u)


def test_mixed_fields_promote():
    out = add([1.0, 2.0], [1j, 0])
    assert out.dtype == np.complex128
    assert scale([1.0, 2.0], 1j).dtype == np.complex128


def test_shape_mismatch():
    with pytest.raises(ShapeMismatchError) as excinfo:
        add([1.0, 2.0], [1.0, 2.0, 3.0])
    assert excinfo.value.lhs == (2,)
    assert excinfo.value.rhs == (3,)
    with pytest.raises(ValueError):
        sub(np.eye(2), np.eye(3))


def test_scale_rejects_non_scalars():
    with pytest.raises(TypeError):
        scale([1.0, 2.0], [2.0])


def test_divide():
    np.testing.assert_array_equal(divide([2.0, 4.0], 2), [1.0, 2.0])
    with pytest.raises(ZeroDivisorError):
        divide([2.0, 4.0], 0)


@pytest.mark.parametrize(
    "coefficients,vectors,expected",
    [
        ([10, -2, 0.5], [[1, 0, 0], [0, 1, 0], [0, 0, 1]], [10, -2, 0.5]),
        ([10, -2], [[1, 2, 3], [0, 10, -100]], [10, 0, 230]),
        ([2], [[1.5, -1]], [3, -2]),
    ],
)
def test_linear_combination(coefficients, vectors, expected):
    np.testing.assert_allclose(linear_combination(coefficients, vectors), expected)


def test_linear_combination_single_unit_coefficient():
    v = np.array([1.0, -4.0, 2.5])
    np.testing.assert_array_equal(linear_combination([1], [v]), v)


def test_linear_combination_matrices():
    out = linear_combination([1, 2], [np.eye(2), np.ones((2, 2))])
    np.testing.assert_array_equal(out, [[3, 2], [2, 3]])


def test_linear_combination_errors():
    with pytest.raises(ShapeMismatchError):
        linear_combination([1, 2], [[1, 2]])
    with pytest.raises(DimensionError):
        linear_combination([], [])
    with pytest.raises(ShapeMismatchError):
        linear_combination([1, 1], [[1, 2], [1, 2, 3]])
    with pytest.raises(TypeError):
        linear_combination(["a"], [[1, 2]])


def test_linear_combination_complex():
    out = linear_combination([1j, 1], [[1, 0], [0, 1]])
    assert out.dtype == np.complex128
    np.testing.assert_array_equal(out, [1j, 1])


@pytest.mark.parametrize(
    "u,v,t,expected",
    [
        (0, 1, 0, 0),
        (0, 1, 1, 1),
        (0, 1, 0.5, 0.5),
        (21, 42, 0.3, 27.3),
        (0, 10, 2, 20),
        (0, 10, -1, -10),
    ],
)
def test_lerp_scalars(u, v, t, expected):
    result = lerp(u, v, t)
    assert np.ndim(result) == 0
    assert math.isclose(result, expected, abs_tol=1e-12)


def test_lerp_arrays():
    np.testing.assert_allclose(lerp([2, 1], [4, 2], 0.3), [2.6, 1.3])
    np.testing.assert_allclose(
        lerp([[2, 1], [3, 4]], [[20, 10], [30, 40]], 0.5),
        [[11, 5.5], [16.5, 22]],
    )
    with pytest.raises(ShapeMismatchError):
        lerp([1, 2], [1, 2, 3], 0.5)
