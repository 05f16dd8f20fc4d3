# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

import matrixkit as mk
from matrixkit.utils import random_matrix

TEST_ITERATIONS = 20
logger = logging.getLogger(__name__)


def _families(A):
    """The same data as a variable Matrix and as a FixedMatrix."""
    return [mk.Matrix(A), mk.fixed_from(np.ravel(A), *np.shape(A))]


# ---------------------------------------------------------------------
# boundary constructors
# ---------------------------------------------------------------------
def test_fixed_from():
    v = mk.fixed_from([1, 2, 3], 3)
    assert type(v) is mk.Vec3
    M = mk.fixed_from(range(6), 2, 3)
    assert type(M) is mk.FixedMatrix[2, 3]
    assert M == [[0, 1, 2], [3, 4, 5]]
    with pytest.raises(mk.ConstructionLengthError):
        mk.fixed_from([1, 2], 3)
    with pytest.raises(mk.ConstructionLengthError):
        mk.fixed_from(range(5), 2, 3)


def test_variable_try_from():
    assert mk.variable_try_from([1, 2, 3, 4], 2, 2) == [[1, 2], [3, 4]]
    with pytest.raises(mk.ConstructionLengthError):
        mk.variable_try_from([1, 2, 3, 4, 5], 2, 3)


# ---------------------------------------------------------------------
# functional API
# ---------------------------------------------------------------------
def test_combination_functions():
    for u, v in [(mk.Vector([2, 3]), mk.Vector([5, 7])), (mk.Vec2([2, 3]), mk.Vec2([5, 7]))]:
        assert mk.add(u, v) == [7, 10]
        assert mk.sub(u, v) == [-3, -4]
        assert mk.scale(u, 2) == [4, 6]
        assert mk.hadamard(u, v) == [10, 21]
        assert type(mk.add(u, v)) is type(u)


def test_linear_combination_containers():
    e1, e2, e3 = mk.Vec3([1, 0, 0]), mk.Vec3([0, 1, 0]), mk.Vec3([0, 0, 1])
    out = mk.linear_combination([10, -2, 0.5], [e1, e2, e3])
    assert type(out) is mk.Vec3
    assert out == [10, -2, 0.5]

    v = mk.Vector([1, 2, 3])
    assert mk.linear_combination([1], [v]) == v
    with pytest.raises(TypeError):
        mk.linear_combination([1, 1], [e1, mk.Vec2([1, 2])])
    with pytest.raises(TypeError):
        mk.linear_combination([1, 1], [v, e1])
    with pytest.raises(TypeError):
        mk.linear_combination([1], [[1, 2, 3]])
    with pytest.raises(mk.ShapeMismatchError):
        mk.linear_combination([1, 2], [v])


def test_lerp():
    assert math.isclose(mk.lerp(21, 42, 0.3), 27.3)
    assert mk.lerp(mk.Vector([2, 1]), mk.Vector([4, 2]), 0.5) == [3, 1.5]
    assert mk.lerp(mk.Mat2.identity(), mk.Mat2.zeros(), 2.0) == [[-1, 0], [0, -1]]
    with pytest.raises(TypeError):
        mk.lerp(0, mk.Vector([1]), 0.5)


def test_product_functions():
    u = mk.Vector([1, 2, 3])
    v = mk.Vector([4, 5, 6])
    assert mk.dot(u, v) == 32
    assert mk.norm_1(u) == 6
    assert math.isclose(mk.norm_2(u), math.sqrt(14))
    assert mk.norm_inf(u) == 3
    assert mk.cross(u, v) == [-3, 6, -3]
    assert mk.cross(mk.Vec3([0, 0, 1]), mk.Vec3([1, 0, 0])) == [0, 1, 0]
    assert math.isclose(mk.angle_cos(mk.Vec2([1, 0]), mk.Vec2([0, 1])), 0.0)
    with pytest.raises(TypeError):
        mk.cross(mk.Vec2([1, 2]), mk.Vec2([3, 4]))
    with pytest.raises(mk.DimensionError):
        mk.cross(mk.Vector([1, 2]), mk.Vector([3, 4]))

    M = mk.Matrix([[3, -5], [6, 8]])
    assert mk.mul_mat(M, mk.Matrix([[2, 1], [4, 2]])) == [[-14, -7], [44, 22]]
    assert mk.mul_vec(M, mk.Vector([1, 1])) == [-2, 14]
    assert mk.transpose(M) == [[3, 6], [-5, 8]]
    assert mk.conjugate_transpose(M) == mk.transpose(M)
    assert mk.trace(M) == 11


def test_square_only_functions():
    R = mk.FixedMatrix[2, 3].zeros()
    for f in (mk.trace, mk.determinant, mk.inverse):
        with pytest.raises(TypeError):
            f(R)
    V = mk.Matrix([[1, 2, 3], [4, 5, 6]])
    for f in (mk.trace, mk.determinant, mk.inverse):
        with pytest.raises(mk.NotSquareError):
            f(V)


def test_row_reduction_functions():
    M = mk.Matrix([[1, 2], [2, 4]])
    assert mk.rref(M) == [[1, 2], [0, 0]]
    assert mk.rank(M) == 1
    assert mk.determinant(M) == 0
    assert mk.row_echelon(M).shape == (2, 2)
    with pytest.raises(mk.NotInvertibleError):
        mk.inverse(M)
    assert mk.inverse(mk.Matrix([[1, 0], [0, 2]])) == [[1, 0], [0, 0.5]]
    assert mk.rank(mk.Matrix([[1.0, 0.0], [0.0, 1e-6]]), tol=1e-3) == 1


def test_projection_matrix():
    P = mk.projection_matrix(math.pi / 2, 1.0, 1.0, 100.0)
    assert isinstance(P, mk.Matrix)
    Q = mk.projection_matrix(math.pi / 2, 1.0, 1.0, 100.0, fixed=True)
    assert type(Q) is mk.Mat4
    assert P == Q.to_numpy()


# ---------------------------------------------------------------------
# algebraic properties, checked on both families
# ---------------------------------------------------------------------
@pytest.mark.parametrize("seed", range(TEST_ITERATIONS))
def test_add_commutes_and_zero_is_neutral(seed):
    A = random_matrix(3, 4, seed=seed)
    B = random_matrix(3, 4, seed=seed + 1000)
    for (a, b) in zip(_families(A), _families(B)):
        assert a + b == b + a
        assert a + type(a)._from_array(np.zeros((3, 4))) == a
        assert (a - a) == np.zeros((3, 4))


@pytest.mark.parametrize("seed", range(TEST_ITERATIONS))
def test_transpose_is_an_involution(seed):
    A = random_matrix(2, 5, seed=seed, field=mk.COMPLEX)
    for M in _families(A):
        assert M.T.T == M
        assert M.H.H == M


@pytest.mark.parametrize("n", range(1, 6))
def test_identity_properties(n):
    for I in (mk.Matrix.identity(n), mk.FixedMatrix[n, n].identity()):
        assert I.determinant() == 1
        assert I.inverse() == I
        assert I.rank() == n
        assert I.rref() == I


@pytest.mark.parametrize("seed", range(TEST_ITERATIONS))
def test_inverse_is_a_right_inverse(seed):
    A = random_matrix(4, 4, seed=seed)
    for M in _families(A):
        assert (M @ M.inverse()).approx_eq(np.eye(4))


@pytest.mark.parametrize("r", range(5))
def test_full_rank_iff_invertible(r):
    A = random_matrix(4, 4, rank=r, seed=r)
    for M in _families(A):
        if M.rank() == 4:
            M.inverse()
        else:
            with pytest.raises(mk.NotInvertibleError):
                M.inverse()


def test_cross_of_parallel_vectors_is_zero():
    u = mk.Vec3([1.5, -2, 4])
    assert u.cross(2 * u) == [0, 0, 0]
    v = mk.Vector([1.5, -2, 4])
    assert v.cross(-3 * v) == [0, 0, 0]


def test_complex_determinant():
    A = [
        [5 + 2j, 3 + 4j, 1],
        [4 + 12j, -4 + 3j, 8 - 5j],
        [0, 7 + 3j, -5 - 7j],
    ]
    expected = np.linalg.det(np.array(A))
    for M in _families(A):
        d = M.determinant()
        logger.debug(f"det = {d}")
        assert np.isclose(d, expected, rtol=1e-10)
