# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Products, norms and simple matrix reductions
"""

import numpy as np

from .errors import DimensionError, NotSquareError, ShapeMismatchError, ZeroVectorError
from .scalars import common_field, field_of


def _vector(u, operation: str) -> np.ndarray:
    u = field_of(u).coerce(u)
    if u.ndim != 1:
        raise DimensionError(f"{operation} expects a vector, got shape {u.shape}")
    return u


def _matrix(A, operation: str) -> np.ndarray:
    A = field_of(A).coerce(A)
    if A.ndim != 2:
        raise DimensionError(f"{operation} expects a matrix, got shape {A.shape}")
    return A


def _square(A, operation: str) -> np.ndarray:
    A = _matrix(A, operation)
    m, n = A.shape
    if m != n:
        raise NotSquareError(operation, A.shape)
    return A


# ---------------------------------------------------------------------
# Vectors
# ---------------------------------------------------------------------
def dot(u, v):
    """
    Inner product <u, v> = sum_i conj(u_i) v_i.

    For real vectors conjugation is the identity, so this is the usual
    dot product; for complex vectors it is the Hermitian inner product,
    which makes dot(u, u) real and non-negative.
    """
    u = _vector(u, "dot")
    v = _vector(v, "dot")
    if u.shape != v.shape:
        raise ShapeMismatchError("dot", u.shape, v.shape)
    field = common_field(u, v)
    return np.sum(field.mul(field.conjugate(u), v), dtype=field.dtype)


def norm_1(u) -> float:
    """Taxicab norm: sum of moduli."""
    u = _vector(u, "norm_1")
    field = field_of(u)
    return float(np.sum(field.modulus(u)))


def norm_inf(u) -> float:
    """Supremum norm: largest modulus (0 for an empty vector)."""
    u = _vector(u, "norm_inf")
    if u.size == 0:
        return 0.0
    field = field_of(u)
    return float(np.max(field.modulus(u)))


def norm_2(u) -> float:
    """
    Euclidean norm sqrt(sum_i |u_i|^2).

    The moduli are divided by the largest one before squaring, so the
    accumulation cannot overflow for large entries; one square root is
    taken at the end and the scale multiplied back.
    """
    u = _vector(u, "norm_2")
    field = field_of(u)
    scale = norm_inf(u)
    if scale == 0.0:
        return 0.0
    scaled = field.modulus(u) / scale
    return scale * float(np.sqrt(np.sum(scaled * scaled)))


norm = norm_2


def cross(u, v) -> np.ndarray:
    """
    Classical cross product u x v in 3 dimensions.

    Defines a vector orthogonal to u and v (for real input) with
    magnitude equal to the parallelogram area.
    """
    u = _vector(u, "cross")
    v = _vector(v, "cross")
    if u.shape != (3,):
        raise DimensionError(f"cross product needs 3-dimensional vectors, left operand has shape {u.shape}")
    if v.shape != (3,):
        raise DimensionError(f"cross product needs 3-dimensional vectors, right operand has shape {v.shape}")
    field = common_field(u, v)
    return field.coerce(
        [
            u[1] * v[2] - u[2] * v[1],
            u[2] * v[0] - u[0] * v[2],
            u[0] * v[1] - u[1] * v[0],
        ]
    )


def angle_cos(u, v):
    """Cosine of the angle between u and v: <u, v> / (|u| |v|)."""
    u = _vector(u, "angle_cos")
    v = _vector(v, "angle_cos")
    if u.shape != v.shape:
        raise ShapeMismatchError("angle_cos", u.shape, v.shape)
    u_len = norm_2(u)
    v_len = norm_2(v)
    if u_len == 0 or v_len == 0:
        raise ZeroVectorError("angle undefined for zero-length vector")
    return dot(u, v) / (u_len * v_len)


def normalize(u) -> np.ndarray:
    """Return u scaled to unit Euclidean length."""
    u = _vector(u, "normalize")
    length = norm_2(u)
    if length == 0:
        raise ZeroVectorError("cannot normalize a zero-length vector")
    return u / length


# ---------------------------------------------------------------------
# Matrices
# ---------------------------------------------------------------------
def mul_vec(A, v) -> np.ndarray:
    """Matrix-vector product A v, O(m n)."""
    A = _matrix(A, "mul_vec")
    v = _vector(v, "mul_vec")
    if A.shape[1] != v.shape[0]:
        raise ShapeMismatchError("mul_vec", A.shape, v.shape)
    field = common_field(A, v)
    return field.coerce(A @ v)


def mul_mat(A, B) -> np.ndarray:
    """Matrix-matrix product A B, O(m k n)."""
    A = _matrix(A, "mul_mat")
    B = _matrix(B, "mul_mat")
    if A.shape[1] != B.shape[0]:
        raise ShapeMismatchError("mul_mat", A.shape, B.shape)
    field = common_field(A, B)
    return field.coerce(A @ B)


def transpose(A) -> np.ndarray:
    """Plain transpose, result[i, j] = A[j, i]. Complex entries are not conjugated."""
    A = _matrix(A, "transpose")
    return A.T.copy()


def conjugate_transpose(A) -> np.ndarray:
    """Hermitian adjoint conj(A).T; equal to transpose for real matrices."""
    A = _matrix(A, "conjugate_transpose")
    return field_of(A).conjugate(A).T.copy()


def trace(A):
    """Sum of the diagonal of a square matrix."""
    A = _square(A, "trace")
    field = field_of(A)
    return np.sum(np.diag(A), dtype=field.dtype)


def multiplicative_trace(A):
    """Product of the diagonal of a square matrix."""
    A = _square(A, "multiplicative_trace")
    field = field_of(A)
    return np.prod(np.diag(A), dtype=field.dtype)
