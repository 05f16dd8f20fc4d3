# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Functional API over containers.

Each function accepts containers of either family and returns a result
of the same family. Variable-shape operands are checked and raise a
`DimensionError` subclass; fixed-shape operands are checked by class and
raise `TypeError`. Both then run the same array algorithm.
"""

from typing import Optional, Sequence

from . import combination
from ._container import Container
from .fixed import FixedMatrix, FixedVector, fixed_matrix_type, fixed_vector_type
from .variable import Matrix


# ---------------------------------------------------------------------
# boundary constructors
# ---------------------------------------------------------------------
def fixed_from(elements: Sequence, rows: int, cols: Optional[int] = None):
    """
    Build a FixedVector[rows] (cols omitted) or FixedMatrix[rows, cols]
    from a flat, row-major sequence of scalars.
    """
    if cols is None:
        return fixed_vector_type(rows)(elements)
    return fixed_matrix_type(rows, cols).from_elements(elements)


def variable_try_from(elements: Sequence, rows: int, cols: int) -> Matrix:
    """Build a variable Matrix; ConstructionLengthError if len != rows * cols."""
    return Matrix.try_from(elements, rows, cols)


# ---------------------------------------------------------------------
# combination
# ---------------------------------------------------------------------
def add(u, v):
    return u.add(v)


def sub(u, v):
    return u.sub(v)


def scale(u, k):
    return u.scale(k)


def hadamard(u, v):
    return u.hadamard(v)


def linear_combination(coefficients: Sequence, vectors: Sequence):
    """
    sum_i coefficients[i] * vectors[i] for containers of one family
    (and, for fixed containers, one class).
    """
    coefficients = list(coefficients)
    vectors = list(vectors)
    for v in vectors:
        if not isinstance(v, Container):
            raise TypeError(f"linear_combination expects containers, got {type(v).__name__}")
    for v in vectors[1:]:
        vectors[0]._check_compatible(v, "linear_combination")
    result = combination.linear_combination(coefficients, [v._data for v in vectors])
    return vectors[0]._wrap(result)


def lerp(u, v, t):
    """u + t (v - u) for scalars or containers; t is not clamped."""
    if isinstance(u, Container):
        return u.lerp(v, t)
    if isinstance(v, Container):
        raise TypeError(f"lerp: cannot combine {type(u).__name__} with {type(v).__name__}")
    return combination.lerp(u, v, t)


# ---------------------------------------------------------------------
# products & norms
# ---------------------------------------------------------------------
def dot(u, v):
    return u.dot(v)


def norm_1(u) -> float:
    return u.norm_1()


def norm_2(u) -> float:
    return u.norm()


def norm_inf(u) -> float:
    return u.norm_inf()


def cross(u, v):
    """
    Cross product. Only FixedVector[3] defines it among fixed vectors;
    variable vectors raise DimensionError unless both have 3 elements.
    """
    if isinstance(u, FixedVector) and not hasattr(u, "cross"):
        raise TypeError(f"cross product is not defined for {type(u).__name__}")
    return u.cross(v)


def angle_cos(u, v):
    return u.angle_cos(v)


def mul_vec(M, v):
    return M.mul_vec(v)


def mul_mat(M, N):
    return M.mul_mat(N)


def transpose(M):
    return M.transpose()


def conjugate_transpose(M):
    return M.conjugate_transpose()


def _square_only(M, operation: str):
    if isinstance(M, FixedMatrix) and not hasattr(M, operation):
        raise TypeError(f"{operation} is not defined for {type(M).__name__}")
    return getattr(M, operation)


def trace(M):
    return _square_only(M, "trace")()


# ---------------------------------------------------------------------
# row reduction
# ---------------------------------------------------------------------
def row_echelon(M, tol: Optional[float] = None):
    return M.row_echelon(tol=tol)


def rref(M, tol: Optional[float] = None):
    return M.rref(tol=tol)


def rank(M, tol: Optional[float] = None) -> int:
    return M.rank(tol=tol)


def determinant(M, tol: Optional[float] = None):
    return _square_only(M, "determinant")(tol=tol)


def inverse(M, tol: Optional[float] = None):
    return _square_only(M, "inverse")(tol=tol)


def projection_matrix(fov: float, aspect_ratio: float, near: float, far: float, fixed: bool = False):
    """Perspective projection as a Matrix, or a Mat4 when fixed=True."""
    if fixed:
        return fixed_matrix_type(4, 4).projection(fov, aspect_ratio, near, far)
    return Matrix.projection(fov, aspect_ratio, near, far)
