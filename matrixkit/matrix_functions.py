# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional

import numpy as np

from .elimination import forward_eliminate, inverse
from .errors import DimensionError, NotSquareError
from .scalars import field_of
from .utils import permutation_sign

logger = logging.getLogger(__name__)


def _square(A, operation: str) -> np.ndarray:
    A = np.asarray(A)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise NotSquareError(operation, A.shape)
    return field_of(A).coerce(A)


def determinant(A, tol: Optional[float] = None):
    """
    Calculate the determinant of n-by-n matrix A using elimination.

    det(A) = sign(perm) * product of the pivots. When elimination finds
    fewer than n pivots the matrix is singular and the result is exactly
    zero; that is a value, not an error.
    """
    A = _square(A, "determinant")
    field = field_of(A)
    n = A.shape[0]
    if n == 0:
        return field.one()

    U, _c, pivots, _free, perm = forward_eliminate(A, tol=tol)
    if len(pivots) < n:
        logger.debug(f"determinant: {len(pivots)} pivots for {n}x{n} matrix, singular")
        return field.zero()

    sign = permutation_sign(perm)
    diag_prod = np.prod(np.diag(U), dtype=field.dtype)
    return field.scalar(sign * diag_prod)


def minor_matrix(A, i: int, j: int) -> np.ndarray:
    """Return A with row i and column j removed."""
    A = np.asarray(A)
    if A.ndim != 2:
        raise DimensionError(f"minor_matrix expects a matrix, got shape {A.shape}")
    m, n = A.shape
    if m < 2 or n < 2:
        raise DimensionError(f"matrix of shape {A.shape} is too small to remove a row and a column")
    if not (-m <= i < m and -n <= j < n):
        raise IndexError(f"({i}, {j}) is out of range for shape {A.shape}")
    keep_rows = np.arange(m) != (i % m)
    keep_cols = np.arange(n) != (j % n)
    return field_of(A).coerce(A[keep_rows][:, keep_cols])


def cofactor_matrix(A) -> np.ndarray:
    """C[i, j] = (-1)^(i+j) det(minor(A, i, j))."""
    A = _square(A, "cofactor_matrix")
    n = A.shape[0]
    field = field_of(A)
    if n == 1:
        return field.coerce([[1]])
    C = np.empty_like(A)
    for i in range(n):
        for j in range(n):
            C[i, j] = ((-1) ** (i + j)) * determinant(minor_matrix(A, i, j))
    return C


def adjugate(A) -> np.ndarray:
    """
    Adjugate (classical adjoint) of a square matrix A.

    Fast path (det ≠ 0): adj(A) = det(A) · A^{-1}
    Slow path (det = 0): transpose of the cofactor matrix
    """
    A = _square(A, "adjugate")
    n = A.shape[0]
    field = field_of(A)
    if n == 0:
        return A.copy()

    d = determinant(A)
    if d == 0:
        logger.warning("adjugate(): falling back to cofactor expansion, O(n^5)")
        return cofactor_matrix(A).T.copy()

    return field.coerce(d * inverse(A))
