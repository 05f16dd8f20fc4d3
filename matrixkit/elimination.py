# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Optional, Tuple

import numpy as np

from .errors import DimensionError, NotInvertibleError, NotSquareError, ShapeMismatchError
from .scalars import common_field, field_of
from .utils import resolve_tol

logger = logging.getLogger(__name__)


def _as_matrix(A, operation: str) -> np.ndarray:
    A = np.asarray(A)
    if A.ndim != 2:
        raise DimensionError(f"{operation} expects a matrix, got shape {A.shape}")
    return A


def forward_eliminate(
    A: np.ndarray,
    b: Optional[np.ndarray] = None,
    pivot: bool = True,
    tol: Optional[float] = None,
) -> Tuple[np.ndarray, Optional[np.ndarray], List[int], List[int], List[int]]:
    """
    Row-echelon reduction with partial pivoting on an m by n matrix A.

    Parameters
    ----------
    A : array-like               (m, n)
        Coefficient matrix, real or complex.
    b : array-like | None        (m,) or (m, k)
        Optional right-hand side; same row swaps & updates applied.
    pivot : bool
        If False, the first entry above tolerance is used as pivot
        instead of the largest one (rarely useful).
    tol : float | None
        Absolute pivot tolerance, scale_tol(A) when omitted.

    Returns
    -------
    U      : np.ndarray          (m, n)
        Row-echelon form of A (upper-trapezoidal, not reduced).
    c      : np.ndarray | None   (m, k)
        b after identical row ops (None if b was None).
    pivots : list[int]
        Column indices where pivots were placed; len = rank(A).
    free : list[int]
        Column indices without a pivot; their entries at or below the
        current row were within tolerance and are stored as exact zeros.
    perm   : list[int]
        Final row order: row i of U comes from original row perm[i].
    """
    A = _as_matrix(A, "forward_eliminate")
    field = field_of(A) if b is None else common_field(A, b)

    U = field.coerce(A)
    m, n = U.shape

    if b is not None:
        c = field.coerce(b)
        if c.ndim == 1:
            c = c[:, None]
        if c.shape[0] != m:
            raise ShapeMismatchError("forward_eliminate", A.shape, c.shape)
    else:
        c = None

    pivot_tol = resolve_tol(U, tol)
    logger.debug(f"forward_eliminate: {m}x{n} {field.name} matrix, pivot tolerance {pivot_tol:.3e}")

    perm = list(range(m))  # Identity Permutation
    pivots: List[int] = []
    free: List[int] = []

    row = 0
    for col in range(n):
        if row == m:
            free.extend(range(col, n))
            break
        # The computation we perform will be more stable if we
        # pick the largest possible modulus for the pivot.
        col_slice = field.modulus(U[row:, col])
        if pivot:
            max_idx = int(col_slice.argmax())
        else:
            max_idx = int(np.argmax(col_slice > pivot_tol))
        max_val = col_slice[max_idx]

        if max_val <= pivot_tol:  # column is numerically zero
            U[row:, col] = field.zero()
            free.append(col)
            continue  # go to next column

        pivot_row = row + max_idx

        # If the pivot row is not our current row, record
        # the permutation, the same operation must be applied
        # to b as well
        if pivot_row != row:
            U[[row, pivot_row]] = U[[pivot_row, row]]
            if c is not None:
                c[[row, pivot_row]] = c[[pivot_row, row]]
            perm[row], perm[pivot_row] = perm[pivot_row], perm[row]

        pivots.append(col)

        # Eliminate entries below the pivot
        factors = U[row + 1 :, col] / U[row, col]
        U[row + 1 :, col:] -= factors[:, None] * U[row, col:]
        U[row + 1 :, col] = field.zero()
        if c is not None:
            c[row + 1 :, :] -= factors[:, None] * c[row, :]

        row += 1  # move to next pivot row

    return U, c, pivots, free, perm


def row_echelon(A: np.ndarray, tol: Optional[float] = None) -> np.ndarray:
    """Row-echelon form of A (pivots not scaled, nothing cleared above them)."""
    return forward_eliminate(A, pivot=True, tol=tol)[0]


def rref(A: np.ndarray, tol: Optional[float] = None) -> Tuple[np.ndarray, List[int]]:
    """
    Return the reduced row-echelon form R of A and the
    pivot column list. R has the same shape as A.

    Parameters
    ----------
    A   : (m,n) array-like
    tol : float | None
        Absolute pivot tolerance, scale_tol(A) when omitted.

    Returns
    -------
    R       : (m,n) ndarray  (RREF)
    pivots  : list[int]      pivot column indices
    """
    A = _as_matrix(A, "rref")
    # Perform forward elimination, U = R
    U, _c, pivots, _free, _perm = forward_eliminate(A, pivot=True, tol=tol)
    field = field_of(U)
    R = U

    # backward sweep: one pass per pivot, from bottom to top
    for r, col in reversed(list(enumerate(pivots))):
        R[r, col:] /= R[r, col]  # scale pivot row -> 1
        R[r, col] = field.one()

        # zero out entries above the pivot
        factors = R[:r, col].copy()
        R[:r, col:] -= factors[:, None] * R[r, col:]
        R[:r, col] = field.zero()

    logger.debug(f"rref: pivot columns {pivots}")
    return R, pivots


def rank(A: np.ndarray, tol: Optional[float] = None) -> int:
    """Matrix rank is the number of pivot columns"""
    A = _as_matrix(A, "rank")
    pivots = forward_eliminate(A, tol=tol)[2]
    return len(pivots)


def augmented(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """
    Return the augmented matrix [A | B].

    B may be a vector, in which case it becomes a single column.
    """
    A = _as_matrix(A, "augmented")
    B = np.asarray(B)
    if B.ndim == 1:
        B = B[:, None]
    if B.ndim != 2 or A.shape[0] != B.shape[0]:
        raise ShapeMismatchError("augmented", A.shape, B.shape)
    field = common_field(A, B)
    return field.coerce(np.hstack([A, B]))


def inverse(A: np.ndarray, tol: Optional[float] = None) -> np.ndarray:
    """
    Invert a square matrix by row-reducing [A | I] to [I | A^-1].

    Parameters
    ----------
    A   : (n,n) array-like
    tol : float | None
        Absolute pivot tolerance, scale_tol(A) when omitted; the same
        tolerance rank(A) uses, so inverse(A) succeeds exactly when
        rank(A) == n.

    Raises
    ------
    NotSquareError     : A is not square.
    NotInvertibleError : a pivot column of A was numerically zero.
    """
    A = _as_matrix(A, "inverse")
    m, n = A.shape
    if m != n:
        raise NotSquareError("inverse", A.shape)
    field = field_of(A)
    if n == 0:
        return field.coerce(np.zeros((0, 0)))

    pivot_tol = resolve_tol(A, tol)
    R, pivots = rref(augmented(A, np.eye(n, dtype=field.dtype)), tol=pivot_tol)

    r = sum(1 for p in pivots if p < n)
    if r < n:
        logger.debug(f"inverse: singular {n}x{n} matrix, rank {r}")
        raise NotInvertibleError(
            f"matrix is singular (rank {r} < {n})", rank=r, expected_rank=n
        )
    return R[:, n:].copy()
