# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional

import numpy as np

from .scalars import COMPLEX, REAL, ScalarField

# Relative pivot epsilon, see scale_tol
EPS: float = 1e-12
# Default absolute tolerance for approximate container comparison
DEFAULT_ATOL: float = 1e-9


def scale_tol(A: np.ndarray, eps: float = EPS) -> float:
    """
    Return an absolute tolerance scaled to the matrix magnitude.

    tol = eps * max(m, n) * ||A||_inf, so a matrix and any non-zero
    multiple of it reduce to the same pivot structure.
    """
    A = np.asarray(A)
    if A.size == 0:
        return 0.0
    return eps * max(A.shape) * float(np.linalg.norm(A, ord=np.inf))


def resolve_tol(A: np.ndarray, tol: Optional[float] = None) -> float:
    """Use the caller's tolerance when given, else scale_tol(A)."""
    if tol is None:
        return scale_tol(A)
    if tol < 0:
        raise ValueError("tolerance must be non-negative")
    return float(tol)


def permutation_sign(perm: list[int]) -> float:
    """Return +1 or –1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n − #cycles
    return -1.0 if swaps & 1 else 1.0


def _uniform(rng, low, high, size, field: ScalarField):
    values = rng.uniform(low, high, size=size)
    if field is COMPLEX:
        values = values + 1j * rng.uniform(low, high, size=size)
    return values


def random_nonsingular_upper(
    n, low=-100, high=100, seed=None, field: ScalarField = REAL
) -> np.ndarray:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 (or complex128) dtype
    """
    rng = np.random.default_rng(seed)
    U = np.triu(_uniform(rng, low, high, (n, n), field))
    # keep the diagonal away from zero
    diag = _uniform(rng, 1, high, n, field) * rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = diag
    return field.coerce(U)


def random_matrix(
    m, n, rank=None, seed=None, field: ScalarField = REAL
) -> np.ndarray:
    """
    Random m-by-n matrix with standard-normal entries.

    When `rank` is given the matrix is built as an (m, r) @ (r, n) product,
    so its rank is exactly r with probability one.
    """
    rng = np.random.default_rng(seed)

    def _normal(shape):
        values = rng.standard_normal(shape)
        if field is COMPLEX:
            values = values + 1j * rng.standard_normal(shape)
        return values

    if rank is None:
        return field.coerce(_normal((m, n)))
    if not 0 <= rank <= min(m, n):
        raise ValueError(f"rank must lie in [0, {min(m, n)}]")
    return field.coerce(_normal((m, rank)) @ _normal((rank, n)))
