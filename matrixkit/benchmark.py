#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time the elimination kernels against numpy.linalg and report the
relative cost and accuracy as a table.

    python -m matrixkit.benchmark
"""

import argparse
import time

import numpy as np
import pandas as pd

from .elimination import inverse, rank
from .matrix_functions import determinant
from .utils import random_matrix

REPEATS = 5  # best of 5 runs leads to stable numbers
SIZES = [(50, 50), (200, 200), (500, 500)]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def best_of(f, *args, repeats: int = REPEATS):
    return min(wall(f, *args) for _ in range(repeats))


def run_benchmarks(sizes=SIZES, repeats: int = REPEATS, seed: int = 0) -> pd.DataFrame:
    records = []
    for m, n in sizes:
        A = random_matrix(m, n, seed=seed)
        t_np = best_of(np.linalg.matrix_rank, A, repeats=repeats)
        t_rank = best_of(rank, A, repeats=repeats)
        records.append(
            ("rank", f"{m}x{n}", t_rank, t_rank / t_np, float(rank(A) != np.linalg.matrix_rank(A)))
        )

        if m != n:
            continue

        t_np = best_of(np.linalg.det, A, repeats=repeats)
        t_det = best_of(determinant, A, repeats=repeats)
        d_ref = np.linalg.det(A)
        det_err = abs(determinant(A) - d_ref) / max(abs(d_ref), np.finfo(float).tiny)
        records.append(("det", f"{m}x{n}", t_det, t_det / t_np, det_err))

        t_np = best_of(np.linalg.inv, A, repeats=repeats)
        t_inv = best_of(inverse, A, repeats=repeats)
        # residual of A X = I, judged independently of conditioning
        inv_err = np.linalg.norm(A @ inverse(A) - np.eye(n), np.inf)
        records.append(("inverse", f"{m}x{n}", t_inv, t_inv / t_np, inv_err))

    return pd.DataFrame(records, columns=["kernel", "size", "sec", "sec/NumPy", "error"])


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--repeats", type=int, default=REPEATS)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--csv", help="also write the table to this CSV file")
    args = parser.parse_args(argv)

    df = run_benchmarks(repeats=args.repeats, seed=args.seed)
    print(df.to_string(index=False))
    if args.csv:
        df.to_csv(args.csv, index=False)
    return df


if __name__ == "__main__":
    main()
