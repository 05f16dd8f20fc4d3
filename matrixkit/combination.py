# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Element-wise arithmetic and linear combinations.

All functions take array-likes, never modify their inputs and return a
fresh ndarray in the smallest scalar field holding every operand.
"""

from typing import Sequence, Tuple

import numpy as np

from .errors import DimensionError, ShapeMismatchError
from .scalars import ScalarField, common_field, field_of, is_scalar


def _operands(operation: str, u, v) -> Tuple[ScalarField, np.ndarray, np.ndarray]:
    field = common_field(u, v)
    u = field.coerce(u)
    v = field.coerce(v)
    if u.shape != v.shape:
        raise ShapeMismatchError(operation, u.shape, v.shape)
    return field, u, v


def _require_scalar(k, operation: str):
    if not is_scalar(k):
        raise TypeError(f"{operation} expects a real or complex scalar, got {type(k).__name__}")


def add(u, v) -> np.ndarray:
    field, u, v = _operands("add", u, v)
    return field.add(u, v)


def sub(u, v) -> np.ndarray:
    field, u, v = _operands("sub", u, v)
    return field.sub(u, v)


def hadamard(u, v) -> np.ndarray:
    """Term-by-term product of two equally shaped operands."""
    field, u, v = _operands("hadamard", u, v)
    return field.mul(u, v)


def scale(u, k) -> np.ndarray:
    """Multiply every element of u by the scalar k."""
    _require_scalar(k, "scale")
    field = common_field(u, k)
    return field.mul(field.coerce(u), field.scalar(k))


def neg(u) -> np.ndarray:
    field = field_of(u)
    return field.neg(field.coerce(u))


def divide(u, k) -> np.ndarray:
    """Divide every element of u by the non-zero scalar k."""
    _require_scalar(k, "divide")
    field = common_field(u, k)
    return field.div(field.coerce(u), field.scalar(k))


def linear_combination(coefficients: Sequence, vectors: Sequence) -> np.ndarray:
    """
    Compute sum_i coefficients[i] * vectors[i].

    The result is produced by one contraction over the stacked operands
    rather than a chain of pairwise additions.

    Parameters
    ----------
    coefficients : sequence of scalars, length k
    vectors      : sequence of k array-likes sharing one shape

    Raises
    ------
    ShapeMismatchError : coefficient/vector counts differ, or the vectors
                         do not all share the same shape.
    DimensionError     : no vectors were supplied.
    """
    coefficients = list(coefficients)
    vectors = [np.asarray(v) for v in vectors]

    if len(coefficients) != len(vectors):
        raise ShapeMismatchError(
            "linear_combination",
            (len(vectors),),
            (len(coefficients),),
            message=f"linear_combination: {len(vectors)} vectors "
            f"but {len(coefficients)} coefficients",
        )
    if not vectors:
        raise DimensionError("linear_combination: no vectors supplied")
    for k in coefficients:
        _require_scalar(k, "linear_combination")

    shape = vectors[0].shape
    for v in vectors[1:]:
        if v.shape != shape:
            raise ShapeMismatchError("linear_combination", shape, v.shape)

    field = common_field(coefficients, *vectors)
    stacked = field.coerce(np.stack(vectors))
    return np.tensordot(field.coerce(coefficients), stacked, axes=1)


def lerp(u, v, t):
    """
    Linear interpolation u + t (v - u).

    `t` is not clamped: values outside [0, 1] extrapolate along the line
    through u and v. Scalars in give a scalar out.
    """
    _require_scalar(t, "lerp")
    field, u, v = _operands("lerp", u, v)
    field = common_field(u, t)
    t = field.scalar(t)
    out = field.add(u, field.mul(t, field.sub(v, u)))
    if out.ndim == 0:
        return out[()]
    return out
