# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Variable-shape containers

The shape of a `Vector` or `Matrix` is read from its data at
construction time and never changes afterwards. Every binary operation
validates operand shapes first and raises a `DimensionError` subclass on
mismatch:

>>> from matrixkit import Matrix, Vector
>>> float(Vector([1, 2, 3]).dot(Vector([4, 5, 6])))
32.0
>>> Matrix([[1, 2], [2, 4]]).rank()
1
"""

from typing import Iterable, Sequence

import numpy as np

from . import projections
from ._container import (
    MatrixMethods,
    SquareMethods,
    VectorMethods,
    materialize,
    rows_to_array,
    vector_to_array,
)
from .errors import ConstructionLengthError, DimensionError
from .products import cross
from .scalars import REAL, ScalarField, as_array


class _Variable:
    _family = "variable"

    @classmethod
    def _vector_type(cls, size: int):
        return Vector

    @classmethod
    def _matrix_type(cls, rows: int, cols: int):
        return Matrix


class Vector(_Variable, VectorMethods):
    """A vector whose length is a runtime value."""

    def __init__(self, elements: Iterable = ()):
        self._data = vector_to_array(elements)

    @classmethod
    def zeros(cls, size: int, field: ScalarField = REAL) -> "Vector":
        if size < 0:
            raise DimensionError(f"vector size must be non-negative, got {size}")
        return cls._from_array(field.coerce(np.zeros(size)))

    def cross(self, other) -> "Vector":
        """Cross product; both vectors must have exactly 3 elements."""
        self._check_compatible(other, "cross")
        return Vector._from_array(cross(self._data, other._data))


class Matrix(_Variable, SquareMethods, MatrixMethods):
    """
    A matrix whose shape is a runtime value.

    Built from a sequence of equally long rows; ragged rows raise
    ConstructionLengthError.
    """

    def __init__(self, rows: Iterable = ()):
        self._data = rows_to_array(rows)

    @classmethod
    def try_from(cls, elements: Sequence, rows: int, cols: int) -> "Matrix":
        """
        Build a rows x cols matrix from a flat, row-major sequence.

        Raises
        ------
        ConstructionLengthError : len(elements) != rows * cols
        """
        if rows < 0 or cols < 0:
            raise DimensionError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        array = as_array(materialize(elements))
        if array.ndim != 1:
            raise DimensionError(f"try_from expects a flat sequence, got shape {array.shape}")
        if array.size != rows * cols:
            raise ConstructionLengthError(
                rows * cols,
                array.size,
                message=f"{rows}x{cols} matrix needs {rows * cols} elements, got {array.size}",
            )
        return cls._from_array(array.reshape(rows, cols))

    @classmethod
    def zeros(cls, rows: int, cols: int, field: ScalarField = REAL) -> "Matrix":
        if rows < 0 or cols < 0:
            raise DimensionError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        return cls._from_array(field.coerce(np.zeros((rows, cols))))

    @classmethod
    def identity(cls, n: int, field: ScalarField = REAL) -> "Matrix":
        if n < 0:
            raise DimensionError(f"matrix dimensions must be non-negative, got {n}")
        return cls._from_array(field.coerce(np.eye(n)))

    @classmethod
    def from_columns(cls, columns: Sequence) -> "Matrix":
        """Stack equally long vectors as the columns of a matrix."""
        return cls(rows_to_array([list(materialize(c)) for c in materialize(columns)]).T.copy())

    @classmethod
    def projection(cls, fov: float, aspect_ratio: float, near: float, far: float) -> "Matrix":
        """4x4 perspective projection, fov in radians."""
        return cls._from_array(projections.projection_matrix(fov, aspect_ratio, near, far))

    @classmethod
    def look_at(cls, eye: Sequence, target: Sequence, up: Sequence) -> "Matrix":
        """4x4 right-handed camera matrix looking from eye towards target."""
        return cls._from_array(projections.look_at_matrix(eye, target, up))
