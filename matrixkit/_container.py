# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Behaviour shared by the variable-shape and fixed-shape containers.

A container owns one ndarray (`_data`) and forwards every algorithm to
the array functions in `combination`, `products`, `elimination` and
`matrix_functions`. The two families differ only in two hooks:

- `_vector_type` / `_matrix_type` pick the class that wraps a result
- `_check_compatible` / `_check_product` validate operands before any
  arithmetic runs (class identity for fixed shapes; the array layer's
  own shape checks for variable shapes)
"""

from typing import ClassVar, List, Optional

import numpy as np

from . import combination, elimination, matrix_functions, products
from .errors import ConstructionLengthError, DimensionError
from .scalars import REAL, ScalarField, as_array, field_for_dtype, is_scalar
from .utils import DEFAULT_ATOL


def materialize(values):
    """Turn one-shot iterables into lists; leave sequences and arrays alone."""
    if isinstance(values, (np.ndarray, Container, list, tuple)):
        return values
    return list(values)


def vector_to_array(elements, field: Optional[ScalarField] = None) -> np.ndarray:
    array = as_array(materialize(elements), field)
    if array.ndim != 1:
        raise DimensionError(f"a vector needs a flat sequence of scalars, got shape {array.shape}")
    return array


def rows_to_array(rows, field: Optional[ScalarField] = None) -> np.ndarray:
    """Copy nested row data into a 2-D array, rejecting ragged rows."""
    rows = materialize(rows)
    if isinstance(rows, (np.ndarray, Container)):
        array = as_array(rows, field)
    else:
        try:
            rows = [list(materialize(r)) for r in rows]
        except TypeError:
            raise DimensionError("a matrix needs a sequence of rows") from None
        if rows:
            width = len(rows[0])
            for i, r in enumerate(rows):
                if len(r) != width:
                    raise ConstructionLengthError(
                        width, len(r), message=f"row {i} has {len(r)} elements, expected {width}"
                    )
            array = as_array(rows, field)
        else:
            array = (field or REAL).coerce(np.zeros((0, 0)))
    if array.ndim != 2:
        raise DimensionError(f"a matrix needs 2-D data, got shape {array.shape}")
    return array


class Container:
    """Storage, accessors, comparison and element-wise arithmetic."""

    # let our reflected operators win over NumPy's broadcasting
    __array_ufunc__ = None
    __hash__ = None

    _family: ClassVar[str] = ""
    _data: np.ndarray

    @classmethod
    def _from_array(cls, array: np.ndarray):
        obj = object.__new__(cls)
        obj._data = array
        return obj

    @classmethod
    def _vector_type(cls, size: int):
        raise NotImplementedError

    @classmethod
    def _matrix_type(cls, rows: int, cols: int):
        raise NotImplementedError

    def _wrap(self, array: np.ndarray):
        if array.ndim == 1:
            return self._vector_type(array.shape[0])._from_array(array)
        return self._matrix_type(*array.shape)._from_array(array)

    def _check_compatible(self, other, operation: str) -> None:
        if not isinstance(other, Container) or other._family != self._family:
            raise TypeError(
                f"{operation}: cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    # -----------------------------------------------------------------
    # accessors
    # -----------------------------------------------------------------
    @property
    def shape(self) -> tuple:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def field(self) -> ScalarField:
        return field_for_dtype(self._data.dtype)

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the elements as an ndarray."""
        return self._data.copy()

    def to_list(self) -> list:
        return self._data.tolist()

    def copy(self):
        return type(self)._from_array(self._data.copy())

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __getitem__(self, index):
        value = self._data[index]
        if isinstance(value, np.ndarray):
            return self._wrap(value.copy())
        return value

    def __setitem__(self, index, value):
        """Overwrite elements in place; the shape and field never change."""
        if isinstance(value, Container):
            value = value._data
        self._data[index] = self.field.coerce(value)

    # -----------------------------------------------------------------
    # comparison
    # -----------------------------------------------------------------
    def _comparable(self, other) -> Optional[np.ndarray]:
        if isinstance(other, Container):
            return other._data if other._family == self._family else None
        if isinstance(other, (list, tuple, np.ndarray)):
            return np.asarray(other)
        return None

    def __eq__(self, other):
        if not isinstance(other, (Container, list, tuple, np.ndarray)):
            return NotImplemented
        data = self._comparable(other)
        if data is None or data.shape != self._data.shape:
            return False
        return bool(np.array_equal(self._data, data))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def approx_eq(self, other, tol: float = DEFAULT_ATOL) -> bool:
        """Element-wise equality within an absolute tolerance."""
        data = self._comparable(other)
        if data is None or data.shape != self._data.shape:
            return False
        return bool(np.allclose(self._data, data, rtol=0.0, atol=tol))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    # -----------------------------------------------------------------
    # element-wise arithmetic
    # -----------------------------------------------------------------
    def add(self, other):
        self._check_compatible(other, "add")
        return self._wrap(combination.add(self._data, other._data))

    def sub(self, other):
        self._check_compatible(other, "sub")
        return self._wrap(combination.sub(self._data, other._data))

    def hadamard(self, other):
        """Term-by-term product."""
        self._check_compatible(other, "hadamard")
        return self._wrap(combination.hadamard(self._data, other._data))

    def scale(self, k):
        return self._wrap(combination.scale(self._data, k))

    def neg(self):
        return self._wrap(combination.neg(self._data))

    def lerp(self, other, t):
        """self + t (other - self), t not clamped."""
        self._check_compatible(other, "lerp")
        return self._wrap(combination.lerp(self._data, other._data, t))

    def __add__(self, other):
        if not isinstance(other, Container):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Container):
            return NotImplemented
        return self.sub(other)

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self.copy()

    def __mul__(self, k):
        if not is_scalar(k):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if not is_scalar(k):
            return NotImplemented
        return self._wrap(combination.divide(self._data, k))


class VectorMethods(Container):
    """Operations available on every vector."""

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def dot(self, other):
        self._check_compatible(other, "dot")
        return products.dot(self._data, other._data)

    def norm_1(self) -> float:
        return products.norm_1(self._data)

    def norm(self) -> float:
        """Euclidean norm."""
        return products.norm_2(self._data)

    norm_2 = norm

    def norm_inf(self) -> float:
        return products.norm_inf(self._data)

    def normalize(self):
        return self._wrap(products.normalize(self._data))

    def angle_cos(self, other):
        self._check_compatible(other, "angle_cos")
        return products.angle_cos(self._data, other._data)

    def __str__(self) -> str:
        return "[" + ", ".join(str(x) for x in self.to_list()) + "]"


class MatrixMethods(Container):
    """Operations available on every matrix."""

    def _check_product(self, other, operation: str) -> None:
        self._check_compatible(other, operation)

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    def is_square(self) -> bool:
        return self.rows == self.cols

    def row(self, i: int):
        return self[i]

    def column(self, j: int):
        return self[:, j]

    def mul_vec(self, v):
        self._check_product(v, "mul_vec")
        return self._wrap(products.mul_vec(self._data, v._data))

    def mul_mat(self, other):
        self._check_product(other, "mul_mat")
        return self._wrap(products.mul_mat(self._data, other._data))

    def __matmul__(self, other):
        if isinstance(other, VectorMethods):
            return self.mul_vec(other)
        if isinstance(other, MatrixMethods):
            return self.mul_mat(other)
        return NotImplemented

    def transpose(self):
        """Plain transpose; see conjugate_transpose for the Hermitian adjoint."""
        return self._wrap(products.transpose(self._data))

    @property
    def T(self):
        return self.transpose()

    def conjugate_transpose(self):
        return self._wrap(products.conjugate_transpose(self._data))

    @property
    def H(self):
        return self.conjugate_transpose()

    def row_echelon(self, tol: Optional[float] = None):
        return self._wrap(elimination.row_echelon(self._data, tol=tol))

    def rref(self, tol: Optional[float] = None):
        """Reduced row-echelon form."""
        return self._wrap(elimination.rref(self._data, tol=tol)[0])

    def pivot_columns(self, tol: Optional[float] = None) -> List[int]:
        return elimination.rref(self._data, tol=tol)[1]

    def rank(self, tol: Optional[float] = None) -> int:
        return elimination.rank(self._data, tol=tol)

    def augmented(self, other):
        """[self | other]; other is a matrix or a vector with as many rows."""
        self._check_rows(other, "augmented")
        return self._wrap(elimination.augmented(self._data, other._data))

    def _check_rows(self, other, operation: str) -> None:
        Container._check_compatible(self, other, operation)

    def submatrix(self, rows: slice, cols: slice):
        return self._wrap(self._data[rows, cols].copy())

    def __str__(self) -> str:
        return "\n".join("[" + ", ".join(str(x) for x in row) + "]" for row in self.to_list())


class SquareMethods:
    """Operations that only make sense on square matrices."""

    def trace(self):
        return products.trace(self._data)

    def multiplicative_trace(self):
        return products.multiplicative_trace(self._data)

    def determinant(self, tol: Optional[float] = None):
        return matrix_functions.determinant(self._data, tol=tol)

    def inverse(self, tol: Optional[float] = None):
        """Raises NotInvertibleError for (numerically) singular matrices."""
        return self._wrap(elimination.inverse(self._data, tol=tol))

    def adjugate(self):
        return self._wrap(matrix_functions.adjugate(self._data))

    def minor(self, i: int, j: int):
        """The matrix with row i and column j removed."""
        return self._wrap(matrix_functions.minor_matrix(self._data, i, j))
