# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Fixed-shape containers

The shape is part of the class: ``FixedVector[3]`` and
``FixedMatrix[2, 3]`` are distinct classes, created once per shape and
cached. Two fixed containers combine only when their classes agree, and
operations the shape rules out are not defined on the class at all:

- ``cross`` exists only on ``FixedVector[3]``
- ``trace``, ``determinant``, ``inverse``, ``adjugate`` and ``identity``
  exist only on square ``FixedMatrix[n, n]``
- ``projection`` and the homogeneous transforms exist only on
  ``FixedMatrix[4, 4]``

Mixing incompatible classes raises ``TypeError`` before any arithmetic
runs. Singularity is a property of the data, so ``inverse`` can still
raise ``NotInvertibleError``.
"""

import functools
import numbers
from typing import ClassVar, Optional, Sequence

import numpy as np

from . import projections
from ._container import (
    Container,
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


def _dimension(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise TypeError(f"{what} must be a positive integer, got {value!r}")
    return int(value)


def _shape_of(data) -> tuple:
    try:
        return np.shape(data)
    except ValueError:
        raise ConstructionLengthError(0, 0, message="ragged data has no fixed shape") from None


class _Fixed:
    _family = "fixed"

    @classmethod
    def _vector_type(cls, size: int):
        return fixed_vector_type(size)

    @classmethod
    def _matrix_type(cls, rows: int, cols: int):
        return fixed_matrix_type(rows, cols)

    def _check_compatible(self, other, operation: str) -> None:
        Container._check_compatible(self, other, operation)
        if type(other) is not type(self):
            raise TypeError(
                f"{operation}: {type(self).__name__} and {type(other).__name__} have different shapes"
            )

    def _wrap(self, array: np.ndarray):
        if 0 in array.shape:
            raise IndexError(
                f"{type(self).__name__}: index selects an empty result of shape {array.shape}, "
                "fixed containers need at least one element per dimension"
            )
        return Container._wrap(self, array)


def _leading_dimension(other) -> int:
    if isinstance(other, FixedVector):
        return other.SIZE
    return other.ROWS


class FixedVector(_Fixed, VectorMethods):
    """
    A vector whose length is fixed by its class.

    ``FixedVector[3]([1, 2, 3])`` builds a 3-vector; the unsized form
    ``FixedVector([1, 2, 3])`` infers the class from the data.
    """

    SIZE: ClassVar[Optional[int]] = None

    def __class_getitem__(cls, size):
        return fixed_vector_type(size)

    def __new__(cls, elements=None):
        if cls.SIZE is None:
            shape = _shape_of(materialize(elements) if elements is not None else None)
            if len(shape) != 1:
                raise DimensionError(f"FixedVector needs a flat sequence of scalars, got shape {shape}")
            cls = fixed_vector_type(shape[0])
        return object.__new__(cls)

    def __init__(self, elements: Sequence):
        array = vector_to_array(elements)
        if array.shape[0] != self.SIZE:
            raise ConstructionLengthError(
                self.SIZE,
                array.shape[0],
                message=f"{type(self).__name__} needs {self.SIZE} elements, got {array.shape[0]}",
            )
        self._data = array

    @classmethod
    def zeros(cls, field: ScalarField = REAL):
        if cls.SIZE is None:
            raise TypeError("zeros() needs a sized class, e.g. FixedVector[3]")
        return cls._from_array(field.coerce(np.zeros(cls.SIZE)))


class _Vector3Methods:
    def cross(self, other):
        """Cross product of two FixedVector[3]."""
        self._check_compatible(other, "cross")
        return type(self)._from_array(cross(self._data, other._data))


class FixedMatrix(_Fixed, MatrixMethods):
    """
    A matrix whose row and column counts are fixed by its class.

    ``FixedMatrix[2, 3]([[1, 2, 3], [4, 5, 6]])`` builds a 2x3 matrix,
    ``FixedMatrix[2, 3].from_elements(range(6))`` does the same from
    flat row-major data.
    """

    ROWS: ClassVar[Optional[int]] = None
    COLS: ClassVar[Optional[int]] = None

    def __class_getitem__(cls, shape):
        if not isinstance(shape, tuple) or len(shape) != 2:
            raise TypeError("FixedMatrix takes two parameters: FixedMatrix[rows, cols]")
        return fixed_matrix_type(*shape)

    def __new__(cls, rows=None):
        if cls.ROWS is None:
            shape = _shape_of(materialize(rows) if rows is not None else None)
            if len(shape) != 2:
                raise DimensionError(f"FixedMatrix needs a sequence of rows, got shape {shape}")
            cls = fixed_matrix_type(*shape)
        return object.__new__(cls)

    def __init__(self, rows: Sequence):
        array = rows_to_array(rows)
        if array.shape != (self.ROWS, self.COLS):
            raise ConstructionLengthError(
                self.ROWS * self.COLS,
                array.size,
                message=f"{type(self).__name__} needs {self.ROWS} rows of {self.COLS} elements, "
                f"got shape {array.shape}",
            )
        self._data = array

    @classmethod
    def _require_sized(cls, what: str) -> None:
        if cls.ROWS is None:
            raise TypeError(f"{what}() needs a sized class, e.g. FixedMatrix[2, 3]")

    @classmethod
    def from_elements(cls, elements: Sequence):
        """Build from exactly ROWS * COLS scalars in row-major order."""
        cls._require_sized("from_elements")
        array = as_array(materialize(elements))
        expected = cls.ROWS * cls.COLS
        if array.ndim != 1 or array.size != expected:
            raise ConstructionLengthError(
                expected,
                array.size,
                message=f"{cls.__name__} needs {expected} elements, got {array.size}",
            )
        return cls._from_array(array.reshape(cls.ROWS, cls.COLS))

    @classmethod
    def zeros(cls, field: ScalarField = REAL):
        cls._require_sized("zeros")
        return cls._from_array(field.coerce(np.zeros((cls.ROWS, cls.COLS))))

    def mul_vec(self, v):
        if not isinstance(v, FixedVector):
            raise TypeError(f"mul_vec: {type(self).__name__} needs a FixedVector, got {type(v).__name__}")
        return super().mul_vec(v)

    def mul_mat(self, other):
        if not isinstance(other, FixedMatrix):
            raise TypeError(f"mul_mat: {type(self).__name__} needs a FixedMatrix, got {type(other).__name__}")
        return super().mul_mat(other)

    def _check_product(self, other, operation: str) -> None:
        Container._check_compatible(self, other, operation)
        if _leading_dimension(other) != self.COLS:
            raise TypeError(
                f"{operation}: {type(self).__name__} cannot multiply {type(other).__name__}"
            )

    def _check_rows(self, other, operation: str) -> None:
        Container._check_compatible(self, other, operation)
        if _leading_dimension(other) != self.ROWS:
            raise TypeError(
                f"{operation}: {type(self).__name__} and {type(other).__name__} have different row counts"
            )


class _FixedSquareMethods(SquareMethods):
    @classmethod
    def identity(cls, field: ScalarField = REAL):
        return cls._from_array(field.coerce(np.eye(cls.ROWS)))


class _Transform3Methods:
    """Linear 3D transforms, and 2D translation in homogeneous form."""

    @classmethod
    def translation(cls, x: float, y: float):
        """2D translation acting on (x, y, 1)."""
        return cls._from_array(projections.translation_matrix_2d(x, y))

    @classmethod
    def scaling(cls, x: float, y: float, z: float):
        return cls._from_array(projections.scaling_matrix(x, y, z))

    @classmethod
    def rotation_x(cls, angle: float):
        return cls._from_array(projections.rotation_x(angle))

    @classmethod
    def rotation_y(cls, angle: float):
        return cls._from_array(projections.rotation_y(angle))

    @classmethod
    def rotation_z(cls, angle: float):
        return cls._from_array(projections.rotation_z(angle))

    @classmethod
    def rotation(cls, x: float, y: float, z: float):
        return cls._from_array(projections.rotation_matrix(x, y, z))

    @classmethod
    def from_axis_angle(cls, axis: Sequence[float], angle: float):
        return cls._from_array(projections.axis_angle_matrix(axis, angle))


class _Transform4Methods:
    """Homogeneous transforms acting on FixedVector[4]."""

    @classmethod
    def projection(cls, fov: float, aspect_ratio: float, near: float, far: float):
        """Perspective projection, fov in radians."""
        return cls._from_array(projections.projection_matrix(fov, aspect_ratio, near, far))

    @classmethod
    def translation(cls, x: float, y: float, z: float):
        return cls._from_array(projections.translation_matrix(x, y, z))

    @classmethod
    def look_at(cls, eye: Sequence[float], target: Sequence[float], up: Sequence[float]):
        """Right-handed camera matrix looking from eye towards target."""
        return cls._from_array(projections.look_at_matrix(eye, target, up))

    @classmethod
    def view(cls, eye: Sequence[float], target: Sequence[float], up: Sequence[float]):
        """Camera matrix with y pointing down (Vulkan clip space)."""
        return cls._from_array(projections.view_matrix(eye, target, up))

    @classmethod
    def scaling(cls, x: float, y: float, z: float):
        return cls._from_array(projections.homogeneous(projections.scaling_matrix(x, y, z)))

    @classmethod
    def rotation_x(cls, angle: float):
        return cls._from_array(projections.homogeneous(projections.rotation_x(angle)))

    @classmethod
    def rotation_y(cls, angle: float):
        return cls._from_array(projections.homogeneous(projections.rotation_y(angle)))

    @classmethod
    def rotation_z(cls, angle: float):
        return cls._from_array(projections.homogeneous(projections.rotation_z(angle)))

    @classmethod
    def rotation(cls, x: float, y: float, z: float):
        return cls._from_array(projections.homogeneous(projections.rotation_matrix(x, y, z)))

    @classmethod
    def from_axis_angle(cls, axis: Sequence[float], angle: float):
        return cls._from_array(projections.homogeneous(projections.axis_angle_matrix(axis, angle)))


def fixed_vector_type(size) -> type:
    """Return the (cached) FixedVector class of the given length."""
    return _fixed_vector_type(_dimension(size, "FixedVector size"))


def fixed_matrix_type(rows, cols) -> type:
    """Return the (cached) FixedMatrix class of the given shape."""
    return _fixed_matrix_type(
        _dimension(rows, "FixedMatrix row count"), _dimension(cols, "FixedMatrix column count")
    )


@functools.lru_cache(maxsize=None)
def _fixed_vector_type(size: int) -> type:
    bases = (_Vector3Methods, FixedVector) if size == 3 else (FixedVector,)
    name = f"FixedVector[{size}]"
    return type(name, bases, {"SIZE": size, "__module__": __name__, "__qualname__": name})


@functools.lru_cache(maxsize=None)
def _fixed_matrix_type(rows: int, cols: int) -> type:
    bases = [FixedMatrix]
    if rows == cols:
        bases.insert(0, _FixedSquareMethods)
    if rows == cols == 3:
        bases.insert(0, _Transform3Methods)
    if rows == cols == 4:
        bases.insert(0, _Transform4Methods)
    name = f"FixedMatrix[{rows}, {cols}]"
    return type(
        name,
        tuple(bases),
        {"ROWS": rows, "COLS": cols, "__module__": __name__, "__qualname__": name},
    )


Vec2 = FixedVector[2]
Vec3 = FixedVector[3]
Vec4 = FixedVector[4]
Mat2 = FixedMatrix[2, 2]
Mat3 = FixedMatrix[3, 3]
Mat4 = FixedMatrix[4, 4]
