# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matrixkit
=========

A linear-algebra toolkit with two families of containers over the real
and complex fields:

- variable shape: `Vector`, `Matrix`; shapes are checked at call time
  and mismatches raise `DimensionError` subclasses
- fixed shape: `FixedVector[n]`, `FixedMatrix[m, n]`; the shape is part
  of the class and incompatible classes raise `TypeError`

Public API
~~~~~~~~~~
- Containers
    - `Vector`, `Matrix`, `FixedVector`, `FixedMatrix`,
      `Vec2`..`Vec4`, `Mat2`..`Mat4`
    - `fixed_from`, `variable_try_from`
- Combination
    - `add`, `sub`, `scale`, `hadamard`, `linear_combination`, `lerp`
- Products & norms
    - `dot`, `norm_1`, `norm_2`, `norm_inf`, `cross`, `angle_cos`,
      `mul_vec`, `mul_mat`, `transpose`, `conjugate_transpose`, `trace`
- Row reduction
    - `row_echelon`, `rref`, `rank`, `determinant`, `inverse`
- Builders
    - `projection_matrix`
- Scalar fields
    - `REAL`, `COMPLEX`, `field_of`

The array-level algorithms live in the sub-modules (`combination`,
`products`, `elimination`, `matrix_functions`, `projections`) and accept
plain ndarrays.

Example
-------
>>> import matrixkit as mk
>>> A = mk.Matrix([[1, 0], [0, 2]])
>>> A.inverse() == [[1, 0], [0, 0.5]]
True
>>> mk.Matrix([[1, 2], [2, 4]]).determinant() == 0
True
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    ConstructionLengthError,
    DimensionError,
    MatrixKitError,
    NotInvertibleError,
    NotSquareError,
    NumericalError,
    ShapeMismatchError,
    ZeroDivisorError,
    ZeroVectorError,
)
from .fixed import (
    FixedMatrix,
    FixedVector,
    Mat2,
    Mat3,
    Mat4,
    Vec2,
    Vec3,
    Vec4,
    fixed_matrix_type,
    fixed_vector_type,
)

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .operations import (
    add,
    angle_cos,
    conjugate_transpose,
    cross,
    determinant,
    dot,
    fixed_from,
    hadamard,
    inverse,
    lerp,
    linear_combination,
    mul_mat,
    mul_vec,
    norm_1,
    norm_2,
    norm_inf,
    projection_matrix,
    rank,
    row_echelon,
    rref,
    scale,
    sub,
    trace,
    transpose,
    variable_try_from,
)
from .scalars import COMPLEX, REAL, ScalarField, field_of
from .utils import DEFAULT_ATOL, EPS, scale_tol
from .variable import Matrix, Vector

__all__ = [
    "Vector",
    "Matrix",
    "FixedVector",
    "FixedMatrix",
    "Vec2",
    "Vec3",
    "Vec4",
    "Mat2",
    "Mat3",
    "Mat4",
    "fixed_vector_type",
    "fixed_matrix_type",
    "fixed_from",
    "variable_try_from",
    "add",
    "sub",
    "scale",
    "hadamard",
    "linear_combination",
    "lerp",
    "dot",
    "norm_1",
    "norm_2",
    "norm_inf",
    "cross",
    "angle_cos",
    "mul_vec",
    "mul_mat",
    "transpose",
    "conjugate_transpose",
    "trace",
    "row_echelon",
    "rref",
    "rank",
    "determinant",
    "inverse",
    "projection_matrix",
    "REAL",
    "COMPLEX",
    "ScalarField",
    "field_of",
    "EPS",
    "DEFAULT_ATOL",
    "scale_tol",
    "MatrixKitError",
    "DimensionError",
    "ShapeMismatchError",
    "NotSquareError",
    "ConstructionLengthError",
    "NumericalError",
    "NotInvertibleError",
    "ZeroVectorError",
    "ZeroDivisorError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matrixkit”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
