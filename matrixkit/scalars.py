# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Scalar fields
=============

Every algorithm in matrixkit is written against a `ScalarField` rather
than a concrete number type. Two fields exist:

- `REAL`    : float64 values, `conjugate` is the identity
- `COMPLEX` : complex128 values, `conjugate` flips the imaginary part

Integer input is promoted to the real field, mixing real and complex
operands promotes to the complex field.
"""

import numbers

import numpy as np

from .errors import ZeroDivisorError


class ScalarField:
    """
    Arithmetic and identities shared by the real and complex fields.

    The element-wise operations accept scalars or ndarrays alike.
    """

    name = "abstract"

    def __init__(self, dtype):
        self.dtype = np.dtype(dtype)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.dtype})"

    # -----------------------------------------------------------------
    # identities
    # -----------------------------------------------------------------
    def zero(self):
        return self.dtype.type(0)

    def one(self):
        return self.dtype.type(1)

    # -----------------------------------------------------------------
    # arithmetic
    # -----------------------------------------------------------------
    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def neg(self, a):
        return -a

    def div(self, a, b):
        """Divide a by the scalar b, refusing the additive identity."""
        if b == 0:
            raise ZeroDivisorError(f"division by zero in the {self.name} field")
        return a / b

    def conjugate(self, x):
        raise NotImplementedError

    def modulus(self, x):
        return np.abs(x)

    def sqrt(self, x):
        return np.sqrt(x)

    # -----------------------------------------------------------------
    # conversion
    # -----------------------------------------------------------------
    def coerce(self, values) -> np.ndarray:
        """Return a fresh ndarray of this field's dtype holding `values`."""
        return np.array(values, dtype=self.dtype)

    def scalar(self, value):
        return self.dtype.type(value)


class RealField(ScalarField):
    name = "real"

    def conjugate(self, x):
        return x

    def coerce(self, values) -> np.ndarray:
        if np.iscomplexobj(values):
            raise TypeError("complex values cannot be stored in the real field")
        return np.array(values, dtype=self.dtype)


class ComplexField(ScalarField):
    name = "complex"

    def conjugate(self, x):
        return np.conj(x)


REAL = RealField(np.float64)
COMPLEX = ComplexField(np.complex128)


def _is_numeric(x) -> bool:
    return isinstance(x, numbers.Number) and not isinstance(x, (bool, np.bool_))


def field_of(values) -> ScalarField:
    """
    Pick the scalar field able to hold every value in `values`.

    Raises
    ------
    TypeError : if `values` holds booleans or non-numeric objects.
    """
    if isinstance(values, ScalarField):
        return values
    arr = np.asarray(values)
    kind = arr.dtype.kind
    if kind == "c":
        return COMPLEX
    if kind in "iuf":
        return REAL
    if kind == "O":
        flat = arr.ravel().tolist()
        if not all(_is_numeric(x) for x in flat):
            raise TypeError("matrixkit containers only hold real or complex numbers")
        if any(isinstance(x, numbers.Complex) and not isinstance(x, numbers.Real) for x in flat):
            return COMPLEX
        return REAL
    raise TypeError(f"unsupported scalar type: {arr.dtype}")


def common_field(*values) -> ScalarField:
    """Return the smallest field holding all operands (complex wins)."""
    fields = [field_of(v) for v in values]
    return COMPLEX if any(f is COMPLEX for f in fields) else REAL


def field_for_dtype(dtype) -> ScalarField:
    return COMPLEX if np.dtype(dtype).kind == "c" else REAL


def as_array(values, field=None) -> np.ndarray:
    """Copy `values` into an ndarray of `field` (inferred when omitted)."""
    if field is None:
        field = field_of(values)
    return field.coerce(values)


def is_scalar(x) -> bool:
    """True for a single real or complex number (never for containers)."""
    return _is_numeric(x) or (
        isinstance(x, np.ndarray) and x.ndim == 0 and x.dtype.kind in "iufc"
    )
