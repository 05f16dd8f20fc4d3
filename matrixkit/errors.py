# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for matrixkit.

Every error raised by the library derives from `MatrixKitError`.
Shape problems derive from `DimensionError` (itself a `ValueError`), so
code written against plain NumPy-style ``except ValueError`` keeps
working. Numeric failures derive from `NumericalError`.

Fixed-shape containers never raise `DimensionError` for combining two
operands: incompatible fixed classes raise `TypeError` instead.
"""

from typing import Optional, Tuple


class MatrixKitError(Exception):
    """Base exception for all matrixkit errors."""

    pass


class DimensionError(MatrixKitError, ValueError):
    """
    Container dimensions are incorrect for the requested operation.
    """

    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible with the requested operation.

    Attributes:
        operation: Name of the operation that was attempted
        lhs: Shape of the left operand
        rhs: Shape of the right operand
    """

    def __init__(
        self,
        operation: str,
        lhs: Tuple[int, ...],
        rhs: Tuple[int, ...],
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"{operation}: incompatible shapes {lhs} and {rhs}"
        super().__init__(message)
        self.operation = operation
        self.lhs = tuple(lhs)
        self.rhs = tuple(rhs)


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        operation: Name of the operation that was attempted
        shape: Shape of the offending matrix
    """

    def __init__(self, operation: str, shape: Tuple[int, ...]):
        super().__init__(f"{operation} is undefined for non-square matrix of shape {shape}")
        self.operation = operation
        self.shape = tuple(shape)


class ConstructionLengthError(DimensionError):
    """
    Supplied element count does not match the declared shape.

    Attributes:
        expected: Number of elements the declared shape requires
        actual: Number of elements supplied
    """

    def __init__(self, expected: int, actual: int, message: Optional[str] = None):
        if message is None:
            message = f"expected {expected} elements, got {actual}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(MatrixKitError, ArithmeticError):
    """
    Numerical computation failed.
    """

    pass


class NotInvertibleError(NumericalError):
    """
    Matrix is singular (or numerically singular) and cannot be inverted.

    Attributes:
        rank: Numerical rank found during row reduction
        expected_rank: Rank an invertible matrix of this size would have
    """

    def __init__(
        self,
        message: str,
        rank: Optional[int] = None,
        expected_rank: Optional[int] = None,
    ):
        super().__init__(message)
        self.rank = rank
        self.expected_rank = expected_rank


class ZeroVectorError(NumericalError):
    """Operation is undefined for a vector whose length is zero."""

    pass


class ZeroDivisorError(NumericalError, ZeroDivisionError):
    """Division by the additive identity of a scalar field."""

    pass
