# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from matrixkit.errors import NumericalError, ZeroDivisorError
from matrixkit.scalars import (
    COMPLEX,
    REAL,
    as_array,
    common_field,
    field_for_dtype,
    field_of,
    is_scalar,
)


@pytest.mark.parametrize(
    "values,field",
    [
        (3, REAL),
        (2.5, REAL),
        ([1, 2, 3], REAL),
        (np.arange(4), REAL),
        (1j, COMPLEX),
        ([1, 2 + 0j], COMPLEX),
        (np.ones(2, dtype=np.complex64), COMPLEX),
    ],
)
def test_field_of(values, field):
    assert field_of(values) is field


@pytest.mark.parametrize("values", [True, [True, False], "abc", [1, "a"], None])
def test_field_of_rejects_non_numbers(values):
    with pytest.raises(TypeError):
        field_of(values)


def test_common_field_promotes_to_complex():
    assert common_field([1.0], [2.0]) is REAL
    assert common_field([1.0], 2j) is COMPLEX
    assert field_for_dtype(np.complex128) is COMPLEX
    assert field_for_dtype(np.int32) is REAL


def test_identities():
    assert REAL.zero() == 0 and REAL.one() == 1
    assert isinstance(REAL.one(), np.float64)
    assert isinstance(COMPLEX.zero(), np.complex128)


def test_conjugate_and_modulus():
    assert REAL.conjugate(-2.0) == -2.0
    assert COMPLEX.conjugate(3 + 4j) == 3 - 4j
    assert COMPLEX.modulus(3 + 4j) == 5.0
    assert REAL.modulus(-7.0) == 7.0
    assert REAL.sqrt(16.0) == 4.0


def test_division():
    assert REAL.div(1.0, 4.0) == 0.25
    np.testing.assert_array_equal(COMPLEX.div(np.array([2j, 4]), 2), [1j, 2])
    with pytest.raises(ZeroDivisorError):
        REAL.div(1.0, 0.0)
    # still a ZeroDivisionError / NumericalError for generic handlers
    with pytest.raises(ZeroDivisionError):
        COMPLEX.div(1j, 0j)
    assert issubclass(ZeroDivisorError, NumericalError)


def test_coerce_copies_and_guards_the_real_field():
    source = np.array([1.0, 2.0])
    out = REAL.coerce(source)
    out[0] = 10.0
    assert source[0] == 1.0
    assert as_array([1, 2]).dtype == np.float64
    assert as_array([1, 2], COMPLEX).dtype == np.complex128
    with pytest.raises(TypeError):
        REAL.coerce([1j])


@pytest.mark.parametrize(
    "x,expected",
    [
        (1, True),
        (1.5, True),
        (2j, True),
        (np.float64(3.0), True),
        (np.array(3.0), True),
        (True, False),
        ("1", False),
        ([1], False),
        (np.array([1.0]), False),
    ],
)
def test_is_scalar(x, expected):
    assert is_scalar(x) is expected
