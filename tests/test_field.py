#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecalgebra.field` module."

import secrets

import pytest

from ecalgebra.exceptions import (
    ECAlgebraTypeError,
    ECAlgebraValueError,
    ModulusMismatchError,
    RangeError,
)
from ecalgebra.field import FieldElement, field_elements

small_primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]

# secp256k1 field prime
p256 = 2**256 - 2**32 - 977


def test_exceptions() -> None:

    # good field element
    FieldElement(12, 13)

    with pytest.raises(RangeError, match="value not in 0..12: 13"):
        FieldElement(13, 13)

    with pytest.raises(RangeError, match="value not in 0..12: -1"):
        FieldElement(-1, 13)

    with pytest.raises(RangeError, match="non positive modulus: 0"):
        FieldElement(0, 0)

    err_msg = "value not in 0..'FFFFFFFF FFFFFFFF"
    with pytest.raises(RangeError, match=err_msg):
        FieldElement(p256, p256)

    # RangeError is a ValueError
    with pytest.raises(ValueError):
        FieldElement(13, 13)

    with pytest.raises(ModulusMismatchError, match="modulus mismatch: 13 != 17"):
        _ = FieldElement(1, 13) + FieldElement(1, 17)

    a, b = FieldElement(1, 13), FieldElement(1, 17)
    for op in (
        lambda: a - b,
        lambda: a * b,
        lambda: a / b,
    ):
        with pytest.raises(ModulusMismatchError):
            op()

    with pytest.raises(TypeError):
        _ = FieldElement(1, 13) + 1.5  # type: ignore

    with pytest.raises(TypeError):
        _ = FieldElement(1, 13) ** FieldElement(2, 13)  # type: ignore


def test_integer_representations() -> None:
    assert FieldElement("0x0d", 17) == FieldElement(13, 17)
    assert FieldElement("0d", "11") == FieldElement(13, 17)
    x = FieldElement("FFFFFFFF FFFFFFFF", p256)
    assert x == FieldElement(2**64 - 1, p256)
    assert isinstance(x.value, int)

    with pytest.raises(ECAlgebraTypeError, match="not an integer: "):
        FieldElement(b"\x0d", 17)  # type: ignore

    with pytest.raises(ECAlgebraTypeError, match="not an integer: "):
        FieldElement(1.5, 17)  # type: ignore


def test_validation_cannot_be_skipped() -> None:
    "Every instance satisfies 0 <= value < modulus."

    with pytest.raises(TypeError):
        FieldElement(25, 19, False)  # type: ignore

    with pytest.raises(RangeError, match="value not in 0..18: 25"):
        FieldElement(25, 19)

    x = FieldElement("10", 19)
    assert x.value == 16
    assert isinstance(x.value, int)


def test_add_sub_mul() -> None:
    assert FieldElement(7, 17) + FieldElement(8, 17) == FieldElement(15, 17)
    assert FieldElement(7, 19) + FieldElement(8, 19) == FieldElement(15, 19)
    assert FieldElement(11, 19) + FieldElement(17, 19) == FieldElement(9, 19)

    assert FieldElement(8, 17) - FieldElement(7, 17) == FieldElement(1, 17)
    # negative intermediate result
    assert FieldElement(7, 17) - FieldElement(8, 17) == FieldElement(16, 17)
    assert FieldElement(6, 19) - FieldElement(13, 19) == FieldElement(12, 19)

    assert FieldElement(5, 19) * FieldElement(3, 19) == FieldElement(15, 19)
    assert FieldElement(8, 19) * FieldElement(17, 19) == FieldElement(3, 19)

    assert -FieldElement(5, 19) == FieldElement(14, 19)
    assert -FieldElement(0, 19) == FieldElement(0, 19)


def test_int_operands() -> None:
    x = FieldElement(5, 13)
    assert 3 * x == FieldElement(2, 13)
    assert x * 3 == FieldElement(2, 13)
    assert x + 20 == FieldElement(12, 13)
    assert 20 + x == FieldElement(12, 13)
    assert x - 6 == FieldElement(12, 13)
    assert 1 - x == FieldElement(9, 13)
    assert x - (-1) == FieldElement(6, 13)
    assert 1 / FieldElement(3, 13) == FieldElement(9, 13)
    assert x / 5 == FieldElement(1, 13)


def test_immutability() -> None:
    a = FieldElement(1, 7)
    b = a
    a += FieldElement(2, 7)
    assert a == FieldElement(3, 7)
    assert b == FieldElement(1, 7)

    a *= 3
    assert a == FieldElement(2, 7)
    assert b == FieldElement(1, 7)

    with pytest.raises(AttributeError):
        b.value = 2  # type: ignore


def test_closure() -> None:
    for p in small_primes[:8]:
        for a in field_elements(p):
            for b in field_elements(p):
                for c in (a + b, a - b, a * b):
                    assert c.modulus == p
                    assert 0 <= c.value < p
                    assert c == FieldElement(c.value, c.modulus)


def test_multiplication_permutes_field() -> None:
    p = 19
    elements = field_elements(p)
    assert [e.value for e in elements] == list(range(p))
    for k in (1, 3, 7, 13, 18):
        kf = FieldElement(k, p)
        assert sorted(kf * n for n in elements) == elements


def test_pow() -> None:
    assert FieldElement(10, 31) ** 2 == FieldElement(7, 31)
    assert FieldElement(17, 31) ** 3 == FieldElement(15, 31)
    assert FieldElement(5, 31) ** 5 * FieldElement(18, 31) == FieldElement(16, 31)
    assert FieldElement(3, 13).pow(0) == FieldElement(1, 13)
    assert FieldElement(0, 13).pow(12) == FieldElement(0, 13)

    # negative exponents are reduced mod p-1
    assert FieldElement(17, 31) ** -3 == FieldElement(29, 31)
    assert FieldElement(4, 31) ** -4 * FieldElement(11, 31) == FieldElement(13, 31)
    assert FieldElement(3, 13) ** -1 == FieldElement(9, 13)

    # cryptographic-size exponent
    x = FieldElement(2, p256)
    assert x ** (p256 - 1) == FieldElement(1, p256)
    assert x ** (p256 + 1) == x * x


def test_fermat() -> None:
    for p in small_primes:
        one = FieldElement(1, p)
        for a in field_elements(p)[1:]:
            assert a.pow(p - 1) == one

    for _ in range(10):
        a = FieldElement(1 + secrets.randbelow(p256 - 1), p256)
        assert a ** (p256 - 1) == FieldElement(1, p256)


def test_div() -> None:
    assert FieldElement(2, 19) / FieldElement(7, 19) == FieldElement(3, 19)
    assert FieldElement(7, 19) / FieldElement(5, 19) == FieldElement(9, 19)
    assert FieldElement(3, 13).inverse() == FieldElement(9, 13)

    for p in small_primes:
        for a in field_elements(p):
            for b in field_elements(p)[1:]:
                assert (a / b) * b == a

    for _ in range(10):
        a = FieldElement(secrets.randbelow(p256), p256)
        b = FieldElement(1 + secrets.randbelow(p256 - 1), p256)
        assert (a / b) * b == a
        assert b * b.inverse() == FieldElement(1, p256)


def test_div_by_zero() -> None:
    "Division by the zero element is a caller obligation, not an error."
    zero = FieldElement(0, 13)
    assert zero.is_zero()
    assert not zero
    assert FieldElement(5, 13) / zero == zero
    assert zero.inverse() == zero

    # x^(p-2) = x^0 for p = 2, but zero is not invertible
    for p in small_primes:
        zero = FieldElement(0, p)
        assert zero.inverse() == zero
        assert FieldElement(1, p) / zero == zero
        assert zero ** -1 == zero
        assert zero ** -(p - 1) == zero
        assert zero**0 == FieldElement(1, p)

    assert FieldElement(1, 2).inverse() == FieldElement(1, 2)
    assert FieldElement(0, 1).inverse() == FieldElement(0, 1)


def test_sqrt() -> None:
    for p in small_primes:
        squares = {(x * x).value for x in field_elements(p)}
        for a in field_elements(p):
            if a.value in squares:
                root = a.sqrt()
                assert root * root == a
                assert (-root) * (-root) == a
            else:
                with pytest.raises(ECAlgebraValueError, match="no root for "):
                    a.sqrt()


def test_legendre() -> None:
    for p in small_primes[1:]:
        squares = {(x * x).value for x in field_elements(p)[1:]}
        assert FieldElement(0, p).legendre() == 0
        for a in field_elements(p)[1:]:
            assert a.legendre() == (1 if a.value in squares else -1)

    assert FieldElement(0, 2).legendre() == 0
    assert FieldElement(1, 2).legendre() == 1


def test_minus_one_is_square() -> None:
    "-1 is a square if and only if p = 1 (mod 4)."

    for p in small_primes[1:] + [p256]:
        minus_one = FieldElement(p - 1, p)
        if p % 4 == 3:
            with pytest.raises(ECAlgebraValueError, match="no root for "):
                minus_one.sqrt()
        else:
            root = minus_one.sqrt()
            assert root * root == minus_one


def test_sqrt_large_primes() -> None:
    # p = 1 (mod 8): Tonelli-Shanks with p-1 = q * 2^96
    # p = 5 (mod 8): Tonelli-Shanks with p-1 = q * 2^2
    # p = 3 (mod 4): x^((p+1)/4)
    for p in (2**224 - 2**96 + 1, 2**255 - 19, p256):
        for _ in range(10):
            x = FieldElement(secrets.randbelow(p), p)
            a = x * x
            root = a.sqrt()
            assert root in (x, -x)

    with pytest.raises(ECAlgebraValueError, match="no root for 'FFFFFFFF"):
        FieldElement(p256 - 1, p256).sqrt()


def test_ordering_and_hashing() -> None:
    elements = [FieldElement(3, 7), FieldElement(1, 7), FieldElement(2, 5)]
    assert sorted(elements) == [
        FieldElement(1, 7),
        FieldElement(2, 5),
        FieldElement(3, 7),
    ]
    # lexicographic on (value, modulus)
    assert FieldElement(1, 11) > FieldElement(1, 7)
    assert FieldElement(1, 7) != FieldElement(1, 11)
    assert FieldElement(1, 7) != 1

    assert len({FieldElement(1, 7), FieldElement(1, 7), FieldElement(1, 11)}) == 2


def test_conversions() -> None:
    x = FieldElement(7, 19)
    assert int(x) == 7
    assert str(x) == "7 (mod 19)"
    assert repr(x) == "FieldElement(7, 19)"
    assert eval(repr(x)) == x  # pylint: disable=eval-used # nosec

    x = FieldElement(p256 - 1, p256)
    assert str(x).startswith("'FFFFFFFF FFFFFFFF")
    assert eval(repr(x)) == x  # pylint: disable=eval-used # nosec


def test_field_elements() -> None:
    assert field_elements(1) == [FieldElement(0, 1)]
    assert len(field_elements(19)) == 19
    assert field_elements(19) == sorted(field_elements(19))

    with pytest.raises(RangeError, match="non positive modulus: 0"):
        field_elements(0)
