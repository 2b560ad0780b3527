#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field element dataclass.

A FieldElement is a residue value modulo a prime modulus,
with 0 <= value < modulus at all times.

The usual arithmetic operators are available:
+, -, *, / and ** return new FieldElement instances
(FieldElement is immutable) and require both operands
to belong to the same field, i.e. to have the same modulus;
a plain int operand is reduced into the field
of the FieldElement operand, so that

    3 * x * x + a

is a valid expression for a FieldElement x.

The modulus is assumed to be a prime, but this is not checked:
the modular inverse is computed using Fermat's Little Theorem
and it is meaningless for composite moduli.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from ecalgebra.alias import Integer
from ecalgebra.exceptions import ECAlgebraValueError, ModulusMismatchError, RangeError
from ecalgebra.utils import int_from_integer, str_from_int


@dataclass(frozen=True, order=True)
class FieldElement:
    """Element of the prime field of the given modulus.

    Equality requires both value and modulus to match,
    while ordering is lexicographic on (value, modulus),
    allowing field elements to be sorted.

    The zero element has no inverse:
    its inverse, and its negative powers, are the zero element.
    Hence division by the zero element is not an error,
    it results in the zero element.
    Callers must check that the divisor is not zero (e.g. using is_zero)
    whenever a meaningful result is required.
    """

    value: int
    modulus: int

    def __post_init__(self) -> None:
        # FieldElement is frozen: normalization requires object.__setattr__
        object.__setattr__(self, "value", int_from_integer(self.value))
        object.__setattr__(self, "modulus", int_from_integer(self.modulus))
        self.assert_valid()

    def assert_valid(self) -> None:
        if self.modulus < 1:
            raise RangeError(f"non positive modulus: {str_from_int(self.modulus)}")
        if not 0 <= self.value < self.modulus:
            err_msg = f"value not in 0..{str_from_int(self.modulus - 1)}: "
            err_msg += str_from_int(self.value)
            raise RangeError(err_msg)

    def _new(self, value: int) -> "FieldElement":
        return FieldElement(value % self.modulus, self.modulus)

    def _coerce(self, other: object) -> Optional["FieldElement"]:
        if isinstance(other, FieldElement):
            if other.modulus != self.modulus:
                err_msg = "modulus mismatch: "
                err_msg += f"{str_from_int(self.modulus)} != "
                err_msg += f"{str_from_int(other.modulus)}"
                raise ModulusMismatchError(err_msg)
            return other
        if isinstance(other, int):
            return self._new(other)
        return None

    def __add__(self, other: Union["FieldElement", int]) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self.value + o.value)

    __radd__ = __add__

    def __sub__(self, other: Union["FieldElement", int]) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        # % with a positive modulus never returns a negative number
        return self._new(self.value - o.value)

    def __rsub__(self, other: int) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(o.value - self.value)

    def __mul__(self, other: Union["FieldElement", int]) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self.value * o.value)

    __rmul__ = __mul__

    def __neg__(self) -> "FieldElement":
        return self._new(-self.value)

    def pow(self, exponent: int) -> "FieldElement":
        """Return value^exponent (mod modulus).

        The built-in three-argument pow is used:
        it performs binary (square-and-multiply) exponentiation,
        i.e. log2(exponent) squarings at most.

        Negative exponents are reduced mod (modulus - 1),
        so that x^-1 is the inverse of a non-zero x;
        negative powers of the zero element are the zero element.
        """
        if exponent < 0:
            if not self.value:
                return self
            exponent %= self.modulus - 1
        return self._new(pow(self.value, exponent, self.modulus))

    def __pow__(self, exponent: int) -> "FieldElement":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def inverse(self) -> "FieldElement":
        "Return the inverse x^(p-2), according to Fermat's Little Theorem."
        # x^0 = 1 for p = 2: zero must be special-cased
        if not self.value:
            return self
        return self.pow(self.modulus - 2)

    def __truediv__(self, other: Union["FieldElement", int]) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __rtruediv__(self, other: int) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self.inverse()

    def legendre(self) -> int:
        """Return the Legendre symbol of the element, using Euler's criterion.

        It is 1 for a non-zero square, -1 for a non-square,
        0 for the zero element.
        """
        if self.modulus <= 2:
            # every element of F2 is a square
            return self.value
        # x^((p-1)/2) is either 0, 1, or p-1
        ls = self.pow(self.modulus >> 1)
        return -1 if ls == -self._new(1) else ls.value

    def sqrt(self) -> "FieldElement":
        """Return a square root of the element.

        The other root is its opposite.
        ECAlgebraValueError is raised if no root exists.

        x^((p+1)/4) is the root for p = 3 mod 4,
        otherwise the Tonelli-Shanks algorithm is used.
        """
        if self.legendre() == -1:
            err_msg = f"no root for {str_from_int(self.value)}"
            err_msg += f" mod {str_from_int(self.modulus)}"
            raise ECAlgebraValueError(err_msg)
        if self.modulus <= 2 or not self.value:
            return self
        if self.modulus % 4 == 3:
            return self.pow((self.modulus + 1) >> 2)
        return self._tonelli_shanks()

    def _tonelli_shanks(self) -> "FieldElement":
        # p-1 = q * 2^s, with q odd
        q, s = self.modulus - 1, 0
        while not q & 1:
            q >>= 1
            s += 1

        # z must be a quadratic non-residue
        z = self._new(2)
        while z.legendre() != -1:
            z += 1

        one = self._new(1)
        c = z.pow(q)
        t = self.pow(q)
        r = self.pow((q + 1) >> 1)
        # invariant: r^2 = self * t
        while t != one:
            # lowest i such that t^(2^i) = 1
            i, t2i = 0, t
            while t2i != one:
                t2i *= t2i
                i += 1
            b = c.pow(1 << (s - i - 1))
            c = b * b
            t *= c
            r *= b
            s = i
        return r

    def is_zero(self) -> bool:
        return self.value == 0

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{str_from_int(self.value)} (mod {str_from_int(self.modulus)})"

    def __repr__(self) -> str:
        return f"FieldElement({str_from_int(self.value)}, {str_from_int(self.modulus)})"


def field_elements(modulus: Integer) -> List[FieldElement]:
    """Return the sorted list of all the elements of the field.

    Meant for small fields only: the list has modulus items.
    """

    modulus = int_from_integer(modulus)
    if modulus < 1:
        raise RangeError(f"non positive modulus: {str_from_int(modulus)}")
    return [FieldElement(i, modulus) for i in range(modulus)]
