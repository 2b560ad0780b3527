#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve dataclass.

A Curve is the immutable descriptor of the short Weierstrass equation

    y^2 = x^3 + a*x + b

shared by all the points built on it.

If a field modulus p is provided, the curve is defined over Fp
and its coefficients and coordinates are FieldElement instances;
otherwise the curve is defined over the rationals
and coefficients and coordinates are int or Fraction instances.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Union

from ecalgebra.alias import Integer, Rational
from ecalgebra.exceptions import (
    ECAlgebraTypeError,
    ECAlgebraValueError,
    ModulusMismatchError,
)
from ecalgebra.field import FieldElement
from ecalgebra.utils import int_from_integer, str_from_int

Coordinate = Union[Rational, FieldElement]


@dataclass(frozen=True)
class Curve:
    """Short Weierstrass elliptic curve y^2 = x^3 + a*x + b.

    The discriminant 4*a^3 + 27*b^2 is not checked:
    singular curves are the caller responsibility,
    as is the primality of p.

    Two curves are equal if their a, b, and p are equal.
    """

    a: Coordinate
    b: Coordinate
    p: Optional[int] = None

    def __post_init__(self) -> None:
        p = self.p
        if p is None:
            coefficients = (self.a, self.b)
            moduli = {c.modulus for c in coefficients if isinstance(c, FieldElement)}
            if len(moduli) > 1:
                raise ModulusMismatchError("coefficients from different fields")
            if moduli:
                p = moduli.pop()
        else:
            p = int_from_integer(p)
            if p < 2:
                raise ECAlgebraValueError(f"invalid modulus: {str_from_int(p)}")

        # Curve is frozen: normalization requires object.__setattr__
        object.__setattr__(self, "p", p)
        for name in ("a", "b"):
            c = getattr(self, name)
            # hex-string integer representation
            if isinstance(c, str):
                c = int_from_integer(c)
            object.__setattr__(self, name, self.coordinate(c))

    def coordinate(self, value: Coordinate) -> Coordinate:
        """Return the value as an element of the curve coordinate field.

        Over Fp, int values are reduced mod p and lifted to FieldElement;
        over the rationals, integral Fraction values become int.
        """

        if self.p is None:
            if isinstance(value, FieldElement):
                raise ECAlgebraTypeError("FieldElement value for a rational curve")
            if isinstance(value, Fraction):
                return value.numerator if value.denominator == 1 else value
            if isinstance(value, int):
                return value
        else:
            if isinstance(value, FieldElement):
                if value.modulus != self.p:
                    err_msg = f"modulus mismatch: {str_from_int(value.modulus)}"
                    err_msg += f" != {str_from_int(self.p)}"
                    raise ModulusMismatchError(err_msg)
                return value
            if isinstance(value, int):
                return FieldElement(value % self.p, self.p)
        raise ECAlgebraTypeError(f"invalid coordinate type: {type(value).__name__}")

    def contains(self, x: Coordinate, y: Coordinate) -> bool:
        """Return True if (x, y) satisfies the curve equation.

        The equation is evaluated with the coordinate arithmetic,
        i.e. modular if the curve has a modulus, exact otherwise.
        """

        x = self.coordinate(x)
        y = self.coordinate(y)
        return y * y == x * x * x + self.a * x + self.b

    def y(self, x: Union[FieldElement, Integer]) -> FieldElement:
        """Return a y coordinate from x, as in (x, y).

        The other y coordinate is its opposite.
        Available for curves over Fp only.
        """

        if self.p is None:
            raise ECAlgebraTypeError("y from x requires a curve over Fp")
        if not isinstance(x, FieldElement):
            x = int_from_integer(x)
            if not 0 <= x < self.p:
                raise ECAlgebraValueError(
                    f"x-coordinate not in 0..p-1: {str_from_int(x)}"
                )
        x = self.coordinate(x)
        y2 = x * x * x + self.a * x + self.b
        try:
            return y2.sqrt()
        except ECAlgebraValueError as e:
            err_msg = f"invalid x-coordinate: {str_from_int(int(x))}"
            raise ECAlgebraValueError(err_msg) from e

    @property
    def _ab(self) -> List[Coordinate]:
        return [self.a, self.b]

    def _coefficients(self) -> List[str]:
        if self.p is None:
            return [repr(c) if isinstance(c, Fraction) else f"{c}" for c in self._ab]
        return [str_from_int(int(c)) for c in self._ab]

    def __str__(self) -> str:
        a, b = self._coefficients()
        result = "Curve"
        if self.p is not None:
            result += f"\n p   = {str_from_int(self.p)}"
        result += f"\n a   = {a}"
        result += f"\n b   = {b}"
        return result

    def __repr__(self) -> str:
        a, b = self._coefficients()
        if self.p is None:
            return f"Curve({a}, {b})"
        return f"Curve({a}, {b}, {str_from_int(self.p)})"
