#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve Point dataclass and group law.

A Point is either the point at infinity INF (the group identity,
with no coordinates) or an affine (x, y) pair on its Curve.

The chord-and-tangent group law is available as the + operator:

* INF is the neutral element: INF + P = P + INF = P
* opposite points, i.e. same x and different y, add up to INF
* doubling a point with y = 0 results in INF (vertical tangent)
* doubling a point with y != 0 uses the tangent slope
* adding points with different x uses the chord slope

The slopes are computed with the coordinate arithmetic:
modular inverse over Fp, exact Fraction division over the rationals.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from ecalgebra.curve import Coordinate, Curve
from ecalgebra.exceptions import (
    CurveMismatchError,
    ECAlgebraValueError,
    NotOnCurveError,
    UndefinedSlopeError,
)
from ecalgebra.field import FieldElement
from ecalgebra.number_theory import mod_inv


@dataclass(frozen=True)
class Point:
    """Point of the group defined by an elliptic curve.

    x and y are both None for the point at infinity.
    Affine coordinates are always on the curve:
    construction raises NotOnCurveError otherwise.

    Use Point.identity and Point.affine as constructors.
    """

    x: Optional[Coordinate]
    y: Optional[Coordinate]
    curve: Curve

    def __post_init__(self) -> None:
        if self.x is not None and self.y is not None:
            # Point is frozen: normalization requires object.__setattr__
            object.__setattr__(self, "x", self.curve.coordinate(self.x))
            object.__setattr__(self, "y", self.curve.coordinate(self.y))
        self.assert_valid()

    @classmethod
    def identity(cls, curve: Curve) -> "Point":
        "Return the point at infinity of the curve."
        return cls(None, None, curve)

    @classmethod
    def affine(cls, curve: Curve, x: Coordinate, y: Coordinate) -> "Point":
        """Return the affine point (x, y) of the curve.

        NotOnCurveError is raised if (x, y) is not on the curve.
        """
        return cls(x, y, curve)

    @classmethod
    def _on_curve(cls, curve: Curve, x: Coordinate, y: Coordinate) -> "Point":
        # (x, y) is on the curve by construction: the check is skipped
        point = object.__new__(cls)
        object.__setattr__(point, "x", curve.coordinate(x))
        object.__setattr__(point, "y", curve.coordinate(y))
        object.__setattr__(point, "curve", curve)
        return point

    @property
    def is_identity(self) -> bool:
        return self.x is None

    def assert_valid(self) -> None:
        if self.x is None and self.y is None:
            return
        if self.x is None or self.y is None:
            raise NotOnCurveError(f"incomplete coordinates: ({self.x}, {self.y})")
        if not self.curve.contains(self.x, self.y):
            raise NotOnCurveError(f"point not on curve: ({self.x}, {self.y})")

    def _slope(self, num: Coordinate, den: Coordinate) -> Coordinate:
        if self.curve.p is None:
            if den == 0:
                raise UndefinedSlopeError(f"undefined slope: {num} / 0")
            # exact division: int / int would result in a float
            return Fraction(num) / Fraction(den)
        # den may be a zero divisor of a composite modulus
        try:
            return num * mod_inv(den.value, self.curve.p)
        except ECAlgebraValueError as e:
            raise UndefinedSlopeError(f"undefined slope: {num} / {den}") from e

    def _from_slope(self, s: Coordinate, other: "Point") -> "Point":
        x3 = s * s - self.x - other.x
        y3 = s * (self.x - x3) - self.y
        return Point._on_curve(self.curve, x3, y3)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        if self.curve != other.curve:
            raise CurveMismatchError(
                f"points on different curves: {self.curve!r}, {other.curve!r}"
            )

        if self.is_identity:
            return other
        if other.is_identity:
            return self

        if self.x == other.x:
            if self.y != other.y:
                # opposite points
                return Point.identity(self.curve)
            return self.double()

        s = self._slope(other.y - self.y, other.x - self.x)
        return self._from_slope(s, other)

    def double(self) -> "Point":
        "Return the point added to itself."

        if self.is_identity or not self.y:
            # vertical tangent
            return Point.identity(self.curve)

        s = self._slope(3 * self.x * self.x + self.curve.a, 2 * self.y)
        return self._from_slope(s, self)

    def negate(self) -> "Point":
        "Return the opposite point."
        if self.is_identity:
            return self
        return Point._on_curve(self.curve, self.x, -self.y)

    def __neg__(self) -> "Point":
        return self.negate()

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self + other.negate()

    def __str__(self) -> str:
        if self.is_identity:
            return "INF"
        if isinstance(self.x, FieldElement):
            return f"({self.x.value}, {self.y.value})"
        return f"({self.x}, {self.y})"
