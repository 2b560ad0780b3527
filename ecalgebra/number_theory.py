#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular inverse for any modulus.

FieldElement division relies on Fermat's Little Theorem,
which holds for prime moduli only.
The functions of this module are based on the Extended Euclidean Algorithm
and do not require a prime modulus:
they tell invertible residues apart from zero divisors,
e.g. 3 has no inverse mod 15.
"""

from typing import Tuple

from ecalgebra.exceptions import ECAlgebraValueError
from ecalgebra.utils import str_from_int


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    a and b must be non-negative.
    """

    # invariants: a*x0 + b*y0 = r0, a*x1 + b*y1 = r1
    r0, x0, y0 = a, 1, 0
    r1, x1, y1 = b, 0, 1
    while r1:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return r0, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m), m does not have to be a prime.

    ECAlgebraValueError is raised if a and m are not coprime.
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g != 1:
        err_msg = f"no inverse for {str_from_int(a)} mod {str_from_int(m)}"
        raise ECAlgebraValueError(err_msg)
    return x % m
