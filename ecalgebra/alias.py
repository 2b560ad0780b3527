#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from fractions import Fraction
from typing import Union

# int or its hex-string representation
#
# e.g.:
# 3735928559
# "0xdeadbeef"
# "DEADBEEF"
# "01 00000000" (as in str and repr of large numbers)
#
# use ecalgebra.utils.int_from_integer to convert Integer to int
Integer = Union[str, int]

# coordinates and coefficients of curves over the rationals
#
# int values are used whenever the value is integral,
# Fraction otherwise (e.g. the result of a chord slope division)
Rational = Union[int, Fraction]
