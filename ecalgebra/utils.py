#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Assorted conversion utilities."

from ecalgebra.alias import Integer
from ecalgebra.exceptions import ECAlgebraTypeError, ECAlgebraValueError

# integers above this threshold are rendered as hex-string
# in error messages, str and repr
HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from an int or its hex-string representation.

    Hex-strings are parsed as written by str_from_int and hex_string,
    i.e. spaces between hex-digit groups are allowed,
    as are the sign and the 0x prefix:

    * "DE ADBEEF00"
    * "-0xdeadbeef"
    """

    if isinstance(i, int):
        return i
    if isinstance(i, str):
        return int(i.replace(" ", ""), 16)
    raise ECAlgebraTypeError(f"not an integer: {type(i).__name__}")


def hex_string(i: int) -> str:
    """Return the upper-case hex-string of a non-negative int.

    The hex-string has an even number of hex-digits,
    in groups of eight separated by a space.
    """

    if i < 0:
        raise ECAlgebraValueError(f"negative integer: {i}")
    digits = f"{i:X}"
    if len(digits) % 2:
        digits = "0" + digits
    # the leading group may be shorter
    head = len(digits) % 8
    groups = [digits[:head]] if head else []
    groups += [digits[j : j + 8] for j in range(head, len(digits), 8)]
    return " ".join(groups)


def str_from_int(i: int) -> str:
    """Return the decimal string of i, or its quoted hex-string if large.

    Used to keep error messages readable for cryptographic-size numbers.
    """

    if abs(i) <= HEX_THRESHOLD:
        return f"{i}"
    if i < 0:
        return f"'-{hex_string(-i)}'"
    return f"'{hex_string(i)}'"
