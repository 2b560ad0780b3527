#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to dicriminate between Exceptions
being raised by ecalgebra from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError from which the ecalgebra versions are derived.
"""


class ECAlgebraValueError(ValueError):
    pass


class ECAlgebraTypeError(TypeError):
    pass


class RangeError(ECAlgebraValueError):
    "A field element value not in 0..modulus-1."


class ModulusMismatchError(ECAlgebraValueError):
    "Field arithmetic between elements of different fields."


class NotOnCurveError(ECAlgebraValueError):
    "Affine coordinates not satisfying the curve equation."


class CurveMismatchError(ECAlgebraValueError):
    "Group operation between points of different curves."


class UndefinedSlopeError(ECAlgebraValueError):
    "Chord or tangent slope not computable in the coordinate arithmetic."
