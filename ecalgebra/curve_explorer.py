#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecalgebra developers
#
# This file is part of ecalgebra. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecalgebra including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve explorer functions.

These functions are meant to explore low-cardinality curves over Fp,
for didactical (and fun) reason only.
"""

from typing import List

from ecalgebra.curve import Curve
from ecalgebra.exceptions import (
    CurveMismatchError,
    ECAlgebraTypeError,
    ECAlgebraValueError,
)
from ecalgebra.field import field_elements
from ecalgebra.point import Point

# curves with a larger p are too big to be walked through
MAX_EXPLORER_P = 10000


def _require_small_field(curve: Curve, what: str) -> None:
    if curve.p is None:
        raise ECAlgebraTypeError(f"{what} requires a curve over Fp")
    if curve.p > MAX_EXPLORER_P:
        raise ECAlgebraValueError(f"p is too big to count all {what}: {curve.p}")


def find_all_points(curve: Curve) -> List[Point]:
    """Attempt to find all group points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    The point at infinity is the first item of the list.
    """

    _require_small_field(curve, "group points")

    points = [Point.identity(curve)]
    for x in field_elements(curve.p):
        try:
            y = curve.y(x)
        except ECAlgebraValueError:
            continue

        points.append(Point.affine(curve, x, y))
        if y:
            points.append(Point.affine(curve, x, -y))

    return points


def find_subgroup_points(curve: Curve, G: Point) -> List[Point]:
    """Attempt to find all G-generated subgroup points, if p is low.

    Points are listed as G, 2G, 3G, ..., INF,
    i.e. G is repeatedly added until the point at infinity is reached.
    """

    _require_small_field(curve, "subgroup points")
    if G.curve != curve:
        raise CurveMismatchError(f"generator not on the curve: {curve!r}")

    points = [G]
    while not points[-1].is_identity:
        points.append(points[-1] + G)

    return points
