#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve group explorer functions.

These functions are meant to explore low-cardinality curve groups,
for didactical (and fun) reason only.
"""

from typing import List

from eclib.curve import Curve
from eclib.curve_group import Point
from eclib.exceptions import EClibValueError
from eclib.field import MAX_ENUMERABLE_P


def find_all_points(ec: Curve) -> List[Point]:
    """Attempt to find all group points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > MAX_ENUMERABLE_P:
        err_msg = f"p is too big to count all group points: {ec.p}"
        raise EClibValueError(err_msg)

    points: List[Point] = [ec.infinity]
    for x in range(ec.p):
        try:
            y = ec.y(x)
        except EClibValueError:
            continue

        points.append(ec.point(x, y))
        if y != 0:
            points.append(ec.point(x, ec.p - y))

    return points


def find_subgroup_points(ec: Curve, G: Point) -> List[Point]:
    """Attempt to list all G-generated subgroup points, if p is low.

    The list starts with G and ends with INF.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > MAX_ENUMERABLE_P:
        err_msg = f"p is too big to count all subgroup points: {ec.p}"
        raise EClibValueError(err_msg)

    points: List[Point] = [G]
    while not points[-1].is_infinity:
        points.append(points[-1] + G)

    return points
