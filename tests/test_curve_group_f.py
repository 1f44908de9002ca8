#!/usr/bin/env python3

# Copyright (C) 2020-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eclib.curve_group_f` module."

import pytest

from eclib.curve import Curve
from eclib.curve_group import mult_aff
from eclib.curve_group_f import find_all_points, find_subgroup_points
from eclib.exceptions import EClibValueError


def test_ecf() -> None:
    ec = Curve(9739, 497, 1768)

    # challenge = 'Point Negation'
    P = ec.point(8045, 6936)
    S = -P
    S_exp = ec.point(8045, 2803)
    assert S == S_exp

    # challenge = 'Point Addition'
    X = ec.point(5274, 2841)
    Y = ec.point(8669, 740)
    assert X + Y == ec.point(1024, 4440)
    assert X + X == ec.point(7284, 2107)
    P = ec.point(493, 5564)
    Q = ec.point(1539, 4742)
    R = ec.point(4403, 5202)
    S = P + P + Q + R
    S.assert_valid()
    S_exp = ec.point(4215, 2162)
    assert S == S_exp

    # challenge = 'Scalar Multiplication'
    X = ec.point(5323, 5438)
    assert mult_aff(1337, X) == ec.point(1089, 6931)
    P = ec.point(2339, 2213)
    S = mult_aff(7863, P)
    S.assert_valid()
    S_exp = ec.point(9467, 2742)
    assert S == S_exp

    # challenge = 'Curves and Logs'
    all_points = find_all_points(ec)
    assert len(all_points) == 9735
    G = ec.point(1804, 5368)
    points = find_subgroup_points(ec, G)
    assert len(points) == 9735
    assert points[0] == G
    assert points[-1] == ec.infinity


def test_ecf_exceptions() -> None:
    ec = Curve(10007, 497, 1768)

    err_msg = "p is too big to count all group points: "
    with pytest.raises(EClibValueError, match=err_msg):
        find_all_points(ec)

    err_msg = "p is too big to count all subgroup points: "
    with pytest.raises(EClibValueError, match=err_msg):
        find_subgroup_points(ec, ec.infinity)
