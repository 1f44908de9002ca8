#!/usr/bin/env python3

# Copyright (C) 2017-2021 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eclib.exceptions` module."

from eclib.exceptions import (
    CoordinateMismatchError,
    CurveMismatchError,
    DivisionByZeroError,
    EClibRuntimeError,
    EClibTypeError,
    EClibValueError,
    IncompatibleFieldError,
    InternalConsistencyError,
    NotOnCurveError,
    RangeError,
)


def test_hierarchy() -> None:
    assert issubclass(EClibValueError, ValueError)
    assert issubclass(EClibTypeError, TypeError)
    assert issubclass(EClibRuntimeError, RuntimeError)

    for err in (
        RangeError,
        IncompatibleFieldError,
        DivisionByZeroError,
        CoordinateMismatchError,
        NotOnCurveError,
        CurveMismatchError,
    ):
        assert issubclass(err, EClibValueError)
        assert not issubclass(err, RuntimeError)

    assert issubclass(DivisionByZeroError, ZeroDivisionError)

    # an unreachable state is a defect, not a bad input
    assert issubclass(InternalConsistencyError, EClibRuntimeError)
    assert not issubclass(InternalConsistencyError, ValueError)
