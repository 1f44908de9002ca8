#!/usr/bin/env python3

# Copyright (C) 2017-2021 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
raised by eclib from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, ZeroDivisionError, and RuntimeError
from which the eclib versions are derived.
"""


class EClibValueError(ValueError):
    pass


class EClibTypeError(TypeError):
    pass


class EClibRuntimeError(RuntimeError):
    pass


class RangeError(EClibValueError):
    "Integer value not in 0..modulus-1 for a field element."


class IncompatibleFieldError(EClibValueError):
    "Operation between elements of different prime fields."


class DivisionByZeroError(EClibValueError, ZeroDivisionError):
    "Division by (or inversion of) the field additive identity."


class CoordinateMismatchError(EClibValueError):
    "Point with exactly one of the x and y coordinates."


class NotOnCurveError(EClibValueError):
    "Point coordinates not satisfying the curve equation."


class CurveMismatchError(EClibValueError):
    "Operation between points of different curves."


class InternalConsistencyError(EClibRuntimeError):
    "State that validated inputs can never lead to."
