#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve parameters.

Curve is the (p, a, b) parameter set of the curve y^2 = x^3 + a*x + b
over Fp: it validates the parameters and builds the curve Points.
Being a dataclass_json, it can be loaded from (and dumped to)
a dict or a JSON document.
"""

from dataclasses import InitVar, dataclass, field
from typing import Tuple

from dataclasses_json import DataClassJsonMixin, config

from eclib.curve_group import Point
from eclib.exceptions import EClibValueError
from eclib.field import FieldElement, PrimeField, is_probable_prime
from eclib.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


@dataclass(frozen=True)
class Curve(DataClassJsonMixin):
    """Elliptic curve y^2 = x^3 + a*x + b over Fp.

    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The parameters can be given as int or hex-string,
    also when loaded with from_dict or from_json.
    """

    p: int = field(metadata=config(decoder=int_from_integer))
    a: int = field(metadata=config(decoder=int_from_integer))
    b: int = field(metadata=config(decoder=int_from_integer))
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        object.__setattr__(self, "p", int_from_integer(self.p))
        object.__setattr__(self, "a", int_from_integer(self.a))
        object.__setattr__(self, "b", int_from_integer(self.b))
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        # 1) check that p is a prime
        if not is_probable_prime(self.p):
            raise EClibValueError(f"p is not prime: {int_repr(self.p)}")

        # 2. check that a and b are integers in the interval [0, p−1]
        if self.a < 0:
            raise EClibValueError(f"negative a: {self.a}")
        if self.p <= self.a:
            err_msg = f"p <= a: {int_repr(self.p)} <= {int_repr(self.a)}"
            raise EClibValueError(err_msg)
        if self.b < 0:
            raise EClibValueError(f"negative b: {self.b}")
        if self.p <= self.b:
            err_msg = f"p <= b: {int_repr(self.p)} <= {int_repr(self.b)}"
            raise EClibValueError(err_msg)

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * self.a * self.a * self.a + 27 * self.b * self.b
        if d % self.p == 0:
            raise EClibValueError("zero discriminant")

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self.a)}"
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n a   = {self.a}"
            result += f"\n b   = {self.b}"

        return result

    def __repr__(self) -> str:
        result = f"Curve({int_repr(self.p)}"
        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f", '{hex_string(self.a)}', '{hex_string(self.b)}'"
        else:
            result += f", {self.a}, {self.b}"

        result += ")"
        return result

    @property
    def field(self) -> PrimeField:
        return PrimeField(self.p, False)

    @property
    def coefficients(self) -> Tuple[FieldElement, FieldElement]:
        "Return the a and b coefficients as field elements."
        return FieldElement(self.a, self.p), FieldElement(self.b, self.p)

    @property
    def infinity(self) -> Point:
        return Point.infinity(*self.coefficients)

    def point(self, x: int, y: int) -> Point:
        "Return the curve point (x, y); x and y must be in 0..p-1."
        a, b = self.coefficients
        return Point(FieldElement(x, self.p), FieldElement(y, self.p), a, b)

    def _y2(self, x: FieldElement) -> FieldElement:
        # right-hand side of the curve equation
        a, b = self.coefficients
        return (x * x + a) * x + b

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y).

        Note that p - y is the y coordinate of the opposite point.
        """
        if not 0 <= x < self.p:
            raise EClibValueError(f"x-coordinate not in 0..p-1: {int_repr(x)}")
        try:
            return self._y2(FieldElement(x, self.p)).sqrt().value
        except EClibValueError as e:
            raise EClibValueError(f"invalid x-coordinate: {int_repr(x)}") from e

    def is_on_curve(self, x: int, y: int) -> bool:
        "Return True if (x, y) is a finite point of the curve."
        if not (0 <= x < self.p and 0 <= y < self.p):
            return False
        y_ = FieldElement(y, self.p)
        return self._y2(FieldElement(x, self.p)) == y_ * y_
