#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve Point class and scalar multiplication functions.

A Point carries the (a, b) coefficients of its curve
y^2 = x^3 + a*x + b, with x, y, a, and b in Fp (p being a prime):
there is no per-curve class, curve identity is checked
on every binary operation.

The points of the curve, together with the point at infinity INF,
form a group under the chord-and-tangent addition law.
"""

from dataclasses import InitVar, dataclass
from typing import Optional, Union

from eclib.exceptions import (
    CoordinateMismatchError,
    CurveMismatchError,
    EClibTypeError,
    EClibValueError,
    IncompatibleFieldError,
    InternalConsistencyError,
    NotOnCurveError,
)
from eclib.field import FieldElement
from eclib.utils import int_repr

# a scalar is an int or the value of a field element
Scalar = Union[int, FieldElement]


@dataclass(frozen=True, eq=False)
class Point:
    """Point of the elliptic curve y^2 = x^3 + a*x + b over Fp.

    Both x and y are None for the point at infinity INF,
    the identity element of the group.

    Comparing points of different curves raises CurveMismatchError:
    as sets and dicts compare colliding keys, points of different
    curves should not be mixed in the same set or dict.
    """

    x: Optional[FieldElement]
    y: Optional[FieldElement]
    a: FieldElement
    b: FieldElement
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        for coefficient in (self.a, self.b):
            if not isinstance(coefficient, FieldElement):
                err_msg = f"curve coefficient not a FieldElement: {coefficient!r}"
                raise EClibTypeError(err_msg)

        if self.x is None and self.y is None:
            if self.a.modulus != self.b.modulus:
                raise IncompatibleFieldError("curve coefficients in different fields")
            return

        if self.x is None or self.y is None:
            raise CoordinateMismatchError(f"({self.x}, {self.y}) is not a valid point")

        for coordinate in (self.x, self.y):
            if not isinstance(coordinate, FieldElement):
                raise EClibTypeError(f"coordinate not a FieldElement: {coordinate!r}")

        moduli = {e.modulus for e in (self.x, self.y, self.a, self.b)}
        if len(moduli) != 1:
            err_msg = "coordinates and curve coefficients in different fields: "
            err_msg += ", ".join(int_repr(m) for m in sorted(moduli))
            raise IncompatibleFieldError(err_msg)

        if self.y * self.y != (self.x * self.x + self.a) * self.x + self.b:
            err_msg = f"({int_repr(self.x.value)}, {int_repr(self.y.value)})"
            err_msg += " is not on the curve"
            raise NotOnCurveError(err_msg)

    @classmethod
    def infinity(cls, a: FieldElement, b: FieldElement) -> "Point":
        "Return the point at infinity of the y^2 = x^3 + a*x + b curve."
        return cls(None, None, a, b)

    @property
    def is_infinity(self) -> bool:
        return self.x is None

    def _require_same_curve(self, other: "Point") -> None:
        if self.a != other.a or self.b != other.b:
            err_msg = "points on different curves: "
            err_msg += f"{self._curve_str()} vs {other._curve_str()}"
            raise CurveMismatchError(err_msg)

    def _curve_str(self) -> str:
        return f"a={self.a.value}, b={self.b.value} mod {int_repr(self.a.modulus)}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        self._require_same_curve(other)
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.a, self.b))

    def __neg__(self) -> "Point":
        "Return the opposite point, i.e. its reflection over the x axis."

        if self.y is None:
            return self
        return self.__class__(self.x, -self.y, self.a, self.b)

    def __add__(self, other: "Point") -> "Point":
        """Return the sum of two points of the same curve.

        The chord-and-tangent law: the line through the two points
        (the tangent, if they are the same point) intersects the curve
        at a third point, whose reflection is the sum.
        """

        if not isinstance(other, Point):
            return NotImplemented
        self._require_same_curve(other)

        # INF is the identity element
        if self.x is None or self.y is None:
            return other
        if other.x is None or other.y is None:
            return self

        # opposite points: vertical line
        if self.x == other.x and self.y == -other.y:
            return self.infinity(self.a, self.b)

        # chord
        if self.x != other.x:
            s = (other.y - self.y) / (other.x - self.x)
            x = s * s - self.x - other.x
            y = s * (self.x - x) - self.y
            return self.__class__(x, y, self.a, self.b)

        # tangent
        if self == other and self.y:
            s = (3 * self.x * self.x + self.a) / (2 * self.y)
            x = s * s - 2 * self.x
            y = s * (self.x - x) - self.y
            return self.__class__(x, y, self.a, self.b)

        # vertical tangent at a point of order two
        if self == other:
            return self.infinity(self.a, self.b)

        # same x and unrelated y: impossible for points on the curve
        raise InternalConsistencyError(f"unexpected point addition: {self} + {other}")

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self + -other

    def __mul__(self, scalar: Scalar) -> "Point":
        if isinstance(scalar, FieldElement):
            scalar = scalar.value
        if not isinstance(scalar, int):
            return NotImplemented
        return _mult(scalar, self)

    __rmul__ = __mul__

    def __str__(self) -> str:
        curve = f"_{self.a.value}_{self.b.value} FieldElement({self.a.modulus})"
        if self.x is None or self.y is None:
            return "Point(infinity)" + curve
        return f"Point({self.x.value},{self.y.value})" + curve


def mult_naive(m: int, Q: Point) -> Point:
    """Scalar multiplication of a curve point by repeated addition.

    This is the definition of scalar multiplication,
    requiring m additions: it is not meant to be used
    but for cross-checking the other implementations.
    """

    if m < 0:
        raise EClibValueError(f"negative m: {hex(m)}")

    R = Point.infinity(Q.a, Q.b)
    for _ in range(m):
        R = R + Q
    return R


def mult_recursive_aff(m: int, Q: Point) -> Point:
    """Scalar multiplication of a curve point.

    This implementation uses
    a recursive version of 'double & add'.

    The m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise EClibValueError(f"negative m: {hex(m)}")

    if m == 0:
        return Point.infinity(Q.a, Q.b)

    if m % 2 == 1:
        return Q + mult_recursive_aff((m - 1), Q)

    return mult_recursive_aff((m // 2), Q + Q)


def mult_aff(m: int, Q: Point) -> Point:
    """Scalar multiplication of a curve point.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient.

    The m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise EClibValueError(f"negative m: {hex(m)}")

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [Point.infinity(Q.a, Q.b), Q]
    # if least significant bit of m is 1, then add Q to R[0]
    R[0] = R[m & 1]
    # remove the bit just accounted for
    m >>= 1
    while m > 0:
        # the doubling part of 'double & add'
        Q = Q + Q
        # always perform the 'add', even if useless
        R[1] = R[0] + Q
        # if least significant bit of m is 1, then add Q to R[0]
        R[0] = R[m & 1]
        m >>= 1
    return R[0]


def mult_mont_ladder(m: int, Q: Point) -> Point:
    """Scalar multiplication using 'Montgomery ladder' algorithm.

    This implementation uses
    'Montgomery ladder' algorithm,
    'left-to-right' binary decomposition of the m coefficient.

    The m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise EClibValueError(f"negative m: {hex(m)}")

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [Point.infinity(Q.a, Q.b), Q]
    for i in [int(i) for i in bin(m)[2:]]:
        R[not i] = R[i] + R[not i]
        R[i] = R[i] + R[i]
    return R[0]


_mult = mult_aff


def double_mult(u: int, H: Point, v: int, Q: Point) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    This implementation uses the Shamir-Strauss algorithm,
    'left-to-right' binary decomposition of the u and v coefficients.

    Strauss algorithm consists of a single 'double & add' loop
    for the parallel calculation of u*H and v*Q, efficiently
    using a single 'doubling' for both scalar multiplications.

    The Shamir trick adds the precomputation of H+Q,
    which is to be added in the loop when the binary digits
    of u and v are both equal to 1 (on average 1/4 of the cases).
    """

    if u < 0:
        raise EClibValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise EClibValueError(f"negative second coefficient: {hex(v)}")

    # at each step one of the following points will be added
    T = [Point.infinity(H.a, H.b), H, Q, H + Q]
    # which one depends on binary digit for that step
    ui = bin(u)[2:]
    vi = bin(v)[2:].zfill(len(ui))
    ui = ui.zfill(len(vi))
    digits = [int(j) + 2 * int(k) for j, k in zip(ui, vi)]
    R = T[digits[0]]
    for i in digits[1:]:
        # the doubling part of 'double & add'
        R = R + R
        # and the 'add'
        R = R + T[i]
    return R
