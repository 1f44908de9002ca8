#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field elements.

FieldElement is an immutable residue class modulo a prime,
PrimeField is the factory of the elements of a given prime field.

Elements of different fields can be compared (they are never equal),
but any arithmetic between them raises IncompatibleFieldError.
"""

from dataclasses import InitVar, dataclass, field
from typing import Iterator, Union

from dataclasses_json import DataClassJsonMixin, config

from eclib.alias import Integer
from eclib.exceptions import (
    DivisionByZeroError,
    EClibTypeError,
    EClibValueError,
    IncompatibleFieldError,
    RangeError,
)
from eclib.utils import int_from_integer, int_repr

# larger fields are not meant to be walked through
MAX_ENUMERABLE_P = 10000


def is_probable_prime(p: int) -> bool:
    """Return True if p passes the base-2 Fermat primality test.

    This is the probabilistic primality test used
    for parameter validation, as in SEC 1 v.2 3.1.1.2.1;
    2 is the only even prime.
    """

    if p == 2:
        return True
    return p > 2 and p % 2 == 1 and pow(2, p - 1, p) == 1


@dataclass(frozen=True)
class FieldElement(DataClassJsonMixin):
    """Element of the prime field of integers modulo `modulus`.

    The modulus is supposed to be a prime: this is not checked here,
    while it is checked by PrimeField.
    """

    value: int
    modulus: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not isinstance(self.value, int) or not isinstance(self.modulus, int):
            err_msg = "value and modulus must be int: "
            err_msg += f"{type(self.value).__name__}, {type(self.modulus).__name__}"
            raise EClibTypeError(err_msg)
        if self.modulus < 1:
            raise RangeError(f"invalid modulus: {self.modulus}")
        if not 0 <= self.value < self.modulus:
            err_msg = f"value not in 0..{int_repr(self.modulus - 1)}: "
            err_msg += int_repr(self.value)
            raise RangeError(err_msg)

    def _new(self, value: int) -> "FieldElement":
        # reduction mod a positive int is always non-negative
        return self.__class__(value % self.modulus, self.modulus, False)

    def _require_same_field(self, other: "FieldElement", operation: str) -> None:
        if self.modulus != other.modulus:
            err_msg = f"cannot {operation} elements of different fields: "
            err_msg += f"{int_repr(self.modulus)} vs {int_repr(other.modulus)}"
            raise IncompatibleFieldError(err_msg)

    def __add__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other, "add")
        return self._new(self.value + other.value)

    def __sub__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other, "subtract")
        return self._new(self.value - other.value)

    def __mul__(self, other: Union["FieldElement", int]) -> "FieldElement":
        # an int coefficient k is the k-fold sum of the element
        if isinstance(other, int):
            return self._new(self.value * other)
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other, "multiply")
        return self._new(self.value * other.value)

    __rmul__ = __mul__

    def __pow__(self, exponent: int) -> "FieldElement":
        """Return the element raised to an integer power.

        Negative exponents are reduced mod (modulus - 1),
        as a^(p-1) = 1 for a != 0 (Fermat's little theorem).
        """
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            if self.value == 0:
                raise DivisionByZeroError(f"negative power of zero: {exponent}")
            exponent %= self.modulus - 1
        # built-in pow is square & multiply
        return self._new(pow(self.value, exponent, self.modulus))

    def __truediv__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other, "divide")
        if other.value == 0:
            raise DivisionByZeroError(f"division by zero mod {int_repr(self.modulus)}")
        return self * other ** (self.modulus - 2)

    def __neg__(self) -> "FieldElement":
        return self._new(-self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"FieldElement_{self.modulus}({self.value})"

    def inverse(self) -> "FieldElement":
        "Return the multiplicative inverse."

        if self.value == 0:
            raise DivisionByZeroError(f"no inverse for 0 mod {int_repr(self.modulus)}")
        return self ** (self.modulus - 2)

    def is_square(self) -> bool:
        "Return True if the element is a quadratic residue (zero included)."

        # Euler's criterion
        return self.value == 0 or self ** ((self.modulus - 1) // 2) == self._new(1)

    def sqrt(self) -> "FieldElement":
        """Return a square root of the element.

        Note that the opposite element is also a root.

        Tonelli-Shanks algorithm, with the a^((p+1)/4) shortcut
        for p = 3 (mod 4).
        """

        if not self.is_square():
            err_msg = f"no root for {int_repr(self.value)} "
            err_msg += f"mod {int_repr(self.modulus)}"
            raise EClibValueError(err_msg)

        p = self.modulus
        if self.value == 0 or p == 2:
            return self
        if p % 4 == 3:
            return self ** ((p + 1) // 4)

        # p - 1 = q * 2^s, with q odd
        q, s = p - 1, 0
        while q % 2 == 0:
            q //= 2
            s += 1

        one = self._new(1)
        z = next(self._new(i) for i in range(2, p) if not self._new(i).is_square())
        c = z ** q
        t = self ** q
        root = self ** ((q + 1) // 2)
        while t != one:
            # least i such that t^(2^i) == 1
            i, t2 = 1, t * t
            while t2 != one:
                t2 = t2 * t2
                i += 1
            b = c ** (2 ** (s - i - 1))
            s = i
            c = b * b
            t = t * c
            root = root * b
        return root


@dataclass(frozen=True)
class PrimeField(DataClassJsonMixin):
    """Prime field of the integers modulo p.

    p can be given as int or hex-string,
    also when loaded with from_dict or from_json.
    """

    p: int = field(metadata=config(decoder=int_from_integer))
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        object.__setattr__(self, "p", int_from_integer(self.p))
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not is_probable_prime(self.p):
            raise EClibValueError(f"p is not prime: {int_repr(self.p)}")

    def __call__(self, value: int) -> FieldElement:
        "Return the field element, value must be in 0..p-1."
        return FieldElement(value, self.p)

    def __contains__(self, element: object) -> bool:
        return isinstance(element, FieldElement) and element.modulus == self.p

    def from_int(self, i: Integer) -> FieldElement:
        "Return the field element congruent to i, that can be any integer."
        return FieldElement(int_from_integer(i) % self.p, self.p, False)

    @property
    def zero(self) -> FieldElement:
        return FieldElement(0, self.p, False)

    @property
    def one(self) -> FieldElement:
        return FieldElement(1, self.p, False)

    def elements(self) -> Iterator[FieldElement]:
        "Iterate over all the field elements, if p is low."

        if self.p > MAX_ENUMERABLE_P:
            raise EClibValueError(f"p is too big to list all elements: {self.p}")
        return (FieldElement(value, self.p, False) for value in range(self.p))
