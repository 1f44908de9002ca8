#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Conversions between curve parameters and their text representations.

Large integers (above HEX_THRESHOLD) are shown as hex-strings,
in groups of eight hex-digits, both in reprs and in error messages;
the same hex-strings are accepted back as curve parameters.
"""

from eclib.alias import Integer
from eclib.exceptions import EClibTypeError, EClibValueError

HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from an int or from its hex-string.

    The hex-string can be "0x" prefixed and signed,
    spaces are ignored: "0x0d", "-0x0d", "0d" and
    "FFFFFFFF FFFFFFFE" are all valid.
    """

    if isinstance(i, int):
        return i
    if not isinstance(i, str):
        raise EClibTypeError(f"not an int or hex-string: {i!r}")

    digits = "".join(i.split())
    try:
        return int(digits, 16)
    except ValueError as e:
        raise EClibValueError(f"invalid hex-string: {i!r}") from e


def hex_string(i: int) -> str:
    """Return the hex-string of a non-negative int.

    The hex-string has an even number of upper-case hex-digits,
    grouped by eight (i.e. four bytes) from the right.
    """

    if i < 0:
        raise EClibValueError(f"negative integer: {i}")
    digits = f"{i:X}"
    if len(digits) % 2:
        digits = "0" + digits

    head = len(digits) % 8
    groups = [digits[:head]] if head else []
    groups += [digits[j : j + 8] for j in range(head, len(digits), 8)]
    return " ".join(groups)


def int_repr(i: int) -> str:
    "Return the message representation of an int: quoted hex-string if large."

    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
