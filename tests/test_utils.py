#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eclib.utils` module."

import secrets

import pytest

from eclib.exceptions import EClibTypeError, EClibValueError
from eclib.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr

# secp256k1 field prime
P256 = 2 ** 256 - 2 ** 32 - 977
P256_HEX = "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F"


def test_int_from_integer() -> None:
    assert int_from_integer(13) == 13
    assert int_from_integer(-13) == -13
    for hex_str in ("0x0d", "0X0D", "0d", " d ", "0000000d"):
        assert int_from_integer(hex_str) == 13
    assert int_from_integer("-0x0d") == -13

    assert int_from_integer(P256_HEX) == P256
    assert int_from_integer(hex(P256)) == P256

    for hex_str in ("", "0x", "xyz", "13.0"):
        with pytest.raises(EClibValueError, match="invalid hex-string: "):
            int_from_integer(hex_str)
    with pytest.raises(EClibTypeError, match="not an int or hex-string: "):
        int_from_integer(b"\x0d")  # type: ignore
    with pytest.raises(EClibTypeError, match="not an int or hex-string: "):
        int_from_integer(13.0)  # type: ignore


def test_hex_string() -> None:
    assert hex_string(0) == "00"
    assert hex_string(7) == "07"
    assert hex_string(0xDEADBEEF) == "DEADBEEF"
    assert hex_string(0x1DEADBEEF) == "01 DEADBEEF"
    assert hex_string(0x1DEADBEEF00000000) == "01 DEADBEEF 00000000"
    assert hex_string(P256) == P256_HEX

    for _ in range(10):
        i = secrets.randbits(256)
        assert int_from_integer(hex_string(i)) == i

    with pytest.raises(EClibValueError, match="negative integer: -1"):
        hex_string(-1)


def test_int_repr() -> None:
    assert int_repr(0) == "0"
    assert int_repr(-5) == "-5"
    assert int_repr(HEX_THRESHOLD) == f"{HEX_THRESHOLD}"
    assert int_repr(HEX_THRESHOLD + 1) == "'01 00000000'"
    assert int_repr(P256) == f"'{P256_HEX}'"
