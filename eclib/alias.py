#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# Integer is an int or its hex-string representation
#
# hex-strings can be "0x" prefixed and signed, spaces are ignored, e.g.:
# "0xdeadbeef"
# "-0xdeadbeef"
# "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F"
#
# use eclib.utils.int_from_integer to convert Integer to int
Integer = Union[str, int]
