#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Callable, Union

# hex-string or bytes representation of an int
#
# allowed representations are documented in eckeys.utils.int_from_integer:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
Integer = Union[bytes, str, int]

# private scalar as provided by a caller
#
# unlike Integer, a string without the 0x prefix is a decimal number:
# 3735928559
# "3735928559"
# "0xdeadbeef"
# b'\xde\xad\xbe\xef'
Scalar = Union[bytes, str, int]

# external entropy source: a uniformly random non-negative int,
# at least as wide as the curve field (e.g. 256 bits for secp256k1)
RandomScalarF = Callable[[], int]
