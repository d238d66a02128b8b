#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Integer parsing from the representations accepted as input
and hex formatting for error messages and key output.
"""

from typing import Optional

from eckeys.alias import Integer, Scalar
from eckeys.exceptions import ECKeysValueError, InvalidInputError

HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def int_from_scalar(k: Scalar) -> int:
    """Return an int from a caller-provided scalar.

    Allowed scalar representations are:

    * 3735928559
    * "3735928559"
    * "0xdeadbeef"
    * b'\xde\xad\xbe\xef'

    A string without the 0x prefix is read as a decimal number.
    Booleans and floats are rejected: the former are ints only by accident,
    the latter cannot carry 256 bits of precision.
    """

    if isinstance(k, bool) or not isinstance(k, (int, str, bytes)):
        raise InvalidInputError(f"invalid scalar type: {type(k).__name__}")

    if isinstance(k, int):
        return k

    if isinstance(k, bytes):
        if not k:
            raise InvalidInputError("empty scalar bytes")
        return int.from_bytes(k, "big", signed=False)

    k_str = k.strip().lower()
    try:
        if k_str.startswith("0x") or k_str.startswith("-0x"):
            return int(k_str, 16)
        return int(k_str, 10)
    except ValueError as e:
        raise InvalidInputError(f"invalid scalar string: '{k}'") from e


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECKeysValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def str_from_int(i: int) -> str:
    "Return i in decimal if small, as an hex_string otherwise."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def hex_from_int(i: int, size: Optional[int] = None) -> str:
    """Return the canonical lowercase 0x-prefixed hex text of i.

    If size is given, the hex digits are zero-padded to size bytes;
    an int not fitting in size bytes is an error.
    """

    if i < 0:
        raise ECKeysValueError(f"negative integer: {i}")
    if size is None:
        return hex(i)
    if i.bit_length() > size * 8:
        raise ECKeysValueError(f"integer too big for {size} bytes: {str_from_int(i)}")
    return f"0x{i:0{size * 2}x}"


def int_from_hex(hex_str: str) -> int:
    "Return the int from 0x-prefixed hex text, the reverse of hex_from_int."

    if not isinstance(hex_str, str):
        raise InvalidInputError(f"not a hex string: {hex_str!r}")
    hex_str = hex_str.strip().lower()
    if not hex_str.startswith("0x"):
        raise InvalidInputError(f"missing 0x prefix: '{hex_str}'")
    try:
        return int(hex_str, 16)
    except ValueError as e:
        raise InvalidInputError(f"invalid hex string: '{hex_str}'") from e
