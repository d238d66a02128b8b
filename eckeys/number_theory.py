#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

The extended Euclidean algorithm is from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm

Every result is normalized into [0, modulus):
field formulas subtract, and the normalization lives here
instead of being repeated at each call site.
"""

from typing import Optional, Tuple

from eckeys.exceptions import InvalidInputError, NoInverseError
from eckeys.utils import str_from_int


def _require_modulus(modulus: int) -> None:
    if modulus < 1:
        raise InvalidInputError(f"non positive modulus: {modulus}")


def mod_reduce(value: int, modulus: int) -> int:
    "Return value reduced into [0, modulus)."

    _require_modulus(modulus)
    return value % modulus


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Based on Extended Euclidean Algorithm, see:
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    a = mod_reduce(a, m)
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise NoInverseError(f"No inverse for {str_from_int(a)} mod {str_from_int(m)}")


def mod_pow(base: int, exponent: int, modulus: Optional[int] = None) -> int:
    """Return base**exponent, reduced into [0, modulus) if a modulus is given.

    With a modulus, a negative exponent denotes a power
    of the multiplicative inverse of base.
    """

    if modulus is None:
        if exponent < 0:
            err_msg = f"negative exponent without modulus: {exponent}"
            raise InvalidInputError(err_msg)
        return base ** exponent

    _require_modulus(modulus)
    if exponent < 0:
        base = mod_inv(base, modulus)
        exponent = -exponent
    return pow(base, exponent, modulus)
