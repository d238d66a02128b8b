#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class.

A Curve is a CurveGroup together with a generator point G
and, optionally, the order n of the subgroup generated by G.
"""

from typing import Optional, Sequence, Union

from eckeys.alias import Integer
from eckeys.curve_group import (
    CurveGroup,
    _is_probable_prime,
    _require_multiplier,
    mult_aff,
)
from eckeys.exceptions import InvalidInputError
from eckeys.point import CurvePoint, Infinity, Point
from eckeys.utils import HEX_THRESHOLD, hex_string, int_from_integer, str_from_int


def _point_from_generator(G: Union[Point, Sequence[Integer]]) -> Point:
    if isinstance(G, (CurvePoint, Infinity)):
        return G
    if len(G) != 2:
        raise InvalidInputError("Generator must a be a sequence[int, int]")
    return CurvePoint(int_from_integer(G[0]), int_from_integer(G[1]))


class Curve(CurveGroup):
    "Subgroup of the points of an elliptic curve over Fp generated by G."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Union[Point, Sequence[Integer]],
        n: Optional[Integer] = None,
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        G = _point_from_generator(G)
        if isinstance(G, Infinity):
            raise InvalidInputError("INF point cannot be a generator")
        if not (0 <= G.x < self.p and 0 <= G.y < self.p):
            raise InvalidInputError("Generator coordinates not in 0..p-1")
        if not self.is_on_curve(G):
            raise InvalidInputError("Generator is not on the curve")
        self._G = G

        self._n: Optional[int] = None
        if n is not None:
            n = int_from_integer(n)
            # 5. Check that n is prime.
            if not _is_probable_prime(n):
                raise InvalidInputError(f"n is not prime: {str_from_int(n)}")
            # 7. Check that nG = INF
            if not isinstance(mult_aff(n, G, self), Infinity):
                err_msg = f"n is not the group order: {str_from_int(n)}"
                raise InvalidInputError(err_msg)
            self._n = n

    @property
    def G(self) -> CurvePoint:
        "Generator point."
        return self._G

    @property
    def n(self) -> Optional[int]:
        "Order of the generator, None if not provided."
        return self._n

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G.x)}"
            result += f"\n y_G = {hex_string(self.G.y)}"
        else:
            result += f"\n x_G = {self.G.x}"
            result += f"\n y_G = {self.G.y}"
        if self.n is not None:
            if self.n > HEX_THRESHOLD:
                result += f"\n n   = {hex_string(self.n)}"
            else:
                result += f"\n n   = {self.n}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        if self.p > HEX_THRESHOLD:
            result += f", ('{hex(self.G.x)}', '{hex(self.G.y)}')"
        else:
            result += f", ({self.G.x}, {self.G.y})"
        if self.n is not None:
            result += f", '{hex(self.n)}'" if self.n > HEX_THRESHOLD else f", {self.n}"
        result += ")"
        return result

    def scalar_multiply(self, k: int, Q: Optional[Point] = None) -> Point:
        """Return k*Q, using the generator G if Q is not provided.

        The base point must be on the curve;
        scalar_multiply(0) is the point at infinity INF.
        """

        if Q is None:
            Q = self.G
        else:
            self.require_on_curve(Q)
        return mult_aff(k, Q, self)


def mult(m: int, Q: Optional[Point] = None, ec: Optional[Curve] = None) -> Point:
    """Elliptic curve scalar multiplication.

    If the order of the curve generator is known,
    the m coefficient is reduced mod n.
    The curve defaults to secp256k1, the base point to the curve generator.
    """

    if ec is None:
        # pylint: disable=import-outside-toplevel
        from eckeys.curves import secp256k1

        ec = secp256k1

    _require_multiplier(m)
    if ec.n is not None:
        m %= ec.n
    return ec.scalar_multiply(m, Q)
