#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Elliptic CurveGroup class and functions.

A CurveGroup is the whole group of the points of an elliptic curve,
not necessarily cyclic: base points and subgroup orders
are added by eckeys.curve.Curve.
"""

from math import ceil

from eckeys.alias import Integer
from eckeys.exceptions import ECKeysTypeError, InvalidInputError
from eckeys.number_theory import mod_inv, mod_pow, mod_reduce
from eckeys.point import INF, CurvePoint, Infinity, Point
from eckeys.utils import HEX_THRESHOLD, hex_string, int_from_integer, str_from_int


def _is_probable_prime(i: int) -> bool:
    # Fermat test with base 2: enough to catch parameter typos
    return i > 2 and i % 2 == 1 and pow(2, i - 1, i) == 1


def _require_multiplier(m: int) -> None:
    if isinstance(m, bool) or not isinstance(m, int):
        raise InvalidInputError(f"invalid scalar type: {type(m).__name__}")
    if m < 0:
        raise InvalidInputError(f"negative m: {hex(m)}")


class CurveGroup:
    """Group of the points of y^2 = x^3 + a*x + b over Fp.

    The points are the (x, y) solutions in Fp, p prime,
    plus the point at infinity INF acting as the group identity.
    The curve must be non-singular, i.e. 4 a^3 + 27 b^2 ≠ 0 (mod p).

    Parameters are immutable after construction.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # checks from SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        if not _is_probable_prime(p):
            raise InvalidInputError(f"p is not prime: {str_from_int(p)}")

        # coefficients must be field elements
        params = {"a": int_from_integer(a), "b": int_from_integer(b)}
        for label, value in params.items():
            if value < 0:
                raise InvalidInputError(f"negative {label}: {value}")
            if value >= p:
                err_msg = f"p <= {label}: {str_from_int(p)} <= {str_from_int(value)}"
                raise InvalidInputError(err_msg)
        a, b = params["a"], params["b"]

        if (4 * a ** 3 + 27 * b ** 2) % p == 0:
            raise InvalidInputError("zero discriminant")

        self._p = p
        self._a = a
        self._b = b
        self._p_size = ceil(p.bit_length() / 8)

    @property
    def p(self) -> int:
        "Field prime."
        return self._p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def p_size(self) -> int:
        "Byte-length of the field prime."
        return self._p_size

    def _coefficients_are_big(self) -> bool:
        return max(self._a, self._b) > HEX_THRESHOLD

    def __str__(self) -> str:
        p = hex_string(self.p) if self.p > HEX_THRESHOLD else self.p
        big = self._coefficients_are_big()
        a = hex_string(self._a) if big else self._a
        b = hex_string(self._b) if big else self._b
        return f"Curve\n p   = {p}\n a   = {a}\n b   = {b}"

    def __repr__(self) -> str:
        p = f"'{hex(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self._coefficients_are_big():
            return f"Curve({p}, '{hex(self._a)}', '{hex(self._b)}')"
        return f"Curve({p}, {self._a}, {self._b})"

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Infinity):
            return INF
        if isinstance(Q, CurvePoint):
            return CurvePoint(mod_reduce(Q.x, self.p), mod_reduce(-Q.y, self.p))
        raise ECKeysTypeError("not a point")

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def double(self, Q: Point) -> Point:
        """Return the double of a point.

        The input point must be on the curve.
        """

        self.require_on_curve(Q)
        return self.double_aff(Q)

    def add_aff(self, Q: Point, R: Point) -> Point:
        "Unchecked group law: points are assumed to be on the curve."

        if isinstance(R, Infinity):
            return Q
        if isinstance(Q, Infinity):
            return R

        if mod_reduce(R.x - Q.x, self.p) == 0:
            if mod_reduce(R.y - Q.y, self.p) == 0:  # point doubling
                return self.double_aff(Q)
            if mod_reduce(R.y + Q.y, self.p) == 0:  # opposite points
                return INF
            # same x but unrelated y: only for points off the curve,
            # the vertical chord below makes mod_inv raise NoInverseError

        lam = (R.y - Q.y) * mod_inv(R.x - Q.x, self.p)
        x = mod_reduce(lam * lam - Q.x - R.x, self.p)
        y = mod_reduce(lam * (Q.x - x) - Q.y, self.p)
        return CurvePoint(x, y)

    def double_aff(self, Q: Point) -> Point:
        "Unchecked doubling: the point is assumed to be on the curve."

        if isinstance(Q, Infinity):
            return INF
        # vertical tangent: a point of order two
        if mod_reduce(Q.y, self.p) == 0:
            return INF

        lam = (3 * Q.x * Q.x + self._a) * mod_inv(2 * Q.y, self.p)
        x = mod_reduce(lam * lam - Q.x - Q.x, self.p)
        y = mod_reduce(lam * (Q.x - x) - Q.y, self.p)
        return CurvePoint(x, y)

    def _y2(self, x: int) -> int:
        return mod_reduce(mod_pow(x, 3, self.p) + self._a * x + self._b, self.p)

    def require_on_curve(self, Q: Point) -> None:
        "Raise InvalidInputError if the point is not on the curve."
        if not self.is_on_curve(Q):
            raise InvalidInputError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        It never raises: anything that is not a curve point
        is just not on the curve.
        """
        if isinstance(Q, Infinity):
            return True
        if not isinstance(Q, CurvePoint):
            return False
        if not isinstance(Q.x, int) or not isinstance(Q.y, int):
            return False
        return mod_pow(Q.y, 2, self.p) == self._y2(Q.x)


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Return m*Q by double-and-add in affine coordinates.

    The bits of m are scanned from the most significant one:
    each step doubles the accumulator and adds Q when the bit is set.
    Running time depends on m, so it is not constant-time.

    Q is assumed to be on the curve;
    m is not reduced modulo any subgroup order.
    """

    _require_multiplier(m)

    if m == 0 or isinstance(Q, Infinity):
        return INF

    # the leading bit is always 1: it is accounted for by starting from Q
    R = Q
    for bit in bin(m)[3:]:
        R = ec.double_aff(R)
        if bit == "1":
            R = ec.add_aff(R, Q)
    return R


def mult_repeated_add(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Return m*Q adding Q to INF m times.

    Linear in m: a slow reference for mult_aff.
    """

    _require_multiplier(m)

    R: Point = INF
    for _ in range(m):
        R = ec.add_aff(R, Q)
    return R
