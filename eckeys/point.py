#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

A group element is either an affine CurvePoint
or the point at infinity INF, the group identity.
INF has no coordinates: it is a distinct variant,
not a conventional coordinate pair.
"""

from dataclasses import dataclass
from typing import Iterator, Union

from eckeys.utils import HEX_THRESHOLD


@dataclass(frozen=True)
class CurvePoint:
    """Immutable affine coordinate pair (x, y).

    Coordinates are not reduced nor checked to be on any curve:
    membership is decided by the curve the point is used with.
    """

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        if self.x > HEX_THRESHOLD or self.y > HEX_THRESHOLD:
            return f"CurvePoint({hex(self.x)}, {hex(self.y)})"
        return f"CurvePoint({self.x}, {self.y})"


@dataclass(frozen=True)
class Infinity:
    "The point at infinity, identity element of the curve group."

    def __repr__(self) -> str:
        return "INF"


INF = Infinity()

# group element: affine point or the point at infinity
Point = Union[CurvePoint, Infinity]
