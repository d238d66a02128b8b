#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveGroup explorer functions.

These functions are meant to explore low-cardinality CurveGroup,
for didactical (and fun) reason only.
"""

from typing import Dict, List

from eckeys.curve_group import CurveGroup
from eckeys.exceptions import InvalidInputError
from eckeys.point import INF, CurvePoint, Infinity, Point

MAX_P = 10000


def find_all_points(ec: CurveGroup) -> List[Point]:
    """Attempt to find all group points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > MAX_P:
        err_msg = f"p is too big to count all group points: {ec.p}"
        raise InvalidInputError(err_msg)

    # square roots of every quadratic residue
    roots: Dict[int, List[int]] = {}
    for y in range(ec.p):
        roots.setdefault(y * y % ec.p, []).append(y)

    points: List[Point] = [INF]
    for x in range(ec.p):
        y2 = (x * x * x + ec.a * x + ec.b) % ec.p
        points.extend(CurvePoint(x, y) for y in roots.get(y2, []))

    return points


def find_subgroup_points(ec: CurveGroup, G: Point) -> List[Point]:
    """Attempt to find all G-generated subgroup points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    The last point of the returned list is INF.
    """
    if ec.p > MAX_P:
        err_msg = f"p is too big to count all subgroup points: {ec.p}"
        raise InvalidInputError(err_msg)

    points: List[Point] = [G]
    while not isinstance(points[-1], Infinity):
        points.append(ec.add(points[-1], G))

    return points
