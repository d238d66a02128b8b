#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named elliptic curves.

Curve parameters are read from the package data directory,
each curve being the list of Curve constructor arguments
[p, a, b, [x_G, y_G], n] as hex-strings.

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
"""

import json
import logging
from os import path
from typing import Dict

from eckeys.curve import Curve

logger = logging.getLogger(__name__)

datadir = path.join(path.dirname(__file__), "data")


def curves_from_json(filename: str) -> Dict[str, Curve]:
    "Return the named curves whose parameters are in a json file."

    with open(filename, "r", encoding="ascii") as file_:
        curve_params = json.load(file_)
    curves = {name: Curve(*params) for name, params in curve_params.items()}
    logger.debug("loaded %d curve(s) from %s", len(curves), filename)
    return curves


CURVES = curves_from_json(path.join(datadir, "curves.json"))

secp256k1 = CURVES["secp256k1"]
