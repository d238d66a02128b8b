#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by eckeys from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the eckeys versions are derived.
"""


class ECKeysValueError(ValueError):
    pass


class ECKeysTypeError(TypeError):
    pass


class ECKeysRuntimeError(RuntimeError):
    pass


class NoInverseError(ECKeysValueError):
    """A modular inverse was requested for a non-invertible operand.

    On a curve this is the algebraic signature of a vertical chord,
    i.e. of malformed field input reaching the unchecked group law.
    """


class InvalidInputError(ECKeysValueError):
    "The caller broke an input contract (bad parameter, scalar, or point)."
