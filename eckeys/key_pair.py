#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve key pairs.

A key pair is a private scalar q in [1, n-1]
and the public point Q = q*G it derives.

The private scalar is either provided by the caller
or drawn from an external entropy source:
a callable returning a uniformly random non-negative int,
by default the secrets module.
Draws outside [1, n-1] are rejected and redrawn,
so that the accepted private key is uniform in [1, n-1].
"""

import logging
import secrets
from dataclasses import InitVar, dataclass, field
from functools import partial
from math import ceil
from typing import Any, Dict, Mapping, Optional, Tuple

from dataclasses_json import DataClassJsonMixin

from eckeys.alias import RandomScalarF, Scalar
from eckeys.curve import Curve
from eckeys.curves import secp256k1
from eckeys.exceptions import ECKeysRuntimeError, InvalidInputError
from eckeys.point import CurvePoint
from eckeys.utils import hex_from_int, int_from_hex, int_from_scalar, str_from_int

logger = logging.getLogger(__name__)

# a sound entropy source gets a valid draw at the first attempt
# with overwhelming probability for any standard curve
MAX_DRAWS = 128


def _require_valid_prv_key(q: int, ec: Curve) -> None:
    if q < 1 or (ec.n is not None and q >= ec.n):
        raise InvalidInputError(f"private key not in 1..n-1: {str_from_int(q)}")


def _prv_key_size(q: int, ec: Curve) -> int:
    # valid private keys go up to n-1, and n can be wider than p
    bound = ec.n - 1 if ec.n is not None else q
    return max(ec.p_size, ceil(bound.bit_length() / 8))


def _random_prv_key(ec: Curve, random_scalar: RandomScalarF) -> int:
    for _ in range(MAX_DRAWS):
        q = random_scalar()
        if isinstance(q, bool) or not isinstance(q, int):
            err_msg = f"random source returned a {type(q).__name__}, not an int"
            raise InvalidInputError(err_msg)
        if q < 0:
            raise InvalidInputError("random source returned a negative int")
        if 0 < q and (ec.n is None or q < ec.n):
            return q
        logger.debug("random draw not a valid private key, drawing again")
    raise ECKeysRuntimeError(f"no valid private key in {MAX_DRAWS} random draws")


@dataclass(frozen=True)
class KeyPairHex(DataClassJsonMixin):
    "Hex text representation of a key pair, lowercase and 0x-prefixed."

    private_key_hex: str
    public_key_hex: Tuple[str, str]


@dataclass(frozen=True)
class KeyPair:
    prv_key: int
    pub_key: CurvePoint
    ec: Curve = field(default=secp256k1, repr=False)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        _require_valid_prv_key(self.prv_key, self.ec)
        if not isinstance(self.pub_key, CurvePoint):
            raise InvalidInputError("public key is not a curve point")
        if self.ec.scalar_multiply(self.prv_key) != self.pub_key:
            raise InvalidInputError("public key does not match private key")

    @classmethod
    def generate(
        cls,
        prv_key: Optional[Scalar] = None,
        ec: Curve = secp256k1,
        random_scalar: Optional[RandomScalarF] = None,
    ) -> "KeyPair":
        """Return the key pair of the given (or a random) private key.

        The private key can be an int, a decimal string,
        a 0x-prefixed hex-string, or big-endian bytes.
        If it is not provided, it is drawn from random_scalar,
        defaulting to as many random bits as the curve field size,
        or as the bit-length of n if wider.
        """

        if prv_key is None:
            if random_scalar is None:
                bits = ec.p_size * 8
                if ec.n is not None:
                    bits = max(bits, ec.n.bit_length())
                random_scalar = partial(secrets.randbits, bits)
            q = _random_prv_key(ec, random_scalar)
        else:
            q = int_from_scalar(prv_key)
            _require_valid_prv_key(q, ec)

        logger.debug("deriving %d-bit public key", ec.p_size * 8)
        Q = ec.scalar_multiply(q)
        if not isinstance(Q, CurvePoint):
            # only when the generator order is unknown
            err_msg = "private key is a multiple of the generator order"
            raise InvalidInputError(err_msg)
        return cls(q, Q, ec, check_validity=False)

    def hex_record(self) -> KeyPairHex:
        size = self.ec.p_size
        return KeyPairHex(
            hex_from_int(self.prv_key, _prv_key_size(self.prv_key, self.ec)),
            (hex_from_int(self.pub_key.x, size), hex_from_int(self.pub_key.y, size)),
        )

    def to_hex(self) -> Dict[str, Any]:
        """Return the key pair as hex text.

        {"private_key_hex": "0x…", "public_key_hex": ["0x…", "0x…"]},
        zero-padded to the byte-length of the curve field;
        the private key is padded to the byte-length of n-1 if wider.
        """
        return self.hex_record().to_dict()

    def to_json(self) -> str:
        return self.hex_record().to_json()

    @classmethod
    def from_hex(cls, data: Mapping[str, Any], ec: Curve = secp256k1) -> "KeyPair":
        """Return the key pair from its hex text representation.

        The public key is derived again from the private key
        and must match the provided one.
        """

        try:
            prv_key_hex = data["private_key_hex"]
            x_hex, y_hex = data["public_key_hex"]
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"invalid key pair hex: {data!r}") from e

        q = int_from_hex(prv_key_hex)
        Q = CurvePoint(int_from_hex(x_hex), int_from_hex(y_hex))
        return cls(q, Q, ec)

    @classmethod
    def from_json(cls, json_str: str, ec: Curve = secp256k1) -> "KeyPair":
        return cls.from_hex(KeyPairHex.from_json(json_str).to_dict(), ec)
