#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eckeys.key_pair` module."

import dataclasses
import json
import logging
from itertools import cycle

import pytest

from eckeys.curve import Curve
from eckeys.curves import secp256k1
from eckeys.exceptions import ECKeysRuntimeError, InvalidInputError
from eckeys.key_pair import MAX_DRAWS, KeyPair, KeyPairHex
from eckeys.point import INF, CurvePoint
from tests.test_curve import low_card_curves

q_test = 0xB8EAF6DE4D59FB7AFB0DE727EC6DD5C386ABFC43052E4792CF05B265658A26A9


def _reference_mult(m: int, x: int, y: int, p: int, a: int):
    "Independent right-to-left scalar multiplication, None being infinity."

    def add(P, Q):
        if P is None:
            return Q
        if Q is None:
            return P
        if P[0] == Q[0]:
            if (P[1] + Q[1]) % p == 0:
                return None
            lam = (3 * P[0] * P[0] + a) * pow(2 * P[1], p - 2, p) % p
        else:
            lam = (Q[1] - P[1]) * pow(Q[0] - P[0], p - 2, p) % p
        x3 = (lam * lam - P[0] - Q[0]) % p
        return x3, (lam * (P[0] - x3) - P[1]) % p

    R, Q = None, (x, y)
    while m:
        if m & 1:
            R = add(R, Q)
        Q = add(Q, Q)
        m >>= 1
    return R


def test_generate_deterministic() -> None:
    ec = secp256k1
    kp = KeyPair.generate(q_test)
    assert kp.prv_key == q_test
    assert kp.ec is ec
    assert ec.is_on_curve(kp.pub_key)
    assert tuple(kp.pub_key) == _reference_mult(q_test, *ec.G, ec.p, ec.a)

    # the same private key always gives the same public key
    assert KeyPair.generate(q_test) == kp


def test_private_key_representations() -> None:
    kp = KeyPair.generate(q_test)
    for prv_key in (
        hex(q_test),
        hex(q_test).upper().replace("0X", "0x"),
        f"  {hex(q_test)} ",
        str(q_test),
        q_test.to_bytes(32, "big"),
        b"\x00" + q_test.to_bytes(32, "big"),
    ):
        assert KeyPair.generate(prv_key) == kp, prv_key


def test_boundary_private_keys() -> None:
    ec = secp256k1
    kp = KeyPair.generate(1)
    assert kp.pub_key == ec.G
    kp = KeyPair.generate(ec.n - 1)
    assert kp.pub_key == ec.negate(ec.G)
    kp = KeyPair.generate(2)
    assert kp.pub_key == ec.double(ec.G)


def test_invalid_private_keys() -> None:
    ec = secp256k1
    for prv_key in (0, -1, ec.n, ec.n + 1, "0", "-0x01", b"\x00"):
        with pytest.raises(InvalidInputError, match="private key not in 1..n-1: "):
            KeyPair.generate(prv_key)

    for prv_key in ("", "abc", "0xzz", "1.5"):
        with pytest.raises(InvalidInputError, match="invalid scalar string: "):
            KeyPair.generate(prv_key)

    with pytest.raises(InvalidInputError, match="empty scalar bytes"):
        KeyPair.generate(b"")

    for prv_key in (1.5, True, [1], CurvePoint(1, 2)):
        with pytest.raises(InvalidInputError, match="invalid scalar type: "):
            KeyPair.generate(prv_key)  # type: ignore


def test_generate_random() -> None:
    ec = secp256k1
    kp = KeyPair.generate()
    assert 0 < kp.prv_key < ec.n
    assert ec.is_on_curve(kp.pub_key)
    assert kp.pub_key == ec.scalar_multiply(kp.prv_key)
    kp.assert_valid()

    assert KeyPair.generate() != kp


def test_random_source() -> None:
    ec = secp256k1

    # out of range draws are rejected
    draws = iter([0, ec.n, ec.n + 1, q_test])
    kp = KeyPair.generate(random_scalar=lambda: next(draws))
    assert kp == KeyPair.generate(q_test)

    err_msg = f"no valid private key in {MAX_DRAWS} random draws"
    with pytest.raises(ECKeysRuntimeError, match=err_msg):
        KeyPair.generate(random_scalar=lambda: 0)

    # a source failing fewer than MAX_DRAWS times is fine
    draws = iter([0] * (MAX_DRAWS - 1) + [1])
    assert KeyPair.generate(random_scalar=lambda: next(draws)).pub_key == ec.G

    with pytest.raises(InvalidInputError, match="random source returned a negative int"):
        KeyPair.generate(random_scalar=lambda: -1)

    err_msg = "random source returned a float, not an int"
    with pytest.raises(InvalidInputError, match=err_msg):
        KeyPair.generate(random_scalar=lambda: 1.5)  # type: ignore

    err_msg = "random source returned a bool, not an int"
    with pytest.raises(InvalidInputError, match=err_msg):
        KeyPair.generate(random_scalar=lambda: True)

    # the random source is not used if the private key is provided
    def exhausted() -> int:
        raise AssertionError("random source used")

    KeyPair.generate(q_test, random_scalar=exhausted)


def test_to_hex() -> None:
    ec = secp256k1
    kp = KeyPair.generate(1)
    d = kp.to_hex()
    assert d["private_key_hex"] == "0x" + "0" * 63 + "1"
    assert list(d["public_key_hex"]) == [f"0x{ec.G.x:064x}", f"0x{ec.G.y:064x}"]

    kp = KeyPair.generate(q_test)
    d = kp.to_hex()
    assert d["private_key_hex"] == hex(q_test)
    for h in [d["private_key_hex"], *d["public_key_hex"]]:
        assert len(h) == 66
        assert h.startswith("0x")
        assert h == h.lower()
    x_hex, y_hex = d["public_key_hex"]
    assert int(x_hex, 16) == kp.pub_key.x
    assert int(y_hex, 16) == kp.pub_key.y

    record = kp.hex_record()
    assert isinstance(record, KeyPairHex)
    assert record.private_key_hex == d["private_key_hex"]

    # padding follows the curve field size
    ec = low_card_curves["ec23_31"]
    kp = KeyPair.generate(1, ec)
    assert kp.to_hex() == {"private_key_hex": "0x01", "public_key_hex": ["0x00", "0x01"]}


def test_json() -> None:
    kp = KeyPair.generate(q_test)
    json_str = kp.to_json()
    d = json.loads(json_str)
    assert d == kp.to_hex()

    assert KeyPair.from_json(json_str) == kp
    assert KeyPair.from_hex(kp.to_hex()) == kp
    assert KeyPair.from_hex(json.loads(json_str)) == kp

    ec = low_card_curves["ec13_19"]
    kp = KeyPair.generate(5, ec)
    assert KeyPair.from_json(kp.to_json(), ec) == kp


def test_from_hex_exceptions() -> None:
    d = KeyPair.generate(q_test).to_hex()

    wrong_pub_key = dict(d)
    wrong_pub_key["public_key_hex"] = KeyPair.generate(q_test + 1).to_hex()[
        "public_key_hex"
    ]
    err_msg = "public key does not match private key"
    with pytest.raises(InvalidInputError, match=err_msg):
        KeyPair.from_hex(wrong_pub_key)

    for bad in ({}, {"private_key_hex": d["private_key_hex"]}, None, "0x01"):
        with pytest.raises(InvalidInputError, match="invalid key pair hex: "):
            KeyPair.from_hex(bad)  # type: ignore

    bad = dict(d)
    bad["public_key_hex"] = [d["public_key_hex"][0]]
    with pytest.raises(InvalidInputError, match="invalid key pair hex: "):
        KeyPair.from_hex(bad)

    bad = dict(d)
    bad["private_key_hex"] = d["private_key_hex"][2:]
    with pytest.raises(InvalidInputError, match="missing 0x prefix: "):
        KeyPair.from_hex(bad)

    bad = dict(d)
    bad["private_key_hex"] = "0x" + "0" * 64
    with pytest.raises(InvalidInputError, match="private key not in 1..n-1: "):
        KeyPair.from_hex(bad)


def test_key_pair_validation() -> None:
    ec = secp256k1
    KeyPair(1, ec.G)
    KeyPair(1, ec.G, ec)

    with pytest.raises(InvalidInputError, match="public key does not match"):
        KeyPair(2, ec.G)
    with pytest.raises(InvalidInputError, match="private key not in 1..n-1: "):
        KeyPair(0, ec.G)

    # validation can be skipped for trusted input only
    kp = KeyPair(2, ec.G, check_validity=False)
    with pytest.raises(InvalidInputError, match="public key does not match"):
        kp.assert_valid()


def test_immutability() -> None:
    kp = KeyPair.generate(q_test)
    with pytest.raises(dataclasses.FrozenInstanceError):
        kp.prv_key = 1  # type: ignore
    with pytest.raises(dataclasses.FrozenInstanceError):
        kp.pub_key = secp256k1.G  # type: ignore


def test_curves() -> None:
    for ec in low_card_curves.values():
        for q in range(1, ec.n):
            kp = KeyPair.generate(q, ec)
            assert kp.pub_key == ec.scalar_multiply(q)
        with pytest.raises(InvalidInputError, match="private key not in 1..n-1: "):
            KeyPair.generate(ec.n, ec)
        draws = cycle(range(2 * ec.n))
        kp = KeyPair.generate(ec=ec, random_scalar=lambda: next(draws))
        assert kp.prv_key == 1


def test_curve_without_order() -> None:
    # generator of order 31, not provided
    ec = Curve(23, 5, 1, (0, 1))
    assert KeyPair.generate(32, ec).pub_key == ec.G
    kp = KeyPair.generate(ec=ec, random_scalar=lambda: 1000)
    assert kp.prv_key == 1000

    err_msg = "private key is a multiple of the generator order"
    with pytest.raises(InvalidInputError, match=err_msg):
        KeyPair.generate(31, ec)


def test_private_key_is_never_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="eckeys")

    kp = KeyPair.generate(q_test)
    draws = iter([0, q_test])
    KeyPair.generate(random_scalar=lambda: next(draws))
    kp.to_json()
    KeyPair.from_json(kp.to_json())

    assert caplog.records
    for text in (str(q_test), hex(q_test)[2:]):
        assert text not in caplog.text.lower()


def test_private_key_wider_than_field() -> None:
    # n > p: valid private keys can need more bytes than the coordinates
    ec = Curve(251, 1, 4, (0, 2), 271)
    assert ec.p_size == 1
    kp = KeyPair.generate(260, ec)
    d = kp.to_hex()
    assert d["private_key_hex"] == "0x0104"
    for h in d["public_key_hex"]:
        assert len(h) == 4
    assert KeyPair.from_hex(d, ec) == kp
    assert KeyPair.from_json(kp.to_json(), ec) == kp

    assert KeyPair.generate(1, ec).to_hex()["private_key_hex"] == "0x0001"
    kp = KeyPair.generate(ec.n - 1, ec)
    assert kp.to_hex()["private_key_hex"] == "0x010e"

    # the default random source covers the whole 1..n-1 range
    for _ in range(10):
        kp = KeyPair.generate(ec=ec)
        assert 0 < kp.prv_key < ec.n
        assert len(kp.to_hex()["private_key_hex"]) == 6


def test_infinity_public_key() -> None:
    # generator of order 31, not provided
    ec = Curve(23, 5, 1, (0, 1))
    assert ec.scalar_multiply(31) == INF

    err_msg = "public key is not a curve point"
    with pytest.raises(InvalidInputError, match=err_msg):
        KeyPair(31, INF, ec)  # type: ignore
    with pytest.raises(InvalidInputError, match=err_msg):
        KeyPair(1, INF)  # type: ignore
    with pytest.raises(InvalidInputError, match=err_msg):
        KeyPair(1, (0, 1), ec)  # type: ignore
