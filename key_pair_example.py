#!/usr/bin/env python3

# Copyright (C) 2022-2024 The eckeys developers
#
# This file is part of eckeys. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeys including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from eckeys.curves import secp256k1 as ec
from eckeys.key_pair import KeyPair

print("\n*** EC:")
print(ec)

print("\n1. Key generation from a given private key")
q = 0x18E14A7B6A307F426A94F8114701E7C8E774E7F9A47E2C2035DB29A206321725
kp = KeyPair.generate(q)
print(f"prvkey: {hex(kp.prv_key).upper()}")
print(f"PubKey: {kp.pub_key}")

print("\n2. Hex text serialization")
print(kp.to_json())

print("\n3. Deserialization and check")
print(KeyPair.from_json(kp.to_json()) == kp)

print("\n4. Random key generation")
kp2 = KeyPair.generate()
print(f"PubKey: {kp2.pub_key}")
print(ec.is_on_curve(kp2.pub_key))
