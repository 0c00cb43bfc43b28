#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Repeating-key XOR transform."""

from __future__ import annotations

from sextet.config.defaults import DEFAULT_XOR_KEY

XOR_KEY = DEFAULT_XOR_KEY.encode("ascii")


def xor_encode(data: bytes, key: bytes = XOR_KEY) -> bytes:
    """
    XOR encode data with repeating key.

    Args:
        data: Bytes to encode
        key: XOR key bytes (defaults to ``mysupersecretkey``)

    Returns:
        XOR encoded bytes

    Raises:
        ValueError: If the key is empty
    """
    if not key:
        raise ValueError("XOR key must not be empty")
    return bytes(data[i] ^ key[i % len(key)] for i in range(len(data)))


def xor_decode(data: bytes, key: bytes = XOR_KEY) -> bytes:
    """XOR decode data with repeating key (the same operation as encoding)."""
    return xor_encode(data, key)


# 🌶️📦🔚
