#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bytes to Base64 text."""

from __future__ import annotations

from sextet.codec.alphabet import STANDARD_ALPHABET, Alphabet
from sextet.config.defaults import GROUP_BYTES, GROUP_SYMBOLS


def encode(data: bytes | bytearray | memoryview, alphabet: Alphabet = STANDARD_ALPHABET) -> str:
    """
    Encode bytes as padded Base64 text.

    Every group of three input bytes becomes four symbols. A final group of
    one or two bytes is zero-filled for packing and the symbols that carry
    only fill bits are replaced with the padding symbol.

    Args:
        data: Bytes to encode
        alphabet: Symbol table (defaults to the standard alphabet)

    Returns:
        Encoded text, 4 * ceil(len(data) / 3) characters long
    """
    data = bytes(data)
    out: list[str] = []

    for start in range(0, len(data), GROUP_BYTES):
        group = data[start : start + GROUP_BYTES]
        missing = GROUP_BYTES - len(group)

        triple = 0
        for byte in group:
            triple = (triple << 8) | byte
        triple <<= 8 * missing

        for slot in range(GROUP_SYMBOLS - missing):
            out.append(alphabet.symbol_for(triple >> (18 - 6 * slot)))
        out.append(alphabet.padding * missing)

    return "".join(out)


# 🌶️📦🔚
