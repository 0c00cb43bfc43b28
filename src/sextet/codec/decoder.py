#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Base64 text to bytes."""

from __future__ import annotations

from sextet.codec.alphabet import INVALID, STANDARD_ALPHABET, Alphabet
from sextet.config.defaults import GROUP_SYMBOLS, SYMBOL_BITS
from sextet.exceptions import InvalidSymbolError


def decode(text: str, alphabet: Alphabet = STANDARD_ALPHABET) -> bytes:
    """
    Decode Base64 text into bytes.

    Scanning stops at the first padding symbol; anything after it is
    ignored. A trailing run of two or three symbols yields one or two
    bytes, and a lone trailing symbol yields nothing.

    Args:
        text: Encoded text
        alphabet: Symbol table (defaults to the standard alphabet)

    Returns:
        Decoded bytes

    Raises:
        InvalidSymbolError: If a scanned character is not in the alphabet
    """
    decoded = bytearray()
    triple = 0
    count = 0

    for position, symbol in enumerate(text):
        if symbol == alphabet.padding:
            break

        value = alphabet.value_of(symbol)
        if value == INVALID:
            raise InvalidSymbolError(symbol, position)

        triple = (triple << SYMBOL_BITS) | value
        count += 1

        if count == GROUP_SYMBOLS:
            decoded += bytes(((triple >> 16) & 0xFF, (triple >> 8) & 0xFF, triple & 0xFF))
            triple = 0
            count = 0

    if count >= 2:
        triple <<= (GROUP_SYMBOLS - count) * SYMBOL_BITS
        decoded.append((triple >> 16) & 0xFF)
        if count == 3:
            decoded.append((triple >> 8) & 0xFF)

    return bytes(decoded)


# 🌶️📦🔚
