#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Symbol table shared by the encoder and decoder.

An ``Alphabet`` pairs the 64 content symbols with the padding symbol and
precomputes the reverse table used during decoding. Instances are frozen;
the standard table is built once at import time and shared by every call.
"""

from __future__ import annotations

from attrs import define, field

from sextet.config.defaults import ALPHABET_SIZE, PADDING_SYMBOL, STANDARD_SYMBOLS
from sextet.exceptions import AlphabetError

INVALID = -1  # Reverse-table sentinel for characters outside the alphabet
ASCII_RANGE = 128


def _validate_symbols(instance: Alphabet, attribute: object, value: str) -> None:
    if len(value) != ALPHABET_SIZE:
        raise AlphabetError(f"Alphabet must have {ALPHABET_SIZE} symbols, got {len(value)}")
    if len(set(value)) != ALPHABET_SIZE:
        raise AlphabetError("Alphabet symbols must be distinct")
    if not all(symbol.isascii() and symbol.isprintable() for symbol in value):
        raise AlphabetError("Alphabet symbols must be printable ASCII")


def _validate_padding(instance: Alphabet, attribute: object, value: str) -> None:
    if len(value) != 1:
        raise AlphabetError(f"Padding must be a single character, got {value!r}")
    if value in instance.symbols:
        raise AlphabetError(f"Padding symbol {value!r} collides with the alphabet")


@define(frozen=True)
class Alphabet:
    """64 content symbols plus one padding symbol."""

    symbols: str = field(validator=_validate_symbols)
    padding: str = field(default=PADDING_SYMBOL, validator=_validate_padding)
    _reverse: tuple[int, ...] = field(init=False, repr=False, eq=False)

    @_reverse.default
    def _build_reverse(self) -> tuple[int, ...]:
        table = [INVALID] * ASCII_RANGE
        for value, symbol in enumerate(self.symbols):
            # Non-ASCII symbols are rejected by the validator after defaults run
            if ord(symbol) < ASCII_RANGE:
                table[ord(symbol)] = value
        return tuple(table)

    def symbol_for(self, value: int) -> str:
        """Return the symbol for a 6-bit value."""
        return self.symbols[value & 0x3F]

    def value_of(self, symbol: str) -> int:
        """Return the 6-bit value of ``symbol``, or ``INVALID``."""
        code = ord(symbol)
        if code >= ASCII_RANGE:
            return INVALID
        return self._reverse[code]


STANDARD_ALPHABET = Alphabet(STANDARD_SYMBOLS)


# 🌶️📦🔚
