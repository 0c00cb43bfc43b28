#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for sextet."""

from __future__ import annotations

from pathlib import Path

from provide.foundation.errors import FoundationError


class SextetError(FoundationError):
    """Base exception for all sextet errors."""

    pass


class AlphabetError(SextetError):
    """Raised when an alphabet definition is not a valid 64-symbol table."""

    pass


class InvalidSymbolError(SextetError):
    """Raised when decode input holds a character outside the alphabet and padding."""

    def __init__(self, symbol: str, position: int) -> None:
        self.symbol = symbol
        self.position = position
        super().__init__(f"Invalid Base64 character {symbol!r} at position {position}")


class FileAccessError(SextetError):
    """Raised when a source or destination file cannot be used."""

    def __init__(self, message: str, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {path}")


class SourceReadError(FileAccessError):
    """Raised when an input file cannot be read."""

    pass


class DestinationWriteError(FileAccessError):
    """Raised when an output file cannot be written."""

    pass


# 🌶️📦🔚
