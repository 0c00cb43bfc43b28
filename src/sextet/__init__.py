#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""sextet: a Base64 codec with a small file-oriented CLI."""

from __future__ import annotations

from provide.foundation.utils import get_version

from sextet.api import decode_to_file, encode_file, xor_file
from sextet.codec import STANDARD_ALPHABET, Alphabet, decode, encode
from sextet.exceptions import (
    AlphabetError,
    DestinationWriteError,
    FileAccessError,
    InvalidSymbolError,
    SextetError,
    SourceReadError,
)

__version__ = get_version("sextet", caller_file=__file__)

__all__ = [
    "STANDARD_ALPHABET",
    "Alphabet",
    "AlphabetError",
    "DestinationWriteError",
    "FileAccessError",
    "InvalidSymbolError",
    "SextetError",
    "SourceReadError",
    "__version__",
    "decode",
    "decode_to_file",
    "encode",
    "encode_file",
    "xor_file",
]

# 🌶️📦🔚
