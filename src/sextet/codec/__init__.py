#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Base64 codec: the standard alphabet with ``=`` padding."""

from __future__ import annotations

from sextet.codec.alphabet import INVALID, STANDARD_ALPHABET, Alphabet
from sextet.codec.decoder import decode
from sextet.codec.encoder import encode

__all__ = [
    "INVALID",
    "STANDARD_ALPHABET",
    "Alphabet",
    "decode",
    "encode",
]

# 🌶️📦🔚
