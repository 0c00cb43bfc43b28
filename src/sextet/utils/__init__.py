#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Companion byte utilities for the sextet CLI."""

from __future__ import annotations

from sextet.utils.hexdump import format_c_array
from sextet.utils.xor import (
    XOR_KEY,
    xor_decode,
    xor_encode,
)

__all__ = [
    "XOR_KEY",
    "format_c_array",
    "xor_decode",
    "xor_encode",
]

# 🌶️📦🔚
