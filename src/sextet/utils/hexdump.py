#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Render bytes as a C array initializer."""

from __future__ import annotations

from sextet.config.defaults import DEFAULT_HEXDUMP_WIDTH


def format_c_array(data: bytes, per_line: int = DEFAULT_HEXDUMP_WIDTH) -> str:
    """
    Format bytes as ``{ 0x6d, 0x79, ... };``.

    A newline and two-space indent follow every ``per_line`` bytes.

    Args:
        data: Bytes to render
        per_line: Bytes per row

    Returns:
        The initializer text, without a trailing newline
    """
    if per_line < 1:
        raise ValueError(f"per_line must be positive, got {per_line}")

    parts = ["{ "]
    last = len(data) - 1
    for i, byte in enumerate(data):
        parts.append(f"0x{byte:02x}")
        parts.append(", " if i < last else " ")
        if (i + 1) % per_line == 0:
            parts.append("\n  ")
    parts.append("};")
    return "".join(parts)


# 🌶️📦🔚
