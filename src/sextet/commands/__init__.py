#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the sextet CLI."""

from __future__ import annotations

from sextet.commands.decode import decode_command
from sextet.commands.encode import encode_command
from sextet.commands.xor import xor_command

__all__ = [
    "decode_command",
    "encode_command",
    "xor_command",
]

# 🌶️📦🔚
