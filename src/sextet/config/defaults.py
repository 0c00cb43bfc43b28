#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for sextet configuration."""

from __future__ import annotations

# =================================
# Codec defaults
# =================================
STANDARD_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PADDING_SYMBOL = "="
ALPHABET_SIZE = 64
SYMBOL_BITS = 6
GROUP_BYTES = 3  # Bytes consumed per encoded group
GROUP_SYMBOLS = 4  # Symbols emitted per encoded group

# =================================
# Command defaults
# =================================
DEFAULT_OUTPUT_FILE = "output.bin"
DEFAULT_XOR_KEY = "mysupersecretkey"
DEFAULT_HEXDUMP_WIDTH = 16  # Bytes per hex-dump row

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


# 🌶️📦🔚
