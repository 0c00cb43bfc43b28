#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""sextet configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from sextet.config.runtime import SextetRuntimeConfig, parse_log_level, parse_xor_key

__all__ = [
    "SextetRuntimeConfig",
    "parse_log_level",
    "parse_xor_key",
]

# 🌶️📦🔚
