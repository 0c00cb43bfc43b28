#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""sextet runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from sextet.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_XOR_KEY,
    VALID_LOG_LEVELS,
)


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_xor_key(value: str) -> str:
    """Reject empty XOR keys."""
    if not value:
        raise ValueError("XOR key must not be empty")
    return value


@define
class SextetRuntimeConfig(RuntimeConfig):
    """sextet runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="SEXTET_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for sextet operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    output_file: str = field(
        default=DEFAULT_OUTPUT_FILE,
        env_var="SEXTET_OUTPUT",
        metadata={"help": "Default destination for decoded bytes"},
    )

    xor_key: str = field(
        default=DEFAULT_XOR_KEY,
        env_var="SEXTET_XOR_KEY",
        converter=parse_xor_key,
        metadata={"help": "Repeating key used by the xor command"},
    )


# 🌶️📦🔚
