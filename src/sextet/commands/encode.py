#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encode command for the sextet CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from sextet.api import encode_file
from sextet.console import get_command_logger
from sextet.exceptions import SextetError

# Get structured logger for this command
log = get_command_logger("encode")


@click.command("encode")
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False),
    required=True,
)
def encode_command(input_file: str) -> None:
    """Encode a binary file and print its Base64 text."""
    source = Path(input_file)
    log.debug("Encoding file", source=str(source))

    try:
        encoded = encode_file(source)
    except SextetError as e:
        log.error("Encoding failed", error=str(e), source=str(source))
        perr(f"❌ Error: {e}")
        raise click.Abort() from e

    log.info("File encoded", source=str(source), length=len(encoded))
    pout("Encoded Base64 string:")
    pout(encoded)


# 🌶️📦🔚
