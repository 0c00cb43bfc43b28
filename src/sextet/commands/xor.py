#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XOR command for the sextet CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from sextet.api import xor_file
from sextet.console import get_command_logger
from sextet.exceptions import SextetError
from sextet.utils.hexdump import format_c_array

# Get structured logger for this command
log = get_command_logger("xor")


@click.command("xor")
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False),
    required=True,
)
@click.option(
    "--key",
    "-k",
    default=None,
    help="Repeating XOR key (default: SEXTET_XOR_KEY or mysupersecretkey)",
)
@click.pass_context
def xor_command(ctx: click.Context, input_file: str, key: str | None) -> None:
    """XOR a file with a repeating key and print it as a C array."""
    if key is None:
        key = ctx.obj["config"].xor_key if ctx.obj else None
    if key == "":
        raise click.BadParameter("must not be empty", param_hint="'--key'")

    source = Path(input_file)
    log.debug("XOR transforming file", source=str(source))

    try:
        data = xor_file(source) if key is None else xor_file(source, key.encode("utf-8"))
    except SextetError as e:
        log.error("XOR failed", error=str(e), source=str(source))
        perr(f"❌ Error: {e}")
        raise click.Abort() from e

    log.info("File transformed", source=str(source), size=len(data))
    pout(format_c_array(data))


# 🌶️📦🔚
