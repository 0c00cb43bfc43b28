#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decode command for the sextet CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from sextet.api import decode_to_file
from sextet.console import get_command_logger
from sextet.exceptions import InvalidSymbolError, SextetError

# Get structured logger for this command
log = get_command_logger("decode")


@click.command("decode")
@click.argument("source", required=True)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Where to write the decoded bytes (default: SEXTET_OUTPUT or output.bin)",
)
@click.pass_context
def decode_command(ctx: click.Context, source: str, output: str | None) -> None:
    """Decode Base64 text into a binary file.

    SOURCE is a file containing the encoded text, or the encoded text itself.
    """
    if output is None:
        output = ctx.obj["config"].output_file if ctx.obj else _default_output()
    log.debug("Decoding", source=source, output=output)

    try:
        written = decode_to_file(source, output)
    except InvalidSymbolError as e:
        log.error("Invalid Base64 input", symbol=e.symbol, position=e.position)
        perr(f"❌ Error: {e}")
        raise click.Abort() from e
    except SextetError as e:
        log.error("Decoding failed", error=str(e), output=output)
        perr(f"❌ Error: {e}")
        raise click.Abort() from e

    log.info("Decoded file written", output=str(written))
    pout(f"Decoded binary file saved as: {written}")


def _default_output() -> str:
    """Resolve the output path when the command runs outside the CLI group."""
    from sextet.config import SextetRuntimeConfig

    return SextetRuntimeConfig.from_env().output_file


# 🌶️📦🔚
