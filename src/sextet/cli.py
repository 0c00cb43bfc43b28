#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""sextet command-line interface entrypoint."""

from __future__ import annotations

from collections.abc import Sequence
import sys

from attrs import evolve
import click
from provide.foundation import TelemetryConfig, get_hub
from provide.foundation.console import perr
from provide.foundation.utils import get_version

from sextet.commands.decode import decode_command
from sextet.commands.encode import encode_command
from sextet.commands.xor import xor_command
from sextet.config import SextetRuntimeConfig

__version__ = get_version("sextet", caller_file=__file__)

USAGE_EXIT_CODE = 1


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="sextet",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Base64 encode and decode files.

    Configure via environment variables:
    - SEXTET_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - SEXTET_OUTPUT: Default destination for decoded bytes
    - SEXTET_XOR_KEY: Default key for the xor command
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    try:
        config = SextetRuntimeConfig.from_env()
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="sextet",
        logging=evolve(
            base_telemetry.logging,
            default_level=config.log_level,  # type: ignore[arg-type]
        ),
    )
    get_hub().initialize_foundation(telemetry_config)

    ctx.obj["config"] = config


cli.add_command(encode_command, name="encode")
cli.add_command(decode_command, name="decode")
cli.add_command(xor_command, name="xor")


def run(args: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status.

    Usage errors exit with status 1 instead of click's default of 2.
    """
    argv = list(args) if args is not None else None
    try:
        result = cli.main(args=argv, prog_name="sextet", standalone_mode=False)
    except click.UsageError as e:
        e.show()
        return USAGE_EXIT_CODE
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        perr("Aborted!")
        return 1
    return result if isinstance(result, int) else 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()

# 🌶️📦🔚
