#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""File access around the codec: binary reads, encoded-text resolution, atomic writes."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger
from provide.foundation.file import atomic_write
from provide.foundation.file.directory import ensure_parent_dir

from sextet.exceptions import DestinationWriteError, SourceReadError


def read_binary(path: Path | str) -> bytes:
    """Read a whole file as bytes.

    Raises:
        SourceReadError: If the file cannot be opened or read
    """
    source = Path(path)
    try:
        data = source.read_bytes()
    except OSError as e:
        raise SourceReadError("Error opening file for reading", source) from e
    logger.debug(f"Read {len(data)} bytes from {source}")
    return data


def resolve_encoded_text(source: str) -> str:
    """Return encoded text from a file path, or ``source`` itself.

    When ``source`` names a readable file its contents are used, with
    surrounding ASCII whitespace stripped. Bytes map one-to-one onto characters so
    stray non-ASCII bytes reach the decoder as invalid symbols. Anything that
    cannot be opened as a file is treated as literal encoded text.
    """
    candidate = Path(source)
    try:
        if candidate.is_file():
            text = candidate.read_bytes().strip().decode("latin-1")
            logger.debug(f"Using encoded text from file {candidate}")
            return text
    except (OSError, ValueError) as e:
        # Over-long names and unreadable paths fall back to the literal value
        logger.debug(f"Treating input as literal text: {e}")
    return source


def write_binary(path: Path | str, data: bytes) -> Path:
    """Atomically write ``data`` to ``path``, creating parent directories.

    Raises:
        DestinationWriteError: If the file cannot be written
    """
    destination = Path(path)
    try:
        ensure_parent_dir(destination)
        atomic_write(destination, data)
    except OSError as e:
        raise DestinationWriteError("Error opening file for writing", destination) from e
    logger.debug(f"Wrote {len(data)} bytes to {destination}")
    return destination


# 🌶️📦🔚
