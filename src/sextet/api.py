#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public file-level API for sextet."""

from __future__ import annotations

from pathlib import Path

from sextet.codec import decode, encode
from sextet.files import read_binary, resolve_encoded_text, write_binary
from sextet.utils.xor import XOR_KEY, xor_encode


def encode_file(path: Path | str) -> str:
    """Read a binary file and return its Base64 text.

    Raises:
        SourceReadError: If the file cannot be read
    """
    return encode(read_binary(path))


def decode_to_file(source: str, output: Path | str) -> Path:
    """Decode a path-or-literal Base64 source and write the bytes to ``output``.

    Nothing is written when the input holds an invalid symbol.

    Args:
        source: Path to a file of encoded text, or the encoded text itself
        output: Destination for the decoded bytes

    Returns:
        The destination path

    Raises:
        InvalidSymbolError: If the encoded text is malformed
        DestinationWriteError: If the output cannot be written
    """
    data = decode(resolve_encoded_text(source))
    return write_binary(output, data)


def xor_file(path: Path | str, key: bytes = XOR_KEY) -> bytes:
    """Read a binary file and return it XORed with a repeating key."""
    return xor_encode(read_binary(path), key)


# 🌶️📦🔚
