#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for sextet tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

# Standard test vectors: raw bytes and their encoded text
VECTORS = [
    (b"", ""),
    (b"f", "Zg=="),
    (b"fo", "Zm8="),
    (b"foo", "Zm9v"),
    (b"foob", "Zm9vYg=="),
    (b"fooba", "Zm9vYmE="),
    (b"foobar", "Zm9vYmFy"),
    (b"Man", "TWFu"),
    (b"Ma", "TWE="),
    (b"M", "TQ=="),
    (b"\x00\x00\x00", "AAAA"),
    (b"\xff\xff\xff", "////"),
    (b"\xfb\xff", "+/8="),
]


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's SEXTET_* settings out of tests."""
    for name in ("SEXTET_LOG_LEVEL", "SEXTET_OUTPUT", "SEXTET_XOR_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def binary_file(tmp_path: Path) -> Path:
    """A small binary file whose content spans every padding case."""
    path = tmp_path / "input.bin"
    path.write_bytes(b"Many hands make light work.")
    return path


# 🌶️📦🔚
