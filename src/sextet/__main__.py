#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Allow ``python -m sextet``."""

from __future__ import annotations

from sextet.cli import main

if __name__ == "__main__":
    main()

# 🌶️📦🔚
