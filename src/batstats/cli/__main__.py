# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

"""Allow running the CLI via `python -m batstats.cli`."""

from batstats.cli import run_cli

if __name__ == "__main__":
    run_cli()
