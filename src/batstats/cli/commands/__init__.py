# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

"""CLI command modules for BatStats."""

from batstats.cli.commands import players, serve, version

__all__ = ["players", "serve", "version"]
