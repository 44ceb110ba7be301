# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, Any

from rich.console import Console

if TYPE_CHECKING:
    from batstats.api import BatStats

console = Console()
error_console = Console(stderr=True)


def add_data_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add the options that configure where player data comes from.
    """
    parser.add_argument(
        "--data",
        "-d",
        default=None,
        help="Path to the hit data CSV (default: bundled sample data)",
    )
    parser.add_argument(
        "--metadata",
        "-m",
        default=None,
        help="Path to a JSON player metadata table (default: built-in table)",
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Seed for the projection random source (default: unseeded)",
    )


def api_kwargs_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """
    Collect the `BatStats` keyword arguments set on the command line.
    """
    kwargs: dict[str, Any] = {}
    if args.data is not None:
        kwargs["data_path"] = args.data
    if args.metadata is not None:
        kwargs["metadata_path"] = args.metadata
    if args.seed is not None:
        kwargs["seed"] = args.seed
    return kwargs


def get_api(args: argparse.Namespace) -> "BatStats":
    """
    Create a BatStats instance configured from the command line.

    Only warnings and errors are logged, to the console and not to a file.
    """
    from batstats.api import BatStats

    return BatStats(
        log_dir=None,
        log_level_console="WARNING",
        **api_kwargs_from_args(args),
    )
