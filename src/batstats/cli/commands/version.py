# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import argparse
from importlib.metadata import PackageNotFoundError


def add_parser(subparsers: argparse._SubParsersAction) -> None:
    """
    Add the 'version' subcommand to the CLI.
    """
    parser = subparsers.add_parser(
        "version",
        help="Show BatStats version information",
        description="Display the current version of BatStats.",
    )
    parser.set_defaults(func=handle_version)


def handle_version(args: argparse.Namespace) -> None:
    """
    Handle the 'version' command.
    """
    from rich.panel import Panel

    from batstats.cli.utils import console
    from batstats.utils.version import get_version

    try:
        version = get_version()
    except PackageNotFoundError:
        version = "unknown"

    panel = Panel(
        f"[bold cyan]BatStats[/bold cyan] version [green]{version}[/green]\n\n"
        "[dim]Current, historical, and predicted player stats from batted-ball data[/dim]",
        title="[bold]BatStats[/bold]",
        border_style="blue",
    )
    console.print(panel)
