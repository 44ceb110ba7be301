# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import argparse
import sys

from batstats.cli.utils import add_data_arguments, error_console


def add_parser(subparsers: argparse._SubParsersAction) -> None:
    """
    Add the 'players' subcommand to the CLI.
    """
    parser = subparsers.add_parser(
        "players",
        help="Show player stats",
        description="Aggregate the hit data and show current, historical, and predicted stats per player.",
    )
    parser.add_argument(
        "--name",
        "-n",
        default=None,
        help="Only show players whose name contains this text (case-insensitive)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["rich", "json"],
        default="rich",
        help="Output format (default: rich)",
    )
    parser.add_argument(
        "--no-compact",
        action="store_true",
        help="Do not compact the console output",
    )
    add_data_arguments(parser)
    parser.set_defaults(func=handle_players)


def handle_players(args: argparse.Namespace) -> None:
    """
    Handle the 'players' command.
    """
    from batstats.backend.errors import BatStatsError
    from batstats.cli.output import format_players
    from batstats.cli.utils import get_api

    try:
        api = get_api(args)
        players = api.get_players(search=args.name)
    except (BatStatsError, ValueError) as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if args.name and not players:
        error_console.print(f"[red]Error:[/red] no player found matching {args.name}")
        sys.exit(1)

    format_players(
        players,
        format_type=args.format,
        compact=not args.no_compact,
    )
