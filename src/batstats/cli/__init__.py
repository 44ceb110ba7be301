# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import argparse

from batstats.cli.commands import players, serve, version


def build_parser() -> argparse.ArgumentParser:
    """
    Build the main argument parser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="batstats",
        description="Current, historical, and predicted player stats from batted-ball data",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve.add_parser(subparsers)
    version.add_parser(subparsers)
    players.add_parser(subparsers)

    return parser


def run_cli():
    """
    Run the BatStats CLI.
    """
    parser = build_parser()
    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    run_cli()
