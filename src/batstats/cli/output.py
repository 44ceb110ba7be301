# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table

from batstats.cli.utils import console

if TYPE_CHECKING:
    from batstats.types.api import PlayerStats, SeasonStat


def _spacer(compact: bool) -> None:
    if not compact:
        console.print()


def _table_kwargs(compact: bool) -> dict[str, Any]:
    if not compact:
        return {}
    return {
        "padding": (0, 0),
        "pad_edge": False,
        "collapse_padding": True,
    }


def _panel_kwargs(compact: bool) -> dict[str, Any]:
    if not compact:
        return {}
    return {"padding": (0, 1)}


def _format_seasons_table(
    seasons: list["SeasonStat"],
    title: str,
    year_style: str = "cyan",
    compact: bool = True,
) -> Table:
    """Format a list of season stats as a Rich table, one row per season."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold",
        **_table_kwargs(compact),
    )
    table.add_column("Year", style=year_style)
    table.add_column("AVG", justify="right")
    table.add_column("HR", justify="right")
    table.add_column("RBI", justify="right")

    for season in seasons:
        table.add_row(str(season.year), f"{season.avg:.3f}", str(season.hr), str(season.rbi))

    return table


def format_player(player: "PlayerStats", compact: bool = True) -> None:
    """
    Display one player's card: header panel, historical seasons, and predicted seasons.
    """
    current = player.current_stats
    console.print(
        Panel(
            f"[bold]{player.team}[/bold] | {player.position}\n"
            f"[dim]{player.bio}[/dim]\n\n"
            f"[bold]AVG[/bold] {current.avg}    [bold]HR[/bold] {current.hr}    "
            f"[bold]RBI[/bold] {current.rbi}    [bold]OPS[/bold] {current.ops}",
            title=f"[bold cyan]#{player.id} {player.name}[/bold cyan]",
            border_style="blue",
            **_panel_kwargs(compact),
        )
    )
    _spacer(compact)
    console.print(_format_seasons_table(player.historical_data, "Historical", compact=compact))
    _spacer(compact)
    console.print(
        _format_seasons_table(player.predicted_data, "Predicted", year_style="yellow", compact=compact)
    )


def format_players(
    players: list["PlayerStats"],
    format_type: str = "rich",
    compact: bool = True,
) -> None:
    """
    Format and display player stats.

    Args:
        players: The player stats bundles to show
        format_type: Output format ('rich' or 'json')
        compact: Whether to compact the console output
    """
    if format_type == "json":
        print(json.dumps([player.model_dump(by_alias=True) for player in players], indent=2))
        return

    if not players:
        console.print("[yellow]No players found in the hit data.[/yellow]")
        return

    for i, player in enumerate(players):
        if i > 0:
            console.print()
        format_player(player, compact=compact)
