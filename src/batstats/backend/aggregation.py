# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import logging

import numpy as np
import pandas as pd

from batstats.backend.algs import JitterProjection, ProjectionAlgorithm
from batstats.backend.errors import EmptyHistoryError
from batstats.backend.metadata import MetadataTable, default_metadata_table
from batstats.types.api import CurrentStats, HitRecord, PlayerStats, SeasonStat
from batstats.utils.rounding import round_half_away


logger = logging.getLogger("batstats.backend.aggregation")

QUALITY_EXIT_VELOCITY = 95.0  # mph
HR_LAUNCH_ANGLE = 25.0  # degrees
HR_DISTANCE = 400.0  # feet
RBI_PER_HR = 2.5
RBI_PER_QUALITY_HIT = 0.5
OPS_OFFSET = 0.5


def aggregate_players(
    records: list[HitRecord],
    metadata: MetadataTable | None = None,
    algorithm: ProjectionAlgorithm | None = None,
    rng: np.random.Generator | None = None,
) -> list[PlayerStats]:
    """
    Aggregate hit records into one stats bundle per player.

    Players are returned in order of their first appearance in `records`, with ids
    assigned 1, 2, ... in that order.

    Args:
        records: The hit records to aggregate.
        metadata: Descriptive player info. Defaults to the built-in table.
        algorithm: The projection algorithm. Defaults to `JitterProjection`.
        rng: Random source for projections. Defaults to an unseeded generator.

    Returns:
        The player stats bundles.
    """
    if metadata is None:
        metadata = default_metadata_table()
    if algorithm is None:
        algorithm = JitterProjection()
    if rng is None:
        rng = np.random.default_rng()

    seasons_by_player = compute_season_stats(records)
    logger.debug(f"computed season stats for {len(seasons_by_player)} players from {len(records)} hits")

    players = []
    for player_id, (name, historical_data) in enumerate(seasons_by_player.items(), start=1):
        players.append(
            build_player_stats(
                player_id=player_id,
                name=name,
                historical_data=historical_data,
                metadata=metadata,
                algorithm=algorithm,
                rng=rng,
            )
        )

    return players


def aggregate_players_by_name(
    records: list[HitRecord],
    metadata: MetadataTable | None = None,
    algorithm: ProjectionAlgorithm | None = None,
    rng: np.random.Generator | None = None,
) -> dict[str, PlayerStats]:
    """
    Same as `aggregate_players`, keyed by player name. Iteration order is the id order.
    """
    players = aggregate_players(records, metadata=metadata, algorithm=algorithm, rng=rng)
    return {player.name: player for player in players}


def compute_season_stats(records: list[HitRecord]) -> dict[str, list[SeasonStat]]:
    """
    Group hit records by player and season and derive each season's stats.

    Returns:
        A mapping of player name to that player's seasons in ascending year order.
        Players appear in order of their first hit.
    """
    if not records:
        return {}

    df = pd.DataFrame([record.model_dump() for record in records])
    df["quality_hit"] = df["exit_velocity"] > QUALITY_EXIT_VELOCITY
    df["home_run"] = (
        (df["launch_angle"] > HR_LAUNCH_ANGLE)
        & (df["exit_velocity"] > QUALITY_EXIT_VELOCITY)
        & (df["hit_distance"] > HR_DISTANCE)
    )

    seasons = df.groupby(["player_name", "year"]).agg(
        n_hits=("play_id", "size"),
        quality_hits=("quality_hit", "sum"),
        home_runs=("home_run", "sum"),
    )

    stats: dict[str, list[SeasonStat]] = {}
    for name in df["player_name"].unique():
        player_seasons = seasons.loc[name].sort_index()
        stats[name] = [
            season_stat(
                year=int(year),
                n_hits=int(row["n_hits"]),
                quality_hits=int(row["quality_hits"]),
                home_runs=int(row["home_runs"]),
            )
            for year, row in player_seasons.iterrows()
        ]

    return stats


def season_stat(
    year: int,
    n_hits: int,
    quality_hits: int,
    home_runs: int,
) -> SeasonStat:
    """
    Derive one season's stats from its hit counts.

    `avg` is the share of quality hits, not a batting average. RBIs are an estimate
    rounded half away from zero.
    """
    avg = quality_hits / n_hits if n_hits > 0 else 0.0
    rbi = round_half_away(home_runs * RBI_PER_HR + quality_hits * RBI_PER_QUALITY_HIT)
    return SeasonStat(year=year, avg=avg, hr=home_runs, rbi=rbi)


def build_player_stats(
    player_id: int,
    name: str,
    historical_data: list[SeasonStat],
    metadata: MetadataTable,
    algorithm: ProjectionAlgorithm,
    rng: np.random.Generator,
) -> PlayerStats:
    """
    Assemble the stats bundle for one player from their historical seasons.

    Raises:
        EmptyHistoryError: If the player has no historical seasons.
    """
    if not historical_data:
        raise EmptyHistoryError(f"no historical seasons for player {name}")

    current_year = max(stat.year for stat in historical_data)
    historical_data = sorted(
        (stat for stat in historical_data if stat.year <= current_year),
        key=lambda stat: stat.year,
    )
    predicted_data = algorithm.project(historical_data, rng)
    current = next(stat for stat in historical_data if stat.year == current_year)

    info = metadata.lookup(name, player_id)
    return PlayerStats(
        id=player_id,
        name=name,
        team=info.team,
        position=info.position,
        image=info.image,
        bio=info.bio,
        current_stats=format_current_stats(current),
        historical_data=historical_data,
        predicted_data=predicted_data,
    )


def format_current_stats(current: SeasonStat) -> CurrentStats:
    """
    Format the current season for display. `ops` is a placeholder (avg + 0.5), not real OPS.
    """
    return CurrentStats(
        avg=f"{current.avg:.3f}",
        hr=current.hr,
        rbi=current.rbi,
        ops=f"{current.avg + OPS_OFFSET:.3f}",
    )


def search_players(players: list[PlayerStats], search: str | None) -> list[PlayerStats]:
    """
    Keep the players whose name contains `search`, ignoring case. An empty or missing
    search keeps everyone. Ids are not renumbered.
    """
    if not search:
        return players
    term = search.casefold()
    return [player for player in players if term in player.name.casefold()]
