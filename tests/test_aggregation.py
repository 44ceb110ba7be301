# SPDX-License-Identifier: MIT

from __future__ import annotations

import numpy as np
import pytest

from batstats.backend.aggregation import (
    aggregate_players,
    aggregate_players_by_name,
    build_player_stats,
    compute_season_stats,
    format_current_stats,
    search_players,
    season_stat,
)
from batstats.backend.algs import JitterProjection
from batstats.backend.errors import EmptyHistoryError
from batstats.backend.metadata import MetadataTable, default_metadata_table
from batstats.types.api import HitRecord, SeasonStat

from conftest import make_hit


class _MaxRNG:
    """Random source that always draws the upper bound."""

    def uniform(self, low: float, high: float) -> float:
        return high


def test_season_stat_matches_worked_example() -> None:
    hits = [
        make_hit("1", 105.2, 425, 32, 2023, "Mike Trout"),
        make_hit("2", 98.7, 389, 25, 2023, "Mike Trout"),
        make_hit("3", 110.5, 450, 28, 2023, "Mike Trout"),
        make_hit("4", 92.3, 350, 18, 2023, "Mike Trout"),
    ]

    stats = compute_season_stats(hits)

    assert stats == {
        "Mike Trout": [SeasonStat(year=2023, avg=0.75, hr=2, rbi=7)],
    }


def test_season_stat_rbi_ties_round_away_from_zero() -> None:
    # 1 * 2.5 + 1 * 0.5 = 3.0, 1 * 2.5 + 2 * 0.5 = 3.5
    assert season_stat(year=2023, n_hits=2, quality_hits=1, home_runs=1).rbi == 3
    assert season_stat(year=2023, n_hits=2, quality_hits=2, home_runs=1).rbi == 4
    assert season_stat(year=2023, n_hits=1, quality_hits=1, home_runs=0).rbi == 1


def test_season_stat_no_hits_has_zero_average() -> None:
    stat = season_stat(year=2023, n_hits=0, quality_hits=0, home_runs=0)

    assert stat.avg == 0.0
    assert stat.hr == 0
    assert stat.rbi == 0


def test_thresholds_are_strict() -> None:
    hits = [
        make_hit("1", 95.0, 450, 30, 2023, "Edge Case"),  # velocity not > 95
        make_hit("2", 100.0, 400, 30, 2023, "Edge Case"),  # distance not > 400
        make_hit("3", 100.0, 450, 25, 2023, "Edge Case"),  # angle not > 25
        make_hit("4", 95.1, 400.1, 25.1, 2023, "Edge Case"),
    ]

    [stat] = compute_season_stats(hits)["Edge Case"]

    assert stat.avg == pytest.approx(0.75)
    assert stat.hr == 1


def test_compute_season_stats_orders_players_by_first_hit_and_years_ascending(
    sample_records: list[HitRecord],
) -> None:
    stats = compute_season_stats(sample_records)

    assert list(stats) == ["Mike Trout", "Shohei Ohtani"]
    assert [s.year for s in stats["Mike Trout"]] == [2022, 2023]
    assert stats["Shohei Ohtani"] == [
        SeasonStat(year=2022, avg=1.0, hr=3, rbi=10),
        SeasonStat(year=2023, avg=1.0, hr=3, rbi=10),
    ]


def test_compute_season_stats_empty_input() -> None:
    assert compute_season_stats([]) == {}


def test_aggregate_players_builds_bundles(sample_records: list[HitRecord]) -> None:
    players = aggregate_players(sample_records, rng=np.random.default_rng(0))

    assert [(p.id, p.name) for p in players] == [(1, "Mike Trout"), (2, "Shohei Ohtani")]

    trout = players[0]
    assert trout.team == "Los Angeles Angels"
    assert trout.position == "CF"
    assert trout.current_stats.avg == "0.750"
    assert trout.current_stats.ops == "1.250"
    assert trout.current_stats.hr == 2
    assert trout.current_stats.rbi == 7

    ohtani = players[1]
    assert ohtani.current_stats.avg == "1.000"
    assert ohtani.current_stats.ops == "1.500"
    assert ohtani.current_stats.rbi == 10


def test_aggregate_players_history_and_prediction_shape(sample_records: list[HitRecord]) -> None:
    for player in aggregate_players(sample_records):
        assert len(player.historical_data) == 2
        assert len(player.predicted_data) == 3
        assert [s.year for s in player.predicted_data] == [2024, 2025, 2026]
        for season in player.historical_data:
            assert 0.0 <= season.avg <= 1.0
            assert 0 <= season.hr <= 4


def test_aggregate_players_predictions_within_bounds(sample_records: list[HitRecord]) -> None:
    for seed in range(20):
        trout = aggregate_players(sample_records, rng=np.random.default_rng(seed))[0]
        for season in trout.predicted_data:
            assert 0.75 * 0.95 <= season.avg <= 0.75 * 1.05
            assert season.hr == 2
            assert 6 <= season.rbi <= 8


def test_aggregate_players_predictions_use_last_season_not_chained() -> None:
    hits = [make_hit(str(i), 105.0, 420, 30, 2021, "Slugger") for i in range(10)]

    [player] = aggregate_players(hits, rng=_MaxRNG())

    # each year is 10 * 1.1, not 10 * 1.1 ** n
    assert [s.hr for s in player.predicted_data] == [11, 11, 11]
    assert [s.rbi for s in player.predicted_data] == [33, 33, 33]
    assert player.predicted_data[0].avg == pytest.approx(1.05)


def test_aggregate_players_history_is_deterministic(sample_records: list[HitRecord]) -> None:
    first = aggregate_players(sample_records)
    second = aggregate_players(sample_records)

    assert [p.historical_data for p in first] == [p.historical_data for p in second]
    assert [p.current_stats for p in first] == [p.current_stats for p in second]


def test_aggregate_players_same_seed_same_predictions(sample_records: list[HitRecord]) -> None:
    first = aggregate_players(sample_records, rng=np.random.default_rng(42))
    second = aggregate_players(sample_records, rng=np.random.default_rng(42))

    assert [p.predicted_data for p in first] == [p.predicted_data for p in second]


def test_aggregate_players_unknown_player_gets_defaults() -> None:
    hits = [make_hit("1", 101.0, 410, 27, 2024, "Rookie Nobody")]

    [player] = aggregate_players(hits, metadata=default_metadata_table())

    assert player.team == "MLB Team"
    assert player.position == "Player"
    assert player.bio == "Professional baseball player with exceptional hitting capabilities."
    assert player.image == "https://images.unsplash.com/photo-1?auto=format&fit=crop&q=80&w=100&h=100"


def test_aggregate_players_by_name(sample_records: list[HitRecord]) -> None:
    by_name = aggregate_players_by_name(sample_records, metadata=MetadataTable())

    assert list(by_name) == ["Mike Trout", "Shohei Ohtani"]
    assert by_name["Shohei Ohtani"].id == 2
    assert by_name["Shohei Ohtani"].team == "MLB Team"


def test_build_player_stats_empty_history_raises() -> None:
    with pytest.raises(EmptyHistoryError, match="Ghost"):
        build_player_stats(
            player_id=1,
            name="Ghost",
            historical_data=[],
            metadata=MetadataTable(),
            algorithm=JitterProjection(),
            rng=np.random.default_rng(0),
        )


def test_format_current_stats() -> None:
    current = format_current_stats(SeasonStat(year=2023, avg=2 / 3, hr=5, rbi=14))

    assert current.avg == "0.667"
    assert current.ops == "1.167"
    assert current.hr == 5
    assert current.rbi == 14


def test_player_stats_serializes_with_camel_case_keys(sample_records: list[HitRecord]) -> None:
    player = aggregate_players(sample_records)[0]

    dumped = player.model_dump(by_alias=True)

    assert set(dumped) == {
        "id",
        "name",
        "team",
        "position",
        "image",
        "bio",
        "currentStats",
        "historicalData",
        "predictedData",
    }
    assert dumped["currentStats"] == {"avg": "0.750", "hr": 2, "rbi": 7, "ops": "1.250"}


def test_search_players_matches_substring_ignoring_case(sample_records: list[HitRecord]) -> None:
    players = aggregate_players(sample_records)

    assert [p.name for p in search_players(players, "TROUT")] == ["Mike Trout"]
    assert [p.name for p in search_players(players, "i")] == ["Mike Trout", "Shohei Ohtani"]
    assert [p.id for p in search_players(players, "ohtani")] == [2]
    assert search_players(players, "judge") == []


def test_search_players_empty_search_keeps_everyone(sample_records: list[HitRecord]) -> None:
    players = aggregate_players(sample_records)

    assert search_players(players, None) == players
    assert search_players(players, "") == players
