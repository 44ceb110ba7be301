# SPDX-License-Identifier: MIT

from __future__ import annotations

from pathlib import Path

import pytest

from batstats.backend.loading import parse_hit_records
from batstats.types.api import HitRecord


SAMPLE_CSV = """play_id,ExitVelocity,HitDistance,LaunchAngle,Year,PlayerName
1,105.2,425,32,2023,Mike Trout
2,98.7,389,25,2023,Mike Trout
3,110.5,450,28,2023,Mike Trout
4,92.3,350,18,2023,Mike Trout
5,107.8,432,30,2023,Shohei Ohtani
6,112.4,465,35,2023,Shohei Ohtani
7,103.9,410,27,2023,Shohei Ohtani
8,95.6,375,22,2023,Shohei Ohtani
9,108.3,445,31,2022,Mike Trout
10,99.5,392,26,2022,Mike Trout
11,106.7,428,29,2022,Mike Trout
12,93.8,365,20,2022,Mike Trout
13,109.1,455,33,2022,Shohei Ohtani
14,111.8,460,34,2022,Shohei Ohtani
15,102.4,405,28,2022,Shohei Ohtani
16,97.2,382,24,2022,Shohei Ohtani
"""


@pytest.fixture
def sample_records() -> list[HitRecord]:
    return parse_hit_records(SAMPLE_CSV)


@pytest.fixture
def hit_csv(tmp_path: Path) -> Path:
    path = tmp_path / "player_stats.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


def make_hit(
    play_id: str,
    exit_velocity: float,
    hit_distance: float,
    launch_angle: float,
    year: int,
    player_name: str,
) -> HitRecord:
    return HitRecord(
        play_id=play_id,
        exit_velocity=exit_velocity,
        hit_distance=hit_distance,
        launch_angle=launch_angle,
        year=year,
        player_name=player_name,
    )
