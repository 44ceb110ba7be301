# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import logging
import os
from pathlib import Path
from typing import Any

import numpy as np

from batstats.backend.aggregation import aggregate_players, search_players
from batstats.backend.algs import get_algorithm_by_name
from batstats.backend.loading import load_hit_records
from batstats.backend.logging import init_logger
from batstats.backend.metadata import MetadataTable, default_metadata_table, load_metadata_table
from batstats.types.api import PlayerStats


DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "player_stats.csv"


class BatStats:
    """
    Aggregate batted-ball events into current, historical, and predicted player stats.
    """

    def __init__(
        self,
        data_path: str | os.PathLike = DEFAULT_DATA_PATH,
        metadata: MetadataTable | None = None,
        metadata_path: str | os.PathLike | None = None,
        algorithm: str = "jitter",
        seed: int | None = None,
        enable_logging: bool = True,
        log_dir: str | None = ".batstats_logs",
        log_level_console: str = "INFO",
        log_level_file: str = "INFO",
    ) -> None:
        self.data_path = data_path
        self.seed = seed
        self.enable_logging = enable_logging
        self.log_dir = log_dir
        self.log_level_console = log_level_console
        self.log_level_file = log_level_file

        if self.enable_logging:
            init_logger(
                log_dir=self.log_dir,
                log_level_console=self.log_level_console,
                log_level_file=self.log_level_file,
            )
        self.logger = logging.getLogger("batstats.api")

        if metadata is not None and metadata_path is not None:
            raise ValueError("pass either metadata or metadata_path, not both")
        if metadata_path is not None:
            metadata = load_metadata_table(metadata_path)
        self.metadata = metadata or default_metadata_table()

        self.algorithm = get_algorithm_by_name(algorithm)

    def get_players(self, search: str | None = None) -> list[PlayerStats]:
        """
        Read the hit data file and aggregate it into player stats.

        With `search`, only players whose name contains it (ignoring case) are returned.

        The file is re-read and projections are re-drawn on every call. With a `seed`,
        each call starts from the same generator state, so results repeat.
        """
        self.logger.debug(f"get_players called with data_path={self.data_path}")
        records = load_hit_records(self.data_path)
        players = aggregate_players(
            records,
            metadata=self.metadata,
            algorithm=self.algorithm,
            rng=np.random.default_rng(self.seed),
        )
        self.logger.info(f"aggregated {len(records)} hits into stats for {len(players)} players")
        return search_players(players, search)

    def get_player(self, player_id: int) -> PlayerStats | None:
        """
        Get the stats for the player with the given output id, or None if there is no such player.
        """
        players = self.get_players()
        if 1 <= player_id <= len(players):
            return players[player_id - 1]
        return None

    def get_metadata(self) -> dict[str, Any]:
        """
        Get information about the current configuration.
        """
        return {
            "data_path": str(self.data_path),
            "n_known_players": len(self.metadata.players),
            "algorithm": self.algorithm.get_metadata(),
            "seed": self.seed,
        }
