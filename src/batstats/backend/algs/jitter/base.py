# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import logging
from typing import Any

import numpy as np

from batstats.backend.algs.base import ProjectionAlgorithm
from batstats.backend.algs.jitter.types import JitterBounds
from batstats.backend.errors import EmptyHistoryError
from batstats.types.api import SeasonStat
from batstats.utils.rounding import round_half_away


class JitterProjection(ProjectionAlgorithm):
    """
    The BatStats projection that perturbs the latest season by bounded random noise.

    Every projected season is drawn independently from the last historical season,
    so projections do not compound from one year to the next.
    """

    def __init__(
        self,
        name: str = "jitter",
        bounds: JitterBounds | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, **kwargs)
        self.bounds = bounds or JitterBounds()
        self.logger = logging.getLogger("batstats.backend.algs.jitter")

    def project(
        self,
        historical_data: list[SeasonStat],
        rng: np.random.Generator,
    ) -> list[SeasonStat]:
        """
        Project `n_seasons` seasons following the last historical season.

        Raises:
            EmptyHistoryError: If there is no historical season to project from.
        """
        if not historical_data:
            raise EmptyHistoryError("cannot project seasons without any historical data")

        last = historical_data[-1]
        predicted = []
        for offset in range(1, self.bounds.n_seasons + 1):
            avg_jitter = rng.uniform(-self.bounds.avg, self.bounds.avg)
            hr_jitter = rng.uniform(-self.bounds.hr, self.bounds.hr)
            rbi_jitter = rng.uniform(-self.bounds.rbi, self.bounds.rbi)
            predicted.append(
                SeasonStat(
                    year=last.year + offset,
                    avg=float(last.avg * (1 + avg_jitter)),
                    hr=round_half_away(last.hr * (1 + hr_jitter)),
                    rbi=round_half_away(last.rbi * (1 + rbi_jitter)),
                )
            )

        self.logger.debug(f"projected {len(predicted)} seasons from {last.year}")
        return predicted

    def get_metadata(self) -> dict[str, Any]:
        """
        Get the metadata for the jitter algorithm.
        """
        return {
            "name": self.name,
            "description": "latest season scaled by independent uniform noise per field and year",
            "bounds": self.bounds.model_dump(),
        }
