# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from abc import abstractmethod
from typing import Any

import numpy as np

from batstats.types.api import SeasonStat


class ProjectionAlgorithm:
    """
    Base class for a BatStats projection algorithm.
    """

    def __init__(
        self,
        name: str,
        **kwargs: Any,
    ) -> None:
        self.name = name
        self.kwargs = kwargs

    @abstractmethod
    def project(
        self,
        historical_data: list[SeasonStat],
        rng: np.random.Generator,
    ) -> list[SeasonStat]:
        """
        Project the seasons following the last entry of `historical_data`.
        """
        pass

    @abstractmethod
    def get_metadata(self) -> dict[str, Any]:
        """
        Get the metadata for the algorithm, including usage information.
        """
        pass
