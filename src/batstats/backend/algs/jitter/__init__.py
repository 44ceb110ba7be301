# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline
"""Random-jitter season projection algorithm."""

from batstats.backend.algs.jitter.base import JitterProjection
from batstats.backend.algs.jitter.types import JitterBounds

__all__ = ["JitterBounds", "JitterProjection"]
