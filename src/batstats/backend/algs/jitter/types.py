# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from pydantic import BaseModel, Field


class JitterBounds(BaseModel):
    """
    Relative bounds for the jitter algorithm.
    Each projected value is the last season's value scaled by (1 + u), with u uniform in [-bound, bound].
    """

    avg: float = Field(default=0.05, ge=0.0, lt=1.0)
    hr: float = Field(default=0.10, ge=0.0, lt=1.0)
    rbi: float = Field(default=0.10, ge=0.0, lt=1.0)
    n_seasons: int = Field(default=3, ge=1)
