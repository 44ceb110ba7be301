# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from pydantic import BaseModel, ConfigDict, Field


class HitRecord(BaseModel):
    """
    One batted-ball event, as read from a row of the hit data file.

    Field aliases match the column headers of the file, so a parsed row can be
    validated directly.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    play_id: str
    exit_velocity: float = Field(alias="ExitVelocity")  # mph
    hit_distance: float = Field(alias="HitDistance")  # feet
    launch_angle: float = Field(alias="LaunchAngle")  # degrees
    year: int = Field(alias="Year")
    player_name: str = Field(alias="PlayerName")


class SeasonStat(BaseModel):
    """
    Derived stats for one player in one season (historical or predicted).
    """

    year: int
    avg: float
    hr: int
    rbi: int


class CurrentStats(BaseModel):
    """
    Display snapshot of the current season, with avg and ops pre-formatted.
    """

    avg: str
    hr: int
    rbi: int
    ops: str


class PlayerStats(BaseModel):
    """
    Everything the player view needs for one player.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    team: str
    position: str
    image: str
    bio: str
    current_stats: CurrentStats = Field(alias="currentStats")
    historical_data: list[SeasonStat] = Field(alias="historicalData")
    predicted_data: list[SeasonStat] = Field(alias="predictedData")


class PlayerMetadata(BaseModel):
    """
    Descriptive info for a known player. Missing fields fall back to the table defaults.
    """

    team: str | None = None
    position: str | None = None
    image: str | None = None
    bio: str | None = None
