# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import json
import logging
import os

from pydantic import BaseModel, Field, ValidationError

from batstats.backend.errors import InputSourceError
from batstats.types.api import PlayerMetadata


logger = logging.getLogger("batstats.backend.metadata")


class MetadataTable(BaseModel):
    """
    Lookup of descriptive player info by name, with defaults for players not in the table.

    `default_image` is a format string that receives the player's output id as `{id}`.
    """

    players: dict[str, PlayerMetadata] = Field(default_factory=dict)
    default_team: str = "MLB Team"
    default_position: str = "Player"
    default_image: str = "https://images.unsplash.com/photo-{id}?auto=format&fit=crop&q=80&w=100&h=100"
    default_bio: str = "Professional baseball player with exceptional hitting capabilities."

    def lookup(self, name: str, player_id: int) -> PlayerMetadata:
        """
        Get the metadata for `name`, with every missing field filled from the defaults.
        """
        known = self.players.get(name)
        if known is None:
            logger.debug(f"no metadata for {name}, using defaults")
            known = PlayerMetadata()

        return PlayerMetadata(
            team=known.team or self.default_team,
            position=known.position or self.default_position,
            image=known.image or self.default_image.format(id=player_id),
            bio=known.bio or self.default_bio,
        )


def default_metadata_table() -> MetadataTable:
    """
    Get the built-in metadata table.
    """
    return MetadataTable(
        players={
            "Mike Trout": PlayerMetadata(
                team="Los Angeles Angels",
                position="CF",
                image="https://images.unsplash.com/photo-1631194758628-71ec7c35137e?auto=format&fit=crop&q=80&w=100&h=100",
                bio=(
                    "Mike Trout is widely regarded as one of the greatest baseball players of all time. "
                    "His combination of power, speed, and defensive prowess has earned him numerous accolades."
                ),
            ),
            "Shohei Ohtani": PlayerMetadata(
                team="Los Angeles Dodgers",
                position="DH/SP",
                image="https://images.unsplash.com/photo-1629285483773-6b5cde2171d1?auto=format&fit=crop&q=80&w=100&h=100",
                bio=(
                    "Shohei Ohtani is a unique talent in MLB history, excelling both as a pitcher and hitter. "
                    "His two-way ability has drawn comparisons to Babe Ruth."
                ),
            ),
        },
    )


def load_metadata_table(metadata_path: str | os.PathLike) -> MetadataTable:
    """
    Load a metadata table from a JSON file.

    The file holds the same fields as `MetadataTable`; any field it omits keeps its default.

    Raises:
        InputSourceError: If the file cannot be read or does not hold a valid table.
    """
    try:
        with open(metadata_path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InputSourceError(f"could not read player metadata from {metadata_path}: {e}") from e

    try:
        table = MetadataTable.model_validate(raw)
    except ValidationError as e:
        raise InputSourceError(f"invalid player metadata in {metadata_path}: {e}") from e

    logger.info(f"loaded metadata for {len(table.players)} players from {metadata_path}")
    return table
