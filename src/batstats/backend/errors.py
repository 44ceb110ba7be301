# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline


class BatStatsError(Exception):
    """
    Base class for errors raised while loading or aggregating player data.
    """


class InputSourceError(BatStatsError):
    """
    The hit data file is missing or could not be read.
    """


class MalformedRecordError(BatStatsError):
    """
    A hit record is missing a column or has a field that does not parse.
    """


class EmptyHistoryError(BatStatsError):
    """
    A player has no historical seasons to project from.
    """
