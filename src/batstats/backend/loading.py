# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import io
import logging
import os

import pandas as pd
from pydantic import ValidationError

from batstats.backend.errors import InputSourceError, MalformedRecordError
from batstats.types.api import HitRecord


logger = logging.getLogger("batstats.backend.loading")

TEXT_COLUMNS = ["play_id", "PlayerName"]
NUMERIC_COLUMNS = ["ExitVelocity", "HitDistance", "LaunchAngle", "Year"]
REQUIRED_COLUMNS = TEXT_COLUMNS + NUMERIC_COLUMNS


def load_hit_records(data_path: str | os.PathLike) -> list[HitRecord]:
    """
    Read the hit data file at `data_path` into a list of hit records.

    Args:
        data_path: Path to a CSV file with a header row.

    Returns:
        The records in file order.

    Raises:
        InputSourceError: If the file is missing or cannot be read.
        MalformedRecordError: If a column is missing or a field does not parse.
    """
    logger.debug(f"loading hit records from {data_path}")
    try:
        with open(data_path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise InputSourceError(f"could not read hit data from {data_path}: {e}") from e

    records = parse_hit_records(content)
    logger.debug(f"loaded {len(records)} hit records from {data_path}")
    return records


def parse_hit_records(content: str) -> list[HitRecord]:
    """
    Parse CSV text (header row first) into hit records. Blank lines are skipped.
    """
    try:
        df = pd.read_csv(
            io.StringIO(content),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError as e:
        raise MalformedRecordError("hit data has no header row") from e
    except pd.errors.ParserError as e:
        raise MalformedRecordError(f"could not parse hit data: {e}") from e

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise MalformedRecordError(f"hit data is missing columns: {', '.join(missing)}")

    df = df[REQUIRED_COLUMNS].copy()

    # short rows leave NaN, empty cells leave ""
    blank = pd.DataFrame(
        {col: df[col].isna() | (df[col].str.strip() == "") for col in REQUIRED_COLUMNS}
    )
    blank_rows = blank.any(axis=1)
    if blank_rows.any():
        record_no = int(blank_rows.idxmax()) + 1
        raise MalformedRecordError(f"hit data has an empty field in record {record_no}")

    for col in NUMERIC_COLUMNS:
        try:
            df[col] = pd.to_numeric(df[col].str.strip(), errors="raise")
        except (ValueError, TypeError) as e:
            raise MalformedRecordError(f"non-numeric value in column {col}: {e}") from e
        if df[col].isna().any():
            raise MalformedRecordError(f"non-numeric value in column {col}: NaN")

    records = []
    for i, row in enumerate(df.to_dict("records")):
        try:
            records.append(HitRecord.model_validate(row))
        except ValidationError as e:
            raise MalformedRecordError(f"invalid hit record {i + 1}: {e}") from e

    return records
