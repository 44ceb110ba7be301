# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from datetime import datetime
import logging
import os

from rich.logging import RichHandler


LOGGER_NAME = "batstats"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
FILE_LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] :: %(message)s"


def init_logger(
    log_dir: str | None = ".batstats_logs",
    log_level_console: str = "INFO",
    log_level_file: str = "INFO",
) -> logging.Logger:
    """
    Configure the `batstats` logger and return it.

    Console output goes through rich. When `log_dir` is given, records are also written
    to a file named after the current date in that directory; with `log_dir=None` only the
    console handler is installed, which is what the CLI uses.
    Calling this again replaces the handlers from the previous call.
    """
    _validate_log_level(log_level_console)
    _validate_log_level(log_level_file)

    bs_logger = logging.getLogger(LOGGER_NAME)
    bs_logger.setLevel(logging.DEBUG)
    bs_logger.propagate = False  # prevent double logging
    for handler in list(bs_logger.handlers):
        bs_logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        show_path=log_dir is not None,
        markup=False,
    )
    console_handler.setLevel(log_level_console)
    bs_logger.addHandler(console_handler)

    if log_dir is not None:
        bs_logger.addHandler(_file_handler(log_dir, log_level_file))

    return bs_logger


def _file_handler(log_dir: str, log_level: str) -> logging.FileHandler:
    os.makedirs(log_dir, exist_ok=True)
    handler = logging.FileHandler(
        os.path.join(log_dir, f"{datetime.now().strftime('%Y-%m-%d')}.log"),
        encoding="utf-8",
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def _validate_log_level(log_level: str) -> None:
    """
    Ensure the given log level is one of "DEBUG", "INFO", "WARNING", "ERROR", or "CRITICAL".
    """
    if log_level not in LOG_LEVELS:
        raise ValueError(f"unrecognized log level: {log_level}")
