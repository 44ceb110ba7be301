# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, with ties going away from zero (6.5 -> 7, -6.5 -> -7).

    The built-in `round` sends ties to the even neighbour, which would turn 6.5 into 6.
    Rounding goes through the shortest decimal form of the float, so values just below
    a tie (0.49999999999999994) still round down.
    """
    return int(Decimal(str(float(value))).quantize(Decimal(1), rounding=ROUND_HALF_UP))
