"""Trailing time-range windows over an asset's history."""

from __future__ import annotations

from typing import get_args

import pandas as pd

from pi_stability.config import TimeRange
from pi_stability.data.models import AssetSeries

TIME_RANGES: tuple[str, ...] = get_args(TimeRange)

# Samples kept from the end of the history; None keeps everything.
RANGE_LOOKBACK: dict[str, int | None] = {
    "1D": 2,
    "1W": 7,
    "1M": 30,
    "1Y": 365,
    "MAX": None,
}


def slice_start(length: int, time_range: str) -> int:
    """First index of the trailing window, clamped at the start of the history."""
    if time_range not in RANGE_LOOKBACK:
        raise ValueError(f"Unsupported time_range='{time_range}'. Use one of {', '.join(TIME_RANGES)}.")
    if length < 0:
        raise ValueError("length must be non-negative.")
    lookback = RANGE_LOOKBACK[time_range]
    if lookback is None:
        return 0
    return max(0, length - lookback)


def filter_series(series: AssetSeries, time_range: str) -> pd.DataFrame:
    """Return the trailing window of ``series`` as an index-paired frame.

    Columns are ``date``, ``date_label`` (date without the year), ``pi`` and
    ``price``. Short histories degrade to the whole series.
    """
    length = len(series.dates)
    start = slice_start(length, time_range)
    dates = series.dates[start:]
    # Pair by position on dates; a shorter pi or price list fails loudly here.
    window = pd.DataFrame(
        {
            "date": dates,
            "date_label": [d[5:] for d in dates],
            "pi": series.pi[start : start + len(dates)],
            "price": series.price[start : start + len(dates)],
        }
    )
    return window.reset_index(drop=True)


def x_tick_stride(time_range: str, n_points: int) -> int:
    """Spacing between labelled x-axis ticks for a window of ``n_points``."""
    if time_range == "1W":
        return 1
    if time_range == "1M":
        return 7
    return max(1, n_points // 5 + 1)
