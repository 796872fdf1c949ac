"""Display metrics derived from the published dataset."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from pi_stability.data.models import AssetSeries, Dataset
from pi_stability.zones import SystemStatus, classify, status_style

CARD_PRICE_THRESHOLD = 10_000.0
TOOLTIP_PRICE_THRESHOLD = 1_000.0
DEFAULT_CHANGE_LOOKBACK = 30

RISK_UP_COLOR = "#ff4757"
RISK_DOWN_COLOR = "#00d4aa"
NEUTRAL_COLOR = "#8b8b95"

ASSET_NAMES: dict[str, tuple[str, str]] = {
    "SPY": ("S&P 500", "SPY"),
    "QQQ": ("NASDAQ 100", "QQQ"),
    "BTC": ("Bitcoin", "BTC-USD"),
    "ETH": ("Ethereum", "ETH-USD"),
}


@dataclass(frozen=True)
class ChangeDirection:
    glyph: str
    color: str


@dataclass(frozen=True)
class AssetMetrics:
    """Per-asset headline values for a dashboard card."""

    key: str
    name: str
    ticker: str
    latest_pi: float
    latest_price: float
    latest_date: str
    status: str
    status_color: str
    status_background: str
    baseline_pi: float
    change_pct: float
    change_glyph: str
    change_color: str
    price_display: str

    @property
    def change_display(self) -> str:
        if math.isnan(self.change_pct):
            return f"{self.change_glyph} n/a"
        return f"{self.change_glyph} {abs(self.change_pct):.1f}%"


@dataclass(frozen=True)
class DashboardSummary:
    """Cross-asset aggregate feeding the summary banner."""

    avg_pi: float
    status: SystemStatus
    assets: list[AssetMetrics]
    last_updated: str | None


def asset_display_name(key: str) -> tuple[str, str]:
    """Human name and ticker for an asset key; unknown keys show the key itself."""
    return ASSET_NAMES.get(key, (key, key))


def baseline_pi(pi: Sequence[float], lookback: int = DEFAULT_CHANGE_LOOKBACK) -> float:
    """Π value ``lookback + 1`` samples before the end, or the first sample.

    An empty history has no baseline and yields NaN, which propagates into a
    NaN change.
    """
    if len(pi) == 0:
        return float("nan")
    if len(pi) > lookback:
        return float(pi[len(pi) - lookback - 1])
    return float(pi[0])


def compute_change_pct(latest_pi: float, baseline: float) -> float:
    """Percent change of ``latest_pi`` over ``baseline``; NaN for a zero baseline."""
    if baseline == 0:
        return float("nan")
    return (latest_pi - baseline) / baseline * 100.0


def change_direction(change_pct: float) -> ChangeDirection:
    """Glyph and colour by risk direction: a rising Π is drawn red."""
    if math.isnan(change_pct):
        return ChangeDirection(glyph="–", color=NEUTRAL_COLOR)
    if change_pct >= 0:
        return ChangeDirection(glyph="▲", color=RISK_UP_COLOR)
    return ChangeDirection(glyph="▼", color=RISK_DOWN_COLOR)


def format_price(price: float, large_threshold: float = CARD_PRICE_THRESHOLD) -> str:
    """Dollar string: grouped whole dollars at or above the threshold, cents below."""
    if price >= large_threshold:
        return f"${_round_half_up(price):,}"
    return f"${price:.2f}"


def format_axis_price(value: float) -> str:
    """Compact price-axis tick label (``12K`` style above 1,000)."""
    if value >= 1_000:
        return f"{_round_half_up(value / 1_000)}K"
    return str(_round_half_up(value))


def derive_asset_metrics(
    key: str,
    series: AssetSeries,
    lookback: int = DEFAULT_CHANGE_LOOKBACK,
    price_threshold: float = CARD_PRICE_THRESHOLD,
) -> AssetMetrics:
    """Compute the headline card values for one asset."""
    latest = series.latest
    name, ticker = asset_display_name(key)
    base = baseline_pi(series.pi, lookback)
    change = compute_change_pct(latest.pi, base)
    direction = change_direction(change)
    style = status_style(latest.status)
    return AssetMetrics(
        key=key,
        name=name,
        ticker=ticker,
        latest_pi=latest.pi,
        latest_price=latest.price,
        latest_date=latest.date,
        status=latest.status,
        status_color=style.color,
        status_background=style.background,
        baseline_pi=base,
        change_pct=change,
        change_glyph=direction.glyph,
        change_color=direction.color,
        price_display=format_price(latest.price, price_threshold),
    )


def compute_average_pi(dataset: Dataset) -> float:
    """Unweighted mean of every asset's latest Π."""
    if not dataset:
        raise ValueError("dataset contains no assets.")
    values = np.array([series.latest.pi for series in dataset.values()], dtype=float)
    return float(values.mean())


def summarize_dataset(
    dataset: Dataset,
    lookback: int = DEFAULT_CHANGE_LOOKBACK,
    price_threshold: float = CARD_PRICE_THRESHOLD,
    last_updated: str | None = None,
) -> DashboardSummary:
    """Average Π, its status and per-asset metrics in display order."""
    avg = compute_average_pi(dataset)
    assets = [
        derive_asset_metrics(key, series, lookback=lookback, price_threshold=price_threshold)
        for key, series in dataset.items()
    ]
    return DashboardSummary(avg_pi=avg, status=classify(avg), assets=assets, last_updated=last_updated)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
