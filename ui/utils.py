"""UI helper utilities (pure logic, testable without Streamlit)."""

from __future__ import annotations

import html
from dataclasses import dataclass

import pandas as pd

from pi_stability.config import AppConfig
from pi_stability.data.models import AssetSeries
from pi_stability.metrics.derived import AssetMetrics, derive_asset_metrics
from pi_stability.metrics.filtering import filter_series
from pi_stability.viz.zone_chart import WindowSnapshot, window_snapshot
from pi_stability.zones import ZONES, SystemStatus, status_style


@dataclass(frozen=True)
class CardView:
    """Everything one asset card renders for the selected time range."""

    metrics: AssetMetrics
    time_range: str
    window: pd.DataFrame
    snapshot: WindowSnapshot | None


def build_card_view(key: str, series: AssetSeries, time_range: str, cfg: AppConfig) -> CardView:
    """Derive card metrics and the filtered chart window for one asset."""
    metrics = derive_asset_metrics(
        key,
        series,
        lookback=cfg.display.change_lookback,
        price_threshold=cfg.display.card_price_threshold,
    )
    window = filter_series(series, time_range)
    snapshot = window_snapshot(window, cfg.display.tooltip_price_threshold) if not window.empty else None
    return CardView(metrics=metrics, time_range=time_range, window=window, snapshot=snapshot)


def status_badge_html(status: str) -> str:
    style = status_style(status)
    return (
        f"<span style='padding:4px 10px;border-radius:6px;font-size:0.75rem;font-weight:600;"
        f"background-color:{style.background};color:{style.color};'>{html.escape(status)}</span>"
    )


def legend_html() -> str:
    """Four zone tiles with their Π ranges, in ascending risk order."""
    tiles = []
    for zone in ZONES:
        tiles.append(
            f"<div style='flex:1;padding:10px 12px;border-radius:8px;text-align:center;"
            f"background-color:{zone.background};border-left:3px solid {zone.color};'>"
            f"<div style='color:{zone.color};font-weight:600;font-size:0.75rem;'>{zone.status.value}</div>"
            f"<div style='color:#6b7280;font-size:0.75rem;'>{html.escape(zone.range_label)}</div></div>"
        )
    return f"<div style='display:flex;gap:8px;margin-bottom:16px;'>{''.join(tiles)}</div>"


def banner_html(status: SystemStatus) -> str:
    return (
        f"<div style='padding:12px;border-radius:8px;margin-bottom:16px;"
        f"background-color:{status.color}15;border:1px solid {status.color}40;'>"
        f"<span style='color:{status.color};font-weight:600;'>✦ </span>"
        f"<span style='color:#d1d5db;'>{html.escape(status.message)}</span></div>"
    )


def average_badge_html(avg_pi: float, status: SystemStatus) -> str:
    return (
        "<div style='display:flex;align-items:center;gap:12px;padding:10px 16px;border-radius:12px;"
        "background-color:#1a1a24;border:1px solid #2a2a3a;width:fit-content;margin-left:auto;'>"
        "<span style='font-size:0.75rem;color:#6b7280;text-transform:uppercase;'>Avg</span>"
        f"<span style='font-size:1.5rem;font-weight:700;font-family:monospace;color:{status.color};'>"
        f"{avg_pi:.2f}</span>"
        f"<span style='width:10px;height:10px;border-radius:50%;background-color:{status.color};"
        f"box-shadow:0 0 10px {status.color};'></span></div>"
    )


def card_header_html(metrics: AssetMetrics) -> str:
    return (
        "<div style='display:flex;justify-content:space-between;align-items:flex-start;'>"
        f"<div><div style='font-size:1.1rem;font-weight:700;'>{html.escape(metrics.name)}</div>"
        f"<div style='font-size:0.75rem;color:#6b7280;font-family:monospace;'>{html.escape(metrics.ticker)}</div></div>"
        "<div style='text-align:right;'>"
        f"<div style='font-size:1.9rem;font-weight:700;font-family:monospace;color:{metrics.status_color};'>"
        f"{metrics.latest_pi:.2f}</div>"
        f"<div style='font-size:0.75rem;font-family:monospace;color:{metrics.change_color};'>"
        f"{metrics.change_display}</div></div></div>"
    )
