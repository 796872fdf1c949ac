"""Metrics subpackage exports."""

from pi_stability.metrics.derived import (
    AssetMetrics,
    DashboardSummary,
    asset_display_name,
    baseline_pi,
    change_direction,
    compute_average_pi,
    compute_change_pct,
    derive_asset_metrics,
    format_axis_price,
    format_price,
    summarize_dataset,
)
from pi_stability.metrics.filtering import TIME_RANGES, filter_series, slice_start, x_tick_stride

__all__ = [
    "TIME_RANGES",
    "slice_start",
    "filter_series",
    "x_tick_stride",
    "AssetMetrics",
    "DashboardSummary",
    "asset_display_name",
    "baseline_pi",
    "compute_change_pct",
    "change_direction",
    "format_price",
    "format_axis_price",
    "derive_asset_metrics",
    "compute_average_pi",
    "summarize_dataset",
]
