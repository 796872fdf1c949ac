"""Visualization subpackage exports."""

from pi_stability.viz.zone_chart import (
    WindowSnapshot,
    make_zone_chart_figure,
    plot_zone_chart,
    price_axis_range,
    window_snapshot,
)

__all__ = [
    "WindowSnapshot",
    "make_zone_chart_figure",
    "plot_zone_chart",
    "price_axis_range",
    "window_snapshot",
]
