"""Π Index chart with colored risk-zone bands and a price overlay."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from pi_stability.metrics.derived import TOOLTIP_PRICE_THRESHOLD, format_axis_price, format_price
from pi_stability.metrics.filtering import x_tick_stride
from pi_stability.zones import ZONES, axis_ticks

PI_LINE_COLOR = "#f5a623"
PRICE_LINE_COLOR = "#555555"
CHART_BACKGROUND = "#0d1117"


@dataclass(frozen=True)
class WindowSnapshot:
    """Last sample of a filtered window, formatted for the card strip."""

    date: str
    price: str
    pi: str


def window_snapshot(window: pd.DataFrame, price_threshold: float = TOOLTIP_PRICE_THRESHOLD) -> WindowSnapshot:
    """Summarize the final row of ``window`` (date, price, Π to 3 decimals)."""
    if window.empty:
        raise ValueError("window is empty.")
    last = window.iloc[-1]
    return WindowSnapshot(
        date=str(last["date"]),
        price=format_price(float(last["price"]), price_threshold),
        pi=f"{float(last['pi']):.3f}",
    )


def price_axis_range(prices: pd.Series) -> tuple[float, float]:
    """Secondary axis domain padded 10% below the minimum and above the maximum."""
    return float(prices.min()) * 0.9, float(prices.max()) * 1.1


def make_zone_chart_figure(
    window: pd.DataFrame,
    time_range: str = "1M",
    title: str | None = None,
    price_threshold: float = TOOLTIP_PRICE_THRESHOLD,
    theme: str = "plotly_dark",
    height: int = 260,
) -> go.Figure:
    """Build the interactive zone chart for one asset's filtered window."""
    if window.empty:
        raise ValueError("No samples available to plot zone chart.")

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    labels = window["date_label"].tolist()
    tooltip_prices = [format_price(float(p), price_threshold) for p in window["price"]]
    fig.add_trace(
        go.Scatter(
            x=labels,
            y=window["price"],
            mode="lines",
            name="Price",
            line=dict(color=PRICE_LINE_COLOR, width=1.5),
            hoverinfo="skip",
        ),
        secondary_y=True,
    )
    fig.add_trace(
        go.Scatter(
            x=labels,
            y=window["pi"],
            mode="lines",
            name="Π Index",
            line=dict(color=PI_LINE_COLOR, width=2.5),
            customdata=np.column_stack([window["date"], tooltip_prices]),
            hovertemplate="%{customdata[0]}<br>Π Index %{y:.3f}<br>Price %{customdata[1]}<extra></extra>",
        ),
        secondary_y=False,
    )
    _add_zone_shapes(fig)

    ticks = axis_ticks()
    fig.update_yaxes(
        range=[ticks[0], ticks[-1]],
        tickvals=ticks,
        ticktext=[f"{t:.1f}" for t in ticks],
        showgrid=False,
        secondary_y=False,
    )
    low, high = price_axis_range(window["price"])
    price_ticks = np.linspace(low, high, 5)
    fig.update_yaxes(
        range=[low, high],
        tickvals=price_ticks,
        ticktext=[format_axis_price(v) for v in price_ticks],
        showgrid=False,
        secondary_y=True,
    )
    stride = x_tick_stride(time_range, len(labels))
    fig.update_xaxes(type="category", tickvals=labels[::stride], showgrid=False)
    fig.update_layout(
        title=title,
        template=theme,
        height=height,
        showlegend=True,
        plot_bgcolor=CHART_BACKGROUND,
        margin=dict(l=10, r=10, t=40 if title else 10, b=10),
        hovermode="x unified",
    )
    return fig


def plot_zone_chart(
    window: pd.DataFrame,
    time_range: str = "1M",
    title: str | None = None,
    show: bool = True,
    save_path: str | None = None,
    backend: str = "plotly",
):
    """Plot the zone chart with the plotly or matplotlib backend."""
    chart_title = title or "Π Index"

    if backend == "matplotlib":
        if window.empty:
            raise ValueError("No samples available to plot zone chart.")
        fig, ax = plt.subplots(figsize=(10, 4))
        for zone in ZONES:
            ax.axhspan(zone.lower, zone.upper, color=zone.color, alpha=0.25, linewidth=0)
        for zone in ZONES[:-1]:
            ax.axhline(zone.upper, color=zone.color, linestyle="--", linewidth=1)
        positions = np.arange(len(window))
        ax.plot(positions, window["pi"], color=PI_LINE_COLOR, linewidth=2.5, label="Π Index")
        ax.set_ylim(0.0, 1.0)
        ax.set_yticks(axis_ticks())
        ax.set_ylabel("Π Index")
        stride = x_tick_stride(time_range, len(window))
        ax.set_xticks(positions[::stride])
        ax.set_xticklabels(window["date_label"].iloc[::stride], rotation=45, fontsize=8)

        price_ax = ax.twinx()
        price_ax.plot(positions, window["price"], color=PRICE_LINE_COLOR, linewidth=1.5, label="Price")
        price_ax.set_ylim(*price_axis_range(window["price"]))
        price_ax.set_ylabel("Price")
        ax.set_title(chart_title)
        ax.legend(loc="upper left")
        fig.tight_layout()

        if save_path:
            fig.savefig(save_path)
        if show:
            plt.show()
        return fig

    fig = make_zone_chart_figure(window, time_range=time_range, title=chart_title)

    if save_path:
        _save_plotly(fig, save_path)
    if show:
        fig.show()
    return fig


def _save_plotly(fig: go.Figure, save_path: str) -> None:
    out = Path(save_path)
    if out.suffix.lower() == ".html":
        fig.write_html(str(out))
    else:
        fig.write_image(str(out))


def _add_zone_shapes(fig: go.Figure) -> None:
    # Bands and threshold lines live on the primary (Π) axis across the full width.
    for zone in ZONES:
        fig.add_shape(
            type="rect",
            xref="paper",
            x0=0,
            x1=1,
            yref="y",
            y0=zone.lower,
            y1=zone.upper,
            fillcolor=zone.color,
            opacity=0.25,
            line_width=0,
            layer="below",
        )
    for zone in ZONES[:-1]:
        fig.add_shape(
            type="line",
            xref="paper",
            x0=0,
            x1=1,
            yref="y",
            y0=zone.upper,
            y1=zone.upper,
            line=dict(color=zone.color, width=1, dash="dash"),
        )
