"""Π Stability Index Streamlit UI."""

from __future__ import annotations

import html
from pathlib import Path

import streamlit as st

from pi_stability.config import AppConfig, build_config
from pi_stability.data.loaders import Failed, Loading, Ready, load_dataset
from pi_stability.data.models import AssetSeries
from pi_stability.metrics.derived import compute_average_pi
from pi_stability.metrics.filtering import TIME_RANGES
from pi_stability.viz.zone_chart import make_zone_chart_figure
from pi_stability.zones import classify
try:
    from ui.state import UIState
    from ui.utils import (
        average_badge_html,
        banner_html,
        build_card_view,
        card_header_html,
        legend_html,
        status_badge_html,
    )
except ModuleNotFoundError:
    # Supports direct execution via: streamlit run ui/streamlit_app.py
    from state import UIState  # type: ignore
    from utils import (  # type: ignore
        average_badge_html,
        banner_html,
        build_card_view,
        card_header_html,
        legend_html,
        status_badge_html,
    )

STATE_KEY = "pi_ui_state"
CONFIG_PATH = Path("config.yaml")
DISCLAIMER = (
    "⚠️ Disclaimer: Personal research by "
    "[@Junwon777](https://x.com/Junwon777). Core logic is proprietary. Not financial advice."
)


def get_state() -> UIState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = UIState()
    return st.session_state[STATE_KEY]


def _load_config() -> AppConfig:
    return build_config(config_path=CONFIG_PATH) if CONFIG_PATH.exists() else AppConfig()


def _ensure_loaded(state: UIState, cfg: AppConfig) -> None:
    if not isinstance(state.load_state, Loading):
        return
    with st.spinner("Loading..."):
        state.load_state = load_dataset(
            url=cfg.data.url, path=cfg.data.path, timeout=cfg.data.timeout_seconds
        )


def _render_error(message: str) -> None:
    st.markdown(
        "<div style='min-height:70vh;display:flex;align-items:center;justify-content:center;'>"
        f"<div style='color:#f87171;font-size:1.1rem;'>Error: {html.escape(message)}</div></div>",
        unsafe_allow_html=True,
    )


def _render_header(avg_pi: float) -> None:
    status = classify(avg_pi)
    left, right = st.columns([3, 1])
    with left:
        st.title("Π Stability Index")
        st.caption("Cross-domain systemic risk monitoring")
    with right:
        st.markdown(average_badge_html(avg_pi, status), unsafe_allow_html=True)
    st.markdown(legend_html(), unsafe_allow_html=True)
    st.markdown(banner_html(status), unsafe_allow_html=True)


def _render_asset_card(state: UIState, key: str, series: AssetSeries, cfg: AppConfig) -> None:
    default = state.time_range(key, cfg.display.default_time_range)
    with st.container(border=True):
        selected = st.radio(
            "Range",
            options=list(TIME_RANGES),
            index=TIME_RANGES.index(default),
            horizontal=True,
            key=f"range_{key}",
            label_visibility="collapsed",
        )
        state.select_time_range(key, selected)
        card = build_card_view(key, series, selected, cfg)

        st.markdown(card_header_html(card.metrics), unsafe_allow_html=True)
        st.markdown(
            f"{status_badge_html(card.metrics.status)} "
            f"<span style='color:#9ca3af;font-size:0.9rem;'>{card.metrics.price_display}</span>",
            unsafe_allow_html=True,
        )
        if card.snapshot is None:
            st.info("No samples available for this asset.")
            return

        cols = st.columns(3)
        cols[0].metric("Date", card.snapshot.date)
        cols[1].metric("Price", card.snapshot.price)
        cols[2].metric("Π Index", card.snapshot.pi)
        fig = make_zone_chart_figure(
            card.window,
            time_range=selected,
            price_threshold=cfg.display.tooltip_price_threshold,
            theme=cfg.display.theme,
        )
        st.plotly_chart(fig, width="stretch", key=f"chart_{key}")


def _render_footer(last_updated: str | None) -> None:
    st.divider()
    st.caption(DISCLAIMER)
    if last_updated:
        st.caption(f"Last updated: {last_updated}")


def main() -> None:
    st.set_page_config(page_title="Π Stability Index", layout="wide")
    cfg = _load_config()
    state = get_state()
    _ensure_loaded(state, cfg)

    load_state = state.load_state
    if isinstance(load_state, Failed):
        _render_error(load_state.message)
        st.stop()
    if not isinstance(load_state, Ready):
        return

    dataset = load_state.dataset
    _render_header(compute_average_pi(dataset))

    columns = st.columns(2)
    for idx, (key, series) in enumerate(dataset.items()):
        with columns[idx % 2]:
            _render_asset_card(state, key, series, cfg)

    _render_footer(load_state.last_updated)


if __name__ == "__main__":
    main()
