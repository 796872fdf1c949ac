"""Typed Streamlit session state models for the Π dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field

from pi_stability.data.loaders import Loading, LoadState


@dataclass
class UIState:
    """Session-backed state container for the dashboard."""

    load_state: LoadState = field(default_factory=Loading)
    time_ranges: dict[str, str] = field(default_factory=dict)

    def time_range(self, asset: str, default: str) -> str:
        return self.time_ranges.get(asset, default)

    def select_time_range(self, asset: str, time_range: str) -> None:
        self.time_ranges[asset] = time_range
