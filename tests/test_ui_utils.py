from pi_stability.config import AppConfig
from pi_stability.data.loaders import load_from_json, parse_dataset
from pi_stability.zones import classify
from ui.state import UIState
from ui.utils import (
    banner_html,
    build_card_view,
    legend_html,
    status_badge_html,
)


def test_build_card_view_combines_metrics_and_window(sample_dataset_path) -> None:
    dataset = load_from_json(sample_dataset_path)
    card = build_card_view("BTC", dataset["BTC"], "1W", AppConfig())

    assert card.metrics.name == "Bitcoin"
    assert card.metrics.price_display == "$45,900"
    assert len(card.window) == 7
    assert card.snapshot is not None
    assert card.snapshot.pi == "0.500"


def test_build_card_view_short_history_shows_everything(sample_dataset_path) -> None:
    dataset = load_from_json(sample_dataset_path)
    card = build_card_view("ETH", dataset["ETH"], "1Y", AppConfig())

    assert len(card.window) == 5
    assert card.metrics.change_glyph == "▼"
    assert card.metrics.price_display == "$2340.00"
    assert card.snapshot.price == "$2,340"


def test_legend_lists_every_zone_in_order() -> None:
    legend = legend_html()
    positions = [legend.index(label) for label in ("STABLE", "ELEVATED", "CAUTION", "CRITICAL")]
    assert positions == sorted(positions)
    assert "0.45-0.60" in legend


def test_banner_and_badge_escape_and_color() -> None:
    assert "Critical alert" in banner_html(classify(0.95))
    badge = status_badge_html("<b>")
    assert "&lt;b&gt;" in badge
    assert "#00d4aa" in badge


def test_ui_state_tracks_ranges_per_asset() -> None:
    state = UIState()
    assert state.time_range("BTC", "1M") == "1M"
    state.select_time_range("BTC", "1Y")
    assert state.time_range("BTC", "1M") == "1Y"
    assert state.time_range("ETH", "1M") == "1M"


def test_build_card_view_empty_history_renders_placeholder() -> None:
    dataset = parse_dataset(
        {
            "BTC": {
                "dates": [],
                "pi": [],
                "price": [],
                "latest": {"pi": 0.52, "price": 43000, "status": "ELEVATED", "date": "2024-02-09"},
            }
        }
    )
    card = build_card_view("BTC", dataset["BTC"], "1M", AppConfig())

    assert card.window.empty
    assert card.snapshot is None
    assert card.metrics.change_display == "– n/a"
    assert card.metrics.status == "ELEVATED"
