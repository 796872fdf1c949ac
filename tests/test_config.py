import pytest
from pydantic import ValidationError

from pi_stability.config import DEFAULT_DATA_URL, AppConfig, merge_config


def test_defaults():
    cfg = AppConfig()
    assert cfg.data.url == DEFAULT_DATA_URL
    assert cfg.data.timeout_seconds is None
    assert cfg.data.path is None
    assert cfg.display.default_time_range == "1M"
    assert cfg.display.card_price_threshold == 10_000
    assert cfg.display.tooltip_price_threshold == 1_000


def test_merge_config_nested_override():
    cfg = AppConfig()
    merged = merge_config(
        cfg,
        {
            "data": {"url": "https://example.test/pi.json", "timeout_seconds": None},
            "display": {"default_time_range": "1Y"},
        },
    )
    assert merged.data.url == "https://example.test/pi.json"
    assert merged.data.timeout_seconds is None
    assert merged.display.default_time_range == "1Y"
    assert merged.display.change_lookback == 30


def test_invalid_time_range_rejected():
    with pytest.raises(ValidationError):
        merge_config(AppConfig(), {"display": {"default_time_range": "6M"}})
