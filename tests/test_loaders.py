import json
import logging

import pytest
import requests

import pi_stability.data.loaders as loaders
from pi_stability.data.loaders import (
    DatasetLoadError,
    Failed,
    Ready,
    fetch_dataset,
    load_dataset,
    load_from_json,
    parse_dataset,
)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self._text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


def _raw_asset(n=3, latest_date="2024-01-03"):
    return {
        "dates": [f"2024-01-{i + 1:02d}" for i in range(n)],
        "pi": [0.1 * (i + 1) for i in range(n)],
        "price": [100.0 + i for i in range(n)],
        "latest": {"pi": 0.1 * n, "price": 100.0 + n - 1, "status": "STABLE", "date": latest_date},
    }


def test_load_from_json_preserves_asset_order(sample_dataset_path):
    dataset = load_from_json(sample_dataset_path)
    assert list(dataset) == ["SPY", "BTC", "ETH"]
    assert len(dataset["SPY"]) == 40
    assert dataset["ETH"].latest.status == "CRITICAL"
    assert all(series.is_aligned for series in dataset.values())


def test_fetch_dataset_parses_success(monkeypatch):
    calls = []

    def fake_get(url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse({"BTC": _raw_asset()})

    monkeypatch.setattr(loaders.requests, "get", fake_get)
    dataset = fetch_dataset("https://example.test/pi.json")
    assert list(dataset) == ["BTC"]
    assert calls == [("https://example.test/pi.json", None)]


def test_fetch_dataset_non_success_status(monkeypatch):
    monkeypatch.setattr(loaders.requests, "get", lambda url, timeout=None: FakeResponse(status_code=404))
    with pytest.raises(DatasetLoadError, match="Failed to fetch data"):
        fetch_dataset("https://example.test/pi.json")


def test_fetch_dataset_invalid_json(monkeypatch):
    monkeypatch.setattr(loaders.requests, "get", lambda url, timeout=None: FakeResponse(text="<html>"))
    with pytest.raises(DatasetLoadError):
        fetch_dataset("https://example.test/pi.json")


def test_fetch_dataset_connection_error(monkeypatch):
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(loaders.requests, "get", fake_get)
    with pytest.raises(DatasetLoadError, match="connection refused"):
        fetch_dataset("https://example.test/pi.json")


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {},
        {"BTC": {"dates": [], "pi": [], "price": []}},
        {"BTC": {**_raw_asset(), "pi": ["high"]}},
        {"BTC": None},
    ],
)
def test_parse_dataset_rejects_malformed_payloads(payload):
    with pytest.raises(DatasetLoadError):
        parse_dataset(payload)


def test_parse_dataset_warns_on_unequal_lengths(caplog):
    raw = _raw_asset()
    raw["price"] = raw["price"][:-1]
    with caplog.at_level(logging.WARNING, logger="pi_stability.data.loaders"):
        dataset = parse_dataset({"SPY": raw})
    assert not dataset["SPY"].is_aligned
    assert "unequal sequence lengths" in caplog.text


def test_load_dataset_ready_records_first_asset_date(monkeypatch):
    payload = {"SPY": _raw_asset(latest_date="2024-03-01"), "BTC": _raw_asset(latest_date="2024-03-02")}
    monkeypatch.setattr(loaders.requests, "get", lambda url, timeout=None: FakeResponse(payload))
    state = load_dataset(url="https://example.test/pi.json")
    assert isinstance(state, Ready)
    assert state.last_updated == "2024-03-01"


def test_load_dataset_failure_collapses_to_message(monkeypatch):
    monkeypatch.setattr(loaders.requests, "get", lambda url, timeout=None: FakeResponse(status_code=500))
    state = load_dataset(url="https://example.test/pi.json")
    assert state == Failed(message="Failed to fetch data")


def test_load_dataset_prefers_local_path(monkeypatch, sample_dataset_path):
    def fail_get(url, timeout=None):
        raise AssertionError("network should not be used")

    monkeypatch.setattr(loaders.requests, "get", fail_get)
    state = load_dataset(url="https://example.test/pi.json", path=sample_dataset_path)
    assert isinstance(state, Ready)
    assert state.last_updated == "2024-02-09"


def test_load_dataset_missing_file(tmp_path):
    state = load_dataset(path=tmp_path / "missing.json")
    assert isinstance(state, Failed)
    assert "Could not read dataset file" in state.message
