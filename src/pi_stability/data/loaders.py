"""Loading the published Π dataset from its remote JSON endpoint or a file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import requests

from pi_stability.data.models import AssetSeries, Dataset, LatestSnapshot

LOGGER = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch data"


class DatasetLoadError(RuntimeError):
    """Raised when the dataset cannot be fetched or decoded."""


@dataclass(frozen=True)
class Loading:
    """Initial state before the single load attempt resolves."""


@dataclass(frozen=True)
class Ready:
    """Dataset loaded; ``last_updated`` is the first asset's latest date."""

    dataset: Dataset
    last_updated: str | None


@dataclass(frozen=True)
class Failed:
    """Load attempt failed; ``message`` is shown in place of the dashboard."""

    message: str


LoadState = Union[Loading, Ready, Failed]


def fetch_dataset(url: str, timeout: float | None = None) -> Dataset:
    """Fetch and decode the dataset with a single GET request."""
    LOGGER.info("Fetching Π dataset from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise DatasetLoadError(str(exc) or FETCH_FAILED_MESSAGE) from exc
    if not response.ok:
        LOGGER.error("Dataset request returned HTTP %s", response.status_code)
        raise DatasetLoadError(FETCH_FAILED_MESSAGE)
    try:
        payload = response.json()
    except ValueError as exc:
        raise DatasetLoadError(f"Invalid JSON in dataset response: {exc}") from exc
    return parse_dataset(payload)


def load_from_json(path: str | Path) -> Dataset:
    """Load the dataset from a local JSON file with the same contract."""
    file_path = Path(path)
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DatasetLoadError(f"Could not read dataset file {file_path}: {exc}") from exc
    except ValueError as exc:
        raise DatasetLoadError(f"Invalid JSON in dataset file {file_path}: {exc}") from exc
    return parse_dataset(payload)


def parse_dataset(payload: Any) -> Dataset:
    """Convert a decoded JSON object into typed asset series, preserving key order."""
    if not isinstance(payload, dict):
        raise DatasetLoadError("Dataset must be a JSON object keyed by asset symbol.")
    if not payload:
        raise DatasetLoadError("Dataset contains no assets.")

    dataset: Dataset = {}
    for key, raw in payload.items():
        try:
            series = _parse_asset(raw)
        except (KeyError, TypeError, ValueError) as exc:
            raise DatasetLoadError(f"Malformed data for asset '{key}': {exc!r}") from exc
        if not series.is_aligned:
            LOGGER.warning(
                "Asset %s has unequal sequence lengths (dates=%d, pi=%d, price=%d)",
                key,
                len(series.dates),
                len(series.pi),
                len(series.price),
            )
        dataset[str(key)] = series
    LOGGER.debug("Parsed dataset with assets: %s", ",".join(dataset))
    return dataset


def load_dataset(url: str | None = None, path: str | Path | None = None, timeout: float | None = None) -> LoadState:
    """Run the one load attempt and return ``Ready`` or ``Failed``.

    A local ``path`` takes precedence over ``url``.
    """
    try:
        if path is not None:
            dataset = load_from_json(path)
        elif url is not None:
            dataset = fetch_dataset(url, timeout=timeout)
        else:
            raise ValueError("Provide either a dataset url or a dataset path.")
    except DatasetLoadError as exc:
        LOGGER.error("Dataset load failed: %s", exc)
        return Failed(message=str(exc))
    return Ready(dataset=dataset, last_updated=last_updated(dataset))


def last_updated(dataset: Dataset) -> str | None:
    """Latest date of the first asset in iteration order."""
    for series in dataset.values():
        return series.latest.date or None
    return None


def _parse_asset(raw: Any) -> AssetSeries:
    latest = raw["latest"]
    return AssetSeries(
        dates=[str(d) for d in raw["dates"]],
        pi=[float(v) for v in raw["pi"]],
        price=[float(v) for v in raw["price"]],
        latest=LatestSnapshot(
            pi=float(latest["pi"]),
            price=float(latest["price"]),
            status=str(latest["status"]),
            date=str(latest["date"]),
        ),
    )
