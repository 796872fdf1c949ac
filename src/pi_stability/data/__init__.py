"""Dataset models and loading subpackage."""

from pi_stability.data.loaders import (
    DatasetLoadError,
    Failed,
    Loading,
    LoadState,
    Ready,
    fetch_dataset,
    last_updated,
    load_dataset,
    load_from_json,
    parse_dataset,
)
from pi_stability.data.models import AssetSeries, Dataset, LatestSnapshot

__all__ = [
    "AssetSeries",
    "Dataset",
    "LatestSnapshot",
    "DatasetLoadError",
    "LoadState",
    "Loading",
    "Ready",
    "Failed",
    "fetch_dataset",
    "load_from_json",
    "parse_dataset",
    "load_dataset",
    "last_updated",
]
