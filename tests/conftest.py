from pathlib import Path

import pytest

from pi_stability.data.models import AssetSeries, LatestSnapshot

SAMPLE_DATASET = Path(__file__).parent / "data" / "sample_pi_data.json"


def make_series(pi: list[float], price: list[float] | None = None, status: str = "STABLE") -> AssetSeries:
    n = len(pi)
    prices = price if price is not None else [100.0 + i for i in range(n)]
    dates = [f"2024-{1 + i // 28:02d}-{1 + i % 28:02d}" for i in range(n)]
    return AssetSeries(
        dates=dates,
        pi=list(pi),
        price=list(prices),
        latest=LatestSnapshot(pi=pi[-1], price=prices[-1], status=status, date=dates[-1]),
    )


@pytest.fixture()
def sample_dataset_path() -> Path:
    return SAMPLE_DATASET


@pytest.fixture()
def series_40() -> AssetSeries:
    pi = [0.35] * 40
    pi[9] = 0.40
    pi[-1] = 0.50
    return make_series(pi)
