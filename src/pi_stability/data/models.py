"""Typed containers for the published Π dataset."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LatestSnapshot:
    """Most recent published sample for an asset, trusted as delivered."""

    pi: float
    price: float
    status: str
    date: str


@dataclass(frozen=True)
class AssetSeries:
    """Parallel date / Π / price history for one asset."""

    dates: list[str]
    pi: list[float]
    price: list[float]
    latest: LatestSnapshot

    def __len__(self) -> int:
        return len(self.dates)

    @property
    def is_aligned(self) -> bool:
        return len(self.dates) == len(self.pi) == len(self.price)


Dataset = dict[str, AssetSeries]
