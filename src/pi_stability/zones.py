"""Risk zones for the Π Index and status classification.

``ZONES`` is the one threshold table in the package. Status classification,
chart background bands, threshold lines and the legend all read from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StatusCategory(str, Enum):
    """Risk categories in ascending order of risk."""

    STABLE = "STABLE"
    ELEVATED = "ELEVATED"
    CAUTION = "CAUTION"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return _RANK[self]


_RANK = {category: idx for idx, category in enumerate(StatusCategory)}


@dataclass(frozen=True)
class Zone:
    """Half-open band ``[lower, upper)`` of the Π Index."""

    status: StatusCategory
    lower: float
    upper: float
    color: str
    background: str
    message: str
    range_label: str


@dataclass(frozen=True)
class SystemStatus:
    """Classification result shown in the summary banner."""

    status: StatusCategory
    color: str
    message: str


ZONES: tuple[Zone, ...] = (
    Zone(
        status=StatusCategory.STABLE,
        lower=0.0,
        upper=0.45,
        color="#00d4aa",
        background="rgba(0, 212, 170, 0.15)",
        message="All markets stable. Low structural stress.",
        range_label="< 0.45",
    ),
    Zone(
        status=StatusCategory.ELEVATED,
        lower=0.45,
        upper=0.60,
        color="#4a9eff",
        background="rgba(74, 158, 255, 0.15)",
        message="Elevated vigilance recommended.",
        range_label="0.45-0.60",
    ),
    Zone(
        status=StatusCategory.CAUTION,
        lower=0.60,
        upper=0.80,
        color="#ffaa00",
        background="rgba(255, 170, 0, 0.15)",
        message="Caution advised. Significant stress detected.",
        range_label="0.60-0.80",
    ),
    Zone(
        status=StatusCategory.CRITICAL,
        lower=0.80,
        upper=1.0,
        color="#ff4757",
        background="rgba(255, 71, 87, 0.15)",
        message="Critical alert. High instability risk.",
        range_label="≥ 0.80",
    ),
)

ZONES_BY_STATUS: dict[StatusCategory, Zone] = {zone.status: zone for zone in ZONES}


def zone_boundaries() -> list[float]:
    """Inner thresholds between adjacent zones (0.45, 0.60, 0.80)."""
    return [zone.lower for zone in ZONES[1:]]


def axis_ticks() -> list[float]:
    """Π axis ticks: the axis floor, each threshold, and the axis ceiling."""
    return [ZONES[0].lower, *zone_boundaries(), ZONES[-1].upper]


def classify_value(value: float) -> StatusCategory:
    """Map a Π value to its risk category.

    Values below the first band are STABLE and anything at or above the last
    threshold is CRITICAL, including values above 1.0. NaN compares false
    against every threshold and lands in CRITICAL.
    """
    for zone in ZONES[:-1]:
        if value < zone.upper:
            return zone.status
    return ZONES[-1].status


def classify(pi_avg: float) -> SystemStatus:
    """Classify an (average) Π value into a status with its advisory message."""
    zone = ZONES_BY_STATUS[classify_value(pi_avg)]
    return SystemStatus(status=zone.status, color=zone.color, message=zone.message)


def status_style(status: str | StatusCategory | None) -> Zone:
    """Zone styling for a status label; unknown labels fall back to STABLE."""
    try:
        return ZONES_BY_STATUS[StatusCategory(status)]
    except ValueError:
        return ZONES_BY_STATUS[StatusCategory.STABLE]
