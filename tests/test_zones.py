import pytest

from pi_stability.zones import (
    ZONES,
    StatusCategory,
    axis_ticks,
    classify,
    classify_value,
    status_style,
    zone_boundaries,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, StatusCategory.STABLE),
        (0.4499, StatusCategory.STABLE),
        (0.45, StatusCategory.ELEVATED),
        (0.5999, StatusCategory.ELEVATED),
        (0.6, StatusCategory.CAUTION),
        (0.7999, StatusCategory.CAUTION),
        (0.8, StatusCategory.CRITICAL),
        (1.0, StatusCategory.CRITICAL),
    ],
)
def test_classify_boundaries(value, expected):
    assert classify(value).status is expected


def test_classify_carries_zone_message_and_color():
    status = classify(0.7)
    assert status.message == "Caution advised. Significant stress detected."
    assert status.color == "#ffaa00"


def test_zone_table_is_contiguous_and_matches_chart_ticks():
    for lower, upper in zip(ZONES, ZONES[1:]):
        assert lower.upper == upper.lower
    assert zone_boundaries() == [0.45, 0.60, 0.80]
    assert axis_ticks() == [0.0, 0.45, 0.60, 0.80, 1.0]
    assert [zone.status for zone in ZONES] == list(StatusCategory)


def test_every_zone_classifies_its_own_lower_bound():
    for zone in ZONES:
        assert classify_value(zone.lower) is zone.status


def test_status_rank_orders_by_risk():
    ranks = [category.rank for category in StatusCategory]
    assert ranks == sorted(ranks)
    assert StatusCategory.CRITICAL.rank > StatusCategory.STABLE.rank


def test_status_style_falls_back_to_stable_for_unknown_labels():
    assert status_style("CRITICAL").color == "#ff4757"
    assert status_style("UNKNOWN").status is StatusCategory.STABLE
    assert status_style(None).status is StatusCategory.STABLE
