from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_engine.attendance_engine.core.enums import UrgencyTier
from src.attendance_engine.attendance_engine.urgency.classifier import UrgencyClassifier, classify

NOW = date(2024, 3, 10)


@pytest.mark.parametrize(
    "offset, tier",
    [
        (-3, UrgencyTier.OVERDUE),
        (0, UrgencyTier.TODAY),
        (1, UrgencyTier.NEAR),
        (2, UrgencyTier.NEAR),
        (5, UrgencyTier.NORMAL),
    ],
)
def test_tier_follows_calendar_day_offset(offset, tier):
    target = date.fromordinal(NOW.toordinal() + offset)

    u = classify(target, NOW)

    assert u.tier == tier
    assert u.days_until == offset


def test_missing_or_invalid_dates_are_unknown():
    for value in (None, "", "soon", 42):
        u = classify(value, NOW)
        assert u.tier == UrgencyTier.UNKNOWN
        assert u.days_until is None
        assert u.sort_key == 999


def test_time_of_day_is_ignored():
    u = classify("2024-03-11T00:30:00", datetime(2024, 3, 10, 23, 59))

    assert u.tier == UrgencyTier.NEAR
    assert u.days_until == 1


def test_tiers_sort_most_urgent_first():
    assert sorted([UrgencyTier.UNKNOWN, UrgencyTier.NEAR, UrgencyTier.OVERDUE]) == [
        UrgencyTier.OVERDUE,
        UrgencyTier.NEAR,
        UrgencyTier.UNKNOWN,
    ]


def test_labels():
    assert classify(date(2024, 3, 7), NOW).label == "Đã qua 3 ngày"
    assert classify(NOW, NOW).label == "Diễn ra hôm nay"
    assert classify(date(2024, 3, 15), NOW).label == "Còn 5 ngày"
    assert classify(None, NOW).label == "Không rõ"


def test_near_window_is_configurable():
    classifier = UrgencyClassifier(near_days=7)

    assert classifier.classify(date(2024, 3, 15), NOW).tier == UrgencyTier.NEAR


def test_all_comparisons_follow_tier_rank():
    assert UrgencyTier.OVERDUE < UrgencyTier.NORMAL
    assert UrgencyTier.OVERDUE <= UrgencyTier.NORMAL
    assert not (UrgencyTier.OVERDUE > UrgencyTier.NORMAL)
    assert not (UrgencyTier.OVERDUE >= UrgencyTier.NORMAL)
    assert UrgencyTier.UNKNOWN > UrgencyTier.TODAY
    assert UrgencyTier.NEAR >= UrgencyTier.NEAR
    assert UrgencyTier.NEAR <= UrgencyTier.NEAR
    assert max(UrgencyTier) == UrgencyTier.UNKNOWN


def test_trailing_text_after_date_is_unknown():
    for value in ("2024-03-12garbage", "2024-03-12T", "2024-03-12T25:00", "2024-03-12 soon"):
        assert classify(value, NOW).tier == UrgencyTier.UNKNOWN


def test_date_with_time_component_is_accepted():
    for value in ("2024-03-12T08:00", "2024-03-12 08:00:00", "2024-03-12T08:00:00.000Z", "2024-03-12T08:00:00+07:00"):
        assert classify(value, NOW).days_until == 2
