from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..common.datetime_utils import as_calendar_date, days_between, today_local, try_parse_date
from ..core.constants import DEFAULT_NEAR_DAYS
from ..core.enums import UrgencyTier
from .model import Urgency


class UrgencyClassifier:
    """Bucket a target date by how many calendar days away it is."""

    def __init__(self, *, near_days: int = DEFAULT_NEAR_DAYS):
        self._near_days = int(near_days)

    def classify(self, target, now: Union[date, datetime, None] = None) -> Urgency:
        target_date = try_parse_date(target)
        if target_date is None:
            return Urgency(tier=UrgencyTier.UNKNOWN)

        days = days_between(as_calendar_date(now or today_local()), target_date)
        if days < 0:
            tier = UrgencyTier.OVERDUE
        elif days == 0:
            tier = UrgencyTier.TODAY
        elif days <= self._near_days:
            tier = UrgencyTier.NEAR
        else:
            tier = UrgencyTier.NORMAL
        return Urgency(tier=tier, days_until=days)


def classify(target, now: Union[date, datetime, None] = None) -> Urgency:
    return UrgencyClassifier().classify(target, now)
