from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import add_days, day_number, from_day_number, week_end, week_start
from ..core.constants import DAYS_PER_WEEK, DEFAULT_PROJECTION_WEEKS
from ..sessions.model import SessionRecord
from .model import CalendarDay, CalendarWeek


def _day_order(r: SessionRecord) -> tuple:
    return (r.start_time or "", r.sequence_no if r.sequence_no is not None else 0, r.id)


class CalendarWeekProjector:
    """Lay session records out on a Monday-aligned week grid."""

    def __init__(self, *, default_weeks: int = DEFAULT_PROJECTION_WEEKS):
        self._default_weeks = max(int(default_weeks), 1)

    def resolve_range(
        self,
        records: list[SessionRecord],
        range_start: Optional[date],
        range_end: Optional[date],
    ) -> Optional[tuple[date, date]]:
        """Explicit bounds first, then the span of the records.

        With only one side known the grid covers the default number of weeks
        from (or up to) that side.
        """
        dates = [r.date for r in records]
        start = range_start or (min(dates) if dates else None)
        end = range_end or (max(dates) if dates else None)

        if start is None and end is None:
            return None
        span = self._default_weeks * DAYS_PER_WEEK
        if end is None:
            end = add_days(week_start(start), span - 1)
        if start is None:
            start = add_days(week_end(end), -(span - 1))
        if end < start:
            start, end = end, start
        return start, end

    def project(
        self,
        records: Iterable[SessionRecord],
        range_start: Optional[date] = None,
        range_end: Optional[date] = None,
    ) -> list[CalendarWeek]:
        records = list(records)
        bounds = self.resolve_range(records, range_start, range_end)
        if bounds is None:
            return []

        by_day: dict[int, list[SessionRecord]] = {}
        for r in records:
            by_day.setdefault(day_number(r.date), []).append(r)

        first = day_number(week_start(bounds[0]))
        last = day_number(week_end(bounds[1]))

        # last is clamped at date.max, so a trailing week that cannot hold 7 days is dropped
        weeks: list[CalendarWeek] = []
        for monday in range(first, last - DAYS_PER_WEEK + 2, DAYS_PER_WEEK):
            days = tuple(
                CalendarDay(
                    date=from_day_number(n),
                    records=tuple(sorted(by_day.get(n, ()), key=_day_order)),
                )
                for n in range(monday, monday + DAYS_PER_WEEK)
            )
            weeks.append(CalendarWeek(start_date=days[0].date, days=days, label_date=self._label_date(days, first=not weeks)))
        return weeks

    @staticmethod
    def _label_date(days: tuple[CalendarDay, ...], *, first: bool) -> Optional[date]:
        if first:
            return days[0].date
        for d in days:
            if d.date.day == 1:
                return d.date
        return None


def project(
    records: Iterable[SessionRecord],
    range_start: Optional[date] = None,
    range_end: Optional[date] = None,
) -> list[CalendarWeek]:
    return CalendarWeekProjector().project(records, range_start, range_end)
