from __future__ import annotations

import math
from typing import Iterable, Optional

from ..core.enums import AttendanceStatus, HomeworkStatus
from ..sessions.model import SessionRecord
from .calculator.base import RateCalculator
from .calculator.standard_calculator import StandardRateCalculator
from .model import ClassAttendanceSummary

_EXCUSED_LIKE = {AttendanceStatus.EXCUSED, AttendanceStatus.LATE}


class AttendanceAggregator:
    def __init__(self, *, calculator: Optional[RateCalculator] = None):
        self._calculator = calculator or StandardRateCalculator()

    def aggregate(
        self,
        records: Iterable[SessionRecord],
        *,
        precomputed_rate: Optional[float] = None,
    ) -> ClassAttendanceSummary:
        """Count statuses and derive rates. No rounding happens here."""

        if precomputed_rate is not None and not math.isfinite(precomputed_rate):
            precomputed_rate = None

        total = attended = absent = excused = upcoming = 0
        hw_done = hw_missing = 0
        for r in records:
            total += 1
            status = r.attendance_status
            if status == AttendanceStatus.PRESENT:
                attended += 1
            elif status == AttendanceStatus.ABSENT:
                absent += 1
            elif status in _EXCUSED_LIKE:
                excused += 1
            elif status == AttendanceStatus.PLANNED:
                upcoming += 1

            if r.homework_status == HomeworkStatus.COMPLETED:
                hw_done += 1
            elif r.homework_status == HomeworkStatus.INCOMPLETE:
                hw_missing += 1

        return ClassAttendanceSummary(
            total_sessions=total,
            attended=attended,
            absent=absent,
            excused=excused,
            upcoming=upcoming,
            attendance_rate=self._calculator.attendance_rate(
                attended=attended, absent=absent, precomputed=precomputed_rate
            ),
            homework_completed=hw_done,
            homework_incomplete=hw_missing,
            homework_rate=self._calculator.homework_rate(completed=hw_done, incomplete=hw_missing),
        )


def aggregate(records: Iterable[SessionRecord], *, precomputed_rate: Optional[float] = None) -> ClassAttendanceSummary:
    return AttendanceAggregator().aggregate(records, precomputed_rate=precomputed_rate)
