from __future__ import annotations

from datetime import date
from typing import Optional

from ...core.enums import AttendanceStatus
from .base import StatusDecision, StatusStrategy


class ScheduledStrategy(StatusStrategy):
    """No source reported a status: today or later is PLANNED, earlier is UNKNOWN."""

    def decide(self, *, session_date: date, today: date, recorded: Optional[AttendanceStatus], note: Optional[str]) -> StatusDecision:
        if session_date >= today:
            return StatusDecision(status=AttendanceStatus.PLANNED, note=note)
        return StatusDecision(status=AttendanceStatus.UNKNOWN, note=note)
