from __future__ import annotations

from datetime import date
from typing import Optional

from ...core.enums import AttendanceStatus
from .base import StatusDecision, StatusStrategy


class RecordedStrategy(StatusStrategy):
    """Some source reported a status; keep the highest-precedence one."""

    def decide(self, *, session_date: date, today: date, recorded: Optional[AttendanceStatus], note: Optional[str]) -> StatusDecision:
        return StatusDecision(status=recorded or AttendanceStatus.UNKNOWN, note=note)
