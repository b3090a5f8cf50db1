from __future__ import annotations

from datetime import date
from typing import Optional

from ...core.constants import CANCELLED_NOTE
from ...core.enums import AttendanceStatus
from .base import StatusDecision, StatusStrategy


class CancelledStrategy(StatusStrategy):
    """Cancelled at schedule level; beats any reported status."""

    def decide(self, *, session_date: date, today: date, recorded: Optional[AttendanceStatus], note: Optional[str]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.UNKNOWN, note=note or CANCELLED_NOTE, is_cancelled=True)
