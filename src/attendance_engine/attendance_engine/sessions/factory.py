from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus, SessionStatus
from .strategies.base import StatusStrategy
from .strategies.cancelled_strategy import CancelledStrategy
from .strategies.recorded_strategy import RecordedStrategy
from .strategies.scheduled_strategy import ScheduledStrategy


@dataclass
class StatusStrategyFactory:
    """Factory Pattern: choose the status strategy for one merged session."""

    def for_session(self, *, schedule_status: Optional[SessionStatus], recorded: Optional[AttendanceStatus]) -> StatusStrategy:
        if schedule_status == SessionStatus.CANCELLED:
            return CancelledStrategy()
        if recorded is not None:
            return RecordedStrategy()
        return ScheduledStrategy()
