from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None
    is_cancelled: bool = False


class StatusStrategy(ABC):
    """Strategy Pattern: encapsulate how a session's final status is decided."""

    @abstractmethod
    def decide(
        self,
        *,
        session_date: date,
        today: date,
        recorded: Optional[AttendanceStatus],
        note: Optional[str],
    ) -> StatusDecision:
        raise NotImplementedError
