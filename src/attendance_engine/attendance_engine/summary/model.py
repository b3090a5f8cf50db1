from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ReportSummary:
    """Aggregate fields shipped alongside the report sessions."""

    total_sessions: int = 0
    attended: int = 0
    absent: int = 0
    excused: int = 0
    upcoming: int = 0
    attendance_rate: Optional[float] = None  # 0-1 fraction

    def to_dict(self) -> dict:
        return {
            "totalSessions": self.total_sessions,
            "attended": self.attended,
            "absent": self.absent,
            "excused": self.excused,
            "upcoming": self.upcoming,
            "attendanceRate": self.attendance_rate,
        }


@dataclass(frozen=True)
class ClassAttendanceSummary:
    total_sessions: int
    attended: int
    absent: int
    excused: int
    upcoming: int
    attendance_rate: float
    homework_completed: int = 0
    homework_incomplete: int = 0
    homework_rate: float = 0.0

    @property
    def held_sessions(self) -> int:
        """Sessions that already have a recorded outcome."""
        return self.attended + self.absent + self.excused

    def to_dict(self) -> dict:
        return {
            "totalSessions": self.total_sessions,
            "attended": self.attended,
            "absent": self.absent,
            "excused": self.excused,
            "upcoming": self.upcoming,
            "heldSessions": self.held_sessions,
            "attendanceRate": self.attendance_rate,
            "homeworkCompleted": self.homework_completed,
            "homeworkIncomplete": self.homework_incomplete,
            "homeworkRate": self.homework_rate,
        }
