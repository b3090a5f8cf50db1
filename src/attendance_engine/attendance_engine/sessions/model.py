from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus, HomeworkStatus, SessionStatus


@dataclass(frozen=True)
class RawSession:
    """Schedule entry for one class session (upcoming or past)."""

    session_id: int
    session_date: date
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    room: Optional[str] = None
    teacher_names: tuple[str, ...] = ()
    status: Optional[SessionStatus] = None
    teacher_note: Optional[str] = None
    topic: Optional[str] = None


@dataclass(frozen=True)
class StudentOverride:
    """Student-specific attendance facts for one session."""

    session_id: int
    attendance_status: Optional[AttendanceStatus] = None
    homework_status: Optional[HomeworkStatus] = None
    note: Optional[str] = None
    is_makeup: Optional[bool] = None
    makeup_session_id: Optional[int] = None
    original_session_id: Optional[int] = None
    is_transferred_out: Optional[bool] = None


@dataclass(frozen=True)
class ReportSession:
    """Server-summarised session row from the attendance report."""

    session_id: int
    session_date: Optional[date] = None
    sequence_no: Optional[int] = None
    classroom_name: Optional[str] = None
    teacher_name: Optional[str] = None
    topic: Optional[str] = None
    note: Optional[str] = None
    attendance_status: Optional[AttendanceStatus] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


@dataclass(frozen=True)
class SessionRecord:
    """Canonical merged record, one per session id."""

    id: int
    date: date
    attendance_status: AttendanceStatus
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    room: Optional[str] = None
    teacher_name: Optional[str] = None
    topic: Optional[str] = None
    note: Optional[str] = None
    homework_status: Optional[HomeworkStatus] = None
    is_makeup: bool = False
    makeup_session_id: Optional[int] = None
    original_session_id: Optional[int] = None
    sequence_no: Optional[int] = None
    is_cancelled: bool = False
    is_transferred_out: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "startTime": self.start_time,
            "endTime": self.end_time,
            "room": self.room,
            "teacherName": self.teacher_name,
            "topic": self.topic,
            "note": self.note,
            "attendanceStatus": self.attendance_status.value,
            "homeworkStatus": self.homework_status.value if self.homework_status else None,
            "isMakeup": self.is_makeup,
            "makeupSessionId": self.makeup_session_id,
            "originalSessionId": self.original_session_id,
            "sequenceNo": self.sequence_no,
            "isCancelled": self.is_cancelled,
            "isTransferredOut": self.is_transferred_out,
        }
