from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import try_parse_date
from ..common.validators import as_bool, as_count, optional_int, optional_rate, optional_text
from ..core.enums import AttendanceStatus, HomeworkStatus, SessionStatus
from ..summary.model import ReportSummary
from .model import RawSession, ReportSession, StudentOverride
from .source import SessionSource

logger = logging.getLogger(__name__)


def _first(row: Mapping, *keys: str) -> Any:
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return None


def _optional_flag(value: Any) -> Optional[bool]:
    return None if value is None else as_bool(value)


def _teacher_names(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return ()
    names = []
    for item in value:
        if isinstance(item, Mapping):
            item = _first(item, "name", "fullName")
        text = optional_text(item)
        if text:
            names.append(text)
    return tuple(names)


def _rows(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return [r for r in value if isinstance(r, Mapping)]
    return []


def schedule_entries(payload: Any) -> list[RawSession]:
    """Schedule rows from either a flat list or an upcoming/past split."""
    if isinstance(payload, Mapping):
        rows = _rows(payload.get("upcomingSessions")) + _rows(payload.get("pastSessions"))
        rows += _rows(payload.get("sessions"))
    else:
        rows = _rows(payload)

    out: list[RawSession] = []
    for r in rows:
        session_id = optional_int(_first(r, "id", "sessionId"))
        session_date = try_parse_date(r.get("date"))
        if session_id is None or session_date is None:
            logger.debug("dropping malformed schedule entry: %r", r)
            continue
        out.append(
            RawSession(
                session_id=session_id,
                session_date=session_date,
                start_time=optional_text(r.get("startTime")),
                end_time=optional_text(r.get("endTime")),
                room=optional_text(_first(r, "room", "resourceName")),
                teacher_names=_teacher_names(_first(r, "teacherNames", "teachers")),
                status=SessionStatus.parse_optional(r.get("status")),
                teacher_note=optional_text(r.get("teacherNote")),
                topic=optional_text(r.get("topic")),
            )
        )
    return out


def override_entries(payload: Any) -> list[StudentOverride]:
    out: list[StudentOverride] = []
    for r in _rows(payload):
        session_id = optional_int(r.get("sessionId"))
        if session_id is None:
            logger.debug("dropping student session without id: %r", r)
            continue
        out.append(
            StudentOverride(
                session_id=session_id,
                attendance_status=AttendanceStatus.parse_optional(r.get("attendanceStatus")),
                homework_status=HomeworkStatus.parse_optional(r.get("homeworkStatus")),
                note=optional_text(r.get("note")),
                is_makeup=_optional_flag(_first(r, "isMakeup", "makeup")),
                makeup_session_id=optional_int(r.get("makeupSessionId")),
                original_session_id=optional_int(r.get("originalSessionId")),
                is_transferred_out=_optional_flag(r.get("isTransferredOut")),
            )
        )
    return out


def report_entries(payload: Any) -> list[ReportSession]:
    rows = _rows(payload.get("sessions")) if isinstance(payload, Mapping) else _rows(payload)

    out: list[ReportSession] = []
    for r in rows:
        session_id = optional_int(r.get("sessionId"))
        if session_id is None:
            logger.debug("dropping report session without id: %r", r)
            continue
        out.append(
            ReportSession(
                session_id=session_id,
                session_date=try_parse_date(r.get("date")),
                sequence_no=optional_int(_first(r, "sessionNumber", "sequenceNumber")),
                classroom_name=optional_text(r.get("classroomName")),
                teacher_name=optional_text(r.get("teacherName")),
                topic=optional_text(r.get("topic")),
                note=optional_text(r.get("note")),
                attendance_status=AttendanceStatus.parse_optional(r.get("attendanceStatus")),
                start_time=optional_text(r.get("startTime")),
                end_time=optional_text(r.get("endTime")),
            )
        )
    return out


def report_summary(payload: Any) -> Optional[ReportSummary]:
    if not isinstance(payload, Mapping) or not isinstance(payload.get("summary"), Mapping):
        return None
    s = payload["summary"]
    return ReportSummary(
        total_sessions=as_count(s.get("totalSessions")),
        attended=as_count(s.get("attended")),
        absent=as_count(s.get("absent")),
        excused=as_count(s.get("excused")),
        upcoming=as_count(s.get("upcoming")),
        attendance_rate=optional_rate(s.get("attendanceRate")),
    )


class PayloadSessionSource(SessionSource):
    """Session datasets backed by already-fetched JSON payloads.

    Each payload is parsed once on construction. Missing payloads behave as
    empty datasets.
    """

    def __init__(self, *, schedule: Any = None, student_sessions: Any = None, report: Any = None):
        self._schedule = tuple(schedule_entries(schedule))
        self._overrides = tuple(override_entries(student_sessions))
        self._report_sessions = tuple(report_entries(report))
        self._summary = report_summary(report)

    @classmethod
    def from_payload(cls, payload: Mapping) -> "PayloadSessionSource":
        schedule = payload.get("schedule")
        student_sessions = payload.get("studentSessions")
        # The class-sessions endpoint ships student sessions inside the schedule body.
        if student_sessions is None and isinstance(schedule, Mapping):
            student_sessions = schedule.get("studentSessions")
        return cls(schedule=schedule, student_sessions=student_sessions, report=payload.get("report"))

    def list_schedule(self) -> Sequence[RawSession]:
        return self._schedule

    def list_overrides(self) -> Sequence[StudentOverride]:
        return self._overrides

    def list_report_sessions(self) -> Sequence[ReportSession]:
        return self._report_sessions

    def get_report_summary(self) -> Optional[ReportSummary]:
        return self._summary
