from __future__ import annotations

from datetime import date

import pytest

from src.attendance_engine.attendance_engine.core.enums import AttendanceStatus, HomeworkStatus
from src.attendance_engine.attendance_engine.sessions.model import SessionRecord
from src.attendance_engine.attendance_engine.summary.aggregator import AttendanceAggregator, aggregate


def _record(session_id: int, status: AttendanceStatus, homework=None) -> SessionRecord:
    return SessionRecord(
        id=session_id,
        date=date(2024, 3, session_id),
        attendance_status=status,
        homework_status=homework,
    )


def test_counts_and_rate_from_records():
    records = [
        _record(1, AttendanceStatus.PRESENT),
        _record(2, AttendanceStatus.PRESENT),
        _record(3, AttendanceStatus.PRESENT),
        _record(4, AttendanceStatus.ABSENT),
        _record(5, AttendanceStatus.LATE),
        _record(6, AttendanceStatus.EXCUSED),
        _record(7, AttendanceStatus.PLANNED),
        _record(8, AttendanceStatus.UNKNOWN),
    ]

    s = aggregate(records)

    assert (s.total_sessions, s.attended, s.absent, s.excused, s.upcoming) == (8, 3, 1, 2, 1)
    assert s.attendance_rate == pytest.approx(75.0)
    assert s.attended + s.absent + s.excused + s.upcoming <= s.total_sessions
    assert s.held_sessions == 6


def test_rate_is_zero_before_any_session_is_held():
    s = aggregate([_record(1, AttendanceStatus.PLANNED), _record(2, AttendanceStatus.EXCUSED)])

    assert s.attended == 0 and s.absent == 0
    assert s.attendance_rate == 0


def test_empty_input_gives_zeroed_summary():
    s = aggregate([])

    assert s.total_sessions == 0
    assert s.attendance_rate == 0
    assert s.homework_rate == 0


def test_precomputed_fraction_wins_over_counts():
    s = aggregate([_record(1, AttendanceStatus.ABSENT)], precomputed_rate=0.7747)

    assert s.attendance_rate == pytest.approx(77.47)


def test_precomputed_rate_is_kept_in_bounds_and_nan_ignored():
    records = [_record(1, AttendanceStatus.PRESENT), _record(2, AttendanceStatus.ABSENT)]

    assert aggregate(records, precomputed_rate=1.4).attendance_rate == 100.0
    assert aggregate(records, precomputed_rate=-0.2).attendance_rate == 0.0
    assert aggregate(records, precomputed_rate=float("nan")).attendance_rate == pytest.approx(50.0)


def test_homework_completion_rate():
    records = [
        _record(1, AttendanceStatus.PRESENT, HomeworkStatus.COMPLETED),
        _record(2, AttendanceStatus.PRESENT, HomeworkStatus.COMPLETED),
        _record(3, AttendanceStatus.PRESENT, HomeworkStatus.INCOMPLETE),
        _record(4, AttendanceStatus.PRESENT, HomeworkStatus.NO_HOMEWORK),
        _record(5, AttendanceStatus.PRESENT),
    ]

    s = AttendanceAggregator().aggregate(records)

    assert s.homework_completed == 2
    assert s.homework_incomplete == 1
    assert s.homework_rate == pytest.approx(200 / 3)
