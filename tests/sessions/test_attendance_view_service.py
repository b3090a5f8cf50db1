from __future__ import annotations

import threading
from datetime import date

import pytest

from src.attendance_engine.attendance_engine.core.enums import SessionFilter
from src.attendance_engine.attendance_engine.core.exceptions import ValidationError
from src.attendance_engine.attendance_engine.sessions.controller import parse_session_filter
from src.attendance_engine.attendance_engine.sessions.payload_source import PayloadSessionSource
from src.attendance_engine.attendance_engine.sessions.service import AttendanceViewService, format_time_range


def _source() -> PayloadSessionSource:
    return PayloadSessionSource(
        schedule={
            "pastSessions": [
                {"id": 1, "date": "2024-03-04", "startTime": "18:00:00", "endTime": "20:00:00", "room": "P.1"},
                {"id": 2, "date": "2024-03-06", "startTime": "18:00:00"},
            ],
            "upcomingSessions": [{"id": 3, "date": "2024-03-11", "teacherNames": ["Cô Lan"]}],
        },
        student_sessions=[
            {"sessionId": 1, "attendanceStatus": "PRESENT"},
            {"sessionId": 2, "attendanceStatus": "PRESENT", "isMakeup": True, "originalSessionId": 1},
        ],
        report={
            "sessions": [{"sessionId": 1, "sessionNumber": 1}, {"sessionId": 2, "sessionNumber": 2}],
            "summary": {"totalSessions": 3, "attended": 2, "attendanceRate": 0.5},
        },
    )


def test_view_combines_records_summary_and_weeks(fixed_today):
    view = AttendanceViewService(cache_size=0).build_view(_source(), today=fixed_today)

    assert [r.id for r in view.records] == [1, 2, 3]
    assert view.summary.attended == 2
    assert view.summary.upcoming == 1
    assert view.summary.attendance_rate == pytest.approx(50.0)
    assert [w.start_date for w in view.weeks] == [date(2024, 3, 4), date(2024, 3, 11)]


def test_rows_carry_display_fields(fixed_today):
    rows = AttendanceViewService(cache_size=0).build_view(_source(), today=fixed_today).rows

    first, makeup, upcoming = rows
    assert first["time_range"] == "18:00 - 20:00"
    assert first["date_label"] == "Thứ Hai - 04/03/2024"
    assert first["status_label"] == "Có mặt"
    assert makeup["status"] == "PRESENT_MAKEUP"
    assert makeup["makeup_note"] == "Buổi học bù cho buổi #1"
    assert makeup["time_range"] == "18:00"
    assert upcoming["order"] == 3
    assert upcoming["teacher"] == "Cô Lan"
    assert upcoming["status"] == "PLANNED"


def test_filter_narrows_rows_only(fixed_today):
    service = AttendanceViewService(cache_size=0)

    past = service.build_view(_source(), today=fixed_today, session_filter=SessionFilter.PAST)
    upcoming = service.build_view(_source(), today=fixed_today, session_filter=SessionFilter.UPCOMING)

    assert [r["id"] for r in past.rows] == [1, 2]
    assert [r["id"] for r in upcoming.rows] == [3]
    assert len(past.records) == len(upcoming.records) == 3


def test_memo_returns_same_view_for_equal_inputs(fixed_today):
    service = AttendanceViewService(cache_size=4)

    first = service.build_view(_source(), today=fixed_today)
    second = service.build_view(_source(), today=fixed_today)
    other_day = service.build_view(_source(), today=date(2024, 3, 1))

    assert second is first
    assert other_day is not first
    assert other_day.records[2].attendance_status.value == "PLANNED"


def test_disabled_memo_still_gives_equal_results(fixed_today):
    service = AttendanceViewService(cache_size=0)

    first = service.build_view(_source(), today=fixed_today)
    second = service.build_view(_source(), today=fixed_today)

    assert second is not first
    assert second == first


def test_format_time_range_placeholder():
    assert format_time_range(None, "") == "—"
    assert format_time_range(None, "21:00:00") == "21:00"


def test_view_exposes_backend_summary(fixed_today):
    view = AttendanceViewService(cache_size=0).build_view(_source(), today=fixed_today)

    assert view.report_summary.total_sessions == 3
    assert view.to_dict()["reportSummary"]["attendanceRate"] == 0.5


def test_shared_memo_is_thread_safe(fixed_today):
    service = AttendanceViewService(cache_size=1)
    days = [fixed_today, date(2024, 3, 1)]
    expected = {d: AttendanceViewService(cache_size=0).build_view(_source(), today=d) for d in days}
    errors = []

    def worker(day: date) -> None:
        try:
            for _ in range(200):
                assert service.build_view(_source(), today=day) == expected[day]
        except Exception as e:  # collected and asserted below
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(days[i % 2],)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []


def test_bad_filter_raises_validation_error_without_chained_value_error():
    assert parse_session_filter(" Past ") == SessionFilter.PAST
    assert parse_session_filter(None) == SessionFilter.ALL

    with pytest.raises(ValidationError) as exc:
        parse_session_filter("soon")

    assert exc.value.__cause__ is None
    assert exc.value.__suppress_context__ is True
