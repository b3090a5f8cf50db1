from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_time_of_day
from ..core.constants import DEFAULT_VIEW_CACHE_SIZE
from ..core.enums import AttendanceStatus, SessionFilter
from ..heatmap.model import CalendarWeek
from ..heatmap.projector import CalendarWeekProjector
from ..summary.aggregator import AttendanceAggregator
from ..summary.model import ClassAttendanceSummary, ReportSummary
from .model import SessionRecord
from .normalizer import SessionRecordNormalizer
from .source import SessionSource

PRESENT_MAKEUP = "PRESENT_MAKEUP"

STATUS_LABELS = {
    AttendanceStatus.PRESENT.value: "Có mặt",
    AttendanceStatus.ABSENT.value: "Vắng không phép",
    AttendanceStatus.LATE.value: "Đi trễ",
    AttendanceStatus.EXCUSED.value: "Có phép",
    AttendanceStatus.PLANNED.value: "Chưa diễn ra",
    AttendanceStatus.UNKNOWN.value: "Chưa có thông tin",
    PRESENT_MAKEUP: "Đã học bù",
}

_WEEKDAYS = ["Thứ Hai", "Thứ Ba", "Thứ Tư", "Thứ Năm", "Thứ Sáu", "Thứ Bảy", "Chủ Nhật"]


@dataclass(frozen=True)
class ClassAttendanceView:
    records: tuple[SessionRecord, ...]
    rows: tuple[dict, ...]
    summary: ClassAttendanceSummary
    weeks: tuple[CalendarWeek, ...]
    report_summary: Optional[ReportSummary] = None  # backend figures, shown as-is

    def to_dict(self) -> dict:
        return {
            "records": [r.to_dict() for r in self.records],
            "rows": list(self.rows),
            "summary": self.summary.to_dict(),
            "reportSummary": self.report_summary.to_dict() if self.report_summary else None,
            "weeks": [w.to_dict() for w in self.weeks],
        }


def status_key(record: SessionRecord) -> str:
    if record.is_makeup and record.attendance_status == AttendanceStatus.PRESENT:
        return PRESENT_MAKEUP
    return record.attendance_status.value


def format_time_range(start_time: Optional[str], end_time: Optional[str]) -> str:
    start = format_time_of_day(start_time)
    end = format_time_of_day(end_time)
    if not start and not end:
        return "—"
    if not end:
        return start
    if not start:
        return end
    return f"{start} - {end}"


class AttendanceViewService:
    """Builds the per-class attendance view from the three session datasets.

    The memo is keyed on an immutable snapshot of the datasets plus every
    argument, so a hit is always equal to a fresh computation. One instance is
    shared by all request threads; memo access goes through a lock.
    """

    def __init__(
        self,
        *,
        normalizer: SessionRecordNormalizer | None = None,
        aggregator: AttendanceAggregator | None = None,
        projector: CalendarWeekProjector | None = None,
        cache_size: int = DEFAULT_VIEW_CACHE_SIZE,
    ):
        self._normalizer = normalizer or SessionRecordNormalizer()
        self._aggregator = aggregator or AttendanceAggregator()
        self._projector = projector or CalendarWeekProjector()
        self._cache_size = max(int(cache_size), 0)
        self._cache: OrderedDict[tuple, ClassAttendanceView] = OrderedDict()
        self._lock = threading.Lock()

    def build_view(
        self,
        source: SessionSource,
        *,
        today: date,
        range_start: date | None = None,
        range_end: date | None = None,
        session_filter: SessionFilter = SessionFilter.ALL,
    ) -> ClassAttendanceView:
        snapshot = (
            tuple(source.list_schedule()),
            tuple(source.list_overrides()),
            tuple(source.list_report_sessions()),
            source.get_report_summary(),
        )
        key = (snapshot, today, range_start, range_end, session_filter)

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                return cached

        view = self._compute(snapshot, today=today, range_start=range_start, range_end=range_end, session_filter=session_filter)
        if self._cache_size:
            with self._lock:
                self._cache[key] = view
                while len(self._cache) > self._cache_size:
                    self._cache.popitem(last=False)
        return view

    def _compute(self, snapshot: tuple, *, today, range_start, range_end, session_filter) -> ClassAttendanceView:
        schedule, overrides, report_sessions, report_summary = snapshot

        records = tuple(self._normalizer.normalize(schedule, overrides, report_sessions, today=today).values())
        summary = self._aggregator.aggregate(
            records,
            precomputed_rate=report_summary.attendance_rate if report_summary else None,
        )
        weeks = tuple(self._projector.project(records, range_start, range_end))

        rows = tuple(
            self._to_ui(r, position=i + 1)
            for i, r in enumerate(records)
            if self._matches(r, today=today, session_filter=session_filter)
        )
        return ClassAttendanceView(
            records=records, rows=rows, summary=summary, weeks=weeks, report_summary=report_summary
        )

    @staticmethod
    def _matches(record: SessionRecord, *, today: date, session_filter: SessionFilter) -> bool:
        if session_filter == SessionFilter.UPCOMING:
            return record.date >= today
        if session_filter == SessionFilter.PAST:
            return record.date < today
        return True

    def _to_ui(self, r: SessionRecord, *, position: int) -> dict:
        key = status_key(r)
        makeup_note = None
        if r.original_session_id is not None:
            makeup_note = f"Buổi học bù cho buổi #{r.original_session_id}"

        return {
            "id": r.id,
            "order": r.sequence_no if r.sequence_no is not None else position,
            "date": r.date.strftime("%Y-%m-%d"),
            "date_label": f"{_WEEKDAYS[r.date.weekday()]} - {r.date.strftime('%d/%m/%Y')}",
            "time_range": format_time_range(r.start_time, r.end_time),
            "room": r.room or "-",
            "teacher": r.teacher_name or "-",
            "status": key,
            "status_label": STATUS_LABELS.get(key, STATUS_LABELS[AttendanceStatus.UNKNOWN.value]),
            "note": r.note or "",
            "makeup_note": makeup_note,
            "is_cancelled": r.is_cancelled,
        }
