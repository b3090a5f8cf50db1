from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..sessions.model import SessionRecord

EMPTY_CELL = "EMPTY"

CELL_LABELS = {
    "PRESENT": "Có mặt",
    "ABSENT": "Vắng",
    "LATE": "Muộn",
    "EXCUSED": "Có phép",
    "PLANNED": "Sắp tới",
    "UNKNOWN": "Chưa có thông tin",
    EMPTY_CELL: "Không có lịch",
}


@dataclass(frozen=True)
class CalendarDay:
    date: date
    records: tuple[SessionRecord, ...] = ()

    @property
    def record(self) -> Optional[SessionRecord]:
        return self.records[0] if self.records else None

    @property
    def cell_status(self) -> str:
        r = self.record
        return r.attendance_status.value if r else EMPTY_CELL

    def to_dict(self) -> dict:
        r = self.record
        return {
            "date": self.date.isoformat(),
            "status": self.cell_status,
            "label": CELL_LABELS.get(self.cell_status, CELL_LABELS["UNKNOWN"]),
            "sessionId": r.id if r else None,
            "sessionCount": len(self.records),
            "teacherName": r.teacher_name if r else None,
            "topic": r.topic if r else None,
        }


@dataclass(frozen=True)
class CalendarWeek:
    start_date: date
    days: tuple[CalendarDay, ...]
    label_date: Optional[date] = None  # set when the week carries a month label

    @property
    def has_label(self) -> bool:
        return self.label_date is not None

    def to_dict(self) -> dict:
        return {
            "startDate": self.start_date.isoformat(),
            "labelDate": self.label_date.isoformat() if self.label_date else None,
            "days": [d.to_dict() for d in self.days],
        }
