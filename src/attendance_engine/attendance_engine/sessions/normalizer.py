from __future__ import annotations

from dataclasses import fields, replace
from datetime import date
from typing import Iterable, Optional, TypeVar

from ..common.datetime_utils import today_local
from .factory import StatusStrategyFactory
from .model import RawSession, ReportSession, SessionRecord, StudentOverride

E = TypeVar("E", RawSession, StudentOverride, ReportSession)


def _missing(value) -> bool:
    return value is None or value == ()


def _pick(*candidates):
    """First present value, in precedence order."""
    for value in candidates:
        if not _missing(value):
            return value
    return None


def _canonical_key(entry) -> tuple:
    return tuple((_missing(getattr(entry, f.name)), repr(getattr(entry, f.name))) for f in fields(entry))


def _coalesce(entries: list[E]) -> E:
    """Fold duplicate rows for one id into a single row.

    Rows are visited in a canonical order so the result does not depend on the
    order the provider returned them in.
    """
    ordered = sorted(entries, key=_canonical_key)
    merged = ordered[0]
    for other in ordered[1:]:
        patch = {
            f.name: getattr(other, f.name)
            for f in fields(merged)
            if _missing(getattr(merged, f.name)) and not _missing(getattr(other, f.name))
        }
        if patch:
            merged = replace(merged, **patch)
    return merged


def _index(entries: Optional[Iterable[E]]) -> dict[int, E]:
    grouped: dict[int, list[E]] = {}
    for entry in entries or ():
        grouped.setdefault(entry.session_id, []).append(entry)
    return {session_id: _coalesce(rows) for session_id, rows in grouped.items()}


class SessionRecordNormalizer:
    """Merge schedule, student-override and report datasets per session id.

    Precedence is decided field by field: student override, then report entry,
    then schedule. A session present only in the overrides has no date and is
    skipped.
    """

    def __init__(self, *, strategy_factory: StatusStrategyFactory | None = None):
        self._factory = strategy_factory or StatusStrategyFactory()

    def normalize(
        self,
        schedule: Optional[Iterable[RawSession]],
        overrides: Optional[Iterable[StudentOverride]],
        report_sessions: Optional[Iterable[ReportSession]],
        *,
        today: date | None = None,
    ) -> dict[int, SessionRecord]:
        today = today or today_local()

        by_schedule = _index(schedule)
        by_override = _index(overrides)
        by_report = _index(report_sessions)

        records = []
        for session_id in set(by_schedule) | set(by_report):
            record = self._merge(
                session_id,
                by_schedule.get(session_id),
                by_override.get(session_id),
                by_report.get(session_id),
                today=today,
            )
            if record is not None:
                records.append(record)

        records.sort(key=lambda r: (r.date, r.id))
        return {r.id: r for r in records}

    def _merge(
        self,
        session_id: int,
        sc: Optional[RawSession],
        ov: Optional[StudentOverride],
        rp: Optional[ReportSession],
        *,
        today: date,
    ) -> Optional[SessionRecord]:
        session_date = _pick(rp and rp.session_date, sc and sc.session_date)
        if session_date is None:
            return None

        recorded = _pick(ov and ov.attendance_status, rp and rp.attendance_status)
        note = _pick(ov and ov.note, rp and rp.note, sc and sc.teacher_note)

        strategy = self._factory.for_session(schedule_status=sc.status if sc else None, recorded=recorded)
        decision = strategy.decide(session_date=session_date, today=today, recorded=recorded, note=note)

        return SessionRecord(
            id=session_id,
            date=session_date,
            attendance_status=decision.status,
            start_time=_pick(rp and rp.start_time, sc and sc.start_time),
            end_time=_pick(rp and rp.end_time, sc and sc.end_time),
            room=_pick(rp and rp.classroom_name, sc and sc.room),
            teacher_name=_pick(rp and rp.teacher_name, sc.teacher_names[0] if sc and sc.teacher_names else None),
            topic=_pick(rp and rp.topic, sc and sc.topic),
            note=decision.note,
            homework_status=ov.homework_status if ov else None,
            is_makeup=bool(ov and ov.is_makeup),
            makeup_session_id=ov.makeup_session_id if ov else None,
            original_session_id=ov.original_session_id if ov else None,
            sequence_no=rp.sequence_no if rp else None,
            is_cancelled=decision.is_cancelled,
            is_transferred_out=bool(ov and ov.is_transferred_out),
        )


def normalize(
    schedule: Optional[Iterable[RawSession]],
    overrides: Optional[Iterable[StudentOverride]],
    report_sessions: Optional[Iterable[ReportSession]],
    *,
    today: date | None = None,
) -> dict[int, SessionRecord]:
    return SessionRecordNormalizer().normalize(schedule, overrides, report_sessions, today=today)
