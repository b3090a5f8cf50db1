from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import try_parse_date
from ..common.validators import optional_int, optional_text
from ..core.constants import DEFAULT_NEAR_DAYS
from ..core.enums import RequestStatus
from ..urgency.classifier import UrgencyClassifier
from .model import DeadlineRequest, RequestDeadlineRow

logger = logging.getLogger(__name__)


def _session_date(row: Mapping) -> Optional[date]:
    # sessionDate, then session.date, then sessionInfo.date
    candidates = [row.get("sessionDate")]
    for nested in ("session", "sessionInfo"):
        if isinstance(row.get(nested), Mapping):
            candidates.append(row[nested].get("date"))
    for value in candidates:
        parsed = try_parse_date(value)
        if parsed is not None:
            return parsed
    return None


def deadline_requests_from_payload(rows: Iterable[Any]) -> list[DeadlineRequest]:
    out: list[DeadlineRequest] = []
    for r in rows or ():
        if not isinstance(r, Mapping):
            continue
        request_id = optional_int(r.get("requestId", r.get("id")))
        if request_id is None:
            logger.debug("dropping request without id: %r", r)
            continue
        request_type = optional_text(r.get("requestType"))
        out.append(
            DeadlineRequest(
                request_id=request_id,
                request_type=request_type.upper() if request_type else None,
                status=RequestStatus.parse(r.get("status") or "UNKNOWN"),
                session_date=_session_date(r),
                requester_name=optional_text(r.get("studentName") or r.get("teacherName") or r.get("requesterName")),
            )
        )
    return out


class RequestDeadlineService:
    def __init__(self, *, classifier: UrgencyClassifier | None = None, near_days: int = DEFAULT_NEAR_DAYS):
        self._near_days = int(near_days)
        self._classifier = classifier or UrgencyClassifier(near_days=self._near_days)

    def build_rows(
        self,
        requests: Iterable[DeadlineRequest],
        *,
        today: date,
        urgent_only: bool = False,
    ) -> list[RequestDeadlineRow]:
        """Classify each request's session date and order by urgency.

        ``urgent_only`` keeps overdue requests and those due within the near
        window; requests without a usable date are never urgent.
        """
        rows = []
        for req in requests:
            urgency = self._classifier.classify(req.session_date, today)
            is_urgent = urgency.days_until is not None and urgency.days_until <= self._near_days
            if urgent_only and not is_urgent:
                continue
            rows.append(RequestDeadlineRow(request=req, urgency=urgency, is_urgent=is_urgent))

        rows.sort(key=lambda row: (row.urgency.sort_key, row.request.request_id))
        return rows
