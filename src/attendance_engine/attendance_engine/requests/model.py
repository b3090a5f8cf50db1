from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import RequestStatus
from ..urgency.model import Urgency


@dataclass(frozen=True)
class DeadlineRequest:
    """A student or teacher request tied to a session date."""

    request_id: int
    request_type: Optional[str]
    status: RequestStatus
    session_date: Optional[date] = None
    requester_name: Optional[str] = None


@dataclass(frozen=True)
class RequestDeadlineRow:
    request: DeadlineRequest
    urgency: Urgency
    is_urgent: bool = False

    def to_dict(self) -> dict:
        req = self.request
        return {
            "requestId": req.request_id,
            "requestType": req.request_type,
            "requestTypeLabel": REQUEST_TYPE_LABELS.get(req.request_type or "", req.request_type),
            "status": req.status.value,
            "statusLabel": REQUEST_STATUS_LABELS[req.status],
            "sessionDate": req.session_date.isoformat() if req.session_date else None,
            "requesterName": req.requester_name,
            "urgency": self.urgency.to_dict(),
            "isUrgent": self.is_urgent,
        }


REQUEST_STATUS_LABELS = {
    RequestStatus.PENDING: "Chờ duyệt",
    RequestStatus.WAITING_CONFIRM: "Chờ xác nhận",
    RequestStatus.APPROVED: "Đã duyệt",
    RequestStatus.REJECTED: "Đã từ chối",
    RequestStatus.CANCELLED: "Đã hủy",
    RequestStatus.UNKNOWN: "Không xác định",
}

REQUEST_TYPE_LABELS = {
    "ABSENCE": "Xin nghỉ",
    "MAKEUP": "Học bù",
    "TRANSFER": "Chuyển lớp",
    "MODALITY_CHANGE": "Thay đổi phương thức",
    "RESCHEDULE": "Đổi lịch",
    "REPLACEMENT": "Nhờ dạy thay",
}
