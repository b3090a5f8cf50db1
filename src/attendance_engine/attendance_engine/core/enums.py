from __future__ import annotations

from enum import Enum


class _ParsableEnum(str, Enum):
    """String enum that degrades unrecognised backend vocabulary to UNKNOWN."""

    @classmethod
    def _aliases(cls) -> dict:
        return {}

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        key = cls._aliases().get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls("UNKNOWN")

    @classmethod
    def parse_optional(cls, value):
        """Like ``parse`` but keeps missing/blank values as None."""

        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return cls.parse(value)


class AttendanceStatus(_ParsableEnum):
    """Trạng thái điểm danh của học viên trong một buổi học."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    EXCUSED = "EXCUSED"
    PLANNED = "PLANNED"
    UNKNOWN = "UNKNOWN"


class HomeworkStatus(_ParsableEnum):
    """Trạng thái bài tập về nhà."""

    COMPLETED = "COMPLETED"
    INCOMPLETE = "INCOMPLETE"
    NO_HOMEWORK = "NO_HOMEWORK"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _aliases(cls) -> dict:
        return {"DONE": "COMPLETED"}


class SessionStatus(_ParsableEnum):
    """Trạng thái buổi học ở cấp lịch học (schedule)."""

    PLANNED = "PLANNED"
    DONE = "DONE"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _aliases(cls) -> dict:
        return {"CANCELED": "CANCELLED"}


class RequestStatus(_ParsableEnum):
    """Trạng thái luồng duyệt yêu cầu (nghỉ, học bù, chuyển lớp, dạy thay)."""

    PENDING = "PENDING"
    WAITING_CONFIRM = "WAITING_CONFIRM"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"


class UrgencyTier(str, Enum):
    """Ordered urgency buckets, most urgent first."""

    OVERDUE = "OVERDUE"
    TODAY = "TODAY"
    NEAR = "NEAR"
    NORMAL = "NORMAL"
    UNKNOWN = "UNKNOWN"

    @property
    def rank(self) -> int:
        return _TIER_ORDER.index(self)

    # str already defines the comparisons, so all four are overridden by rank.
    def __lt__(self, other):
        if not isinstance(other, UrgencyTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, UrgencyTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, UrgencyTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, UrgencyTier):
            return NotImplemented
        return self.rank >= other.rank


_TIER_ORDER = list(UrgencyTier)


class SessionFilter(str, Enum):
    """Bộ lọc danh sách buổi học."""

    ALL = "all"
    UPCOMING = "upcoming"
    PAST = "past"
