from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import UNKNOWN_SORT_DAYS
from ..core.enums import UrgencyTier


@dataclass(frozen=True)
class Urgency:
    tier: UrgencyTier
    days_until: Optional[int] = None

    @property
    def sort_key(self) -> int:
        """Ascending urgency; UNKNOWN sorts as if it were far in the future."""
        return self.days_until if self.days_until is not None else UNKNOWN_SORT_DAYS

    @property
    def label(self) -> str:
        if self.tier == UrgencyTier.UNKNOWN:
            return "Không rõ"
        if self.tier == UrgencyTier.OVERDUE:
            return f"Đã qua {abs(self.days_until)} ngày"
        if self.tier == UrgencyTier.TODAY:
            return "Diễn ra hôm nay"
        return f"Còn {self.days_until} ngày"

    def to_dict(self) -> dict:
        return {"tier": self.tier.value, "daysUntil": self.days_until, "label": self.label}
