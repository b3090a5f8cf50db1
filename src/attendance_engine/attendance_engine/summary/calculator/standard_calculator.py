from __future__ import annotations

from typing import Optional

from .base import RateCalculator


def _percent(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return part / whole * 100


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 100.0)


class StandardRateCalculator(RateCalculator):
    """Standard rule: attended / (attended + absent), 0 before any session is held.

    A backend rate (0-1 fraction) wins when present. Excused and planned
    sessions stay out of the denominator.
    """

    def attendance_rate(self, *, attended: int, absent: int, precomputed: Optional[float] = None) -> float:
        if precomputed is not None:
            return _clamp(precomputed * 100)
        return _percent(attended, attended + absent)

    def homework_rate(self, *, completed: int, incomplete: int) -> float:
        return _percent(completed, completed + incomplete)
