from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class RateCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance rates)."""

    @abstractmethod
    def attendance_rate(self, *, attended: int, absent: int, precomputed: Optional[float] = None) -> float:
        raise NotImplementedError

    @abstractmethod
    def homework_rate(self, *, completed: int, incomplete: int) -> float:
        raise NotImplementedError
