from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..summary.model import ReportSummary
from .model import RawSession, ReportSession, StudentOverride


class SessionSource(Protocol):
    """Read side of the three session datasets for one class and student.

    A dataset that has not been loaded yet is returned as an empty sequence.
    """

    def list_schedule(self) -> Sequence[RawSession]:
        raise NotImplementedError

    def list_overrides(self) -> Sequence[StudentOverride]:
        raise NotImplementedError

    def list_report_sessions(self) -> Sequence[ReportSession]:
        raise NotImplementedError

    def get_report_summary(self) -> Optional[ReportSummary]:
        raise NotImplementedError
