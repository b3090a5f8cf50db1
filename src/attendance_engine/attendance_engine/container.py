from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_NEAR_DAYS, DEFAULT_PROJECTION_WEEKS, DEFAULT_VIEW_CACHE_SIZE
from .heatmap.projector import CalendarWeekProjector
from .requests.service import RequestDeadlineService
from .sessions.factory import StatusStrategyFactory
from .sessions.normalizer import SessionRecordNormalizer
from .sessions.service import AttendanceViewService
from .summary.aggregator import AttendanceAggregator
from .urgency.classifier import UrgencyClassifier


@dataclass(frozen=True)
class Container:
    urgency_classifier: UrgencyClassifier
    attendance_view_service: AttendanceViewService
    request_deadline_service: RequestDeadlineService


def build_container(
    *,
    near_days: int = DEFAULT_NEAR_DAYS,
    projection_weeks: int = DEFAULT_PROJECTION_WEEKS,
    view_cache_size: int = DEFAULT_VIEW_CACHE_SIZE,
) -> Container:
    urgency_classifier = UrgencyClassifier(near_days=near_days)
    attendance_view_service = AttendanceViewService(
        normalizer=SessionRecordNormalizer(strategy_factory=StatusStrategyFactory()),
        aggregator=AttendanceAggregator(),
        projector=CalendarWeekProjector(default_weeks=projection_weeks),
        cache_size=view_cache_size,
    )
    request_deadline_service = RequestDeadlineService(classifier=urgency_classifier, near_days=near_days)

    return Container(
        urgency_classifier=urgency_classifier,
        attendance_view_service=attendance_view_service,
        request_deadline_service=request_deadline_service,
    )
