from datetime import date

from src.attendance_engine.attendance_engine.core.enums import AttendanceStatus, SessionStatus
from src.attendance_engine.attendance_engine.sessions.factory import StatusStrategyFactory
from src.attendance_engine.attendance_engine.sessions.strategies.cancelled_strategy import CancelledStrategy
from src.attendance_engine.attendance_engine.sessions.strategies.recorded_strategy import RecordedStrategy
from src.attendance_engine.attendance_engine.sessions.strategies.scheduled_strategy import ScheduledStrategy


def test_factory_cancelled_beats_recorded_status():
    factory = StatusStrategyFactory()
    strategy = factory.for_session(schedule_status=SessionStatus.CANCELLED, recorded=AttendanceStatus.PRESENT)

    assert isinstance(strategy, CancelledStrategy)


def test_factory_recorded_status_when_present():
    factory = StatusStrategyFactory()
    strategy = factory.for_session(schedule_status=SessionStatus.DONE, recorded=AttendanceStatus.ABSENT)

    assert isinstance(strategy, RecordedStrategy)


def test_factory_scheduled_when_nothing_recorded():
    factory = StatusStrategyFactory()

    assert isinstance(factory.for_session(schedule_status=None, recorded=None), ScheduledStrategy)


def test_scheduled_strategy_plans_today_and_later():
    today = date(2025, 1, 1)
    strategy = ScheduledStrategy()

    assert strategy.decide(session_date=today, today=today, recorded=None, note=None).status == AttendanceStatus.PLANNED
    assert strategy.decide(session_date=date(2024, 12, 31), today=today, recorded=None, note=None).status == AttendanceStatus.UNKNOWN
