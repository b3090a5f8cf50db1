"""Ví dụ: dựng bảng điểm danh của một lớp (không qua Flask).

Ba nguồn dữ liệu (lịch học, buổi học của học viên, báo cáo) được gộp lại
thành danh sách buổi, thống kê và lưới tuần cho heatmap.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.attendance_engine.attendance_engine.container import build_container
from src.attendance_engine.attendance_engine.requests.service import deadline_requests_from_payload
from src.attendance_engine.attendance_engine.sessions.payload_source import PayloadSessionSource

PAYLOAD = {
    "schedule": {
        "pastSessions": [
            {"id": 1, "date": "2024-03-04", "startTime": "18:00:00", "endTime": "20:00:00", "room": "P.101"},
            {"id": 2, "date": "2024-03-06", "startTime": "18:00:00", "endTime": "20:00:00", "status": "CANCELLED"},
        ],
        "upcomingSessions": [{"id": 3, "date": "2024-03-11", "teacherNames": ["Cô Lan"]}],
    },
    "studentSessions": [{"sessionId": 1, "attendanceStatus": "PRESENT", "homeworkStatus": "COMPLETED"}],
    "report": {"sessions": [{"sessionId": 1, "sessionNumber": 1}], "summary": {"attendanceRate": 1.0}},
}


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(near_days=settings.NEAR_DAYS, projection_weeks=settings.DEFAULT_PROJECTION_WEEKS)
    today = date(2024, 3, 10)

    view = container.attendance_view_service.build_view(PayloadSessionSource.from_payload(PAYLOAD), today=today)
    for row in view.rows:
        print(row["order"], row["date_label"], row["time_range"], row["status_label"], row["note"])
    print(view.summary.to_dict())
    for week in view.weeks:
        print(week.start_date, [d.cell_status for d in week.days])

    requests = deadline_requests_from_payload([{"id": 7, "requestType": "ABSENCE", "sessionDate": "2024-03-11"}])
    for row in container.request_deadline_service.build_rows(requests, today=today):
        print(row.request.request_id, row.urgency.label)


if __name__ == "__main__":
    main()
