from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_body, query_date, query_today
from ..core.enums import SessionFilter
from ..core.exceptions import ValidationError
from ..container import Container
from .payload_source import PayloadSessionSource

logger = logging.getLogger(__name__)


def parse_session_filter(value: str | None) -> SessionFilter:
    try:
        return SessionFilter((value or SessionFilter.ALL.value).strip().lower())
    except ValueError:
        raise ValidationError("Bộ lọc không hợp lệ (all | upcoming | past)") from None


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<int:class_id>/attendance-view", methods=["POST"], endpoint="api_attendance_view")
    def api_attendance_view(class_id: int):
        """Merge schedule, student sessions and report into one attendance view."""
        try:
            source = PayloadSessionSource.from_payload(json_body())
            view = container.attendance_view_service.build_view(
                source,
                today=query_today(),
                range_start=query_date("start"),
                range_end=query_date("end"),
                session_filter=parse_session_filter(request.args.get("filter")),
            )
            return jsonify({"success": True, "classId": class_id, "data": view.to_dict()}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("attendance view failed for class %s", class_id)
            return jsonify({"success": False, "message": "Lỗi hệ thống khi tổng hợp điểm danh"}), 500
