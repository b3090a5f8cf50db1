from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body, query_flag, query_today
from ..common.validators import require_list
from ..core.exceptions import ValidationError
from ..container import Container
from .service import deadline_requests_from_payload

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/requests/deadlines", methods=["POST"], endpoint="api_request_deadlines")
    def api_request_deadlines():
        try:
            rows = require_list(json_body().get("requests"), "requests")
            result = container.request_deadline_service.build_rows(
                deadline_requests_from_payload(rows),
                today=query_today(),
                urgent_only=query_flag("urgent"),
            )
            return jsonify({"success": True, "data": [r.to_dict() for r in result]}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("request deadline list failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi tải danh sách yêu cầu"}), 500
