from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import query_today
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/urgency", endpoint="api_urgency")
    def api_urgency():
        urgency = container.urgency_classifier.classify(request.args.get("date"), query_today())
        return jsonify({"success": True, "data": urgency.to_dict()}), 200
