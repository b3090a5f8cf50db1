from __future__ import annotations

from datetime import date
from typing import Optional

from flask import request

from .datetime_utils import today_local, try_parse_date
from .validators import require_mapping


def json_body() -> dict:
    """Request body as a dict; an empty body counts as ``{}``."""
    return dict(require_mapping(request.get_json(silent=True), "Dữ liệu gửi lên"))


def query_date(name: str) -> Optional[date]:
    # Unparseable dates are treated as not supplied.
    return try_parse_date(request.args.get(name))


def query_today() -> date:
    return query_date("today") or today_local()


def query_flag(name: str) -> bool:
    return (request.args.get(name) or "").strip().lower() in {"1", "true", "yes"}
