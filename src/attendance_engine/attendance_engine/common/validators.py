from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError


def require_mapping(value: Any, field_name: str) -> Mapping:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field_name} phải là một đối tượng JSON")
    return value


def require_list(value: Any, field_name: str) -> list:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} phải là một danh sách")
    return list(value)


def optional_int(value: Any) -> Optional[int]:
    """Coerce ids/sequence numbers; bools, blanks and garbage become None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


def as_count(value: Any) -> int:
    """Non-negative integer counter, defaulting to 0."""
    number = optional_int(value)
    if number is None and isinstance(value, float) and math.isfinite(value):
        number = int(value)
    return max(number or 0, 0)


def optional_rate(value: Any) -> Optional[float]:
    """Finite float or None (NaN/inf/non-numeric are treated as absent)."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number
