from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture
def fixed_today() -> date:
    # Sunday, so the current week is 2024-03-04 .. 2024-03-10
    return date(2024, 3, 10)
