"""Shared helpers for event tests."""

from __future__ import annotations

import pytest

from ephemeris_events.time_utils import AstroTime


@pytest.fixture
def minutes_between():
    """Return a function giving the absolute difference of two times in minutes."""

    def _minutes_between(a: AstroTime, b: AstroTime) -> float:
        return abs(a.ut - b.ut) * 1440.0

    return _minutes_between
