"""Tests for angle wrapping helpers."""

from __future__ import annotations

import pytest

from ephemeris_events.angle_utils import longitude_offset, normalize_longitude, wrap_hours


@pytest.mark.parametrize(
    ('diff', 'expected'),
    [(0.0, 0.0), (180.0, 180.0), (-180.0, 180.0), (190.0, -170.0), (-540.0, 180.0), (725.0, 5.0)],
)
def test_longitude_offset(diff: float, expected: float) -> None:
    assert longitude_offset(diff) == pytest.approx(expected)


@pytest.mark.parametrize(
    ('lon', 'expected'),
    [(-10.0, 350.0), (360.0, 0.0), (725.0, 5.0), (0.0, 0.0)],
)
def test_normalize_longitude(lon: float, expected: float) -> None:
    assert normalize_longitude(lon) == pytest.approx(expected)


def test_wrap_hours() -> None:
    assert wrap_hours(-1.0) == pytest.approx(23.0)
    assert wrap_hours(24.0) == 0.0
    assert wrap_hours(49.5) == pytest.approx(1.5)
