"""Tests for the Venus peak magnitude search."""

from __future__ import annotations

import pytest

from ephemeris_events.events.magnitude import magnitude_slope, search_peak_magnitude
from ephemeris_events.planets import Body
from ephemeris_events.results import Status
from ephemeris_events.time_utils import AstroTime


def test_venus_peak_april_2020() -> None:
    """Venus reached greatest brilliancy at the end of April 2020."""

    info = search_peak_magnitude(Body.VENUS, AstroTime.make(2020, 3, 1))

    assert info.ok
    assert info.time.ut == pytest.approx(AstroTime.make(2020, 4, 30, 1, 39).ut, abs=0.125)
    assert info.mag == pytest.approx(-4.73, abs=0.05)
    assert magnitude_slope(Body.VENUS, info.time).value == pytest.approx(0.0, abs=1.0e-3)


def test_venus_morning_peak_2020() -> None:
    """The following peak comes in the morning sky after inferior conjunction."""

    info = search_peak_magnitude(Body.VENUS, AstroTime.make(2020, 5, 1))

    assert info.ok
    assert info.time.ut == pytest.approx(AstroTime.make(2020, 7, 10).ut, abs=3.0)


@pytest.mark.parametrize('body', [Body.MERCURY, Body.MARS, Body.EARTH])
def test_only_venus_supported(body: Body) -> None:
    assert search_peak_magnitude(body, AstroTime.make(2020, 1, 1)).status == Status.INVALID_BODY
