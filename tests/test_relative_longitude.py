"""Tests for relative longitude searches."""

from __future__ import annotations

import logging

import pytest

from ephemeris_events.events.planet_longitude import (
    relative_longitude,
    search_relative_longitude,
)
from ephemeris_events.planets import Body
from ephemeris_events.results import Status
from ephemeris_events.time_utils import AstroTime


def test_mars_opposition_2020() -> None:
    """Heliocentric alignment of Earth and Mars falls on the 2020 opposition."""

    result = search_relative_longitude(Body.MARS, 0.0, AstroTime.make(2020, 9, 1))

    assert result.ok
    assert result.time.ut == pytest.approx(AstroTime.make(2020, 10, 14).ut, abs=0.5)
    assert relative_longitude(Body.MARS, result.time).value == pytest.approx(0.0, abs=1.0e-3)


def test_venus_inferior_conjunction_2020() -> None:
    result = search_relative_longitude(Body.VENUS, 0.0, AstroTime.make(2020, 1, 1))

    assert result.ok
    assert result.time.ut == pytest.approx(AstroTime.make(2020, 6, 3, 18).ut, abs=0.5)


def test_search_moves_forward() -> None:
    """A target just passed is found one synodic period later."""

    start = AstroTime.make(2020, 10, 20)

    result = search_relative_longitude(Body.MARS, 0.0, start)

    assert result.ok
    assert 700.0 < result.time.ut - start.ut < 800.0


@pytest.mark.parametrize(
    ('body', 'status'),
    [(Body.EARTH, Status.EARTH_NOT_ALLOWED), (Body.MOON, Status.INVALID_BODY)],
)
def test_rejected_bodies(body: Body, status: Status) -> None:
    assert search_relative_longitude(body, 0.0, AstroTime.make(2020, 1, 1)).status == status


def test_iteration_cap(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    """Stepping that never settles ends with NO_CONVERGE and a warning."""

    monkeypatch.setattr(
        'ephemeris_events.events.planet_longitude.RELATIVE_LONGITUDE_ITER_LIMIT', 1
    )

    with caplog.at_level(logging.WARNING):
        result = search_relative_longitude(Body.JUPITER, 90.0, AstroTime.make(2020, 1, 1))

    assert result.status == Status.NO_CONVERGE
    assert 'did not converge' in caplog.text
