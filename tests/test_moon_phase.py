"""Tests for lunar phase and quarter searches."""

from __future__ import annotations

import logging

import pytest

from ephemeris_events.events.lunar_phase import (
    moon_phase,
    next_moon_quarter,
    search_moon_phase,
    search_moon_quarter,
)
from ephemeris_events.results import MoonQuarter, MoonQuarterKind, Status
from ephemeris_events.time_utils import AstroTime

# Quarters after 2020-03-01 (UTC).
_QUARTERS_2020 = [
    (MoonQuarterKind.FIRST_QUARTER, (2020, 3, 2, 19, 57)),
    (MoonQuarterKind.FULL_MOON, (2020, 3, 9, 17, 48)),
    (MoonQuarterKind.LAST_QUARTER, (2020, 3, 16, 9, 34)),
    (MoonQuarterKind.NEW_MOON, (2020, 3, 24, 9, 28)),
    (MoonQuarterKind.FIRST_QUARTER, (2020, 4, 1, 10, 21)),
]


def test_moon_phase_at_full_moon() -> None:
    phase = moon_phase(AstroTime.make(2020, 3, 9, 17, 48))

    assert phase.ok
    assert phase.angle == pytest.approx(180.0, abs=0.05)


def test_quarter_sequence(minutes_between) -> None:
    """Quarters advance 0 -> 1 -> 2 -> 3 -> 0 and match published times."""

    mq = search_moon_quarter(AstroTime.make(2020, 3, 1))
    for quarter, expected in _QUARTERS_2020:
        assert mq.ok
        assert mq.quarter == quarter
        assert minutes_between(mq.time, AstroTime.make(*expected)) < 3.0
        mq = next_moon_quarter(mq)


def test_search_moon_phase_arbitrary_angle() -> None:
    start = AstroTime.make(2020, 3, 2)

    result = search_moon_phase(120.0, start, 10.0)

    assert result.ok
    assert result.time.ut > start.ut
    assert moon_phase(result.time).angle == pytest.approx(120.0, abs=0.001)


def test_search_moon_phase_past_limit() -> None:
    """A full moon more than two days away is not found with a two-day limit."""

    result = search_moon_phase(180.0, AstroTime.make(2020, 3, 1), 2.0)

    assert result.status == Status.NO_MOON_QUARTER


def test_next_moon_quarter_wrong_quarter(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Finding the same quarter twice is an internal inconsistency."""

    current = MoonQuarter(Status.SUCCESS, MoonQuarterKind.FULL_MOON, AstroTime.make(2020, 3, 9))
    monkeypatch.setattr(
        'ephemeris_events.events.lunar_phase.search_moon_quarter',
        lambda start: MoonQuarter(Status.SUCCESS, MoonQuarterKind.FULL_MOON, start),
    )

    with caplog.at_level(logging.WARNING):
        result = next_moon_quarter(current)

    assert result.status == Status.WRONG_MOON_QUARTER
    assert 'Expected LAST_QUARTER' in caplog.text


def test_next_moon_quarter_rejects_failed_input() -> None:
    result = next_moon_quarter(MoonQuarter.error(Status.NO_MOON_QUARTER))

    assert result.status == Status.INVALID_PARAMETER
