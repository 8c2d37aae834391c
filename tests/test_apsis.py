"""Tests for lunar perigee and apogee searches."""

from __future__ import annotations

import logging

import pytest

from ephemeris_events.events.apsis import next_lunar_apsis, search_lunar_apsis
from ephemeris_events.results import ApsisInfo, ApsisKind, Status
from ephemeris_events.time_utils import AstroTime


def test_perigee_april_2020(minutes_between) -> None:
    apsis = search_lunar_apsis(AstroTime.make(2020, 4, 1))

    assert apsis.ok
    assert apsis.kind == ApsisKind.PERICENTER
    assert minutes_between(apsis.time, AstroTime.make(2020, 4, 7, 18, 8)) < 60.0
    assert apsis.dist_km == pytest.approx(356907.0, abs=50.0)


def test_apogee_follows_perigee(minutes_between) -> None:
    perigee = search_lunar_apsis(AstroTime.make(2020, 4, 1))

    apogee = next_lunar_apsis(perigee)

    assert apogee.ok
    assert apogee.kind == ApsisKind.APOCENTER
    assert minutes_between(apogee.time, AstroTime.make(2020, 4, 20, 19, 0)) < 120.0
    assert apogee.dist_km == pytest.approx(406462.0, abs=200.0)


def test_kinds_alternate_through_a_year() -> None:
    """Each apsis is followed by the other kind within about two weeks."""

    apsis = search_lunar_apsis(AstroTime.make(2021, 1, 1))
    for _ in range(26):
        following = next_lunar_apsis(apsis)
        assert following.ok
        assert following.kind != apsis.kind
        assert 11.0 < following.time.ut - apsis.time.ut < 59.0
        apsis = following


@pytest.mark.parametrize(
    'apsis',
    [ApsisInfo.error(Status.SEARCH_FAILURE), ApsisInfo(Status.SUCCESS, AstroTime.make(2020, 1, 1))],
)
def test_next_lunar_apsis_rejects_invalid_input(apsis: ApsisInfo) -> None:
    assert next_lunar_apsis(apsis).status == Status.INVALID_PARAMETER


def test_next_lunar_apsis_same_kind_twice(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Finding the same kind of apsis again is an internal inconsistency."""

    current = ApsisInfo(Status.SUCCESS, AstroTime.make(2020, 4, 7), ApsisKind.PERICENTER, 0.0024)
    monkeypatch.setattr(
        'ephemeris_events.events.apsis.search_lunar_apsis',
        lambda start: ApsisInfo(Status.SUCCESS, start, ApsisKind.PERICENTER, 0.0024),
    )

    with caplog.at_level(logging.WARNING):
        result = next_lunar_apsis(current)

    assert result.status == Status.INTERNAL_ERROR
    assert result.time is None
    assert 'is again PERICENTER' in caplog.text
