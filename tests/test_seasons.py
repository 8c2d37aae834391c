"""Tests for equinox and solstice searches."""

from __future__ import annotations

import pytest

from ephemeris_events.events.equinoxes import search_sun_longitude, seasons
from ephemeris_events.results import Season, SearchResult, Status
from ephemeris_events.time_utils import AstroTime


@pytest.mark.parametrize(
    ('season', 'expected'),
    [
        (Season.MAR_EQUINOX, (2020, 3, 20, 3, 50)),
        (Season.JUN_SOLSTICE, (2020, 6, 20, 21, 44)),
        (Season.SEP_EQUINOX, (2020, 9, 22, 13, 31)),
        (Season.DEC_SOLSTICE, (2020, 12, 21, 10, 2)),
    ],
)
def test_seasons_2020(season: Season, expected: tuple[int, ...], minutes_between) -> None:
    info = seasons(2020)

    assert info.ok
    assert minutes_between(info.time_of(season), AstroTime.make(*expected)) < 2.0


def test_search_sun_longitude_outside_window() -> None:
    """A window that does not contain the crossing fails without raising."""

    result = search_sun_longitude(0.0, AstroTime.make(2020, 4, 1), 4.0)

    assert result.status == Status.SEARCH_FAILURE


def test_seasons_reports_last_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    """Events that are found are kept; the record carries the failing status."""

    def _fake_search(target_lon: float, date_start: AstroTime, limit_days: float) -> SearchResult:
        del limit_days
        if target_lon == 180.0:
            return SearchResult.error(Status.SEARCH_FAILURE)
        return SearchResult.success(date_start)

    monkeypatch.setattr('ephemeris_events.events.equinoxes.search_sun_longitude', _fake_search)

    info = seasons(2021)

    assert info.status == Status.SEARCH_FAILURE
    assert info.sep_equinox is None
    assert info.mar_equinox == AstroTime.make(2021, 3, 19)
