"""Tests for hour-angle, rise and set searches."""

from __future__ import annotations

import pytest

from ephemeris_events.ephemeris import Observer
from ephemeris_events.events.riseset import peak_altitude, search_hour_angle, search_rise_set
from ephemeris_events.planets import Body
from ephemeris_events.results import Direction, Status
from ephemeris_events.time_utils import AstroTime

_EQUATOR = Observer(latitude=0.0, longitude=0.0)
_ARCTIC = Observer(latitude=80.0, longitude=15.0, height=50.0)


def test_solar_noon_on_the_equator(minutes_between) -> None:
    """Upper culmination of the Sun at the equinox is near the zenith."""

    event = search_hour_angle(Body.SUN, _EQUATOR, 0.0, AstroTime.make(2020, 3, 20))

    assert event.ok
    # Equation of time is about -7.5 minutes at the March equinox.
    assert minutes_between(event.time, AstroTime.make(2020, 3, 20, 12, 7, 30)) < 2.0
    assert event.hor.altitude > 89.0


def test_hour_angle_first_step_is_forward() -> None:
    start = AstroTime.make(2020, 3, 20, 13)

    event = search_hour_angle(Body.SUN, _EQUATOR, 0.0, start)

    assert event.ok
    assert event.time.ut == pytest.approx(start.ut + 23.1 / 24.0, abs=0.01)


@pytest.mark.parametrize('hour_angle', [-1.0, 24.0])
def test_hour_angle_out_of_range(hour_angle: float) -> None:
    event = search_hour_angle(Body.SUN, _EQUATOR, hour_angle, AstroTime.make(2020, 3, 20))

    assert event.status == Status.INVALID_PARAMETER


def test_hour_angle_rejects_earth() -> None:
    event = search_hour_angle(Body.EARTH, _EQUATOR, 0.0, AstroTime.make(2020, 3, 20))

    assert event.status == Status.EARTH_NOT_ALLOWED


@pytest.mark.parametrize(
    ('direction', 'expected'),
    [(Direction.RISE, (2020, 3, 20, 6, 4)), (Direction.SET, (2020, 3, 20, 18, 11))],
)
def test_sunrise_and_sunset_on_the_equator(
    direction: Direction, expected: tuple[int, ...], minutes_between
) -> None:
    result = search_rise_set(Body.SUN, _EQUATOR, direction, AstroTime.make(2020, 3, 20), 2.0)

    assert result.ok
    assert minutes_between(result.time, AstroTime.make(*expected)) < 5.0
    altitude = peak_altitude(Body.SUN, _EQUATOR, direction, result.time)
    assert altitude.value == pytest.approx(0.0, abs=0.01)


def test_rise_after_start_when_already_up() -> None:
    """Starting at noon skips to the next morning's sunrise."""

    start = AstroTime.make(2020, 3, 20, 12)

    result = search_rise_set(Body.SUN, _EQUATOR, Direction.RISE, start, 2.0)

    assert result.ok
    assert 0.6 < result.time.ut - start.ut < 0.8


def test_moonrise_found() -> None:
    start = AstroTime.make(2020, 3, 1)

    result = search_rise_set(Body.MOON, _EQUATOR, Direction.RISE, start, 2.0)

    assert result.ok
    assert start.ut < result.time.ut < start.ut + 2.0
    assert peak_altitude(Body.MOON, _EQUATOR, Direction.RISE, result.time).value == (
        pytest.approx(0.0, abs=0.02)
    )


@pytest.mark.parametrize('direction', [Direction.RISE, Direction.SET])
def test_midnight_sun_has_no_rise_or_set(direction: Direction) -> None:
    """A circumpolar Sun never crosses the horizon inside the limit."""

    result = search_rise_set(Body.SUN, _ARCTIC, direction, AstroTime.make(2020, 6, 1), 5.0)

    assert result.status == Status.SEARCH_FAILURE


def test_rise_set_rejects_earth() -> None:
    result = search_rise_set(Body.EARTH, _EQUATOR, Direction.RISE, AstroTime.make(2020, 6, 1), 5.0)

    assert result.status == Status.EARTH_NOT_ALLOWED


@pytest.mark.parametrize('direction', [0, 2, 'rise', None])
def test_rise_set_rejects_unknown_direction(direction: object) -> None:
    """Anything other than RISE or SET is refused before searching."""

    result = search_rise_set(Body.SUN, _EQUATOR, direction, AstroTime.make(2020, 3, 20), 2.0)

    assert result.status == Status.INVALID_PARAMETER


def test_rise_set_accepts_plain_integer_direction(minutes_between) -> None:
    """+1 is the numeric value of RISE and finds the same sunrise."""

    start = AstroTime.make(2020, 3, 20)

    plain = search_rise_set(Body.SUN, _EQUATOR, 1, start, 2.0)
    enum = search_rise_set(Body.SUN, _EQUATOR, Direction.RISE, start, 2.0)

    assert plain.ok
    assert minutes_between(plain.time, enum.time) < 1.0e-3
