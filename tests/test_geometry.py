"""Sanity tests for the positional models behind the event searches."""

from __future__ import annotations

import numpy as np
import pytest

from ephemeris_events.constants import KM_PER_AU
from ephemeris_events.ephemeris import (
    Aberration,
    EquatorDate,
    Observer,
    angle_between,
    ecliptic,
    ecliptic_longitude,
    equator,
    geo_moon,
    geo_vector,
    helio_vector,
    illumination,
    moon_distance,
    sidereal_time,
    sun_position,
)
from ephemeris_events.planets import Body
from ephemeris_events.results import Status
from ephemeris_events.time_utils import AstroTime
from ephemeris_events.vectors import vector_to_radec


def test_earth_sun_distance_at_perihelion() -> None:
    earth = helio_vector(Body.EARTH, AstroTime.make(2020, 1, 5))

    assert earth.ok
    assert earth.length() == pytest.approx(0.9833, abs=0.001)


@pytest.mark.parametrize(
    ('body', 'low', 'high'),
    [
        (Body.MERCURY, 0.30, 0.47),
        (Body.VENUS, 0.71, 0.73),
        (Body.MARS, 1.38, 1.67),
        (Body.JUPITER, 4.95, 5.46),
        (Body.NEPTUNE, 29.8, 30.4),
        (Body.PLUTO, 29.6, 49.4),
    ],
)
def test_heliocentric_distances(body: Body, low: float, high: float) -> None:
    result = helio_vector(body, AstroTime.make(2020, 6, 1))

    assert result.ok
    assert low < result.length() < high


def test_pluto_outside_fit_is_bad_time() -> None:
    result = helio_vector(Body.PLUTO, AstroTime.from_ut(100000.0))

    assert result.status == Status.BAD_TIME


def test_moon_distance_range() -> None:
    t = AstroTime.make(2020, 4, 7, 18, 8)

    assert moon_distance(t) * KM_PER_AU == pytest.approx(356907.0, abs=50.0)
    assert geo_moon(t).length() == pytest.approx(moon_distance(t))


def test_sun_apparent_longitude_at_equinox() -> None:
    """The Sun's apparent longitude is zero at the March equinox."""

    ecl = sun_position(AstroTime.make(2020, 3, 20, 3, 50))

    assert ecl.ok
    assert ecl.elat == pytest.approx(0.0, abs=0.001)
    assert min(ecl.elon, 360.0 - ecl.elon) < 0.002


def test_sun_declination_at_solstice() -> None:
    t = AstroTime.make(2020, 6, 20, 21, 44)
    equ = equator(Body.SUN, t, Observer(0.0, 0.0), EquatorDate.OF_DATE, Aberration.CORRECTED)

    assert equ.ok
    assert equ.dec == pytest.approx(23.44, abs=0.01)
    assert equ.ra == pytest.approx(6.0, abs=0.01)


def test_ecliptic_longitude_rejects_sun() -> None:
    result = ecliptic_longitude(Body.SUN, AstroTime.make(2020, 1, 1))

    assert result.status == Status.INVALID_BODY


def test_mars_opposite_sun_at_opposition() -> None:
    t = AstroTime.make(2020, 10, 13, 23, 20)
    sun = ecliptic(geo_vector(Body.SUN, t, Aberration.NONE))
    mars = ecliptic(geo_vector(Body.MARS, t, Aberration.NONE))

    assert (mars.elon - sun.elon) % 360.0 == pytest.approx(180.0, abs=0.1)


def test_angle_between() -> None:
    assert angle_between(np.array([1.0, 0.0, 0.0]), np.array([0.0, 2.0, 0.0])).angle == (
        pytest.approx(90.0)
    )
    assert angle_between(np.zeros(3), np.array([1.0, 0.0, 0.0])).status == Status.BAD_VECTOR


def test_vector_to_radec() -> None:
    equ = vector_to_radec(np.array([0.0, -2.0, 0.0]))

    assert equ.ra == pytest.approx(18.0)
    assert equ.dec == pytest.approx(0.0)
    assert equ.dist == pytest.approx(2.0)

    pole = vector_to_radec(np.array([0.0, 0.0, -3.0]))
    assert (pole.ra, pole.dec, pole.dist) == (0.0, -90.0, 3.0)

    assert vector_to_radec(np.zeros(3)).status == Status.BAD_VECTOR


def test_sidereal_time_at_epoch() -> None:
    """Greenwich apparent sidereal time at 2000-01-01T12:00 UT is about 18.697 h."""

    assert sidereal_time(AstroTime.from_ut(0.0)) == pytest.approx(18.697, abs=0.001)


def test_illumination() -> None:
    t = AstroTime.make(2020, 6, 1)

    sun = illumination(Body.SUN, t)
    assert sun.ok
    assert sun.mag == pytest.approx(-26.75, abs=0.1)
    assert sun.phase_angle == 0.0

    jupiter = illumination(Body.JUPITER, t)
    assert jupiter.ok
    assert -2.9 < jupiter.mag < -2.2

    saturn = illumination(Body.SATURN, t)
    assert saturn.ok
    assert 15.0 < abs(saturn.ring_tilt) < 25.0

    assert illumination(Body.EARTH, t).status == Status.EARTH_NOT_ALLOWED
