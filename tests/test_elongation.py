"""Tests for elongation and greatest-elongation searches."""

from __future__ import annotations

import pytest

from ephemeris_events.events.greatest_elongation import (
    angle_from_sun,
    elongation,
    longitude_from_sun,
    search_max_elongation,
)
from ephemeris_events.planets import Body
from ephemeris_events.results import Status, Visibility
from ephemeris_events.time_utils import AstroTime


def test_elongation_of_evening_venus() -> None:
    info = elongation(Body.VENUS, AstroTime.make(2020, 3, 24, 22))

    assert info.ok
    assert info.visibility == Visibility.EVENING
    assert info.elongation == pytest.approx(46.08, abs=0.1)
    assert info.ecliptic_separation == pytest.approx(info.elongation, abs=5.0)


def test_elongation_of_morning_venus() -> None:
    info = elongation(Body.VENUS, AstroTime.make(2020, 8, 13))

    assert info.visibility == Visibility.MORNING
    assert info.elongation == pytest.approx(45.8, abs=0.2)


def test_degenerate_bodies() -> None:
    """The Sun sits at zero elongation; Earth has no direction from its own center."""

    t = AstroTime.make(2020, 5, 1)

    assert angle_from_sun(Body.SUN, t).angle == pytest.approx(0.0, abs=1.0e-6)
    assert angle_from_sun(Body.EARTH, t).status == Status.BAD_VECTOR
    assert longitude_from_sun(Body.EARTH, t).status == Status.EARTH_NOT_ALLOWED


@pytest.mark.parametrize(
    ('body', 'start', 'expected', 'angle', 'visibility'),
    [
        (Body.VENUS, (2020, 1, 1), (2020, 3, 24, 22), 46.08, Visibility.EVENING),
        (Body.VENUS, (2020, 4, 1), (2020, 8, 13, 0), 45.79, Visibility.MORNING),
        (Body.MERCURY, (2020, 1, 15), (2020, 2, 10, 14), 18.2, Visibility.EVENING),
        (Body.MERCURY, (2020, 2, 20), (2020, 3, 24, 2), 27.8, Visibility.MORNING),
    ],
)
def test_search_max_elongation(
    body: Body,
    start: tuple[int, ...],
    expected: tuple[int, ...],
    angle: float,
    visibility: Visibility,
) -> None:
    info = search_max_elongation(body, AstroTime.make(*start))

    assert info.ok
    assert info.time.ut == pytest.approx(AstroTime.make(*expected).ut, abs=0.5)
    assert info.elongation == pytest.approx(angle, abs=0.2)
    assert info.visibility == visibility


def test_search_max_elongation_after_start() -> None:
    """Starting just after an elongation finds the next one, not the one passed."""

    start = AstroTime.make(2020, 3, 26)

    info = search_max_elongation(Body.VENUS, start)

    assert info.ok
    assert info.time.ut > start.ut
    assert info.visibility == Visibility.MORNING


@pytest.mark.parametrize('body', [Body.MARS, Body.MOON, Body.SUN])
def test_search_max_elongation_rejects_other_bodies(body: Body) -> None:
    assert search_max_elongation(body, AstroTime.make(2020, 1, 1)).status == Status.INVALID_BODY
