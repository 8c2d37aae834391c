"""Tests for the body registry and synodic periods."""

from __future__ import annotations

import pytest

from ephemeris_events.constants import MEAN_SYNODIC_MONTH
from ephemeris_events.planets import Body, get_model, is_superior, synodic_period
from ephemeris_events.results import Status


@pytest.mark.parametrize(
    ('body', 'days'),
    [
        (Body.MERCURY, 115.88),
        (Body.VENUS, 583.92),
        (Body.MARS, 779.94),
        (Body.JUPITER, 398.88),
        (Body.SATURN, 378.09),
    ],
)
def test_synodic_period(body: Body, days: float) -> None:
    result = synodic_period(body)

    assert result.ok
    assert result.value == pytest.approx(days, abs=0.1)


def test_synodic_period_of_moon() -> None:
    assert synodic_period(Body.MOON).value == MEAN_SYNODIC_MONTH


@pytest.mark.parametrize(
    ('body', 'status'),
    [(Body.EARTH, Status.EARTH_NOT_ALLOWED), (Body.SUN, Status.INVALID_BODY)],
)
def test_synodic_period_rejected(body: Body, status: Status) -> None:
    assert synodic_period(body).status == status


def test_superior_planets() -> None:
    assert not is_superior(Body.VENUS)
    assert is_superior(Body.MARS)
    assert is_superior(Body.PLUTO)


def test_venus_crescent_coefficients() -> None:
    """Past 163.6 degrees of phase Venus switches to its crescent formula."""

    venus = get_model(Body.VENUS)

    assert venus.magnitude_coefficients(100.0) == venus.magnitude
    assert venus.magnitude_coefficients(170.0) == venus.crescent_magnitude


def test_radii() -> None:
    assert get_model(Body.SUN).radius_au > get_model(Body.MOON).radius_au > 0.0
    assert get_model(Body.MARS).radius_au == 0.0
