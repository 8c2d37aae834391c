"""Body registry: orbital periods, synodic periods, magnitude models."""

from __future__ import annotations

import logging

from ephemeris_events.constants import (
    EARTH_ORBITAL_PERIOD,
    MEAN_SYNODIC_MONTH,
    MOON_RADIUS_AU,
    SUN_RADIUS_AU,
)
from ephemeris_events.planets.base import Body, OrbitalModel
from ephemeris_events.results import FuncResult, Status

logger = logging.getLogger(__name__)

_BODY_MODELS: dict[Body, OrbitalModel] = {
    Body.SUN: OrbitalModel(Body.SUN, radius_au=SUN_RADIUS_AU),
    Body.MOON: OrbitalModel(Body.MOON, radius_au=MOON_RADIUS_AU),
    Body.MERCURY: OrbitalModel(
        Body.MERCURY, 87.969, magnitude=(-0.60, 4.98, -4.88, 3.02)
    ),
    Body.VENUS: OrbitalModel(
        Body.VENUS,
        224.701,
        magnitude=(-4.47, 1.03, 0.57, 0.13),
        crescent_magnitude=(0.98, -1.02, 0.0, 0.0),
        crescent_phase_deg=163.6,
    ),
    Body.EARTH: OrbitalModel(Body.EARTH, EARTH_ORBITAL_PERIOD),
    Body.MARS: OrbitalModel(Body.MARS, 686.980, True, magnitude=(-1.52, 1.60, 0.0, 0.0)),
    Body.JUPITER: OrbitalModel(
        Body.JUPITER, 4332.589, True, magnitude=(-9.40, 0.50, 0.0, 0.0)
    ),
    # Saturn's magnitude depends on ring tilt; see ephemeris.magnitude.
    Body.SATURN: OrbitalModel(Body.SATURN, 10759.22, True),
    Body.URANUS: OrbitalModel(
        Body.URANUS, 30685.4, True, magnitude=(-7.19, 0.25, 0.0, 0.0)
    ),
    Body.NEPTUNE: OrbitalModel(Body.NEPTUNE, 60189.0, True, magnitude=(-6.87, 0.0, 0.0, 0.0)),
    Body.PLUTO: OrbitalModel(Body.PLUTO, 90560.0, True, magnitude=(-1.00, 4.00, 0.0, 0.0)),
}


def get_model(body: Body) -> OrbitalModel:
    """Return the registry entry for a body."""
    return _BODY_MODELS[body]


def is_superior(body: Body) -> bool:
    """True for planets orbiting outside the Earth (Mars through Pluto)."""
    return _BODY_MODELS[body].is_superior


def orbital_period(body: Body) -> float:
    """Sidereal orbital period in days; 0.0 for the Sun and Moon."""
    return _BODY_MODELS[body].orbital_period_days


def synodic_period(body: Body) -> FuncResult:
    """Mean time in days between successive alignments of a body with Earth and Sun.

    Parameters:
        body: Any body except Earth.

    Returns:
        FuncResult with the period in days; EARTH_NOT_ALLOWED for Earth and
        INVALID_BODY for bodies without an orbital period.
    """
    if body == Body.EARTH:
        return FuncResult.error(Status.EARTH_NOT_ALLOWED)
    if body == Body.MOON:
        return FuncResult.success(MEAN_SYNODIC_MONTH)
    tp = orbital_period(body)
    if tp <= 0.0:
        logger.debug('No orbital period for %s', body.value)
        return FuncResult.error(Status.INVALID_BODY)
    te = EARTH_ORBITAL_PERIOD
    return FuncResult.success(abs(te / (te / tp - 1.0)))


__all__ = [
    'Body',
    'OrbitalModel',
    'get_model',
    'is_superior',
    'orbital_period',
    'synodic_period',
]
