"""Relative longitude of a planet and the Earth, as seen from the Sun.

Relative longitude is 0 at conjunction for inferior planets (and opposition
for superior ones) and grows through 360 degrees over one synodic period.
"""

from __future__ import annotations

import logging

from ephemeris_events.angle_utils import longitude_offset
from ephemeris_events.constants import (
    DEGREES_PER_CIRCLE,
    RELATIVE_LONGITUDE_ITER_LIMIT,
    SECONDS_PER_DAY,
)
from ephemeris_events.ephemeris.geometry import ecliptic_longitude
from ephemeris_events.planets import Body, is_superior, synodic_period
from ephemeris_events.results import FuncResult, SearchResult, Status
from ephemeris_events.time_utils import AstroTime

logger = logging.getLogger(__name__)


def relative_longitude(body: Body, time: AstroTime) -> FuncResult:
    """Heliocentric longitude of ``body`` minus that of the Earth, (-180, 180]."""
    plon = ecliptic_longitude(body, time)
    if not plon.ok:
        return FuncResult.error(plon.status)
    elon = ecliptic_longitude(Body.EARTH, time)
    if not elon.ok:
        return FuncResult.error(elon.status)
    return FuncResult.success(longitude_offset(plon.angle - elon.angle))


def _rlon_offset(body: Body, time: AstroTime, direction: int, target_rel_lon: float) -> FuncResult:
    plon = ecliptic_longitude(body, time)
    if not plon.ok:
        return FuncResult.error(plon.status)
    elon = ecliptic_longitude(Body.EARTH, time)
    if not elon.ok:
        return FuncResult.error(elon.status)
    diff = direction * (elon.angle - plon.angle)
    return FuncResult.success(longitude_offset(diff - target_rel_lon))


def search_relative_longitude(
    body: Body, target_rel_lon: float, start: AstroTime
) -> SearchResult:
    """Find the next time a planet reaches a relative longitude.

    The search steps by the synodic period scaled by the remaining angle,
    adapting the period estimate near the target to cope with eccentric orbits.
    Geometry is evaluated without aberration.

    Parameters:
        body: A planet other than Earth.
        target_rel_lon: Target relative longitude, degrees.
        start: Search forward from here.

    Returns:
        SearchResult; EARTH_NOT_ALLOWED for Earth, INVALID_BODY for the Moon,
        NO_CONVERGE after the iteration cap.
    """
    if body == Body.EARTH:
        return SearchResult.error(Status.EARTH_NOT_ALLOWED)
    if body == Body.MOON:
        return SearchResult.error(Status.INVALID_BODY)

    syn = synodic_period(body)
    if not syn.ok:
        return SearchResult.error(syn.status)
    syn_days = syn.value

    direction = 1 if is_superior(body) else -1

    error = _rlon_offset(body, start, direction, target_rel_lon)
    if not error.ok:
        return SearchResult.error(error.status)
    error_angle = error.value
    if error_angle > 0.0:
        # Force searching forward in time.
        error_angle -= DEGREES_PER_CIRCLE

    time = start
    for _ in range(RELATIVE_LONGITUDE_ITER_LIMIT):
        day_adjust = (-error_angle / DEGREES_PER_CIRCLE) * syn_days
        time = time.add_days(day_adjust)
        if abs(day_adjust) * SECONDS_PER_DAY < 1.0:
            return SearchResult.success(time)

        prev_angle = error_angle
        error = _rlon_offset(body, time, direction, target_rel_lon)
        if not error.ok:
            return SearchResult.error(error.status)
        error_angle = error.value

        if abs(prev_angle) < 30.0 and prev_angle != error_angle:
            # Match the local rate of both planets near the target.
            ratio = prev_angle / (prev_angle - error_angle)
            if 0.5 < ratio < 2.0:
                syn_days *= ratio

    logger.warning(
        'Relative longitude %g of %s did not converge from %s',
        target_rel_lon, body.value, start,
    )
    return SearchResult.error(Status.NO_CONVERGE)
