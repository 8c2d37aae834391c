"""Hour-angle events, rise and set times for an observer on Earth."""

from __future__ import annotations

import logging
import math

from ephemeris_events.constants import (
    DEGREES_PER_HOUR_RA,
    HOUR_ANGLE_ITER_LIMIT,
    HOUR_ANGLE_TOLERANCE_SECONDS,
    HOURS_PER_DAY,
    RAD2DEG,
    REFRACTION_NEAR_HORIZON,
    RISE_SET_TOLERANCE_SECONDS,
    SECONDS_PER_HOUR,
    SOLAR_DAYS_PER_SIDEREAL_DAY,
)
from ephemeris_events.ephemeris.geometry import (
    Aberration,
    EquatorDate,
    Observer,
    Refraction,
    equator,
    horizon,
)
from ephemeris_events.ephemeris.orientation import sidereal_time
from ephemeris_events.planets import Body, get_model
from ephemeris_events.results import (
    Direction,
    FuncResult,
    HourAngleEvent,
    SearchResult,
    Status,
)
from ephemeris_events.search.engine import search
from ephemeris_events.time_utils import AstroTime

logger = logging.getLogger(__name__)


def search_hour_angle(
    body: Body, observer: Observer, hour_angle: float, start: AstroTime
) -> HourAngleEvent:
    """Find when a body next reaches a local hour angle.

    Hour angle 0 is upper culmination, 12 is lower culmination.

    Parameters:
        body: Body to observe (not Earth).
        observer: Observer location.
        hour_angle: Target hour angle in sidereal hours, [0, 24).
        start: Search forward from here.

    Returns:
        HourAngleEvent with the refracted horizontal coordinates at the event;
        EARTH_NOT_ALLOWED for Earth, INVALID_PARAMETER for an out-of-range
        hour angle, NO_CONVERGE after the iteration cap.
    """
    if body == Body.EARTH:
        return HourAngleEvent.error(Status.EARTH_NOT_ALLOWED)
    if hour_angle < 0.0 or hour_angle >= HOURS_PER_DAY:
        return HourAngleEvent.error(Status.INVALID_PARAMETER)

    time = start
    for iteration in range(HOUR_ANGLE_ITER_LIMIT):
        gast = sidereal_time(time)
        ofdate = equator(body, time, observer, EquatorDate.OF_DATE, Aberration.CORRECTED)
        if not ofdate.ok:
            return HourAngleEvent.error(ofdate.status)

        delta_sidereal_hours = math.fmod(
            (hour_angle + ofdate.ra - observer.longitude / DEGREES_PER_HOUR_RA) - gast,
            HOURS_PER_DAY,
        )
        if iteration == 0:
            # The first step must go forward in time.
            if delta_sidereal_hours < 0.0:
                delta_sidereal_hours += HOURS_PER_DAY
        elif delta_sidereal_hours < -HOURS_PER_DAY / 2.0:
            delta_sidereal_hours += HOURS_PER_DAY
        elif delta_sidereal_hours > HOURS_PER_DAY / 2.0:
            delta_sidereal_hours -= HOURS_PER_DAY

        if abs(delta_sidereal_hours) * SECONDS_PER_HOUR < HOUR_ANGLE_TOLERANCE_SECONDS:
            hor = horizon(time, observer, ofdate.ra, ofdate.dec, Refraction.NORMAL)
            return HourAngleEvent(Status.SUCCESS, time, hor)

        delta_days = (delta_sidereal_hours / HOURS_PER_DAY) * SOLAR_DAYS_PER_SIDEREAL_DAY
        time = time.add_days(delta_days)

    logger.warning(
        'Hour angle %g of %s did not converge from %s', hour_angle, body.value, start
    )
    return HourAngleEvent.error(Status.NO_CONVERGE)


def peak_altitude(
    body: Body, observer: Observer, direction: Direction, time: AstroTime
) -> FuncResult:
    """Signed altitude of a body's top edge above the refracted horizon.

    The value crosses zero upward at rise when ``direction`` is RISE and at
    set when it is SET.
    """
    ofdate = equator(body, time, observer, EquatorDate.OF_DATE, Aberration.CORRECTED)
    if not ofdate.ok:
        return FuncResult.error(ofdate.status)
    hor = horizon(time, observer, ofdate.ra, ofdate.dec, Refraction.NONE)
    radius_deg = RAD2DEG * get_model(body).radius_au / ofdate.dist
    return FuncResult.success(
        direction.value * (hor.altitude + radius_deg + REFRACTION_NEAR_HORIZON)
    )


def search_rise_set(
    body: Body,
    observer: Observer,
    direction: Direction,
    start: AstroTime,
    limit_days: float,
) -> SearchResult:
    """Find the next rise or set of a body within ``limit_days`` of ``start``.

    The search brackets each candidate event between the culminations on
    either side of it: rise lies between lower and upper culmination, set
    between upper and lower.

    Parameters:
        body: Body to observe (not Earth).
        observer: Observer location.
        direction: RISE or SET.
        start: Search forward from here.
        limit_days: Give up on events whose bracketing culmination is later.

    Returns:
        SearchResult; SEARCH_FAILURE when the body does not rise or set in
        the window (e.g. circumpolar or never above the horizon).
        EARTH_NOT_ALLOWED for Earth and INVALID_PARAMETER for a direction
        other than RISE or SET.
    """
    if body == Body.EARTH:
        return SearchResult.error(Status.EARTH_NOT_ALLOWED)
    if direction not in (Direction.RISE, Direction.SET):
        return SearchResult.error(Status.INVALID_PARAMETER)
    direction = Direction(direction)

    if direction == Direction.RISE:
        ha_before, ha_after = 12.0, 0.0
    else:
        ha_before, ha_after = 0.0, 12.0

    def altitude(time: AstroTime) -> FuncResult:
        return peak_altitude(body, observer, direction, time)

    alt = altitude(start)
    if not alt.ok:
        return SearchResult.error(alt.status)
    alt_before = alt.value

    if alt_before > 0.0:
        # Already past the crossing; restart from the next culmination before it.
        evt_before = search_hour_angle(body, observer, ha_before, start)
        if not evt_before.ok:
            return SearchResult.error(evt_before.status)
        time_before = evt_before.time
        alt = altitude(time_before)
        if not alt.ok:
            return SearchResult.error(alt.status)
        alt_before = alt.value
    else:
        time_before = start

    evt_after = search_hour_angle(body, observer, ha_after, time_before)
    if not evt_after.ok:
        return SearchResult.error(evt_after.status)
    alt = altitude(evt_after.time)
    if not alt.ok:
        return SearchResult.error(alt.status)
    alt_after = alt.value

    while True:
        if alt_before <= 0.0 < alt_after:
            found = search(altitude, time_before, evt_after.time, RISE_SET_TOLERANCE_SECONDS)
            if found.status != Status.SEARCH_FAILURE:
                return found

        evt_before = search_hour_angle(body, observer, ha_before, evt_after.time)
        if not evt_before.ok:
            return SearchResult.error(evt_before.status)
        evt_after = search_hour_angle(body, observer, ha_after, evt_before.time)
        if not evt_after.ok:
            return SearchResult.error(evt_after.status)

        if evt_before.time.ut >= start.ut + limit_days:
            return SearchResult.error(Status.SEARCH_FAILURE)

        time_before = evt_before.time
        alt = altitude(time_before)
        if not alt.ok:
            return SearchResult.error(alt.status)
        alt_before = alt.value
        alt = altitude(evt_after.time)
        if not alt.ok:
            return SearchResult.error(alt.status)
        alt_after = alt.value
