"""Lunar phase angle, phase searches, and quarter sequencing."""

from __future__ import annotations

import logging
import math

from ephemeris_events.angle_utils import longitude_offset
from ephemeris_events.constants import MEAN_SYNODIC_MONTH, MOON_PHASE_TOLERANCE_SECONDS
from ephemeris_events.events.greatest_elongation import longitude_from_sun
from ephemeris_events.planets import Body
from ephemeris_events.results import (
    AngleResult,
    FuncResult,
    MoonQuarter,
    MoonQuarterKind,
    SearchResult,
    Status,
)
from ephemeris_events.search.bracket import periodic_window
from ephemeris_events.search.engine import search
from ephemeris_events.time_utils import AstroTime

logger = logging.getLogger(__name__)

_PHASE_UNCERTAINTY_DAYS = 0.9
_QUARTER_LIMIT_DAYS = 10.0
_NEXT_QUARTER_SKIP_DAYS = 6.0


def moon_phase(time: AstroTime) -> AngleResult:
    """Moon's ecliptic longitude minus the Sun's: 0 new, 90 first quarter, 180 full."""
    return longitude_from_sun(Body.MOON, time)


def search_moon_phase(target_lon: float, start: AstroTime, limit_days: float) -> SearchResult:
    """Find the first time after ``start`` the Moon reaches a phase angle.

    Parameters:
        target_lon: Target phase angle in degrees.
        start: Search forward from here.
        limit_days: Latest acceptable event time, days after ``start``.

    Returns:
        SearchResult; NO_MOON_QUARTER when the event falls past the limit.
    """

    def moon_offset(time: AstroTime) -> FuncResult:
        phase = moon_phase(time)
        if not phase.ok:
            return FuncResult.error(phase.status)
        return FuncResult.success(longitude_offset(phase.angle - target_lon))

    offset = moon_offset(start)
    if not offset.ok:
        return SearchResult.error(offset.status)

    window = periodic_window(
        offset.value, start, limit_days, MEAN_SYNODIC_MONTH, _PHASE_UNCERTAINTY_DAYS
    )
    if not window.ok:
        return SearchResult.error(window.status)
    return search(moon_offset, window.t1, window.t2, MOON_PHASE_TOLERANCE_SECONDS)


def search_moon_quarter(start: AstroTime) -> MoonQuarter:
    """Find the first lunar quarter after ``start``."""
    phase = moon_phase(start)
    if not phase.ok:
        return MoonQuarter.error(phase.status)
    quarter = MoonQuarterKind((1 + math.floor(phase.angle / 90.0)) % 4)
    found = search_moon_phase(90.0 * quarter.value, start, _QUARTER_LIMIT_DAYS)
    if not found.ok:
        return MoonQuarter.error(found.status)
    return MoonQuarter(Status.SUCCESS, quarter, found.time)


def next_moon_quarter(mq: MoonQuarter) -> MoonQuarter:
    """Find the quarter following one returned by :func:`search_moon_quarter`.

    Returns:
        MoonQuarter; WRONG_MOON_QUARTER if the quarter found is not the
        successor of ``mq.quarter``.
    """
    if not mq.ok or mq.quarter is None:
        return MoonQuarter.error(Status.INVALID_PARAMETER)
    # Skip most of the way so the current quarter is not found again.
    found = search_moon_quarter(mq.time.add_days(_NEXT_QUARTER_SKIP_DAYS))
    if found.ok and found.quarter != mq.quarter.next():
        logger.warning(
            'Expected %s after %s, found %s',
            mq.quarter.next().name, mq.quarter.name, found.quarter.name,
        )
        return MoonQuarter.error(Status.WRONG_MOON_QUARTER)
    return found
