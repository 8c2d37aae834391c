"""Lunar perigee and apogee."""

from __future__ import annotations

import logging

from ephemeris_events.constants import APSIS_TOLERANCE_SECONDS, MEAN_SYNODIC_MONTH
from ephemeris_events.ephemeris.moon import moon_distance
from ephemeris_events.results import ApsisInfo, ApsisKind, FuncResult, Status
from ephemeris_events.search.bracket import SlopeFunc, scan_slope_sign_change
from ephemeris_events.search.engine import search
from ephemeris_events.time_utils import AstroTime

logger = logging.getLogger(__name__)

_SLOPE_DT = 0.001
_SCAN_STEP_DAYS = 5.0
_NEXT_APSIS_SKIP_DAYS = 11.0


def _distance_slope(direction: int) -> SlopeFunc:
    def slope(time: AstroTime) -> FuncResult:
        r1 = moon_distance(time.add_days(-_SLOPE_DT / 2.0))
        r2 = moon_distance(time.add_days(_SLOPE_DT / 2.0))
        return FuncResult.success(direction * (r2 - r1) / _SLOPE_DT)

    return slope


def search_lunar_apsis(start: AstroTime) -> ApsisInfo:
    """Find the next lunar perigee or apogee after ``start``.

    Returns:
        ApsisInfo with the kind and Earth-Moon distance; INTERNAL_ERROR if
        no distance extremum is found within two synodic months.
    """
    increasing = _distance_slope(1)
    bracket = scan_slope_sign_change(increasing, start, _SCAN_STEP_DAYS, 2.0 * MEAN_SYNODIC_MONTH)
    if not bracket.ok:
        return ApsisInfo.error(bracket.status)

    if bracket.f1 < 0.0 or bracket.f2 > 0.0:
        # Distance stops falling: perigee.
        kind = ApsisKind.PERICENTER
        found = search(increasing, bracket.t1, bracket.t2, APSIS_TOLERANCE_SECONDS)
    elif bracket.f1 > 0.0 or bracket.f2 < 0.0:
        kind = ApsisKind.APOCENTER
        found = search(_distance_slope(-1), bracket.t1, bracket.t2, APSIS_TOLERANCE_SECONDS)
    else:
        logger.warning('Flat distance slope between %s and %s', bracket.t1, bracket.t2)
        return ApsisInfo.error(Status.INTERNAL_ERROR)

    if not found.ok:
        return ApsisInfo.error(found.status)
    return ApsisInfo(Status.SUCCESS, found.time, kind, moon_distance(found.time))


def next_lunar_apsis(apsis: ApsisInfo) -> ApsisInfo:
    """Find the apsis following one returned by :func:`search_lunar_apsis`.

    Returns:
        ApsisInfo of the opposite kind; INVALID_PARAMETER for a failed input,
        INTERNAL_ERROR if the same kind is found again.
    """
    if not apsis.ok or apsis.kind is None:
        return ApsisInfo.error(Status.INVALID_PARAMETER)
    found = search_lunar_apsis(apsis.time.add_days(_NEXT_APSIS_SKIP_DAYS))
    if found.ok and found.kind == apsis.kind:
        logger.warning('Apsis after %s %s is again %s', apsis.kind.name, apsis.time, found.kind.name)
        return ApsisInfo.error(Status.INTERNAL_ERROR)
    return found
