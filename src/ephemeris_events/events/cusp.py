"""Two-window retry search used for maximum elongation and peak magnitude.

Both events are extrema of a smooth function whose slope has cusps at
relative longitudes 0 and 180 degrees. The search therefore looks only inside
a relative-longitude window known to contain the extremum, and moves to the
next window when the event found lies before the start time.
"""

from __future__ import annotations

import logging

from ephemeris_events.constants import MAX_ELONGATION_ITER_LIMIT
from ephemeris_events.events.planet_longitude import (
    relative_longitude,
    search_relative_longitude,
)
from ephemeris_events.planets import Body, synodic_period
from ephemeris_events.results import SearchResult, Status
from ephemeris_events.search.bracket import SlopeFunc, cusp_window, validate_slope_bracket
from ephemeris_events.search.engine import search
from ephemeris_events.time_utils import AstroTime

logger = logging.getLogger(__name__)


def search_cusp_windows(
    body: Body,
    start: AstroTime,
    s1: float,
    s2: float,
    slope: SlopeFunc,
    tolerance_seconds: float,
    upper_inclusive: bool = False,
) -> SearchResult:
    """Find the next zero of ``slope`` inside a relative-longitude window.

    Parameters:
        body: Inferior planet.
        start: Earliest acceptable event time.
        s1, s2: Relative-longitude window bounds, degrees.
        slope: Function negative before and positive after the event.
        tolerance_seconds: Engine tolerance.
        upper_inclusive: Passed to :func:`cusp_window`.

    Returns:
        SearchResult; INTERNAL_ERROR if a window fails slope validation,
        SEARCH_FAILURE after the window limit.
    """
    syn = synodic_period(body)
    if not syn.ok:
        return SearchResult.error(syn.status)

    for _ in range(MAX_ELONGATION_ITER_LIMIT):
        rlon = relative_longitude(body, start)
        if not rlon.ok:
            return SearchResult.error(rlon.status)

        window = cusp_window(rlon.value, s1, s2, syn.value, upper_inclusive)
        t_start = start.add_days(window.adjust_days)

        search1 = search_relative_longitude(body, window.rlon_lo, t_start)
        if not search1.ok:
            return search1
        search2 = search_relative_longitude(body, window.rlon_hi, search1.time)
        if not search2.ok:
            return search2

        bracket = validate_slope_bracket(slope, search1.time, search2.time)
        if not bracket.ok:
            return SearchResult.error(bracket.status)

        found = search(slope, bracket.t1, bracket.t2, tolerance_seconds)
        if not found.ok:
            return found
        if found.time.tt >= start.tt:
            return found

        # Event precedes start; move past this window. Two windows always suffice.
        logger.debug('Event at %s precedes %s; trying next window', found.time, start)
        start = bracket.t2.add_days(1.0)

    return SearchResult.error(Status.SEARCH_FAILURE)
