"""Equinoxes and solstices: when the Sun reaches a given apparent longitude."""

from __future__ import annotations

import logging

from ephemeris_events.angle_utils import longitude_offset
from ephemeris_events.constants import SEASON_TOLERANCE_SECONDS
from ephemeris_events.ephemeris.geometry import sun_position
from ephemeris_events.results import FuncResult, SearchResult, Season, SeasonsInfo, Status
from ephemeris_events.search.bracket import fixed_window
from ephemeris_events.search.engine import search
from ephemeris_events.time_utils import AstroTime

logger = logging.getLogger(__name__)

# Search starts a day or two before each event; (month, day) at 00:00 UTC.
_SEASON_START_DATES = {
    Season.MAR_EQUINOX: (3, 19),
    Season.JUN_SOLSTICE: (6, 19),
    Season.SEP_EQUINOX: (9, 21),
    Season.DEC_SOLSTICE: (12, 20),
}
_SEASON_WINDOW_DAYS = 4.0


def search_sun_longitude(
    target_lon: float, date_start: AstroTime, limit_days: float
) -> SearchResult:
    """Find when the Sun's apparent ecliptic longitude reaches ``target_lon``.

    Parameters:
        target_lon: Longitude in degrees, true equinox of date.
        date_start: Start of the search window.
        limit_days: Length of the window, days.

    Returns:
        SearchResult; SEARCH_FAILURE if the event is not inside the window.
    """

    def sun_offset(time: AstroTime) -> FuncResult:
        ecl = sun_position(time)
        if not ecl.ok:
            return FuncResult.error(ecl.status)
        return FuncResult.success(longitude_offset(ecl.elon - target_lon))

    window = fixed_window(date_start, limit_days)
    return search(sun_offset, window.t1, window.t2, SEASON_TOLERANCE_SECONDS)


def seasons(year: int) -> SeasonsInfo:
    """Equinox and solstice times for a calendar year.

    Each event is searched independently; the record's status is the last
    failing status, SUCCESS when all four were found.
    """
    status = Status.SUCCESS
    times: dict[Season, AstroTime | None] = {}
    for season, (month, day) in _SEASON_START_DATES.items():
        start = AstroTime.make(year, month, day)
        result = search_sun_longitude(90.0 * season.value, start, _SEASON_WINDOW_DAYS)
        if not result.ok:
            logger.info('%s %d not found: %s', season.name, year, result.status.name)
            status = result.status
        times[season] = result.time
    return SeasonsInfo(
        status,
        mar_equinox=times[Season.MAR_EQUINOX],
        jun_solstice=times[Season.JUN_SOLSTICE],
        sep_equinox=times[Season.SEP_EQUINOX],
        dec_solstice=times[Season.DEC_SOLSTICE],
    )
