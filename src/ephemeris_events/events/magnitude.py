"""Peak visual magnitude of Venus."""

from __future__ import annotations

from ephemeris_events.constants import MAGNITUDE_TOLERANCE_SECONDS
from ephemeris_events.ephemeris.magnitude import illumination
from ephemeris_events.events.cusp import search_cusp_windows
from ephemeris_events.planets import Body
from ephemeris_events.results import FuncResult, IlluminationInfo, Status
from ephemeris_events.time_utils import AstroTime

# Relative longitudes bracketing Venus's greatest brilliancy.
_VENUS_WINDOW = (10.0, 30.0)
_SLOPE_DT = 0.01


def magnitude_slope(body: Body, time: AstroTime) -> FuncResult:
    """Rate of change of visual magnitude, per day (negative while brightening)."""
    y1 = illumination(body, time.add_days(-_SLOPE_DT / 2.0))
    if not y1.ok:
        return FuncResult.error(y1.status)
    y2 = illumination(body, time.add_days(_SLOPE_DT / 2.0))
    if not y2.ok:
        return FuncResult.error(y2.status)
    return FuncResult.success((y2.mag - y1.mag) / _SLOPE_DT)


def search_peak_magnitude(body: Body, start: AstroTime) -> IlluminationInfo:
    """Find the next time Venus reaches peak brightness after ``start``.

    Returns:
        IlluminationInfo at the event; INVALID_BODY for bodies other than Venus.
    """
    if body != Body.VENUS:
        return IlluminationInfo.error(Status.INVALID_BODY)
    s1, s2 = _VENUS_WINDOW
    found = search_cusp_windows(
        body,
        start,
        s1,
        s2,
        lambda time: magnitude_slope(body, time),
        MAGNITUDE_TOLERANCE_SECONDS,
        upper_inclusive=True,
    )
    if not found.ok:
        return IlluminationInfo.error(found.status)
    return illumination(body, found.time)
