"""Angular separation from the Sun and greatest elongation of Mercury and Venus."""

from __future__ import annotations

from ephemeris_events.angle_utils import normalize_longitude
from ephemeris_events.constants import DEGREES_PER_CIRCLE, ELONGATION_TOLERANCE_SECONDS
from ephemeris_events.ephemeris.geometry import Aberration, ecliptic, geo_vector
from ephemeris_events.events.cusp import search_cusp_windows
from ephemeris_events.planets import Body
from ephemeris_events.results import (
    AngleResult,
    ElongationInfo,
    FuncResult,
    Status,
    Visibility,
)
from ephemeris_events.time_utils import AstroTime
from ephemeris_events.vectors import angle_between

# Relative-longitude windows (s1, s2) that contain greatest elongation.
_ELONGATION_WINDOWS = {
    Body.MERCURY: (50.0, 85.0),
    Body.VENUS: (40.0, 50.0),
}
_SLOPE_DT = 0.1


def angle_from_sun(body: Body, time: AstroTime) -> AngleResult:
    """Angle in degrees between a body and the Sun as seen from Earth's center.

    Positions are not corrected for aberration.
    """
    sv = geo_vector(Body.SUN, time, Aberration.NONE)
    if not sv.ok:
        return AngleResult.error(sv.status)
    bv = geo_vector(body, time, Aberration.NONE)
    if not bv.ok:
        return AngleResult.error(bv.status)
    return angle_between(sv.vector, bv.vector)


def longitude_from_sun(body: Body, time: AstroTime) -> AngleResult:
    """Geocentric ecliptic longitude of a body minus that of the Sun, [0, 360).

    Positions are not corrected for aberration.

    Returns:
        AngleResult; EARTH_NOT_ALLOWED for Earth.
    """
    if body == Body.EARTH:
        return AngleResult.error(Status.EARTH_NOT_ALLOWED)
    se = ecliptic(geo_vector(Body.SUN, time, Aberration.NONE))
    if not se.ok:
        return AngleResult.error(se.status)
    be = ecliptic(geo_vector(body, time, Aberration.NONE))
    if not be.ok:
        return AngleResult.error(be.status)
    return AngleResult.success(normalize_longitude(be.elon - se.elon))


def elongation(body: Body, time: AstroTime) -> ElongationInfo:
    """Elongation of a body and whether it is a morning or evening object."""
    lon = longitude_from_sun(body, time)
    if not lon.ok:
        return ElongationInfo.error(lon.status)
    if lon.angle > 180.0:
        visibility = Visibility.MORNING
        separation = DEGREES_PER_CIRCLE - lon.angle
    else:
        visibility = Visibility.EVENING
        separation = lon.angle

    angle = angle_from_sun(body, time)
    if not angle.ok:
        return ElongationInfo.error(angle.status)
    return ElongationInfo(
        Status.SUCCESS,
        time=time,
        visibility=visibility,
        elongation=angle.angle,
        ecliptic_separation=separation,
    )


def search_max_elongation(body: Body, start: AstroTime) -> ElongationInfo:
    """Find the next greatest elongation of Mercury or Venus after ``start``.

    Parameters:
        body: Body.MERCURY or Body.VENUS.
        start: Search forward from here.

    Returns:
        ElongationInfo at the event; INVALID_BODY for other bodies.
    """
    window = _ELONGATION_WINDOWS.get(body)
    if window is None:
        return ElongationInfo.error(Status.INVALID_BODY)

    def neg_elong_slope(time: AstroTime) -> FuncResult:
        e1 = angle_from_sun(body, time.add_days(-_SLOPE_DT / 2.0))
        if not e1.ok:
            return FuncResult.error(e1.status)
        e2 = angle_from_sun(body, time.add_days(_SLOPE_DT / 2.0))
        if not e2.ok:
            return FuncResult.error(e2.status)
        return FuncResult.success((e1.angle - e2.angle) / _SLOPE_DT)

    s1, s2 = window
    found = search_cusp_windows(
        body, start, s1, s2, neg_elong_slope, ELONGATION_TOLERANCE_SECONDS
    )
    if not found.ok:
        return ElongationInfo.error(found.status)
    return elongation(body, found.time)
