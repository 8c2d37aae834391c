"""Visual magnitude and phase angle of the Sun, Moon and planets."""

from __future__ import annotations

import math

import cspyce
import numpy as np

from ephemeris_events.constants import AU_PER_PARSEC, DEG2RAD, MOON_MEAN_DISTANCE_AU, RAD2DEG
from ephemeris_events.ephemeris.geometry import ecliptic, helio_vector
from ephemeris_events.ephemeris.moon import geo_moon
from ephemeris_events.ephemeris.vsop import earth_helio_vector
from ephemeris_events.planets import Body, get_model
from ephemeris_events.results import IlluminationInfo, Status, VectorResult
from ephemeris_events.time_utils import AstroTime
from ephemeris_events.vectors import angle_between

# Saturn's ring plane: inclination to the ecliptic and node (degrees, node rate per day).
_SATURN_RING_INCLINATION = 28.06
_SATURN_RING_NODE = 169.51
_SATURN_RING_NODE_RATE = 3.82e-5


def moon_magnitude(phase: float, helio_dist: float, geo_dist: float) -> float:
    """Visual magnitude of the Moon for a phase angle in degrees and distances in AU."""
    rad = phase * DEG2RAD
    rad4 = rad ** 4
    mag = -12.717 + 1.49 * abs(rad) + 0.0431 * rad4
    return mag + 5.0 * math.log10(helio_dist * (geo_dist / MOON_MEAN_DISTANCE_AU))


def saturn_magnitude(
    phase: float,
    helio_dist: float,
    geo_dist: float,
    gc: VectorResult,
    time: AstroTime,
) -> tuple[float, float]:
    """Visual magnitude of Saturn including its rings.

    Parameters:
        phase: Phase angle, degrees.
        helio_dist, geo_dist: Distances from the Sun and Earth, AU.
        gc: Geocentric J2000 vector of Saturn.
        time: Time of observation.

    Returns:
        (magnitude, ring tilt in degrees).
    """
    eclip = ecliptic(gc)
    ir = DEG2RAD * _SATURN_RING_INCLINATION
    nr = DEG2RAD * (_SATURN_RING_NODE + _SATURN_RING_NODE_RATE * time.tt)
    lat = DEG2RAD * eclip.elat
    lon = DEG2RAD * eclip.elon
    tilt = math.asin(
        math.sin(lat) * math.cos(ir) - math.cos(lat) * math.sin(ir) * math.sin(lon - nr)
    )
    sin_tilt = math.sin(abs(tilt))
    mag = -9.0 + 0.044 * phase
    mag += sin_tilt * (-2.6 + 1.2 * sin_tilt)
    mag += 5.0 * math.log10(helio_dist * geo_dist)
    return mag, RAD2DEG * tilt


def planet_magnitude(body: Body, phase: float, helio_dist: float, geo_dist: float) -> float | None:
    """Visual magnitude of a planet from its phase polynomial; None if it has none."""
    coeffs = get_model(body).magnitude_coefficients(phase)
    if coeffs is None:
        return None
    c0, c1, c2, c3 = coeffs
    x = phase / 100.0
    return c0 + x * (c1 + x * (c2 + x * c3)) + 5.0 * math.log10(helio_dist * geo_dist)


def illumination(body: Body, time: AstroTime) -> IlluminationInfo:
    """Visual magnitude and illumination geometry of a body as seen from Earth.

    Parameters:
        body: Any body except Earth.
        time: Time of observation.

    Returns:
        IlluminationInfo; EARTH_NOT_ALLOWED for Earth. The Sun reports a phase
        angle of 0.
    """
    if body == Body.EARTH:
        return IlluminationInfo.error(Status.EARTH_NOT_ALLOWED)

    earth = earth_helio_vector(time)
    if body == Body.SUN:
        gc = VectorResult.success(-earth.vector, time)
        hc = VectorResult.success(np.zeros(3), time)
        phase = 0.0
    else:
        if body == Body.MOON:
            gc = geo_moon(time)
            hc = VectorResult.success(earth.vector + gc.vector, time)
        else:
            hc = helio_vector(body, time)
            if not hc.ok:
                return IlluminationInfo.error(hc.status)
            gc = VectorResult.success(hc.vector - earth.vector, time)
        angle = angle_between(gc.vector, hc.vector)
        if not angle.ok:
            return IlluminationInfo.error(angle.status)
        phase = angle.angle

    geo_dist = cspyce.vnorm(gc.vector)
    helio_dist = cspyce.vnorm(hc.vector)
    ring_tilt = 0.0
    if body == Body.SUN:
        mag = -0.17 + 5.0 * math.log10(geo_dist / AU_PER_PARSEC)
    elif body == Body.MOON:
        mag = moon_magnitude(phase, helio_dist, geo_dist)
    elif body == Body.SATURN:
        mag, ring_tilt = saturn_magnitude(phase, helio_dist, geo_dist, gc, time)
    else:
        mag = planet_magnitude(body, phase, helio_dist, geo_dist)
        if mag is None:
            return IlluminationInfo.error(Status.INVALID_BODY)

    return IlluminationInfo(
        Status.SUCCESS,
        time=time,
        mag=mag,
        phase_angle=phase,
        helio_dist=helio_dist,
        ring_tilt=ring_tilt,
    )
