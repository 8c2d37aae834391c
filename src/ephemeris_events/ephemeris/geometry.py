"""Body positions and apparent coordinates.

Heliocentric and geocentric vectors (J2000 mean equator, AU), topocentric
equatorial coordinates, local horizontal coordinates with optional
refraction, and ecliptic conversions.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ephemeris_events.constants import (
    C_AUDAY,
    DEG2RAD,
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    LIGHT_TIME_ITER_LIMIT,
    OBLIQUITY_J2000_RAD,
    RAD2DEG,
)
from ephemeris_events.ephemeris.moon import geo_moon
from ephemeris_events.ephemeris.orientation import (
    earth_tilt,
    nutate,
    precess_from_j2000,
    precess_to_j2000,
    sidereal_time,
    spin,
    terrestrial_position,
    unnutate,
)
from ephemeris_events.ephemeris.pluto import pluto_helio_vector
from ephemeris_events.ephemeris.vsop import VSOP_BODIES, earth_helio_vector, vsop_helio_vector
from ephemeris_events.planets import Body
from ephemeris_events.results import (
    AngleResult,
    EclipticResult,
    EquatorialResult,
    HorizonCoords,
    Status,
    VectorResult,
)
from ephemeris_events.time_utils import AstroTime
from ephemeris_events.vectors import vector_to_radec

logger = logging.getLogger(__name__)

# Light-time iteration stops once successive estimates agree within this (days).
_LIGHT_TIME_TOLERANCE = 1.0e-9


class Aberration(Enum):
    """Whether apparent positions include the aberration of light."""

    CORRECTED = 'corrected'
    NONE = 'none'


class EquatorDate(Enum):
    """Equator used for equatorial coordinates."""

    J2000 = 'j2000'
    OF_DATE = 'of_date'


class Refraction(Enum):
    """Atmospheric refraction model for horizontal coordinates."""

    NONE = 'none'
    NORMAL = 'normal'
    JPLHOR = 'jplhor'


@dataclass(frozen=True)
class Observer:
    """A location on or near the Earth's surface.

    Attributes:
        latitude: Geodetic latitude in degrees north.
        longitude: Longitude in degrees east.
        height: Height above mean sea level in meters.
    """

    latitude: float
    longitude: float
    height: float = 0.0


def helio_vector(body: Body, time: AstroTime) -> VectorResult:
    """Heliocentric position of a body, uncorrected for light time.

    Returns:
        VectorResult; BAD_TIME for Pluto outside its fitted span.
    """
    if body == Body.SUN:
        return VectorResult.success(np.zeros(3), time)
    if body in VSOP_BODIES:
        return vsop_helio_vector(body, time)
    if body == Body.PLUTO:
        return pluto_helio_vector(time)
    if body == Body.MOON:
        moon = geo_moon(time)
        earth = earth_helio_vector(time)
        return VectorResult.success(moon.vector + earth.vector, time)
    return VectorResult.error(Status.INVALID_BODY, time)


def geo_vector(body: Body, time: AstroTime, aberration: Aberration) -> VectorResult:
    """Geocentric position of a body, corrected for light travel time.

    With ``Aberration.CORRECTED`` the Earth is also back-dated by the light
    time, which approximates aberration for solar-system bodies.

    Parameters:
        body: Body to locate.
        time: Time of observation.
        aberration: Whether to approximate aberration.

    Returns:
        VectorResult stamped with the observation time; NO_CONVERGE if the
        light-time iteration fails.
    """
    if body == Body.EARTH:
        return VectorResult.success(np.zeros(3), time)
    if body == Body.SUN:
        earth = earth_helio_vector(time)
        return VectorResult.success(-earth.vector, time)
    if body == Body.MOON:
        return geo_moon(time)

    earth = None
    if aberration == Aberration.NONE:
        earth = earth_helio_vector(time)

    ltime = time
    for _ in range(LIGHT_TIME_ITER_LIMIT):
        helio = helio_vector(body, ltime)
        if not helio.ok:
            return helio
        if aberration == Aberration.CORRECTED:
            earth = earth_helio_vector(ltime)
        geo = helio.vector - earth.vector
        ltime2 = time.add_days(-float(np.linalg.norm(geo)) / C_AUDAY)
        if abs(ltime2.tt - ltime.tt) < _LIGHT_TIME_TOLERANCE:
            return VectorResult.success(geo, time)
        ltime = ltime2
    logger.warning('Light-time correction for %s did not converge', body.value)
    return VectorResult.error(Status.NO_CONVERGE, time)


def observer_position(time: AstroTime, observer: Observer) -> np.ndarray:
    """Geocentric position of an observer, J2000 mean equator (AU)."""
    gast = sidereal_time(time)
    pos = terrestrial_position(observer.latitude, observer.longitude, observer.height, gast)
    return precess_to_j2000(time.tt, unnutate(time, pos))


def equator(
    body: Body,
    time: AstroTime,
    observer: Observer,
    equdate: EquatorDate,
    aberration: Aberration,
) -> EquatorialResult:
    """Topocentric right ascension, declination and distance of a body.

    Parameters:
        body: Body to observe.
        time: Time of observation.
        observer: Observer location (parallax).
        equdate: J2000 mean equator or true equator of date.
        aberration: Whether to approximate aberration.
    """
    gc = geo_vector(body, time, aberration)
    if not gc.ok:
        return EquatorialResult.error(gc.status)
    j2000 = gc.vector - observer_position(time, observer)
    if equdate == EquatorDate.OF_DATE:
        return vector_to_radec(nutate(time, precess_from_j2000(time.tt, j2000)))
    return vector_to_radec(j2000)


def _ter2cel(time: AstroTime, vec: np.ndarray) -> np.ndarray:
    """Rotate a terrestrial vector to the celestial frame of date."""
    return spin(-DEGREES_PER_HOUR_RA * sidereal_time(time), vec)


def _refraction(zenith_deg: float, refraction: Refraction) -> float:
    """Refraction in degrees at a geometric zenith distance (Saemundsson)."""
    hd = max(90.0 - zenith_deg, -1.0)
    refr = (1.02 / math.tan((hd + 10.3 / (hd + 5.11)) * DEG2RAD)) / 60.0
    if refraction == Refraction.NORMAL and zenith_deg > 91.0:
        # Taper to zero at the nadir so altitude never drops below -90.
        refr *= (180.0 - zenith_deg) / 89.0
    return refr


def horizon(
    time: AstroTime,
    observer: Observer,
    ra: float,
    dec: float,
    refraction: Refraction,
) -> HorizonCoords:
    """Convert true-equator-of-date RA/Dec to azimuth and altitude.

    Parameters:
        time: Time of observation.
        observer: Observer location.
        ra: Right ascension, hours.
        dec: Declination, degrees.
        refraction: Refraction model; NORMAL and JPLHOR raise the altitude
            near the horizon and adjust the returned RA/Dec to match.

    Returns:
        HorizonCoords (azimuth measured east from north).
    """
    sinlat = math.sin(observer.latitude * DEG2RAD)
    coslat = math.cos(observer.latitude * DEG2RAD)
    sinlon = math.sin(observer.longitude * DEG2RAD)
    coslon = math.cos(observer.longitude * DEG2RAD)
    sindc = math.sin(dec * DEG2RAD)
    cosdc = math.cos(dec * DEG2RAD)
    sinra = math.sin(ra * DEGREES_PER_HOUR_RA * DEG2RAD)
    cosra = math.cos(ra * DEGREES_PER_HOUR_RA * DEG2RAD)

    # Zenith, north and west unit vectors in the celestial frame.
    uz = _ter2cel(time, np.array([coslat * coslon, coslat * sinlon, sinlat]))
    un = _ter2cel(time, np.array([-sinlat * coslon, -sinlat * sinlon, coslat]))
    uw = _ter2cel(time, np.array([sinlon, -coslon, 0.0]))

    p = np.array([cosdc * cosra, cosdc * sinra, sindc])
    pz = float(p @ uz)
    pn = float(p @ un)
    pw = float(p @ uw)

    proj = math.hypot(pn, pw)
    az = 0.0
    if proj > 0.0:
        az = -math.atan2(pw, pn) * RAD2DEG
        if az < 0.0:
            az += DEGREES_PER_CIRCLE
        if az >= DEGREES_PER_CIRCLE:
            az -= DEGREES_PER_CIRCLE
    zd = math.atan2(proj, pz) * RAD2DEG
    out_ra = ra
    out_dec = dec

    if refraction in (Refraction.NORMAL, Refraction.JPLHOR):
        zd0 = zd
        refr = _refraction(zd, refraction)
        zd -= refr
        if refr > 0.0 and zd > 3.0e-4:
            sinzd = math.sin(zd * DEG2RAD)
            coszd = math.cos(zd * DEG2RAD)
            sinzd0 = math.sin(zd0 * DEG2RAD)
            coszd0 = math.cos(zd0 * DEG2RAD)
            pr = ((p - coszd0 * uz) / sinzd0) * sinzd + uz * coszd
            proj = math.hypot(pr[0], pr[1])
            if proj > 0.0:
                out_ra = math.atan2(pr[1], pr[0]) * RAD2DEG / DEGREES_PER_HOUR_RA
                if out_ra < 0.0:
                    out_ra += 24.0
                if out_ra >= 24.0:
                    out_ra -= 24.0
            else:
                out_ra = 0.0
            out_dec = math.atan2(pr[2], proj) * RAD2DEG

    return HorizonCoords(Status.SUCCESS, az, 90.0 - zd, out_ra, out_dec)


def _equatorial_to_ecliptic(pos: np.ndarray, obliquity_rad: float) -> EclipticResult:
    cos_ob = math.cos(obliquity_rad)
    sin_ob = math.sin(obliquity_rad)
    ex = float(pos[0])
    ey = float(pos[1] * cos_ob + pos[2] * sin_ob)
    ez = float(-pos[1] * sin_ob + pos[2] * cos_ob)
    xyproj = math.hypot(ex, ey)
    elon = 0.0
    if xyproj > 0.0:
        elon = RAD2DEG * math.atan2(ey, ex)
        if elon < 0.0:
            elon += DEGREES_PER_CIRCLE
    elat = RAD2DEG * math.atan2(ez, xyproj)
    return EclipticResult(Status.SUCCESS, ex, ey, ez, elat, elon)


def ecliptic(equ: VectorResult) -> EclipticResult:
    """Convert a J2000 equatorial vector to J2000 mean ecliptic coordinates."""
    if not equ.ok:
        return EclipticResult.error(equ.status)
    return _equatorial_to_ecliptic(equ.vector, OBLIQUITY_J2000_RAD)


def sun_position(time: AstroTime) -> EclipticResult:
    """Apparent geocentric ecliptic coordinates of the Sun, true equinox of date.

    The Earth is back-dated by the Sun-Earth light time so that seasons are
    not early by about eight minutes.
    """
    adjusted = time.add_days(-1.0 / C_AUDAY)
    earth = earth_helio_vector(adjusted)
    sun2000 = -earth.vector
    sun_of_date = nutate(adjusted, precess_from_j2000(adjusted.tt, sun2000))
    true_obliq = DEG2RAD * earth_tilt(adjusted).tobl
    return _equatorial_to_ecliptic(sun_of_date, true_obliq)


def ecliptic_longitude(body: Body, time: AstroTime) -> AngleResult:
    """Heliocentric J2000 ecliptic longitude of a body in degrees.

    Returns:
        AngleResult; INVALID_BODY for the Sun.
    """
    if body == Body.SUN:
        return AngleResult.error(Status.INVALID_BODY)
    eclip = ecliptic(helio_vector(body, time))
    if not eclip.ok:
        return AngleResult.error(eclip.status)
    return AngleResult.success(eclip.elon)
