"""Earth orientation: nutation, precession, obliquity, sidereal time.

IAU2000B nutation (77 luni-solar terms), IAU2006 precession angles and the
Earth Rotation Angle. Rotation matrices are built with numpy and applied with
cspyce so frames compose the same way throughout the package.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import cspyce
import numpy as np

from ephemeris_events.angle_utils import wrap_hours
from ephemeris_events.constants import (
    ASEC2RAD,
    ASEC360,
    DAYS_PER_JULIAN_CENTURY,
    DEG2RAD,
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    EARTH_EQUATORIAL_RADIUS_KM,
    EARTH_FLATTENING,
    KM_PER_AU,
    MEAN_OBLIQUITY_J2000_ARCSEC,
    PI2,
)
from ephemeris_events.time_utils import AstroTime

# Multipliers of the fundamental arguments (l, l', F, D, Omega).
_NUTATION_ARGS = np.array([
        (0, 0, 0, 0, 1),
        (0, 0, 2, -2, 2),
        (0, 0, 2, 0, 2),
        (0, 0, 0, 0, 2),
        (0, 1, 0, 0, 0),
        (0, 1, 2, -2, 2),
        (1, 0, 0, 0, 0),
        (0, 0, 2, 0, 1),
        (1, 0, 2, 0, 2),
        (0, -1, 2, -2, 2),
        (0, 0, 2, -2, 1),
        (-1, 0, 2, 0, 2),
        (-1, 0, 0, 2, 0),
        (1, 0, 0, 0, 1),
        (-1, 0, 0, 0, 1),
        (-1, 0, 2, 2, 2),
        (1, 0, 2, 0, 1),
        (-2, 0, 2, 0, 1),
        (0, 0, 0, 2, 0),
        (0, 0, 2, 2, 2),
        (0, -2, 2, -2, 2),
        (-2, 0, 0, 2, 0),
        (2, 0, 2, 0, 2),
        (1, 0, 2, -2, 2),
        (-1, 0, 2, 0, 1),
        (2, 0, 0, 0, 0),
        (0, 0, 2, 0, 0),
        (0, 1, 0, 0, 1),
        (-1, 0, 0, 2, 1),
        (0, 2, 2, -2, 2),
        (0, 0, -2, 2, 0),
        (1, 0, 0, -2, 1),
        (0, -1, 0, 0, 1),
        (-1, 0, 2, 2, 1),
        (0, 2, 0, 0, 0),
        (1, 0, 2, 2, 2),
        (-2, 0, 2, 0, 0),
        (0, 1, 2, 0, 2),
        (0, 0, 2, 2, 1),
        (0, -1, 2, 0, 2),
        (0, 0, 0, 2, 1),
        (1, 0, 2, -2, 1),
        (2, 0, 2, -2, 2),
        (-2, 0, 0, 2, 1),
        (2, 0, 2, 0, 1),
        (0, -1, 2, -2, 1),
        (0, 0, 0, -2, 1),
        (-1, -1, 0, 2, 0),
        (2, 0, 0, -2, 1),
        (1, 0, 0, 2, 0),
        (0, 1, 2, -2, 1),
        (1, -1, 0, 0, 0),
        (-2, 0, 2, 0, 2),
        (3, 0, 2, 0, 2),
        (0, -1, 0, 2, 0),
        (1, -1, 2, 0, 2),
        (0, 0, 0, 1, 0),
        (-1, -1, 2, 2, 2),
        (-1, 0, 2, 0, 0),
        (0, -1, 2, 2, 2),
        (-2, 0, 0, 0, 1),
        (1, 1, 2, 0, 2),
        (2, 0, 0, 0, 1),
        (-1, 1, 0, 1, 0),
        (1, 1, 0, 0, 0),
        (1, 0, 2, 0, 0),
        (-1, 0, 2, -2, 1),
        (1, 0, 0, 0, 2),
        (-1, 0, 0, 1, 0),
        (0, 0, 2, 1, 2),
        (-1, 0, 2, 4, 2),
        (-1, 1, 0, 1, 1),
        (0, -2, 2, -2, 1),
        (1, 0, 2, 2, 1),
        (-2, 0, 2, 2, 2),
        (-1, 0, 0, 0, 2),
        (1, 1, 2, -2, 2),
], dtype=float)

# Longitude (sin, t*sin, cos) and obliquity (cos, t*cos, sin) amplitudes, 0.1 uas.
_NUTATION_COEFFS = np.array([
        (-172064161.0, -174666.0, 33386.0, 92052331.0, 9086.0, 15377.0),
        (-13170906.0, -1675.0, -13696.0, 5730336.0, -3015.0, -4587.0),
        (-2276413.0, -234.0, 2796.0, 978459.0, -485.0, 1374.0),
        (2074554.0, 207.0, -698.0, -897492.0, 470.0, -291.0),
        (1475877.0, -3633.0, 11817.0, 73871.0, -184.0, -1924.0),
        (-516821.0, 1226.0, -524.0, 224386.0, -677.0, -174.0),
        (711159.0, 73.0, -872.0, -6750.0, 0.0, 358.0),
        (-387298.0, -367.0, 380.0, 200728.0, 18.0, 318.0),
        (-301461.0, -36.0, 816.0, 129025.0, -63.0, 367.0),
        (215829.0, -494.0, 111.0, -95929.0, 299.0, 132.0),
        (128227.0, 137.0, 181.0, -68982.0, -9.0, 39.0),
        (123457.0, 11.0, 19.0, -53311.0, 32.0, -4.0),
        (156994.0, 10.0, -168.0, -1235.0, 0.0, 82.0),
        (63110.0, 63.0, 27.0, -33228.0, 0.0, -9.0),
        (-57976.0, -63.0, -189.0, 31429.0, 0.0, -75.0),
        (-59641.0, -11.0, 149.0, 25543.0, -11.0, 66.0),
        (-51613.0, -42.0, 129.0, 26366.0, 0.0, 78.0),
        (45893.0, 50.0, 31.0, -24236.0, -10.0, 20.0),
        (63384.0, 11.0, -150.0, -1220.0, 0.0, 29.0),
        (-38571.0, -1.0, 158.0, 16452.0, -11.0, 68.0),
        (32481.0, 0.0, 0.0, -13870.0, 0.0, 0.0),
        (-47722.0, 0.0, -18.0, 477.0, 0.0, -25.0),
        (-31046.0, -1.0, 131.0, 13238.0, -11.0, 59.0),
        (28593.0, 0.0, -1.0, -12338.0, 10.0, -3.0),
        (20441.0, 21.0, 10.0, -10758.0, 0.0, -3.0),
        (29243.0, 0.0, -74.0, -609.0, 0.0, 13.0),
        (25887.0, 0.0, -66.0, -550.0, 0.0, 11.0),
        (-14053.0, -25.0, 79.0, 8551.0, -2.0, -45.0),
        (15164.0, 10.0, 11.0, -8001.0, 0.0, -1.0),
        (-15794.0, 72.0, -16.0, 6850.0, -42.0, -5.0),
        (21783.0, 0.0, 13.0, -167.0, 0.0, 13.0),
        (-12873.0, -10.0, -37.0, 6953.0, 0.0, -14.0),
        (-12654.0, 11.0, 63.0, 6415.0, 0.0, 26.0),
        (-10204.0, 0.0, 25.0, 5222.0, 0.0, 15.0),
        (16707.0, -85.0, -10.0, 168.0, -1.0, 10.0),
        (-7691.0, 0.0, 44.0, 3268.0, 0.0, 19.0),
        (-11024.0, 0.0, -14.0, 104.0, 0.0, 2.0),
        (7566.0, -21.0, -11.0, -3250.0, 0.0, -5.0),
        (-6637.0, -11.0, 25.0, 3353.0, 0.0, 14.0),
        (-7141.0, 21.0, 8.0, 3070.0, 0.0, 4.0),
        (-6302.0, -11.0, 2.0, 3272.0, 0.0, 4.0),
        (5800.0, 10.0, 2.0, -3045.0, 0.0, -1.0),
        (6443.0, 0.0, -7.0, -2768.0, 0.0, -4.0),
        (-5774.0, -11.0, -15.0, 3041.0, 0.0, -5.0),
        (-5350.0, 0.0, 21.0, 2695.0, 0.0, 12.0),
        (-4752.0, -11.0, -3.0, 2719.0, 0.0, -3.0),
        (-4940.0, -11.0, -21.0, 2720.0, 0.0, -9.0),
        (7350.0, 0.0, -8.0, -51.0, 0.0, 4.0),
        (4065.0, 0.0, 6.0, -2206.0, 0.0, 1.0),
        (6579.0, 0.0, -24.0, -199.0, 0.0, 2.0),
        (3579.0, 0.0, 5.0, -1900.0, 0.0, 1.0),
        (4725.0, 0.0, -6.0, -41.0, 0.0, 3.0),
        (-3075.0, 0.0, -2.0, 1313.0, 0.0, -1.0),
        (-2904.0, 0.0, 15.0, 1233.0, 0.0, 7.0),
        (4348.0, 0.0, -10.0, -81.0, 0.0, 2.0),
        (-2878.0, 0.0, 8.0, 1232.0, 0.0, 4.0),
        (-4230.0, 0.0, 5.0, -20.0, 0.0, -2.0),
        (-2819.0, 0.0, 7.0, 1207.0, 0.0, 3.0),
        (-4056.0, 0.0, 5.0, 40.0, 0.0, -2.0),
        (-2647.0, 0.0, 11.0, 1129.0, 0.0, 5.0),
        (-2294.0, 0.0, -10.0, 1266.0, 0.0, -4.0),
        (2481.0, 0.0, -7.0, -1062.0, 0.0, -3.0),
        (2179.0, 0.0, -2.0, -1129.0, 0.0, -2.0),
        (3276.0, 0.0, 1.0, -9.0, 0.0, 0.0),
        (-3389.0, 0.0, 5.0, 35.0, 0.0, -2.0),
        (3339.0, 0.0, -13.0, -107.0, 0.0, 1.0),
        (-1987.0, 0.0, -6.0, 1073.0, 0.0, -2.0),
        (-1981.0, 0.0, 0.0, 854.0, 0.0, 0.0),
        (4026.0, 0.0, -353.0, -553.0, 0.0, -139.0),
        (1660.0, 0.0, -5.0, -710.0, 0.0, -2.0),
        (-1521.0, 0.0, 9.0, 647.0, 0.0, 4.0),
        (1314.0, 0.0, 0.0, -700.0, 0.0, 0.0),
        (-1283.0, 0.0, 0.0, 672.0, 0.0, 0.0),
        (-1331.0, 0.0, 8.0, 663.0, 0.0, 4.0),
        (1383.0, 0.0, -2.0, -594.0, 0.0, -2.0),
        (1405.0, 0.0, 4.0, -610.0, 0.0, 2.0),
        (1290.0, 0.0, 0.0, -556.0, 0.0, 0.0),
], dtype=float)


@dataclass(frozen=True)
class EarthTilt:
    """Nutation and obliquity at one instant.

    Attributes:
        dpsi: Nutation in longitude, arcseconds.
        deps: Nutation in obliquity, arcseconds.
        ee: Equation of the equinoxes, seconds of time.
        mobl: Mean obliquity, degrees.
        tobl: True obliquity, degrees.
    """

    dpsi: float
    deps: float
    ee: float
    mobl: float
    tobl: float


def iau2000b(time: AstroTime) -> tuple[float, float]:
    """Return nutation angles ``(dpsi, deps)`` in arcseconds."""
    t = time.tt / DAYS_PER_JULIAN_CENTURY
    fundamental = np.array([
        math.fmod(485868.249036 + t * 1717915923.2178, ASEC360),
        math.fmod(1287104.79305 + t * 129596581.0481, ASEC360),
        math.fmod(335779.526232 + t * 1739527262.8478, ASEC360),
        math.fmod(1072260.70369 + t * 1602961601.2090, ASEC360),
        math.fmod(450160.398036 - t * 6962890.5431, ASEC360),
    ]) * ASEC2RAD
    arg = np.fmod(_NUTATION_ARGS @ fundamental, PI2)
    sarg = np.sin(arg)
    carg = np.cos(arg)
    c = _NUTATION_COEFFS
    dp = np.sum((c[:, 0] + c[:, 1] * t) * sarg + c[:, 2] * carg)
    de = np.sum((c[:, 3] + c[:, 4] * t) * carg + c[:, 5] * sarg)
    return -0.000135 + float(dp) * 1.0e-7, 0.000388 + float(de) * 1.0e-7


def mean_obliquity(tt: float) -> float:
    """Mean obliquity of the ecliptic in degrees at TT days since J2000."""
    t = tt / DAYS_PER_JULIAN_CENTURY
    asec = (
        ((((-0.0000000434 * t - 0.000000576) * t + 0.00200340) * t - 0.0001831) * t - 46.836769) * t
        + MEAN_OBLIQUITY_J2000_ARCSEC
    )
    return asec / 3600.0


def earth_tilt(time: AstroTime) -> EarthTilt:
    """Nutation angles, obliquities, and equation of the equinoxes."""
    dpsi, deps = iau2000b(time)
    mobl = mean_obliquity(time.tt)
    return EarthTilt(
        dpsi=dpsi,
        deps=deps,
        ee=dpsi * math.cos(mobl * DEG2RAD) / 15.0,
        mobl=mobl,
        tobl=mobl + deps / 3600.0,
    )


def ecliptic_to_equatorial_of_date(time: AstroTime, ecl: np.ndarray) -> np.ndarray:
    """Rotate a mean-ecliptic-of-date vector to the mean equator of date."""
    obl = mean_obliquity(time.tt) * DEG2RAD
    cos_obl = math.cos(obl)
    sin_obl = math.sin(obl)
    return np.array([
        ecl[0],
        ecl[1] * cos_obl - ecl[2] * sin_obl,
        ecl[1] * sin_obl + ecl[2] * cos_obl,
    ])


def _precession_matrix(tt: float) -> np.ndarray:
    """Matrix rotating the mean equator of date ``tt`` to J2000."""
    t = tt / DAYS_PER_JULIAN_CENTURY
    eps0 = MEAN_OBLIQUITY_J2000_ARCSEC
    psia = (((((-0.0000000951 * t + 0.000132851) * t - 0.00114045) * t - 1.0790069) * t
             + 5038.481507) * t)
    omegaa = (((((0.0000003337 * t - 0.000000467) * t - 0.00772503) * t + 0.0512623) * t
               - 0.025754) * t + eps0)
    chia = (((((-0.0000000560 * t + 0.000170663) * t - 0.00121197) * t - 2.3814292) * t
             + 10.556403) * t)

    eps0 *= ASEC2RAD
    psia *= ASEC2RAD
    omegaa *= ASEC2RAD
    chia *= ASEC2RAD

    sa, ca = math.sin(eps0), math.cos(eps0)
    sb, cb = math.sin(-psia), math.cos(-psia)
    sc, cc = math.sin(-omegaa), math.cos(-omegaa)
    sd, cd = math.sin(chia), math.cos(chia)

    xx = cd * cb - sb * sd * cc
    yx = cd * sb * ca + sd * cc * cb * ca - sa * sd * sc
    zx = cd * sb * sa + sd * cc * cb * sa + ca * sd * sc
    xy = -sd * cb - sb * cd * cc
    yy = -sd * sb * ca + cd * cc * cb * ca - sa * cd * sc
    zy = -sd * sb * sa + cd * cc * cb * sa + ca * cd * sc
    xz = sb * sc
    yz = -sc * cb * ca - sa * cc
    zz = -sc * cb * sa + cc * ca
    return np.array([
        [xx, xy, xz],
        [yx, yy, yz],
        [zx, zy, zz],
    ])


def precess_to_j2000(tt: float, pos: np.ndarray) -> np.ndarray:
    """Rotate a vector from the mean equator of date to the J2000 mean equator."""
    return np.asarray(cspyce.mxv(_precession_matrix(tt), pos))


def precess_from_j2000(tt: float, pos: np.ndarray) -> np.ndarray:
    """Rotate a vector from the J2000 mean equator to the mean equator of date."""
    return np.asarray(cspyce.mtxv(_precession_matrix(tt), pos))


def _nutation_matrix(time: AstroTime) -> np.ndarray:
    """Matrix rotating the mean equator of date to the true equator of date."""
    tilt = earth_tilt(time)
    oblm = tilt.mobl * DEG2RAD
    oblt = tilt.tobl * DEG2RAD
    psi = tilt.dpsi * ASEC2RAD
    cobm, sobm = math.cos(oblm), math.sin(oblm)
    cobt, sobt = math.cos(oblt), math.sin(oblt)
    cpsi, spsi = math.cos(psi), math.sin(psi)

    xx = cpsi
    yx = -spsi * cobm
    zx = -spsi * sobm
    xy = spsi * cobt
    yy = cpsi * cobm * cobt + sobm * sobt
    zy = cpsi * sobm * cobt - cobm * sobt
    xz = spsi * sobt
    yz = cpsi * cobm * sobt - sobm * cobt
    zz = cpsi * sobm * sobt + cobm * cobt
    return np.array([
        [xx, yx, zx],
        [xy, yy, zy],
        [xz, yz, zz],
    ])


def nutate(time: AstroTime, pos: np.ndarray) -> np.ndarray:
    """Rotate a mean-equator-of-date vector to the true equator of date."""
    return np.asarray(cspyce.mxv(_nutation_matrix(time), pos))


def unnutate(time: AstroTime, pos: np.ndarray) -> np.ndarray:
    """Rotate a true-equator-of-date vector to the mean equator of date."""
    return np.asarray(cspyce.mtxv(_nutation_matrix(time), pos))


def earth_rotation_angle(time: AstroTime) -> float:
    """Earth Rotation Angle in degrees, [0, 360)."""
    thet1 = 0.7790572732640 + 0.00273781191135448 * time.ut
    thet3 = math.fmod(time.ut, 1.0)
    theta = DEGREES_PER_CIRCLE * math.fmod(thet1 + thet3, 1.0)
    if theta < 0.0:
        theta += DEGREES_PER_CIRCLE
    return theta


def sidereal_time(time: AstroTime) -> float:
    """Greenwich apparent sidereal time in hours, [0, 24)."""
    t = time.tt / DAYS_PER_JULIAN_CENTURY
    eqeq = 15.0 * earth_tilt(time).ee
    theta = earth_rotation_angle(time)
    st = eqeq + 0.014506 + (
        ((((-0.0000000368 * t - 0.000029956) * t - 0.00000044) * t + 1.3915817) * t
         + 4612.156534) * t
    )
    gst = math.fmod(st / 3600.0 + theta, DEGREES_PER_CIRCLE) / DEGREES_PER_HOUR_RA
    return wrap_hours(gst)


def terrestrial_position(
    latitude: float, longitude: float, height_m: float, st: float
) -> np.ndarray:
    """Observer position (AU) on the true equator of date for sidereal time ``st``.

    Parameters:
        latitude: Geodetic latitude, degrees north.
        longitude: Longitude, degrees east.
        height_m: Height above sea level, meters.
        st: Greenwich apparent sidereal time, hours.
    """
    df = 1.0 - EARTH_FLATTENING
    df2 = df * df
    phi = latitude * DEG2RAD
    sinphi = math.sin(phi)
    cosphi = math.cos(phi)
    c = 1.0 / math.sqrt(cosphi * cosphi + df2 * sinphi * sinphi)
    s = df2 * c
    ht_km = height_m / 1000.0
    ach = EARTH_EQUATORIAL_RADIUS_KM * c + ht_km
    ash = EARTH_EQUATORIAL_RADIUS_KM * s + ht_km
    stlocl = (DEGREES_PER_HOUR_RA * st + longitude) * DEG2RAD
    return np.array([
        ach * cosphi * math.cos(stlocl),
        ach * cosphi * math.sin(stlocl),
        ash * sinphi,
    ]) / KM_PER_AU


def spin(angle_deg: float, pos: np.ndarray) -> np.ndarray:
    """Rotate a vector about the z axis by ``angle_deg`` (frame rotation)."""
    return np.asarray(cspyce.mxv(cspyce.rotate(angle_deg * DEG2RAD, 3), pos))
