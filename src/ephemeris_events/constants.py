"""Fixed constants: time scales, astronomical units, search limits.

Physical constants follow the IAU conventions used by the ephemeris models in
:mod:`ephemeris_events.ephemeris`.
"""

import math

# Time: seconds per unit
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0
J2000_MJD = 51544.5  # Modified Julian Date of 2000-01-01T12:00 (days since J2000 = 0)

# Angle: degrees per circle and sexagesimal
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360 deg / 24 h
HOURS_PER_DAY = 24.0
DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
ASEC2RAD = DEG2RAD / ARCSEC_PER_DEGREE
ASEC360 = 1296000.0  # arcseconds per revolution
PI2 = 2.0 * math.pi

# Distances
KM_PER_AU = 1.4959787069098932e8
C_AUDAY = 173.1446326846693  # speed of light in AU/day
AU_PER_PARSEC = 648000.0 / math.pi
EARTH_EQUATORIAL_RADIUS_KM = 6378.1366
EARTH_FLATTENING = 0.003352819697896
MOON_MEAN_DISTANCE_AU = 385000.6 / KM_PER_AU

# Apparent radii used by rise/set
SUN_RADIUS_AU = 4.6505e-3
MOON_RADIUS_AU = 1.15717e-5
REFRACTION_NEAR_HORIZON = 34.0 / 60.0  # degrees

# Periods
MEAN_SYNODIC_MONTH = 29.530588  # days, new moon to new moon
EARTH_ORBITAL_PERIOD = 365.256  # days
SOLAR_DAYS_PER_SIDEREAL_DAY = 0.9972695717592592

# Obliquity of the ecliptic at J2000 (radians)
OBLIQUITY_J2000_RAD = 0.40909260059599012
MEAN_OBLIQUITY_J2000_ARCSEC = 84381.406

# Search iteration caps
SEARCH_ITER_LIMIT = 20
RELATIVE_LONGITUDE_ITER_LIMIT = 100
MAX_ELONGATION_ITER_LIMIT = 2
LIGHT_TIME_ITER_LIMIT = 10
HOUR_ANGLE_ITER_LIMIT = 100

# Search tolerances (seconds)
SEASON_TOLERANCE_SECONDS = 1.0
MOON_PHASE_TOLERANCE_SECONDS = 1.0
RISE_SET_TOLERANCE_SECONDS = 1.0
APSIS_TOLERANCE_SECONDS = 1.0
ELONGATION_TOLERANCE_SECONDS = 10.0
MAGNITUDE_TOLERANCE_SECONDS = 10.0
HOUR_ANGLE_TOLERANCE_SECONDS = 0.1  # sidereal seconds
