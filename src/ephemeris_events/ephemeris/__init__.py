"""Ephemeris models consumed by the event searches.

Every function is a pure function of an :class:`~ephemeris_events.time_utils.AstroTime`
returning a result record with a status.
"""

from ephemeris_events.ephemeris.geometry import (
    Aberration,
    EquatorDate,
    Observer,
    Refraction,
    ecliptic,
    ecliptic_longitude,
    equator,
    geo_vector,
    helio_vector,
    horizon,
    observer_position,
    sun_position,
)
from ephemeris_events.ephemeris.magnitude import illumination
from ephemeris_events.ephemeris.moon import geo_moon, moon_distance
from ephemeris_events.ephemeris.orientation import sidereal_time
from ephemeris_events.vectors import angle_between

__all__ = [
    'Aberration',
    'EquatorDate',
    'Observer',
    'Refraction',
    'angle_between',
    'ecliptic',
    'ecliptic_longitude',
    'equator',
    'geo_moon',
    'geo_vector',
    'helio_vector',
    'horizon',
    'illumination',
    'moon_distance',
    'observer_position',
    'sidereal_time',
    'sun_position',
]
