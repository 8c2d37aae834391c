"""Event orchestrators: each picks a window, runs the search engine and checks the answer."""

from ephemeris_events.events.apsis import next_lunar_apsis, search_lunar_apsis
from ephemeris_events.events.greatest_elongation import (
    angle_from_sun,
    elongation,
    longitude_from_sun,
    search_max_elongation,
)
from ephemeris_events.events.magnitude import search_peak_magnitude
from ephemeris_events.events.lunar_phase import (
    moon_phase,
    next_moon_quarter,
    search_moon_phase,
    search_moon_quarter,
)
from ephemeris_events.events.planet_longitude import (
    relative_longitude,
    search_relative_longitude,
)
from ephemeris_events.events.riseset import search_hour_angle, search_rise_set
from ephemeris_events.events.equinoxes import search_sun_longitude, seasons

__all__ = [
    'angle_from_sun',
    'elongation',
    'longitude_from_sun',
    'moon_phase',
    'next_lunar_apsis',
    'next_moon_quarter',
    'relative_longitude',
    'search_hour_angle',
    'search_lunar_apsis',
    'search_max_elongation',
    'search_moon_phase',
    'search_moon_quarter',
    'search_peak_magnitude',
    'search_relative_longitude',
    'search_rise_set',
    'search_sun_longitude',
    'seasons',
]
