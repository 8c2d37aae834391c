"""Astronomical event searches for the Sun, Moon and planets.

This package finds the times of equinoxes and solstices, lunar quarters and
apsides, planetary greatest elongations, Venus's peak brightness, and rise,
set and culmination for an observer on Earth. Every event is located by one
root-finding engine (:func:`ephemeris_events.search.search`) fed by a
bracketing strategy specific to the event.

Positions come from analytic models (VSOP87, a Pluto Chebyshev fit and a
lunar theory); rms-julian handles calendar and UTC conversions and cspyce
supplies vector geometry.
"""

from ephemeris_events.ephemeris.geometry import Observer
from ephemeris_events.events import (
    elongation,
    next_lunar_apsis,
    next_moon_quarter,
    search_hour_angle,
    search_lunar_apsis,
    search_max_elongation,
    search_moon_phase,
    search_moon_quarter,
    search_peak_magnitude,
    search_relative_longitude,
    search_rise_set,
    seasons,
)
from ephemeris_events.planets import Body
from ephemeris_events.results import (
    ApsisKind,
    Direction,
    MoonQuarterKind,
    Season,
    Status,
)
from ephemeris_events.time_utils import AstroTime

__all__ = [
    'ApsisKind',
    'AstroTime',
    'Body',
    'Direction',
    'MoonQuarterKind',
    'Observer',
    'Season',
    'Status',
    'elongation',
    'next_lunar_apsis',
    'next_moon_quarter',
    'search_hour_angle',
    'search_lunar_apsis',
    'search_max_elongation',
    'search_moon_phase',
    'search_moon_quarter',
    'search_peak_magnitude',
    'search_relative_longitude',
    'search_rise_set',
    'seasons',
]
