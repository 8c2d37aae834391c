"""Angle wrapping helpers for longitudes and hour angles."""

from __future__ import annotations

from ephemeris_events.constants import DEGREES_PER_CIRCLE, HALF_CIRCLE_DEGREES


def longitude_offset(diff: float) -> float:
    """Wrap an angle difference in degrees into (-180, +180].

    Parameters:
        diff: Angle difference in degrees.

    Returns:
        Equivalent difference in the half-open range (-180, 180].
    """
    offset = diff
    while offset <= -HALF_CIRCLE_DEGREES:
        offset += DEGREES_PER_CIRCLE
    while offset > HALF_CIRCLE_DEGREES:
        offset -= DEGREES_PER_CIRCLE
    return offset


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude in degrees into [0, 360)."""
    while lon < 0.0:
        lon += DEGREES_PER_CIRCLE
    while lon >= DEGREES_PER_CIRCLE:
        lon -= DEGREES_PER_CIRCLE
    return lon


def wrap_hours(hours: float) -> float:
    """Wrap an hour angle or right ascension into [0, 24)."""
    hours = hours % 24.0
    if hours < 0.0:
        hours += 24.0
    return hours
