"""Vector helpers built on cspyce: separations and RA/Dec conversion."""

from __future__ import annotations

import cspyce
import numpy as np

from ephemeris_events.constants import DEGREES_PER_HOUR_RA, RAD2DEG
from ephemeris_events.results import AngleResult, EquatorialResult, Status

# Products of lengths below this are treated as degenerate (AU^2).
_MIN_LENGTH_PRODUCT = 1.0e-8


def angle_between(a: np.ndarray, b: np.ndarray) -> AngleResult:
    """Angle in degrees between two vectors.

    Parameters:
        a, b: Cartesian vectors in the same frame.

    Returns:
        AngleResult in [0, 180]; BAD_VECTOR if either vector is (nearly) zero.
    """
    if cspyce.vnorm(a) * cspyce.vnorm(b) < _MIN_LENGTH_PRODUCT:
        return AngleResult.error(Status.BAD_VECTOR)
    return AngleResult.success(RAD2DEG * cspyce.vsep(a, b))


def vector_to_radec(pos: np.ndarray) -> EquatorialResult:
    """Convert an equatorial Cartesian vector to RA (hours), Dec (degrees), distance.

    Returns BAD_VECTOR for the zero vector. A vector along the pole gets RA 0.
    """
    xyproj = pos[0] * pos[0] + pos[1] * pos[1]
    if xyproj == 0.0:
        if pos[2] == 0.0:
            return EquatorialResult.error(Status.BAD_VECTOR)
        dec = 90.0 if pos[2] > 0.0 else -90.0
        return EquatorialResult(Status.SUCCESS, 0.0, dec, abs(float(pos[2])))
    dist, ra, dec = cspyce.recrad(np.asarray(pos, dtype=float))
    ra_hours = RAD2DEG * ra / DEGREES_PER_HOUR_RA
    if ra_hours >= 24.0:
        ra_hours -= 24.0
    return EquatorialResult(Status.SUCCESS, ra_hours, RAD2DEG * dec, float(dist))
