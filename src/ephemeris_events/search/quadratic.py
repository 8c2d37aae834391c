"""Parabolic interpolation through three equally spaced samples."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class QuadFit:
    """Root of a fitted parabola.

    Attributes:
        x: Root in normalized coordinates, within [-1, 1].
        t: Root in the caller's time units.
        df_dt: Slope of the parabola at the root, per time unit.
    """

    x: float
    t: float
    df_dt: float


def quad_interp(tm: float, dt: float, fa: float, fm: float, fb: float) -> QuadFit | None:
    """Find the unique zero crossing of the parabola through three samples.

    The samples are taken at ``tm - dt``, ``tm`` and ``tm + dt``, i.e. at
    normalized ``x = -1, 0, +1``.

    Parameters:
        tm: Time of the middle sample.
        dt: Half-width of the sampled interval.
        fa, fm, fb: Function values at x = -1, 0, +1.

    Returns:
        QuadFit for the single root in [-1, 1], or None when the curve is
        flat, has no real root, touches zero at its vertex, or has zero or two
        roots in range.
    """
    q = (fb + fa) / 2.0 - fm
    r = (fb - fa) / 2.0
    s = fm

    if q == 0.0:
        # A line, not a parabola.
        if r == 0.0:
            return None
        x = -s / r
        if x < -1.0 or x > 1.0:
            return None
    else:
        u = r * r - 4.0 * q * s
        if u <= 0.0:
            return None
        ru = math.sqrt(u)
        x1 = (-r + ru) / (2.0 * q)
        x2 = (-r - ru) / (2.0 * q)
        x1_in = -1.0 <= x1 <= 1.0
        x2_in = -1.0 <= x2 <= 1.0
        if x1_in == x2_in:
            # Need exactly one zero crossing in range.
            return None
        x = x1 if x1_in else x2

    return QuadFit(x=x, t=tm + x * dt, df_dt=(2.0 * q * x + r) / dt)
