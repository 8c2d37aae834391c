"""Bracketing strategies: turn an event question into a window for the engine.

Every strategy here either returns a window whose end points satisfy the
engine's ``f(t1) < 0 <= f(t2)`` precondition (or a window centered on a
predicted root) or a status explaining why no window exists.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from ephemeris_events.constants import DEGREES_PER_CIRCLE
from ephemeris_events.results import FuncResult, Status
from ephemeris_events.time_utils import AstroTime

logger = logging.getLogger(__name__)

SlopeFunc = Callable[[AstroTime], FuncResult]


@dataclass(frozen=True)
class Bracket:
    """A search window with the function values at its ends.

    ``f1``/``f2`` are ``nan`` when the strategy does not sample the function.
    """

    status: Status
    t1: AstroTime | None = None
    t2: AstroTime | None = None
    f1: float = math.nan
    f2: float = math.nan

    @property
    def ok(self) -> bool:
        return self.status == Status.SUCCESS


@dataclass(frozen=True)
class CuspWindow:
    """Relative-longitude window clear of the cusps at 0 and 180 degrees.

    Attributes:
        adjust_days: Shift of the start time before seeking ``rlon_lo``
            (negative when the start already lies inside the window).
        rlon_lo: Relative longitude at the window start, degrees.
        rlon_hi: Relative longitude at the window end, degrees.
    """

    adjust_days: float
    rlon_lo: float
    rlon_hi: float


def fixed_window(start: AstroTime, limit_days: float) -> Bracket:
    """Forward window ``[start, start + limit_days]``."""
    return Bracket(Status.SUCCESS, start, start.add_days(limit_days))


def periodic_window(
    offset_deg: float,
    start: AstroTime,
    limit_days: float,
    period_days: float,
    uncertainty_days: float,
    too_late_status: Status = Status.NO_MOON_QUARTER,
) -> Bracket:
    """Window around the predicted next zero of a periodic angular offset.

    Parameters:
        offset_deg: Current angular offset from the target, (-180, 180].
        start: Time the offset was measured.
        limit_days: Latest acceptable event time, days after ``start``.
        period_days: Mean period in which the offset sweeps 360 degrees.
        uncertainty_days: Half-width of the window around the prediction.
        too_late_status: Status when even the window start is past the limit.

    Returns:
        Bracket clipped above at ``limit_days``.
    """
    ya = offset_deg
    if ya > 0.0:
        # Force searching forward in time.
        ya -= DEGREES_PER_CIRCLE
    est_dt = -(period_days * ya) / DEGREES_PER_CIRCLE
    dt1 = est_dt - uncertainty_days
    if dt1 > limit_days:
        return Bracket(too_late_status)
    dt2 = min(est_dt + uncertainty_days, limit_days)
    return Bracket(Status.SUCCESS, start.add_days(dt1), start.add_days(dt2))


def cusp_window(
    rlon: float,
    s1: float,
    s2: float,
    synodic_period: float,
    upper_inclusive: bool = False,
) -> CuspWindow:
    """Pick the relative-longitude window ``[+s1, +s2]`` or ``[-s2, -s1]``.

    Parameters:
        rlon: Current relative longitude of the planet from Earth, (-180, 180].
        s1, s2: Window bounds, ``0 < s1 < s2 < 180``.
        synodic_period: Synodic period of the planet, days.
        upper_inclusive: Treat ``rlon == s2`` as beyond the positive window.

    Returns:
        CuspWindow describing which window to seek and how far to step back.
    """
    beyond = rlon >= s2 if upper_inclusive else rlon > s2
    if -s1 <= rlon < s1:
        return CuspWindow(0.0, s1, s2)
    if beyond or rlon < -s2:
        return CuspWindow(0.0, -s2, -s1)
    # Already inside a window: step back a quarter synodic period to its start.
    if rlon >= 0.0:
        return CuspWindow(-synodic_period / 4.0, s1, s2)
    return CuspWindow(-synodic_period / 4.0, -s2, -s1)


def validate_slope_bracket(slope: SlopeFunc, t1: AstroTime, t2: AstroTime) -> Bracket:
    """Confirm that ``slope`` is negative at ``t1`` and positive at ``t2``.

    Returns:
        Bracket with the slopes; INTERNAL_ERROR when either sign is wrong.
    """
    m1 = slope(t1)
    if not m1.ok:
        return Bracket(m1.status)
    if m1.value >= 0.0:
        logger.warning('Slope %g at window start %s is not negative', m1.value, t1)
        return Bracket(Status.INTERNAL_ERROR)
    m2 = slope(t2)
    if not m2.ok:
        return Bracket(m2.status)
    if m2.value <= 0.0:
        logger.warning('Slope %g at window end %s is not positive', m2.value, t2)
        return Bracket(Status.INTERNAL_ERROR)
    return Bracket(Status.SUCCESS, t1, t2, m1.value, m2.value)


def scan_slope_sign_change(
    slope: SlopeFunc,
    start: AstroTime,
    step_days: float,
    span_days: float,
) -> Bracket:
    """Step forward from ``start`` until ``slope`` changes sign (or touches zero).

    Parameters:
        slope: Function whose sign change marks the event.
        start: First sample time.
        step_days: Distance between samples.
        span_days: Scan stops once ``iteration * step_days`` reaches this.

    Returns:
        Bracket with ``f1 * f2 <= 0``; INTERNAL_ERROR if no sign change is
        found within ``span_days``.
    """
    t1 = start
    m1 = slope(t1)
    if not m1.ok:
        return Bracket(m1.status)
    iteration = 0
    while iteration * step_days < span_days:
        t2 = t1.add_days(step_days)
        m2 = slope(t2)
        if not m2.ok:
            return Bracket(m2.status)
        if m1.value * m2.value <= 0.0:
            return Bracket(Status.SUCCESS, t1, t2, m1.value, m2.value)
        t1, m1 = t2, m2
        iteration += 1
    logger.warning('No slope sign change within %g days of %s', span_days, start)
    return Bracket(Status.INTERNAL_ERROR)
