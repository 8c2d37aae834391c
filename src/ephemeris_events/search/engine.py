"""Generic search for the time a function of time ascends through zero.

The engine combines bisection with parabolic refinement. It trusts its caller
to supply a window ``[t1, t2]`` with ``f(t1) < 0 <= f(t2)``; establishing that
bracket is the job of the strategies in :mod:`ephemeris_events.search.bracket`
and the event orchestrators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ephemeris_events.constants import SEARCH_ITER_LIMIT, SECONDS_PER_DAY
from ephemeris_events.results import FuncResult, SearchResult, Status
from ephemeris_events.search.quadratic import quad_interp
from ephemeris_events.time_utils import AstroTime

logger = logging.getLogger(__name__)

SearchFunc = Callable[[AstroTime], FuncResult]


def search(
    func: SearchFunc,
    t1: AstroTime,
    t2: AstroTime,
    dt_tolerance_seconds: float,
) -> SearchResult:
    """Find the time in ``[t1, t2]`` where ``func`` ascends through zero.

    Parameters:
        func: Function of time returning a FuncResult.
        t1: Window start, where ``func`` is expected to be negative.
        t2: Window end, where ``func`` is expected to be zero or positive.
        dt_tolerance_seconds: Stop once the root is known to this precision.

    Returns:
        SearchResult with the root. SEARCH_FAILURE when no ascending crossing
        can be isolated, NO_CONVERGE after the iteration cap, or the status of
        the first failing ``func`` evaluation.
    """
    dt_days = abs(dt_tolerance_seconds / SECONDS_PER_DAY)
    res1 = func(t1)
    if not res1.ok:
        return SearchResult.error(res1.status)
    res2 = func(t2)
    if not res2.ok:
        return SearchResult.error(res2.status)
    f1 = res1.value
    f2 = res2.value
    fmid = 0.0
    calc_fmid = True

    for iteration in range(1, SEARCH_ITER_LIMIT + 1):
        dt = (t2.tt - t1.tt) / 2.0
        tmid = t1.add_days(dt)
        if abs(dt) < dt_days:
            return SearchResult.success(tmid)

        if calc_fmid:
            resmid = func(tmid)
            if not resmid.ok:
                return SearchResult.error(resmid.status)
            fmid = resmid.value
        else:
            # fmid carried over from the previous bracket shrink.
            calc_fmid = True

        logger.debug(
            'search iteration %d: [%s, %s] f=(%g, %g, %g)',
            iteration, t1, t2, f1, fmid, f2,
        )

        fit = quad_interp(tmid.ut, t2.ut - tmid.ut, f1, fmid, f2)
        if fit is not None:
            tq = AstroTime.from_ut(fit.t)
            resq = func(tq)
            if not resq.ok:
                return SearchResult.error(resq.status)
            fq = resq.value
            if fit.df_dt != 0.0:
                if abs(fq / fit.df_dt) < dt_days:
                    return SearchResult.success(tq)

                # Try a tighter bracket centered on the interpolated root.
                dt_guess = 1.2 * abs(fq / fit.df_dt)
                if dt_guess < dt / 10.0:
                    tleft = tq.add_days(-dt_guess)
                    tright = tq.add_days(dt_guess)
                    if (tleft.ut - t1.ut) * (tleft.ut - t2.ut) < 0.0 and (
                        (tright.ut - t1.ut) * (tright.ut - t2.ut) < 0.0
                    ):
                        resleft = func(tleft)
                        if not resleft.ok:
                            return SearchResult.error(resleft.status)
                        resright = func(tright)
                        if not resright.ok:
                            return SearchResult.error(resright.status)
                        if resleft.value < 0.0 <= resright.value:
                            t1, f1 = tleft, resleft.value
                            t2, f2 = tright, resright.value
                            fmid = fq
                            calc_fmid = False
                            continue

        # Bisection: keep whichever half shows an ascending crossing.
        if f1 < 0.0 <= fmid:
            t2, f2 = tmid, fmid
            continue
        if fmid < 0.0 <= f2:
            t1, f1 = tmid, fmid
            continue

        # No ascending crossing, or more than one in the window.
        return SearchResult.error(Status.SEARCH_FAILURE)

    logger.debug('search did not converge after %d iterations', SEARCH_ITER_LIMIT)
    return SearchResult.error(Status.NO_CONVERGE)
