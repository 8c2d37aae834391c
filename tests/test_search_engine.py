"""Tests for the bisection/parabolic root-finding engine."""

from __future__ import annotations

import pytest

from ephemeris_events.constants import SECONDS_PER_DAY
from ephemeris_events.results import FuncResult, Status
from ephemeris_events.search.engine import search
from ephemeris_events.time_utils import AstroTime

_ROOT_UT = 100.3


def _linear(time: AstroTime) -> FuncResult:
    return FuncResult.success(time.ut - _ROOT_UT)


@pytest.mark.parametrize('tolerance', [60.0, 1.0, 0.01, 1.0e-6])
def test_linear_function_converges(tolerance: float) -> None:
    """An ascending line is solved to within the requested tolerance."""

    result = search(_linear, AstroTime.from_ut(100.0), AstroTime.from_ut(101.0), tolerance)

    assert result.ok
    assert abs(result.time.ut - _ROOT_UT) * SECONDS_PER_DAY <= max(tolerance, 1.0e-4)


def test_nonlinear_function_converges() -> None:
    """A cubic with one ascending root in the window is found."""

    def cubic(time: AstroTime) -> FuncResult:
        x = time.ut - 10.0
        return FuncResult.success(x**3 + x - 0.5)

    result = search(cubic, AstroTime.from_ut(9.0), AstroTime.from_ut(11.0), 1.0)

    assert result.ok
    x = result.time.ut - 10.0
    assert x**3 + x - 0.5 == pytest.approx(0.0, abs=1.0e-4)


def test_same_sign_window_fails() -> None:
    """No crossing in the window is an ordinary SEARCH_FAILURE."""

    def below(time: AstroTime) -> FuncResult:
        return FuncResult.success(time.ut - 200.0)

    result = search(below, AstroTime.from_ut(100.0), AstroTime.from_ut(101.0), 1.0)

    assert result.status == Status.SEARCH_FAILURE
    assert result.time is None


def test_upstream_error_propagates() -> None:
    """The first failing evaluation ends the search with its status."""

    calls: list[float] = []

    def flaky(time: AstroTime) -> FuncResult:
        calls.append(time.ut)
        if len(calls) >= 3:
            return FuncResult.error(Status.BAD_TIME)
        return _linear(time)

    result = search(flaky, AstroTime.from_ut(100.0), AstroTime.from_ut(101.0), 1.0)

    assert result.status == Status.BAD_TIME
    assert len(calls) == 3


def test_error_at_window_start() -> None:
    def broken(time: AstroTime) -> FuncResult:
        del time
        return FuncResult.error(Status.INVALID_BODY)

    result = search(broken, AstroTime.from_ut(0.0), AstroTime.from_ut(1.0), 1.0)

    assert result.status == Status.INVALID_BODY


def test_iteration_cap_reports_no_converge() -> None:
    """A step function halves the window each pass and exhausts the cap."""

    def step(time: AstroTime) -> FuncResult:
        return FuncResult.success(-1.0 if time.ut < _ROOT_UT else 1.0)

    result = search(step, AstroTime.from_ut(100.0), AstroTime.from_ut(101.0), 1.0e-4)

    assert result.status == Status.NO_CONVERGE
