"""Tests for the bracketing strategies."""

from __future__ import annotations

import logging

import pytest

from ephemeris_events.results import FuncResult, Status
from ephemeris_events.search.bracket import (
    cusp_window,
    fixed_window,
    periodic_window,
    scan_slope_sign_change,
    validate_slope_bracket,
)
from ephemeris_events.time_utils import AstroTime

_START = AstroTime.from_ut(1000.0)


def _slope_about(root_ut: float):
    def slope(time: AstroTime) -> FuncResult:
        return FuncResult.success(time.ut - root_ut)

    return slope


def test_fixed_window() -> None:
    window = fixed_window(_START, 4.0)

    assert window.ok
    assert window.t1 == _START
    assert window.t2.ut == pytest.approx(1004.0)


def test_periodic_window_forces_forward_search() -> None:
    """A positive offset means the target was just passed: aim a full cycle ahead."""

    window = periodic_window(90.0, _START, 40.0, 36.0, 1.0)

    assert window.ok
    # Remaining 270 degrees of a 36-day cycle is 27 days.
    assert window.t1.ut == pytest.approx(1026.0)
    assert window.t2.ut == pytest.approx(1028.0)


def test_periodic_window_clipped_at_limit() -> None:
    window = periodic_window(-90.0, _START, 9.5, 36.0, 1.0)

    assert window.ok
    assert window.t1.ut == pytest.approx(1008.0)
    assert window.t2.ut == pytest.approx(1009.5)


def test_periodic_window_beyond_limit() -> None:
    window = periodic_window(-180.0 + 1.0e-9, _START, 5.0, 36.0, 1.0)

    assert window.status == Status.NO_MOON_QUARTER


@pytest.mark.parametrize(
    ('rlon', 'expected'),
    [
        (0.0, (0.0, 10.0, 30.0)),
        (-9.9, (0.0, 10.0, 30.0)),
        (-10.0, (0.0, 10.0, 30.0)),
        (45.0, (0.0, -30.0, -10.0)),
        (-45.0, (0.0, -30.0, -10.0)),
        (20.0, (-100.0, 10.0, 30.0)),
        (-20.0, (-100.0, -30.0, -10.0)),
    ],
)
def test_cusp_window_selection(rlon: float, expected: tuple[float, float, float]) -> None:
    window = cusp_window(rlon, 10.0, 30.0, 400.0)

    assert (window.adjust_days, window.rlon_lo, window.rlon_hi) == expected


def test_cusp_window_upper_bound_inclusive() -> None:
    """At exactly s2 the elongation form stays in the window; the magnitude form does not."""

    exclusive = cusp_window(30.0, 10.0, 30.0, 400.0)
    inclusive = cusp_window(30.0, 10.0, 30.0, 400.0, upper_inclusive=True)

    assert (exclusive.rlon_lo, exclusive.adjust_days) == (10.0, -100.0)
    assert (inclusive.rlon_lo, inclusive.adjust_days) == (-30.0, 0.0)


def test_validate_slope_bracket_accepts_ascending() -> None:
    bracket = validate_slope_bracket(_slope_about(1001.0), _START, _START.add_days(2.0))

    assert bracket.ok
    assert bracket.f1 < 0.0 < bracket.f2


def test_validate_slope_bracket_rejects_wrong_signs(caplog: pytest.LogCaptureFixture) -> None:
    """A bracket with the wrong slope signs is an internal error, logged as a warning."""

    with caplog.at_level(logging.WARNING):
        bracket = validate_slope_bracket(_slope_about(999.0), _START, _START.add_days(2.0))

    assert bracket.status == Status.INTERNAL_ERROR
    assert 'not negative' in caplog.text


def test_validate_slope_bracket_propagates_error() -> None:
    bracket = validate_slope_bracket(
        lambda time: FuncResult.error(Status.BAD_TIME), _START, _START.add_days(1.0)
    )

    assert bracket.status == Status.BAD_TIME


def test_scan_finds_sign_change() -> None:
    bracket = scan_slope_sign_change(_slope_about(1012.0), _START, 5.0, 60.0)

    assert bracket.ok
    assert bracket.t1.ut == pytest.approx(1010.0)
    assert bracket.t2.ut == pytest.approx(1015.0)
    assert bracket.f1 * bracket.f2 <= 0.0


def test_scan_without_sign_change() -> None:
    bracket = scan_slope_sign_change(_slope_about(2000.0), _START, 5.0, 60.0)

    assert bracket.status == Status.INTERNAL_ERROR
