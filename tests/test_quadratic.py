"""Tests for parabolic interpolation through three samples."""

from __future__ import annotations

import pytest

from ephemeris_events.search.quadratic import quad_interp


def test_single_root_in_range() -> None:
    """(x - 0.5)(x + 2) has one root in [-1, 1]; root and slope are returned."""

    fit = quad_interp(10.0, 2.0, -1.5, -1.0, 1.5)

    assert fit is not None
    assert fit.x == pytest.approx(0.5)
    assert fit.t == pytest.approx(11.0)
    # d/dx at x=0.5 is 2.5; scaled by dt=2.
    assert fit.df_dt == pytest.approx(1.25)


def test_two_roots_in_range_rejected() -> None:
    """x^2 - 0.25 crosses zero twice inside the interval."""

    assert quad_interp(0.0, 1.0, 0.75, -0.25, 0.75) is None


def test_line_root() -> None:
    """Collinear samples fall back to the linear root."""

    fit = quad_interp(5.0, 0.5, -1.0, 0.0, 1.0)

    assert fit is not None
    assert fit.x == 0.0
    assert fit.t == 5.0
    assert fit.df_dt == pytest.approx(2.0)


def test_line_root_out_of_range() -> None:
    fit = quad_interp(0.0, 1.0, 1.0, 2.0, 3.0)

    assert fit is None


@pytest.mark.parametrize(
    ('fa', 'fm', 'fb'),
    [
        (0.0, 0.0, 0.0),  # flat
        (2.0, 1.0, 2.0),  # no real root
        (1.0, 0.0, 1.0),  # vertex touches zero
    ],
)
def test_degenerate_samples_rejected(fa: float, fm: float, fb: float) -> None:
    assert quad_interp(0.0, 1.0, fa, fm, fb) is None
