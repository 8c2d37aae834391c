"""Tests for AstroTime, Delta-T and leap-second initialization."""

from __future__ import annotations

import pytest

from ephemeris_events import time_utils
from ephemeris_events.constants import SECONDS_PER_DAY
from ephemeris_events.time_utils import AstroTime, delta_t


def test_ensure_leapsecs_falls_back_to_bundled_kernel(monkeypatch: pytest.MonkeyPatch) -> None:
    """An unreadable JULIAN_LEAPSECS file falls back to the rms-julian bundled LSK."""

    calls: list[tuple[object, ...]] = []

    def _load_lsk(*args: object) -> None:
        calls.append(args)
        if args:
            raise OSError('no such file')

    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('ephemeris_events.time_utils.get_leapsecs_path', lambda: 'missing.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()
    time_utils._ensure_leapsecs()

    assert calls == [('missing.tls',), ()]


def test_ensure_leapsecs_uses_configured_path(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[object, ...]] = []
    monkeypatch.setattr('julian.load_lsk', lambda *args: calls.append(args))
    monkeypatch.setattr('ephemeris_events.time_utils.get_leapsecs_path', lambda: 'naif0012.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert calls == [('naif0012.tls',)]


def test_make_at_epoch() -> None:
    """2000-01-01T12:00 UTC is day zero on the UT scale."""

    t = AstroTime.make(2000, 1, 1, 12)

    assert t.ut == pytest.approx(0.0, abs=1.0e-12)
    # TT runs about 64 seconds ahead of UT in 2000.
    assert (t.tt - t.ut) * SECONDS_PER_DAY == pytest.approx(63.8, abs=0.5)


def test_str_is_iso_utc() -> None:
    assert str(AstroTime.make(2020, 3, 20, 3, 50, 0)) == '2020-03-20T03:50:00.000Z'
    assert str(AstroTime.make(1999, 12, 31, 23, 59, 1.25)) == '1999-12-31T23:59:01.250Z'


def test_str_rounds_into_next_day() -> None:
    t = AstroTime.make(2020, 12, 31, 23, 59, 59.9996)

    assert str(t) == '2021-01-01T00:00:00.000Z'


def test_utc_breakdown() -> None:
    cal = AstroTime.make(2024, 2, 29, 6, 30, 15.5).utc()

    assert (cal.year, cal.month, cal.day, cal.hour, cal.minute) == (2024, 2, 29, 6, 30)
    assert cal.second == pytest.approx(15.5, abs=1.0e-3)


def test_parse_accepts_iso_z_suffix() -> None:
    """ISO-8601 trailing Z parses as UTC like the same timestamp without Z."""

    with_z = AstroTime.parse('2022-08-18T00:01:47Z')
    without_z = AstroTime.parse('2022-08-18T00:01:47')

    assert with_z == without_z
    assert with_z.ut == pytest.approx(AstroTime.make(2022, 8, 18, 0, 1, 47).ut, abs=1.0e-9)


def test_parse_rejects_garbage() -> None:
    with pytest.raises(ValueError, match='Unable to parse'):
        AstroTime.parse('not a date')


def test_add_days() -> None:
    t = AstroTime.make(2020, 1, 1)

    later = t.add_days(1.5)

    assert later.ut == pytest.approx(t.ut + 1.5)
    assert str(later) == '2020-01-02T12:00:00.000Z'


def test_delta_t_clamped_outside_table() -> None:
    """Delta-T is held constant before and after the tabulated span."""

    assert delta_t(-1.0e7) == delta_t(-1.0e6)
    assert delta_t(1.0e7) == pytest.approx(73.66)


def test_delta_t_interpolates() -> None:
    mid = delta_t((58849.0 + 59214.0) / 2.0)

    assert mid == pytest.approx((69.87 + 70.39) / 2.0)
