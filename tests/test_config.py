"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from ephemeris_events import config


def test_leapsecs_path_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('JULIAN_LEAPSECS', ' /data/naif0012.tls ')

    assert config.get_leapsecs_path() == '/data/naif0012.tls'


@pytest.mark.parametrize('value', [None, '', '   '])
def test_leapsecs_path_unset(monkeypatch: pytest.MonkeyPatch, value: str | None) -> None:
    if value is None:
        monkeypatch.delenv('JULIAN_LEAPSECS', raising=False)
    else:
        monkeypatch.setenv('JULIAN_LEAPSECS', value)

    assert config.get_leapsecs_path() is None


def test_log_level_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('EPHEMERIS_EVENTS_LOG', raising=False)

    assert config.get_log_level() == logging.WARNING
    assert config.get_log_level(verbose=True) == logging.DEBUG


def test_log_level_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('EPHEMERIS_EVENTS_LOG', 'info')

    assert config.get_log_level(verbose=True) == logging.INFO


def test_log_level_ignores_unknown_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('EPHEMERIS_EVENTS_LOG', 'chatty')

    assert config.get_log_level() == logging.WARNING
