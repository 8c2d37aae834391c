"""Tests for the layout of the events package."""

from __future__ import annotations

from types import ModuleType

import pytest

import ephemeris_events.events as events


@pytest.mark.parametrize(
    'name',
    ['apsis', 'cusp', 'equinoxes', 'greatest_elongation', 'lunar_phase', 'magnitude',
     'planet_longitude', 'riseset'],
)
def test_submodules_not_shadowed_by_exports(name: str) -> None:
    """Re-exported functions leave every submodule reachable by dotted path."""

    assert isinstance(getattr(events, name), ModuleType)


@pytest.mark.parametrize('name', events.__all__)
def test_exports_are_callables(name: str) -> None:
    assert callable(getattr(events, name))
    assert not isinstance(getattr(events, name), ModuleType)
