"""Numerical event search: root-finding engine and bracketing strategies."""

from ephemeris_events.search.engine import SearchFunc, search
from ephemeris_events.search.quadratic import QuadFit, quad_interp

__all__ = ['QuadFit', 'SearchFunc', 'quad_interp', 'search']
