"""Body identifiers and per-body orbital/photometric model dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Body(Enum):
    """Solar-system bodies known to the ephemeris models."""

    SUN = 'Sun'
    MOON = 'Moon'
    MERCURY = 'Mercury'
    VENUS = 'Venus'
    EARTH = 'Earth'
    MARS = 'Mars'
    JUPITER = 'Jupiter'
    SATURN = 'Saturn'
    URANUS = 'Uranus'
    NEPTUNE = 'Neptune'
    PLUTO = 'Pluto'


@dataclass(frozen=True)
class OrbitalModel:
    """Orbit and brightness constants for one body.

    Magnitude coefficients ``(c0, c1, c2, c3)`` give
    ``c0 + x*(c1 + x*(c2 + x*c3))`` with ``x = phase_angle / 100``, plus the
    distance term. ``crescent_magnitude`` replaces them at phase angles of
    ``crescent_phase_deg`` and beyond.
    """

    body: Body
    orbital_period_days: float = 0.0
    is_superior: bool = False
    radius_au: float = 0.0
    magnitude: tuple[float, float, float, float] | None = None
    crescent_magnitude: tuple[float, float, float, float] | None = None
    crescent_phase_deg: float = 180.0

    def magnitude_coefficients(self, phase_deg: float) -> tuple[float, float, float, float] | None:
        """Return the magnitude polynomial that applies at the given phase angle."""
        if self.crescent_magnitude is not None and phase_deg >= self.crescent_phase_deg:
            return self.crescent_magnitude
        return self.magnitude
