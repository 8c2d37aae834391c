"""Status codes, event kinds, and the immutable result records of every search.

Nothing in the search path raises for an expected outcome. Each public
function returns one of the records below; check ``result.ok`` (or compare
``result.status``) before reading the payload, which is ``nan`` or ``None``
when the call failed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np

from ephemeris_events.constants import KM_PER_AU
from ephemeris_events.time_utils import AstroTime

_NAN = math.nan


class Status(IntEnum):
    """Outcome of a calculation or search."""

    SUCCESS = 0
    NOT_INITIALIZED = 1
    INVALID_BODY = 2
    NO_CONVERGE = 3
    BAD_TIME = 4
    BAD_VECTOR = 5
    SEARCH_FAILURE = 6
    EARTH_NOT_ALLOWED = 7
    NO_MOON_QUARTER = 8
    WRONG_MOON_QUARTER = 9
    INTERNAL_ERROR = 10
    INVALID_PARAMETER = 11


class Season(IntEnum):
    """Equinoxes and solstices, numbered by the Sun's longitude / 90."""

    MAR_EQUINOX = 0
    JUN_SOLSTICE = 1
    SEP_EQUINOX = 2
    DEC_SOLSTICE = 3


class MoonQuarterKind(IntEnum):
    """Lunar quarters, cyclic in the order listed."""

    NEW_MOON = 0
    FIRST_QUARTER = 1
    FULL_MOON = 2
    LAST_QUARTER = 3

    def next(self) -> MoonQuarterKind:
        """Return the quarter that follows this one."""
        return MoonQuarterKind((self.value + 1) % 4)


class ApsisKind(IntEnum):
    """Closest or farthest point of an orbit."""

    PERICENTER = 0
    APOCENTER = 1


class Direction(IntEnum):
    """Rise (+1) or set (-1), used as a sign on the altitude function."""

    RISE = 1
    SET = -1


class Visibility(Enum):
    """Whether a body appears in the morning or evening sky."""

    MORNING = 'morning'
    EVENING = 'evening'


@dataclass(frozen=True)
class _Result:
    """Base for result records: every record carries a status."""

    status: Status

    @property
    def ok(self) -> bool:
        """True when the calculation succeeded."""
        return self.status == Status.SUCCESS


@dataclass(frozen=True)
class FuncResult(_Result):
    """Value of a function of time, or the status that prevented it."""

    value: float = _NAN

    @classmethod
    def success(cls, value: float) -> FuncResult:
        return cls(Status.SUCCESS, float(value))

    @classmethod
    def error(cls, status: Status) -> FuncResult:
        return cls(status)


@dataclass(frozen=True)
class SearchResult(_Result):
    """Time found by a search."""

    time: AstroTime | None = None

    @classmethod
    def success(cls, time: AstroTime) -> SearchResult:
        return cls(Status.SUCCESS, time)

    @classmethod
    def error(cls, status: Status) -> SearchResult:
        return cls(status)


@dataclass(frozen=True, eq=False)
class VectorResult(_Result):
    """Cartesian position in AU (J2000 equatorial axes unless noted)."""

    vector: np.ndarray | None = None
    time: AstroTime | None = None

    @classmethod
    def success(cls, vector: np.ndarray, time: AstroTime) -> VectorResult:
        return cls(Status.SUCCESS, np.asarray(vector, dtype=float), time)

    @classmethod
    def error(cls, status: Status, time: AstroTime | None = None) -> VectorResult:
        return cls(status, None, time)

    @property
    def x(self) -> float:
        return _NAN if self.vector is None else float(self.vector[0])

    @property
    def y(self) -> float:
        return _NAN if self.vector is None else float(self.vector[1])

    @property
    def z(self) -> float:
        return _NAN if self.vector is None else float(self.vector[2])

    def length(self) -> float:
        """Return the vector length in AU (nan on failure)."""
        if self.vector is None:
            return _NAN
        return float(np.linalg.norm(self.vector))


@dataclass(frozen=True)
class AngleResult(_Result):
    """An angle in degrees."""

    angle: float = _NAN

    @classmethod
    def success(cls, angle: float) -> AngleResult:
        return cls(Status.SUCCESS, float(angle))

    @classmethod
    def error(cls, status: Status) -> AngleResult:
        return cls(status)


@dataclass(frozen=True)
class EquatorialResult(_Result):
    """Right ascension (hours), declination (degrees), distance (AU)."""

    ra: float = _NAN
    dec: float = _NAN
    dist: float = _NAN

    @classmethod
    def error(cls, status: Status) -> EquatorialResult:
        return cls(status)


@dataclass(frozen=True)
class EclipticResult(_Result):
    """Ecliptic rectangular (AU) and spherical (degrees) coordinates."""

    ex: float = _NAN
    ey: float = _NAN
    ez: float = _NAN
    elat: float = _NAN
    elon: float = _NAN

    @classmethod
    def error(cls, status: Status) -> EclipticResult:
        return cls(status)


@dataclass(frozen=True)
class HorizonCoords(_Result):
    """Topocentric azimuth/altitude (degrees) and the matching RA/Dec.

    ``ra`` and ``dec`` include refraction when it was requested.
    """

    azimuth: float = _NAN
    altitude: float = _NAN
    ra: float = _NAN
    dec: float = _NAN


@dataclass(frozen=True)
class SeasonsInfo(_Result):
    """Equinox and solstice times of one calendar year."""

    mar_equinox: AstroTime | None = None
    jun_solstice: AstroTime | None = None
    sep_equinox: AstroTime | None = None
    dec_solstice: AstroTime | None = None

    def time_of(self, season: Season) -> AstroTime | None:
        """Return the time of the given season."""
        return (
            self.mar_equinox,
            self.jun_solstice,
            self.sep_equinox,
            self.dec_solstice,
        )[season]


@dataclass(frozen=True)
class MoonQuarter(_Result):
    """A lunar quarter and when it occurs."""

    quarter: MoonQuarterKind | None = None
    time: AstroTime | None = None

    @classmethod
    def error(cls, status: Status) -> MoonQuarter:
        return cls(status)


@dataclass(frozen=True)
class ElongationInfo(_Result):
    """Angular separation of a body from the Sun, as seen from Earth.

    Attributes:
        time: When the elongation was evaluated.
        visibility: Morning or evening sky.
        elongation: Angle from the Sun in degrees.
        ecliptic_separation: Difference in ecliptic longitude from the Sun.
    """

    time: AstroTime | None = None
    visibility: Visibility | None = None
    elongation: float = _NAN
    ecliptic_separation: float = _NAN

    @classmethod
    def error(cls, status: Status) -> ElongationInfo:
        return cls(status)


@dataclass(frozen=True)
class IlluminationInfo(_Result):
    """Visual magnitude and illumination geometry.

    Attributes:
        time: When the values were evaluated.
        mag: Apparent visual magnitude.
        phase_angle: Sun-body-Earth angle in degrees.
        helio_dist: Distance from the Sun in AU.
        ring_tilt: Saturn's ring tilt in degrees (0 for other bodies).
    """

    time: AstroTime | None = None
    mag: float = _NAN
    phase_angle: float = _NAN
    helio_dist: float = _NAN
    ring_tilt: float = _NAN

    @property
    def phase_fraction(self) -> float:
        """Fraction of the disc that is illuminated (0..1)."""
        return (1.0 + math.cos(math.radians(self.phase_angle))) / 2.0

    @classmethod
    def error(cls, status: Status) -> IlluminationInfo:
        return cls(status)


@dataclass(frozen=True)
class HourAngleEvent(_Result):
    """Time a body reaches an hour angle, with its horizontal coordinates."""

    time: AstroTime | None = None
    hor: HorizonCoords | None = None

    @classmethod
    def error(cls, status: Status) -> HourAngleEvent:
        return cls(status)


@dataclass(frozen=True)
class ApsisInfo(_Result):
    """A pericenter or apocenter event."""

    time: AstroTime | None = None
    kind: ApsisKind | None = None
    dist_au: float = _NAN

    @property
    def dist_km(self) -> float:
        return self.dist_au * KM_PER_AU

    @classmethod
    def error(cls, status: Status) -> ApsisInfo:
        return cls(status)
