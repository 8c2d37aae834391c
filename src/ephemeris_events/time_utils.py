"""Time values on the UT and TT scales, with rms-julian calendar support.

Times are days since 2000-01-01T12:00. Universal Time (``ut``) follows the
Earth's rotation; Terrestrial Time (``tt``) is the uniform scale used by the
ephemeris models. The two differ by Delta-T, interpolated from a table of
historical and predicted values.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import julian
import numpy as np

from ephemeris_events.config import get_leapsecs_path
from ephemeris_events.constants import J2000_MJD, SECONDS_PER_DAY

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False

# (Modified Julian Date, Delta-T seconds); clamped beyond both ends.
_DELTA_T_TABLE = np.array([
    (-72638.0, 38),
    (-65333.0, 26),
    (-58028.0, 21),
    (-50724.0, 21.1),
    (-43419.0, 13.5),
    (-39766.0, 13.7),
    (-36114.0, 14.8),
    (-32461.0, 15.7),
    (-28809.0, 15.6),
    (-25156.0, 13.3),
    (-21504.0, 12.6),
    (-17852.0, 11.2),
    (-14200.0, 11.13),
    (-10547.0, 7.95),
    (-6895.0, 6.22),
    (-3242.0, 6.55),
    (-1416.0, 7.26),
    (410.0, 7.35),
    (2237.0, 5.92),
    (4063.0, 1.04),
    (5889.0, -3.19),
    (7715.0, -5.36),
    (9542.0, -5.74),
    (11368.0, -5.86),
    (13194.0, -6.41),
    (15020.0, -2.70),
    (16846.0, 3.92),
    (18672.0, 10.38),
    (20498.0, 17.19),
    (22324.0, 21.41),
    (24151.0, 23.63),
    (25977.0, 24.02),
    (27803.0, 23.91),
    (29629.0, 24.35),
    (31456.0, 26.76),
    (33282.0, 29.15),
    (35108.0, 31.07),
    (36934.0, 33.150),
    (38761.0, 35.738),
    (40587.0, 40.182),
    (42413.0, 45.477),
    (44239.0, 50.540),
    (44605.0, 51.3808),
    (44970.0, 52.1668),
    (45335.0, 52.9565),
    (45700.0, 53.7882),
    (46066.0, 54.3427),
    (46431.0, 54.8712),
    (46796.0, 55.3222),
    (47161.0, 55.8197),
    (47527.0, 56.3000),
    (47892.0, 56.8553),
    (48257.0, 57.5653),
    (48622.0, 58.3092),
    (48988.0, 59.1218),
    (49353.0, 59.9845),
    (49718.0, 60.7853),
    (50083.0, 61.6287),
    (50449.0, 62.2950),
    (50814.0, 62.9659),
    (51179.0, 63.4673),
    (51544.0, 63.8285),
    (51910.0, 64.0908),
    (52275.0, 64.2998),
    (52640.0, 64.4734),
    (53005.0, 64.5736),
    (53371.0, 64.6876),
    (53736.0, 64.8452),
    (54101.0, 65.1464),
    (54466.0, 65.4573),
    (54832.0, 65.7768),
    (55197.0, 66.0699),
    (55562.0, 66.3246),
    (55927.0, 66.6030),
    (56293.0, 66.9069),
    (56658.0, 67.2810),
    (57023.0, 67.6439),
    (57388.0, 68.1024),
    (57754.0, 68.5927),
    (58119.0, 68.9676),
    (58484.0, 69.2201),
    (58849.0, 69.87),
    (59214.0, 70.39),
    (59580.0, 70.91),
    (59945.0, 71.40),
    (60310.0, 71.88),
    (60675.0, 72.36),
    (61041.0, 72.83),
    (61406.0, 73.32),
    (61680.0, 73.66),
], dtype=float)


def _ensure_leapsecs() -> None:
    """Load a leap seconds kernel for rms-julian if not already loaded.

    Uses JULIAN_LEAPSECS when set; if that file is missing or not in NAIF LSK
    format, falls back to the rms-julian bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
                path,
                e,
            )
    julian.load_lsk()
    _leapsecs_loaded = True


def delta_t(mjd: float) -> float:
    """Return TT - UT in seconds at the given Modified Julian Date.

    Linear interpolation between table entries; constant beyond the ends.
    """
    return float(np.interp(mjd, _DELTA_T_TABLE[:, 0], _DELTA_T_TABLE[:, 1]))


def terrestrial_time(ut: float) -> float:
    """Convert UT days since J2000 to TT days since J2000."""
    return ut + delta_t(ut + J2000_MJD) / SECONDS_PER_DAY


@dataclass(frozen=True)
class CalendarTime:
    """UTC calendar breakdown of a time value."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float


@dataclass(frozen=True)
class AstroTime:
    """An instant expressed on both the UT and TT scales.

    Attributes:
        ut: Universal Time, days since 2000-01-01T12:00.
        tt: Terrestrial Time, days since 2000-01-01T12:00.
    """

    ut: float
    tt: float

    @classmethod
    def from_ut(cls, ut: float) -> AstroTime:
        """Build a time value from UT days, deriving TT through Delta-T."""
        ut = float(ut)
        return cls(ut, terrestrial_time(ut))

    @classmethod
    def make(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
    ) -> AstroTime:
        """Build a time value from a UTC calendar date and time.

        Parameters:
            year, month, day: Calendar date.
            hour, minute, second: Time of day (UTC).

        Returns:
            AstroTime for that instant.
        """
        day_number = int(julian.day_from_ymd(year, month, day))
        ut = (
            day_number
            - 0.5
            + hour / 24.0
            + minute / (24.0 * 60.0)
            + second / SECONDS_PER_DAY
        )
        return cls.from_ut(ut)

    @classmethod
    def parse(cls, string: str) -> AstroTime:
        """Parse a UTC date/time string (any format accepted by rms-julian).

        A trailing ISO ``Z`` suffix is accepted.

        Parameters:
            string: Date/time string, e.g. ``2020-03-20T03:50:00Z``.

        Returns:
            AstroTime for that instant.

        Raises:
            ValueError: If the string cannot be parsed.
        """
        _ensure_leapsecs()
        stripped = string.strip()
        candidate_strings = [stripped]
        if stripped.endswith(('Z', 'z')):
            # rms-julian does not parse the ISO UTC suffix "Z".
            candidate_strings.append(stripped[:-1])
        for candidate in candidate_strings:
            try:
                day, sec = julian.day_sec_from_string(candidate)[:2]
            except (ValueError, TypeError, LookupError, OSError):
                continue
            return cls.from_ut(int(day) - 0.5 + float(sec) / SECONDS_PER_DAY)
        raise ValueError(f'Unable to parse date/time: {string!r}')

    def add_days(self, days: float) -> AstroTime:
        """Return this time shifted by a number of days.

        The shift is applied to UT and TT is recomputed, so TT drifts from an
        exact shift by the change in Delta-T over the interval.
        """
        return AstroTime.from_ut(self.ut + days)

    def utc(self) -> CalendarTime:
        """Return the UTC calendar date and time of this value."""
        djd = self.ut + 0.5
        day = math.floor(djd)
        sec = (djd - day) * SECONDS_PER_DAY
        year, month, mday = julian.ymd_from_day(day)
        hour, minute, second = julian.hms_from_sec(sec)
        return CalendarTime(
            int(year), int(month), int(mday), int(hour), int(minute), float(second)
        )

    def __str__(self) -> str:
        """Format as ISO-8601 UTC with millisecond precision."""
        djd = self.ut + 0.5
        day = math.floor(djd)
        millis = round((djd - day) * SECONDS_PER_DAY * 1000.0)
        if millis >= 86_400_000:
            day += 1
            millis -= 86_400_000
        year, month, mday = julian.ymd_from_day(day)
        hour, rem = divmod(millis, 3_600_000)
        minute, rem = divmod(rem, 60_000)
        second, ms = divmod(rem, 1000)
        return (
            f'{int(year):04d}-{int(month):02d}-{int(mday):02d}'
            f'T{hour:02d}:{minute:02d}:{second:02d}.{ms:03d}Z'
        )
