"""Configuration: leap-second kernel path and log level from environment."""

from __future__ import annotations

import logging
import os
import sys

_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Returns:
        JULIAN_LEAPSECS when set and non-blank; None to use the rms-julian
        bundled LSK.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None


def get_log_level(verbose: bool = False) -> int:
    """Return log level from verbose flag, overridden by EPHEMERIS_EVENTS_LOG.

    Parameters:
        verbose: Default to DEBUG instead of WARNING.

    Returns:
        Numeric logging level.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('EPHEMERIS_EVENTS_LOG', '').strip().upper()
    if env_level in _LEVEL_NAMES:
        level = getattr(logging, env_level)
    return level


def configure_logging(verbose: bool = False) -> None:
    """Configure logging on stderr for scripts using this package.

    Library modules only create loggers; handlers are installed here.
    """
    logging.basicConfig(
        level=get_log_level(verbose),
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )
