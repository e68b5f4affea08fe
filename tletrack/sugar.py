"""
Derived getters: values computed from several TLE fields rather than stored
verbatim.
"""

import calendar
import math
from datetime import datetime, timedelta, timezone
from typing import Optional

from tletrack import config
from tletrack.getters import (
    get_epoch_day,
    get_epoch_year,
    get_int_designator_launch_number,
    get_int_designator_piece_of_launch,
    get_int_designator_year,
    get_mean_motion,
)
from tletrack.parsing import parse_tle

# Two-digit years at or below this belong to the 2000s
LAST_TWO_DIGIT_YEAR_OF_2000S = 56


def get_full_year(two_digit_year: int) -> int:
    """57 to 99 = 1900s, 00 to 56 = 2000s."""
    if two_digit_year <= LAST_TWO_DIGIT_YEAR_OF_2000S:
        return 2000 + two_digit_year
    return 1900 + two_digit_year


def day_of_year_to_timestamp(day_of_year: float, year: int) -> int:
    """
    Convert a fractional day of the year to a Unix timestamp in milliseconds.

    Day 1.0 is January 1st, 00:00:00 UTC.
    """
    year_start_ms = calendar.timegm((year, 1, 1, 0, 0, 0)) * config.MS_IN_A_SECOND
    return math.floor(year_start_ms + (day_of_year - 1) * config.MS_IN_A_DAY)


def get_cospar(tle, tle_is_parsed=False, cache=None) -> Optional[str]:
    """
    Determine the COSPAR ID (international designator).
    See https://en.wikipedia.org/wiki/International_Designator

    Example:
        get_cospar(iss_tle)
        -> '1998-067A'

    Returns:
        COSPAR ID, or None when the TLE leaves the designator blank (analyst
        objects)
    """
    parsed = tle if tle_is_parsed else parse_tle(tle, cache)
    year = get_int_designator_year(parsed, tle_is_parsed=True)
    launch_number = get_int_designator_launch_number(parsed, tle_is_parsed=True)
    if not isinstance(year, int) or not isinstance(launch_number, int):
        return None

    piece = get_int_designator_piece_of_launch(parsed, tle_is_parsed=True)
    return f"{get_full_year(year)}-{launch_number:03d}{piece}"


def get_satellite_name(tle, fallback_to_cospar: bool = False, cache=None) -> Optional[str]:
    """
    Determine the satellite name from the first line of a 3-line TLE.

    Args:
        tle: Any TLE input
        fallback_to_cospar: Return the COSPAR ID when no name is present
        cache: TLECache the parse is memoized in

    Returns:
        Satellite name, COSPAR ID, or config.UNKNOWN_SATELLITE_NAME (None
        unless configured)
    """
    parsed = parse_tle(tle, cache)
    if parsed.name:
        return parsed.name
    if fallback_to_cospar:
        cospar = get_cospar(parsed, tle_is_parsed=True)
        if cospar is not None:
            return cospar
    return config.UNKNOWN_SATELLITE_NAME


def get_epoch_timestamp(tle, cache=None) -> int:
    """
    Determine the Unix timestamp (ms) of the TLE epoch.

    Example:
        get_epoch_timestamp(iss_tle)
        -> 1500956694771
    """
    parsed = parse_tle(tle, cache)
    year = get_full_year(get_epoch_year(parsed, tle_is_parsed=True))
    return day_of_year_to_timestamp(get_epoch_day(parsed, tle_is_parsed=True), year)


def get_epoch_datetime(tle, cache=None) -> datetime:
    """TLE epoch as a timezone-aware UTC datetime (millisecond precision)."""
    epoch_ms = get_epoch_timestamp(tle, cache)
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(milliseconds=epoch_ms)


def get_average_orbit_time_ms(tle, cache=None) -> int:
    """Average duration of one revolution in whole milliseconds."""
    return int(config.MS_IN_A_DAY / get_mean_motion(tle, cache=cache))


def get_average_orbit_time_mins(tle, cache=None) -> float:
    return get_average_orbit_time_ms(tle, cache) / config.MS_IN_A_MINUTE


def get_average_orbit_time_s(tle, cache=None) -> float:
    return get_average_orbit_time_ms(tle, cache) / config.MS_IN_A_SECOND
