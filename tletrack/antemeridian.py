"""
Antemeridian Crossing Search

Mapping software struggles with lines that cross the antemeridian (+/-180
degrees longitude), so orbit tracks are cut there. This module finds the most
recent time a satellite's sub-satellite point crossed it.

The search walks backwards from the reference time in coarse steps until two
consecutive samples straddle the antemeridian, then bisects the interval down
to sub-second precision. Satellites that never cross (geosynchronous orbits)
exhaust the iteration limit; that outcome is cached per TLE as NO_CROSSING_FOUND
so the search never runs again for it.
"""

from typing import Optional

from tletrack import config
from tletrack.cache import resolve_cache
from tletrack.logging_config import get_logger
from tletrack.parsing import parse_tle
from tletrack.propagation import get_lng_lat, now_ms
from tletrack.sugar import get_average_orbit_time_ms

logger = get_logger(__name__)

NO_CROSSING_FOUND = config.NO_CROSSING_FOUND


def crosses_antemeridian(longitude1: Optional[float], longitude2: Optional[float]) -> bool:
    """
    Determine if a pair of longitudes straddles the antemeridian.

    Opposite signs alone are not enough: the pair could be straddling the
    prime meridian instead, so one of them must be far from it.
    """
    if longitude1 is None or longitude2 is None:
        return False

    if (longitude1 >= 0) == (longitude2 >= 0):
        return False

    threshold = config.ANTEMERIDIAN_THRESHOLD_DEG
    return abs(longitude1) > threshold or abs(longitude2) > threshold


def get_cached_last_antemeridian_crossing_time_ms(tle, time_ms: float, cache=None) -> Optional[int]:
    """
    Look up a previously found crossing within one orbit before time_ms.

    Returns:
        Crossing time (ms), NO_CROSSING_FOUND for satellites known never to
        cross, or None when nothing usable is cached
    """
    cache = resolve_cache(cache)
    parsed = parse_tle(tle, cache)

    cached_crossings = cache.get("antemeridian_crossings", parsed.lines)
    if cached_crossings is None:
        return None
    if cached_crossings == NO_CROSSING_FOUND:
        return NO_CROSSING_FOUND

    orbit_length_ms = get_average_orbit_time_ms(parsed)
    for crossing_ms in cached_crossings:
        if 0 < time_ms - crossing_ms < orbit_length_ms:
            return crossing_ms
    return None


def get_last_antemeridian_crossing_time_ms(tle, time_ms: Optional[float] = None, cache=None) -> int:
    """
    Determine the last time the satellite crossed the antemeridian.

    Args:
        tle: Any TLE input
        time_ms: Reference Unix timestamp (ms), defaults to now
        cache: TLECache for memoization

    Returns:
        Crossing time (ms), sampled on the reference side of the crossing and
        within one second of it, or NO_CROSSING_FOUND (-1)

    Raises:
        PropagationError: SGP4 rejected the elements
    """
    if time_ms is None:
        time_ms = now_ms()

    cache = resolve_cache(cache)
    parsed = parse_tle(tle, cache)

    cached = get_cached_last_antemeridian_crossing_time_ms(parsed, time_ms, cache)
    if cached is not None:
        return cached

    step_ms = config.CROSSING_SEARCH_INITIAL_STEP_MS
    max_tries = config.CROSSING_SEARCH_MAX_ITERATIONS
    cur_time_ms = time_ms
    last_lng = None
    tries = 0
    converged = False

    while tries < max_tries:
        tries += 1
        cur_lng, _ = get_lng_lat(parsed, cur_time_ms, cache)

        if crosses_antemeridian(last_lng, cur_lng):
            # Overshot: return to the last sample before the crossing
            cur_time_ms += step_ms
            step_ms /= 2
            if step_ms < config.CROSSING_SEARCH_MIN_STEP_MS:
                converged = True
                break
        else:
            cur_time_ms -= step_ms
            last_lng = cur_lng

    with cache.lock:
        if not converged:
            logger.warning(
                f"No antemeridian crossing found for {parsed.line1[:30]!r} "
                f"within {max_tries} iterations"
            )
            cache.antemeridian_crossings[parsed.lines] = NO_CROSSING_FOUND
            return NO_CROSSING_FOUND

        crossing_ms = int(cur_time_ms)
        crossings = cache.antemeridian_crossings.get(parsed.lines)
        if not isinstance(crossings, list):
            crossings = cache.antemeridian_crossings[parsed.lines] = []
        crossings.append(crossing_ms)

    return crossing_ms
