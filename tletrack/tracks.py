"""
Orbit Track and Ground Track Builder

An orbit track is the path of the sub-satellite point from a start time until
the satellite next crosses the antemeridian (or a time ceiling is reached for
orbits that never cross). A ground track is three consecutive orbit tracks:
the previous, current and next orbit around a reference time.

Both builders come in two flavours with identical output:
- get_orbit_track_sync / get_ground_tracks_sync run to completion
- get_orbit_track / get_ground_tracks are coroutines that yield to the event
  loop every job_chunk_size samples
"""

import asyncio
from typing import Iterator, List, NamedTuple, Optional, Tuple

from tletrack import config
from tletrack.antemeridian import (
    NO_CROSSING_FOUND,
    crosses_antemeridian,
    get_last_antemeridian_crossing_time_ms,
)
from tletrack.cache import resolve_cache
from tletrack.logging_config import get_logger
from tletrack.models import GroundTrackOptions, OrbitTrackOptions
from tletrack.parsing import ParsedTLE, parse_tle
from tletrack.propagation import get_lng_lat, now_ms
from tletrack.sugar import get_average_orbit_time_ms

logger = get_logger(__name__)

Coordinate = Tuple[float, float]


class OrbitSample(NamedTuple):
    timestamp_ms: float
    lng: float
    lat: float


class _TrackPlan(NamedTuple):
    start_time_ms: float
    step_ms: float
    max_time_ms: float


def iter_orbit_positions(
    tle,
    start_time_ms: float,
    step_ms: float = config.ORBIT_TRACK_STEP_MS,
    max_time_ms: float = config.ORBIT_TRACK_MAX_TIME_MS,
    cache=None,
) -> Iterator[OrbitSample]:
    """
    Lazily sample one orbit starting at start_time_ms.

    Stops before the first sample that crosses the antemeridian relative to
    the previous one, or once more than max_time_ms has elapsed. Calling it
    again restarts from start_time_ms.

    Raises:
        PropagationError: SGP4 rejected the elements
    """
    parsed = parse_tle(tle, cache)
    cur_time_ms = start_time_ms
    last_lng = None

    while cur_time_ms - start_time_ms <= max_time_ms:
        lng, lat = get_lng_lat(parsed, cur_time_ms, cache)
        if crosses_antemeridian(last_lng, lng):
            return
        yield OrbitSample(cur_time_ms, lng, lat)
        last_lng = lng
        cur_time_ms += step_ms


def _coordinate(sample: OrbitSample, lng_lat_format: bool) -> Coordinate:
    if lng_lat_format:
        return sample.lng, sample.lat
    return sample.lat, sample.lng


def _orbit_track_key(parsed: ParsedTLE, options: OrbitTrackOptions):
    return (
        parsed.lines,
        options.start_time_ms,
        options.step_ms,
        options.max_time_ms,
        options.lng_lat_format,
    )


def _orbit_track_options(start_time_ms, **kwargs) -> OrbitTrackOptions:
    if start_time_ms is None:
        start_time_ms = now_ms()
    return OrbitTrackOptions(start_time_ms=start_time_ms, **kwargs)


def get_orbit_track_sync(
    tle,
    start_time_ms: Optional[float] = None,
    step_ms: int = config.ORBIT_TRACK_STEP_MS,
    max_time_ms: int = config.ORBIT_TRACK_MAX_TIME_MS,
    lng_lat_format: bool = True,
    cache=None,
) -> List[Coordinate]:
    """
    Generate the coordinates of one orbit, starting from start_time_ms and
    continuing until the antemeridian, which is considered the end of the
    orbit for mapping convenience.

    Args:
        tle: Any TLE input
        start_time_ms: Unix timestamp (ms) to start from, defaults to now
        step_ms: Time between points
        max_time_ms: Ceiling for orbits that never cross (geosynchronous)
        lng_lat_format: Emit (lng, lat) pairs (GeoJSON order) instead of (lat, lng)
        cache: TLECache for memoization

    Returns:
        List of coordinate pairs

    Raises:
        PropagationError: SGP4 rejected the elements
    """
    options = _orbit_track_options(
        start_time_ms, step_ms=step_ms, max_time_ms=max_time_ms, lng_lat_format=lng_lat_format
    )
    cache = resolve_cache(cache)
    parsed = parse_tle(tle, cache)

    key = _orbit_track_key(parsed, options)
    cached = cache.get("orbit_tracks", key)
    if cached is not None:
        return cached

    samples = iter_orbit_positions(
        parsed, options.start_time_ms, options.step_ms, options.max_time_ms, cache
    )
    track = [_coordinate(sample, options.lng_lat_format) for sample in samples]

    return cache.set("orbit_tracks", key, track)


async def get_orbit_track(
    tle,
    start_time_ms: Optional[float] = None,
    step_ms: int = config.ORBIT_TRACK_STEP_MS,
    max_time_ms: int = config.ORBIT_TRACK_MAX_TIME_MS,
    lng_lat_format: bool = True,
    sleep_ms: float = 0,
    job_chunk_size: int = config.ORBIT_TRACK_JOB_CHUNK_SIZE,
    cache=None,
) -> List[Coordinate]:
    """
    Coroutine version of get_orbit_track_sync.

    Every job_chunk_size samples it awaits asyncio.sleep(sleep_ms) so long
    tracks do not starve the event loop. Output is identical to the
    synchronous version and shares its cache.
    """
    options = _orbit_track_options(
        start_time_ms,
        step_ms=step_ms,
        max_time_ms=max_time_ms,
        lng_lat_format=lng_lat_format,
        sleep_ms=sleep_ms,
        job_chunk_size=job_chunk_size,
    )
    cache = resolve_cache(cache)
    parsed = parse_tle(tle, cache)

    key = _orbit_track_key(parsed, options)
    cached = cache.get("orbit_tracks", key)
    if cached is not None:
        return cached

    samples = iter_orbit_positions(
        parsed, options.start_time_ms, options.step_ms, options.max_time_ms, cache
    )
    track = []
    for count, sample in enumerate(samples, start=1):
        track.append(_coordinate(sample, options.lng_lat_format))
        if count % options.job_chunk_size == 0:
            await asyncio.sleep(options.sleep_ms / config.MS_IN_A_SECOND)

    return cache.set("orbit_tracks", key, track)


def _plan_ground_tracks(parsed: ParsedTLE, options: GroundTrackOptions, cache):
    """
    Work out which orbit tracks make up the ground track.

    Returns:
        Tuple of (cache key, list of _TrackPlan or None)
    """
    start_time_ms = options.start_time_ms
    cur_orbit_start_ms = get_last_antemeridian_crossing_time_ms(parsed, start_time_ms, cache)

    if cur_orbit_start_ms == NO_CROSSING_FOUND:
        # Geosynchronous or unusual orbit: one coarse partial track
        logger.debug(f"Using single-track mode for {parsed.line1[:30]!r}")
        key = (parsed.lines, "single", start_time_ms, options.lng_lat_format)
        plan = _TrackPlan(
            start_time_ms, config.GEOSYNC_TRACK_STEP_MS, config.GEOSYNC_TRACK_MAX_TIME_MS
        )
        return key, [plan]

    orbit_time_ms = get_average_orbit_time_ms(parsed)
    buffer_ms = orbit_time_ms / 5

    last_orbit_start_ms = get_last_antemeridian_crossing_time_ms(
        parsed, cur_orbit_start_ms - buffer_ms, cache
    )
    next_orbit_start_ms = get_last_antemeridian_crossing_time_ms(
        parsed, cur_orbit_start_ms + orbit_time_ms + buffer_ms, cache
    )

    plans = []
    for orbit_start_ms in (last_orbit_start_ms, cur_orbit_start_ms, next_orbit_start_ms):
        if orbit_start_ms == NO_CROSSING_FOUND:
            plans.append(None)
        else:
            plans.append(_TrackPlan(orbit_start_ms, options.step_ms, config.ORBIT_TRACK_MAX_TIME_MS))

    key = (parsed.lines, cur_orbit_start_ms, options.step_ms, options.lng_lat_format)
    return key, plans


def get_ground_tracks_sync(
    tle,
    start_time_ms: Optional[float] = None,
    step_ms: int = config.ORBIT_TRACK_STEP_MS,
    lng_lat_format: bool = True,
    cache=None,
) -> List[List[Coordinate]]:
    """
    Calculate three orbit tracks: previous, current and next orbit.

    Satellites that never cross the antemeridian get a single partial track
    sampled every minute over a quarter day instead.

    Example:
        get_ground_tracks_sync(iss_tle, 1501039265000)
        ->
        [
            [(-179.93, 45.85), ...],  # previous orbit
            [(-179.94, 51.26), ...],  # current orbit
            [(-179.92, 51.02), ...],  # next orbit
        ]
    """
    if start_time_ms is None:
        start_time_ms = now_ms()
    options = GroundTrackOptions(
        start_time_ms=start_time_ms, step_ms=step_ms, lng_lat_format=lng_lat_format
    )
    cache = resolve_cache(cache)
    parsed = parse_tle(tle, cache)

    key, plans = _plan_ground_tracks(parsed, options, cache)
    cached = cache.get("ground_tracks", key)
    if cached is not None:
        return cached

    tracks = [
        get_orbit_track_sync(
            parsed,
            start_time_ms=plan.start_time_ms,
            step_ms=plan.step_ms,
            max_time_ms=plan.max_time_ms,
            lng_lat_format=options.lng_lat_format,
            cache=cache,
        ) if plan is not None else []
        for plan in plans
    ]

    return cache.set("ground_tracks", key, tracks)


async def get_ground_tracks(
    tle,
    start_time_ms: Optional[float] = None,
    step_ms: int = config.ORBIT_TRACK_STEP_MS,
    lng_lat_format: bool = True,
    sleep_ms: float = 0,
    job_chunk_size: int = config.ORBIT_TRACK_JOB_CHUNK_SIZE,
    cache=None,
) -> List[List[Coordinate]]:
    """Coroutine version of get_ground_tracks_sync; builds the orbits concurrently."""
    if start_time_ms is None:
        start_time_ms = now_ms()
    options = GroundTrackOptions(
        start_time_ms=start_time_ms, step_ms=step_ms, lng_lat_format=lng_lat_format
    )
    cache = resolve_cache(cache)
    parsed = parse_tle(tle, cache)

    key, plans = _plan_ground_tracks(parsed, options, cache)
    cached = cache.get("ground_tracks", key)
    if cached is not None:
        return cached

    async def build(plan):
        if plan is None:
            return []
        return await get_orbit_track(
            parsed,
            start_time_ms=plan.start_time_ms,
            step_ms=plan.step_ms,
            max_time_ms=plan.max_time_ms,
            lng_lat_format=options.lng_lat_format,
            sleep_ms=sleep_ms,
            job_chunk_size=job_chunk_size,
            cache=cache,
        )

    tracks = list(await asyncio.gather(*(build(plan) for plan in plans)))

    return cache.set("ground_tracks", key, tracks)
