"""
Visibility Filter

Screens a batch of TLEs for satellites above an observer's horizon (or any
other elevation threshold) at one instant.
"""

from typing import Iterable, List, Optional

from tletrack.cache import resolve_cache
from tletrack.exceptions import PropagationError, TLEFormatError
from tletrack.logging_config import get_logger
from tletrack.models import VisibleSatellite
from tletrack.propagation import get_satellite_info, now_ms

logger = get_logger(__name__)


def get_visible_satellites(
    observer_lat: float,
    observer_lng: float,
    observer_height: float = 0.0,
    tles: Iterable = (),
    elevation_threshold: float = 0.0,
    timestamp_ms: Optional[float] = None,
    cache=None,
) -> List[VisibleSatellite]:
    """
    Determine which satellites are visible to an observer.

    Entries that cannot be propagated (decayed satellites, malformed records)
    are skipped rather than failing the whole batch.

    Args:
        observer_lat: Observer latitude (degrees)
        observer_lng: Observer longitude (degrees)
        observer_height: Observer elevation (km)
        tles: TLE inputs to check
        elevation_threshold: Minimum elevation (degrees); 0 is the horizon
        timestamp_ms: Unix timestamp (ms), defaults to now
        cache: TLECache for memoization

    Returns:
        VisibleSatellite for each entry at or above the threshold, in input order
    """
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    cache = resolve_cache(cache)

    visible = []
    for tle in tles:
        try:
            info = get_satellite_info(
                tle, timestamp_ms, observer_lat, observer_lng, observer_height, cache
            )
        except (PropagationError, TLEFormatError) as e:
            logger.debug(f"Skipping satellite that could not be propagated: {e}")
            continue

        if info.elevation >= elevation_threshold:
            visible.append(VisibleSatellite(tle=tle, info=info))

    return visible
