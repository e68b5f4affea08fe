"""
Memoization tables shared by the parser and the SGP4 layer.

A ``TLECache`` is one logical session: every geometry function accepts a
``cache`` argument and falls back to ``default_cache`` when it is omitted.
Entries never expire; long-running processes should call ``clear()``.
"""

import threading
from typing import Any, Dict, List

from tletrack.logging_config import get_logger

logger = get_logger(__name__)


class TLECache:
    """
    Process-lifetime memo tables keyed by TLE content.

    Tables:
    - parsed: parse_tle results
    - validity: is_valid_tle results
    - satrecs: sgp4 Satrec objects per line pair
    - satellite_info: SatelliteInfo per (lines, time, observer)
    - antemeridian_crossings: per TLE, a list of crossing times or -1
    - orbit_tracks: orbit track per (lines, start, step, ceiling, format)
    - ground_tracks: ground tracks per (lines, anchor, step, format)

    Each table is guarded by the same re-entrant lock, so one instance can be
    shared between threads.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.parsed: Dict[Any, Any] = {}
        self.validity: Dict[Any, bool] = {}
        self.satrecs: Dict[Any, Any] = {}
        self.satellite_info: Dict[Any, Any] = {}
        self.antemeridian_crossings: Dict[Any, Any] = {}
        self.orbit_tracks: Dict[Any, Any] = {}
        self.ground_tracks: Dict[Any, Any] = {}

    def get(self, table: str, key, default=None):
        with self.lock:
            return getattr(self, table).get(key, default)

    def set(self, table: str, key, value):
        with self.lock:
            getattr(self, table)[key] = value
        return value

    def sizes(self) -> List[int]:
        """Sizes of the satellite info, crossing, orbit track and ground track tables."""
        with self.lock:
            return [
                len(self.satellite_info),
                len(self.antemeridian_crossings),
                len(self.orbit_tracks),
                len(self.ground_tracks),
            ]

    def clear_parsed(self):
        with self.lock:
            self.parsed.clear()
            self.validity.clear()

    def clear(self):
        """Drop every cached value."""
        with self.lock:
            self.parsed.clear()
            self.validity.clear()
            self.satrecs.clear()
            self.satellite_info.clear()
            self.antemeridian_crossings.clear()
            self.orbit_tracks.clear()
            self.ground_tracks.clear()
        logger.debug("Cleared all TLE caches")


default_cache = TLECache()


def resolve_cache(cache=None) -> TLECache:
    return default_cache if cache is None else cache


def get_cache_sizes(cache=None) -> List[int]:
    """
    Report how many entries the SGP4 caches hold.

    Returns:
        [satellite info, antemeridian crossings, orbit tracks, ground tracks]
    """
    return resolve_cache(cache).sizes()


def clear_cache(cache=None):
    """Clear every cache to free up memory in long-running apps."""
    resolve_cache(cache).clear()
