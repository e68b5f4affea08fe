"""
tletrack Configuration and Constants

This module contains the time constants, search tunables and default observer
position used throughout the package.

Every tunable can be overridden through an environment variable read once at
import time (``TLETRACK_<NAME>``). Values that change the shape of cached
results (search steps, thresholds) should be set before any computation runs.

Ellipsoid:
    WGS-84 equatorial and polar radii, matching the geodetic conversion used
    by the Vallado transform routines.

References:
    Vallado, D. A., Crawford, P., Hujsak, R., & Kelso, T. S. (2006).
    Revisiting Spacetrack Report #3. AIAA 2006-6753.
"""

import os
from typing import Optional


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(f"TLETRACK_{name}", default))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(f"TLETRACK_{name}", default))


# Time constants
MS_IN_A_SECOND: int = 1000
MS_IN_A_MINUTE: int = 60 * MS_IN_A_SECOND
MS_IN_A_DAY: int = 24 * 60 * MS_IN_A_MINUTE

# Unix epoch (1970-01-01T00:00:00Z) as a Julian date
UNIX_EPOCH_JD: float = 2440587.5

# WGS-84 ellipsoid (km)
EARTH_EQUATORIAL_RADIUS_KM: float = 6378.137
EARTH_POLAR_RADIUS_KM: float = 6356.7523142

# Default ground observer (Santa Cruz, CA)
DEFAULT_OBSERVER_LAT: float = _env_float("OBSERVER_LAT", 36.9613422)  # degrees
DEFAULT_OBSERVER_LNG: float = _env_float("OBSERVER_LNG", -122.0308)  # degrees
DEFAULT_OBSERVER_HEIGHT: float = _env_float("OBSERVER_HEIGHT", 0.37)  # km

# Two consecutive longitudes of opposite sign only count as an antemeridian
# crossing when one of them is further than this from the prime meridian.
ANTEMERIDIAN_THRESHOLD_DEG: float = _env_float("ANTEMERIDIAN_THRESHOLD_DEG", 100.0)

# Antemeridian crossing search
CROSSING_SEARCH_INITIAL_STEP_MS: int = _env_int("CROSSING_SEARCH_INITIAL_STEP_MS", 3 * MS_IN_A_MINUTE)
CROSSING_SEARCH_MIN_STEP_MS: int = _env_int("CROSSING_SEARCH_MIN_STEP_MS", 500)
CROSSING_SEARCH_MAX_ITERATIONS: int = _env_int("CROSSING_SEARCH_MAX_ITERATIONS", 1000)
NO_CROSSING_FOUND: int = -1

# Orbit tracks
ORBIT_TRACK_STEP_MS: int = _env_int("ORBIT_TRACK_STEP_MS", 1000)
ORBIT_TRACK_MAX_TIME_MS: int = _env_int("ORBIT_TRACK_MAX_TIME_MS", 6_000_000)
ORBIT_TRACK_JOB_CHUNK_SIZE: int = _env_int("ORBIT_TRACK_JOB_CHUNK_SIZE", 1000)

# Degraded ground track for satellites that never cross the antemeridian
GEOSYNC_TRACK_STEP_MS: int = _env_int("GEOSYNC_TRACK_STEP_MS", MS_IN_A_MINUTE)
GEOSYNC_TRACK_MAX_TIME_MS: int = _env_int("GEOSYNC_TRACK_MAX_TIME_MS", MS_IN_A_DAY // 4)

# Bearing is measured between the position now and this far in the future
BEARING_LOOKAHEAD_MS: int = 10 * MS_IN_A_SECOND

# Name reported for 2-line TLEs. Unset means "no name" (None).
UNKNOWN_SATELLITE_NAME: Optional[str] = os.getenv("TLETRACK_UNKNOWN_SATELLITE_NAME")

LOG_LEVEL: str = os.getenv("TLETRACK_LOG_LEVEL", "INFO")
