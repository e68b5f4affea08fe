"""
SGP4 Propagation Adapter

Runs the sgp4 library's propagator for a TLE at a Unix timestamp and reports
where the satellite is relative to a ground observer. Results are memoized by
(TLE, timestamp, observer) in the session's TLECache.

Example:
    info = get_satellite_info(
        iss_tle,          # Satellite TLE string or sequence (2 or 3 line variants)
        1501039265000,    # Unix timestamp (ms)
        34.243889,        # Observer latitude (degrees)
        -116.911389,      # Observer longitude (degrees)
        0,                # Observer elevation (km)
    )
    ->
    SatelliteInfo(lat=34.439..., lng=-117.475..., elevation=81.54...,
                  azimuth=292.82..., range=406.80..., height=403.01...,
                  velocity=7.6755...)
"""

import math
import time
from typing import Dict, Optional, Tuple

import numpy as np
from sgp4.api import Satrec

from tletrack import config
from tletrack.cache import resolve_cache
from tletrack.exceptions import PropagationError, TLEFormatError
from tletrack.logging_config import get_logger
from tletrack.models import SatBearing, SatelliteInfo
from tletrack.parsing import ParsedTLE, parse_tle
from tletrack.sugar import get_epoch_timestamp
from tletrack.transforms import (
    ecf_to_look_angles,
    eci_to_ecf,
    eci_to_geodetic,
    sidereal_time,
    timestamp_to_jd,
)

logger = get_logger(__name__)


def now_ms() -> int:
    """Current Unix time in milliseconds."""
    return int(time.time() * config.MS_IN_A_SECOND)


def get_satrec(parsed: ParsedTLE, cache=None) -> Satrec:
    """
    Build (or reuse) the sgp4 satellite record for a parsed TLE.

    Raises:
        TLEFormatError: The record does not hold exactly two lines
        PropagationError: sgp4 could not initialize the elements
    """
    if len(parsed.lines) != 2:
        raise TLEFormatError(f"Expected 2 TLE lines, got {len(parsed.lines)}.")

    cache = resolve_cache(cache)
    satrec = cache.get("satrecs", parsed.lines)
    if satrec is not None:
        return satrec

    try:
        satrec = Satrec.twoline2rv(parsed.line1, parsed.line2)
    except ValueError as e:
        raise PropagationError(None, f"propagator could not read TLE: {e}") from e

    if satrec.error:
        logger.error(f"SGP4 rejected TLE {parsed.line1[:30]!r} with error {satrec.error}")
        raise PropagationError(satrec.error)

    return cache.set("satrecs", parsed.lines, satrec)


def get_satellite_info(
    tle,
    timestamp_ms: Optional[float] = None,
    observer_lat: Optional[float] = None,
    observer_lng: Optional[float] = None,
    observer_height: Optional[float] = None,
    cache=None,
) -> SatelliteInfo:
    """
    Determine satellite position and look angles from an earth observer.

    Args:
        tle: Any TLE input
        timestamp_ms: Unix timestamp (ms), defaults to now
        observer_lat: Observer latitude (degrees)
        observer_lng: Observer longitude (degrees)
        observer_height: Observer elevation (km)
        cache: TLECache for memoization

    Returns:
        SatelliteInfo

    Raises:
        PropagationError: SGP4 rejected the elements (decayed, corrupted, ...)
    """
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    if observer_lat is None:
        observer_lat = config.DEFAULT_OBSERVER_LAT
    if observer_lng is None:
        observer_lng = config.DEFAULT_OBSERVER_LNG
    if observer_height is None:
        observer_height = config.DEFAULT_OBSERVER_HEIGHT

    cache = resolve_cache(cache)
    parsed = parse_tle(tle, cache)

    key = (parsed.lines, timestamp_ms, observer_lat, observer_lng, observer_height)
    cached = cache.get("satellite_info", key)
    if cached is not None:
        return cached

    satrec = get_satrec(parsed, cache)

    jd, fr = timestamp_to_jd(timestamp_ms)
    error, r_eci, v_eci = satrec.sgp4(jd, fr)
    if error != 0:
        raise PropagationError(error)

    position_eci = np.array(r_eci)
    velocity_eci = np.array(v_eci)

    observer_gd = {
        "latitude": math.radians(observer_lat),
        "longitude": math.radians(observer_lng),
        "height": observer_height,
    }

    gmst = sidereal_time(timestamp_ms)
    position_ecf = eci_to_ecf(position_eci, gmst)
    position_gd = eci_to_geodetic(position_eci, gmst)
    look_angles = ecf_to_look_angles(observer_gd, position_ecf)

    info = SatelliteInfo(
        lat=math.degrees(position_gd["latitude"]),
        lng=math.degrees(position_gd["longitude"]),
        elevation=math.degrees(look_angles["elevation"]),
        azimuth=math.degrees(look_angles["azimuth"]),
        range=look_angles["range_km"],
        height=position_gd["height"],
        velocity=float(np.linalg.norm(velocity_eci)),
    )

    return cache.set("satellite_info", key, info)


def get_lat_lng_obj(tle, timestamp_ms: Optional[float] = None, cache=None) -> Dict[str, float]:
    """Satellite position as {'lat': ..., 'lng': ...}."""
    info = get_satellite_info(tle, timestamp_ms, cache=cache)
    return {"lat": info.lat, "lng": info.lng}


def get_lat_lng(tle, timestamp_ms: Optional[float] = None, cache=None) -> Tuple[float, float]:
    info = get_satellite_info(tle, timestamp_ms, cache=cache)
    return info.lat, info.lng


def get_lng_lat(tle, timestamp_ms: Optional[float] = None, cache=None) -> Tuple[float, float]:
    """Satellite position as (lng, lat), the GeoJSON ordering."""
    info = get_satellite_info(tle, timestamp_ms, cache=cache)
    return info.lng, info.lat


def get_lng_lat_at_epoch(tle, cache=None) -> Tuple[float, float]:
    """Satellite position at the time the TLE was generated."""
    parsed = parse_tle(tle, resolve_cache(cache))
    return get_lng_lat(parsed, get_epoch_timestamp(parsed), cache)


def get_lat_lng_at_epoch(tle, cache=None) -> Tuple[float, float]:
    parsed = parse_tle(tle, resolve_cache(cache))
    return get_lat_lng(parsed, get_epoch_timestamp(parsed), cache)


def get_sat_bearing(tle, timestamp_ms: Optional[float] = None, cache=None) -> SatBearing:
    """
    Determine the compass bearing of the satellite's direction of travel.
    Useful for 3D / pitched map perspectives.

    The bearing is the initial great-circle course from the position at
    timestamp_ms to the position a few seconds later, so it stays correct
    when those two points straddle the antemeridian.
    """
    if timestamp_ms is None:
        timestamp_ms = now_ms()

    lat1, lng1 = get_lat_lng(tle, timestamp_ms, cache)
    lat2, lng2 = get_lat_lng(tle, timestamp_ms + config.BEARING_LOOKAHEAD_MS, cache)

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    delta_lambda = math.radians(lng2 - lng1)
    delta_lambda = math.atan2(math.sin(delta_lambda), math.cos(delta_lambda))

    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    degrees = math.degrees(math.atan2(y, x)) % 360.0
    if degrees >= 360.0:
        degrees = 0.0

    north_south = "S" if lat1 >= lat2 else "N"
    east_west = "W" if delta_lambda <= 0 else "E"

    return SatBearing(degrees=degrees, compass=f"{north_south}{east_west}")
