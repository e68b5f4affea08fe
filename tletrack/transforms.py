"""
Coordinate transformations for SGP4 output.

SGP4 produces TEME (earth-centered inertial) vectors. These helpers rotate
them into the earth-fixed frame, convert to geodetic coordinates and compute
look angles from a ground observer.

References:
    Vallado, D. A. (2013). Fundamentals of Astrodynamics and Applications (4th ed.).
    Kelso, T. S. Orbital Coordinate Systems, Part I-III. Satellite Times.
"""

import math
from typing import Dict, Tuple

import numpy as np
from sgp4.propagation import gstime

from tletrack import config

# WGS-84 flattening derived from the radii in config
_A = config.EARTH_EQUATORIAL_RADIUS_KM
_B = config.EARTH_POLAR_RADIUS_KM
_F = (_A - _B) / _A
_E2 = 2.0 * _F - _F * _F

# Iterations for the geodetic latitude fixed point
_GEODETIC_ITERATIONS = 20


def timestamp_to_jd(timestamp_ms: float) -> Tuple[float, float]:
    """
    Convert a Unix timestamp (ms) to a Julian date split into whole and
    fractional parts, as expected by Satrec.sgp4().

    Args:
        timestamp_ms: Milliseconds since 1970-01-01T00:00:00Z

    Returns:
        Tuple of (julian_day, fraction)
    """
    days, remainder_ms = divmod(timestamp_ms, config.MS_IN_A_DAY)
    return config.UNIX_EPOCH_JD + days, remainder_ms / config.MS_IN_A_DAY


def sidereal_time(timestamp_ms: float) -> float:
    """Greenwich mean sidereal time (radians) at the given instant."""
    jd, fr = timestamp_to_jd(timestamp_ms)
    return gstime(jd + fr)


def eci_to_ecf(position_eci: np.ndarray, gmst: float) -> np.ndarray:
    """
    Rotate an inertial position into the earth-fixed frame.

    Args:
        position_eci: Position vector [x, y, z] (km)
        gmst: Greenwich mean sidereal time (radians)

    Returns:
        Earth-fixed position [x, y, z] (km)
    """
    cos_g = math.cos(gmst)
    sin_g = math.sin(gmst)
    x, y, z = position_eci
    return np.array([
        x * cos_g + y * sin_g,
        -x * sin_g + y * cos_g,
        z,
    ])


def eci_to_geodetic(position_eci: np.ndarray, gmst: float) -> Dict[str, float]:
    """
    Convert an inertial position to geodetic coordinates.

    Returns:
        Dictionary with longitude, latitude (radians, longitude in [-pi, pi])
        and height (km)
    """
    x, y, z = position_eci
    r = math.sqrt(x * x + y * y)

    longitude = math.atan2(y, x) - gmst
    while longitude < -math.pi:
        longitude += 2.0 * math.pi
    while longitude > math.pi:
        longitude -= 2.0 * math.pi

    latitude = math.atan2(z, r)
    c = 1.0
    for _ in range(_GEODETIC_ITERATIONS):
        sin_lat = math.sin(latitude)
        c = 1.0 / math.sqrt(1.0 - _E2 * sin_lat * sin_lat)
        latitude = math.atan2(z + _A * c * _E2 * sin_lat, r)

    height = r / math.cos(latitude) - _A * c
    return {"longitude": longitude, "latitude": latitude, "height": height}


def geodetic_to_ecf(latitude: float, longitude: float, height: float) -> np.ndarray:
    """Earth-fixed position (km) of a geodetic point given in radians and km."""
    sin_lat = math.sin(latitude)
    cos_lat = math.cos(latitude)
    normal = _A / math.sqrt(1.0 - _E2 * sin_lat * sin_lat)
    return np.array([
        (normal + height) * cos_lat * math.cos(longitude),
        (normal + height) * cos_lat * math.sin(longitude),
        (normal * (1.0 - _E2) + height) * sin_lat,
    ])


def ecf_to_look_angles(observer: Dict[str, float], position_ecf: np.ndarray) -> Dict[str, float]:
    """
    Azimuth, elevation and slant range of a target seen from an observer.

    Args:
        observer: Dictionary with latitude, longitude (radians) and height (km)
        position_ecf: Target earth-fixed position (km)

    Returns:
        Dictionary with azimuth, elevation (radians) and range_km
    """
    lat = observer["latitude"]
    lon = observer["longitude"]
    rx, ry, rz = position_ecf - geodetic_to_ecf(lat, lon, observer["height"])

    # Topocentric south-east-zenith frame
    sin_lat, cos_lat = math.sin(lat), math.cos(lat)
    sin_lon, cos_lon = math.sin(lon), math.cos(lon)
    top_s = sin_lat * cos_lon * rx + sin_lat * sin_lon * ry - cos_lat * rz
    top_e = -sin_lon * rx + cos_lon * ry
    top_z = cos_lat * cos_lon * rx + cos_lat * sin_lon * ry + sin_lat * rz

    range_km = math.sqrt(top_s * top_s + top_e * top_e + top_z * top_z)
    elevation = math.asin(top_z / range_km)
    azimuth = (math.atan2(-top_e, top_s) + math.pi) % (2.0 * math.pi)

    return {"azimuth": azimuth, "elevation": elevation, "range_km": range_km}
