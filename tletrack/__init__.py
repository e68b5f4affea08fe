"""
tletrack: TLE parsing and ground track geometry

This package parses and validates Two-Line Element sets, extracts their
orbital elements, and derives satellite positions, orbit tracks and
visibility on top of the sgp4 propagator.

Modules:
    parsing: TLE normalization, checksums and validation
    getters: One getter per orbital element
    sugar: COSPAR ID, satellite name, epoch and orbit period
    propagation: Satellite position and look angles at a given time
    antemeridian: Antemeridian crossing search
    tracks: Orbit tracks and ground tracks (sync and asyncio)
    visibility: Satellites above an observer's horizon
    cache: Memoization session objects

References:
    Vallado, D. A., Crawford, P., Hujsak, R., & Kelso, T. S. (2006).
    Revisiting Spacetrack Report #3. AIAA 2006-6753.
"""

__version__ = "1.0.0"

from tletrack.antemeridian import (
    NO_CROSSING_FOUND,
    crosses_antemeridian,
    get_cached_last_antemeridian_crossing_time_ms,
    get_last_antemeridian_crossing_time_ms,
)
from tletrack.cache import TLECache, clear_cache, default_cache, get_cache_sizes
from tletrack.decoders import decode
from tletrack.definitions import LINE1_FIELDS, LINE2_FIELDS, FieldDefinition, FieldType
from tletrack.exceptions import (
    ChecksumEmptyLineError,
    PropagationError,
    TLEError,
    TLEFormatError,
)
from tletrack.getters import (
    get_bstar_drag,
    get_catalog_number,
    get_catalog_number1,
    get_catalog_number2,
    get_checksum1,
    get_checksum2,
    get_classification,
    get_eccentricity,
    get_epoch_day,
    get_epoch_year,
    get_field,
    get_first_time_derivative,
    get_from_line1,
    get_from_line2,
    get_inclination,
    get_int_designator_launch_number,
    get_int_designator_piece_of_launch,
    get_int_designator_year,
    get_line_number1,
    get_line_number2,
    get_mean_anomaly,
    get_mean_motion,
    get_orbit_model,
    get_perigee,
    get_rev_number_at_epoch,
    get_right_ascension,
    get_second_time_derivative,
    get_tle_set_number,
)
from tletrack.logging_config import configure_logging, get_logger
from tletrack.models import (
    GroundTrackOptions,
    OrbitTrackOptions,
    SatBearing,
    SatelliteInfo,
    VisibleSatellite,
)
from tletrack.parsing import (
    ParsedTLE,
    clear_tle_parse_cache,
    compute_checksum,
    is_valid_tle,
    parse_tle,
)
from tletrack.propagation import (
    get_lat_lng,
    get_lat_lng_at_epoch,
    get_lat_lng_obj,
    get_lng_lat,
    get_lng_lat_at_epoch,
    get_sat_bearing,
    get_satellite_info,
)
from tletrack.sugar import (
    get_average_orbit_time_mins,
    get_average_orbit_time_ms,
    get_average_orbit_time_s,
    get_cospar,
    get_epoch_datetime,
    get_epoch_timestamp,
    get_satellite_name,
)
from tletrack.tracks import (
    get_ground_tracks,
    get_ground_tracks_sync,
    get_orbit_track,
    get_orbit_track_sync,
    iter_orbit_positions,
)
from tletrack.visibility import get_visible_satellites
