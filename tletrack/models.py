"""
Data models for SGP4 results and builder options.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from tletrack import config


class SatelliteInfo(BaseModel):
    """Satellite position and look angles from a ground observer"""
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Spacecraft latitude (degrees)")
    lng: float = Field(..., description="Spacecraft longitude (degrees)")
    elevation: float = Field(..., description="Elevation from observer, 90 is overhead (degrees)")
    azimuth: float = Field(..., description="Compass heading from observer, 0 is north (degrees)")
    range: float = Field(..., description="Distance from observer to spacecraft (km)")
    height: float = Field(..., description="Spacecraft altitude (km)")
    velocity: float = Field(..., description="Spacecraft velocity (km/s)")


class SatBearing(BaseModel):
    """Direction of travel of the sub-satellite point"""
    model_config = ConfigDict(frozen=True)

    degrees: float = Field(..., ge=0.0, lt=360.0, description="Bearing clockwise from north")
    compass: str = Field(..., description="Two-letter heading, e.g. 'NE'")


class VisibleSatellite(BaseModel):
    """A satellite above the elevation threshold, with the caller's TLE entry"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tle: Any
    info: SatelliteInfo


class OrbitTrackOptions(BaseModel):
    """Validated options for the orbit track builders"""
    start_time_ms: Optional[float] = None
    step_ms: int = Field(config.ORBIT_TRACK_STEP_MS, gt=0)
    max_time_ms: int = Field(config.ORBIT_TRACK_MAX_TIME_MS, gt=0)
    lng_lat_format: bool = True
    sleep_ms: float = Field(0, ge=0)
    job_chunk_size: int = Field(config.ORBIT_TRACK_JOB_CHUNK_SIZE, gt=0)


class GroundTrackOptions(BaseModel):
    """Validated options for the ground track builders"""
    start_time_ms: Optional[float] = None
    step_ms: int = Field(config.ORBIT_TRACK_STEP_MS, gt=0)
    lng_lat_format: bool = True
