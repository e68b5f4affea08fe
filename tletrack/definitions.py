"""
Two-Line Element Set (TLE) format definitions.

Fixed locations of orbital element value strings as they have appeared going
back to the punchcard days. Offsets are zero-based string indices.

See https://en.wikipedia.org/wiki/Two-line_element_set and
https://celestrak.org/columns/v04n03/
"""

from enum import Enum
from typing import Dict, NamedTuple


class FieldType(Enum):
    INT = "int"
    FLOAT = "float"
    CHAR = "char"
    DECIMAL_ASSUMED = "decimal_assumed"  # 12345 -> 0.12345
    DECIMAL_ASSUMED_E = "decimal_assumed_e"  # 12345-2 -> 0.0012345


class FieldDefinition(NamedTuple):
    start: int
    length: int
    type: FieldType

    @property
    def end(self) -> int:
        return self.start + self.length


# Line 1

# TLE line number. Always 1 for valid TLEs.
LINE_NUMBER_1 = FieldDefinition(0, 1, FieldType.INT)

# NORAD catalog number, 0 to 99999 (Alpha-5 numbers are not decoded).
# Example: 25544
CATALOG_NUMBER_1 = FieldDefinition(2, 5, FieldType.INT)

# 'U' = unclassified, 'C' = confidential, 'S' = secret
CLASSIFICATION = FieldDefinition(7, 1, FieldType.CHAR)

# International Designator (COSPAR ID): last 2 digits of launch year.
# 57 to 99 = 1900s, 00-56 = 2000s. Example: 98
INT_DESIGNATOR_YEAR = FieldDefinition(9, 2, FieldType.INT)

# International Designator: launch number of the year, 1 to 999. Example: 67
INT_DESIGNATOR_LAUNCH_NUMBER = FieldDefinition(11, 3, FieldType.INT)

# International Designator: piece of the launch, A to ZZZ. Example: 'A'
INT_DESIGNATOR_PIECE_OF_LAUNCH = FieldDefinition(14, 3, FieldType.CHAR)

# TLE epoch year, last two digits. Example: 17
EPOCH_YEAR = FieldDefinition(18, 2, FieldType.INT)

# Fractional day of the year of the TLE epoch, 1 to 365.99999999.
# Example: 206.18396726
EPOCH_DAY = FieldDefinition(20, 12, FieldType.FLOAT)

# First time derivative of the mean motion divided by two (orbits / day^2).
# Example: 0.00001961
FIRST_TIME_DERIVATIVE = FieldDefinition(33, 11, FieldType.FLOAT)

# Second time derivative of mean motion divided by six (orbits / day^3),
# decimal point assumed. Usually zero unless maneuvering or decaying.
# Example: 0 ('00000-0' = 0.00000 * 10 ^ 0)
SECOND_TIME_DERIVATIVE = FieldDefinition(44, 8, FieldType.DECIMAL_ASSUMED_E)

# BSTAR drag term (earth radii ^ -1), decimal point assumed.
# Example: 0.000036771 ('36771-4' = 0.36771 * 10 ^ -4)
BSTAR_DRAG = FieldDefinition(53, 8, FieldType.DECIMAL_ASSUMED_E)

# Orbit model used to generate the TLE. Always 0 in public element sets.
ORBIT_MODEL = FieldDefinition(62, 1, FieldType.INT)

# Element set number, incremented for each new TLE. Example: 999
TLE_SET_NUMBER = FieldDefinition(64, 4, FieldType.INT)

# Line 1 checksum (modulo 10)
CHECKSUM_1 = FieldDefinition(68, 1, FieldType.INT)


# Line 2

# TLE line number. Always 2 for valid TLEs.
LINE_NUMBER_2 = FieldDefinition(0, 1, FieldType.INT)

# NORAD catalog number, should match line 1.
CATALOG_NUMBER_2 = FieldDefinition(2, 5, FieldType.INT)

# Inclination in degrees, 0 to 180. Above 90 is retrograde. Example: 51.6400
INCLINATION = FieldDefinition(8, 8, FieldType.FLOAT)

# Right ascension of the ascending node in degrees. Example: 208.9163
RIGHT_ASCENSION = FieldDefinition(17, 8, FieldType.FLOAT)

# Eccentricity, decimal point assumed. Example: 0.0006317 ('0006317')
ECCENTRICITY = FieldDefinition(26, 7, FieldType.DECIMAL_ASSUMED)

# Argument of perigee in degrees. Example: 69.9862
PERIGEE = FieldDefinition(34, 8, FieldType.FLOAT)

# Mean anomaly in degrees at epoch. Example: 25.2906
MEAN_ANOMALY = FieldDefinition(43, 8, FieldType.FLOAT)

# Revolutions per day. Example: 15.54225995
MEAN_MOTION = FieldDefinition(52, 11, FieldType.FLOAT)

# Revolution number at epoch, rolls over after 99999. Example: 6766
REV_NUMBER_AT_EPOCH = FieldDefinition(63, 5, FieldType.INT)

# Line 2 checksum (modulo 10)
CHECKSUM_2 = FieldDefinition(68, 1, FieldType.INT)


LINE1_FIELDS: Dict[str, FieldDefinition] = {
    "line_number": LINE_NUMBER_1,
    "catalog_number": CATALOG_NUMBER_1,
    "classification": CLASSIFICATION,
    "int_designator_year": INT_DESIGNATOR_YEAR,
    "int_designator_launch_number": INT_DESIGNATOR_LAUNCH_NUMBER,
    "int_designator_piece_of_launch": INT_DESIGNATOR_PIECE_OF_LAUNCH,
    "epoch_year": EPOCH_YEAR,
    "epoch_day": EPOCH_DAY,
    "first_time_derivative": FIRST_TIME_DERIVATIVE,
    "second_time_derivative": SECOND_TIME_DERIVATIVE,
    "bstar_drag": BSTAR_DRAG,
    "orbit_model": ORBIT_MODEL,
    "tle_set_number": TLE_SET_NUMBER,
    "checksum": CHECKSUM_1,
}

LINE2_FIELDS: Dict[str, FieldDefinition] = {
    "line_number": LINE_NUMBER_2,
    "catalog_number": CATALOG_NUMBER_2,
    "inclination": INCLINATION,
    "right_ascension": RIGHT_ASCENSION,
    "eccentricity": ECCENTRICITY,
    "perigee": PERIGEE,
    "mean_anomaly": MEAN_ANOMALY,
    "mean_motion": MEAN_MOTION,
    "rev_number_at_epoch": REV_NUMBER_AT_EPOCH,
    "checksum": CHECKSUM_2,
}
