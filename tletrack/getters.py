"""
Field getters, one per orbital element.

Each getter accepts any TLE input understood by ``parse_tle``. Hot loops that
already hold a ``ParsedTLE`` can pass ``tle_is_parsed=True`` to skip the
parser and its cache lookup.
"""

from tletrack import definitions as defs
from tletrack.decoders import Decoded, decode
from tletrack.definitions import FieldDefinition
from tletrack.parsing import ParsedTLE, parse_tle


def get_field(
    tle,
    line_number: int,
    definition: FieldDefinition,
    tle_is_parsed: bool = False,
    cache=None,
) -> Decoded:
    """
    Slice a field out of line 1 or 2 and decode it.

    Args:
        tle: Any TLE input, or a ParsedTLE when tle_is_parsed is True
        line_number: 1 or 2
        definition: Column layout of the field
        tle_is_parsed: Bypass parse_tle
        cache: TLECache the parse is memoized in

    Returns:
        Decoded value (int, float or str); malformed numbers decode to nan
    """
    parsed: ParsedTLE = tle if tle_is_parsed else parse_tle(tle, cache)
    line = parsed.lines[line_number - 1]
    return decode(line[definition.start:definition.end], definition.type)


def get_from_line1(tle, definition: FieldDefinition, tle_is_parsed: bool = False, cache=None) -> Decoded:
    return get_field(tle, 1, definition, tle_is_parsed, cache)


def get_from_line2(tle, definition: FieldDefinition, tle_is_parsed: bool = False, cache=None) -> Decoded:
    return get_field(tle, 2, definition, tle_is_parsed, cache)


# Line 1

def get_line_number1(tle, tle_is_parsed=False, cache=None) -> int:
    """TLE line number. Always 1 for valid TLEs."""
    return get_from_line1(tle, defs.LINE_NUMBER_1, tle_is_parsed, cache)


def get_catalog_number1(tle, tle_is_parsed=False, cache=None) -> int:
    """NORAD satellite catalog number, e.g. 25544."""
    return get_from_line1(tle, defs.CATALOG_NUMBER_1, tle_is_parsed, cache)


get_catalog_number = get_catalog_number1


def get_classification(tle, tle_is_parsed=False, cache=None) -> str:
    """'U' (unclassified), 'C' (confidential) or 'S' (secret)."""
    return get_from_line1(tle, defs.CLASSIFICATION, tle_is_parsed, cache)


def get_int_designator_year(tle, tle_is_parsed=False, cache=None) -> int:
    """Launch year, last two digits, e.g. 98."""
    return get_from_line1(tle, defs.INT_DESIGNATOR_YEAR, tle_is_parsed, cache)


def get_int_designator_launch_number(tle, tle_is_parsed=False, cache=None) -> int:
    """Launch number of the year, e.g. 67."""
    return get_from_line1(tle, defs.INT_DESIGNATOR_LAUNCH_NUMBER, tle_is_parsed, cache)


def get_int_designator_piece_of_launch(tle, tle_is_parsed=False, cache=None) -> str:
    """Piece of the launch, e.g. 'A'."""
    return get_from_line1(tle, defs.INT_DESIGNATOR_PIECE_OF_LAUNCH, tle_is_parsed, cache)


def get_epoch_year(tle, tle_is_parsed=False, cache=None) -> int:
    """TLE epoch year, last two digits, e.g. 17."""
    return get_from_line1(tle, defs.EPOCH_YEAR, tle_is_parsed, cache)


def get_epoch_day(tle, tle_is_parsed=False, cache=None) -> float:
    """Fractional day of the year of the TLE epoch, e.g. 206.18396726."""
    return get_from_line1(tle, defs.EPOCH_DAY, tle_is_parsed, cache)


def get_first_time_derivative(tle, tle_is_parsed=False, cache=None) -> float:
    """First time derivative of mean motion divided by two (orbits / day^2)."""
    return get_from_line1(tle, defs.FIRST_TIME_DERIVATIVE, tle_is_parsed, cache)


def get_second_time_derivative(tle, tle_is_parsed=False, cache=None) -> float:
    """Second time derivative of mean motion divided by six (orbits / day^3)."""
    return get_from_line1(tle, defs.SECOND_TIME_DERIVATIVE, tle_is_parsed, cache)


def get_bstar_drag(tle, tle_is_parsed=False, cache=None) -> float:
    """BSTAR drag term (earth radii ^ -1), e.g. 0.000036771."""
    return get_from_line1(tle, defs.BSTAR_DRAG, tle_is_parsed, cache)


def get_orbit_model(tle, tle_is_parsed=False, cache=None) -> int:
    return get_from_line1(tle, defs.ORBIT_MODEL, tle_is_parsed, cache)


def get_tle_set_number(tle, tle_is_parsed=False, cache=None) -> int:
    return get_from_line1(tle, defs.TLE_SET_NUMBER, tle_is_parsed, cache)


def get_checksum1(tle, tle_is_parsed=False, cache=None) -> int:
    return get_from_line1(tle, defs.CHECKSUM_1, tle_is_parsed, cache)


# Line 2

def get_line_number2(tle, tle_is_parsed=False, cache=None) -> int:
    """TLE line number. Always 2 for valid TLEs."""
    return get_from_line2(tle, defs.LINE_NUMBER_2, tle_is_parsed, cache)


def get_catalog_number2(tle, tle_is_parsed=False, cache=None) -> int:
    """NORAD catalog number as repeated on line 2."""
    return get_from_line2(tle, defs.CATALOG_NUMBER_2, tle_is_parsed, cache)


def get_inclination(tle, tle_is_parsed=False, cache=None) -> float:
    """Inclination in degrees."""
    return get_from_line2(tle, defs.INCLINATION, tle_is_parsed, cache)


def get_right_ascension(tle, tle_is_parsed=False, cache=None) -> float:
    """Right ascension of the ascending node in degrees."""
    return get_from_line2(tle, defs.RIGHT_ASCENSION, tle_is_parsed, cache)


def get_eccentricity(tle, tle_is_parsed=False, cache=None) -> float:
    return get_from_line2(tle, defs.ECCENTRICITY, tle_is_parsed, cache)


def get_perigee(tle, tle_is_parsed=False, cache=None) -> float:
    """Argument of perigee in degrees."""
    return get_from_line2(tle, defs.PERIGEE, tle_is_parsed, cache)


def get_mean_anomaly(tle, tle_is_parsed=False, cache=None) -> float:
    """Mean anomaly in degrees."""
    return get_from_line2(tle, defs.MEAN_ANOMALY, tle_is_parsed, cache)


def get_mean_motion(tle, tle_is_parsed=False, cache=None) -> float:
    """Revolutions per day."""
    return get_from_line2(tle, defs.MEAN_MOTION, tle_is_parsed, cache)


def get_rev_number_at_epoch(tle, tle_is_parsed=False, cache=None) -> int:
    return get_from_line2(tle, defs.REV_NUMBER_AT_EPOCH, tle_is_parsed, cache)


def get_checksum2(tle, tle_is_parsed=False, cache=None) -> int:
    return get_from_line2(tle, defs.CHECKSUM_2, tle_is_parsed, cache)
