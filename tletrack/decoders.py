"""
Decoders for the numeric encodings used in TLE columns.

Decoding never raises: a malformed column decodes to ``math.nan`` and it is
left to ``is_valid_tle`` to flag the record.
"""

import math
from typing import Union

from tletrack.definitions import FieldType

Decoded = Union[int, float, str]

DIGITS = "0123456789"


def is_ascii_digits(text: str) -> bool:
    """True for a non-empty run of 0-9 only (str.isdigit also accepts "²")."""
    return bool(text) and all(char in DIGITS for char in text)


def decode_int(raw: str) -> Union[int, float]:
    try:
        return int(raw.strip())
    except ValueError:
        return math.nan


def decode_float(raw: str) -> float:
    try:
        return float(raw.strip())
    except ValueError:
        return math.nan


def decode_decimal_assumed(raw: str) -> float:
    """'0006317' -> 0.0006317"""
    digits = raw.strip()
    if not is_ascii_digits(digits):
        return math.nan
    return float(f"0.{digits}")


def decode_decimal_assumed_e(raw: str) -> float:
    """
    Decode the assumed-decimal exponent notation used for BSTAR and the second
    derivative of mean motion.

    The last two characters are a signed power of ten; the rest is an optional
    sign followed by mantissa digits with the decimal point before the first
    digit. The result is rounded to the five significant figures a TLE holds.

    Example:
        decode_decimal_assumed_e('36771-4')
        -> 0.000036771
        decode_decimal_assumed_e('-29896-5')
        -> -0.0000029896
    """
    text = raw.strip()
    if len(text) < 3:
        return math.nan

    mantissa, exponent = text[:-2], text[-2:]
    sign = 1.0
    if mantissa[0] in "+-":
        sign = -1.0 if mantissa[0] == "-" else 1.0
        mantissa = mantissa[1:]

    if not is_ascii_digits(mantissa) or not is_ascii_digits(exponent[-1]):
        return math.nan
    if exponent[0] not in "+-" + DIGITS:
        return math.nan
    power = int(exponent)

    value = sign * int(mantissa) / 10 ** len(mantissa) * 10.0 ** power
    return float(f"{value:.4e}")


def decode_char(raw: str) -> str:
    return raw.strip()


_DECODERS = {
    FieldType.INT: decode_int,
    FieldType.FLOAT: decode_float,
    FieldType.CHAR: decode_char,
    FieldType.DECIMAL_ASSUMED: decode_decimal_assumed,
    FieldType.DECIMAL_ASSUMED_E: decode_decimal_assumed_e,
}


def decode(raw: str, field_type: FieldType) -> Decoded:
    """Decode a raw column substring according to its field type."""
    return _DECODERS[field_type](raw)
