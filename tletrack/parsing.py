"""
TLE Parser Module

Normalizes the TLE formats callers pass around (newline-delimited strings,
line sequences, already-parsed records) into a ``ParsedTLE`` and validates
records by line number and checksum.

Accepts 2-line and 3-line (with satellite name) variants:

    parse_tle('''ISS (ZARYA)
    1 25544U 98067A   19285.67257269  .00001247  00000-0  29690-4 0  9993
    2 25544  51.6439 138.6866 0007415 141.2524 326.3533 15.50194187193485''')
    ->
    ParsedTLE(name='ISS (ZARYA)', lines=('1 25544U ...', '2 25544 ...'))
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, Tuple

from tletrack.cache import resolve_cache
from tletrack.decoders import DIGITS, is_ascii_digits
from tletrack.exceptions import ChecksumEmptyLineError, TLEFormatError
from tletrack.logging_config import get_logger

logger = get_logger(__name__)

NAME_LINE_PREFIX = "0 "


@dataclass(frozen=True)
class ParsedTLE:
    """
    A TLE normalized for fast field lookups.

    Attributes:
        lines: Trimmed data lines. Two for a well-formed record; the parser
            does not enforce this, is_valid_tle does.
        name: Satellite name from a 3-line TLE, otherwise None
    """
    lines: Tuple[str, ...]
    name: Optional[str] = None

    @property
    def line1(self) -> str:
        return self.lines[0]

    @property
    def line2(self) -> str:
        return self.lines[1]


def _cache_key(source):
    if isinstance(source, str):
        return ("str", source)
    return ("seq", tuple(source))


def _from_mapping(source: Mapping) -> ParsedTLE:
    lines = source.get("lines", source.get("tle"))
    if (
        not isinstance(lines, (list, tuple))
        or len(lines) != 2
        or not all(isinstance(line, str) for line in lines)
    ):
        raise TLEFormatError(
            "Input mapping is malformed (should have 'name' and 'lines' keys, "
            "with exactly two string lines)."
        )
    return ParsedTLE(lines=tuple(line.strip() for line in lines), name=source.get("name"))


def parse_tle(source, cache=None) -> ParsedTLE:
    """
    Convert a string, sequence or mapping TLE into a ParsedTLE.

    Args:
        source: Newline-delimited string, list/tuple of lines, mapping with a
            'lines' key, or a ParsedTLE (returned as-is)
        cache: TLECache to memoize into (default cache when None)

    Returns:
        ParsedTLE; identical input text yields the identical object

    Raises:
        TLEFormatError: Unsupported type or a line count other than 2 or 3
    """
    if isinstance(source, ParsedTLE):
        return source

    if isinstance(source, Mapping):
        return _from_mapping(source)

    if not isinstance(source, (str, list, tuple)):
        raise TLEFormatError(
            f"Source TLE must be of type [str, list, tuple, ParsedTLE], "
            f"but got {type(source).__name__}."
        )

    if not isinstance(source, str) and not all(isinstance(line, str) for line in source):
        raise TLEFormatError("Every TLE line must be a string.")

    cache = resolve_cache(cache)
    key = _cache_key(source)
    cached = cache.get("parsed", key)
    if cached is not None:
        return cached

    if isinstance(source, str):
        elements = [line for line in source.splitlines() if line.strip()]
    else:
        elements = list(source)

    name = None
    if len(elements) == 3:
        name = elements[0].strip()
        if name.startswith(NAME_LINE_PREFIX):
            name = name[len(NAME_LINE_PREFIX):].strip()
        elements = elements[1:]
    elif len(elements) != 2:
        raise TLEFormatError(
            f"TLE must have 2 or 3 lines (with satellite name), got {len(elements)}."
        )

    parsed = ParsedTLE(lines=tuple(line.strip() for line in elements), name=name)
    return cache.set("parsed", key, parsed)


def clear_tle_parse_cache(cache=None):
    """Forget every memoized parse and validation result."""
    resolve_cache(cache).clear_parsed()


def compute_checksum(line: str) -> int:
    """
    Determine the checksum for a single line of a TLE.

    Checksum = modulo 10 of the sum of all digits (including the line number)
    plus 1 for each minus sign. Everything else is ignored. The last
    character, the checksum itself, is excluded.

    Raises:
        ChecksumEmptyLineError: Nothing is left once the checksum is removed
    """
    body = line[:-1]
    if not body:
        raise ChecksumEmptyLineError(f"TLE line {line!r} is empty without its checksum.")

    checksum = 0
    for char in body:
        if char in DIGITS:
            checksum += int(char)
        elif char == "-":
            checksum += 1
    return checksum % 10


def line_number_is_valid(parsed: ParsedTLE, line_number: int) -> bool:
    line = parsed.lines[line_number - 1]
    return line[:1] == str(line_number)


def checksum_is_valid(parsed: ParsedTLE, line_number: int) -> bool:
    line = parsed.lines[line_number - 1]
    checksum_in_tle = line[-1:]
    if len(line) < 2 or not is_ascii_digits(checksum_in_tle):
        return False
    return compute_checksum(line) == int(checksum_in_tle)


def is_valid_tle(tle, cache=None) -> bool:
    """
    Determine whether a TLE is structurally valid.

    A valid TLE has exactly two data lines starting with '1' and '2' whose
    embedded checksums match the computed ones.
    """
    try:
        parsed = parse_tle(tle, cache)
    except TLEFormatError:
        return False

    if len(parsed.lines) != 2:
        return False

    cache = resolve_cache(cache)
    cached = cache.get("validity", parsed.lines)
    if cached is not None:
        return cached

    valid = (
        line_number_is_valid(parsed, 1)
        and line_number_is_valid(parsed, 2)
        and checksum_is_valid(parsed, 1)
        and checksum_is_valid(parsed, 2)
    )
    if not valid:
        logger.debug(f"Invalid TLE: {parsed.lines}")

    return cache.set("validity", parsed.lines, valid)
