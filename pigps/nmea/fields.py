"""NMEA field parsing utilities.

This module provides the tokenizer and the per-field grammars used by the
sentence decoders. NMEA fields are comma-separated and may be empty
(consecutive commas indicate missing data). Callers check for empty fields
before parsing, so the parsers here only ever see non-empty text and raise
``FieldParseError`` when it does not match the expected grammar.

Numbers always use '.' as the decimal point regardless of the host locale;
Python's ``float`` is locale independent but also accepts forms such as
``"nan"``, ``"1_000"`` or surrounding whitespace that never appear on the
wire, so a strict pattern is checked first.
"""

import re
from datetime import date, datetime, timezone

from pigps.nmea.errors import FieldParseError, MalformedSentence

_DECIMAL_PATTERN = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_DIGITS_PATTERN = re.compile(r"\d+")

_MAX_MILLISECONDS = 999

# A time token is HHMMSS; anything beyond 7 characters (HHMMSS. plus at
# least one digit) carries fractional seconds.
_TIME_FRACTION_THRESHOLD = 7

_LATITUDE_HEMISPHERES = ("N", "S")
_LONGITUDE_HEMISPHERES = ("E", "W")
_MAX_LATITUDE_DEGREES = 90
_MAX_LONGITUDE_DEGREES = 180
_MINUTES_PER_DEGREE = 60.0


def split_fields(sentence: str) -> list[str]:
    """Split a sentence into its comma-delimited fields.

    Line terminators are removed and the ``*hh`` checksum trailer is cut
    off the last field, so the final numeric field of a sentence (a GSA
    VDOP, a GSV signal-to-noise ratio) parses cleanly. Fields are not
    otherwise trimmed.

    Args:
        sentence: Raw NMEA sentence

    Returns:
        List of field strings, with the tag at index 0. An empty sentence
        yields ``[""]``.

    Example:
        >>> split_fields("$GPGSA,A,3,,,2.5,1.3,2.1*39\\r\\n")
        ['$GPGSA', 'A', '3', '', '', '2.5', '1.3', '2.1']
    """
    body = sentence.rstrip("\r\n")
    body, _, _ = body.partition("*")
    return body.split(",")


def require_field(fields: list[str], index: int) -> str:
    """Return ``fields[index]`` or raise ``MalformedSentence`` if absent.

    Args:
        fields: Fields from ``split_fields``; ``fields[0]`` is the tag.
        index: Position required by the sentence grammar.
    """
    if index >= len(fields):
        raise MalformedSentence(fields[0], index)
    return fields[index]


def parse_decimal_field(value: str, tag: str, index: int) -> float:
    """Parse a non-empty field as an unsigned decimal number.

    Speed, bearing, dilution of precision and coordinate minutes are never
    negative on the wire, so a sign is a grammar error.

    Example:
        >>> parse_decimal_field("022.4", "$GPRMC", 7)
        22.4
    """
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise FieldParseError(tag, index, value, "expected a decimal number")
    return float(value)


def parse_integer_field(value: str, tag: str, index: int) -> int:
    """Parse a non-empty field as an integer, leading zeros allowed.

    Example:
        >>> parse_integer_field("07", "$GPGSV", 4)
        7
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise FieldParseError(tag, index, value, "expected an integer")
    return int(value)


def parse_fix_time(value: str, today: date, tag: str, index: int) -> datetime:
    """Combine an ``HHMMSS[.sss]`` time of day with a UTC calendar date.

    The fractional seconds, when present, are rounded to whole
    milliseconds, never past 999 so a fraction such as ``.9996`` stays
    within the same second.

    Args:
        value: Non-empty time field, e.g. ``"123519"`` or ``"123519.25"``
        today: Current UTC date of the decoding machine
        tag: Sentence tag, for error reporting
        index: Field index, for error reporting

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        FieldParseError: Malformed token, or hour/minute/second out of range.

    Example:
        >>> parse_fix_time("123519.5", date(2024, 3, 1), "$GPRMC", 1)
        datetime.datetime(2024, 3, 1, 12, 35, 19, 500000, tzinfo=datetime.timezone.utc)
    """
    clock = value[:6]
    if len(clock) != 6 or not _DIGITS_PATTERN.fullmatch(clock):
        raise FieldParseError(tag, index, value, "expected HHMMSS time")

    milliseconds = 0
    if len(value) > _TIME_FRACTION_THRESHOLD:
        fraction = value[6:]
        if not _DECIMAL_PATTERN.fullmatch(fraction) or not fraction.startswith("."):
            raise FieldParseError(tag, index, value, "expected fractional seconds")
        milliseconds = min(round(float(fraction) * 1000), _MAX_MILLISECONDS)

    try:
        return datetime(
            today.year,
            today.month,
            today.day,
            int(clock[0:2]),
            int(clock[2:4]),
            int(clock[4:6]),
            milliseconds * 1000,
            tzinfo=timezone.utc,
        )
    except ValueError as e:
        raise FieldParseError(tag, index, value, str(e)) from e


def _split_coordinate(
    value: str, degree_digits: int, maximum_degrees: int, tag: str, index: int
) -> tuple[int, float]:
    """Split a ``D..DMM.MMMM`` token at a fixed number of degree digits.

    Latitude always has 2 degree digits and longitude 3; the remainder is
    decimal minutes.

    Example:
        >>> _split_coordinate("4807.038", 2, 90, "$GPRMC", 3)
        (48, 7.038)
    """
    degrees_text = value[:degree_digits]
    minutes_text = value[degree_digits:]
    if len(degrees_text) != degree_digits or not _DIGITS_PATTERN.fullmatch(
        degrees_text
    ):
        raise FieldParseError(
            tag, index, value, f"expected {degree_digits} degree digits"
        )
    if not minutes_text or not _DECIMAL_PATTERN.fullmatch(minutes_text):
        raise FieldParseError(tag, index, value, "expected decimal minutes")

    degrees = int(degrees_text)
    minutes = float(minutes_text)
    if degrees > maximum_degrees:
        raise FieldParseError(
            tag, index, value, f"degrees exceed {maximum_degrees}"
        )
    if not 0.0 <= minutes < _MINUTES_PER_DEGREE:
        raise FieldParseError(tag, index, value, "minutes outside 0-60")
    return degrees, minutes


def _check_hemisphere(
    hemisphere: str, allowed: tuple[str, str], tag: str, index: int
) -> None:
    if hemisphere not in allowed:
        raise FieldParseError(
            tag, index, hemisphere, f"expected {' or '.join(allowed)}"
        )


def format_coordinate(value: str, hemisphere: str, degree_digits: int) -> str:
    """Render a raw coordinate token for display.

    The degree prefix is followed by a degree sign, the minutes by a
    double quote and then the hemisphere letter, exactly as received.

    Example:
        >>> format_coordinate("01131.000", "E", 3)
        '011°31.000"E'
    """
    return f'{value[:degree_digits]}°{value[degree_digits:]}"{hemisphere}'


def convert_to_decimal_degrees(degrees: int, minutes: float, hemisphere: str) -> float:
    """Convert degrees and decimal minutes to signed decimal degrees.

    North/East are positive, South/West negative.

    Example:
        >>> convert_to_decimal_degrees(11, 31.0, "W")
        -11.516666666666667
    """
    decimal_degrees = degrees + minutes / _MINUTES_PER_DEGREE
    if hemisphere in ("S", "W"):
        return -decimal_degrees
    return decimal_degrees


def parse_latitude(
    value: str, hemisphere: str, tag: str, index: int
) -> tuple[str, float]:
    """Validate a latitude pair and return ``(display, decimal_degrees)``.

    ``index`` is the index of the coordinate field; the hemisphere is
    expected at ``index + 1``.
    """
    degrees, minutes = _split_coordinate(
        value, 2, _MAX_LATITUDE_DEGREES, tag, index
    )
    _check_hemisphere(hemisphere, _LATITUDE_HEMISPHERES, tag, index + 1)
    if degrees + minutes / _MINUTES_PER_DEGREE > _MAX_LATITUDE_DEGREES:
        raise FieldParseError(tag, index, value, "latitude beyond a pole")
    return (
        format_coordinate(value, hemisphere, 2),
        convert_to_decimal_degrees(degrees, minutes, hemisphere),
    )


def parse_longitude(
    value: str, hemisphere: str, tag: str, index: int
) -> tuple[str, float]:
    """Validate a longitude pair and return ``(display, decimal_degrees)``."""
    degrees, minutes = _split_coordinate(
        value, 3, _MAX_LONGITUDE_DEGREES, tag, index
    )
    _check_hemisphere(hemisphere, _LONGITUDE_HEMISPHERES, tag, index + 1)
    if degrees + minutes / _MINUTES_PER_DEGREE > _MAX_LONGITUDE_DEGREES:
        raise FieldParseError(tag, index, value, "longitude beyond 180 degrees")
    return (
        format_coordinate(value, hemisphere, 3),
        convert_to_decimal_degrees(degrees, minutes, hemisphere),
    )
