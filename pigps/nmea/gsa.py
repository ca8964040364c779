"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) reports the fix mode, the satellites
used in the solution and the dilution-of-precision figures.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                     |   |   |
           | | |                     |   |   +-- VDOP  (field 17)
           | | |                     |   +-- HDOP      (field 16)
           | | |                     +-- PDOP          (field 15)
           | | +-- PRNs of satellites used, 12 slots (fields 3-14, unused here)
           | +-- Fix type (1=none, 2=2D, 3=3D)
           +-- Selection mode (M=manual, A=automatic)
"""

from collections.abc import Iterator

from pigps.nmea.errors import DecodeError
from pigps.nmea.fields import parse_decimal_field, require_field
from pigps.nmea.types import DilutionOfPrecisionReceived, EventCategory

# Field index -> event category, in delivery order
_DILUTION_FIELDS = (
    (15, EventCategory.PDOP),
    (16, EventCategory.HDOP),
    (17, EventCategory.VDOP),
)


def _decode_dilution(
    fields: list[str], index: int, category: EventCategory
) -> DilutionOfPrecisionReceived | None:
    value = require_field(fields, index)
    if not value:
        return None
    return DilutionOfPrecisionReceived(
        category=category,
        value=parse_decimal_field(value, fields[0], index),
    )


def decode_gsa(
    fields: list[str],
) -> Iterator[DilutionOfPrecisionReceived | DecodeError]:
    """Decode PDOP, HDOP and VDOP from a GSA sentence.

    Each value is independent: an empty field produces no event, and a
    sentence too short to contain a field yields ``MalformedSentence`` for
    that field only.

    Args:
        fields: Fields from ``split_fields``; ``fields[0]`` is ``"$GPGSA"``.

    Yields:
        ``DilutionOfPrecisionReceived`` events or ``DecodeError``s, in the
        order PDOP, HDOP, VDOP.

    Example:
        >>> fields = split_fields("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,,2.1*39")
        >>> [event.category.name for event in decode_gsa(fields)]
        ['PDOP', 'VDOP']
    """
    for index, category in _DILUTION_FIELDS:
        try:
            event = _decode_dilution(fields, index, category)
        except DecodeError as e:
            yield e
            continue
        if event is not None:
            yield event
