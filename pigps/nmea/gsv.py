"""GSV sentence decoder.

GSV (GNSS Satellites in View) lists up to four satellites per sentence;
receivers send as many GSV sentences as needed to cover every visible
satellite.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |  +-- slot 2 ...
           | | |  |  |  |   +-- SNR (dB-Hz)
           | | |  |  |  +-- Azimuth (degrees true)
           | | |  |  +-- Elevation (degrees)
           | | |  +-- Satellite PRN number          (slot 1 starts at field 4)
           | | +-- Total satellites in view
           | +-- Sentence number
           +-- Total number of sentences

Slot ``i`` (1..4) occupies fields ``4i`` to ``4i + 3``. The last sentence
of a group often carries fewer than four slots, so a slot whose fields do
not exist is skipped silently rather than reported as malformed.
"""

from collections.abc import Iterator

from pigps.nmea.errors import DecodeError
from pigps.nmea.fields import parse_integer_field
from pigps.nmea.types import SatelliteReceived

_SLOTS = range(1, 5)
_FIELDS_PER_SLOT = 4


def _decode_slot(fields: list[str], slot: int) -> SatelliteReceived | None:
    first = slot * _FIELDS_PER_SLOT
    block = fields[first : first + _FIELDS_PER_SLOT]
    if len(block) < _FIELDS_PER_SLOT or not all(block):
        return None

    tag = fields[0]
    code, elevation, azimuth, signal_to_noise_ratio = (
        parse_integer_field(value, tag, first + offset)
        for offset, value in enumerate(block)
    )
    return SatelliteReceived(
        pseudo_random_code=code,
        azimuth=azimuth,
        elevation=elevation,
        signal_to_noise_ratio=signal_to_noise_ratio,
    )


def decode_gsv(fields: list[str]) -> Iterator[SatelliteReceived | DecodeError]:
    """Decode the four satellite slots of a GSV sentence independently.

    A slot is reported only when all four of its fields are present and
    non-empty. A slot with a non-integer field yields a ``FieldParseError``
    and the remaining slots are still decoded.

    Args:
        fields: Fields from ``split_fields``; ``fields[0]`` is ``"$GPGSV"``.

    Yields:
        A ``SatelliteReceived`` per populated slot, or the ``DecodeError``
        for a slot that could not be parsed, in slot order.
    """
    for slot in _SLOTS:
        try:
            satellite = _decode_slot(fields, slot)
        except DecodeError as e:
            yield e
            continue
        if satellite is not None:
            yield satellite
