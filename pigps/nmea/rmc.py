"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) carries the minimum
navigation data: time, fix status, position, speed and track.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation (unused)
           |      | |        | |         | |     |     +-- Date DDMMYY (unused)
           |      | |        | |         | |     +-- Track made good (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS[.sss])

Each field group (position, time, speed, bearing, status) is decoded
independently: an empty field only suppresses its own group's event, and a
missing or unparseable field is reported as a decode error for that group
while the remaining groups still produce their events.
"""

from collections.abc import Iterator
from datetime import date

from pigps.nmea.errors import DecodeError
from pigps.nmea.fields import (
    parse_decimal_field,
    parse_fix_time,
    parse_latitude,
    parse_longitude,
    require_field,
)
from pigps.nmea.types import (
    BearingReceived,
    DateTimeChanged,
    FixLost,
    FixObtained,
    FixStatus,
    NavigationEvent,
    PositionReceived,
    SpeedReceived,
)

_TIME = 1
_STATUS = 2
_LATITUDE = 3
_LATITUDE_HEMISPHERE = 4
_LONGITUDE = 5
_LONGITUDE_HEMISPHERE = 6
_SPEED = 7
_BEARING = 8

MILES_PER_HOUR_PER_KNOT = 1.150779


def _decode_position(fields: list[str]) -> PositionReceived | None:
    """Decode fields 3-6; all four must be non-empty."""
    tag = fields[0]
    latitude, latitude_hemisphere, longitude, longitude_hemisphere = [
        require_field(fields, index)
        for index in (_LATITUDE, _LATITUDE_HEMISPHERE, _LONGITUDE, _LONGITUDE_HEMISPHERE)
    ]
    if not (latitude and latitude_hemisphere and longitude and longitude_hemisphere):
        return None

    latitude_text, latitude_degrees = parse_latitude(
        latitude, latitude_hemisphere, tag, _LATITUDE
    )
    longitude_text, longitude_degrees = parse_longitude(
        longitude, longitude_hemisphere, tag, _LONGITUDE
    )
    return PositionReceived(
        latitude=latitude_text,
        longitude=longitude_text,
        latitude_degrees=latitude_degrees,
        longitude_degrees=longitude_degrees,
    )


def _decode_time(fields: list[str], today: date) -> DateTimeChanged | None:
    """Decode field 1 and convert the result to the local time zone."""
    value = require_field(fields, _TIME)
    if not value:
        return None
    satellite_time = parse_fix_time(value, today, fields[0], _TIME)
    return DateTimeChanged(timestamp=satellite_time.astimezone())


def _decode_speed(fields: list[str]) -> SpeedReceived | None:
    value = require_field(fields, _SPEED)
    if not value:
        return None
    knots = parse_decimal_field(value, fields[0], _SPEED)
    return SpeedReceived(speed=knots * MILES_PER_HOUR_PER_KNOT, knots=knots)


def _decode_bearing(fields: list[str]) -> BearingReceived | None:
    value = require_field(fields, _BEARING)
    if not value:
        return None
    return BearingReceived(bearing=parse_decimal_field(value, fields[0], _BEARING))


def _decode_fix_status(fields: list[str]) -> FixObtained | FixLost | None:
    """Map status ``A`` to FixObtained and ``V`` to FixLost; ignore others."""
    status = FixStatus.from_field(require_field(fields, _STATUS))
    if status is FixStatus.ACTIVE:
        return FixObtained()
    if status is FixStatus.VOID_OR_WARNING:
        return FixLost()
    return None


def decode_rmc(
    fields: list[str], today: date
) -> Iterator[NavigationEvent | DecodeError]:
    """Decode an RMC sentence group by group.

    Args:
        fields: Fields from ``split_fields``; ``fields[0]`` is ``"$GPRMC"``.
        today: Current UTC date, combined with the time-of-day field.

    Yields:
        One event per populated group, or the ``DecodeError`` that stopped
        a group, in the order position, time, speed, bearing, fix status.

    Example:
        >>> fields = split_fields("$GPRMC,,V,,,,,,,,,")
        >>> list(decode_rmc(fields, date(2024, 3, 1)))
        [FixLost()]
    """
    groups = (
        lambda: _decode_position(fields),
        lambda: _decode_time(fields, today),
        lambda: _decode_speed(fields),
        lambda: _decode_bearing(fields),
        lambda: _decode_fix_status(fields),
    )
    for group in groups:
        try:
            event = group()
        except DecodeError as e:
            yield e
            continue
        if event is not None:
            yield event
