"""NMEA 0183 decoding for RMC, GSV and GSA sentences."""

from pigps.nmea.checksum import compute_checksum, is_valid
from pigps.nmea.errors import (
    ChecksumMismatch,
    DecodeError,
    FieldParseError,
    MalformedSentence,
)
from pigps.nmea.gsa import decode_gsa
from pigps.nmea.gsv import decode_gsv
from pigps.nmea.rmc import MILES_PER_HOUR_PER_KNOT, decode_rmc
from pigps.nmea.types import (
    BearingReceived,
    DateTimeChanged,
    DilutionOfPrecisionReceived,
    EventCategory,
    FixLost,
    FixObtained,
    FixStatus,
    NavigationEvent,
    PositionReceived,
    RecognitionOutcome,
    RecognitionStatus,
    SatelliteReceived,
    SentenceKind,
    SpeedReceived,
)

__all__ = [
    "MILES_PER_HOUR_PER_KNOT",
    "BearingReceived",
    "ChecksumMismatch",
    "DateTimeChanged",
    "DecodeError",
    "DilutionOfPrecisionReceived",
    "EventCategory",
    "FieldParseError",
    "FixLost",
    "FixObtained",
    "FixStatus",
    "MalformedSentence",
    "NavigationEvent",
    "PositionReceived",
    "RecognitionOutcome",
    "RecognitionStatus",
    "SatelliteReceived",
    "SentenceKind",
    "SpeedReceived",
    "compute_checksum",
    "decode_gsa",
    "decode_gsv",
    "decode_rmc",
    "is_valid",
]
