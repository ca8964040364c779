"""PiGPS: NMEA sentence interpretation for serial GPS receivers."""

from pigps.gnss import GPSReader, ReceivedSentence, activate_receiver
from pigps.interpreter import SentenceInterpreter
from pigps.nmea import (
    BearingReceived,
    ChecksumMismatch,
    DateTimeChanged,
    DecodeError,
    DilutionOfPrecisionReceived,
    EventCategory,
    FieldParseError,
    FixLost,
    FixObtained,
    MalformedSentence,
    PositionReceived,
    RecognitionOutcome,
    RecognitionStatus,
    SatelliteReceived,
    SentenceKind,
    SpeedReceived,
    compute_checksum,
    is_valid,
)

__all__ = [
    "BearingReceived",
    "ChecksumMismatch",
    "DateTimeChanged",
    "DecodeError",
    "DilutionOfPrecisionReceived",
    "EventCategory",
    "FieldParseError",
    "FixLost",
    "FixObtained",
    "GPSReader",
    "MalformedSentence",
    "PositionReceived",
    "ReceivedSentence",
    "RecognitionOutcome",
    "RecognitionStatus",
    "SatelliteReceived",
    "SentenceInterpreter",
    "SentenceKind",
    "SpeedReceived",
    "activate_receiver",
    "compute_checksum",
    "is_valid",
]
