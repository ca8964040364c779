"""NMEA data types for interpreted sentences.

This module defines the enums and dataclasses that describe what the
interpreter recognized in a sentence and which navigation facts it found.

Design Decisions:
    1. One event per fact: a single RMC sentence can yield a position, a
       time, a speed, a bearing and a fix transition. Each is its own
       immutable event so subscribers only receive what they asked for, and
       an empty field simply means "no event", never "zero".

    2. Events carry their category: ``EventCategory`` is the subscription
       key used by ``SentenceInterpreter.subscribe``. Storing it on the
       event lets a single handler subscribed to several categories
       dispatch on ``event.category`` without ``isinstance`` chains.

    3. Outcome separate from events: ``RecognitionOutcome.recognized``
       answers "was this a sentence type we handle?" while ``errors`` lists
       decode problems in individual field groups. A recognized sentence may
       still carry errors; an unrecognized one never does.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime

from pigps.nmea.errors import ChecksumMismatch, DecodeError, MalformedSentence


class SentenceKind(enum.Enum):
    """Sentence types handled by the interpreter, keyed by their tag."""

    MINIMUM_NAVIGATION_DATA = "$GPRMC"
    SATELLITES_IN_VIEW = "$GPGSV"
    SATELLITE_DOP = "$GPGSA"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, tag: str) -> "SentenceKind | None":
        """Return the kind for ``tag``, or None for any other field 0."""
        try:
            return cls(tag)
        except ValueError:
            return None


class FixStatus(enum.Enum):
    """RMC status field (index 2)."""

    ACTIVE = "A"
    VOID_OR_WARNING = "V"

    @classmethod
    def from_field(cls, value: str) -> "FixStatus | None":
        try:
            return cls(value)
        except ValueError:
            return None


class EventCategory(enum.Enum):
    """Subscription categories, one per kind of navigation event."""

    POSITION = "position"
    DATE_TIME = "date_time"
    SPEED = "speed"
    BEARING = "bearing"
    FIX_OBTAINED = "fix_obtained"
    FIX_LOST = "fix_lost"
    SATELLITE = "satellite"
    PDOP = "pdop"
    HDOP = "hdop"
    VDOP = "vdop"


class RecognitionStatus(enum.Enum):
    """Overall classification of one interpreted sentence."""

    RECOGNIZED = "recognized"
    UNRECOGNIZED = "unrecognized"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class PositionReceived:
    """Position from an RMC sentence.

    Attributes:
        latitude: Presentation string, e.g. ``'48°07.038"N'``.
        longitude: Presentation string, e.g. ``'011°31.000"E'``.
        latitude_degrees: Decimal degrees, positive North.
        longitude_degrees: Decimal degrees, positive East.
    """

    latitude: str
    longitude: str
    latitude_degrees: float
    longitude_degrees: float

    category = EventCategory.POSITION


@dataclass(frozen=True)
class DateTimeChanged:
    """Fix time combined with the decoding machine's current UTC date.

    The sentence only carries a time of day, so a sentence decoded close
    to midnight may be assigned the neighbouring calendar date.

    Attributes:
        timestamp: Timezone-aware datetime in the local time zone.
    """

    timestamp: datetime

    category = EventCategory.DATE_TIME


@dataclass(frozen=True)
class SpeedReceived:
    """Ground speed.

    Attributes:
        speed: Speed in miles per hour (knots x 1.150779).
        knots: Speed as reported on the wire.
    """

    speed: float
    knots: float

    category = EventCategory.SPEED


@dataclass(frozen=True)
class BearingReceived:
    """Track made good in decimal degrees, 0-360, not normalized."""

    bearing: float

    category = EventCategory.BEARING


@dataclass(frozen=True)
class FixObtained:
    """RMC status changed to or remained ``A`` (active)."""

    category = EventCategory.FIX_OBTAINED


@dataclass(frozen=True)
class FixLost:
    """RMC status reported ``V`` (void or warning)."""

    category = EventCategory.FIX_LOST


@dataclass(frozen=True)
class SatelliteReceived:
    """One satellite block from a GSV sentence.

    Attributes:
        pseudo_random_code: Satellite PRN number.
        azimuth: Degrees from true north, 0-359.
        elevation: Degrees above the horizon, 0-90.
        signal_to_noise_ratio: C/N0 in dB-Hz.
    """

    pseudo_random_code: int
    azimuth: int
    elevation: int
    signal_to_noise_ratio: int

    category = EventCategory.SATELLITE


@dataclass(frozen=True)
class DilutionOfPrecisionReceived:
    """A PDOP, HDOP or VDOP value from a GSA sentence.

    Attributes:
        category: ``EventCategory.PDOP``, ``HDOP`` or ``VDOP``.
        value: Unitless dilution of precision, lower is better.
    """

    category: EventCategory
    value: float


NavigationEvent = (
    PositionReceived
    | DateTimeChanged
    | SpeedReceived
    | BearingReceived
    | FixObtained
    | FixLost
    | SatelliteReceived
    | DilutionOfPrecisionReceived
)


@dataclass
class RecognitionOutcome:
    """Result of interpreting one sentence.

    Attributes:
        sentence: The raw input line.
        kind: Recognized sentence kind, or None when field 0 is not a
            handled tag.
        events: Events raised, in delivery order.
        errors: Decode errors recorded for individual field groups.

    Example:
        >>> outcome = SentenceInterpreter().interpret("$GPXXX,1,2")
        >>> outcome.recognized
        False
        >>> outcome.status
        <RecognitionStatus.UNRECOGNIZED: 'unrecognized'>
    """

    sentence: str
    kind: SentenceKind | None
    events: list[NavigationEvent] = field(default_factory=list)
    errors: list[DecodeError] = field(default_factory=list)

    @property
    def recognized(self) -> bool:
        """True for any handled tag, regardless of decode errors."""
        return self.kind is not None

    @property
    def status(self) -> RecognitionStatus:
        if self.kind is None:
            return RecognitionStatus.UNRECOGNIZED
        if any(
            isinstance(error, (MalformedSentence, ChecksumMismatch))
            for error in self.errors
        ):
            return RecognitionStatus.MALFORMED
        return RecognitionStatus.RECOGNIZED

    @property
    def ok(self) -> bool:
        """True when the sentence was recognized and decoded without errors."""
        return self.recognized and not self.errors
