"""GNSS data types for sentences read from the receiver."""

from dataclasses import dataclass

from pigps.nmea.types import RecognitionOutcome


@dataclass
class ReceivedSentence:
    """One line read from the serial port together with its interpretation.

    ``GPSReader`` emits one ``ReceivedSentence`` per non-empty line. Events
    have already been delivered to the interpreter's subscribers by the time
    the sample is returned; ``outcome.events`` holds the same events for
    callers that prefer pulling them.

    Attributes:
        line: Terminator-stripped ASCII text as received.

        outcome: Result of ``SentenceInterpreter.interpret(line)``.
            ``outcome.recognized`` is ``False`` for sentence types other
            than RMC, GSV and GSA.

    Example:
        >>> with GPSReader() as gps:
        ...     sample = gps.read()
        >>> sample.line
        '$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A'
        >>> sample.outcome.recognized
        True
    """

    line: str
    outcome: RecognitionOutcome
