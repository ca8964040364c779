"""Decode errors raised while interpreting a single NMEA sentence.

Decode errors are local to one ``SentenceInterpreter.interpret`` call. The
interpreter catches them per field group, records them on the returned
``RecognitionOutcome`` and moves on to the next group, so they never
escape to the caller and never affect later sentences.
"""


class DecodeError(Exception):
    """Base class for problems found in a recognized sentence.

    Attributes:
        tag: Sentence tag (field 0), e.g. ``"$GPRMC"``.
        index: Index of the field that caused the error.
    """

    def __init__(self, tag: str, index: int, message: str) -> None:
        super().__init__(f"{tag} field {index}: {message}")
        self.tag = tag
        self.index = index


class MalformedSentence(DecodeError):
    """A field required by the sentence grammar is missing entirely.

    Raised when the sentence has fewer comma-delimited fields than the
    index being read. An *empty* field is not malformed; it simply means
    "value not available".
    """

    def __init__(self, tag: str, index: int) -> None:
        super().__init__(tag, index, "missing (sentence too short)")


class FieldParseError(DecodeError):
    """A non-empty field does not match the grammar expected at its index.

    Attributes:
        value: The raw field text.
        reason: Short description of what was expected.
    """

    def __init__(self, tag: str, index: int, value: str, reason: str) -> None:
        super().__init__(tag, index, f"{reason} (got {value!r})")
        self.value = value
        self.reason = reason


class ChecksumMismatch(DecodeError):
    """The ``*hh`` trailer is missing or does not match the sentence body.

    Only raised when the interpreter is asked to verify checksums before
    decoding; ``index`` is the index of the last field, which carries the
    trailer.
    """

    def __init__(self, tag: str, index: int, expected: str, provided: str) -> None:
        super().__init__(
            tag, index, f"checksum {provided or 'missing'}, expected {expected}"
        )
        self.expected = expected
        self.provided = provided
