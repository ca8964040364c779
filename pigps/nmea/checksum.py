"""NMEA checksum calculation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
    ^                        checksum content                         ^^
    start                                                  checksum (0x6A = 106)

The checksum is an optional pre-check: ``SentenceInterpreter`` decodes
sentences without it unless constructed with ``require_checksum=True``.
"""


def _extract_content(sentence: str) -> str:
    """Return the characters the checksum covers.

    Every '$' before the first '*' is skipped and processing stops at the
    first '*'. Without a '*' the whole sentence (minus '$') is covered.

    Example:
        >>> _extract_content("$GPGSA,A,3*39")
        'GPGSA,A,3'
    """
    body, _, _ = sentence.partition("*")
    return body.replace("$", "")


def _calculate_xor_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content. An empty content string yields 0.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255 for ASCII input)
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def compute_checksum(sentence: str) -> str:
    """Compute the checksum of an NMEA sentence as two uppercase hex digits.

    Args:
        sentence: NMEA sentence, with or without the ``*hh`` trailer.

    Returns:
        Checksum formatted like the trailer, e.g. ``"6A"``; ``"00"`` when
        nothing lies between the delimiters.

    Example:
        >>> compute_checksum("$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A")
        '6A'
        >>> compute_checksum("$*")
        '00'
    """
    return f"{_calculate_xor_checksum(_extract_content(sentence)):02X}"


def is_valid(sentence: str) -> bool:
    """Check the checksum trailer of an NMEA sentence.

    Compares everything after the first '*' with ``compute_checksum``. The
    comparison is exact: lowercase hex digits, a truncated trailer or
    trailing characters such as line terminators all make the sentence
    invalid, so callers pass terminator-stripped lines.

    Args:
        sentence: Complete NMEA sentence including '$', '*' and checksum.

    Returns:
        True if the trailer matches, False if it differs or the sentence
        has no '*' at all.

    Example:
        >>> is_valid("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39")
        True
        >>> is_valid("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*FF")
        False
    """
    if "*" not in sentence:
        return False
    provided = sentence[sentence.index("*") + 1 :]
    return provided == compute_checksum(sentence)
