"""SentenceInterpreter: turns raw NMEA lines into navigation events.

The interpreter is stateless between calls apart from its subscriber
lists. Each ``interpret`` call tokenizes one line, dispatches on the tag in
field 0 and runs the decoder for that sentence kind. Decoders yield events
and decode errors group by group; every event is handed to the handlers
subscribed to its category, synchronously and in order, before
``interpret`` returns.

Typical use with a line source::

    interpreter = SentenceInterpreter()
    interpreter.subscribe(EventCategory.POSITION, on_position)
    for line in lines:
        outcome = interpreter.interpret(line)
        if not outcome.ok:
            log(outcome.errors)
"""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime, timezone

from pigps.nmea.checksum import compute_checksum, is_valid
from pigps.nmea.errors import ChecksumMismatch, DecodeError
from pigps.nmea.fields import split_fields
from pigps.nmea.gsa import decode_gsa
from pigps.nmea.gsv import decode_gsv
from pigps.nmea.rmc import decode_rmc
from pigps.nmea.types import (
    EventCategory,
    NavigationEvent,
    RecognitionOutcome,
    SentenceKind,
)

__all__ = ["EventHandler", "SentenceInterpreter"]

logger = logging.getLogger(__name__)

EventHandler = Callable[[NavigationEvent], None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SentenceInterpreter:
    """Decode RMC, GSV and GSA sentences and multicast their events.

    Handlers are registered per ``EventCategory`` and called with the event
    object. Handler exceptions are not caught: they propagate out of
    ``interpret`` and the remaining groups of that sentence are skipped.

    Subscription changes and event delivery are serialized by a re-entrant
    lock, so handlers may subscribe or unsubscribe from within a callback
    and other threads may change subscriptions while lines are decoded.

    Args:
        clock: Returns the current time; its UTC date is combined with the
            time-of-day field of RMC sentences. Defaults to the system clock.
        require_checksum: When True, a recognized sentence whose ``*hh``
            trailer is missing or wrong is reported with a
            ``ChecksumMismatch`` and not decoded.

    Example:
        >>> interpreter = SentenceInterpreter()
        >>> _ = interpreter.subscribe(EventCategory.BEARING, print)
        >>> interpreter.parse("$GPRMC,,,,,,,,084.4,,,")
        BearingReceived(bearing=84.4)
        True
    """

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        require_checksum: bool = False,
    ) -> None:
        self._clock = clock if clock is not None else _utc_now
        self._require_checksum = require_checksum
        self._handlers: dict[EventCategory, list[EventHandler]] = {
            category: [] for category in EventCategory
        }
        self._lock = threading.RLock()

    # --- subscriptions --------------------------------------------------------

    def subscribe(self, category: EventCategory, handler: EventHandler) -> EventHandler:
        """Register ``handler`` for events of ``category`` and return it.

        The same handler may be registered more than once and is then
        called once per registration.
        """
        with self._lock:
            self._handlers[category].append(handler)
        return handler

    def subscribe_all(
        self,
        handler: EventHandler,
        categories: Iterable[EventCategory] = tuple(EventCategory),
    ) -> EventHandler:
        """Register ``handler`` for every category in ``categories``."""
        with self._lock:
            for category in categories:
                self._handlers[category].append(handler)
        return handler

    def unsubscribe(self, category: EventCategory, handler: EventHandler) -> None:
        """Remove one registration of ``handler`` for ``category``.

        Raises:
            ValueError: If ``handler`` is not subscribed to ``category``.
        """
        with self._lock:
            self._handlers[category].remove(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """Remove every registration of ``handler`` in every category."""
        with self._lock:
            for category, registered in self._handlers.items():
                self._handlers[category] = [h for h in registered if h != handler]

    def handlers(self, category: EventCategory) -> tuple[EventHandler, ...]:
        """Return a snapshot of the handlers subscribed to ``category``."""
        with self._lock:
            return tuple(self._handlers[category])

    def _deliver(self, event: NavigationEvent) -> None:
        with self._lock:
            for handler in tuple(self._handlers[event.category]):
                handler(event)

    # --- decoding -------------------------------------------------------------

    def _decode(
        self, kind: SentenceKind, fields: list[str]
    ) -> Iterator[NavigationEvent | DecodeError]:
        if kind is SentenceKind.MINIMUM_NAVIGATION_DATA:
            today = self._clock().astimezone(timezone.utc).date()
            return decode_rmc(fields, today)
        if kind is SentenceKind.SATELLITES_IN_VIEW:
            return decode_gsv(fields)
        return decode_gsa(fields)

    def _check_checksum(self, sentence: str, fields: list[str]) -> ChecksumMismatch | None:
        line = sentence.rstrip("\r\n")
        if is_valid(line):
            return None
        _, star, provided = line.partition("*")
        return ChecksumMismatch(
            fields[0], len(fields) - 1, compute_checksum(line), provided if star else ""
        )

    def interpret(self, sentence: str) -> RecognitionOutcome:
        """Interpret one line and deliver its events.

        Args:
            sentence: One NMEA sentence without (or with) its line terminator.

        Returns:
            A ``RecognitionOutcome``. Unknown tags, including an empty line,
            give an unrecognized outcome with no events. Recognized sentences
            list their events in delivery order plus any decode errors.
        """
        fields = split_fields(sentence)
        kind = SentenceKind.from_tag(fields[0])
        outcome = RecognitionOutcome(sentence=sentence, kind=kind)
        if kind is None:
            return outcome

        logger.debug("Valid %s sentence", kind.tag)

        if self._require_checksum:
            mismatch = self._check_checksum(sentence, fields)
            if mismatch is not None:
                logger.debug("%s", mismatch)
                outcome.errors.append(mismatch)
                return outcome

        for item in self._decode(kind, fields):
            if isinstance(item, DecodeError):
                logger.debug("%s", item)
                outcome.errors.append(item)
                continue
            outcome.events.append(item)
            self._deliver(item)

        return outcome

    def parse(self, sentence: str) -> bool:
        """Interpret ``sentence`` and return whether its tag was recognized."""
        return self.interpret(sentence).recognized
