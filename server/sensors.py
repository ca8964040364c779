"""Background GPS reading loop."""

import asyncio
import logging

from pigps.gnss import GPSReader
from pigps.nmea.types import NavigationEvent
from server.broadcaster import broadcast_event

__all__ = ["run_gps_loop"]

logger = logging.getLogger(__name__)


def run_gps_loop(loop: asyncio.AbstractEventLoop, gps: GPSReader) -> None:
    """Read sentences continuously and broadcast every navigation event.

    A handler is subscribed to all event categories of ``gps.interpreter``
    for the duration of the loop, so events reach clients as soon as each
    line is interpreted. The caller owns *gps* and must use it as an open
    context manager. The loop exits when ``gps.cancel()`` is called, which
    causes the underlying ``GPSReader.read()`` to raise ``EOFError``.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        gps: An open ``GPSReader`` instance managed by the caller.
    """

    def _broadcast_event(event: NavigationEvent) -> None:
        broadcast_event(event, loop)

    interpreter = gps.interpreter
    interpreter.subscribe_all(_broadcast_event)
    try:
        for sample in gps:
            if sample.outcome.errors:
                logger.debug(
                    "%s: %s", sample.line, "; ".join(map(str, sample.outcome.errors))
                )
    except EOFError:
        return
    finally:
        interpreter.unsubscribe_all(_broadcast_event)
