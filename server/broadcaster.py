"""Routes navigation events to WebSocket clients by event category.

Each connected client registers the set of ``EventCategory`` values it
wants, chosen with the ``types`` query parameter of ``/ws``. An event is
serialized once and handed to every client that asked for its category;
events nobody asked for are never formatted.
"""

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass

from pigps.nmea.types import EventCategory, NavigationEvent
from server.formatters import format_event

__all__ = ["Client", "add_client", "broadcast_event", "parse_categories", "remove_client"]

_clients: list["Client"] = []


@dataclass(eq=False)
class Client:
    """One connected WebSocket client.

    Attributes:
        queue: Outgoing JSON messages, bounded by the endpoint.
        categories: Event categories forwarded to this client.
    """

    queue: asyncio.Queue[str]
    categories: frozenset[EventCategory]


def parse_categories(types: str | None) -> frozenset[EventCategory]:
    """Parse a comma-separated list of message types.

    ``None`` or an empty string selects every category.

    Raises:
        ValueError: If a name is not an ``EventCategory`` value.

    Example:
        >>> sorted(c.value for c in parse_categories("hdop,position"))
        ['hdop', 'position']
    """
    if not types:
        return frozenset(EventCategory)
    return frozenset(EventCategory(name.strip()) for name in types.split(","))


def add_client(
    queue: asyncio.Queue[str],
    categories: Iterable[EventCategory] = tuple(EventCategory),
) -> Client:
    client = Client(queue=queue, categories=frozenset(categories))
    _clients.append(client)
    return client


def remove_client(client: Client) -> None:
    _clients.remove(client)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Slow clients lose their oldest message rather than stalling the reader.
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def broadcast_event(event: NavigationEvent, loop: asyncio.AbstractEventLoop) -> None:
    """Hand ``event`` to the interested clients from the reader thread.

    Args:
        event: Event delivered by ``SentenceInterpreter``.
        loop: Event loop that owns the client queues.
    """
    recipients = [client for client in list(_clients) if event.category in client.categories]
    if not recipients:
        return
    message = format_event(event)
    for client in recipients:
        loop.call_soon_threadsafe(_enqueue_message, client.queue, message)
