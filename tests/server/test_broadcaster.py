"""Tests for per-category event routing to client queues."""

import asyncio
import json
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from pigps import BearingReceived, EventCategory, FixLost
from server.broadcaster import add_client, broadcast_event, parse_categories, remove_client


@pytest.fixture
def loop() -> MagicMock:
    """Runs queued hand-offs immediately instead of on a real event loop."""
    mock_loop = MagicMock(spec=asyncio.AbstractEventLoop)
    mock_loop.call_soon_threadsafe.side_effect = lambda callback, *args: callback(*args)
    return mock_loop


@pytest.fixture
def bearing_client() -> Iterator[asyncio.Queue[str]]:
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=4)
    client = add_client(queue, [EventCategory.BEARING])
    yield queue
    remove_client(client)


@pytest.fixture
def all_client() -> Iterator[asyncio.Queue[str]]:
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=4)
    client = add_client(queue)
    yield queue
    remove_client(client)


class TestParseCategories:
    @pytest.mark.parametrize("types", [None, ""])
    def test_default_is_every_category(self, types):
        assert parse_categories(types) == frozenset(EventCategory)

    def test_names_with_spaces(self):
        assert parse_categories("fix_lost, vdop") == {
            EventCategory.FIX_LOST,
            EventCategory.VDOP,
        }

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError):
            parse_categories("position,altitude")


class TestBroadcastEvent:
    def test_only_matching_clients_receive(self, loop, bearing_client, all_client):
        broadcast_event(FixLost(), loop)
        broadcast_event(BearingReceived(bearing=84.4), loop)

        assert bearing_client.qsize() == 1
        assert json.loads(bearing_client.get_nowait()) == {"type": "bearing", "bearing": 84.4}
        assert [json.loads(all_client.get_nowait())["type"] for _ in range(2)] == [
            "fix_lost",
            "bearing",
        ]

    def test_event_formatted_once_for_all_recipients(self, loop, bearing_client, all_client):
        with patch("server.broadcaster.format_event", return_value="{}") as formatter:
            broadcast_event(BearingReceived(bearing=1.0), loop)
        formatter.assert_called_once()
        assert bearing_client.get_nowait() == all_client.get_nowait() == "{}"

    def test_unwanted_event_is_not_formatted(self, loop, bearing_client):
        with patch("server.broadcaster.format_event") as formatter:
            broadcast_event(FixLost(), loop)
        formatter.assert_not_called()
        loop.call_soon_threadsafe.assert_not_called()
        assert bearing_client.empty()

    def test_removed_client_receives_nothing(self, loop):
        queue: asyncio.Queue[str] = asyncio.Queue()
        remove_client(add_client(queue))
        broadcast_event(FixLost(), loop)
        assert queue.empty()
