"""JSON formatting of navigation events for WebSocket transmission."""

import dataclasses
import json
from datetime import datetime
from typing import Any

from pigps.nmea.types import EventCategory, NavigationEvent

__all__ = ["format_event"]


def _to_json_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, EventCategory):
        return value.value
    return value


def format_event(event: NavigationEvent) -> str:
    """Serialize a navigation event into a JSON object string.

    The ``type`` key holds the event category (``"position"``, ``"hdop"``,
    ...); the remaining keys are the event's fields. Timestamps are ISO 8601
    strings with their UTC offset.

    Example:
        >>> format_event(BearingReceived(bearing=84.4))
        '{"type": "bearing", "bearing": 84.4}'
    """
    payload = {
        name: _to_json_value(getattr(event, name))
        for name in (f.name for f in dataclasses.fields(event))
        if name != "category"
    }
    return json.dumps({"type": event.category.value, **payload})
