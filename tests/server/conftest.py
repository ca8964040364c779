"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from pigps import SentenceInterpreter
from pigps.gnss import ReceivedSentence


def _fixed_clock() -> datetime:
    return datetime(2024, 3, 1, 10, 0, 0, tzinfo=timezone.utc)


class ControlledGPSReader:
    """Stands in for GPSReader; tests push raw lines into ``line_queue``."""

    def __init__(self) -> None:
        self.interpreter = SentenceInterpreter(clock=_fixed_clock)
        self.line_queue: queue.Queue[str | None] = queue.Queue()

    def __enter__(self) -> "ControlledGPSReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.line_queue.put(None)

    def __iter__(self) -> Iterator[ReceivedSentence]:
        while True:
            line = self.line_queue.get()
            if line is None:
                raise EOFError("cancelled")
            yield ReceivedSentence(line=line, outcome=self.interpreter.interpret(line))


@pytest.fixture(autouse=True)
def gps_controller() -> Iterator[ControlledGPSReader]:
    controller = ControlledGPSReader()
    with patch("server.main.GPSReader", return_value=controller):
        yield controller
    controller.line_queue.put(None)
