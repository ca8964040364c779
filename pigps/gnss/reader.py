"""GPSReader: serial NMEA line source for the sentence interpreter.

Opens the receiver's NMEA output port with pyserial and reads one
line-terminated sentence at a time. Each non-empty line is handed to a
``SentenceInterpreter`` so subscribers receive events as lines arrive.

Reading strategy:
    ``serial.Serial.readline`` blocks for at most ``timeout`` seconds and
    returns whatever was received so far. An empty read is a timeout and is
    retried; a partial line (no terminator) is kept and completed by the
    next read so sentences are never split across two outcomes.
"""

import contextlib
import logging
from collections.abc import Iterator
from types import TracebackType

import serial

from pigps.gnss.types import ReceivedSentence
from pigps.interpreter import SentenceInterpreter

__all__ = ["GPSReader"]

logger = logging.getLogger(__name__)

# --- serial defaults ----------------------------------------------------------

_PORT = "/dev/ttyUSB1"
_BAUDRATE = 115200
_TIMEOUT = 2.0  # readline timeout; determines maximum cancel() latency


# --- public API ---------------------------------------------------------------


class GPSReader:
    """Context manager for reading and interpreting NMEA lines from a serial port.

    Two consumption patterns are supported:

    Continuous iteration (recommended for server backends)::

        with GPSReader() as gps:
            for sample in gps:
                process(sample)

    Single read (useful for one-shot or polling scenarios)::

        with GPSReader() as gps:
            sample = gps.read()

    Args:
        port: Serial device carrying NMEA output (default: ``"/dev/ttyUSB1"``).
        baudrate: Line speed (default: ``115200``).
        timeout: Read timeout in seconds (default: ``2.0``).
        interpreter: Interpreter to feed; a new one is created when omitted.
            Subscribe to ``reader.interpreter`` to receive events.
    """

    def __init__(
        self,
        port: str = _PORT,
        baudrate: int = _BAUDRATE,
        timeout: float = _TIMEOUT,
        interpreter: SentenceInterpreter | None = None,
    ) -> None:
        """Store port parameters; the port is opened in ``__enter__``."""
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self.interpreter = interpreter if interpreter is not None else SentenceInterpreter()
        self._serial: serial.Serial | None = None
        self._pending = b""
        self._cancelled = False

    def __enter__(self) -> "GPSReader":
        """Open the serial port and reset internal state."""
        self._serial = serial.Serial(
            self._port, self._baudrate, timeout=self._timeout
        )
        self._pending = b""
        self._cancelled = False
        logger.info("Serial port %s opened at %d baud", self._port, self._baudrate)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the serial port."""
        if self._serial is not None:
            self._serial.close()
            self._serial = None
            logger.info("Serial port %s closed", self._port)

    def cancel(self) -> None:
        """Cancel pending blocking reads gracefully.

        Sets the cancellation flag and cancels the in-progress read, so a
        ``read()`` blocked in another thread raises ``EOFError`` no later
        than the next timeout.
        """
        self._cancelled = True
        if self._serial is not None:
            with contextlib.suppress(AttributeError, serial.SerialException):
                self._serial.cancel_read()

    def _recv_raw(self, port: serial.Serial) -> bytes | None:
        """Read one raw line; returns ``None`` on timeout retry.

        Raises:
            EOFError: If the port failed or was closed.
        """
        try:
            raw: bytes = port.readline()
        except (serial.SerialException, OSError) as e:
            raise EOFError(f"serial port {self._port} closed.") from e
        if not raw:
            return None
        if not raw.endswith(b"\n"):
            self._pending += raw
            return None
        line, self._pending = self._pending + raw, b""
        return line

    def read_line(self) -> str | None:
        """Read and decode one line; returns ``None`` on timeout retry.

        Non-ASCII bytes are replaced, since a receiver only emits ASCII and
        anything else is line noise that the interpreter will not recognize.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If cancelled, or the port failed or was closed.
        """
        if self._serial is None:
            raise RuntimeError("GPSReader must be used as a context manager.")
        if self._cancelled:
            raise EOFError("serial read cancelled.")
        raw = self._recv_raw(self._serial)
        if raw is None:
            return None
        line = raw.decode("ascii", errors="replace").strip()
        if "\ufffd" in line:
            logger.warning("Replacing undecodable bytes in %r", raw)
        return line

    def read(self) -> ReceivedSentence:
        """Block until the next non-empty line and return it interpreted.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the port closes.
        """
        while True:
            line = self.read_line()
            if line:
                return ReceivedSentence(line=line, outcome=self.interpreter.interpret(line))

    def __iter__(self) -> Iterator[ReceivedSentence]:
        """Yield interpreted lines indefinitely.

        Iteration continues until the caller breaks the loop or an exception
        propagates out (e.g. ``EOFError`` on cancellation). ``StopIteration``
        is never raised.
        """
        while True:
            yield self.read()
