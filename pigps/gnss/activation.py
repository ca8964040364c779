"""Receiver activation over the modem's AT command port.

Quectel LTE modules with an integrated GNSS engine keep the receiver off
until ``AT+QGPS=1`` is written to their AT command port. NMEA output then
appears on a separate port, read by ``GPSReader``.
"""

import logging
import time

import serial

__all__ = ["activate_receiver"]

logger = logging.getLogger(__name__)

_COMMAND_PORT = "/dev/ttyUSB2"
_BAUDRATE = 115200
_ACTIVATION_COMMAND = b"AT+QGPS=1\r"
_SETTLE_SECONDS = 0.1


def activate_receiver(
    port: str = _COMMAND_PORT,
    baudrate: int = _BAUDRATE,
    command: bytes = _ACTIVATION_COMMAND,
    settle: float = _SETTLE_SECONDS,
) -> None:
    """Send the activation command and close the command port again.

    The port is given ``settle`` seconds after opening before the command
    is written, and again afterwards before it is closed. The modem's reply
    is not read: a receiver that is already running answers with an error,
    which is harmless.

    Args:
        port: AT command serial device.
        baudrate: Line speed of the command port.
        command: Raw bytes to write, including the carriage return.
        settle: Delay in seconds around the write.

    Raises:
        serial.SerialException: If the command port cannot be opened.
    """
    with serial.Serial(port, baudrate) as command_port:
        time.sleep(settle)
        command_port.write(command)
        command_port.flush()
        time.sleep(settle)
    logger.info("Sent %r to %s", command, port)
