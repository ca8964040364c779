"""GNSS module for reading NMEA 0183 sentences from a serial receiver."""

from pigps.gnss.activation import activate_receiver
from pigps.gnss.reader import GPSReader
from pigps.gnss.types import ReceivedSentence

__all__ = ["GPSReader", "ReceivedSentence", "activate_receiver"]
