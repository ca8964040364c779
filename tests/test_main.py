"""Tests for the console monitor entry point."""

from unittest.mock import MagicMock

import pytest
import serial

import main
from pigps.gnss import ReceivedSentence

RMC_VALID = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


class ScriptedReader:
    """Replays fixed lines through the interpreter, then reports end of stream."""

    lines = [RMC_VALID, "$GPRMC,,V,,,,,,,,,", "$GPGSA,A,3"]

    def __init__(self, port, baudrate, interpreter):
        self.port = port
        self.baudrate = baudrate
        self.interpreter = interpreter

    def __enter__(self):
        return self

    def __exit__(self, *_):
        pass

    def __iter__(self):
        for line in self.lines:
            yield ReceivedSentence(line=line, outcome=self.interpreter.interpret(line))
        raise EOFError("end of recording")


@pytest.fixture
def activate(monkeypatch):
    mock_activate = MagicMock()
    monkeypatch.setattr(main, "activate_receiver", mock_activate)
    monkeypatch.setattr(main, "GPSReader", ScriptedReader)
    return mock_activate


class TestParseArguments:
    def test_defaults(self):
        args = main.parse_arguments([])
        assert args.port == "/dev/ttyUSB1"
        assert args.command_port == "/dev/ttyUSB2"
        assert args.baudrate == 115200
        assert args.activate is True
        assert args.verify_checksum is False

    def test_flags(self):
        args = main.parse_arguments(
            ["--port", "/dev/ttyS0", "--no-activate", "--verify-checksum"]
        )
        assert args.port == "/dev/ttyS0"
        assert args.activate is False
        assert args.verify_checksum is True


class TestMain:
    def test_activates_then_prints_events(self, activate, capsys):
        assert main.main([]) == 1
        activate.assert_called_once_with("/dev/ttyUSB2", 115200)
        output = capsys.readouterr().out
        assert 'lat 48°07.038"N long 011°31.000"E' in output
        assert "Fix Obtained" in output
        assert "Fix Lost" in output
        assert "satellite time 2" in output

    def test_prints_decode_errors(self, activate, capsys):
        main.main([])
        output = capsys.readouterr().out
        assert "$GPGSA field 15: missing" in output

    def test_no_activate(self, activate):
        main.main(["--no-activate"])
        activate.assert_not_called()

    def test_activation_failure_returns_error(self, activate):
        activate.side_effect = serial.SerialException("no modem")
        assert main.main([]) == 1
