"""Console monitor for a serial GPS receiver.

Activates the receiver, then prints every NMEA line it emits together with
the interpretation result and the navigation events it produced.

Run with::

    python main.py --port /dev/ttyUSB1 --command-port /dev/ttyUSB2
"""

import argparse
import logging
import sys
from datetime import datetime

import serial

from pigps import (
    DateTimeChanged,
    EventCategory,
    GPSReader,
    PositionReceived,
    SentenceInterpreter,
    activate_receiver,
)

logger = logging.getLogger("pigps")


def _on_fix_obtained(_event: object) -> None:
    print("Fix Obtained")


def _on_fix_lost(_event: object) -> None:
    print("Fix Lost")


def _on_position(event: PositionReceived) -> None:
    print(f"lat {event.latitude} long {event.longitude}")


def _on_date_time(event: DateTimeChanged) -> None:
    print(f"satellite time {event.timestamp.isoformat()}")


def _build_interpreter(verify_checksum: bool) -> SentenceInterpreter:
    interpreter = SentenceInterpreter(require_checksum=verify_checksum)
    interpreter.subscribe(EventCategory.POSITION, _on_position)
    interpreter.subscribe(EventCategory.FIX_OBTAINED, _on_fix_obtained)
    interpreter.subscribe(EventCategory.FIX_LOST, _on_fix_lost)
    interpreter.subscribe(EventCategory.DATE_TIME, _on_date_time)
    return interpreter


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--port", default="/dev/ttyUSB1", help="NMEA output port")
    parser.add_argument("--baudrate", type=int, default=115200)
    parser.add_argument(
        "--command-port", default="/dev/ttyUSB2", help="AT command port"
    )
    parser.add_argument(
        "--no-activate",
        dest="activate",
        action="store_false",
        help="do not send AT+QGPS=1 before reading",
    )
    parser.add_argument(
        "--verify-checksum",
        action="store_true",
        help="reject sentences whose checksum does not match",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )

    try:
        if args.activate:
            activate_receiver(args.command_port, args.baudrate)
        reader = GPSReader(
            args.port,
            args.baudrate,
            interpreter=_build_interpreter(args.verify_checksum),
        )
        with reader as gps:
            for sample in gps:
                print(sample.line)
                print(sample.outcome.recognized)
                for error in sample.outcome.errors:
                    print(f"  {error}")
                print(datetime.now())
    except serial.SerialException as e:
        logger.error("Cannot open receiver: %s", e)
        return 1
    except EOFError as e:
        logger.error("Receiver stopped: %s", e)
        return 1
    except KeyboardInterrupt:
        print("\nStopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
