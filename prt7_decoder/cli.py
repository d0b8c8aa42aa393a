"""
Command line entry point for the PRT-7 decoder.

Usage examples:
  prt7-decode                              # /dev/ttyUSB0 at 9600 baud, 14 lines
  prt7-decode --port /dev/ttyACM0 --baud 115200 --frames 40
  prt7-decode --file capture.txt --format json
  prt7-decode --config prt7.yaml --strict-rotation --log-level DEBUG
"""

import argparse
import sys
from typing import Any, Optional

from .config.loader import ConfigLoader
from .config.validation import SUPPORTED_BAUDRATES, SUPPORTED_LOG_LEVELS, SUPPORTED_OUTPUT_FORMATS
from .errors import ConfigurationError, LineSourceError
from .io.output import MessagePrinter
from .io.sources import open_line_source
from .logging.config import configure_logging, get_logger
from .session import DecoderSession

EXIT_OK = 0
EXIT_SOURCE_UNAVAILABLE = 1
EXIT_BAD_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="prt7-decode",
        description="Decode a PRT-7 frame stream from a serial port or a capture file",
    )
    p.add_argument("--port", help="Serial device (default: /dev/ttyUSB0)")
    p.add_argument("--baud", type=int, choices=SUPPORTED_BAUDRATES, help="Baud rate (default: 9600)")
    p.add_argument("--timeout", type=float, help="Read timeout in seconds (default: block)")
    p.add_argument("--file", help="Read frames from a capture file instead of the serial port")
    p.add_argument("--frames", type=int, help="Number of lines to read (default: 14)")
    p.add_argument("--all", action="store_true", help="Read until the source is exhausted")
    p.add_argument("--strict-rotation", action="store_true", default=None,
                   help="Skip MAP frames whose data is not an integer")
    p.add_argument("--no-reset", action="store_true", help="Do not pulse DTR after opening the port")
    p.add_argument("--config", help="YAML configuration file")
    p.add_argument("--format", choices=SUPPORTED_OUTPUT_FORMATS, help="Output format (default: pretty)")
    p.add_argument("--log-level", type=str.upper, choices=SUPPORTED_LOG_LEVELS, help="Log level")
    p.add_argument("--json-logs", action="store_true", default=None, help="Emit logs as JSON")
    return p


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Translate explicit command line flags into configuration overrides."""
    serial: dict[str, Any] = {}
    session: dict[str, Any] = {}
    logging_cfg: dict[str, Any] = {}
    output: dict[str, Any] = {}

    if args.port is not None:
        serial["port"] = args.port
    if args.baud is not None:
        serial["baudrate"] = args.baud
    if args.timeout is not None:
        serial["timeout"] = args.timeout
    if args.no_reset:
        serial["reset_device"] = False
    if args.frames is not None:
        session["frame_budget"] = args.frames
    if args.strict_rotation is not None:
        session["strict_rotation"] = args.strict_rotation
    if args.log_level is not None:
        logging_cfg["level"] = args.log_level
    if args.json_logs is not None:
        logging_cfg["format_json"] = args.json_logs
    if args.format is not None:
        output["format"] = args.format

    sections = {"serial": serial, "session": session, "logging": logging_cfg, "output": output}
    return {name: values for name, values in sections.items() if values}


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader.create(args.config).load(overrides_from_args(args))
    except ConfigurationError as e:
        print(f"prt7-decode: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
    )
    logger = get_logger(__name__)

    session = DecoderSession(strict_rotation=config.session.strict_rotation)
    max_lines = None if args.all else config.session.frame_budget

    try:
        source = open_line_source(config, args.file)
    except LineSourceError as e:
        logger.error("Line source unavailable", error=str(e))
        result = session.finish()
        MessagePrinter(config.output.format).print_result(result)
        return EXIT_SOURCE_UNAVAILABLE

    logger.info("Waiting for frames", source=source.name, max_lines=max_lines)
    with source:
        result = session.run(source, max_lines=max_lines)

    MessagePrinter(config.output.format).print_result(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
