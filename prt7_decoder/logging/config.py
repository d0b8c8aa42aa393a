"""
Centralized logging configuration for the PRT-7 decoder.

All components log through structlog on top of the standard library logging
module so that frame skips, state transitions and serial link events share
one format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Logs go to stderr so the decoded message owns stdout
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_session_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the decoder session subsystem."""
    return structlog.get_logger(name, subsystem="decoder_session")


def get_link_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the serial link subsystem."""
    return structlog.get_logger(name, subsystem="serial_link")


def log_frame_skipped(
    logger: FilteringBoundLogger,
    outcome: str,
    raw_line: Optional[str],
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a frame that was rejected and skipped.

    Args:
        logger: Structlog logger instance
        outcome: Classification of the rejection (malformed, unknown_command, ...)
        raw_line: Line as received from the source
        reason: Human readable reason for the rejection
        context: Additional context data
    """
    bound_logger = logger.bind(
        outcome=outcome,
        raw_line=raw_line,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Frame skipped")


def log_state_transition(
    logger: FilteringBoundLogger,
    session_id: str,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a session state transition with standardized format.

    Args:
        logger: Structlog logger instance
        session_id: ID of the decoding session
        from_state: Current state
        to_state: Target state
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        session_id=session_id,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")
