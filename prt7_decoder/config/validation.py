"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

SUPPORTED_BAUDRATES = (9600, 19200, 38400, 57600, 115200)
SUPPORTED_PARITIES = ("N", "E", "O", "M", "S")
SUPPORTED_STOPBITS = (1, 2)
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SUPPORTED_OUTPUT_FORMATS = ("pretty", "json")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_serial_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate serial link parameters."""
        errors = []

        if "port" in params:
            value = params["port"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="serial.port",
                    message="Must be a non-empty device path",
                    value=value
                ))

        if "baudrate" in params:
            value = params["baudrate"]
            if value not in SUPPORTED_BAUDRATES or not _is_int(value):
                errors.append(ValidationError(
                    field="serial.baudrate",
                    message=f"Must be one of {', '.join(map(str, SUPPORTED_BAUDRATES))}",
                    value=value
                ))

        if "parity" in params:
            value = params["parity"]
            if value not in SUPPORTED_PARITIES:
                errors.append(ValidationError(
                    field="serial.parity",
                    message=f"Must be one of {', '.join(SUPPORTED_PARITIES)}",
                    value=value
                ))

        if "stopbits" in params:
            value = params["stopbits"]
            if value not in SUPPORTED_STOPBITS or not _is_int(value):
                errors.append(ValidationError(
                    field="serial.stopbits",
                    message="Must be 1 or 2",
                    value=value
                ))

        if "timeout" in params:
            value = params["timeout"]
            if value is not None and (not _is_number(value) or value <= 0):
                errors.append(ValidationError(
                    field="serial.timeout",
                    message="Must be a positive number of seconds or null",
                    value=value
                ))

        for name in ("settle_seconds", "reset_pulse_seconds"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=f"serial.{name}",
                        message="Must be a non-negative number",
                        value=value
                    ))

        if "reset_device" in params:
            value = params["reset_device"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="serial.reset_device",
                    message="Must be a boolean",
                    value=value
                ))

        if "max_line_length" in params:
            value = params["max_line_length"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="serial.max_line_length",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_session_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate session parameters."""
        errors = []

        if "frame_budget" in params:
            value = params["frame_budget"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="session.frame_budget",
                    message="Must be a positive integer",
                    value=value
                ))

        if "strict_rotation" in params:
            value = params["strict_rotation"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="session.strict_rotation",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in SUPPORTED_LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(SUPPORTED_LOG_LEVELS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "serial" in config:
            errors.extend(ConfigValidator.validate_serial_params(config["serial"]))

        if "session" in config:
            errors.extend(ConfigValidator.validate_session_params(config["session"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "output" in config:
            value = config["output"].get("format")
            if value is not None and value not in SUPPORTED_OUTPUT_FORMATS:
                errors.append(ValidationError(
                    field="output.format",
                    message=f"Must be one of {', '.join(SUPPORTED_OUTPUT_FORMATS)}",
                    value=value
                ))

        return errors
