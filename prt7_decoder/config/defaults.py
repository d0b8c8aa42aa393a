"""Default configuration parameters for the PRT-7 decoder."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SerialParams:
    """Serial link parameters for the frame transmitter."""
    port: str = "/dev/ttyUSB0"
    baudrate: int = 9600
    bytesize: int = 8
    parity: str = "N"                         # N, E, O, M, S
    stopbits: int = 1
    timeout: Optional[float] = None           # None blocks until a line arrives
    settle_seconds: float = 2.0               # Wait after open and after reset
    reset_device: bool = True                 # Pulse DTR so the board restarts its message
    reset_pulse_seconds: float = 0.1
    max_line_length: int = 100                # Longer lines are truncated


@dataclass(frozen=True)
class SessionParams:
    """Decoding session parameters."""
    frame_budget: int = 14                    # Lines read per session (one full transmit cycle)
    strict_rotation: bool = False             # Reject non-numeric MAP data instead of rotating by 0


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class OutputParams:
    """Decoded message output parameters."""
    format: str = "pretty"                    # pretty, json


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    serial: SerialParams
    session: SessionParams
    logging: LoggingParams
    output: OutputParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        serial=SerialParams(),
        session=SessionParams(),
        logging=LoggingParams(),
        output=OutputParams(),
    )
