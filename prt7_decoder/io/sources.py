"""
Sources of raw PRT-7 lines.

A line source hands the decoder one text line at a time and signals the end
of input with None. Read failures raise LineSourceError so the session can
end with a recorded reason instead of crashing.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

import serial

from ..config.defaults import DefaultConfig, SerialParams
from ..errors import LineSourceError, SerialLinkError
from ..logging.config import get_link_logger

logger = get_link_logger(__name__)

PARITY_MAP = {
    "N": serial.PARITY_NONE,
    "E": serial.PARITY_EVEN,
    "O": serial.PARITY_ODD,
    "M": serial.PARITY_MARK,
    "S": serial.PARITY_SPACE,
}

STOPBITS_MAP = {
    1: serial.STOPBITS_ONE,
    2: serial.STOPBITS_TWO,
}

BYTESIZE_MAP = {
    5: serial.FIVEBITS,
    6: serial.SIXBITS,
    7: serial.SEVENBITS,
    8: serial.EIGHTBITS,
}


class LineSource(ABC):
    """Base class for anything that yields raw protocol lines."""

    name: str = "source"

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """
        Return the next line without its terminator.

        Returns:
            The line text, or None when the input is exhausted or timed out

        Raises:
            LineSourceError: If the underlying device or file fails
        """

    def close(self) -> None:
        """Release the underlying resource."""

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class IterableLineSource(LineSource):
    """Lines from any in-memory iterable, e.g. a test harness."""

    name = "iterable"

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)

    def read_line(self) -> Optional[str]:
        line = next(self._lines, None)
        if line is None:
            return None
        return line.rstrip("\r\n")


class FileLineSource(LineSource):
    """Lines from a capture file, one frame per line. Blank lines are skipped."""

    def __init__(self, path: Union[str, Path], encoding: str = "ascii"):
        self.path = Path(path)
        self.name = str(self.path)
        try:
            self._file = self.path.open("r", encoding=encoding, errors="replace", newline="")
        except OSError as e:
            raise LineSourceError(f"Cannot open {self.path}: {e}", source=self.name) from e

    def read_line(self) -> Optional[str]:
        try:
            for raw in self._file:
                line = raw.rstrip("\r\n")
                if line:
                    return line
        except OSError as e:
            raise LineSourceError(f"Read from {self.path} failed: {e}", source=self.name) from e
        return None

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


class SerialLineSource(LineSource):
    """
    Lines from a serial device.

    The device is opened 8N1 by default, flushed, and given a settle period.
    When reset_device is set the DTR line is pulsed so that the attached
    board restarts its transmission from the first frame. Lines are
    terminated by LF or CR; empty lines between terminators are skipped and
    characters past max_line_length are dropped.
    """

    def __init__(self, params: SerialParams, port: Optional[serial.Serial] = None):
        self.params = params
        self.name = params.port
        self.logger = logger.bind(port=params.port)

        if port is None:
            port = self._open()
        self._port = port

        try:
            self.logger.info("Serial port open", baudrate=params.baudrate)

            if params.settle_seconds:
                time.sleep(params.settle_seconds)

            if params.reset_device:
                self.reset_device()
        except Exception:
            self._port.close()
            raise

    def _open(self) -> serial.Serial:
        try:
            port = serial.Serial(
                port=self.params.port,
                baudrate=self.params.baudrate,
                bytesize=BYTESIZE_MAP[self.params.bytesize],
                parity=PARITY_MAP[self.params.parity],
                stopbits=STOPBITS_MAP[self.params.stopbits],
                timeout=self.params.timeout,
                xonxoff=False,
                rtscts=False,
            )
        except (serial.SerialException, OSError) as e:
            self.logger.error(
                "Cannot open serial port",
                error=str(e),
                hint="check the cable and the device permissions"
            )
            raise SerialLinkError(
                f"Cannot open {self.params.port}: {e}",
                port=self.params.port
            ) from e

        try:
            port.reset_input_buffer()
            port.reset_output_buffer()
        except (serial.SerialException, OSError) as e:
            port.close()
            raise SerialLinkError(f"Flush of {self.params.port} failed: {e}",
                                  port=self.params.port) from e
        return port

    def reset_device(self) -> None:
        """Pulse DTR to restart the transmitter, then flush and settle."""
        self.logger.info("Resetting device")
        try:
            self._port.dtr = False
            time.sleep(self.params.reset_pulse_seconds)
            self._port.dtr = True
            time.sleep(self.params.reset_pulse_seconds)
            self._port.reset_input_buffer()
            self._port.reset_output_buffer()
        except (serial.SerialException, OSError) as e:
            raise SerialLinkError(f"Device reset failed: {e}", port=self.params.port) from e

        if self.params.settle_seconds:
            time.sleep(self.params.settle_seconds)
        self.logger.info("Device reset complete")

    def read_line(self) -> Optional[str]:
        chars: list[str] = []

        while True:
            try:
                byte = self._port.read(1)
            except (serial.SerialException, OSError) as e:
                self.logger.error("Serial read failed", error=str(e))
                raise SerialLinkError(f"Read from {self.params.port} failed: {e}",
                                      port=self.params.port) from e

            if not byte:
                # Read timeout; a partial line is discarded
                if chars:
                    self.logger.warning("Read timeout mid-line", partial="".join(chars))
                return None

            char = byte.decode("ascii", errors="replace")
            if char in "\r\n":
                if chars:
                    return "".join(chars)
                continue

            if len(chars) < self.params.max_line_length:
                chars.append(char)

    def close(self) -> None:
        if self._port.is_open:
            self._port.close()
            self.logger.info("Serial port closed")


def open_line_source(config: DefaultConfig,
                     file_path: Optional[Union[str, Path]] = None) -> LineSource:
    """Open a file source when a capture file is given, otherwise the serial port."""
    if file_path is not None:
        return FileLineSource(file_path)
    return SerialLineSource(config.serial)
