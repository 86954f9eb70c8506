"""
Serial command channel for the X410 management console.

Each exchange opens the port, writes one newline-terminated ASCII command,
and reads two lines back. The firmware echoes the command on the first line
and answers on the second.
"""

import logging
from typing import Optional

import serial

from x410ctl.core.config import SerialConfig
from x410ctl.core.exceptions import SerialIOError

logger = logging.getLogger(__name__)


def normalize_command(command: str) -> bytes:
    """Terminate command with exactly one newline and encode it for the wire."""
    return (command.removesuffix("\n") + "\n").encode("ascii")


def _decode_line(line: bytes) -> str:
    return line.decode("ascii", errors="replace").rstrip("\r\n")


class SerialChannel:
    """
    One-shot command/response access to a serial device.

    The port is held only for the duration of a single send() call.
    """

    def __init__(
        self,
        address: str,
        serial_config: Optional[SerialConfig] = None,
        verbose: bool = False,
    ):
        """
        Initialize serial channel.

        Args:
            address: Device node path (e.g. /dev/serial/by-id/usb-...)
            serial_config: Port parameters; defaults to 115200 8N1, blocking reads
            verbose: Emit traffic diagnostics through the module logger
        """
        self.address = address
        self.serial_config = serial_config or SerialConfig()
        self.verbose = verbose

    def _open(self) -> serial.Serial:
        cfg = self.serial_config
        try:
            return serial.Serial(
                port=self.address,
                baudrate=cfg.baud_rate,
                bytesize=cfg.data_bits,
                parity=serial.PARITY_NONE,
                stopbits=cfg.stop_bits,
                timeout=cfg.read_timeout,
            )
        except (serial.SerialException, OSError, ValueError) as e:
            # ValueError covers port parameters pyserial rejects
            raise SerialIOError(self.address, "open", str(e)) from e

    def _readline(self, port: serial.Serial) -> bytes:
        # An empty or unterminated read means end of stream, not an error
        try:
            return port.readline()
        except (serial.SerialException, OSError) as e:
            raise SerialIOError(self.address, "read", str(e)) from e

    def send(self, command: str) -> str:
        """
        Send a command and return the device's response line.

        Args:
            command: ASCII command, with or without a trailing newline

        Returns:
            Response text without its line terminator

        Raises:
            SerialIOError: If the port cannot be opened, written, or read
        """
        payload = normalize_command(command)
        sent = payload.decode("ascii").rstrip("\n")

        port = self._open()
        try:
            if self.verbose:
                logger.info(f"Sending '{sent}' command to {self.address}")

            try:
                port.write(payload)
            except (serial.SerialException, OSError) as e:
                raise SerialIOError(self.address, "write", str(e)) from e

            echo = _decode_line(self._readline(port))
            if self.verbose:
                logger.info(f"Echo: {echo!r}")
                if echo != sent:
                    logger.warning(
                        f"First line {echo!r} is not an echo of '{sent}'; "
                        "firmware may have stopped echoing commands"
                    )

            response = _decode_line(self._readline(port))
            if self.verbose:
                logger.info(f"Response: {response!r}")
            return response
        finally:
            port.close()


def send_command(
    address: str,
    command: str,
    serial_config: Optional[SerialConfig] = None,
    verbose: bool = False,
) -> str:
    """Send a single command to the device at address and return its response."""
    return SerialChannel(address, serial_config, verbose).send(command)
