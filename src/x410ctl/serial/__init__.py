"""
Serial access for x410ctl.

Handles discovery of the X410 console device node and the single
command/response exchange with its firmware.
"""

from x410ctl.serial.channel import SerialChannel, normalize_command, send_command
from x410ctl.serial.discovery import discover_device, list_candidates

__all__ = [
    "discover_device",
    "list_candidates",
    "SerialChannel",
    "normalize_command",
    "send_command",
]
