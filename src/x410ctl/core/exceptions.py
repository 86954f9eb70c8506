"""
Exception hierarchy for x410ctl.

Every failure surfaced to the CLI derives from X410Error and carries a
human-readable message plus a context dict describing what was attempted.
"""

from typing import Any, Optional


class X410Error(Exception):
    """Base exception with error context."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


# --- Discovery ---

class DiscoveryError(X410Error):
    """Serial device could not be located automatically."""


class DeviceNotFoundError(DiscoveryError):
    """No serial device matched the discovery rule."""

    def __init__(self, directory: str, context: Optional[dict[str, Any]] = None):
        ctx = {"directory": directory, **(context or {})}
        super().__init__("no matching serial devices found", ctx)


class AmbiguousDeviceError(DiscoveryError):
    """More than one serial device matched the discovery rule."""

    def __init__(self, matches: list[str], context: Optional[dict[str, Any]] = None):
        self.matches = list(matches)
        ctx = {"matches": self.matches, **(context or {})}
        super().__init__(
            "multiple matching serial devices found. "
            "Please specify the address using --addr",
            ctx,
        )


class DeviceDirectoryError(DiscoveryError):
    """Discovery directory could not be read."""

    def __init__(self, directory: str, reason: str, context: Optional[dict[str, Any]] = None):
        self.directory = directory
        ctx = {"directory": directory, **(context or {})}
        super().__init__(f"error reading {directory}: {reason}", ctx)


# --- Serial I/O ---

class SerialIOError(X410Error):
    """Opening, writing to, or reading from the serial port failed."""

    def __init__(
        self,
        address: str,
        phase: str,
        reason: str,
        context: Optional[dict[str, Any]] = None,
    ):
        self.address = address
        self.phase = phase
        ctx = {"address": address, "phase": phase, **(context or {})}
        verb = {"open": "opening", "write": "writing to", "read": "reading from"}.get(phase, phase)
        super().__init__(f"error {verb} serial port {address}: {reason}", ctx)


# --- Power state parsing ---

class PowerStateParseError(X410Error):
    """Device response did not contain a usable power state."""

    def __init__(self, message: str, response: str = "", context: Optional[dict[str, Any]] = None):
        self.response = response
        ctx = {"response": response, **(context or {})}
        super().__init__(message, ctx)


class UnknownPowerStateError(PowerStateParseError):
    """Device reported a power state code with no known meaning."""

    def __init__(self, code: int, response: str = "", context: Optional[dict[str, Any]] = None):
        self.code = code
        ctx = {"code": code, **(context or {})}
        super().__init__(f"unknown power status: {code}", response, ctx)
