"""
Core components for x410ctl.

Provides configuration, logging setup, and the exception hierarchy.
"""

from x410ctl.core.config import Config, SerialConfig, load_config
from x410ctl.core.exceptions import (
    AmbiguousDeviceError,
    DeviceDirectoryError,
    DeviceNotFoundError,
    DiscoveryError,
    PowerStateParseError,
    SerialIOError,
    UnknownPowerStateError,
    X410Error,
)
from x410ctl.core.logging import setup_logging

__all__ = [
    "Config",
    "SerialConfig",
    "load_config",
    "setup_logging",
    "X410Error",
    "DiscoveryError",
    "DeviceNotFoundError",
    "AmbiguousDeviceError",
    "DeviceDirectoryError",
    "SerialIOError",
    "PowerStateParseError",
    "UnknownPowerStateError",
]
