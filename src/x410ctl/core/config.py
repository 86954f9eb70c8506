"""
Configuration management for x410ctl.

Loads configuration from YAML files with environment variable overrides.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)


# Default configuration paths
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "x410ctl"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
SYSTEM_CONFIG_FILE = Path("/etc/x410ctl/config.yaml")

DEFAULT_BY_ID_DIR = "/dev/serial/by-id"
DEFAULT_DEVICE_PREFIX = "usb-Digilent_Digilent_USB_Device_"
DEFAULT_INTERFACE_MARKER = "if02"


@dataclass
class SerialConfig:
    """Serial port and discovery configuration."""

    by_id_dir: Path = field(default_factory=lambda: Path(DEFAULT_BY_ID_DIR))
    device_prefix: str = DEFAULT_DEVICE_PREFIX
    interface_marker: str = DEFAULT_INTERFACE_MARKER
    baud_rate: int = 115200
    data_bits: int = 8
    stop_bits: int = 1
    # None blocks until a full line arrives
    read_timeout: Optional[float] = None


@dataclass
class Config:
    """Main configuration for x410ctl."""

    serial: SerialConfig = field(default_factory=SerialConfig)
    address: Optional[str] = None
    log_level: str = "WARNING"
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        serial_data = data.get("serial") or {}
        if not isinstance(serial_data, dict):
            logger.warning(f"Ignoring non-mapping serial section: {serial_data!r}")
            serial_data = {}

        serial = SerialConfig(
            by_id_dir=Path(serial_data.get("by_id_dir", DEFAULT_BY_ID_DIR)),
            device_prefix=serial_data.get("device_prefix", DEFAULT_DEVICE_PREFIX),
            interface_marker=serial_data.get("interface_marker", DEFAULT_INTERFACE_MARKER),
            baud_rate=serial_data.get("baud_rate", 115200),
            data_bits=serial_data.get("data_bits", 8),
            stop_bits=serial_data.get("stop_bits", 1),
            read_timeout=serial_data.get("read_timeout"),
        )

        return cls(
            serial=serial,
            address=data.get("address"),
            log_level=str(data.get("log_level") or "WARNING"),
            verbose=bool(data.get("verbose", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            "serial": {
                "by_id_dir": str(self.serial.by_id_dir),
                "device_prefix": self.serial.device_prefix,
                "interface_marker": self.serial.interface_marker,
                "baud_rate": self.serial.baud_rate,
                "data_bits": self.serial.data_bits,
                "stop_bits": self.serial.stop_bits,
                "read_timeout": self.serial.read_timeout,
            },
            "address": self.address,
            "log_level": self.log_level,
            "verbose": self.verbose,
        }


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Search order:
    1. Explicit path if provided
    2. X410CTL_CONFIG environment variable
    3. ~/.config/x410ctl/config.yaml
    4. /etc/x410ctl/config.yaml
    5. Default values

    Environment variable overrides:
    - X410CTL_ADDR: Override address
    - X410CTL_BY_ID_DIR: Override serial.by_id_dir
    - X410CTL_BAUD_RATE: Override serial.baud_rate
    - X410CTL_LOG_LEVEL: Override log_level

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Loaded configuration
    """
    if config_path:
        paths_to_try = [config_path]
    else:
        env_path = os.environ.get("X410CTL_CONFIG")
        paths_to_try = []
        if env_path:
            paths_to_try.append(Path(env_path))
        paths_to_try.extend([DEFAULT_CONFIG_FILE, SYSTEM_CONFIG_FILE])

    config_data = {}
    for path in paths_to_try:
        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Skipping unreadable config file {path}: {e}")
                continue
            if not isinstance(data, dict):
                logger.warning(f"Skipping config file {path}: top level is not a mapping")
                continue
            config_data = data
            break

    config = Config.from_dict(config_data)
    return _apply_env_overrides(config)


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config."""
    if "X410CTL_ADDR" in os.environ:
        config.address = os.environ["X410CTL_ADDR"] or None

    if "X410CTL_BY_ID_DIR" in os.environ:
        config.serial.by_id_dir = Path(os.environ["X410CTL_BY_ID_DIR"])

    if "X410CTL_BAUD_RATE" in os.environ:
        try:
            config.serial.baud_rate = int(os.environ["X410CTL_BAUD_RATE"])
        except ValueError:
            pass

    if "X410CTL_LOG_LEVEL" in os.environ:
        config.log_level = os.environ["X410CTL_LOG_LEVEL"]

    return config


def dump_config(config: Config) -> str:
    """Render configuration as YAML text."""
    return yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False)
