"""
Serial device discovery.

The X410 exposes several interfaces through one Digilent USB bridge; the
management console is the one whose by-id name carries the "if02" marker.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from x410ctl.core.exceptions import (
    AmbiguousDeviceError,
    DeviceDirectoryError,
    DeviceNotFoundError,
)

if TYPE_CHECKING:
    from x410ctl.core.config import SerialConfig

logger = logging.getLogger(__name__)


def list_candidates(by_id_dir: Path, prefix: str, marker: str) -> list[str]:
    """
    List device paths that match the discovery rule.

    Args:
        by_id_dir: Directory of persistent serial device names
        prefix: Required name prefix (USB vendor/product string)
        marker: Substring the name must contain (interface number)

    Returns:
        Sorted list of full device paths

    Raises:
        DeviceDirectoryError: If the directory cannot be read
    """
    try:
        names = os.listdir(by_id_dir)
    except OSError as e:
        raise DeviceDirectoryError(str(by_id_dir), e.strerror or str(e)) from e

    matches = [
        str(Path(by_id_dir) / name)
        for name in sorted(names)
        if name.startswith(prefix) and marker in name
    ]
    logger.debug(f"{len(matches)} of {len(names)} entries in {by_id_dir} match")
    return matches


def discover_device(serial_config: "SerialConfig") -> str:
    """
    Locate the single X410 console device.

    Raises:
        DeviceNotFoundError: No entry matched
        AmbiguousDeviceError: More than one entry matched
        DeviceDirectoryError: Directory could not be read
    """
    matches = list_candidates(
        serial_config.by_id_dir,
        serial_config.device_prefix,
        serial_config.interface_marker,
    )

    if not matches:
        raise DeviceNotFoundError(str(serial_config.by_id_dir))
    if len(matches) > 1:
        raise AmbiguousDeviceError(matches)

    logger.info(f"Discovered serial device {matches[0]}")
    return matches[0]
