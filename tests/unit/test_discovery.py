"""Unit tests for serial device discovery."""

import pytest

from x410ctl.core.config import SerialConfig
from x410ctl.core.exceptions import (
    AmbiguousDeviceError,
    DeviceDirectoryError,
    DeviceNotFoundError,
    DiscoveryError,
)
from x410ctl.serial.discovery import discover_device, list_candidates

PREFIX = "usb-Digilent_Digilent_USB_Device_"
CONSOLE = f"{PREFIX}2516351A2B3C-if02-port0"
JTAG = f"{PREFIX}2516351A2B3C-if00-port0"


def _touch(directory, *names):
    for name in names:
        (directory / name).touch()


class TestListCandidates:
    """Tests for list_candidates."""

    def test_filters_by_prefix_and_marker(self, tmp_path):
        """Test only entries with both prefix and marker are listed."""
        _touch(
            tmp_path,
            CONSOLE,
            JTAG,
            "usb-FTDI_FT232R_USB_UART_A1-if02-port0",
        )

        result = list_candidates(tmp_path, PREFIX, "if02")

        assert result == [str(tmp_path / CONSOLE)]

    def test_sorted(self, tmp_path):
        """Test candidates come back sorted by name."""
        second = f"{PREFIX}B-if02-port0"
        first = f"{PREFIX}A-if02-port0"
        _touch(tmp_path, second, first)

        result = list_candidates(tmp_path, PREFIX, "if02")

        assert result == [str(tmp_path / first), str(tmp_path / second)]

    def test_empty_directory(self, tmp_path):
        """Test empty directory yields no candidates."""
        assert list_candidates(tmp_path, PREFIX, "if02") == []

    def test_missing_directory(self, tmp_path):
        """Test unreadable directory raises DeviceDirectoryError."""
        missing = tmp_path / "by-id"

        with pytest.raises(DeviceDirectoryError) as exc_info:
            list_candidates(missing, PREFIX, "if02")

        assert exc_info.value.directory == str(missing)
        assert str(missing) in str(exc_info.value)


class TestDiscoverDevice:
    """Tests for discover_device."""

    def test_single_match(self, tmp_path):
        """Test exactly one match returns its path."""
        _touch(tmp_path, CONSOLE, JTAG)
        config = SerialConfig(by_id_dir=tmp_path)

        assert discover_device(config) == f"{tmp_path}/{CONSOLE}"

    def test_no_match(self, tmp_path):
        """Test zero matches raises DeviceNotFoundError."""
        _touch(tmp_path, JTAG)
        config = SerialConfig(by_id_dir=tmp_path)

        with pytest.raises(DeviceNotFoundError):
            discover_device(config)

    def test_multiple_matches(self, tmp_path):
        """Test two matches raises AmbiguousDeviceError listing both."""
        other = f"{PREFIX}99887766AABB-if02-port0"
        _touch(tmp_path, CONSOLE, other)
        config = SerialConfig(by_id_dir=tmp_path)

        with pytest.raises(AmbiguousDeviceError) as exc_info:
            discover_device(config)

        assert len(exc_info.value.matches) == 2
        assert "--addr" in str(exc_info.value)

    def test_errors_are_distinct(self, tmp_path):
        """Test not-found and ambiguous errors are different kinds."""
        assert not issubclass(DeviceNotFoundError, AmbiguousDeviceError)
        assert not issubclass(AmbiguousDeviceError, DeviceNotFoundError)
        assert issubclass(DeviceNotFoundError, DiscoveryError)
        assert issubclass(AmbiguousDeviceError, DiscoveryError)

    def test_custom_rule(self, tmp_path):
        """Test prefix and marker come from config."""
        _touch(tmp_path, "usb-Custom_Bridge_1-if01-port0")
        config = SerialConfig(
            by_id_dir=tmp_path,
            device_prefix="usb-Custom_Bridge_",
            interface_marker="if01",
        )

        assert discover_device(config).endswith("usb-Custom_Bridge_1-if01-port0")
