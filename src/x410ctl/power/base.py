"""
Base classes for power controllers.

Defines the power state enumeration and the abstract controller interface.
"""

from abc import ABC, abstractmethod
from enum import Enum

from x410ctl.core.exceptions import UnknownPowerStateError


class PowerState(Enum):
    """Power state values, numbered as the device firmware reports them."""

    OFF = 0
    ON = 3
    UNKNOWN = -1

    @property
    def label(self) -> str:
        """Lowercase name used for CLI output."""
        return self.name.lower()

    @classmethod
    def from_code(cls, code: int) -> "PowerState":
        """
        Map a firmware power state code to a PowerState.

        Raises:
            UnknownPowerStateError: If code is neither 0 nor 3
        """
        if code == cls.OFF.value:
            return cls.OFF
        if code == cls.ON.value:
            return cls.ON
        raise UnknownPowerStateError(code)


class PowerController(ABC):
    """Abstract base class for power controllers."""

    def __init__(self, address: str):
        """
        Initialize power controller.

        Args:
            address: Serial device path of the controlled unit
        """
        self.address = address

    @abstractmethod
    def power_on(self) -> None:
        """Request power on."""

    @abstractmethod
    def power_off(self) -> None:
        """Request power off."""

    @abstractmethod
    def get_state(self) -> PowerState:
        """
        Get current power state.

        Returns:
            PowerState enum value
        """

    def ensure_on(self) -> bool:
        """
        Power on unless already on.

        Returns:
            True if a power on request was sent, False if already on
        """
        if self.get_state() == PowerState.ON:
            return False
        self.power_on()
        return True

    def ensure_off(self) -> bool:
        """
        Power off unless already off.

        Returns:
            True if a power off request was sent, False if already off
        """
        if self.get_state() == PowerState.OFF:
            return False
        self.power_off()
        return True
