"""
USRP X410 power controller.

Talks to the X410 management console over its serial interface:
- Status:    powerinfo  -> "... power state <n> ..."
- Power On:  powerbtn
- Power Off: reboot
"""

import logging
import re
from typing import Optional

from x410ctl.core.config import SerialConfig
from x410ctl.core.exceptions import PowerStateParseError, UnknownPowerStateError
from x410ctl.power.base import PowerController, PowerState
from x410ctl.serial.channel import SerialChannel

logger = logging.getLogger(__name__)

POWER_STATE_PATTERN = re.compile(r"power state (\d+)", re.ASCII)

CMD_POWER_INFO = "powerinfo"
CMD_POWER_BUTTON = "powerbtn"
CMD_REBOOT = "reboot"


def parse_power_info(response: str) -> PowerState:
    """
    Extract the power state from a powerinfo response.

    Raises:
        PowerStateParseError: No power state in the response
        UnknownPowerStateError: Power state code is not recognized
    """
    match = POWER_STATE_PATTERN.search(response)
    if match is None:
        raise PowerStateParseError(
            "no power state found in the device response", response
        )

    try:
        code = int(match.group(1))
    except ValueError as e:
        raise PowerStateParseError(
            f"invalid power state value: {match.group(1)!r}", response
        ) from e

    try:
        return PowerState.from_code(code)
    except UnknownPowerStateError:
        raise UnknownPowerStateError(code, response) from None


class X410Controller(PowerController):
    """Power controller for a USRP X410 reached through its serial console."""

    def __init__(
        self,
        address: str,
        serial_config: Optional[SerialConfig] = None,
        verbose: bool = False,
    ):
        super().__init__(address)
        self.channel = SerialChannel(address, serial_config, verbose)

    def get_state(self) -> PowerState:
        """Query current power state."""
        state = parse_power_info(self.channel.send(CMD_POWER_INFO))
        logger.debug(f"{self.address} power state: {state.label}")
        return state

    def power_on(self) -> None:
        """Press the power button."""
        self.channel.send(CMD_POWER_BUTTON)

    def power_off(self) -> None:
        """Send reboot, which takes the device down."""
        self.channel.send(CMD_REBOOT)
