"""
Power control module for x410ctl.

Provides power state queries and power button/reboot control for the X410.
"""

from x410ctl.power.base import PowerController, PowerState
from x410ctl.power.x410 import X410Controller, parse_power_info

__all__ = [
    "PowerController",
    "PowerState",
    "X410Controller",
    "parse_power_info",
]
