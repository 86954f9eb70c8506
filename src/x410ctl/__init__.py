"""
USRP X410 control utility (x410ctl).

Drives the X410 management console over its USB serial interface:
device discovery, power state queries, and power button/reboot commands.
"""

__version__ = "0.1.0"
