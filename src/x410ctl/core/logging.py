"""Logging setup for x410ctl, driven by explicit config values."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from x410ctl.core.config import Config


def setup_logging(config: "Config") -> None:
    if config.verbose:
        lvl = logging.INFO
    else:
        lvl = getattr(logging, str(config.log_level).upper(), logging.WARNING)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(lvl)
