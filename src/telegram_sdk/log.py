"""
Logging setup for applications and the CLI.

Library modules only create loggers; nothing is configured on import.
"""

import logging
from typing import Union

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=FORMAT)
    logging.getLogger("telegram_sdk").setLevel(level)
    # httpx logs full request URLs, which contain the bot token
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
