"""Colour console logging for the ``chartjs`` logger.

The library itself only logs at DEBUG level and never installs handlers on
import; :func:`configure_logging` is called by the command line.
"""

import logging
from typing import Optional

from .config import LOGLEVEL_ENV, get_env

LOG_FORMAT = "%(asctime)s %(levelname)-16s %(name)-32s [%(link)s] \n%(message)s\n"


class ColorFormatter(logging.Formatter):
    """Colour the level, logger name and source location of each record.

    The record handed in is left untouched; colouring happens on a copy so
    other handlers of the same record see plain text.
    """

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",  # cyan
        "INFO": "\033[32m",  # green
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",  # red
        "CRITICAL": "\033[41m",  # red background
    }
    NAME_COLOR = "\033[90m"
    LINK_COLOR = "\033[34m"
    RESET = "\033[0m"

    def _paint(self, color: str, text: str) -> str:
        return f"{color}{text}{self.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        colored = logging.makeLogRecord(record.__dict__)
        level_color = self.LEVEL_COLORS.get(record.levelname)
        if level_color:
            colored.levelname = self._paint(level_color, record.levelname)
        colored.name = self._paint(self.NAME_COLOR, record.name)
        colored.link = self._paint(self.LINK_COLOR, f"{record.pathname}:{record.lineno}")
        return super().format(colored)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Install a colour handler on the ``chartjs`` logger.

    The level defaults to ``$LOGLEVEL`` or INFO. Calling it again replaces the
    handler instead of stacking a second one.
    """
    level = (level or get_env(LOGLEVEL_ENV) or "INFO").upper()

    logger = logging.getLogger("chartjs")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(ColorFormatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logger.debug(f"Package logger initialized with level: {logging.getLevelName(logger.level)}")
    return logger
