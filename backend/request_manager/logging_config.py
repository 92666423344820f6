"""Root logger setup.

Every module logs through ``logging.getLogger(__name__)``; this module only
attaches the handlers and sets the level, once per process.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger unless it already has handlers.

    ``level`` is a level name (case insensitive); unknown names fall back to
    INFO. ``logfile`` (the ``LOG_FILE`` setting), when given, adds a UTF-8
    file handler next to the console handler.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # create_app() runs once per test module import as well
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
