import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_goagent_home import get_goagent_home

# Prevent multiple handler installs
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(goagent_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified goagent logging.

    The level is applied on every call; the file handler is installed once.

    Args:
        goagent_home: Path to goagent home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR.
    """
    global _CONFIGURED

    root_logger = logging.getLogger("goagent")
    root_logger.setLevel(_LEVELS.get(level, logging.INFO))
    if _CONFIGURED:
        return

    if goagent_home is None:
        goagent_home = get_goagent_home()

    # Ensure directory exists
    goagent_home.mkdir(parents=True, exist_ok=True)
    log_file = goagent_home / "goagent.log"

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True

