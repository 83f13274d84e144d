"""Logging for editor-adapters, driven by ``AdaptersConfig``.

Every module logs under the ``editor_adapters`` namespace (``.selector``,
``.notifications.adapter``, ...). Handlers hang off that one parent; the
children only propagate.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from editor_adapters.config import AdaptersConfig

NAMESPACE = "editor_adapters"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
MAX_BYTES = 1024 * 1024
BACKUP_COUNT = 2


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(config: AdaptersConfig | None = None) -> logging.Logger:
    """Attach the file and console handlers for ``config`` and return the namespace logger.

    The file gets everything at ``config.log_level``. The console only sees
    warnings, so resolution and fallback chatter stays out of the terminal.
    Calling again only re-applies the level; handlers are attached once.
    """
    config = config or AdaptersConfig()
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(_level(config.log_level))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(str(log_path), maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug("Logging to %s at %s", log_path, config.log_level.upper())
    return logger
