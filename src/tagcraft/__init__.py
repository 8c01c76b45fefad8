"""tagcraft - cursor-anchored shorthand expansion for markup.

Type ``section.hero#top[data-x]`` next to the cursor and get back the span to
replace and an editor snippet with numbered tab stops.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagcraft.config import LoggingConfig

__version__ = "0.1.0"

_logging_configured = False


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging to the console and, optionally, a rotating file.

    Only the first call has an effect.

    Args:
        config: Logging settings. Defaults to ``get_settings().logging``.
    """
    global _logging_configured
    if _logging_configured:
        return
    _logging_configured = True

    if config is None:
        from tagcraft.config import get_settings

        config = get_settings().logging

    level = logging.getLevelName(config.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if not config.file_logging:
        return

    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = config.log_dir / f"tagcraft.{os.getpid()}.log"

    # File handler - detailed logging with rotation (10MB, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)

    logging.info("Logging configured. Log file: %s", log_file.absolute())
