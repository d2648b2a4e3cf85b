"""Log sinks for the planner CLI.

Library modules only emit records through loguru's ``logger``. The entry point
calls ``setup_logger`` once; stdout is left alone so JSON reports stay
machine-readable.
"""

import sys
from pathlib import Path

from loguru import logger

from likes_planner.config.settings import Settings, settings

CONSOLE_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
DEBUG_CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(config: Settings | None = None, debug: bool = False) -> None:
    """Install the stderr sink and, when LOG_FILE is set, a rotating file sink.

    Args:
        config: Settings to read level and file options from (module settings by default)
        debug: Force DEBUG level and show record origins on the console
    """
    config = config or settings
    level = "DEBUG" if debug else config.log_level

    logger.remove()
    logger.add(
        sys.stderr,
        format=DEBUG_CONSOLE_FORMAT if debug else CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=config.log_rotation,
            retention=config.log_retention,
            encoding="utf-8",
        )

    logger.debug(f"Logging at {level} (file: {config.log_file or 'none'})")
