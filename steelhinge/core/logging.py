"""
Logging setup for steelhinge.

Library modules log through ``loguru.logger`` directly. Applications (the CLI,
scripts) call :func:`configure_logging` once at start-up.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} | {message}"


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Reset loguru sinks and install console (and optionally file) output.

    Args:
        level: Minimum level for the console sink
        log_file: Optional path of a rotating log file (always DEBUG)
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=CONSOLE_FORMAT)
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path),
            level="DEBUG",
            format=FILE_FORMAT,
            rotation="5 MB",
            retention=10,
            backtrace=False,
            diagnose=False,
        )
