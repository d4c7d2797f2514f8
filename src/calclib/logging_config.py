"""
Logging setup for calclib.

The library itself only emits records through loguru; sinks are configured
here and only by entry points such as the CLI.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def setup_logging(level: str = "WARNING", log_file: Optional[Union[str, Path]] = None) -> None:
    """Replace the default loguru sink with a stderr sink at `level`.

    When `log_file` is given, a DEBUG-level file sink is added as well.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, level="DEBUG")
