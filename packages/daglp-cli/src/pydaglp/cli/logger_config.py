import logging
import sys
from typing import Optional

from .config import LOG_LEVEL


def setup_logging(level: Optional[str] = None):
    root_logger = logging.getLogger()
    root_logger.setLevel(level or LOG_LEVEL)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    return root_logger
