import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def find_locales_dir() -> Optional[Path]:
    # The 'locales' directory ships as package data of pydaglp.common
    locales_path = Path(__file__).parent.parent / "locales"
    if locales_path.is_dir():
        logger.debug(f"Found locales directory at: {locales_path}")
        return locales_path

    logger.warning("Could not find the 'locales' directory.")
    return None
