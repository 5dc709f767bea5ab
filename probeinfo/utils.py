"""Utility functions for probeinfo"""

import logging
import shutil
from typing import Iterable

logger = logging.getLogger(__name__)

def check_dependencies(required: Iterable[str]) -> bool:
    """Check that every required executable can be found on PATH"""
    for cmd in required:
        if shutil.which(cmd) is None:
            logger.error("Required dependency not found: %s", cmd)
            return False
    return True
