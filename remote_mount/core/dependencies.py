"""
Lookup of external binaries on the execution search path
"""
import os
import shutil
from typing import Iterable, List, Optional

import structlog

logger = structlog.get_logger()


def resolve_binary(name: str) -> Optional[str]:
    """
    Resolve a binary name to its canonical absolute path

    Args:
        name: Binary name as it would be typed in a shell

    Returns:
        Absolute path with symlinks resolved, or None if not in $PATH
    """
    location = shutil.which(name)
    if location is None:
        return None
    return os.path.realpath(location)


def missing_dependencies(names: Iterable[str]) -> List[str]:
    """Return the names that cannot be resolved in $PATH, in input order"""
    names = list(names)
    logger.debug("Checking for missing dependencies", dependencies=names)
    return [name for name in names if shutil.which(name) is None]
