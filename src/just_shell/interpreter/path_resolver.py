"""Search-path resolution for external commands.

The search path is read from the environment on every lookup, so a
changed PATH takes effect on the next command.
"""

import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


def split_search_path(path_value: Optional[str]) -> list[str]:
    """Split a colon-separated search path, keeping its order.

    An empty entry names the current directory, as in POSIX shells.
    """
    if not path_value:
        return []
    return [entry or "." for entry in path_value.split(":")]


def is_executable(path: str) -> bool:
    """Check if path is a regular file the current user may execute."""
    return os.path.isfile(path) and os.access(path, os.X_OK)


def find_executable(name: str, path_value: Optional[str]) -> Optional[str]:
    """Return the first search-path entry joined with name that is executable.

    Returns None when nothing matches or the search path is unset or empty.
    """
    for directory in split_search_path(path_value):
        candidate = os.path.join(directory, name)
        if is_executable(candidate):
            logger.debug("resolved %s to %s", name, candidate)
            return candidate
    logger.debug("%s not found on search path", name)
    return None


def resolve_command(name: str, env: Mapping[str, str]) -> Optional[str]:
    """Resolve a command name the way the shell runs it.

    A name containing a slash is a path and is not searched for.
    """
    if not name:
        return None
    if "/" in name:
        return name if is_executable(name) else None
    return find_executable(name, env.get("PATH"))
