"""
Option file cache for ConfigOptions.

Parsed option files are memoized per path so that loading the same file
into several containers reads and parses it only once. Entries are never
refreshed or evicted: once a path is cached, later changes to the file on
disk are not seen until the cache is cleared.

Not thread-safe. Concurrent loads that share a cache need external locking.
"""

import copy
import os
from typing import Any, Dict, List, Optional, Union

from ConfigOptions.utils.logging import get_logger

PathLike = Union[str, "os.PathLike[str]"]

class OptionFileCache:
    """
    Mapping from option file path to its parsed contents.

    Paths are normalized to absolute paths, so a relative path and its
    absolute form share one entry. Stored values are private to the cache:
    ``get`` returns a deep copy, so a container that merges the value and
    later mutates it cannot change what the next load sees.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Dict[str, Any]] = {}
        self.logger = get_logger(__name__)

    @staticmethod
    def normalize(path: PathLike) -> str:
        """Return the cache key for a path."""
        return os.path.abspath(os.fspath(path))

    def __contains__(self, path: PathLike) -> bool:
        return self.normalize(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, path: PathLike) -> Optional[Dict[str, Any]]:
        """
        Get a copy of the parsed contents cached for a path.

        Args:
            path: Option file path

        Returns:
            A deep copy of the cached mapping, or None if the path is not cached
        """
        entry = self._entries.get(self.normalize(path))
        if entry is None:
            return None
        return copy.deepcopy(entry)

    def store(self, path: PathLike, value: Dict[str, Any]) -> None:
        """
        Cache the parsed contents of a path.

        The value is copied on the way in, so the caller may keep using
        (and mutating) the object it passed.
        """
        key = self.normalize(path)
        self._entries[key] = copy.deepcopy(value)
        self.logger.debug(f"Cached option file: {key}")

    def paths(self) -> List[str]:
        """Return the cached paths in the order they were first loaded."""
        return list(self._entries)

    def clear(self) -> None:
        """Drop every cached entry."""
        self._entries.clear()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._entries)} files)"


# Process-wide cache shared by every container that is not given its own
_option_cache = OptionFileCache()

def get_option_cache() -> OptionFileCache:
    """
    Get the process-wide option file cache.

    Returns:
        OptionFileCache: The cache used by containers created without one

    Examples:
        >>> from ConfigOptions.cache import get_option_cache
        >>> "/etc/myapp.yml" in get_option_cache()
        False
    """
    return _option_cache

def reset_option_cache() -> None:
    """Clear the process-wide option file cache."""
    _option_cache.clear()
