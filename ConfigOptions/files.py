"""
Loading and writing option files.

``load_files`` reads option files in order and deep-merges each into a
container, going through an OptionFileCache so every path is read and parsed
at most once. ``write_to_file`` serializes a container to a single file.
Both default to the container's ``optionfile`` option when no path is given.
"""

import os
from typing import Any, List, Optional, Sequence, Union

from ConfigOptions.cache import OptionFileCache, get_option_cache
from ConfigOptions.defaults import (
    FILE_SOURCE_LABEL,
    OPTIONFILE_KEY,
    OPTION_FILE_ENCODING,
    VERBOSE_KEY,
)
from ConfigOptions.exceptions import FileCloseError, FileOpenError
from ConfigOptions.serializer import parse_options, serialize
from ConfigOptions.utils.logging import get_logger

# Get a logger for this module
logger = get_logger(__name__)

PathSpec = Union[str, "os.PathLike[str]", Sequence[Union[str, "os.PathLike[str]"]]]


def _as_path_list(paths: Any) -> List[Any]:
    if paths is None:
        return []
    if isinstance(paths, (list, tuple)):
        return list(paths)
    return [paths]


def read_option_file(path: Union[str, "os.PathLike[str]"]) -> str:
    """
    Read the full text of an option file.

    Raises:
        FileOpenError: If the file exists but cannot be read
    """
    try:
        with open(path, "r", encoding=OPTION_FILE_ENCODING) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOpenError(
            f"Couldn't open option file {os.fspath(path)}: {e}",
            context={"path": os.fspath(path)},
            cause=e,
        ) from e


def load_files(options, paths: Optional[PathSpec] = None,
               cache: Optional[OptionFileCache] = None,
               verbose: Optional[bool] = None) -> int:
    """
    Load option files into a container, in order.

    For every path: a cached path is deep-merged from the cache; a path that
    exists is read, parsed, deep-merged and cached; a missing path is
    skipped. A file is cached only once it has been merged. When verbose
    (by default the container's ``verbose`` option), each file read from
    disk is announced at INFO level.

    Args:
        options: The Options container to merge into
        paths: A path or ordered list of paths. Defaults to the container's
            ``optionfile`` option when empty.
        cache: The cache to use (default: the process-wide cache)
        verbose: Announce files read from disk. Defaults to the container's
            ``verbose`` option.

    Returns:
        int: Number of files read from disk. Cache hits are not counted.

    Raises:
        DeserializationError: If a file is not a valid option document
        FileOpenError: If an existing file cannot be read
        MergeConflictError: If a file's values conflict with the container

    Examples:
        >>> options = Options({"optionfile": ["/etc/app.yml", "~/.app.yml"]})
        >>> options.load_files()
        1
    """
    paths = paths or options.get(OPTIONFILE_KEY)
    if verbose is None:
        verbose = bool(options.get(VERBOSE_KEY))
    if cache is None:
        cache = get_option_cache()

    loaded = 0
    for path in _as_path_list(paths):
        cached = cache.get(path)
        if cached is not None:
            logger.debug(f"Using cached options for {os.fspath(path)}")
            options.deepmerge(cached)
            continue

        if not os.path.exists(path):
            logger.debug(f"Option file not found, skipping: {os.fspath(path)}")
            continue

        if verbose:
            logger.info(f"Loading options from {os.fspath(path)}")

        text = read_option_file(path)
        parsed = parse_options(text, FILE_SOURCE_LABEL.format(path=os.fspath(path)))
        options.deepmerge(parsed)
        cache.store(path, parsed)
        loaded += 1

    return loaded


def resolve_target(options, path: Optional[PathSpec] = None) -> Union[str, "os.PathLike[str]"]:
    """
    Pick the file a container should be written to.

    Uses ``path``, or the container's ``optionfile`` option when ``path`` is
    empty. When the result is a list, its last element is the target.

    Raises:
        FileOpenError: If no target is given or configured
    """
    target = path or options.get(OPTIONFILE_KEY)
    if isinstance(target, (list, tuple)):
        target = target[-1] if target else None
    if not target:
        raise FileOpenError(
            "Can't open option file: no target given and no optionfile option set",
        )
    return target


def write_to_file(options, path: Optional[PathSpec] = None):
    """
    Serialize a container and write it to an option file.

    The target is created or truncated. The container is serialized before
    the file is opened, so a serialization failure leaves the file as it was.

    Args:
        options: The Options container to write
        path: A path or ordered list of paths (the last one is written).
            Defaults to the container's ``optionfile`` option.

    Returns:
        The container, for chaining

    Raises:
        SerializationError: If a value cannot be serialized
        FileOpenError: If the target cannot be opened for writing
        FileCloseError: If writing or closing the target fails
    """
    target = resolve_target(options, path)
    data = serialize(options)

    try:
        handle = open(target, "w", encoding=OPTION_FILE_ENCODING)
    except OSError as e:
        raise FileOpenError(
            f"Can't open option file: {os.fspath(target)} for write: {e}",
            context={"path": os.fspath(target)},
            cause=e,
        ) from e

    try:
        try:
            handle.write(data)
        finally:
            handle.close()
    except OSError as e:
        raise FileCloseError(
            f"Error closing file: {os.fspath(target)}: {e}",
            context={"path": os.fspath(target)},
            cause=e,
        ) from e

    logger.debug(f"Wrote options to {os.fspath(target)}")
    return options
