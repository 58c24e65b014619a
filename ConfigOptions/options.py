"""
Option container for ConfigOptions.

This module implements the Options class: a mutable mapping of named
configuration values with shallow and deep merging, and loading from and
writing to option files.

Values are classified into three kinds that drive the deep merge:
- SEQUENCE: lists and tuples, appended to the existing list
- MAPPING: any mapping (including Options), merged one level deep
- SCALAR: everything else, overwritten
"""

import copy
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ConfigOptions import files
from ConfigOptions.cache import OptionFileCache, get_option_cache
from ConfigOptions.defaults import DEFAULT_SOURCE_LABEL
from ConfigOptions.exceptions import MergeConflictError
from ConfigOptions.serializer import parse_options, serialize
from ConfigOptions.utils.logging import get_logger


class ValueKind(Enum):
    """Kind of an option value, as seen by the deep merge."""
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> ValueKind:
    """
    Classify an option value.

    Strings and bytes are scalars even though they are sequences in Python.

    Examples:
        >>> kind_of(["a", "b"])
        <ValueKind.SEQUENCE: 'sequence'>
        >>> kind_of("ab")
        <ValueKind.SCALAR: 'scalar'>
    """
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


class Options(MutableMapping):
    """
    A configuration hash with merging and option file support.

    Options behaves like a dict: ``options["mood"]``, ``"mood" in options``,
    iteration and comparison with any mapping all work. Layered configuration
    is built by seeding defaults, loading option files and merging explicit
    overrides on top.

    Merging is done in place. Deep merging appends sequences and merges
    nested mappings one level deep; it does not handle self-referential
    structures, so ``options.deepmerge(options)`` is unsupported.

    Attributes:
        cache (OptionFileCache): Cache used by load_files()
        logger: The logger instance

    Examples:
        >>> options = Options({"verbose": 1, "moods": ["happy", "sad"]})
        >>> options.deepmerge({"moods": ["sardonic"]})["moods"]
        ['happy', 'sad', 'sardonic']
    """

    def __init__(self, initial: Optional[Mapping] = None,
                 cache: Optional[OptionFileCache] = None) -> None:
        """
        Create an option container.

        Args:
            initial (Mapping, optional): Options to start with. The mapping is
                copied, not adopted.
            cache (OptionFileCache, optional): File cache for load_files().
                Defaults to the process-wide cache.
        """
        self._options: Dict[str, Any] = {}
        self.cache = cache if cache is not None else get_option_cache()
        self.logger = get_logger(__name__)
        self.merge(initial)

    # Mapping protocol

    def __getitem__(self, key: str) -> Any:
        return self._options[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._options[key] = value

    def __delitem__(self, key: str) -> None:
        del self._options[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._options!r})"

    # Accessors

    def set(self, key: str, value: Any) -> None:
        """Set a single option."""
        self._options[key] = value

    def options(self, option: Any = None, value: Any = None) -> Any:
        """
        Multi-purpose accessor.

        - ``options(mapping)`` merges the mapping, same as ``merge(mapping)``
        - ``options("key")`` returns the option value (None if unset)
        - ``options("key", value)`` sets the option and returns the value
        - ``options()`` returns the container itself

        A value of None never overwrites; use set() to store None.
        """
        if isinstance(option, Mapping):
            return self.merge(option)
        if option:
            if value is not None:
                self._options[option] = value
            return self._options.get(option)
        return self

    def clone(self) -> 'Options':
        """
        Create a clone of this container.

        Only the top-level mapping is copied. Nested lists and mappings are
        shared with the original, so mutating one in place on the clone is
        visible through the original too. Use deepclone() for a fully
        independent copy.
        """
        clone = self.__class__(cache=self.cache)
        clone._options = dict(self._options)
        return clone

    def deepclone(self) -> 'Options':
        """Create a clone that shares no mutable values with this container."""
        return copy.deepcopy(self)

    def __copy__(self) -> 'Options':
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'Options':
        # The file cache is shared, never copied
        clone = self.__class__(cache=self.cache)
        memo[id(self)] = clone
        clone._options = copy.deepcopy(self._options, memo)
        return clone

    def as_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the options as a plain dict."""
        return dict(self._options)

    # Merging

    def merge(self, option: Any) -> Optional['Options']:
        """
        Merge a mapping into the options, overwriting existing keys.

        Args:
            option (Mapping): Options to merge

        Returns:
            The container, or None (with nothing changed) when ``option`` is
            not a mapping
        """
        if not isinstance(option, Mapping):
            if option is not None:
                self.logger.debug(f"Merge skipped, not a mapping: {type(option).__name__}")
            return None
        for key, value in option.items():
            self._options[key] = value
        return self

    def deepmerge(self, option: Any) -> Optional['Options']:
        """
        Merge a mapping into the options, combining nested values.

        For each incoming key:
        - a new key is inserted as-is
        - a sequence is appended to the existing list
        - a mapping is merged into the existing mapping one level deep
          (its own nested values overwrite, they are not merged further)
        - any other value overwrites

        Example:
            >>> options = Options({"moods": ["happy", "sad", "angry"]})
            >>> options.deepmerge({"moods": ["sardonic", "twisted"]})["moods"]
            ['happy', 'sad', 'angry', 'sardonic', 'twisted']

        Args:
            option (Mapping): Options to merge

        Returns:
            The container, or None (with nothing changed) when ``option`` is
            not a mapping

        Raises:
            MergeConflictError: If an incoming sequence or mapping meets an
                existing value it cannot be merged into. Nothing is changed
                in that case.
        """
        if not isinstance(option, Mapping):
            if option is not None:
                self.logger.debug(f"Deep merge skipped, not a mapping: {type(option).__name__}")
            return None

        plan: List[Tuple[str, ValueKind, Any]] = []
        for key, value in option.items():
            kind = kind_of(value) if key in self._options else ValueKind.SCALAR
            self._check_mergeable(key, kind)
            plan.append((key, kind, value))

        for key, kind, value in plan:
            if kind is ValueKind.SEQUENCE:
                self._append_sequence(key, value)
            elif kind is ValueKind.MAPPING:
                self._merge_mapping(key, value)
            else:
                self._options[key] = value
        return self

    def _check_mergeable(self, key: str, kind: ValueKind) -> None:
        existing = self._options.get(key)
        if existing is None or kind is ValueKind.SCALAR:
            return
        if kind is ValueKind.SEQUENCE and isinstance(existing, (list, tuple)):
            return
        if kind is ValueKind.MAPPING and isinstance(existing, MutableMapping):
            return
        raise MergeConflictError(
            f"Can't merge {kind.value} into option '{key}' of type {type(existing).__name__}",
            context={"key": key, "incoming": kind.value, "existing": type(existing).__name__},
        )

    def _append_sequence(self, key: str, value: Any) -> None:
        existing = self._options.get(key)
        if existing is None:
            self._options[key] = list(value)
        elif isinstance(existing, tuple):
            self._options[key] = list(existing) + list(value)
        else:
            existing.extend(value)

    def _merge_mapping(self, key: str, value: Mapping) -> None:
        existing = self._options.get(key)
        if existing is None:
            self._options[key] = dict(value)
            return
        for sub_key, sub_value in value.items():
            existing[sub_key] = sub_value

    # Serialization

    def serialize(self) -> str:
        """
        Render the options as YAML text.

        Nested values are written out in full. Feeding the text back to
        deserialize() reproduces equal options.

        Raises:
            SerializationError: If a value has no YAML representation
        """
        return serialize(self)

    def deserialize(self, data: str, source: str = DEFAULT_SOURCE_LABEL) -> 'Options':
        """
        Parse YAML text and merge it into the options (shallow merge).

        Args:
            data (str): YAML document text
            source (str): Where the text came from, used in error messages

        Returns:
            The container

        Raises:
            DeserializationError: If the text is not a valid option document
        """
        self.merge(parse_options(data, source))
        return self

    # Option files

    def load_files(self, paths: Optional[files.PathSpec] = None) -> int:
        """
        Load options from one or more option files.

        By default uses the ``optionfile`` option. If it is a list, all files
        are read in order. Missing files are ignored. Parsed files are cached,
        so loading a path a second time does not touch the disk.

        Example:
            >>> options["optionfile"] = ["/etc/myapp.yml", "/home/me/.myapp.yml"]
            >>> options.load_files()

        Returns:
            int: Number of files read from disk (cache hits are not counted)

        Raises:
            DeserializationError: If a file is not a valid option document
            FileOpenError: If an existing file cannot be read
            MergeConflictError: If a file's values conflict with the options
        """
        return files.load_files(self, paths, cache=self.cache)

    def write_to_file(self, path: Optional[files.PathSpec] = None) -> 'Options':
        """
        Write the options to an option file.

        By default uses the ``optionfile`` option. If the target is a list,
        the LAST file in the list is written.

        Example:
            >>> options.write_to_file("/path/to/optionfile.yml")

        Raises:
            FileOpenError: If the file cannot be opened for writing
            FileCloseError: If the file cannot be written completely
        """
        return files.write_to_file(self, path)
