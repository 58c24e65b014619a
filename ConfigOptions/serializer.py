"""
Serialization of option containers to and from YAML text.

Option files are plain YAML documents whose root is a mapping. Loading uses
``yaml.safe_load``, so an option file can only describe data; it never runs
code. JSON documents are valid YAML and load as well.
"""

from collections.abc import Mapping
from typing import Any, Dict

import yaml

from ConfigOptions.defaults import DEFAULT_SOURCE_LABEL, YAML_DUMP_SETTINGS
from ConfigOptions.exceptions import DeserializationError, SerializationError


def expand(value: Any, _active: Dict[int, Any] = None) -> Any:
    """
    Convert a value tree into plain dicts and lists.

    Nested mappings (including Options containers) become dicts and tuples
    become lists. Every occurrence of a shared object is expanded into its
    own copy. A mapping or sequence that contains itself is the exception:
    the back-reference points at the copy being built, which YAML then
    writes as an anchor and alias.
    """
    if _active is None:
        _active = {}

    if isinstance(value, Mapping):
        if id(value) in _active:
            return _active[id(value)]
        plain: Any = {}
        _active[id(value)] = plain
        for key, item in value.items():
            plain[key] = expand(item, _active)
        del _active[id(value)]
        return plain

    if isinstance(value, (list, tuple)):
        if id(value) in _active:
            return _active[id(value)]
        plain = []
        _active[id(value)] = plain
        plain.extend(expand(item, _active) for item in value)
        del _active[id(value)]
        return plain

    return value


def serialize(options: Mapping) -> str:
    """
    Render a mapping of options as YAML text.

    Args:
        options: An Options container or any other mapping

    Returns:
        str: A YAML document that parse_options() turns back into an equal mapping
            (tuples are written as sequences and come back as lists)

    Raises:
        SerializationError: If a value has no YAML representation
    """
    try:
        return yaml.safe_dump(expand(options), **YAML_DUMP_SETTINGS)
    except yaml.YAMLError as e:
        raise SerializationError(
            f"Can't serialize options: {e}",
            cause=e,
        ) from e


def parse_options(text: str, source: str = DEFAULT_SOURCE_LABEL) -> Dict[str, Any]:
    """
    Parse YAML text into a mapping of options.

    Args:
        text: YAML document text
        source: Human-readable origin of the text, used in error messages

    Returns:
        Dict[str, Any]: The parsed mapping. Empty text yields an empty dict.

    Raises:
        DeserializationError: If the text is not valid YAML or its root is
            not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeserializationError(source, str(e), cause=e) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise DeserializationError(
            source,
            f"option root must be a mapping, got {type(data).__name__}",
        )

    return data
