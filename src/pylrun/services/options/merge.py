# src/pylrun/services/options/merge.py
from __future__ import annotations
from typing import Any, Mapping, Optional

from pylrun.errors import TypeMismatch
from pylrun.services.options.registry import Cardinality, cardinality


def _as_sequence(value: Any) -> list:
    # scalar -> [scalar]; mapping -> [(k, v), ...]; list/tuple -> elements, list pairs become tuples
    if isinstance(value, Mapping):
        return [(k, v) for k, v in value.items()]
    if isinstance(value, (list, tuple)):
        return [tuple(item) if isinstance(item, list) else item for item in value]
    return [value]


def merge_options(*options: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """
    Merge partial option sets left to right into a new dict.

    - ``None`` partials are skipped
    - a ``None`` value deletes the key
    - multi-valued options (``fd``, ``env``, ``bindfs``, ...) accumulate,
      mappings are flattened into ``(key, value)`` pairs
    - everything else is overwritten, unknown keys included

    >>> merge_options({"fd": [4, 6]}, {"fd": 5}, {"fd": 7})
    {'fd': [4, 6, 5, 7]}
    >>> merge_options({"network": True, "bindfs": {"/a": "/b"}}, {"network": None, "bindfs": {"/c": "/d"}})
    {'bindfs': [('/a', '/b'), ('/c', '/d')]}

    Inputs are never modified.
    """
    for pos, option in enumerate(options):
        if option is not None and not isinstance(option, Mapping):
            raise TypeMismatch(pos, option)

    result: dict[str, Any] = {}
    for option in options:
        if option is None:
            continue
        for key, value in option.items():
            if value is None:
                result.pop(key, None)
            elif cardinality(key) is Cardinality.MULTI:
                result[key] = [*result.get(key, ()), *_as_sequence(value)]
            else:
                result[key] = value
    return result
