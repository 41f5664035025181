# src/pylrun/services/options/expand.py
from __future__ import annotations
from typing import Any, Mapping

from pylrun.errors import ArgumentError
from pylrun.services.options.registry import Cardinality, cardinality


def flag_name(key: str) -> str:
    return "--" + key.replace("_", "-")


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def expand_option(key: str, value: Any) -> list[str]:
    """Command-line tokens for one option; unknown keys give nothing."""
    kind = cardinality(key)
    if kind is None:
        return []
    flag = flag_name(key)
    if kind is Cardinality.SINGLE:
        return [flag, _scalar(value)]
    out: list[str] = []
    for item in value:
        if isinstance(item, (list, tuple)):
            out += [flag, *map(_scalar, item)]
        else:
            out += [flag, _scalar(item)]
    return out


def expand_options(options: Mapping[str, Any]) -> list[str]:
    """
    Render a merged option set as lrun arguments.

    >>> expand_options({"chdir": "/tmp", "bindfs": [("/a", "/b"), ("/c", "/d")], "fd": [2, 3]})
    ['--chdir', '/tmp', '--bindfs', '/a', '/b', '--bindfs', '/c', '/d', '--fd', '2', '--fd', '3']
    """
    if not isinstance(options, Mapping):
        raise ArgumentError("expect options to be a mapping")
    args: list[str] = []
    for key, value in options.items():
        if cardinality(key) is Cardinality.MULTI and not isinstance(value, (list, tuple)):
            raise ArgumentError(f"option {key!r} should hold a list, use merge_options() first")
        args += expand_option(key, value)
    return args
