# src/pylrun/services/profiles.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from pylrun.errors import ArgumentError, TypeMismatch

# named partial option sets, merged like any other options
DEFAULT_PROFILES: dict[str, dict[str, Any]] = {
    "default": {},
    "judge": {"isolate_process": True, "basic_devices": True, "network": False, "reset_env": True, "max_nprocess": 1},
    "compile": {"max_cpu_time": 10, "max_real_time": 20, "max_memory": 512 * 2**20, "max_output": 16 * 2**20},
}


def load_profiles(path: str | Path) -> dict[str, dict[str, Any]]:
    """
    Read profiles from YAML:

        judge-strict:
          max_cpu_time: 1
          env: {LANG: C}
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise TypeMismatch(0, data)
    out: dict[str, dict[str, Any]] = {}
    for pos, (name, options) in enumerate(data.items()):
        options = {} if options is None else options
        if not isinstance(options, Mapping):
            raise TypeMismatch(pos, options)
        out[str(name)] = dict(options)
    return out


def resolve_profiles(profiles_file: Optional[Path] = None, extra: Optional[Mapping[str, Mapping[str, Any]]] = None) -> dict[str, dict[str, Any]]:
    profiles = {k: dict(v) for k, v in DEFAULT_PROFILES.items()}
    if profiles_file is not None:
        profiles.update(load_profiles(profiles_file))
    if extra:
        profiles.update({k: dict(v) for k, v in extra.items()})
    return profiles


def get_profile(name: str, profiles: Optional[Mapping[str, Mapping[str, Any]]] = None) -> dict[str, Any]:
    table = profiles if profiles is not None else DEFAULT_PROFILES
    try:
        return dict(table[name])
    except KeyError:
        raise ArgumentError(f"unknown profile {name!r}, available: {', '.join(sorted(table))}") from None
