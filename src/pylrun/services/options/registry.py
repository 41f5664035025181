# src/pylrun/services/options/registry.py
from __future__ import annotations
from enum import Enum
from typing import Optional


class Cardinality(Enum):
    SINGLE = 1  # last write wins
    MULTI = 2  # values accumulate across merges


_S, _M = Cardinality.SINGLE, Cardinality.MULTI

# options understood by the lrun binary; only these become command-line flags
LRUN_OPTIONS: dict[str, Cardinality] = {
    "max_cpu_time": _S,
    "max_real_time": _S,
    "max_memory": _S,
    "max_output": _S,
    "max_nprocess": _S,
    "max_rtprio": _S,
    "max_nfile": _S,
    "max_stack": _S,
    "isolate_process": _S,
    "basic_devices": _S,
    "reset_env": _S,
    "network": _S,
    "chroot": _S,
    "chdir": _S,
    "nice": _S,
    "umask": _S,
    "uid": _S,
    "gid": _S,
    "interval": _S,
    "cgname": _S,
    "bindfs": _M,
    "cgroup_option": _M,
    "tmpfs": _M,
    "env": _M,
    "fd": _M,
    "group": _M,
    "cmd": _M,
}

# consumed by the supervisor itself, survive merging but never reach the command line
CAPTURE_OPTIONS: tuple[str, ...] = ("stdin", "stdout", "stderr", "truncate")

# names that get a Runner shortcut: runner.uid(1000) == runner.where({"uid": 1000})
ACCESSOR_NAMES: frozenset[str] = frozenset(("stdin", "stdout", "stderr", *LRUN_OPTIONS))


def cardinality(name: str) -> Optional[Cardinality]:
    """Cardinality of a registered option, ``None`` if lrun does not know it."""
    return LRUN_OPTIONS.get(name)


def is_flag(name: str) -> bool:
    return name in LRUN_OPTIONS
