"""
pylrun - run programs under the ``lrun`` sandbox.

    import pylrun

    pylrun.run("echo hello")
    # Result(memory=262144, cputime=0.002, exceed=None, exitcode=0, signal=None, stdout=b'hello\\n', stderr=b'')

    pylrun.run("sleep 30", {"max_real_time": 1, "stderr": "/dev/null"}).exceed
    # <Exceed.TIME: 'time'>

The ``lrun`` binary itself is required and looked up in PATH.
"""

from __future__ import annotations
from typing import Any, Mapping, Optional

from pylrun.domain import Exceed, Result
from pylrun.errors import ArgumentError, DecodeError, InvocationFailure, LrunError, NotAvailable, TypeMismatch
from pylrun.ports import Command
from pylrun.services.lrun import LrunSupervisor, available
from pylrun.services.options import LRUN_OPTIONS, expand_options, merge_options
from pylrun.services.runner import Runner


def run(command: Command, options: Optional[Mapping[str, Any]] = None) -> Result:
    """Run ``command`` under lrun with ``options`` (see :func:`merge_options`)."""
    from pylrun.bootstrap import default_sandbox

    return default_sandbox().run(command, options)


__all__ = [
    "ArgumentError",
    "DecodeError",
    "Exceed",
    "InvocationFailure",
    "LRUN_OPTIONS",
    "LrunError",
    "LrunSupervisor",
    "NotAvailable",
    "Result",
    "Runner",
    "TypeMismatch",
    "available",
    "expand_options",
    "merge_options",
    "run",
]
