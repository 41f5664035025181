# src/pylrun/services/runner.py
from __future__ import annotations
import functools
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pylrun.domain import Result
from pylrun.ports import Command, Sandbox
from pylrun.services.options import ACCESSOR_NAMES, merge_options
from pylrun.services.profiles import get_profile


class Runner:
    """
    Immutable option builder on top of a :class:`~pylrun.ports.Sandbox`.

    Every call returns a new Runner, the receiver is never changed:

        runner = Runner().max_cpu_time(1).tmpfs({"/tmp": 2**20}).chdir("/tmp")
        runner.options
        # {'max_cpu_time': 1, 'tmpfs': [('/tmp', 1048576)], 'chdir': '/tmp'}
        runner.max_cpu_time(None).options
        # {'tmpfs': [('/tmp', 1048576)], 'chdir': '/tmp'}
        runner.env({"A": "Hello"}).run(["sh", "-c", "echo $A"]).stdout
        # b'Hello\\n'

    Shortcuts exist for stdin/stdout/stderr and every lrun option:
    ``runner.uid(1000)`` is ``runner.where({"uid": 1000})``.
    """

    __slots__ = ("_options", "_sandbox")

    def __init__(self, options: Optional[Mapping[str, Any]] = None, *, sandbox: Optional[Sandbox] = None):
        self._options = MappingProxyType(merge_options(options))
        self._sandbox = sandbox

    @classmethod
    def from_profile(cls, name: str, profiles: Optional[Mapping[str, Mapping[str, Any]]] = None, *, sandbox: Optional[Sandbox] = None) -> "Runner":
        if profiles is None:
            from pylrun.bootstrap import default_profiles

            profiles = default_profiles()
        return cls(get_profile(name, profiles), sandbox=sandbox)

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    @property
    def sandbox(self) -> Sandbox:
        if self._sandbox is None:
            from pylrun.bootstrap import default_sandbox

            return default_sandbox()
        return self._sandbox

    def where(self, options: Mapping[str, Any]) -> "Runner":
        """New Runner with ``options`` merged over the current ones."""
        return Runner(merge_options(self._options, options), sandbox=self._sandbox)

    def with_sandbox(self, sandbox: Sandbox) -> "Runner":
        return Runner(self._options, sandbox=sandbox)

    def _set(self, name: str, value: Any) -> "Runner":
        return self.where({name: value})

    def __getattr__(self, name: str):
        if name in ACCESSOR_NAMES:
            return functools.partial(self._set, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def run(self, command: Command) -> Result:
        return self.sandbox.run(command, self._options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Runner):
            return NotImplemented
        return dict(self._options) == dict(other._options)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Runner({dict(self._options)!r})"
