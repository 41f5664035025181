# src/pylrun/domain/types.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class Exceed(str, Enum):
    """Which lrun limit the program hit."""

    TIME = "time"
    MEMORY = "memory"
    OUTPUT = "output"


@dataclass(frozen=True, slots=True)
class Report:
    memory: int
    cputime: float
    exceed: Optional[Exceed]
    exitcode: int
    signal: Optional[int]


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of one lrun invocation.

    ``memory`` is peak memory in bytes, ``cputime`` is CPU time in seconds.
    ``signal`` is set only if the program was terminated by a signal.
    ``stdout`` / ``stderr`` are ``None`` when redirected to a file by the caller.
    """

    memory: int
    cputime: float
    exceed: Optional[Exceed]
    exitcode: int
    signal: Optional[int] = None
    stdout: Optional[bytes] = None
    stderr: Optional[bytes] = None

    @property
    def crashed(self) -> bool:
        return self.signal is not None

    @property
    def clean(self) -> bool:
        return self.exitcode == 0 and not self.crashed

    @classmethod
    def from_report(cls, report: Report, stdout: Optional[bytes] = None, stderr: Optional[bytes] = None) -> "Result":
        return cls(
            memory=report.memory,
            cputime=report.cputime,
            exceed=report.exceed,
            exitcode=report.exitcode,
            signal=report.signal,
            stdout=stdout,
            stderr=stderr,
        )


@dataclass(frozen=True, slots=True)
class Event:
    type: str
    payload: Mapping[str, Any]
    source: str
    ts: float
