from __future__ import annotations
from typing import Any, Mapping, Optional, Protocol, Sequence, Union

from pylrun.domain.types import Result

Command = Union[str, Sequence[str]]


class Sandbox(Protocol):
    def run(self, command: Command, options: Optional[Mapping[str, Any]] = None) -> Result: ...
