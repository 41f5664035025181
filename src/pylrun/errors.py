"""Error hierarchy shared by the option layer and the lrun supervisor."""

from __future__ import annotations

from typing import Optional


class LrunError(RuntimeError):
    """Base class for all pylrun errors."""


class ArgumentError(LrunError, ValueError):
    """Raised on a malformed command or option set (local precondition)."""


class TypeMismatch(LrunError, TypeError):
    """Raised when something other than a mapping is given as options."""

    def __init__(self, position: int, value: object) -> None:
        self.position = position
        self.value = value
        super().__init__(f"options should be a mapping (argument #{position}: got {type(value).__name__})")


class NotAvailable(LrunError):
    """Raised when the lrun executable cannot be located."""

    def __init__(self, binary: str, *, detail: Optional[str] = None) -> None:
        self.binary = binary
        message = f"{binary} not found in PATH. Please install lrun first."
        super().__init__(message if detail is None else f"{message} ({detail})")


class InvocationFailure(LrunError):
    """Raised when lrun itself exits abnormally.

    This is about the supervisor process only: the sandboxed program may exit
    non-zero or crash, which is reported through :class:`~pylrun.domain.types.Result`.
    """

    def __init__(self, returncode: Optional[int], *, signal: Optional[int] = None, stderr: Optional[str] = None) -> None:
        self.returncode = returncode
        self.signal = signal
        self.stderr = stderr
        status = f"killed by signal {signal}" if signal is not None else f"exit status {returncode}"
        message = f"lrun exits abnormally: {status}"
        if stderr:
            message = f"{message}. {stderr.strip()}"
        super().__init__(message)


class DecodeError(LrunError, ValueError):
    """Raised when the lrun report carries an unexpected value."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"unexpected {field} returned by lrun: {value!r}")


__all__ = [
    "LrunError",
    "ArgumentError",
    "TypeMismatch",
    "NotAvailable",
    "InvocationFailure",
    "DecodeError",
]
