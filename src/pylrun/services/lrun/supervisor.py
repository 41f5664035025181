# src/pylrun/services/lrun/supervisor.py
from __future__ import annotations
import os, shlex, subprocess, tempfile, time
from contextlib import ExitStack, suppress
from typing import IO, Any, Mapping, Optional

from pylrun.config import const
from pylrun.domain import Result
from pylrun.errors import ArgumentError, InvocationFailure
from pylrun.ports import Command, EventBus, Sandbox
from pylrun.services.eventbus import emit
from pylrun.services.lrun.locate import ensure_available, lrun_path
from pylrun.services.lrun.report import parse_report
from pylrun.services.options import expand_options, merge_options
from pylrun.services.settings import Settings

_SOURCE = "lrun.supervisor"


def split_command(command: Optional[Command]) -> list[str]:
    """Command as argv; a string is split like a POSIX shell would."""
    if command is None:
        raise ArgumentError("command is empty")
    if isinstance(command, str):
        argv = shlex.split(command)
    elif isinstance(command, (bytes, bytearray)):
        raise ArgumentError("command should be a str or a sequence of str, not bytes")
    else:
        argv = [str(c) for c in command]
    if not argv:
        raise ArgumentError("command is empty")
    return argv


def _tempfile(stack: ExitStack, kind: str) -> IO[bytes]:
    fh = tempfile.NamedTemporaryFile(prefix=f"{const.TEMP_PREFIX}.{os.getpid()}.", suffix=f".{kind}", delete=False)
    stack.callback(_discard, fh)
    return fh


def _discard(fh: IO[bytes]) -> None:
    with suppress(OSError):
        fh.close()
    with suppress(OSError):
        os.unlink(fh.name)


def _read_capture(fh: Optional[IO[bytes]], limit: int) -> Optional[bytes]:
    if fh is None:
        return None
    fh.seek(0)
    return fh.read(limit)


def _child_setup(report_fd: int, close_stdin: bool):
    # runs in the child between fork and exec
    def _pe():
        if close_stdin:
            with suppress(OSError):
                os.close(0)
        if report_fd == const.REPORT_FD:
            os.set_inheritable(report_fd, True)
        else:
            os.dup2(report_fd, const.REPORT_FD)

    return _pe


class LrunSupervisor(Sandbox):
    """
    Runs one command under lrun and waits for it.

    stdout/stderr of the program go to temp files unless ``options`` redirect them;
    lrun's report arrives through a pipe attached as fd 3. Temp files are removed
    on every exit path, caller-supplied paths are left alone.

    Events on ``bus`` (if any): lrun.start / lrun.end / lrun.failed.
    """

    def __init__(self, *, settings: Optional[Settings] = None, bus: Optional[EventBus] = None):
        self.settings = settings or Settings()
        self.bus = bus

    def command_line(self, command: Optional[Command], options: Optional[Mapping[str, Any]] = None) -> list[str]:
        """Full argv that :meth:`run` would spawn (without checking availability)."""
        binary = self.settings.lrun_path or lrun_path() or const.LRUN_BINARY
        return [binary, *expand_options(self._normalize(options)), *split_command(command)]

    @staticmethod
    def _normalize(options: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        if options is not None and not isinstance(options, Mapping):
            raise ArgumentError("expect options to be a mapping")
        return merge_options(options)

    def run(self, command: Optional[Command], options: Optional[Mapping[str, Any]] = None) -> Result:
        argv = split_command(command)
        opts = self._normalize(options)
        binary = ensure_available(self.settings.lrun_path)
        truncate = self.settings.truncate if opts.get("truncate") is None else int(opts["truncate"])
        if truncate < 0:
            raise ArgumentError(f"truncate should not be negative, got {truncate}")
        command_line = [binary, *expand_options(opts), *argv]

        with ExitStack() as stack:
            stdin = stack.enter_context(open(opts["stdin"], "rb")) if opts.get("stdin") else None
            if opts.get("stdout"):
                stdout, tmp_out = stack.enter_context(open(opts["stdout"], "wb")), None
            else:
                stdout = tmp_out = _tempfile(stack, "out")
            if opts.get("stderr"):
                stderr, tmp_err = stack.enter_context(open(opts["stderr"], "wb")), None
            else:
                stderr = tmp_err = _tempfile(stack, "err")

            rfd, wfd = os.pipe()
            channel = stack.enter_context(os.fdopen(rfd, "rb"))

            emit(self.bus, "lrun.start", {"argv": command_line}, _SOURCE)
            started_at = time.time()
            try:
                # fds >= 3 are non-inheritable by default; close_fds would also drop REPORT_FD
                proc = subprocess.Popen(
                    command_line,
                    stdin=stdin,
                    stdout=stdout,
                    stderr=stderr,
                    close_fds=False,
                    preexec_fn=_child_setup(wfd, close_stdin=stdin is None),
                )
            finally:
                os.close(wfd)

            # EOF once lrun (and everything it spawned) closed fd 3
            report_text = channel.read().decode("utf-8", errors="replace")
            returncode = proc.wait()
            duration = time.time() - started_at

            if returncode != 0:
                err = _read_capture(tmp_err, truncate)
                err_text = err.decode("utf-8", errors="replace") if err else None
                signal = -returncode if returncode < 0 else None
                emit(
                    self.bus,
                    "lrun.failed",
                    {"argv": command_line, "returncode": returncode, "stderr": err_text, "duration": duration},
                    _SOURCE,
                )
                raise InvocationFailure(None if signal else returncode, signal=signal, stderr=err_text)

            report = parse_report(report_text, self.settings.exceed_match)
            result = Result.from_report(report, _read_capture(tmp_out, truncate), _read_capture(tmp_err, truncate))

        emit(
            self.bus,
            "lrun.end",
            {
                "argv": command_line,
                "exitcode": result.exitcode,
                "signal": result.signal,
                "exceed": result.exceed.value if result.exceed else None,
                "memory": result.memory,
                "cputime": result.cputime,
                "duration": duration,
            },
            _SOURCE,
        )
        return result
