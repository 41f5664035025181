# tests/conftest.py
from __future__ import annotations
import os, stat, sys, tempfile
from pathlib import Path
from typing import Any, Mapping, Optional

import pytest

from pylrun.domain import Event, Result
from pylrun.services.eventbus import LocalEventBus
from pylrun.services.lrun import LrunSupervisor
from pylrun.services.settings import Settings

_FAKE_SOURCE = Path(__file__).resolve().parent / "fakes" / "fake_lrun.py"


# ---- Sandbox port that only records what it was asked to run ----
class RecordingSandbox:
    def __init__(self) -> None:
        self.calls: list[tuple[Any, dict]] = []

    def run(self, command, options: Optional[Mapping[str, Any]] = None) -> Result:
        self.calls.append((command, dict(options or {})))
        return Result(memory=1, cputime=0.0, exceed=None, exitcode=0, stdout=b"", stderr=b"")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("PYLRUN_") or key == "FAKE_LRUN_EXCEED":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def recording_sandbox() -> RecordingSandbox:
    return RecordingSandbox()


@pytest.fixture
def fake_lrun(tmp_path) -> Path:
    """Executable ``lrun`` look-alike (see tests/fakes/fake_lrun.py)."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    path = bin_dir / "lrun"
    path.write_text(f"#!{sys.executable}\n" + _FAKE_SOURCE.read_text(encoding="utf-8"), encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def bus() -> LocalEventBus:
    return LocalEventBus()


@pytest.fixture
def events(bus) -> list[Event]:
    seen: list[Event] = []
    bus.subscribe("lrun.", seen.append)
    return seen


@pytest.fixture
def capture_dir(tmp_path, monkeypatch) -> Path:
    """Directory where the supervisor's temp files end up."""
    d = tmp_path / "captures"
    d.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(d))
    return d


@pytest.fixture
def supervisor(fake_lrun, bus, capture_dir) -> LrunSupervisor:
    return LrunSupervisor(settings=Settings(lrun_path=str(fake_lrun)), bus=bus)
