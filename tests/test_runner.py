"""Runner: immutable option builder."""

from __future__ import annotations

import pytest

from pylrun.errors import ArgumentError
from pylrun.services.runner import Runner


@pytest.fixture
def runner(recording_sandbox) -> Runner:
    return Runner({"uid": 2, "fd": 2, "tmpfs": {"/tmp": 0}}, sandbox=recording_sandbox)


def test_creates_a_runner():
    assert Runner().options == {}
    assert Runner({"uid": 2, "gid": 3}).options == {"uid": 2, "gid": 3}


def test_rejects_non_mapping():
    with pytest.raises(TypeError):
        Runner([("uid", 2)])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Runner().where("uid=3")  # type: ignore[arg-type]


def test_where_changes_options(runner):
    assert runner.where({"uid": 3}).options["uid"] == 3


def test_where_adds_options(runner):
    assert runner.where({"fd": 3}).options["fd"] == [2, 3]
    assert runner.where({"fd": [4, 5]}).options["fd"] == [2, 4, 5]
    assert runner.where({"tmpfs": {"/usr/bin": 1}}).options["tmpfs"] == [("/tmp", 0), ("/usr/bin", 1)]


def test_where_deletes_options(runner):
    assert "uid" not in runner.where({"uid": None}).options
    assert "fd" not in runner.where({"fd": None}).options
    assert runner.where({"fd": None, "uid": None, "tmpfs": None}).options == {}


def test_where_does_not_change_original(runner):
    snapshot = runner.options
    before = dict(snapshot)
    runner.where({"uid": 5, "fd": None, "tmpfs": {"/a": 2}, "gid": 6})
    runner.fd(9).env({"A": "1"})
    assert runner.options is snapshot
    assert dict(runner.options) == before


def test_options_are_read_only(runner):
    with pytest.raises(TypeError):
        runner.options["uid"] = 7  # type: ignore[index]


def test_shortcuts(runner):
    assert runner.uid(1000) == runner.where({"uid": 1000})
    assert runner.max_cpu_time(1).tmpfs({"/tmp": 2**20}).chdir("/tmp").options["tmpfs"] == [("/tmp", 0), ("/tmp", 2**20)]
    assert runner.stdout("/tmp/out").options["stdout"] == "/tmp/out"
    assert "uid" not in runner.uid(None).options


def test_unknown_shortcut(runner):
    with pytest.raises(AttributeError):
        runner.truncate(10)
    with pytest.raises(AttributeError):
        runner.max_disk(1)


def test_run_passes_options(runner, recording_sandbox):
    result = runner.env({"A": 42}).run(["sh", "-c", "echo $A"])
    assert result.exitcode == 0
    command, options = recording_sandbox.calls[-1]
    assert command == ["sh", "-c", "echo $A"]
    assert options == {"uid": 2, "fd": [2], "tmpfs": [("/tmp", 0)], "env": [("A", 42)]}


def test_from_profile(recording_sandbox):
    runner = Runner.from_profile("judge", sandbox=recording_sandbox)
    assert runner.options["network"] is False
    assert Runner.from_profile("mine", {"mine": {"uid": 7}}).options == {"uid": 7}
    with pytest.raises(ArgumentError):
        Runner.from_profile("nope")


def test_with_sandbox_keeps_options(runner, recording_sandbox):
    other = runner.with_sandbox(recording_sandbox)
    assert other == runner
    assert other is not runner
