"""Decoding the report lrun writes to fd 3."""

from __future__ import annotations

import pytest

from pylrun.domain import Exceed, Result
from pylrun.errors import DecodeError
from pylrun.services.lrun import parse_exceed, parse_report

_REPORT = "MEMORY 262144\nCPUTIME 0.002\nREALTIME 0.010\nSIGNALED 0\nEXITCODE 3\nTERMSIG 0\nEXCEED none\n"


def test_parse_report():
    report = parse_report(_REPORT)
    assert report.memory == 262144
    assert report.cputime == pytest.approx(0.002)
    assert report.exitcode == 3
    assert report.signal is None
    assert report.exceed is None


def test_signal_only_when_signaled():
    report = parse_report("MEMORY 1\nCPUTIME 0\nSIGNALED 1\nEXITCODE 0\nTERMSIG 9\nEXCEED none\n")
    assert report.signal == 9
    assert parse_report("SIGNALED 0\nTERMSIG 9\nEXCEED none").signal is None


def test_missing_numbers_default_to_zero():
    report = parse_report("EXCEED none\nMEMORY lots\n")
    assert (report.memory, report.cputime, report.exitcode, report.signal) == (0, 0.0, 0, None)


def test_missing_exceed_is_an_error():
    with pytest.raises(DecodeError):
        parse_report("MEMORY 1\n")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("none", None),
        ("CPU_TIME", Exceed.TIME),
        ("REAL_TIME", Exceed.TIME),
        ("real_time", Exceed.TIME),
        ("OUTPUT", Exceed.OUTPUT),
        ("MEMORY", Exceed.MEMORY),
    ],
)
def test_parse_exceed_substring(value, expected):
    assert parse_exceed(value) is expected


def test_parse_exceed_unexpected():
    with pytest.raises(DecodeError) as exc:
        parse_exceed("DISK")
    assert exc.value.value == "DISK"
    assert "DISK" in str(exc.value)


def test_parse_exceed_exact():
    assert parse_exceed("CPU_TIME", match="exact") is Exceed.TIME
    assert parse_exceed("none", match="exact") is None
    with pytest.raises(DecodeError):
        parse_exceed("CPU_TIME_SOFT", match="exact")
    assert parse_exceed("CPU_TIME_SOFT") is Exceed.TIME


def test_result_flags():
    report = parse_report(_REPORT)
    assert not Result.from_report(report).clean
    ok = Result(memory=1, cputime=0.0, exceed=None, exitcode=0)
    assert ok.clean and not ok.crashed
    killed = Result(memory=1, cputime=0.0, exceed=None, exitcode=0, signal=11)
    assert killed.crashed and not killed.clean
