# src/pylrun/services/lrun/report.py
from __future__ import annotations
from typing import Dict, Optional

from pylrun.config import const
from pylrun.domain import Exceed, Report
from pylrun.errors import DecodeError

# exact EXCEED values lrun writes
_EXACT_EXCEED = {
    "CPU_TIME": Exceed.TIME,
    "REAL_TIME": Exceed.TIME,
    "TIME": Exceed.TIME,
    "OUTPUT": Exceed.OUTPUT,
    "MEMORY": Exceed.MEMORY,
}


def _fields(text: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        key, _, value = line.partition(" ")
        out[key] = value.strip()
    return out


def _to_int(value: Optional[str]) -> int:
    try:
        return int(value or 0)
    except ValueError:
        return 0


def _to_float(value: Optional[str]) -> float:
    try:
        return float(value or 0)
    except ValueError:
        return 0.0


def parse_exceed(value: Optional[str], match: str = const.EXCEED_MATCH) -> Optional[Exceed]:
    """
    Map the EXCEED field to :class:`Exceed`; ``"none"`` means no limit was hit.

    ``match="substring"`` looks for TIME, OUTPUT, MEMORY (in that order, case-insensitive),
    ``match="exact"`` only accepts the literal values lrun writes.
    """
    if value is None:
        raise DecodeError("EXCEED", value)
    if value == "none":
        return None
    upper = value.upper()
    if match == "exact":
        found = _EXACT_EXCEED.get(upper)
        if found is None:
            raise DecodeError("EXCEED", value)
        return found
    if "TIME" in upper:
        return Exceed.TIME
    if "OUTPUT" in upper:
        return Exceed.OUTPUT
    if "MEMORY" in upper:
        return Exceed.MEMORY
    raise DecodeError("EXCEED", value)


def parse_report(text: str, match: str = const.EXCEED_MATCH) -> Report:
    """
    Decode lrun's ``KEY VALUE`` report. Missing or malformed numbers become zero,
    the EXCEED field is mandatory.
    """
    report = _fields(text)
    signaled = _to_int(report.get("SIGNALED")) != 0
    return Report(
        memory=_to_int(report.get("MEMORY")),
        cputime=_to_float(report.get("CPUTIME")),
        exceed=parse_exceed(report.get("EXCEED"), match),
        exitcode=_to_int(report.get("EXITCODE")),
        signal=_to_int(report.get("TERMSIG")) if signaled else None,
    )
