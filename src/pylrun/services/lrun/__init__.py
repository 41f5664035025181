from .locate import available, ensure_available, lrun_path
from .report import parse_exceed, parse_report
from .supervisor import LrunSupervisor

__all__ = [
    "available",
    "ensure_available",
    "lrun_path",
    "parse_exceed",
    "parse_report",
    "LrunSupervisor",
]
