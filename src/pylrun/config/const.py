# src/pylrun/config/const.py
from __future__ import annotations

# external executable, looked up in PATH
LRUN_BINARY: str = "lrun"

# lrun writes its completion report to this descriptor
REPORT_FD: int = 3

# how many bytes of stdout/stderr are kept, overridable via options["truncate"]
TRUNCATE_OUTPUT_LENGTH: int = 4096

# temp capture files: lrun.<pid>.<random>.out / .err
TEMP_PREFIX: str = "lrun"

# "substring" or "exact" matching of the EXCEED report field
EXCEED_MATCH: str = "substring"
