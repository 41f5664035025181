# src/pylrun/services/settings.py
from __future__ import annotations
from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Optional, Dict

from dotenv import dotenv_values

from pylrun.config import const

_EXCEED_MATCH_MODES = ("substring", "exact")


def _read_env_file(path: Optional[str]) -> Dict[str, str]:
    if not path or not Path(path).exists():
        return {}
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


@dataclass(frozen=True, slots=True)
class Settings:
    lrun_path: Optional[str] = None  # None -> search PATH for const.LRUN_BINARY
    truncate: int = const.TRUNCATE_OUTPUT_LENGTH
    exceed_match: str = const.EXCEED_MATCH
    profiles_file: Optional[Path] = None
    log_level: str = "INFO"

    @staticmethod
    def from_sources(env_file: Optional[str] = ".env") -> "Settings":
        env_file_vars = _read_env_file(env_file)

        def pick_env(key: str, default: Optional[str] = None) -> str:
            return os.environ.get(key) or env_file_vars.get(key) or (default or "")

        truncate_raw = pick_env("PYLRUN_TRUNCATE", str(const.TRUNCATE_OUTPUT_LENGTH))
        try:
            truncate = int(truncate_raw)
        except ValueError:
            raise ValueError(f"PYLRUN_TRUNCATE must be an integer, got {truncate_raw!r}") from None

        exceed_match = pick_env("PYLRUN_EXCEED_MATCH", const.EXCEED_MATCH).lower()
        if exceed_match not in _EXCEED_MATCH_MODES:
            raise ValueError(f"PYLRUN_EXCEED_MATCH must be one of {_EXCEED_MATCH_MODES}, got {exceed_match!r}")

        profiles = pick_env("PYLRUN_PROFILES")
        return Settings(
            lrun_path=pick_env("PYLRUN_LRUN_PATH") or None,
            truncate=truncate,
            exceed_match=exceed_match,
            profiles_file=Path(profiles).expanduser() if profiles else None,
            log_level=pick_env("PYLRUN_LOG_LEVEL", "INFO").upper(),
        )

    def with_overrides(self, **kw) -> "Settings":
        # only known fields, None means "keep"
        safe = {k: v for k, v in kw.items() if k in self.__dataclass_fields__ and v is not None}
        return replace(self, **safe)
