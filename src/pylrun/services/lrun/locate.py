from __future__ import annotations
import functools
import os
import shutil
from typing import Optional

from pylrun.config import const
from pylrun.errors import NotAvailable


@functools.lru_cache(maxsize=None)
def lrun_path() -> Optional[str]:
    """Full path of the lrun executable from PATH, resolved once per process."""
    return shutil.which(const.LRUN_BINARY)


def available(path: Optional[str] = None) -> bool:
    if path is not None:
        return os.path.isfile(path) and os.access(path, os.X_OK)
    return lrun_path() is not None


def ensure_available(path: Optional[str] = None) -> str:
    """Return the executable to run or raise :class:`NotAvailable`."""
    if path is not None:
        if not available(path):
            raise NotAvailable(const.LRUN_BINARY, detail=f"{path} is not executable")
        return path
    found = lrun_path()
    if found is None:
        raise NotAvailable(const.LRUN_BINARY)
    return found
