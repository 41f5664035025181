# src/pylrun/bootstrap.py
from __future__ import annotations
import functools
from pathlib import Path
from typing import Any, Optional

from pylrun.services.eventbus import LocalEventBus
from pylrun.services.logging import attach_event_logger, setup_logging
from pylrun.services.lrun import LrunSupervisor
from pylrun.services.profiles import resolve_profiles
from pylrun.services.settings import Settings


def build_sandbox(settings: Optional[Settings] = None, *, logs_dir: Optional[str | Path] = None) -> LrunSupervisor:
    """Supervisor with an event bus whose events go to the ``pylrun`` JSON logger."""
    settings = settings or Settings.from_sources()
    bus = LocalEventBus()
    root_logger = setup_logging(logs_dir, level=settings.log_level)
    attach_event_logger(bus, root_logger.getChild("events"))
    return LrunSupervisor(settings=settings, bus=bus)


@functools.lru_cache(maxsize=1)
def default_sandbox() -> LrunSupervisor:
    """Process-wide supervisor configured from the environment (no event bus)."""
    return LrunSupervisor(settings=Settings.from_sources())


@functools.lru_cache(maxsize=1)
def default_profiles() -> dict[str, dict[str, Any]]:
    """Built-in profiles plus the ones from ``PYLRUN_PROFILES``, if set."""
    return resolve_profiles(Settings.from_sources().profiles_file)
