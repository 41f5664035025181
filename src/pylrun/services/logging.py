from __future__ import annotations
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone

from pylrun.domain import Event
from pylrun.ports import EventBus


def _json_formatter(record: logging.LogRecord) -> str:
    base = {
        "level": record.levelname,
        "logger": record.name,
        "msg": record.getMessage(),
        "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
    }
    extra = getattr(record, "extra", None)
    if isinstance(extra, dict):
        base.update(extra)
    return json.dumps(base, ensure_ascii=False, default=str)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return _json_formatter(record)


def setup_logging(logs_dir: Optional[str | Path] = None, level: str = "INFO") -> logging.Logger:
    """
    Configure the ``pylrun`` logger:
      - console (stderr)
      - {logs_dir}/pylrun.log with rotation, if logs_dir is given
    Records are JSON, one per line.
    """
    logger = logging.getLogger("pylrun")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    stream_h = logging.StreamHandler()
    stream_h.setFormatter(JsonFormatter())
    stream_h.setLevel(logger.level)
    logger.addHandler(stream_h)

    extra = {}
    if logs_dir is not None:
        logs_path = Path(logs_dir)
        logs_path.mkdir(parents=True, exist_ok=True)
        logfile = logs_path / "pylrun.log"
        file_h = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        file_h.setFormatter(JsonFormatter())
        file_h.setLevel(logger.level)
        logger.addHandler(file_h)
        extra["logfile"] = str(logfile)

    logger.propagate = False
    logger.info("logging.initialized", extra={"extra": extra})
    return logger


def attach_event_logger(bus: EventBus, logger: Optional[logging.Logger] = None) -> None:
    """Log every event published on the bus."""
    base_logger = logger or logging.getLogger("pylrun.events")

    def _handler(ev: Event) -> None:
        base_logger.info(
            "event",
            extra={
                "extra": {
                    "type": ev.type,
                    "source": ev.source,
                    "ts": ev.ts,
                    "payload": ev.payload,
                }
            },
        )

    bus.subscribe("", _handler)
