"""Logging Setup: one root handler, JSON lines or plain text.

Invariants:
    - Each JSON line carries the record's own creation time (UTC), level, logger and message
    - Only whitelisted extras are copied out (LOG_EXTRAS); None-valued extras are dropped
    - Calling setup_logging again swaps the handler it installed earlier, other handlers stay

Design Decisions:
    - Dispatcher and error handlers pass error details as `extra=`, so one line
      per failure is machine-readable without a logging framework
    - Handler identified by its own subclass, so test runners' capture handlers survive
"""

import json
import logging
from datetime import datetime, timezone

LOG_EXTRAS = ("error_code", "status_code", "field", "severity", "path")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        line = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        line.update(
            (key, getattr(record, key))
            for key in LOG_EXTRAS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


class _ValidizeHandler(logging.StreamHandler):
    pass


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the validize handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _ValidizeHandler)]:
        root.removeHandler(handler)

    handler = _ValidizeHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
