"""Console logging setup shared by the app and the remote client."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone


class ConsoleFormatter(logging.Formatter):
    """`[LEVEL] timestamp message key=value` lines, traceback appended."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        parts = [f"[{record.levelname:<7}]", timestamp, record.getMessage()]

        for key in ("provider", "source"):
            value = getattr(record, key, None)
            if value is not None:
                parts.append(f"{key}={value}")

        if record.exc_info and record.exc_info[1]:
            parts.append(f"\n{self.formatException(record.exc_info)}")

        return " ".join(parts)


def setup_logging(level: str = "INFO") -> None:
    """Install a stdout handler on the root logger once."""
    root_logger = logging.getLogger()

    if root_logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ConsoleFormatter())
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    logging.getLogger("httpx").setLevel(logging.WARNING)
