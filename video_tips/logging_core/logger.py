# video_tips/logging_core/logger.py
"""
Centralized structured logging setup for the tip generator.

Provides a pre-configured logger that emits JSON lines with mandatory fields:
- timestamp (ISO)
- run_id
- stage_name (optional, filled by caller)
- event_type (start/success/failure/escalation/...)
- level
- message
- metadata (dict)

All logs in the system MUST use the logger obtained from get_logger().
Model output and credentials are never logged.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, MutableMapping, Tuple, Union
from uuid import UUID


ROOT_LOGGER_NAME = "video_tips"


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        if hasattr(record, "run_id"):
            log_record["run_id"] = str(record.run_id)

        for field in ("stage_name", "event_type", "metadata"):
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class RunLoggerAdapter(logging.LoggerAdapter):
    """Binds a run_id to every record while keeping per-call extra fields."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


RunLogger = Union[logging.Logger, RunLoggerAdapter]


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach the JSON handler to the package logger (idempotent).

    Called by entry points such as the CLI, never by the library itself.
    Logs go to stderr so CLI output on stdout stays machine-readable.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False

    if not any(isinstance(handler.formatter, JSONFormatter) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(run_id: UUID) -> RunLoggerAdapter:
    """
    Return a logger bound to the given generation run.

    One underlying logger is shared by all runs; the adapter only carries
    the run_id, so nothing accumulates across invocations.
    """
    return RunLoggerAdapter(logging.getLogger(ROOT_LOGGER_NAME), {"run_id": str(run_id)})


def log_event(
    logger: RunLogger,
    level: int,
    message: str,
    *,
    stage_name: str | None = None,
    event_type: str,
    metadata: Dict[str, Any] | None = None,
) -> None:
    """
    Convenience wrapper for structured logging.

    Use this inside stages and the runner for consistency.
    """
    extra: Dict[str, Any] = {"event_type": event_type}
    if stage_name:
        extra["stage_name"] = stage_name
    if metadata:
        extra["metadata"] = metadata

    logger.log(level, message, extra=extra)
