"""
Structured events for YouTrack calls.

Every `YouTrackClient.fetch` ends in exactly one `yt_call` event on the
`youtrack_client.observability` logger:

    event=yt_call tool=workflows method=DELETE endpoint=api/admin/workflows/54-1
    status=200 duration_ms=41

`endpoint` is the descriptor path without its query string; YouTrack search
queries and field lists stay out of the log.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Union

LOGGER_NAME = "youtrack_client.observability"
CALL_EVENT = "yt_call"

# LogRecord attributes; logging refuses "message" and "asctime" in extras.
RESERVED_LOG_KEYS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}


def log_event(event: str, logger: logging.Logger | None = None, **fields: Any) -> None:
    """
    Emit one structured event (logger.info with the fields as extras).
    Reserved LogRecord attributes are dropped to avoid collisions.
    """
    log = logger or logging.getLogger(LOGGER_NAME)
    extra = {"event": event, **_clean_fields(fields)}
    log.info(event, extra=extra)


def endpoint_of(url: str) -> str:
    """
    >>> endpoint_of("api/issues/PRJ-1/timeTracking/workItems?fields=id&%24top=10")
    'api/issues/PRJ-1/timeTracking/workItems'
    """
    return url.split("?", 1)[0]


def log_call(
    *,
    tool: Optional[str],
    method: str,
    url: str,
    status: Union[int, str],
    started: float,
    error_type: Optional[str] = None,
    logger: logging.Logger | None = None,
) -> None:
    """Emit the `yt_call` event for one fetch; `started` is a perf_counter value."""
    log_event(
        CALL_EVENT,
        logger=logger,
        tool=tool,
        method=method,
        endpoint=endpoint_of(url),
        status=status,
        error_type=error_type,
        duration_ms=int((time.perf_counter() - started) * 1000),
    )


__all__ = ["CALL_EVENT", "LOGGER_NAME", "endpoint_of", "log_call", "log_event"]
